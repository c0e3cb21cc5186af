import pytest

from api.models import Incident, Summary


@pytest.fixture
def summary_payload():
    return {
        "total": 10,
        "open": 4,
        "avg_response_minutes": 12.5,
        "by_type": {"theft": 2, "assault": 3, "fraud": 5},
        "by_severity": {"low": 2, "medium": 3, "high": 3, "critical": 2},
    }


@pytest.fixture
def incident_payload():
    return {
        "id": 1,
        "incident_id": "INC-0001",
        "type": "theft",
        "severity": "high",
        "status": "resolved",
        "precinct": "North",
        "response_minutes": 7.5,
    }


@pytest.fixture
def summary(summary_payload):
    return Summary.model_validate(summary_payload)


@pytest.fixture
def incident(incident_payload):
    return Incident.model_validate(incident_payload)
