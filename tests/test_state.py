from api.models import Summary
from dashboard.state import (
    INITIAL_STATE,
    RefreshFailed,
    RefreshStarted,
    RefreshSucceeded,
    ViewState,
    reduce,
)


def _ok(generation, total):
    return RefreshSucceeded(generation, Summary(total=total), ())


class TestReduce:
    def test_initial_state(self):
        assert INITIAL_STATE == ViewState(summary=None, incidents=(), loading=True)

    def test_started_sets_loading(self):
        state = reduce(ViewState(loading=False), RefreshStarted(1))
        assert state.loading is True
        assert state.generation == 1

    def test_success_replaces_snapshot(self, incident):
        state = reduce(INITIAL_STATE, RefreshStarted(1))
        new = reduce(state, RefreshSucceeded(1, Summary(total=10), [incident]))
        assert new.summary.total == 10
        assert new.incidents == (incident,)
        assert new.loading is False
        assert state.summary is None  # input untouched

    def test_failure_keeps_previous_data(self):
        state = reduce(reduce(INITIAL_STATE, RefreshStarted(1)), _ok(1, 10))
        state = reduce(state, RefreshStarted(2))
        state = reduce(state, RefreshFailed(2, "boom"))
        assert state.summary.total == 10
        assert state.loading is False

    def test_last_completion_wins_by_default(self):
        state = reduce(INITIAL_STATE, RefreshStarted(1))
        state = reduce(state, RefreshStarted(2))
        state = reduce(state, _ok(2, 20))
        state = reduce(state, _ok(1, 10))
        assert state.summary.total == 10

    def test_discard_stale_drops_older_completion(self):
        state = reduce(INITIAL_STATE, RefreshStarted(1))
        state = reduce(state, RefreshStarted(2))
        state = reduce(state, _ok(2, 20), discard_stale=True)
        state = reduce(state, _ok(1, 10), discard_stale=True)
        assert state.summary.total == 20
        assert state.loading is False

    def test_discard_stale_keeps_loading_until_latest(self):
        state = reduce(INITIAL_STATE, RefreshStarted(1))
        state = reduce(state, RefreshStarted(2))
        state = reduce(state, RefreshFailed(1, "late"), discard_stale=True)
        assert state.loading is True
