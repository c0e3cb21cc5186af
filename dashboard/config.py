"""Dashboard settings, read from the environment (and an optional .env)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from api.client import DEFAULT_BACKEND_URL

repo_root = Path(__file__).resolve().parent.parent


@dataclass(frozen=True)
class Settings:
    backend_url: str = DEFAULT_BACKEND_URL

    @classmethod
    def from_env(cls) -> Settings:
        load_dotenv(repo_root / ".env", override=False)
        return cls(backend_url=os.getenv("BACKEND_URL") or DEFAULT_BACKEND_URL)
