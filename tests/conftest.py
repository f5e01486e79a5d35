from __future__ import annotations

import json
from pathlib import Path

import pytest


@pytest.fixture(scope="session")
def cases() -> dict:  # type: ignore[type-arg]
    cases_path = Path(__file__).parent / "cases.json"
    with open(cases_path) as f:
        return json.load(f)
