"""Shared fixtures for the test suite."""

from __future__ import annotations

import json
from pathlib import Path

import pytest


@pytest.fixture()
def unverified_raw() -> dict:
    """Raw record that parses to an UnverifiedUser."""
    return {
        "firstName": "Bob",
        "middleNameInitial": "B",
        "lastName": "Barker",
        "emailAddress": "test@yes.com",
        "remainingReadings": 3,
    }


@pytest.fixture()
def verified_raw() -> dict:
    """Raw record that parses to a VerifiedUser (no middle initial)."""
    return {
        "firstName": "Bob",
        "lastName": "Barker",
        "emailAddress": "test@yes.com",
        "verifiedDate": 1615339130200,
    }


@pytest.fixture()
def mixed_records(unverified_raw: dict, verified_raw: dict) -> list:
    """A batch with a mix of valid and invalid records."""
    return [
        unverified_raw,                                              # good
        42,                                                          # not a mapping
        {**unverified_raw, "firstName": "", "emailAddress": "nope"}, # two bad fields
        verified_raw,                                                # good
        {**unverified_raw, "remainingReadings": 0},                  # bad quota
    ]


@pytest.fixture()
def tmp_records_file(tmp_path: Path, unverified_raw: dict, verified_raw: dict) -> Path:
    """Write two valid records to a temp JSON file and return its path."""
    path = tmp_path / "users.json"
    path.write_text(json.dumps([unverified_raw, verified_raw]))
    return path
