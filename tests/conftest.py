"""Shared fixtures for worldcup tests"""

import copy
from typing import Any

import pytest

from worldcup.utils.logging import set_console_logging

QUARTER_FINAL_58: dict[str, Any] = {
    "id": 58,
    "venue": "Lusail Stadium",
    "stage_name": "Quarter-final",
    "status": "completed",
    "time": "full-time",
    "home_team": {"country": "NED", "name": "Netherlands", "goals": 2, "penalties": 3},
    "away_team": {"country": "ARG", "name": "Argentina", "goals": 2, "penalties": 4},
}


@pytest.fixture(autouse=True)
def quiet_console():
    """Keep test output clean; the debug log file still gets everything"""
    set_console_logging(False)
    yield
    set_console_logging(True)


@pytest.fixture
def match_payload() -> dict[str, Any]:
    return copy.deepcopy(QUARTER_FINAL_58)


@pytest.fixture
def tbd_payload() -> dict[str, Any]:
    return {
        "id": 64,
        "stage_name": "Final",
        "time": None,
        "home_team": {"country": "TBD", "name": "To Be Determined", "goals": None},
        "away_team": {"country": "TBD", "name": "To Be Determined", "goals": None},
    }


@pytest.fixture
def list_payload(match_payload, tbd_payload) -> list[dict[str, Any]]:
    group = {
        "id": 1,
        "stage_name": "First stage",
        "time": "full-time",
        "home_team": {"country": "QAT", "name": "Qatar", "goals": 0},
        "away_team": {"country": "ECU", "name": "Ecuador", "goals": 2},
    }
    round_of_16 = {
        "id": 52,
        "stage_name": "Round of 16",
        "time": "full-time",
        "home_team": {"country": "ENG", "name": "England", "goals": 3},
        "away_team": {"country": "SEN", "name": "Senegal", "goals": 0},
    }
    # Deliberately out of bracket order
    return [tbd_payload, match_payload, group, round_of_16]
