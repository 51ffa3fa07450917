"""Mock match data for testing and demo purposes."""

from typing import Any, Dict, List

# Shaped like the worldcupjson.net /matches response, knockout stage only
MOCK_MATCHES: List[Dict[str, Any]] = [
    {
        "id": 49,
        "stage_name": "Round of 16",
        "time": "full-time",
        "home_team": {"country": "NED", "name": "Netherlands", "goals": 3},
        "away_team": {"country": "USA", "name": "United States", "goals": 1},
    },
    {
        "id": 50,
        "stage_name": "Round of 16",
        "time": "full-time",
        "home_team": {"country": "ARG", "name": "Argentina", "goals": 2},
        "away_team": {"country": "AUS", "name": "Australia", "goals": 1},
    },
    {
        "id": 53,
        "stage_name": "Round of 16",
        "time": "full-time",
        "home_team": {"country": "JPN", "name": "Japan", "goals": 1},
        "away_team": {"country": "CRO", "name": "Croatia", "goals": 1},
    },
    {
        "id": 55,
        "stage_name": "Round of 16",
        "time": "full-time",
        "home_team": {"country": "MAR", "name": "Morocco", "goals": 0},
        "away_team": {"country": "ESP", "name": "Spain", "goals": 0},
    },
    {
        "id": 58,
        "stage_name": "Quarter-final",
        "time": "full-time",
        "home_team": {"country": "NED", "name": "Netherlands", "goals": 2},
        "away_team": {"country": "ARG", "name": "Argentina", "goals": 2},
    },
    {
        "id": 60,
        "stage_name": "Quarter-final",
        "time": "67'",
        "home_team": {"country": "ENG", "name": "England", "goals": 1},
        "away_team": {"country": "FRA", "name": "France", "goals": 1},
    },
    {
        "id": 63,
        "stage_name": "Play-off for third place",
        "time": None,
        "home_team": {"country": "TBD", "name": "To Be Determined", "goals": None},
        "away_team": {"country": "TBD", "name": "To Be Determined", "goals": None},
    },
    {
        "id": 64,
        "stage_name": "Final",
        "time": None,
        "home_team": {"country": "TBD", "name": "To Be Determined", "goals": None},
        "away_team": {"country": "TBD", "name": "To Be Determined", "goals": None},
    },
]
