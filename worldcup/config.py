"""Configuration for the World Cup viewer.

Static tables are built once at import and exposed read-only, so every
request handler can share them without locking.
"""

import os
from dataclasses import dataclass
from types import MappingProxyType
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

# Tournament stages as labelled by worldcupjson.net
STAGE_FIRST = "First stage"
STAGE_ROUND_OF_SIXTEEN = "Round of 16"
STAGE_QUARTER_FINAL = "Quarter-final"
STAGE_SEMI_FINAL = "Semi-final"
STAGE_THIRD_PLACE = "Play-off for third place"
STAGE_FINAL = "Final"

# Bracket order, used to lay out the list view
STAGE_ORDER: tuple[str, ...] = (
    STAGE_FIRST,
    STAGE_ROUND_OF_SIXTEEN,
    STAGE_QUARTER_FINAL,
    STAGE_SEMI_FINAL,
    STAGE_THIRD_PLACE,
    STAGE_FINAL,
)

# Match IDs used upstream for the knockout stage:
#   Round of 16: 49-56, Quarter-final: 57-60, Semi-final: 61-62,
#   Third place: 63, Final: 64
FIRST_KNOCKOUT_MATCH = 49
LAST_KNOCKOUT_MATCH = 64

TBD_NAME = "To Be Determined"

# Flags shown for undetermined bracket slots
FLAG_HOME_TBD = "FIFA"
FLAG_AWAY_TBD = "Qatar"

# FIFA and ISO don't agree on 3-letter codes; or whether they should be 3-letter.
FLAG_EXCEPTIONS = MappingProxyType(
    {
        "CRO": "HRV",
        "ENG": "GB-ENG",
        "NED": "NLD",
        "POR": "PRT",
        "SUI": "CHE",
    }
)

# Presence of this query key hides scores and outcomes
SPOILER_QUERY_KEY = "boring"

FULL_TIME = "full-time"

DEFAULT_PORT = 8000
DEFAULT_API_URL = "https://worldcupjson.net/matches"
DEFAULT_TIMEZONE = "Asia/Qatar"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S %Z"


def port_from_env(value: str | None) -> int:
    """Read the listen port, falling back to the default when unset or empty"""
    if not value:
        return DEFAULT_PORT
    return int(value)


@dataclass(frozen=True)
class Settings:
    """Immutable settings, read once at start-up."""

    port: int = DEFAULT_PORT
    host: str = "0.0.0.0"
    api_url: str = DEFAULT_API_URL
    timeout_s: float = 10.0
    retries: int = 0
    timezone: str = DEFAULT_TIMEZONE
    flags_prefix: str = "/flags"

    def __post_init__(self):
        # Fail at start-up rather than on every request
        try:
            ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError, OSError) as e:
            raise ValueError(f"unknown time zone {self.timezone!r}") from e

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            port=port_from_env(os.getenv("PORT")),
            api_url=(os.getenv("WORLDCUP_API_URL") or DEFAULT_API_URL).rstrip("/"),
            timeout_s=float(os.getenv("WORLDCUP_TIMEOUT") or 10.0),
            retries=int(os.getenv("WORLDCUP_RETRIES") or 0),
            timezone=os.getenv("WORLDCUP_TIMEZONE") or DEFAULT_TIMEZONE,
        )
