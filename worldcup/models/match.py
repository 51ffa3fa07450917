"""Match data model as returned by worldcupjson.net."""

from typing import Any

from pydantic import BaseModel, field_validator

from ..config import STAGE_FIRST


class UpstreamModel(BaseModel):
    """Base for models parsed from worldcupjson.net"""

    # Upstream sends far more than we render
    model_config = {"extra": "ignore"}


class Country(UpstreamModel):
    """One side of a match"""

    country: str
    name: str
    goals: int = 0

    # Derived by the presentation rules, never trusted from upstream
    flag: str = ""

    @field_validator("goals", mode="before")
    @classmethod
    def _goals_default(cls, value: Any) -> Any:
        # Matches that haven't kicked off report null goals
        return 0 if value is None else value

    @field_validator("goals")
    @classmethod
    def _goals_non_negative(cls, value: int) -> int:
        if value < 0:
            raise ValueError("goals must be non-negative")
        return value


class Match(UpstreamModel):
    """A single tournament match"""

    id: int
    stage_name: str = STAGE_FIRST
    home_team: Country
    away_team: Country

    # Free text status: "full-time", "half-time", "67'", or null before kick-off
    time: str | None = None

    # Server-side fetch timestamp, stamped by the client
    updated: str = ""

    @field_validator("stage_name", mode="before")
    @classmethod
    def _stage_default(cls, value: Any) -> Any:
        return STAGE_FIRST if value is None else value

    @property
    def total_goals(self) -> int:
        return self.home_team.goals + self.away_team.goals
