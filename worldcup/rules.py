"""Presentation rules: pure functions that derive what the views show."""

from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import Callable, Container, Iterable, Mapping
from zoneinfo import ZoneInfo

from .config import (
    DEFAULT_TIMEZONE,
    FIRST_KNOCKOUT_MATCH,
    FLAG_AWAY_TBD,
    FLAG_EXCEPTIONS,
    FLAG_HOME_TBD,
    FULL_TIME,
    LAST_KNOCKOUT_MATCH,
    SPOILER_QUERY_KEY,
    STAGE_FINAL,
    STAGE_FIRST,
    STAGE_ORDER,
    STAGE_QUARTER_FINAL,
    STAGE_ROUND_OF_SIXTEEN,
    STAGE_SEMI_FINAL,
    STAGE_THIRD_PLACE,
    TBD_NAME,
    TIMESTAMP_FORMAT,
)
from .models.match import Country, Match


class Side(str, Enum):
    """Which slot of a match a country occupies"""

    HOME = "home"
    AWAY = "away"


def flag_code(country: Country, side: Side) -> str:
    """Return the flag asset code for a country in the given slot.

    Undetermined slots get a sentinel flag regardless of the identifier:
    FIFA for the home slot, the host nation for the away slot.
    """
    if country.name == TBD_NAME:
        return FLAG_HOME_TBD if side is Side.HOME else FLAG_AWAY_TBD
    return FLAG_EXCEPTIONS.get(country.country, country.country)


def format_updated(now: datetime | None = None, timezone: str = DEFAULT_TIMEZONE) -> str:
    zone = ZoneInfo(timezone)
    if now is None:
        now = datetime.now(zone)
    return now.astimezone(zone).strftime(TIMESTAMP_FORMAT)


def decorate_match(match: Match, updated: str) -> Match:
    """Derive both flags and stamp the fetch time. Mutates and returns match."""
    match.home_team.flag = flag_code(match.home_team, Side.HOME)
    match.away_team.flag = flag_code(match.away_team, Side.AWAY)
    match.updated = updated
    return match


def is_tbd(country: Country) -> str:
    """Show the code instead of an unresolved name"""
    if country.name == TBD_NAME:
        return country.country
    return country.name


def is_boring_match(match: Match) -> bool:
    """A finished goalless match"""
    return match.time == FULL_TIME and match.total_goals == 0


def _stage_predicate(stage: str) -> Callable[[Match], bool]:
    def predicate(match: Match) -> bool:
        return match.stage_name == stage

    return predicate


is_first_stage = _stage_predicate(STAGE_FIRST)
is_round_of_sixteen = _stage_predicate(STAGE_ROUND_OF_SIXTEEN)
is_quarter_final = _stage_predicate(STAGE_QUARTER_FINAL)
is_semi_final = _stage_predicate(STAGE_SEMI_FINAL)
is_third_place = _stage_predicate(STAGE_THIRD_PLACE)
is_final = _stage_predicate(STAGE_FINAL)


def is_valid_match_id(match_id: int) -> bool:
    return FIRST_KNOCKOUT_MATCH <= match_id <= LAST_KNOCKOUT_MATCH


def is_addressable(match: Match) -> bool:
    """Only knockout matches get their own page"""
    return is_valid_match_id(match.id)


def spoilers_suppressed(query: Container[str]) -> bool:
    """Presence of the spoiler key is enough, its value is ignored"""
    return SPOILER_QUERY_KEY in query


def stage_sections(matches: Iterable[Match]) -> list[tuple[str, list[Match]]]:
    """Group matches by stage in bracket order, keeping upstream order within a stage"""
    grouped: dict[str, list[Match]] = {}
    for match in matches:
        grouped.setdefault(match.stage_name, []).append(match)

    ordered = [stage for stage in STAGE_ORDER if stage in grouped]
    # Labels we don't know about go last, in the order first seen
    ordered += [stage for stage in grouped if stage not in STAGE_ORDER]
    return [(stage, grouped[stage]) for stage in ordered]


# Exposed to templates
TEMPLATE_HELPERS: Mapping[str, Callable] = MappingProxyType(
    {
        "is_tbd": is_tbd,
        "is_boring_match": is_boring_match,
        "is_first_stage": is_first_stage,
        "is_round_of_sixteen": is_round_of_sixteen,
        "is_quarter_final": is_quarter_final,
        "is_semi_final": is_semi_final,
        "is_third_place": is_third_place,
        "is_final": is_final,
        "is_addressable": is_addressable,
    }
)
