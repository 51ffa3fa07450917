"""Offline stand-in for MatchAPI, backed by the bundled mock data."""

import asyncio

from ..config import DEFAULT_TIMEZONE
from ..errors import FetchError
from ..models.match import Match
from ..models.mock_data import MOCK_MATCHES
from ..rules import decorate_match, format_updated
from ..utils.logging import log


class MockMatchAPI:
    """Serve MOCK_MATCHES through the same interface as MatchAPI"""

    def __init__(self, timezone: str = DEFAULT_TIMEZONE):
        self.timezone: str = timezone

    async def fetch_match(self, match_id: int) -> Match:
        await asyncio.sleep(0)
        for raw in MOCK_MATCHES:
            if raw["id"] == match_id:
                log(f"🏆 Serving mock match {match_id}")
                return decorate_match(
                    Match.model_validate(raw), format_updated(timezone=self.timezone)
                )
        raise FetchError(f"No mock data for match {match_id}", match_id)

    async def fetch_all_matches(self) -> list[Match]:
        await asyncio.sleep(0)
        updated = format_updated(timezone=self.timezone)
        log(f"🏆 Serving {len(MOCK_MATCHES)} mock matches")
        return [decorate_match(Match.model_validate(raw), updated) for raw in MOCK_MATCHES]
