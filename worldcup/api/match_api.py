"""Match API client for worldcupjson.net."""

import asyncio
import logging
from typing import Any, Protocol, runtime_checkable

import aiohttp
import pydantic

from ..config import DEFAULT_API_URL, DEFAULT_TIMEZONE
from ..errors import FetchError
from ..models.match import Match
from ..rules import decorate_match, format_updated
from ..utils.logging import log


@runtime_checkable
class MatchSource(Protocol):
    """Anything the router can fetch matches from"""

    async def fetch_match(self, match_id: int) -> Match: ...

    async def fetch_all_matches(self) -> list[Match]: ...


class _UpstreamUnavailable(FetchError):
    """Transport failure, timeout or 5xx: the only failures worth retrying"""


class MatchAPI:
    """Handle API calls to worldcupjson.net"""

    def __init__(
        self,
        base_url: str = DEFAULT_API_URL,
        timeout: float = 10.0,
        retries: int = 0,
        timezone: str = DEFAULT_TIMEZONE,
    ):
        self.base_url: str = base_url.rstrip("/")
        self.timeout: float = timeout
        self.retries: int = max(0, retries)
        self.timezone: str = timezone

    async def fetch_match(self, match_id: int) -> Match:
        """Fetch a single match and derive its flags"""
        raw = await self._get_json(f"{self.base_url}/{match_id}", match_id)

        try:
            match = Match.model_validate(raw)
        except pydantic.ValidationError as e:
            log(f"❌ Match {match_id} failed validation: {e}", logging.ERROR)
            raise FetchError(f"Invalid match payload: {e}", match_id) from e

        decorate_match(match, format_updated(timezone=self.timezone))
        log(
            f"✅ Match {match_id}: {match.home_team.name} vs {match.away_team.name} "
            f"({match.stage_name})"
        )
        return match

    async def fetch_all_matches(self) -> list[Match]:
        """Fetch every match in tournament order"""
        raw = await self._get_json(self.base_url)

        if not isinstance(raw, list):
            log(f"❌ Expected a list of matches, got {type(raw).__name__}", logging.ERROR)
            raise FetchError("Match list payload is not a list")

        try:
            matches = [Match.model_validate(item) for item in raw]
        except pydantic.ValidationError as e:
            log(f"❌ Match list failed validation: {e}", logging.ERROR)
            raise FetchError(f"Invalid match list payload: {e}") from e

        updated = format_updated(timezone=self.timezone)
        for match in matches:
            decorate_match(match, updated)
        log(f"📊 Found {len(matches)} matches")
        return matches

    async def _get_json(self, url: str, match_id: int | None = None) -> Any:
        attempts = self.retries + 1
        for attempt in range(1, attempts + 1):
            try:
                return await self._get_json_once(url, match_id)
            except _UpstreamUnavailable as e:
                if attempt == attempts:
                    raise
                log(
                    f"🔄 Attempt {attempt}/{attempts} for {url} failed: {e}",
                    logging.WARNING,
                )

    async def _get_json_once(self, url: str, match_id: int | None) -> Any:
        try:
            async with aiohttp.ClientSession() as session:
                log(f"🔍 Fetching {url}")
                async with session.get(
                    url,
                    timeout=aiohttp.ClientTimeout(total=self.timeout),
                ) as response:
                    log(f"📡 API Response Status: {response.status}")

                    if response.status >= 500:
                        raise _UpstreamUnavailable(
                            f"HTTP {response.status} from upstream", match_id
                        )
                    if response.status != 200:
                        raise FetchError(
                            f"HTTP {response.status} from upstream", match_id
                        )

                    try:
                        # worldcupjson.net doesn't always label its JSON
                        return await response.json(content_type=None)
                    except ValueError as e:
                        raise FetchError(f"Malformed JSON body: {e}", match_id) from e

        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise _UpstreamUnavailable(
                f"{type(e).__name__}: {e}", match_id
            ) from e
