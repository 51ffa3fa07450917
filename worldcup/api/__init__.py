"""API module for match data fetching."""

from .match_api import MatchAPI, MatchSource
from .mock_api import MockMatchAPI

__all__ = ["MatchAPI", "MatchSource", "MockMatchAPI"]
