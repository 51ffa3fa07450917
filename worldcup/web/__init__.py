"""Web front-end: routing and rendering."""

from .routes import create_app, parse_match_id
from .views import MatchListView, MatchView, Renderer

__all__ = ["create_app", "parse_match_id", "MatchListView", "MatchView", "Renderer"]
