"""World Cup viewer - knockout-stage matches rendered as HTML, straight from worldcupjson.net."""

from .api import MatchAPI, MockMatchAPI
from .errors import FetchError, RenderError, ValidationError
from .models import Country, Match
from .web import create_app

__version__ = "1.0.0"
__all__ = [
    "MatchAPI",
    "MockMatchAPI",
    "Country",
    "Match",
    "FetchError",
    "RenderError",
    "ValidationError",
    "create_app",
]
