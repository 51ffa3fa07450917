"""Error types raised while serving a single request."""


class WorldCupError(Exception):
    """Base class for all request-scoped failures"""


class FetchError(WorldCupError):
    """Upstream unreachable, timed out, or returned an unusable body"""

    def __init__(self, message: str, match_id: int | None = None):
        super().__init__(message)
        self.match_id: int | None = match_id


class ValidationError(WorldCupError):
    """Request path outside the accepted domain"""

    def __init__(self, message: str, path: str = ""):
        super().__init__(message)
        self.path: str = path


class RenderError(WorldCupError):
    """Template could not be loaded or executed"""

    def __init__(self, message: str, template: str = ""):
        super().__init__(message)
        self.template: str = template
