"""HTML rendering: per-request view models bound to Jinja2 templates."""

import jinja2
from pydantic import BaseModel

from ..errors import RenderError
from ..models.match import Match
from ..rules import TEMPLATE_HELPERS, stage_sections

MATCH_TEMPLATE = "match.html"
MATCH_LIST_TEMPLATE = "matches.html"


class MatchView(BaseModel):
    """Everything the detail template needs for one request"""

    match: Match
    suppress_spoilers: bool = False
    flags_prefix: str = "/flags"


class MatchListView(BaseModel):
    """Everything the list template needs for one request"""

    matches: list[Match]
    suppress_spoilers: bool = False
    flags_prefix: str = "/flags"

    @property
    def sections(self) -> list[tuple[str, list[Match]]]:
        return stage_sections(self.matches)


def create_environment() -> jinja2.Environment:
    """Build the template environment once; it's shared read-only by all requests"""
    env = jinja2.Environment(
        loader=jinja2.PackageLoader("worldcup.web", "templates"),
        autoescape=jinja2.select_autoescape(["html"]),
        undefined=jinja2.StrictUndefined,
    )
    env.globals.update(TEMPLATE_HELPERS)
    return env


class Renderer:
    """Render view models to HTML"""

    def __init__(self, env: jinja2.Environment | None = None):
        self.env: jinja2.Environment = env or create_environment()

    def render_match(self, view: MatchView) -> str:
        return self._render(MATCH_TEMPLATE, view=view, match=view.match)

    def render_match_list(self, view: MatchListView) -> str:
        return self._render(MATCH_LIST_TEMPLATE, view=view, sections=view.sections)

    def _render(self, template_name: str, **context) -> str:
        try:
            template = self.env.get_template(template_name)
            return template.render(**context)
        except Exception as e:
            raise RenderError(
                f"{type(e).__name__} in {template_name}: {e}", template_name
            ) from e
