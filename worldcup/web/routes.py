"""HTTP routing: map request paths to views, static flags, or 404."""

import logging
import re
from pathlib import Path

from aiohttp import web

from ..api.match_api import MatchAPI, MatchSource
from ..config import FIRST_KNOCKOUT_MATCH, LAST_KNOCKOUT_MATCH, Settings
from ..errors import FetchError, RenderError, ValidationError
from ..rules import is_valid_match_id, spoilers_suppressed
from ..utils.logging import log
from .views import MatchListView, MatchView, Renderer

FLAGS_DIR = Path(__file__).parent / "flags"

SETTINGS_KEY = web.AppKey("settings", Settings)
API_KEY = web.AppKey("api", MatchSource)
RENDERER_KEY = web.AppKey("renderer", Renderer)

# Plain base-10, ASCII digits only: no whitespace, underscores or trailing junk
_MATCH_ID_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_match_id(raw: str) -> int:
    """Turn a path segment into a knockout match ID or raise ValidationError"""
    if not _MATCH_ID_PATTERN.fullmatch(raw):
        raise ValidationError(f"not a match number: {raw!r}", raw)

    try:
        match_id = int(raw)
    except ValueError as e:
        # Too many digits for int()
        raise ValidationError(f"not a match number: {raw[:20]!r}...", raw) from e

    if not is_valid_match_id(match_id):
        raise ValidationError(
            f"match {match_id} outside {FIRST_KNOCKOUT_MATCH}-{LAST_KNOCKOUT_MATCH}",
            raw,
        )
    return match_id


def _html(body: str) -> web.Response:
    return web.Response(text=body, content_type="text/html")


async def handle_index(request: web.Request) -> web.Response:
    """List every match, grouped by stage"""
    app = request.app
    settings = app[SETTINGS_KEY]

    try:
        matches = await app[API_KEY].fetch_all_matches()
    except FetchError as e:
        log(f"❌ Error fetching match list: {e}", logging.ERROR)
        raise web.HTTPInternalServerError()

    view = MatchListView(
        matches=matches,
        suppress_spoilers=spoilers_suppressed(request.query),
        flags_prefix=settings.flags_prefix,
    )
    try:
        return _html(app[RENDERER_KEY].render_match_list(view))
    except RenderError as e:
        log(f"❌ Error executing template: {e}", logging.ERROR)
        raise web.HTTPInternalServerError()


async def handle_match(request: web.Request) -> web.Response:
    """Show one knockout match"""
    app = request.app
    settings = app[SETTINGS_KEY]
    path = request.match_info["path"]

    try:
        match_id = parse_match_id(path)
    except ValidationError as e:
        log(f"⚠️  Bad URL request {request.path!r}: {e}", logging.WARNING)
        raise web.HTTPNotFound()

    try:
        match = await app[API_KEY].fetch_match(match_id)
    except FetchError as e:
        log(f"❌ Error fetching match {match_id}: {e}", logging.ERROR)
        raise web.HTTPInternalServerError()

    view = MatchView(
        match=match,
        suppress_spoilers=spoilers_suppressed(request.query),
        flags_prefix=settings.flags_prefix,
    )
    try:
        return _html(app[RENDERER_KEY].render_match(view))
    except RenderError as e:
        log(f"❌ Error executing template for match {match_id}: {e}", logging.ERROR)
        raise web.HTTPInternalServerError()


async def handle_flag(request: web.Request) -> web.FileResponse:
    """Serve a bundled flag image; anything but an existing PNG is a 404"""
    name = request.match_info["name"]
    flag = FLAGS_DIR / name
    if (
        not name.endswith(".png")
        or flag.resolve().parent != FLAGS_DIR.resolve()
        or not flag.is_file()
    ):
        log(f"⚠️  No flag {name!r}", logging.WARNING)
        raise web.HTTPNotFound()
    return web.FileResponse(flag)


async def handle_favicon(request: web.Request) -> web.Response:
    # Silently ignore favicons.
    return web.Response()


async def handle_not_found(request: web.Request) -> web.Response:
    log(f"⚠️  Rejected {request.method} {request.path!r}", logging.WARNING)
    raise web.HTTPNotFound()


def create_app(
    settings: Settings | None = None,
    api: MatchSource | None = None,
    renderer: Renderer | None = None,
) -> web.Application:
    """Build the web application; everything stored on it is read-only afterwards"""
    settings = settings or Settings()
    app = web.Application()
    app[SETTINGS_KEY] = settings
    app[API_KEY] = api or MatchAPI(
        base_url=settings.api_url,
        timeout=settings.timeout_s,
        retries=settings.retries,
        timezone=settings.timezone,
    )
    app[RENDERER_KEY] = renderer or Renderer()

    # Order matters: the catch-all must come last
    app.router.add_get(f"{settings.flags_prefix}/{{name}}", handle_flag)
    app.router.add_get("/favicon.ico", handle_favicon)
    app.router.add_get("/", handle_index)
    app.router.add_get("/{path:.*}", handle_match)
    app.router.add_route("*", "/{path:.*}", handle_not_found)
    return app
