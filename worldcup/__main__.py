"""Main entry point for the World Cup viewer."""

import argparse
import dataclasses
import logging
import sys

from aiohttp import web

from .api import MockMatchAPI
from .config import Settings
from .utils.logging import log, set_console_logging
from .web import create_app


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="World Cup match viewer")
    parser.add_argument("--port", type=int, help="Listen port (default: $PORT or 8000)")
    parser.add_argument("--host", help="Listen address (default: 0.0.0.0)")
    parser.add_argument("--api-url", help="Base URL of the match API")
    parser.add_argument("--timeout", type=float, help="Upstream timeout in seconds")
    parser.add_argument("--demo", action="store_true", help="Serve bundled demo data")
    parser.add_argument("--quiet", action="store_true", help="Log to file only")
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> Settings:
    """Environment first, then command line overrides"""
    settings = Settings.from_env()
    overrides = {
        "port": args.port,
        "host": args.host,
        "api_url": args.api_url.rstrip("/") if args.api_url else None,
        "timeout_s": args.timeout,
    }
    return dataclasses.replace(
        settings, **{key: value for key, value in overrides.items() if value is not None}
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point"""
    args = parse_args(argv)
    if args.quiet:
        set_console_logging(False)

    try:
        settings = build_settings(args)
    except ValueError as e:
        log(f"❌ Invalid configuration: {e}", logging.CRITICAL)
        return 1

    api = None
    if args.demo:
        log("🏆 Running in DEMO mode with mock data")
        api = MockMatchAPI(timezone=settings.timezone)
    else:
        log(f"🌐 Using match data from {settings.api_url}")

    app = create_app(settings, api=api)

    log(f"🏁 Listening on {settings.host}:{settings.port}")
    try:
        web.run_app(app, host=settings.host, port=settings.port, print=None)
    except OSError as e:
        log(f"❌ Cannot listen on {settings.host}:{settings.port}: {e}", logging.CRITICAL)
        return 1
    except KeyboardInterrupt:
        log("\n👋 Server stopped")
    return 0


if __name__ == "__main__":
    sys.exit(main())
