"""
Command-line interface for the kiosk feed.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import logging
import sys

from kiosk_board import __version__
from kiosk_board.aggregator import build_response
from kiosk_board.config import get_settings
from kiosk_board.slots import local_now


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="kiosk-board",
        description="Weather forecast and school meal feed for a slideshow kiosk",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("info", help="Show application info")

    # 'fetch' command - one uncached aggregation, printed as JSON
    subparsers.add_parser("fetch", help="Fetch weather and meal data once and print it")

    # 'serve' command - run the web app
    serve_parser = subparsers.add_parser("serve", help="Serve the kiosk API and front end")
    serve_parser.add_argument(
        "--host",
        type=str,
        default=None,
        help="Interface to bind (default: host from settings)",
    )
    serve_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to serve on (default: port from settings)",
    )

    return parser


def configure_logging(debug: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"Timezone: {settings.timezone}")
    print(f"Weather key set: {bool(settings.weather_service_key)}")
    print(f"NEIS key set: {bool(settings.neis_api_key)}")
    return 0


def cmd_fetch(_args: argparse.Namespace) -> int:
    """Handle the 'fetch' command: build one document and print it."""
    settings = get_settings()
    response = build_response(local_now(settings.timezone), settings)
    print(response.model_dump_json(by_alias=True, indent=2))
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Handle the 'serve' command: run the FastAPI app with uvicorn."""
    import uvicorn

    from kiosk_board.app import create_app

    settings = get_settings()
    host = args.host if args.host is not None else settings.host
    port = args.port if args.port is not None else settings.port

    print(f"Serving kiosk on http://{host}:{port}/ (Ctrl+C to stop)")
    uvicorn.run(create_app(settings), host=host, port=port)
    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()
    configure_logging(args.debug or get_settings().debug)

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "info": cmd_info,
        "fetch": cmd_fetch,
        "serve": cmd_serve,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
