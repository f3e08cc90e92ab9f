from __future__ import annotations

import argparse
import json
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

import uvicorn
from dotenv import load_dotenv

from setlistcache.api import setlist_envelope
from setlistcache.app import create_service_app, resolve_setlists
from setlistcache.config import configure_logging, get_service_config

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Invalid integer: {value}") from exc
    if parsed < 1:
        raise argparse.ArgumentTypeError(f"Must be at least 1: {value}")
    return parsed


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Read-through cache for Phish.net setlists")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the HTTP service")
    serve.add_argument("--host", type=str, help="Interface to bind (defaults to config)")
    serve.add_argument("--port", type=_positive_int, help="Port to bind (defaults to config)")
    serve.add_argument(
        "--fetch-workers",
        type=_positive_int,
        help="Concurrent upstream fetches per request (defaults to config)",
    )

    resolve = subparsers.add_parser("resolve", help="Resolve show ids once and print JSON")
    resolve.add_argument("show_ids", nargs="+", metavar="SHOWID", help="Show identifiers")
    resolve.add_argument(
        "--fetch-workers",
        type=_positive_int,
        help="Concurrent upstream fetches (defaults to config)",
    )

    return parser.parse_args(list(argv))


def _serve(args: argparse.Namespace) -> None:
    config = get_service_config()
    app = create_service_app(fetch_workers=args.fetch_workers)
    host = args.host or config.host
    port = args.port or config.port
    log.info("Serving setlist cache on %s:%s", host, port)
    uvicorn.run(app, host=host, port=port, log_config=None)


def _resolve(args: argparse.Namespace) -> None:
    report = resolve_setlists(args.show_ids, fetch_workers=args.fetch_workers)
    json.dump(setlist_envelope(report.records), sys.stdout, indent=2)
    sys.stdout.write("\n")


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    configure_logging()
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)

    try:
        if parsed_args.command == "serve":
            _serve(parsed_args)
        elif parsed_args.command == "resolve":
            _resolve(parsed_args)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301
    except Exception:
        log.exception("Fatal error")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
