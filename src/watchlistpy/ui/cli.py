from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from watchlistpy.app import list_watchlist, search_watchlist, set_watch_status, sync_titles
from watchlistpy.config import ConfigurationError, configure_logging
from watchlistpy.domain.errors import AmbiguousMatchError, WatchlistError
from watchlistpy.domain.model import WatchStatus

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from watchlistpy.domain.model import Record

log = logging.getLogger(__name__)

_STATUS_CHOICES: dict[str, WatchStatus] = {
    "to-watch": WatchStatus.TO_WATCH,
    "watching": WatchStatus.WATCHING,
    "watched": WatchStatus.WATCHED,
}


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Keep a Notion watchlist in sync with TMDB")
    subparsers = parser.add_subparsers(dest="command", required=True)

    sync = subparsers.add_parser("sync", help="Add or refresh titles in the watchlist")
    sync.add_argument("titles", nargs="+", help="Free-text movie or TV show titles")

    search = subparsers.add_parser("search", help="Find watchlist entries by title")
    search.add_argument("query", help="Substring of the title to look for")

    status = subparsers.add_parser("status", help="Change the watch status of an entry")
    status.add_argument("title", help="Exact title or a unique substring of it")
    status.add_argument("status", choices=sorted(_STATUS_CHOICES), help="New watch status")

    listing = subparsers.add_parser("list", help="List watchlist entries by status")
    listing.add_argument(
        "--status",
        choices=sorted(_STATUS_CHOICES),
        default="to-watch",
        help="Status to list (default: %(default)s)",
    )

    return parser.parse_args(list(argv))


def _describe(record: Record) -> str:
    details = [str(part) for part in (record.format, record.year, record.platform) if part]
    suffix = f" ({', '.join(details)})" if details else ""
    return f"{record.title}{suffix}"


def _run_sync(titles: Sequence[str]) -> int:
    reports = sync_titles(titles)
    failed = 0
    for report in reports:
        if report.result is not None:
            log.info(
                "%s: %s as %s",
                report.title,
                report.result.outcome,
                _describe(report.result.record),
            )
        else:
            failed += 1
            log.error("%s: %s", report.title, report.error)
    return 1 if failed else 0


def _log_records(records: Sequence[Record], empty_message: str) -> None:
    if not records:
        log.info(empty_message)
        return
    for record in records:
        log.info("- %s", _describe(record))


def _dispatch(args: argparse.Namespace) -> int:
    if args.command == "sync":
        return _run_sync(args.titles)
    if args.command == "search":
        records = search_watchlist(args.query)
        _log_records(records, f'No watchlist entries match "{args.query}"')
        return 0
    if args.command == "status":
        record = set_watch_status(args.title, _STATUS_CHOICES[args.status])
        log.info("Updated %s to %s", record.title, args.status)
        return 0
    if args.command == "list":
        records = list_watchlist(_STATUS_CHOICES[args.status])
        _log_records(records, f"Nothing in {args.status}")
        return 0
    raise ValueError(f"Unsupported command: {args.command}")


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    load_dotenv()
    configure_logging()
    parsed_args = _parse_args(list(argv) if argv is not None else sys.argv[1:])

    try:
        exit_code = _dispatch(parsed_args)
    except ConfigurationError:
        log.exception("Configuration error")
        sys.exit(2)
    except AmbiguousMatchError as exc:
        log.error("%s; be more specific:", exc)  # noqa: TRY400
        for candidate in exc.candidates:
            log.error("- %s", _describe(candidate))  # noqa: TRY400
        sys.exit(1)
    except WatchlistError as exc:
        log.error("%s", exc)  # noqa: TRY400
        sys.exit(1)

    if exit_code:
        sys.exit(exit_code)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
