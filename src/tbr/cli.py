#!/usr/bin/env python3
"""CLI for the to-be-read list."""

import argparse
import sys
from pathlib import Path

from common.env import env
from common.logger import error, get_logger, setup_logging
from store.book_store import BookStore
from store.db import get_adapter
from store.errors import StorageError

from .display import format_html, format_plain

logger = get_logger(__name__)


def cmd_add(store: BookStore, args) -> int:
    """Add a book, replacing any book with the same title."""
    store.replace_book(args.name, args.author, args.year)
    return 0


def cmd_remove(store: BookStore, args) -> int:
    """Remove a book. Unknown titles are ignored."""
    store.remove_book(args.name)
    return 0


def cmd_read(store: BookStore, args) -> int:
    """Mark a book as read."""
    store.mark_read(args.name)
    return 0


def cmd_list(store: BookStore, args) -> int:
    """Print unread books, or read ones with --read, one per line."""
    books = store.list_read() if args.read else store.list_unread()
    render = format_html if args.html else format_plain
    for book in books:
        print(render(book))
    return 0


def _non_empty(value: str) -> str:
    if not value.strip():
        raise argparse.ArgumentTypeError("must not be empty")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tbr",
        description="Keep track of books to be read",
    )
    parser.add_argument(
        "--database",
        "-d",
        type=Path,
        default=None,
        help="SQLite database file (default: TBR_DATABASE_PATH or ./data/tbr.db)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log each store operation",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    add_parser = subparsers.add_parser("add", help="Add a book to the list")
    add_parser.add_argument("-n", "--name", type=_non_empty, required=True, help="book title")
    add_parser.add_argument("-a", "--author", type=_non_empty, required=True, help="book author")
    add_parser.add_argument("-y", "--year", type=int, required=True, help="year book was released")
    add_parser.set_defaults(func=cmd_add)

    remove_parser = subparsers.add_parser("remove", help="Remove a book from the list")
    remove_parser.add_argument(
        "-n", "--name", type=_non_empty, required=True, help="title of book to remove"
    )
    remove_parser.set_defaults(func=cmd_remove)

    read_parser = subparsers.add_parser("read", help="Mark a book as read")
    read_parser.add_argument(
        "-n", "--name", type=_non_empty, required=True, help="title of book to mark as read"
    )
    read_parser.set_defaults(func=cmd_read)

    list_parser = subparsers.add_parser("list", help="List books still to be read")
    list_parser.add_argument(
        "--read", action="store_true", help="list finished books instead"
    )
    list_parser.add_argument("--html", action="store_true", help="render as HTML")
    list_parser.set_defaults(func=cmd_list)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the tbr CLI.

    Returns:
        Exit code (0 for success, 1 for store errors). Usage errors exit with
        argparse's status 2 before the store is opened.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(level="DEBUG" if args.verbose else env.log_level())

    try:
        with BookStore(get_adapter(args.database)) as store:
            store.initialize()
            return args.func(store, args)
    except StorageError as e:
        logger.debug("Store operation failed", exc_info=True)
        error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
