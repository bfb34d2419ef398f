"""
addressbook CLI - add, delete, search and list entries in a text address book.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from loguru import logger

from addressbook import __version__
from addressbook.config.manager import ConfigManager
from addressbook.contacts.errors import AddressBookError, InvalidArgumentError, StoreIOError
from addressbook.contacts.models import ENTRY_FIELDS, AddressBookEntry, EntryBuilder
from addressbook.contacts.store import AddressBookStore

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_INVALID = 2
EXIT_IO = 3

DEFAULT_CONFIG_PATH = "addressbook.yaml"


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """Configure logging."""
    # Remove default handler
    logger.remove()

    # Console handler
    logger.add(
        sys.stderr,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
        level=level,
        colorize=True,
    )

    # File handler
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
            level="DEBUG",
            rotation="10 MB",
            retention="7 days",
            compression="zip",
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="addressbook",
        description="Manage a plain-text address book",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to configuration file, created with defaults if missing (default: read addressbook.yaml if present)",
    )
    parser.add_argument(
        "--file",
        type=str,
        default=None,
        help="Address book file (overrides store.path)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"addressbook {__version__}",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    add = sub.add_parser("add", help="Add an entry")
    add.add_argument("name")
    add.add_argument("--postal-address", default="")
    add.add_argument("--phone", default="", help="e.g. 1-234-567-8901 or (234) 567 8901")
    add.add_argument("--email", default="")
    add.add_argument("--note", default="")

    delete = sub.add_parser("delete", help="Delete the first entry with the given name")
    delete.add_argument("name")

    search = sub.add_parser("search", help="Find the first entry whose field equals a value")
    search.add_argument("field", choices=ENTRY_FIELDS)
    search.add_argument("value")
    search.add_argument("--json", action="store_true", help="Print as JSON")

    lst = sub.add_parser("list", help="List all entries")
    lst.add_argument("--json", action="store_true", help="Print as JSON")

    return parser


def _format_entry(entry: AddressBookEntry) -> str:
    width = max(len(f) for f in ENTRY_FIELDS)
    return "\n".join(f"{field:<{width}}  {value}" for field, value in entry.to_dict().items())


def _cmd_add(store: AddressBookStore, args: argparse.Namespace) -> int:
    entry = (
        EntryBuilder(args.name)
        .postal_address(args.postal_address)
        .phone_number(args.phone)
        .email_address(args.email)
        .note(args.note)
        .build()
    )
    book = store.load()
    book.add_entry(entry)
    store.save(book)
    print(f"Added {entry.name}")
    return EXIT_OK


def _cmd_delete(store: AddressBookStore, args: argparse.Namespace) -> int:
    book = store.load()
    entry = book.search_by_name(args.name)
    if entry is None or not book.delete_entry(entry):
        print(f"No entry named {args.name!r}", file=sys.stderr)
        return EXIT_NOT_FOUND
    store.save(book)
    print(f"Deleted {entry.name}")
    return EXIT_OK


def _cmd_search(store: AddressBookStore, args: argparse.Namespace) -> int:
    entry = store.load().search(args.field, args.value)
    if entry is None:
        print(f"No entry with {args.field} = {args.value!r}", file=sys.stderr)
        return EXIT_NOT_FOUND
    print(json.dumps(entry.to_dict(), indent=2) if args.json else _format_entry(entry))
    return EXIT_OK


def _cmd_list(store: AddressBookStore, args: argparse.Namespace) -> int:
    book = store.load()
    if args.json:
        print(json.dumps([e.to_dict() for e in book], indent=2))
    else:
        print("\n\n".join(_format_entry(e) for e in book))
    return EXIT_OK


_COMMANDS = {
    "add": _cmd_add,
    "delete": _cmd_delete,
    "search": _cmd_search,
    "list": _cmd_list,
}


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    config = ConfigManager(args.config or DEFAULT_CONFIG_PATH)
    config.load(create_missing=args.config is not None)
    if args.debug:
        config.set("app.debug", True)

    level = "DEBUG" if config.get("app.debug") else config.get("logging.level", "INFO")
    setup_logging(level, config.get("logging.file") or None)

    path = args.file or config.get("store.path")
    store = AddressBookStore(Path(path), encoding=config.get("store.encoding", "utf-8"))
    logger.debug(f"Using address book {store.path}")

    try:
        return _COMMANDS[args.command](store, args)
    except InvalidArgumentError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_INVALID
    except StoreIOError as e:
        logger.error(f"Address book I/O failed: {e}")
        return EXIT_IO
    except AddressBookError as e:
        logger.error(f"Address book error: {e}")
        print(f"error: {e}", file=sys.stderr)
        return EXIT_INVALID


def cli() -> None:
    """CLI entry point."""
    sys.exit(main())


if __name__ == "__main__":
    cli()
