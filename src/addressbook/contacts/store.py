from __future__ import annotations

import io
from pathlib import Path
from typing import Any, Iterable, Iterator, Optional, Union

from loguru import logger

from addressbook.contacts.book import AddressBook
from addressbook.contacts.errors import MalformedInputError, NullReferenceError, StoreIOError
from addressbook.contacts.models import ENTRY_FIELDS, ENTRY_SENTINEL, EntryBuilder

DEFAULT_ENCODING = "utf-8"


def _strip_terminator(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def _read_line(lines: Iterator[Union[str, bytes]], encoding: str) -> Optional[str]:
    try:
        raw = next(lines)
    except StopIteration:
        return None
    except UnicodeDecodeError as e:
        raise MalformedInputError(f"Address book is not valid {encoding}: {e}") from e
    except OSError as e:
        raise StoreIOError(f"Failed to read address book: {e}") from e
    if isinstance(raw, (bytes, bytearray)):
        try:
            raw = bytes(raw).decode(encoding)
        except UnicodeDecodeError as e:
            raise MalformedInputError(f"Address book is not valid {encoding}: {e}") from e
    return _strip_terminator(raw)


def save(book: AddressBook, sink: Any, *, encoding: str = DEFAULT_ENCODING) -> None:
    """
    Write the text form of `book` to `sink`.

    `sink` may be a text stream or a binary stream (written as `encoding`).
    The sink is flushed but not closed; the caller owns it.
    """
    if book is None:
        raise NullReferenceError("book cannot be None")
    if sink is None:
        raise NullReferenceError("sink cannot be None")

    text = str(book)
    try:
        if isinstance(sink, (io.RawIOBase, io.BufferedIOBase)):
            sink.write(text.encode(encoding))
        else:
            sink.write(text)
        flush = getattr(sink, "flush", None)
        if callable(flush):
            flush()
    except OSError as e:
        raise StoreIOError(f"Failed to write address book: {e}") from e
    logger.debug(f"Saved {len(book)} entries")


def load(source: Iterable[Union[str, bytes]], book: AddressBook, *, encoding: str = DEFAULT_ENCODING) -> None:
    """
    Read entries from `source` and append them to `book`.

    `source` is any iterable of lines (an open text or binary file, a list of
    strings, ...); CRLF, LF and missing terminators are all accepted. Each
    record is five lines (name, postal address, phone number, email address,
    note), normally followed by the sentinel line.

    Raises:
        MalformedInputError: input ends part-way through a record or is not valid `encoding`
        InvalidArgumentError: a record fails entry validation

    Entries read before a failure stay in `book`.
    """
    if source is None:
        raise NullReferenceError("source cannot be None")
    if book is None:
        raise NullReferenceError("book cannot be None")

    try:
        lines = iter(source)
    except OSError as e:
        raise StoreIOError(f"Failed to read address book: {e}") from e

    added = 0
    line = _read_line(lines, encoding)
    while line is not None:
        if line == ENTRY_SENTINEL:
            line = _read_line(lines, encoding)
            if line is None:
                break

        record = [line]
        for field in ENTRY_FIELDS[1:]:
            value = _read_line(lines, encoding)
            if value is None:
                raise MalformedInputError(
                    f"Input ended before field {field!r} of entry {record[0]!r} "
                    f"(entry #{added + 1})"
                )
            record.append(value)

        name, postal_address, phone_number, email_address, note = record
        entry = (
            EntryBuilder(name)
            .postal_address(postal_address)
            .phone_number(phone_number)
            .email_address(email_address)
            .note(note)
            .build()
        )
        book.add_entry(entry)
        added += 1
        line = _read_line(lines, encoding)

    logger.debug(f"Loaded {added} entries")


class AddressBookStore:
    """
    File-backed address book.

    The file uses the text format of `save`/`load`, UTF-8 with CRLF line endings.
    """

    def __init__(self, path: Path, encoding: str = DEFAULT_ENCODING) -> None:
        self.path = Path(path)
        self.encoding = encoding

    def load(self) -> AddressBook:
        book = AddressBook()
        if not self.path.exists():
            logger.debug(f"No address book at {self.path}, starting empty")
            return book
        try:
            with self.path.open("r", encoding=self.encoding, newline="") as f:
                load(f, book, encoding=self.encoding)
        except StoreIOError:
            raise
        except OSError as e:
            raise StoreIOError(f"Failed to open {self.path}: {e}") from e
        logger.info(f"Loaded {len(book)} entries from {self.path}")
        return book

    def save(self, book: AddressBook) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("w", encoding=self.encoding, newline="") as f:
                save(book, f, encoding=self.encoding)
        except StoreIOError:
            raise
        except OSError as e:
            raise StoreIOError(f"Failed to write {self.path}: {e}") from e
        logger.info(f"Saved {len(book)} entries to {self.path}")
