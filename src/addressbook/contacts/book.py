from __future__ import annotations

from typing import Iterator, List, Optional

from loguru import logger

from addressbook.contacts.errors import InvalidArgumentError, NullReferenceError
from addressbook.contacts.models import ENTRY_FIELDS, AddressBookEntry


class AddressBook:
    """
    Ordered, in-memory collection of address book entries.

    Insertion order is preserved and duplicates are allowed. The book keeps its
    own copy of every entry it is given, so later changes to the caller's
    object do not leak in.

    Not thread-safe: wrap every call in a lock if a book is shared.
    """

    def __init__(self) -> None:
        self._entries: List[AddressBookEntry] = []

    def add_entry(self, entry: AddressBookEntry) -> bool:
        if entry is None:
            raise NullReferenceError("entry cannot be None")
        if not isinstance(entry, AddressBookEntry):
            raise InvalidArgumentError(f"expected AddressBookEntry, got {type(entry).__name__}")
        self._entries.append(entry.copy())
        logger.debug(f"Added entry {entry.name!r} ({len(self._entries)} total)")
        return True

    def delete_entry(self, entry: AddressBookEntry) -> bool:
        """Remove the first entry equal to `entry`; return whether one was removed."""
        if entry is None:
            raise NullReferenceError("entry cannot be None")
        for i, e in enumerate(self._entries):
            if e == entry:
                del self._entries[i]
                logger.debug(f"Deleted entry {entry.name!r} ({len(self._entries)} left)")
                return True
        return False

    def _matches(self, field: str, value: str) -> Iterator[AddressBookEntry]:
        if field not in ENTRY_FIELDS:
            raise InvalidArgumentError(f"unknown entry field: {field!r}")
        if value is None:
            raise InvalidArgumentError(f"{field} cannot be None")
        if field == "name" and not value:
            raise InvalidArgumentError("name cannot be empty")
        return (e for e in self._entries if e.get(field) == value)

    def search(self, field: str, value: str) -> Optional[AddressBookEntry]:
        """
        Find the first entry whose `field` equals `value` exactly.

        Args:
            field: One of ENTRY_FIELDS
            value: Exact value to compare against (an empty name is rejected)

        Returns:
            A copy of the matching entry, or None if nothing matches
        """
        match = next(self._matches(field, value), None)
        return match.copy() if match is not None else None

    def search_all(self, field: str, value: str) -> List[AddressBookEntry]:
        return [e.copy() for e in self._matches(field, value)]

    def search_by_name(self, name: str) -> Optional[AddressBookEntry]:
        return self.search("name", name)

    def search_by_postal_address(self, postal_address: str) -> Optional[AddressBookEntry]:
        return self.search("postal_address", postal_address)

    def search_by_phone_number(self, phone_number: str) -> Optional[AddressBookEntry]:
        return self.search("phone_number", phone_number)

    def search_by_email_address(self, email_address: str) -> Optional[AddressBookEntry]:
        return self.search("email_address", email_address)

    def search_by_note(self, note: str) -> Optional[AddressBookEntry]:
        return self.search("note", note)

    @property
    def entries(self) -> List[AddressBookEntry]:
        """Copies of the stored entries, in insertion order."""
        return [e.copy() for e in self._entries]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[AddressBookEntry]:
        return (e.copy() for e in self._entries)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, AddressBook):
            return NotImplemented
        return self._entries == other._entries

    def __hash__(self) -> int:
        return hash(tuple(self._entries))

    def __str__(self) -> str:
        return "".join(str(e) for e in self._entries)

    def __repr__(self) -> str:
        return f"AddressBook({len(self._entries)} entries)"
