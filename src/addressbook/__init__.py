"""
addressbook - In-memory contact records with a line-based text store.

Entries are built and validated in `addressbook.contacts.models`, collected in
`addressbook.contacts.book.AddressBook` and persisted through
`addressbook.contacts.store`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

__version__ = "0.1.0"
__author__ = "addressbook maintainers"

if TYPE_CHECKING:
    from addressbook.contacts.book import AddressBook as AddressBook
    from addressbook.contacts.models import AddressBookEntry as AddressBookEntry

__all__ = ["AddressBook", "AddressBookEntry", "__version__"]


def __getattr__(name: str):
    # Lazy import so `import addressbook` stays cheap for the CLI and config modules.
    if name == "AddressBook":
        from addressbook.contacts.book import AddressBook  # local import

        return AddressBook
    if name == "AddressBookEntry":
        from addressbook.contacts.models import AddressBookEntry  # local import

        return AddressBookEntry
    raise AttributeError(name)
