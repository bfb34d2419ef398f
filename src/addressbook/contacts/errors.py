"""
Address book error kinds.

Each kind also derives from the matching builtin so callers that only know
about `TypeError` / `ValueError` / `OSError` still catch it.
"""

from __future__ import annotations


class AddressBookError(Exception):
    """Base class for every error raised by the address book."""


class NullReferenceError(AddressBookError, TypeError):
    """Raised when a required object argument is None."""


class InvalidArgumentError(AddressBookError, ValueError):
    """Raised for a missing or empty required string, or a malformed phone/email."""


class MalformedInputError(AddressBookError, ValueError):
    """Raised when a serialized address book ends in the middle of a record."""


class StoreIOError(AddressBookError, OSError):
    """Raised when the underlying stream fails while saving or loading."""
