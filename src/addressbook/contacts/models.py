"""
Address book entry model.

An entry holds five string fields. `name` is required and never empty; phone
number and email address are checked against their format patterns whenever
they are set to a non-empty value. Entries are built through `EntryBuilder`
(or `AddressBookEntry.create`) and compared by value.
"""

from __future__ import annotations

import re
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from addressbook.contacts.errors import InvalidArgumentError

# Marks the end of an entry in the text format.
ENTRY_SENTINEL = "**********"
LINE_TERMINATOR = "\r\n"

ENTRY_FIELDS: Tuple[str, ...] = (
    "name",
    "postal_address",
    "phone_number",
    "email_address",
    "note",
)

# optionalCountryCode-xxx-xxx-xxxx, e.g. 1-234-567-8901, 234-567-8901, (234) 567 8901
_PHONE_NUMBER_RE = re.compile(r"^(\d{1,4}-)?\(?(\d{3})\)?[- ]?(\d{3})[- ]?(\d{4})$", re.ASCII)
# username@domain-name.tld
_EMAIL_ADDRESS_RE = re.compile(r"^[\w.-]+@([\w-]+\.)+[A-Z]{2,4}$", re.ASCII | re.IGNORECASE)


def is_valid_phone_number(value: str) -> bool:
    """Return True if `value` looks like a phone number."""
    return bool(_PHONE_NUMBER_RE.fullmatch(value or ""))


def is_valid_email_address(value: str) -> bool:
    """Return True if `value` looks like an email address."""
    return bool(_EMAIL_ADDRESS_RE.fullmatch(value or ""))


def _require_str(field: str, value: Any) -> str:
    if value is None:
        raise InvalidArgumentError(f"{field} cannot be None")
    if not isinstance(value, str):
        raise InvalidArgumentError(f"{field} must be a string, got {type(value).__name__}")
    return value


def _check_name(value: Any) -> str:
    value = _require_str("name", value)
    if not value:
        raise InvalidArgumentError("name cannot be empty")
    return value


def _check_phone_number(value: Any) -> str:
    value = _require_str("phone_number", value)
    if value and not is_valid_phone_number(value):
        raise InvalidArgumentError(f"invalid phone number: {value!r}")
    return value


def _check_email_address(value: Any) -> str:
    value = _require_str("email_address", value)
    if value and not is_valid_email_address(value):
        raise InvalidArgumentError(f"invalid email address: {value!r}")
    return value


_FIELD_CHECKS = {
    "name": _check_name,
    "postal_address": lambda v: _require_str("postal_address", v),
    "phone_number": _check_phone_number,
    "email_address": _check_email_address,
    "note": lambda v: _require_str("note", v),
}


def check_field(field: str, value: Any) -> str:
    """Validate `value` for entry field `field` and return it."""
    try:
        check = _FIELD_CHECKS[field]
    except KeyError:
        raise InvalidArgumentError(f"unknown entry field: {field!r}") from None
    return check(value)


class EntryOptions(BaseModel):
    """Optional entry fields, validated independently when the options are built."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    postal_address: str = ""
    phone_number: str = ""
    email_address: str = ""
    note: str = ""

    @field_validator("phone_number")
    @classmethod
    def _validate_phone_number(cls, v: str) -> str:
        if v and not is_valid_phone_number(v):
            raise ValueError(f"invalid phone number: {v!r}")
        return v

    @field_validator("email_address")
    @classmethod
    def _validate_email_address(cls, v: str) -> str:
        if v and not is_valid_email_address(v):
            raise ValueError(f"invalid email address: {v!r}")
        return v


class AddressBookEntry:
    """
    A single contact record.

    Fields are exposed as properties; assigning to one re-runs the same
    validation the builder applies and keeps the previous value on failure.
    """

    __slots__ = ("_name", "_postal_address", "_phone_number", "_email_address", "_note")

    def __init__(
        self,
        name: str,
        postal_address: str = "",
        phone_number: str = "",
        email_address: str = "",
        note: str = "",
    ) -> None:
        self._name = _check_name(name)
        self._postal_address = check_field("postal_address", postal_address)
        self._phone_number = _check_phone_number(phone_number)
        self._email_address = _check_email_address(email_address)
        self._note = check_field("note", note)

    @staticmethod
    def builder(name: str) -> "EntryBuilder":
        return EntryBuilder(name)

    @classmethod
    def create(
        cls,
        name: str,
        options: Optional[Union[EntryOptions, Mapping[str, Any]]] = None,
    ) -> "AddressBookEntry":
        """
        Build an entry from the required name and an options structure.

        Args:
            name: Required, non-empty name
            options: `EntryOptions` or a mapping of its fields

        Raises:
            InvalidArgumentError: name or any option fails validation
        """
        if options is None:
            options = EntryOptions()
        elif not isinstance(options, EntryOptions):
            try:
                options = EntryOptions.model_validate(dict(options))
            except (ValidationError, TypeError, ValueError) as e:
                raise InvalidArgumentError(f"invalid entry options: {e}") from e
        return (
            EntryBuilder(name)
            .postal_address(options.postal_address)
            .phone_number(options.phone_number)
            .email_address(options.email_address)
            .note(options.note)
            .build()
        )

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = _check_name(value)

    @property
    def postal_address(self) -> str:
        return self._postal_address

    @postal_address.setter
    def postal_address(self, value: str) -> None:
        self._postal_address = check_field("postal_address", value)

    @property
    def phone_number(self) -> str:
        return self._phone_number

    @phone_number.setter
    def phone_number(self, value: str) -> None:
        self._phone_number = _check_phone_number(value)

    @property
    def email_address(self) -> str:
        return self._email_address

    @email_address.setter
    def email_address(self, value: str) -> None:
        self._email_address = _check_email_address(value)

    @property
    def note(self) -> str:
        return self._note

    @note.setter
    def note(self, value: str) -> None:
        self._note = check_field("note", value)

    def get(self, field: str) -> str:
        if field not in ENTRY_FIELDS:
            raise InvalidArgumentError(f"unknown entry field: {field!r}")
        return getattr(self, field)

    def _key(self) -> Tuple[str, str, str, str, str]:
        return (self._name, self._postal_address, self._phone_number, self._email_address, self._note)

    def copy(self) -> "AddressBookEntry":
        """Return an independent entry with the same field values."""
        return AddressBookEntry(*self._key())

    __copy__ = copy

    def __deepcopy__(self, memo: Dict[int, Any]) -> "AddressBookEntry":
        return self.copy()

    def to_dict(self) -> Dict[str, str]:
        return dict(zip(ENTRY_FIELDS, self._key()))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AddressBookEntry":
        options = {k: v for k, v in data.items() if k != "name"}
        return cls.create(data.get("name"), options)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, AddressBookEntry):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        return "".join(line + LINE_TERMINATOR for line in (*self._key(), ENTRY_SENTINEL))

    def __repr__(self) -> str:
        fields = ", ".join(f"{k}={v!r}" for k, v in zip(ENTRY_FIELDS, self._key()))
        return f"AddressBookEntry({fields})"


class EntryBuilder:
    """
    Chained construction of an `AddressBookEntry`.

        entry = EntryBuilder("Ada").phone_number("234-567-8901").note("met at PyCon").build()
    """

    def __init__(self, name: str) -> None:
        self._name = _check_name(name)
        self._postal_address = ""
        self._phone_number = ""
        self._email_address = ""
        self._note = ""

    def postal_address(self, value: str) -> "EntryBuilder":
        self._postal_address = check_field("postal_address", value)
        return self

    def phone_number(self, value: str) -> "EntryBuilder":
        self._phone_number = _check_phone_number(value)
        return self

    def email_address(self, value: str) -> "EntryBuilder":
        self._email_address = _check_email_address(value)
        return self

    def note(self, value: str) -> "EntryBuilder":
        self._note = check_field("note", value)
        return self

    def build(self) -> AddressBookEntry:
        return AddressBookEntry(
            self._name,
            postal_address=self._postal_address,
            phone_number=self._phone_number,
            email_address=self._email_address,
            note=self._note,
        )
