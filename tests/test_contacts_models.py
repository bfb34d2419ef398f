import copy

import pytest

from addressbook.contacts.errors import InvalidArgumentError
from addressbook.contacts.models import (
    AddressBookEntry,
    EntryBuilder,
    EntryOptions,
    is_valid_email_address,
    is_valid_phone_number,
)


@pytest.mark.parametrize("value", ["1-234-567-8901", "234-567-8901", "(234) 567 8901", "2345678901", "1234-234 567-8901"])
def test_phone_number_accepted(value: str) -> None:
    assert is_valid_phone_number(value)


@pytest.mark.parametrize("value", ["12345", "", "234-567-890", "12345-234-567-8901", "234-567-8901x"])
def test_phone_number_rejected(value: str) -> None:
    assert not is_valid_phone_number(value)


@pytest.mark.parametrize("value", ["user@example.com", "first.last@mail.example.co.uk", "A-B@EXAMPLE.ORG"])
def test_email_address_accepted(value: str) -> None:
    assert is_valid_email_address(value)


@pytest.mark.parametrize("value", ["user@example", "not-an-email", "user@example.museum", "@example.com", ""])
def test_email_address_rejected(value: str) -> None:
    assert not is_valid_email_address(value)


def test_builder_sets_every_field(ada: AddressBookEntry) -> None:
    assert ada.name == "Ada Lovelace"
    assert ada.postal_address == "12 St James's Square, London"
    assert ada.phone_number == "1-234-567-8901"
    assert ada.email_address == "ada@analytical.engine.org"
    assert ada.note == "first programmer"


def test_builder_defaults_optional_fields_to_empty() -> None:
    entry = EntryBuilder("Solo").build()
    assert entry.to_dict() == {
        "name": "Solo",
        "postal_address": "",
        "phone_number": "",
        "email_address": "",
        "note": "",
    }


@pytest.mark.parametrize("name", [None, ""])
def test_builder_rejects_missing_name(name) -> None:
    with pytest.raises(InvalidArgumentError):
        EntryBuilder(name)


def test_builder_rejects_none_optional_values() -> None:
    builder = EntryBuilder("Ada")
    for setter in (builder.postal_address, builder.phone_number, builder.email_address, builder.note):
        with pytest.raises(InvalidArgumentError):
            setter(None)


def test_builder_rejects_malformed_phone_and_email() -> None:
    with pytest.raises(InvalidArgumentError):
        EntryBuilder("Ada").phone_number("12345")
    with pytest.raises(InvalidArgumentError):
        EntryBuilder("Ada").email_address("user@example")


def test_builder_accepts_empty_phone_and_email() -> None:
    entry = EntryBuilder("Ada").phone_number("").email_address("").build()
    assert entry.phone_number == ""
    assert entry.email_address == ""


def test_setter_keeps_previous_value_on_invalid_input(ada: AddressBookEntry) -> None:
    with pytest.raises(InvalidArgumentError):
        ada.phone_number = "12345"
    assert ada.phone_number == "1-234-567-8901"

    with pytest.raises(InvalidArgumentError):
        ada.email_address = "not-an-email"
    assert ada.email_address == "ada@analytical.engine.org"

    with pytest.raises(InvalidArgumentError):
        ada.name = ""
    assert ada.name == "Ada Lovelace"


def test_setter_updates_valid_value(ada: AddressBookEntry) -> None:
    ada.phone_number = "234-567-8901"
    ada.note = ""
    assert ada.phone_number == "234-567-8901"
    assert ada.note == ""


def test_equal_entries_share_hash(ada: AddressBookEntry) -> None:
    twin = AddressBookEntry(**ada.to_dict())
    assert twin == ada
    assert hash(twin) == hash(ada)
    assert len({ada, twin}) == 1


def test_entries_differing_in_one_field_are_not_equal(ada: AddressBookEntry) -> None:
    other = ada.copy()
    other.note = "first programmer "
    assert other != ada
    assert ada != "Ada Lovelace"


def test_text_form_uses_crlf_and_sentinel() -> None:
    entry = EntryBuilder("Ada").phone_number("234-567-8901").build()
    assert str(entry) == "Ada\r\n\r\n234-567-8901\r\n\r\n\r\n**********\r\n"


def test_copy_is_independent(ada: AddressBookEntry) -> None:
    for dup in (ada.copy(), copy.copy(ada), copy.deepcopy(ada)):
        assert dup == ada
        assert dup is not ada
        dup.note = "changed"
        assert ada.note == "first programmer"


def test_create_from_options() -> None:
    entry = AddressBookEntry.create("Grace", EntryOptions(phone_number="234-567-8901", note="admiral"))
    assert entry.phone_number == "234-567-8901"
    assert entry.note == "admiral"
    assert entry.email_address == ""


def test_create_from_mapping_validates_each_option() -> None:
    entry = AddressBookEntry.create("Grace", {"email_address": "grace@navy.mil"})
    assert entry.email_address == "grace@navy.mil"

    with pytest.raises(InvalidArgumentError):
        AddressBookEntry.create("Grace", {"phone_number": "12345"})
    with pytest.raises(InvalidArgumentError):
        AddressBookEntry.create("Grace", {"nickname": "Amazing Grace"})
    with pytest.raises(InvalidArgumentError):
        AddressBookEntry.create("", {})
    for bad in (["phone_number"], 42):
        with pytest.raises(InvalidArgumentError):
            AddressBookEntry.create("Grace", bad)


def test_from_dict_round_trips_to_dict(ada: AddressBookEntry) -> None:
    assert AddressBookEntry.from_dict(ada.to_dict()) == ada
