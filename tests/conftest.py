import sys
from pathlib import Path

import pytest


def pytest_configure():
    # Ensure `src/` is on sys.path so `import addressbook` works without an editable install.
    root = Path(__file__).resolve().parent.parent
    src = root / "src"
    if src.exists():
        p = str(src)
        if p not in sys.path:
            sys.path.insert(0, p)


@pytest.fixture
def ada():
    from addressbook.contacts.models import EntryBuilder

    return (
        EntryBuilder("Ada Lovelace")
        .postal_address("12 St James's Square, London")
        .phone_number("1-234-567-8901")
        .email_address("ada@analytical.engine.org")
        .note("first programmer")
        .build()
    )


@pytest.fixture
def grace():
    from addressbook.contacts.models import EntryBuilder

    return (
        EntryBuilder("Grace Hopper")
        .postal_address("Arlington, VA")
        .phone_number("(234) 567 8901")
        .email_address("grace@navy.mil")
        .build()
    )
