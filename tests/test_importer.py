"""Tests for bulk import and the bundled mock contacts fixture."""

import json

import pytest

from addressbook.application import (
    ContactListManager,
    generate_contacts,
    import_contacts,
    read_contact_fixture,
)
from addressbook.domain import Contact
from addressbook.infrastructure import InMemoryPreferences, PreferencesContactStore


def _manager() -> ContactListManager:
    return ContactListManager(PreferencesContactStore(InMemoryPreferences()))


def test_import_triples_and_mappings() -> None:
    manager = _manager()
    report = import_contacts(
        manager,
        [
            ("Jane", "Doe", "jane@example.com"),
            {"first_name": "Bob", "last_name": "Z", "email": "b@x.com"},
        ],
    )
    assert report.added == [
        Contact("Jane", "Doe", "jane@example.com"),
        Contact("Bob", "Z", "b@x.com"),
    ]
    assert report.rejected == []
    assert len(manager) == 2


def test_invalid_rows_are_reported_not_dropped() -> None:
    manager = _manager()
    rows = [
        ("Jane", "Doe", "jane@example.com"),
        ("", "Doe", "x@example.com"),
        ("Bob", "Z", "not-an-email"),
        {"first_name": "Amy", "email": "a@x.com"},
        ("too", "short"),
        ("Cat", "X", None),
    ]
    report = import_contacts(manager, rows)

    assert len(report.added) == 1
    assert [r.position for r in report.rejected] == [1, 2, 3, 4, 5]
    assert "last_name" in report.rejected[2].reason
    assert report.rejected[0].row == ("", "Doe", "x@example.com")
    assert len(manager) == 1


def test_bundled_fixture_is_all_valid() -> None:
    rows = read_contact_fixture()
    assert len(rows) > 0
    manager = _manager()
    report = generate_contacts(manager)
    assert report.rejected == []
    assert len(manager) == len(rows)


def test_fixture_from_path(tmp_path) -> None:
    path = tmp_path / "contacts.json"
    path.write_text(
        json.dumps([{"first_name": "Jane", "last_name": "Doe", "email": "jane@example.com"}]),
        encoding="utf-8",
    )
    manager = _manager()
    report = generate_contacts(manager, path)
    assert len(report.added) == 1


def test_fixture_must_be_array(tmp_path) -> None:
    path = tmp_path / "contacts.json"
    path.write_text('{"first_name": "Jane"}', encoding="utf-8")
    with pytest.raises(ValueError):
        read_contact_fixture(path)
