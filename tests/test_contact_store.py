"""Unit tests for PreferencesContactStore and the per-contact record codec."""

import json

import pytest

from addressbook.domain import Contact, DecodeError
from addressbook.infrastructure import (
    CONTACT_KEY,
    InMemoryPreferences,
    PreferencesContactStore,
    decode,
    encode,
)

JANE = Contact("Jane", "Doe", "jane@example.com")
BOB = Contact("Bob", "Z", "b@x.com")


def test_encode_writes_one_json_object_per_contact():
    assert json.loads(encode(JANE)) == {
        "firstName": "Jane",
        "lastName": "Doe",
        "email": "jane@example.com",
    }


def test_decode_reads_encoded_record():
    assert decode(encode(JANE)) == JANE


@pytest.mark.parametrize(
    "record",
    [
        "{not json",
        "[]",
        '"just a string"',
        '{"firstName": "Jane", "lastName": "Doe"}',
        '{"firstName": "Jane", "lastName": "Doe", "email": 5}',
    ],
)
def test_decode_malformed_record_raises(record):
    with pytest.raises(DecodeError) as exc_info:
        decode(record)
    assert exc_info.value.record == record


def test_load_empty_when_nothing_saved():
    store = PreferencesContactStore(InMemoryPreferences())
    assert store.load() == ()
    result = store.load_contacts()
    assert result.contacts == ()
    assert result.ok


def test_save_full_replaces_previous_records():
    prefs = InMemoryPreferences()
    store = PreferencesContactStore(prefs)
    store.save([JANE, BOB])
    store.save([BOB])
    assert prefs.get_strings(CONTACT_KEY) == [encode(BOB)]


def test_save_load_round_trip_as_set():
    store = PreferencesContactStore(InMemoryPreferences())
    store.save([JANE, BOB])
    first = store.load_contacts().contacts
    store.save(first)
    assert set(store.load_contacts().contacts) == {JANE, BOB}


def test_duplicates_survive_reload():
    store = PreferencesContactStore(InMemoryPreferences())
    store.save([JANE, JANE])
    assert store.load_contacts().contacts == (JANE, JANE)


def test_malformed_record_is_isolated():
    prefs = InMemoryPreferences()
    prefs.put_strings(CONTACT_KEY, [encode(JANE), "garbage", encode(BOB)])
    result = PreferencesContactStore(prefs).load_contacts()
    assert result.contacts == (JANE, BOB)
    assert len(result.failures) == 1
    assert result.failures[0].record == "garbage"
    assert not result.ok


def test_custom_key():
    prefs = InMemoryPreferences()
    PreferencesContactStore(prefs, key="other").save([JANE])
    assert prefs.get_strings(CONTACT_KEY) is None
    assert prefs.get_strings("other") == [encode(JANE)]
