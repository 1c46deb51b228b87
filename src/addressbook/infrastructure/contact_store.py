"""ContactStore over a KeyValueStore: one JSON text record per contact under one key."""

import json
import logging

from addressbook.application.dto import DecodeFailure, LoadResult
from addressbook.application.ports import KeyValueStore
from addressbook.domain import Contact, DecodeError

logger = logging.getLogger(__name__)

CONTACT_KEY = "contact_key"

# Record field names are camelCase for compatibility with existing stored records.
_FIELDS = (("first_name", "firstName"), ("last_name", "lastName"), ("email", "email"))


def encode(contact: Contact) -> str:
    return json.dumps({record_name: getattr(contact, attr) for attr, record_name in _FIELDS})


def decode(record: str) -> Contact:
    """Parse one record. Raises DecodeError if it is not an object with three text fields."""
    try:
        data = json.loads(record)
    except (TypeError, ValueError) as exc:
        raise DecodeError(record, f"invalid JSON ({exc})") from exc
    if not isinstance(data, dict):
        raise DecodeError(record, "record is not a JSON object")
    values = {}
    for attr, record_name in _FIELDS:
        value = data.get(record_name)
        if not isinstance(value, str):
            raise DecodeError(record, f"missing or non-text field {record_name!r}")
        values[attr] = value
    return Contact(**values)


class PreferencesContactStore:
    """Stores the contact list in a key-value store. Every save rewrites the full sequence."""

    def __init__(self, preferences: KeyValueStore, key: str = CONTACT_KEY) -> None:
        self._prefs = preferences
        self._key = key

    def save(self, contacts: list[Contact] | tuple[Contact, ...]) -> None:
        records = [encode(c) for c in contacts]
        self._prefs.put_strings(self._key, records)
        logger.debug("Saved %d contact records under %r", len(records), self._key)

    def load(self) -> tuple[str, ...]:
        return tuple(self._prefs.get_strings(self._key) or ())

    def load_contacts(self) -> LoadResult:
        contacts = []
        failures = []
        for record in self.load():
            try:
                contacts.append(decode(record))
            except DecodeError as exc:
                failures.append(DecodeFailure(record=record, reason=exc.reason))
        return LoadResult(contacts=tuple(contacts), failures=tuple(failures))
