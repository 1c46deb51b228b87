"""
Address book core: clean-architecture layout.

- domain: Contact, SortKey, validate, errors. No outer dependencies.
- application: ContactListManager, bulk import, ports (ContactStore, KeyValueStore), result types.
- infrastructure: adapters (PreferencesContactStore, InMemoryPreferences, JsonFilePreferences, Neo4jPreferences).
"""

from addressbook.application import (
    ContactAdded,
    ContactListManager,
    ContactRemoved,
    ContactStore,
    ContactUpdated,
    DecodeFailure,
    ImportReport,
    Invalid,
    KeyValueStore,
    LoadResult,
    import_contacts,
)
from addressbook.domain import (
    Contact,
    DecodeError,
    IndexOutOfRange,
    PreferencesError,
    SortKey,
    validate,
)
from addressbook.infrastructure import (
    InMemoryPreferences,
    JsonFilePreferences,
    Neo4jPreferences,
    PreferencesContactStore,
)

__all__ = [
    "Contact",
    "ContactAdded",
    "ContactListManager",
    "ContactRemoved",
    "ContactStore",
    "ContactUpdated",
    "DecodeError",
    "DecodeFailure",
    "ImportReport",
    "IndexOutOfRange",
    "InMemoryPreferences",
    "Invalid",
    "JsonFilePreferences",
    "KeyValueStore",
    "LoadResult",
    "Neo4jPreferences",
    "PreferencesContactStore",
    "PreferencesError",
    "SortKey",
    "import_contacts",
    "validate",
]
