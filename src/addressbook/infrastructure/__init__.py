"""Infrastructure layer: concrete implementations of application ports."""

from addressbook.infrastructure.contact_store import (
    CONTACT_KEY,
    PreferencesContactStore,
    decode,
    encode,
)
from addressbook.infrastructure.file_preferences import JsonFilePreferences
from addressbook.infrastructure.memory_preferences import InMemoryPreferences
from addressbook.infrastructure.persistence.neo4j_preferences import (
    Neo4jPreferences,
    ensure_preferences_constraint,
)

__all__ = [
    "CONTACT_KEY",
    "InMemoryPreferences",
    "JsonFilePreferences",
    "Neo4jPreferences",
    "PreferencesContactStore",
    "decode",
    "encode",
    "ensure_preferences_constraint",
]
