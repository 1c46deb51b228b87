"""Application ports (interfaces). Implemented by infrastructure adapters."""

from typing import Protocol

from addressbook.application.dto import LoadResult
from addressbook.domain import Contact


class KeyValueStore(Protocol):
    """Flat key-value preference store holding string sequences."""

    def get_strings(self, key: str) -> list[str] | None:
        """Return the values stored under key in stored order, or None if nothing is stored."""
        ...

    def put_strings(self, key: str, values: list[str]) -> None:
        """Replace whatever is stored under key with values."""
        ...

    def remove(self, key: str) -> None:
        """Delete key. No-op if absent."""
        ...


class ContactStore(Protocol):
    """Persists the whole contact list as one encoded record per contact."""

    def save(self, contacts: list[Contact] | tuple[Contact, ...]) -> None:
        """Full replace of the stored records with the encoding of contacts."""
        ...

    def load(self) -> tuple[str, ...]:
        """Return the stored encoded records, or an empty tuple."""
        ...

    def load_contacts(self) -> LoadResult:
        """Decode every stored record; malformed records are reported, not raised."""
        ...
