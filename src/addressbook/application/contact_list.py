"""Contact list: the single owner of the ordered contacts. Every mutation is persisted at once."""

import logging
import threading
from collections.abc import Callable
from dataclasses import replace

from addressbook.application.dto import (
    ContactAdded,
    ContactRemoved,
    ContactUpdated,
    Invalid,
    LoadResult,
)
from addressbook.application.ports import ContactStore
from addressbook.domain import Contact, IndexOutOfRange, SortKey
from addressbook.domain.validation import invalid_fields, is_email, validate

logger = logging.getLogger(__name__)

Listener = Callable[[tuple[Contact, ...]], None]


class ContactListManager:
    """Core flow: load -> add / update email / remove / clear (each saved) -> sort for display.

    Readers get tuple snapshots; subscribers are called with a fresh snapshot
    after every change. One lock serializes mutations together with their save;
    a mutation becomes visible only once its save has succeeded.
    """

    def __init__(self, store: ContactStore) -> None:
        self._store = store
        self._contacts: list[Contact] = []
        self._listeners: list[Listener] = []
        self._lock = threading.RLock()

    validate = staticmethod(validate)

    @property
    def contacts(self) -> tuple[Contact, ...]:
        with self._lock:
            return tuple(self._contacts)

    def __len__(self) -> int:
        return len(self._contacts)

    def get(self, index: int) -> Contact:
        with self._lock:
            self._check_index(index)
            return self._contacts[index]

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener for new snapshots. Returns a function that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def load(self) -> LoadResult:
        """Replace the in-memory list with the stored contacts. Order follows the store."""
        with self._lock:
            result = self._store.load_contacts()
            for failure in result.failures:
                logger.warning("Skipping unreadable contact record: %s", failure.reason)
            self._contacts = list(result.contacts)
            logger.info("Loaded %d contacts", len(self._contacts))
            self._notify()
            return result

    def add(self, contact: Contact) -> ContactAdded | Invalid:
        """Append contact if it passes validation, then save."""
        failed = invalid_fields(contact.first_name, contact.last_name, contact.email)
        if failed:
            return Invalid(reason=_reason(failed), fields=tuple(failed))
        with self._lock:
            candidate = [*self._contacts, contact]
            self._commit(candidate)
            index = len(candidate) - 1
            logger.debug("Added contact at %d", index)
        return ContactAdded(index=index, contact=contact)

    def update(self, index: int, new_email: str) -> ContactUpdated | Invalid:
        """Replace the email of the contact at index. Names cannot be changed."""
        with self._lock:
            self._check_index(index)
            if not is_email(new_email):
                return Invalid(reason=_reason(["email"]), fields=("email",))
            updated = replace(self._contacts[index], email=new_email)
            candidate = list(self._contacts)
            candidate[index] = updated
            self._commit(candidate)
            logger.debug("Updated email of contact at %d", index)
        return ContactUpdated(index=index, contact=updated)

    def remove(self, index: int) -> ContactRemoved:
        with self._lock:
            self._check_index(index)
            candidate = list(self._contacts)
            removed = candidate.pop(index)
            self._commit(candidate)
            logger.debug("Removed contact at %d", index)
        return ContactRemoved(index=index, contact=removed)

    def clear(self) -> None:
        with self._lock:
            self._commit([])
            logger.debug("Cleared contacts")

    def sort_by(self, key: SortKey | str) -> tuple[Contact, ...]:
        """Stable, case-sensitive sort by first or last name. Display only: not saved."""
        key = SortKey(key)
        with self._lock:
            self._contacts.sort(key=key.of)
            self._notify()
            return tuple(self._contacts)

    def _check_index(self, index: int) -> None:
        # Negative indexes are rejected rather than counted from the end.
        if not 0 <= index < len(self._contacts):
            raise IndexOutOfRange(index, len(self._contacts))

    def _commit(self, candidate: list[Contact]) -> None:
        """Save candidate, then make it the live list. A failed save leaves the list untouched."""
        self._store.save(tuple(candidate))
        self._contacts = candidate
        self._notify()

    def _notify(self) -> None:
        snapshot = tuple(self._contacts)
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                # Listener errors are logged; the change stays committed.
                logger.exception("Contact list listener %r failed", listener)


def _reason(failed: list[str]) -> str:
    messages = {
        "first_name": "First name is required.",
        "last_name": "Last name is required.",
        "email": "Email is not a valid address.",
    }
    return " ".join(messages[name] for name in failed)
