"""Result types returned by the contact list and the bulk importer."""

from dataclasses import dataclass, field

from addressbook.domain import Contact


# --- validation outcome (add, update) ---


@dataclass(frozen=True)
class Invalid:
    """Input rejected by validation. Nothing was changed or persisted."""

    reason: str
    fields: tuple[str, ...] = ()


# --- mutation results ---


@dataclass(frozen=True)
class ContactAdded:
    """Contact appended at index and persisted."""

    index: int
    contact: Contact


@dataclass(frozen=True)
class ContactUpdated:
    """Email of the contact at index replaced and persisted."""

    index: int
    contact: Contact


@dataclass(frozen=True)
class ContactRemoved:
    """Contact removed from index and persisted."""

    index: int
    contact: Contact


# --- load ---


@dataclass(frozen=True)
class DecodeFailure:
    """One persisted record that could not be decoded. The rest of the load went ahead."""

    record: str
    reason: str


@dataclass(frozen=True)
class LoadResult:
    contacts: tuple[Contact, ...] = ()
    failures: tuple[DecodeFailure, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.failures


# --- bulk import ---


@dataclass(frozen=True)
class RejectedRow:
    """Import row that did not become a contact. position is the row's index in the input."""

    position: int
    row: object
    reason: str


@dataclass
class ImportReport:
    added: list[Contact] = field(default_factory=list)
    rejected: list[RejectedRow] = field(default_factory=list)
