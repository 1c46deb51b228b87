"""Domain layer: entities, validation and errors. No dependencies on outer layers."""

from addressbook.domain.entities import Contact, SortKey
from addressbook.domain.errors import (
    AddressBookError,
    DecodeError,
    IndexOutOfRange,
    PreferencesError,
)
from addressbook.domain.validation import invalid_fields, is_email, validate

__all__ = [
    "AddressBookError",
    "Contact",
    "DecodeError",
    "IndexOutOfRange",
    "PreferencesError",
    "SortKey",
    "invalid_fields",
    "is_email",
    "validate",
]
