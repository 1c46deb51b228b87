"""Exceptions raised by the address book. Validation failures are results, not exceptions."""


class AddressBookError(Exception):
    """Base exception for the address book."""


class IndexOutOfRange(AddressBookError, IndexError):
    """A mutation addressed a position that does not exist in the contact list."""

    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"Contact index {index} out of range for list of size {size}.")
        self.index = index
        self.size = size


class DecodeError(AddressBookError, ValueError):
    """A persisted contact record could not be decoded."""

    def __init__(self, record: str, reason: str) -> None:
        super().__init__(f"Cannot decode contact record: {reason}")
        self.record = record
        self.reason = reason


class PreferencesError(AddressBookError, RuntimeError):
    """The key-value preference store could not be read or written."""
