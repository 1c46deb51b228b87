"""Domain entities: Contact and the keys a contact list can be sorted by."""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Contact:
    """
    A person in the address book: first name, last name, email.
    No identifier; a contact is addressed by its position in the list.
    Fields are not validated here; validation happens when a contact is entered.
    """

    first_name: str
    last_name: str
    email: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class SortKey(str, Enum):
    """Field a contact list is sorted by."""

    FIRST_NAME = "first_name"
    LAST_NAME = "last_name"

    def of(self, contact: Contact) -> str:
        return getattr(contact, self.value)
