"""Application layer: contact list, bulk import, ports and result types. Depends only on domain."""

from addressbook.application.contact_list import ContactListManager
from addressbook.application.dto import (
    ContactAdded,
    ContactRemoved,
    ContactUpdated,
    DecodeFailure,
    ImportReport,
    Invalid,
    LoadResult,
    RejectedRow,
)
from addressbook.application.importer import (
    generate_contacts,
    import_contacts,
    read_contact_fixture,
)
from addressbook.application.ports import ContactStore, KeyValueStore

__all__ = [
    "ContactAdded",
    "ContactListManager",
    "ContactRemoved",
    "ContactStore",
    "ContactUpdated",
    "DecodeFailure",
    "ImportReport",
    "Invalid",
    "KeyValueStore",
    "LoadResult",
    "RejectedRow",
    "generate_contacts",
    "import_contacts",
    "read_contact_fixture",
]
