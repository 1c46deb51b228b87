"""Bulk import: feed raw (first_name, last_name, email) rows through the contact list.

Every row is validated like a hand-entered contact; rejected rows are reported.
"""

import json
import logging
from collections.abc import Iterable, Mapping
from importlib import resources
from pathlib import Path

from addressbook.application.contact_list import ContactListManager
from addressbook.application.dto import ContactAdded, ImportReport, Invalid, RejectedRow
from addressbook.domain import Contact

logger = logging.getLogger(__name__)

FIXTURE_NAME = "mock_contacts.json"
FIXTURE_FIELDS = ("first_name", "last_name", "email")


def import_contacts(
    manager: ContactListManager,
    rows: Iterable[tuple[str, str, str] | Mapping[str, str]],
) -> ImportReport:
    """Add each row to manager. Rows are triples or mappings with first_name, last_name, email."""
    report = ImportReport()
    for position, row in enumerate(rows):
        try:
            contact = _row_to_contact(row)
        except ValueError as exc:
            logger.warning("Import row %d rejected: %s", position, exc)
            report.rejected.append(RejectedRow(position=position, row=row, reason=str(exc)))
            continue

        result = manager.add(contact)
        if isinstance(result, Invalid):
            logger.warning("Import row %d rejected: %s", position, result.reason)
            report.rejected.append(RejectedRow(position=position, row=row, reason=result.reason))
        elif isinstance(result, ContactAdded):
            report.added.append(result.contact)
    logger.info("Imported %d contacts, rejected %d", len(report.added), len(report.rejected))
    return report


def read_contact_fixture(path: str | Path | None = None) -> list:
    """Parse a JSON array of contact objects. Defaults to the bundled mock contacts."""
    if path is None:
        text = resources.files("addressbook.data").joinpath(FIXTURE_NAME).read_text(encoding="utf-8")
    else:
        text = Path(path).read_text(encoding="utf-8")
    data = json.loads(text)
    if not isinstance(data, list):
        raise ValueError("Contact fixture must be a JSON array.")
    return data


def generate_contacts(manager: ContactListManager, path: str | Path | None = None) -> ImportReport:
    """Import the mock contacts fixture into manager."""
    return import_contacts(manager, read_contact_fixture(path))


def _row_to_contact(row: object) -> Contact:
    if isinstance(row, Mapping):
        missing = [name for name in FIXTURE_FIELDS if name not in row]
        if missing:
            raise ValueError(f"Missing field(s): {', '.join(missing)}.")
        values = [row[name] for name in FIXTURE_FIELDS]
    elif isinstance(row, (tuple, list)) and len(row) == 3:
        values = list(row)
    else:
        raise ValueError("Row must be a (first_name, last_name, email) triple or object.")
    if not all(isinstance(v, str) for v in values):
        raise ValueError("Contact fields must be text.")
    return Contact(first_name=values[0], last_name=values[1], email=values[2])
