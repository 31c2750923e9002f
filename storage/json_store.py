"""JSON contact-book loader with per-row schema validation."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema

from core.models import Contact
from core.records import RecordList


PROJECT_ROOT = Path(__file__).resolve().parent.parent
SCHEMAS_DIR = PROJECT_ROOT / "schemas"
CONTACT_SCHEMA = json.loads((SCHEMAS_DIR / "contact.schema.json").read_text(encoding="utf-8"))


def _contact_rows(raw: Any) -> list[Any]:
    """Accept either {"contacts": [...]} or a bare list."""
    if isinstance(raw, dict):
        rows = raw.get("contacts", [])
    else:
        rows = raw
    if not isinstance(rows, list):
        raise ValueError("Invalid contact book: 'contacts' must be a list")
    return rows


def load_contacts(path: str | Path) -> RecordList[Contact]:
    """
    Load and validate a contact book.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the document or any row is malformed.
    """
    contacts_path = Path(path)
    if not contacts_path.exists():
        raise FileNotFoundError(f"Contacts file not found: {contacts_path}")

    try:
        raw = json.loads(contacts_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {contacts_path.name}: {exc.msg}") from exc

    contacts: RecordList[Contact] = RecordList()
    for index, row in enumerate(_contact_rows(raw)):
        try:
            jsonschema.validate(row, CONTACT_SCHEMA)
        except jsonschema.ValidationError as exc:
            raise ValueError(f"Contact #{index} failed schema validation: {exc.message}") from exc
        contacts.add(Contact.model_validate(row))
    return contacts


def contact_to_dict(contact: Contact) -> dict[str, Any]:
    """Serialize a contact into the contact-book row shape."""
    return {
        "name": contact.name,
        "address": contact.address,
        "role": contact.role,
        "tags": sorted(contact.tags),
        "github_user": contact.identifier,
    }
