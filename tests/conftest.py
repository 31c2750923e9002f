"""
Shared pytest fixtures and configuration for contact-matcher tests.
"""

import json
from pathlib import Path

import pytest

from core.models import Contact, GitHubUser


# ============================================================================
# Fixtures: Contacts
# ============================================================================

@pytest.fixture
def alice() -> Contact:
    """Contact with a role and tag but no address."""
    return Contact(
        name="Alice Tan",
        address=None,
        role="engineer",
        tags=["friend"],
        github_user=GitHubUser(username="alicet"),
    )


@pytest.fixture
def bob() -> Contact:
    """Contact with an address and no role."""
    return Contact(
        name="Bob Lee",
        address="Blk 30 Geylang Street 29",
        tags=["colleague", "football"],
        github_user="boblee",
    )


@pytest.fixture
def carol() -> Contact:
    """Contact with only the required fields."""
    return Contact(name="Carol Li", github_user="cli-dev")


@pytest.fixture
def contacts(alice: Contact, bob: Contact, carol: Contact) -> list[Contact]:
    """Contacts in insertion order."""
    return [alice, bob, carol]


# ============================================================================
# Fixtures: Contact book files
# ============================================================================

@pytest.fixture
def contact_rows() -> list[dict]:
    """Raw contact-book rows matching contact.schema.json."""
    return [
        {
            "name": "Alice Tan",
            "address": None,
            "role": "engineer",
            "tags": ["friend"],
            "github_user": {"username": "alicet"},
        },
        {
            "name": "Bob Lee",
            "address": "Blk 30 Geylang Street 29",
            "tags": ["colleague", "football"],
            "github_user": "boblee",
        },
        {
            "name": "Carol Li",
            "github_user": "cli-dev",
        },
    ]


@pytest.fixture
def contacts_file(tmp_path: Path, contact_rows: list[dict]) -> Path:
    """Contact book written to a temporary JSON file."""
    path = tmp_path / "contacts.json"
    path.write_text(json.dumps({"contacts": contact_rows}), encoding="utf-8")
    return path
