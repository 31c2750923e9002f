"""
Contract tests for contact models and contact.schema.json.

Ensures that contact-book rows and the model agree on shape, and that
the model normalizes optional fields the way the matcher expects.
"""

import json
from pathlib import Path

import jsonschema
import pytest
from pydantic import ValidationError

from core.models import Contact, GitHubUser
from core.records import RecordList
from storage.json_store import contact_to_dict


SCHEMAS_DIR = Path(__file__).parent.parent.parent / "schemas"
CONTACT_SCHEMA = json.loads((SCHEMAS_DIR / "contact.schema.json").read_text())


# ============================================================================
# Contact Schema Tests
# ============================================================================

class TestContactSchema:
    """Contact rows must conform to contact.schema.json."""

    @pytest.mark.contract
    def test_fixture_rows_against_schema(self, contact_rows):
        for row in contact_rows:
            jsonschema.validate(row, CONTACT_SCHEMA)

    @pytest.mark.contract
    def test_serialized_contact_against_schema(self, alice: Contact):
        jsonschema.validate(contact_to_dict(alice), CONTACT_SCHEMA)

    @pytest.mark.contract
    def test_model_example_against_schema(self):
        for example in Contact.model_config["json_schema_extra"]["examples"]:
            jsonschema.validate(example, CONTACT_SCHEMA)
            Contact.model_validate(example)

    @pytest.mark.contract
    @pytest.mark.parametrize(
        "row",
        [
            {"github_user": "alicet"},
            {"name": "Alice", "github_user": {"login": "alicet"}},
            {"name": "Alice", "github_user": "alicet", "tags": "friend"},
            {"name": "Alice", "github_user": "alicet", "phone": "123"},
            {"name": "", "github_user": "alicet"},
            {"name": "   ", "github_user": "alicet"},
        ],
    )
    def test_invalid_rows_rejected(self, row):
        with pytest.raises(jsonschema.ValidationError):
            jsonschema.validate(row, CONTACT_SCHEMA)


# ============================================================================
# Contact Model Tests
# ============================================================================

class TestContactModel:
    """Normalization performed by the Contact model."""

    @pytest.mark.contract
    def test_blank_optionals_become_none(self):
        contact = Contact(name="Bob", address="   ", role="", github_user="bob")
        assert contact.address is None
        assert contact.role is None

    @pytest.mark.contract
    def test_tags_are_stripped_and_deduplicated(self):
        contact = Contact(name="Bob", tags=[" vip ", "vip", "", "friend"], github_user="bob")
        assert contact.tags == frozenset({"vip", "friend"})

    @pytest.mark.contract
    def test_bare_string_tags_rejected(self):
        with pytest.raises(ValidationError, match="tags must be a collection of strings"):
            Contact(name="Bob", tags="friend", github_user="bob")

    @pytest.mark.contract
    def test_single_tag_in_a_list_is_kept_whole(self):
        contact = Contact(name="Bob", tags=["friend"], github_user="bob")
        assert contact.tags == frozenset({"friend"})

    @pytest.mark.contract
    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="name must not be blank"):
            Contact(name="   ", github_user="bob")

    @pytest.mark.contract
    def test_identifier_renders_github_username(self, alice: Contact):
        assert alice.identifier == "alicet"
        assert str(alice.github_user) == "alicet"
        assert Contact(name="Bob", github_user="bob").github_user == GitHubUser(username="bob")

    @pytest.mark.contract
    def test_contacts_are_frozen(self, alice: Contact):
        with pytest.raises(ValidationError):
            alice.role = "manager"

    @pytest.mark.contract
    def test_name_and_handle_are_required(self):
        with pytest.raises(ValidationError):
            Contact(github_user="bob")
        with pytest.raises(ValidationError):
            Contact(name="Bob")
        with pytest.raises(ValidationError):
            Contact(name="Bob", github_user="")


# ============================================================================
# Record Container Tests
# ============================================================================

class TestRecordList:
    """Ordered container handed to the matcher."""

    @pytest.mark.contract
    def test_add_preserves_order(self, alice, bob, carol):
        records = RecordList()
        for contact in (alice, bob, carol):
            records.add(contact)
        assert records.records == (alice, bob, carol)
        assert len(records) == 3
        assert records[1] is bob
        assert list(records) == [alice, bob, carol]

    @pytest.mark.contract
    def test_records_view_is_read_only(self, contacts):
        records = RecordList(contacts)
        view = records.records
        assert isinstance(view, tuple)
        records.add(contacts[0])
        assert len(view) == 3
        assert len(records) == 4

    @pytest.mark.contract
    def test_clear_returns_same_list(self, contacts):
        records = RecordList(contacts)
        assert records.clear() is records
        assert len(records) == 0
        assert records.records == ()
