"""Storage collaborators: contact-book loading."""

from storage.json_store import contact_to_dict, load_contacts

__all__ = ["load_contacts", "contact_to_dict"]
