"""Core module for contact-matcher."""

from core.models import Contact, GitHubUser
from core.config import MatchingConfig
from core.records import RecordList

__all__ = [
    "Contact",
    "GitHubUser",
    "MatchingConfig",
    "RecordList",
]
