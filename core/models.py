"""
Core Pydantic models for contact-matcher.

Design principles:
- Records are frozen: matching only ever reads them
- Optional fields are Optional, never sentinel strings
- Tags are an unordered set; order never affects matching
"""

from typing import FrozenSet, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ============================================================================
# Contact
# ============================================================================

class GitHubUser(BaseModel):
    """A GitHub handle attached to a contact."""
    model_config = ConfigDict(frozen=True)

    username: str = Field(min_length=1)

    def __str__(self) -> str:
        return self.username


class Contact(BaseModel):
    """
    One entry in the contact book.

    Example:
      name = "Alice Tan"
      address = None  # not recorded
      role = "engineer"
      tags = {"friend"}
      github_user = GitHubUser(username="alicet")
    """
    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "examples": [
                {
                    "name": "Alice Tan",
                    "address": None,
                    "role": "engineer",
                    "tags": ["friend"],
                    "github_user": {"username": "alicet"},
                }
            ]
        },
    )

    name: str = Field(min_length=1)
    address: Optional[str] = None
    role: Optional[str] = None
    tags: FrozenSet[str] = Field(default_factory=frozenset)
    github_user: GitHubUser

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        """Reject whitespace-only names."""
        if not v.strip():
            raise ValueError("name must not be blank")
        return v

    @field_validator("address", "role", mode="before")
    @classmethod
    def blank_to_none(cls, v: Optional[str]) -> Optional[str]:
        """Treat blank optional strings as absent."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("tags", mode="before")
    @classmethod
    def clean_tags(cls, v):
        """Strip tag names and drop blanks."""
        if v is None:
            return frozenset()
        if isinstance(v, str):
            raise ValueError("tags must be a collection of strings")
        return frozenset(str(tag).strip() for tag in v if str(tag).strip())

    @field_validator("github_user", mode="before")
    @classmethod
    def coerce_github_user(cls, v):
        """Accept a bare username string."""
        if isinstance(v, str):
            return {"username": v}
        return v

    @property
    def identifier(self) -> str:
        """Stable text form of the GitHub handle."""
        return str(self.github_user)
