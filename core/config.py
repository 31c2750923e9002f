"""
Default matching configuration for contact-matcher.

These settings are fixed constants. The similarity threshold in particular
is part of the matching contract: changing it changes which contacts a
query surfaces, so it is not exposed as a CLI flag.
"""

from typing import Tuple


class MatchingConfig:
    """
    Immutable matching settings.
    """

    # ========================================================================
    # Field Matching
    # ========================================================================

    # A field matches by similarity only when strictly above this value.
    SIMILARITY_THRESHOLD: float = 0.5
    """Similarity cut-off (strict greater-than)."""

    FIELD_ORDER: Tuple[str, ...] = ("name", "address", "role", "tags", "identifier")
    """Order in which record fields are evaluated. First match wins."""

    MULTI_VALUE_FIELDS: Tuple[str, ...] = ("tags",)
    """Fields in FIELD_ORDER holding a collection; each value is checked on its own."""

    DEFAULT_STRATEGY: str = "fuzzy"
    """Strategy used when the caller does not pick one (fuzzy|exact|similar)."""

    # ========================================================================
    # Bulk Scans
    # ========================================================================

    MAX_PARALLEL_WORKERS: int = 8
    """Upper bound on threads used by filter_records_parallel."""

    # ========================================================================
    # CLI / Storage
    # ========================================================================

    DEFAULT_CONTACTS_PATH: str = "contacts.json"
    """Contact book read by the CLI when --contacts is omitted."""

    @classmethod
    def validate(cls) -> None:
        """
        Validate configuration at startup.

        Raises:
            AssertionError: If any constraint is violated.
        """
        assert (
            0.0 <= cls.SIMILARITY_THRESHOLD < 1.0
        ), "SIMILARITY_THRESHOLD must be in [0, 1)"

        assert (
            cls.FIELD_ORDER[0] == "name" and cls.FIELD_ORDER[-1] == "identifier"
        ), "FIELD_ORDER must start with name and end with identifier"

        assert (
            set(cls.MULTI_VALUE_FIELDS) <= set(cls.FIELD_ORDER)
        ), "MULTI_VALUE_FIELDS must be listed in FIELD_ORDER"

        assert (
            cls.DEFAULT_STRATEGY in {"fuzzy", "exact", "similar"}
        ), "DEFAULT_STRATEGY must be one of fuzzy, exact, similar"

        assert (
            cls.MAX_PARALLEL_WORKERS >= 1
        ), "MAX_PARALLEL_WORKERS must be ≥1"


# Validate at module import time
MatchingConfig.validate()
