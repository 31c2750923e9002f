"""
Record predicates for keyword search over contacts.

A predicate is built once from a raw query and then tested against each
candidate record. Fields are evaluated in a fixed order and the first field
that matches decides the result:

  name -> address (if present) -> role (if present) -> each tag -> identifier

Three interchangeable strategies implement the same interface:
- KeywordMatchPredicate: whole-word containment OR similarity > threshold
- ExactKeywordPredicate: whole-word containment only
- SimilarKeywordPredicate: similarity > threshold only

Predicates hold no state besides the query, so one instance can be shared
across threads.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterable, Iterator, Optional, Protocol

from core.config import MatchingConfig
from matching.distance import similarity
from matching.text import contains_word_ignore_case


class SearchableRecord(Protocol):
    """Fields a record must expose to be searchable."""

    name: str
    address: Optional[str]
    role: Optional[str]
    tags: Iterable[Any]

    @property
    def identifier(self) -> str:
        ...


def _as_text(value: Any) -> Optional[str]:
    """Render a field value as text; None and blank strings count as absent."""
    if value is None:
        return None
    text = value if isinstance(value, str) else str(value)
    return text if text.strip() else None


def iter_field_values(record: SearchableRecord) -> Iterator[str]:
    """
    Yield the record's searchable values lazily, in evaluation order.

    Fields are read in MatchingConfig.FIELD_ORDER. Multi-valued fields
    (tags) yield each value in turn. Absent optional fields and blank values
    are skipped so they can never match. Missing attributes are treated as
    absent.
    """
    for field_name in MatchingConfig.FIELD_ORDER:
        raw = getattr(record, field_name, None)
        if field_name in MatchingConfig.MULTI_VALUE_FIELDS:
            values = raw or ()
        else:
            values = (raw,)
        for item in values:
            value = _as_text(item)
            if value is not None:
                yield value


def _any_field(record: SearchableRecord, field_matches: Callable[[str], bool]) -> bool:
    return any(field_matches(value) for value in iter_field_values(record))


class RecordPredicate(ABC):
    """Decides whether a record matches. Instances are callable."""

    @abstractmethod
    def test(self, record: SearchableRecord) -> bool:
        """Return True if the record matches."""

    def __call__(self, record: SearchableRecord) -> bool:
        return self.test(record)


@dataclass(frozen=True)
class KeywordMatchPredicate(RecordPredicate):
    """Matches when any field contains the query as a word or is similar to it."""

    query: str

    def field_matches(self, value: str) -> bool:
        return (
            contains_word_ignore_case(value, self.query)
            or similarity(self.query, value) > MatchingConfig.SIMILARITY_THRESHOLD
        )

    def test(self, record: SearchableRecord) -> bool:
        return _any_field(record, self.field_matches)


@dataclass(frozen=True)
class ExactKeywordPredicate(RecordPredicate):
    """Matches only on whole-word, case-insensitive containment."""

    query: str

    def field_matches(self, value: str) -> bool:
        return contains_word_ignore_case(value, self.query)

    def test(self, record: SearchableRecord) -> bool:
        return _any_field(record, self.field_matches)


@dataclass(frozen=True)
class SimilarKeywordPredicate(RecordPredicate):
    """Matches only on edit-distance similarity above the threshold."""

    query: str

    def field_matches(self, value: str) -> bool:
        return similarity(self.query, value) > MatchingConfig.SIMILARITY_THRESHOLD

    def test(self, record: SearchableRecord) -> bool:
        return _any_field(record, self.field_matches)


class MatchStrategy(str, Enum):
    """Available matching strategies."""
    FUZZY = "fuzzy"
    EXACT = "exact"
    SIMILAR = "similar"


_STRATEGIES = {
    MatchStrategy.FUZZY: KeywordMatchPredicate,
    MatchStrategy.EXACT: ExactKeywordPredicate,
    MatchStrategy.SIMILAR: SimilarKeywordPredicate,
}


def build_predicate(
    query: str,
    strategy: MatchStrategy | str = MatchingConfig.DEFAULT_STRATEGY,
) -> RecordPredicate:
    """
    Build a predicate for ``query`` using the named strategy.

    Raises:
        ValueError: If the strategy name is unknown.
    """
    try:
        resolved = MatchStrategy(strategy)
    except ValueError:
        choices = ", ".join(item.value for item in MatchStrategy)
        raise ValueError(f"Unknown match strategy: {strategy!r} (expected one of {choices})") from None
    return _STRATEGIES[resolved](query)
