"""Fuzzy keyword matching for contact records."""

from matching.distance import levenshtein_distance, similarity
from matching.filtering import filter_records, filter_records_parallel
from matching.predicates import (
    ExactKeywordPredicate,
    KeywordMatchPredicate,
    MatchStrategy,
    RecordPredicate,
    SearchableRecord,
    SimilarKeywordPredicate,
    build_predicate,
    iter_field_values,
)
from matching.text import contains_word_ignore_case

__all__ = [
    "levenshtein_distance",
    "similarity",
    "contains_word_ignore_case",
    "RecordPredicate",
    "SearchableRecord",
    "KeywordMatchPredicate",
    "ExactKeywordPredicate",
    "SimilarKeywordPredicate",
    "MatchStrategy",
    "build_predicate",
    "iter_field_values",
    "filter_records",
    "filter_records_parallel",
]
