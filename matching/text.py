"""Whole-word, case-insensitive containment."""

from __future__ import annotations


def _tokens(value: str) -> list[str]:
    return [token.lower() for token in value.split()]


def contains_word_ignore_case(sentence: str, word: str) -> bool:
    """
    Return True if ``word`` appears as a whole whitespace-delimited token.

    Examples:
      contains_word_ignore_case("Alice Li", "li")   -> True
      contains_word_ignore_case("Alice Li", "Ali")  -> False
      contains_word_ignore_case("Alice Li", "")     -> False

    A multi-word ``word`` matches a contiguous run of tokens
    ("ang mo kio" inside "Blk 5 Ang Mo Kio Ave 3").
    """
    needle = _tokens(word)
    if not needle:
        return False
    haystack = _tokens(sentence)
    width = len(needle)
    for start in range(len(haystack) - width + 1):
        if haystack[start:start + width] == needle:
            return True
    return False
