"""Levenshtein edit distance and the normalized similarity derived from it."""

from __future__ import annotations


def levenshtein_distance(left: str, right: str) -> int:
    """
    Count the single-character inserts, deletes and substitutions turning
    ``left`` into ``right``.

    Rows run over the longer string and columns over the shorter one, so
    only two rows of len(shorter) + 1 cells are ever held.
    """
    longer, shorter = (left, right) if len(left) >= len(right) else (right, left)
    if not shorter:
        return len(longer)

    row = list(range(len(shorter) + 1))
    for i, long_ch in enumerate(longer, start=1):
        diagonal, row[0] = row[0], i
        for j, short_ch in enumerate(shorter, start=1):
            above = row[j]
            row[j] = min(
                above + 1,
                row[j - 1] + 1,
                diagonal + (long_ch != short_ch),
            )
            diagonal = above
    return row[-1]


def similarity(left: str, right: str) -> float:
    """
    Score in [0, 1]: 1 minus the distance over the longer length.

    "Jon" vs "John" scores 0.75. Two empty strings score 1.0. Letters are
    compared as-is, so "BOB" vs "bob" scores 0.0.
    """
    max_length = max(len(left), len(right))
    if max_length == 0:
        return 1.0
    return (max_length - levenshtein_distance(left, right)) / max_length
