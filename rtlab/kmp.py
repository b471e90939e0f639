"""Knuth-Morris-Pratt substring search."""

from __future__ import annotations

from typing import List, Sequence


def build_next(pattern: Sequence) -> List[int]:
    """Failure table: entry j is where matching resumes after a mismatch at j.

    The first entry is -1, meaning "advance the text instead".
    """
    table = [0] * len(pattern)
    if not pattern:
        return table
    table[0] = -1
    i, j = -1, 0
    while j < len(pattern) - 1:
        if i == -1 or pattern[j] == pattern[i]:
            i += 1
            j += 1
            table[j] = i
        else:
            i = table[i]
    return table


def kmp_search(text: Sequence, pattern: Sequence) -> int:
    """Index of the first occurrence of ``pattern`` in ``text``, or -1."""
    if not pattern:
        return 0
    table = build_next(pattern)
    i = j = 0
    while i < len(text) and j < len(pattern):
        if j == -1 or text[i] == pattern[j]:
            i += 1
            j += 1
        else:
            j = table[j]
    return i - j if j == len(pattern) else -1