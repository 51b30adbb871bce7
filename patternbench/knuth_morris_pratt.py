"""Knuth-Morris-Pratt pattern counting."""

from __future__ import annotations


def failure_table(pattern: str) -> list[int]:
    """Return the KMP failure function of ``pattern``.

    Entry ``i`` is the length of the longest proper prefix of
    ``pattern[:i + 1]`` that is also a suffix of it.
    """
    table = [0] * len(pattern)
    border = 0
    for i, char in enumerate(pattern[1:], start=1):
        while border > 0 and char != pattern[border]:
            border = table[border - 1]
        if char == pattern[border]:
            border += 1
        table[i] = border
    return table


def kmp_count(text: str, pattern: str) -> int:
    """Count (possibly overlapping) occurrences of ``pattern`` in ``text``.

    The search is case sensitive and never moves back in the text.
    An empty pattern yields 0.
    """
    if not pattern:
        return 0

    table = failure_table(pattern)
    matched = 0
    occurrences = 0
    for char in text:
        while matched > 0 and char != pattern[matched]:
            matched = table[matched - 1]
        if char == pattern[matched]:
            matched += 1
        if matched == len(pattern):
            occurrences += 1
            matched = table[matched - 1]
    return occurrences