"""Simplified Boyer-Moore search using the bad-character heuristic."""

from __future__ import annotations


def boyer_moore_count(text: str, pattern: str) -> int:
    """Count occurrences of ``pattern`` in ``text`` with a simplified Boyer-Moore.

    The pattern is compared right to left. After a full match the window
    moves past the whole match, so matches are counted without overlap.
    On a mismatch the window is shifted using the rightmost occurrence of
    the mismatched text character anywhere in the pattern; when that
    character is absent the window jumps by the full pattern length.
    The search is case sensitive. An empty text or pattern yields 0.
    """
    pattern_len = len(pattern)
    text_len = len(text)
    if not pattern_len or not text_len:
        return 0

    hits = 0
    shift = 0
    while shift <= text_len - pattern_len:
        i = pattern_len - 1
        while i >= 0 and pattern[i] == text[shift + i]:
            i -= 1

        if i < 0:
            hits += 1
            shift += pattern_len
            continue

        rightmost = pattern.rfind(text[shift + i])
        if rightmost < 0:
            shift += pattern_len
        else:
            shift += max(1, i - rightmost)
    return hits