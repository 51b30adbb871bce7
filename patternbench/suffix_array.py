"""Pattern counting over a sorted array of suffixes."""

from __future__ import annotations

from bisect import bisect_left

from patternbench.base import SearchStructure


class SuffixArray(SearchStructure):
    """Every suffix of a text, kept as a string, in lexicographic order.

    Building sorts all suffixes, which costs quadratic memory for the
    stored strings. A query finds the first suffix not smaller than the
    pattern by binary search, then counts the suffixes from there on that
    start with the pattern.
    """

    def __init__(self, text: str) -> None:
        self._suffixes = sorted(text[start:] for start in range(len(text)))

    def count(self, pattern: str) -> int:
        """Return how many suffixes start with ``pattern``.

        Occurrences may overlap and the match is case sensitive. An empty
        pattern is a prefix of every suffix, so it counts each of them.
        """
        first = bisect_left(self._suffixes, pattern)
        hits = 0
        for suffix in self._suffixes[first:]:
            if not suffix.startswith(pattern):
                break
            hits += 1
        return hits