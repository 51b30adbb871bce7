"""Pattern counting with an FM-index built on a Burrows-Wheeler transform."""

from __future__ import annotations

from collections import Counter
from functools import cmp_to_key
from itertools import accumulate

from patternbench.base import SearchStructure


def build_suffix_array(text: str) -> list[int]:
    """Return the start positions of the suffixes of ``text`` in sorted order.

    Two suffixes are compared only over the length they share. When one is
    a prefix of the other they count as equal and keep their order of
    position. For a text whose last character occurs nowhere else this is
    the ordinary suffix array.
    """
    length = len(text)

    def compare(a: int, b: int) -> int:
        shared = length - max(a, b)
        left = text[a:a + shared]
        right = text[b:b + shared]
        return (left > right) - (left < right)

    return sorted(range(length), key=cmp_to_key(compare))


def build_bwt(text: str, suffix_array: list[int]) -> str:
    """Return the Burrows-Wheeler transform of ``text``.

    Each entry is the character just before the suffix, wrapping round to
    the last character of the text for the suffix that starts at 0.
    """
    return "".join(text[start - 1] if start else text[-1] for start in suffix_array)


def build_first_occurrence(bwt: str) -> dict[str, int]:
    """Return, for each character, how many characters of ``bwt`` sort before it."""
    counts = Counter(bwt)
    table: dict[str, int] = {}
    total = 0
    for char in sorted(counts):
        table[char] = total
        total += counts[char]
    return table


def build_occurrences(bwt: str) -> dict[str, list[int]]:
    """Return running counts of each character over the prefixes of ``bwt``.

    Entry ``i`` of a character's list is how many times it occurs in
    ``bwt[:i + 1]``.
    """
    return {
        char: list(accumulate(1 if current == char else 0 for current in bwt))
        for char in sorted(set(bwt))
    }


def _backward_search(
    pattern: str,
    first_occurrence: dict[str, int],
    occurrences: dict[str, list[int]],
) -> int:
    if not pattern:
        return 0

    last = pattern[-1]
    if last not in first_occurrence:
        return 0
    start = first_occurrence[last]
    end = start + occurrences[last][-1]

    for char in reversed(pattern[:-1]):
        if start >= end:
            break
        if char not in first_occurrence:
            return 0
        base = first_occurrence[char]
        counts = occurrences[char]
        start, end = base + (counts[start - 1] if start > 0 else 0), base + counts[end - 1]

    return end - start if start < end else 0


def fm_index_count(text: str, pattern: str) -> int:
    """Build an FM-index over ``text`` and count ``pattern`` in it once.

    Suited to a single query; for repeated queries build an ``FMIndex``.
    An empty pattern yields 0.
    """
    if not pattern:
        return 0
    bwt = build_bwt(text, build_suffix_array(text))
    return _backward_search(pattern, build_first_occurrence(bwt), build_occurrences(bwt))


class FMIndex(SearchStructure):
    """An FM-index: BWT of the text with its first-occurrence and rank tables.

    Queries walk the pattern right to left, narrowing a range of sorted
    suffixes, so a search costs time proportional to the pattern length.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self.suffix_array = build_suffix_array(text)
        self.bwt = build_bwt(text, self.suffix_array)
        self.first_occurrence = build_first_occurrence(self.bwt)
        self.occurrences = build_occurrences(self.bwt)

    def count(self, pattern: str) -> int:
        """Return how many times ``pattern`` occurs; an empty pattern yields 0."""
        return _backward_search(pattern, self.first_occurrence, self.occurrences)