"""Common interface for preprocessed pattern-search structures."""

from __future__ import annotations

from abc import ABC, abstractmethod


class SearchStructure(ABC):
    """A text index that counts occurrences of a pattern.

    Subclasses do their preprocessing of the text when they are built.
    After that, ``count`` answers any number of queries against that text.
    """

    @abstractmethod
    def count(self, pattern: str) -> int:
        """Return how many times ``pattern`` occurs in the indexed text."""