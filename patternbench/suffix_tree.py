"""Pattern counting over an uncompressed suffix trie."""

from __future__ import annotations

from patternbench.base import SearchStructure


class _Node:
    """A trie node holding the start of every suffix that passes through it."""

    __slots__ = ("starts", "children")

    def __init__(self) -> None:
        self.starts: list[int] = []
        self.children: dict[str, _Node] = {}


class SuffixTree(SearchStructure):
    """A trie of all suffixes of a text, one character per edge.

    Each suffix is inserted as a path from the root, and every node on
    that path, the root included, records the suffix's start position.
    The number of positions at the node reached by a pattern is the
    number of its occurrences. Building costs quadratic time and memory.
    """

    def __init__(self, text: str) -> None:
        self._root = _Node()
        for start in range(len(text)):
            node = self._root
            node.starts.append(start)
            for char in text[start:]:
                node = node.children.setdefault(char, _Node())
                node.starts.append(start)

    def count(self, pattern: str) -> int:
        """Return how many times ``pattern`` occurs, overlaps included.

        The match is case sensitive. An empty pattern counts every suffix
        of the text; a pattern that leaves the trie counts nothing.
        """
        node = self._root
        for char in pattern:
            child = node.children.get(char)
            if child is None:
                return 0
            node = child
        return len(node.starts)