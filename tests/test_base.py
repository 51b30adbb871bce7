import pytest

from patternbench.base import SearchStructure
from patternbench.boyer_moore import boyer_moore_count
from patternbench.knuth_morris_pratt import kmp_count


class _KmpIndex(SearchStructure):
    def __init__(self, text):
        self.text = text

    def count(self, pattern):
        return kmp_count(self.text, pattern)


class _BoyerMooreIndex(SearchStructure):
    def __init__(self, text):
        self.text = text

    def count(self, pattern):
        return boyer_moore_count(self.text, pattern)


def test_base_cannot_be_instantiated():
    with pytest.raises(TypeError):
        SearchStructure()


def test_subclass_without_count_cannot_be_instantiated():
    class Incomplete(SearchStructure):
        pass

    with pytest.raises(TypeError):
        Incomplete()

    complete = _BoyerMooreIndex("banana band")
    assert boyer_moore_count("banana band", "ban") == 2
    assert complete.count("ban") == 2
    assert isinstance(complete, SearchStructure)


def test_subclass_answers_through_base_interface():
    structures: list[SearchStructure] = [_KmpIndex("abcabc"), _KmpIndex("xyz")]
    results = [structure.count("abc") for structure in structures]
    assert results == [2, 0]
    assert [kmp_count("abcabc", "abc"), kmp_count("xyz", "abc")] == [2, 0]


def test_different_structures_agree_through_base_interface():
    text = "the cat sat on the mat with the hat"
    structures: list[SearchStructure] = [_KmpIndex(text), _BoyerMooreIndex(text)]
    assert [structure.count("the") for structure in structures] == [3, 3]
    assert [structure.count("at") for structure in structures] == [4, 4]
    assert kmp_count(text, "the") == boyer_moore_count(text, "the") == 3
    assert kmp_count(text, "at") == boyer_moore_count(text, "at") == 4