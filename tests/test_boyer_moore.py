import random

import pytest

from patternbench.boyer_moore import boyer_moore_count


@pytest.mark.parametrize(
    "text, pattern",
    [
        ("hello world", "world"),
        ("hello world", "o"),
        ("abcabcabc", "abc"),
        ("ABC abc Abc", "abc"),
        ("the quick brown fox", "xyz"),
        ("abc", "abc"),
        ("pattern at the end: needle", "needle"),
        ("needle at the start", "needle"),
    ],
)
def test_distinct_character_patterns_match_str_count(text, pattern):
    assert boyer_moore_count(text, pattern) == text.count(pattern)


@pytest.mark.parametrize("text", ["aaaa", "aaaaaa", "aaaaa"])
def test_matches_are_not_overlapping(text):
    assert boyer_moore_count(text, "aa") == text.count("aa")


@pytest.mark.parametrize(
    "text, pattern",
    [("", "abc"), ("abc", ""), ("", ""), ("ab", "abc")],
)
def test_degenerate_inputs_give_zero(text, pattern):
    assert boyer_moore_count(text, pattern) == 0


def test_random_texts_with_distinct_pattern_agree_with_str_count():
    rng = random.Random(1234)
    for _ in range(200):
        text = "".join(rng.choice("abcd") for _ in range(rng.randint(0, 40)))
        pattern = "".join(rng.sample("abcd", rng.randint(1, 3)))
        assert boyer_moore_count(text, pattern) == text.count(pattern)


def test_count_never_exceeds_possible_windows():
    rng = random.Random(99)
    for _ in range(100):
        text = "".join(rng.choice("ab") for _ in range(rng.randint(1, 30)))
        pattern = "".join(rng.choice("ab") for _ in range(rng.randint(1, 4)))
        result = boyer_moore_count(text, pattern)
        assert 0 <= result <= max(0, len(text) // len(pattern))