"""Rabin-Karp pattern counting with a rolling hash."""

from __future__ import annotations

from itertools import product

HASH_BASE = 256
HASH_MODULUS = 101


def case_variations(pattern: str) -> list[str]:
    """Return every upper/lower-case spelling of ``pattern``.

    Only ASCII letters vary; other characters are kept as they are.
    Variations are ordered with the lower-case choice first at each
    position, earlier positions varying slowest. The original pattern
    is included when it is one of the spellings.
    """
    options = [
        (char.lower(), char.upper()) if char.isascii() and char.isalpha() else (char,)
        for char in pattern
    ]
    return ["".join(choice) for choice in product(*options)]


def rabin_karp_count(text: str, pattern: str) -> int:
    """Count exact, possibly overlapping occurrences of ``pattern`` in ``text``.

    A rolling hash with base 256 modulo 101 picks candidate windows,
    each of which is then checked against the pattern. The search is
    case sensitive. An empty pattern, or one longer than the text, yields 0.
    """
    pattern_len = len(pattern)
    text_len = len(text)
    if pattern_len == 0 or text_len < pattern_len:
        return 0

    high_factor = pow(HASH_BASE, pattern_len - 1, HASH_MODULUS)
    pattern_hash = 0
    window_hash = 0
    for p_char, t_char in zip(pattern, text):
        pattern_hash = (HASH_BASE * pattern_hash + ord(p_char)) % HASH_MODULUS
        window_hash = (HASH_BASE * window_hash + ord(t_char)) % HASH_MODULUS

    last_start = text_len - pattern_len
    matches = 0
    for start in range(last_start + 1):
        if pattern_hash == window_hash and text.startswith(pattern, start):
            matches += 1
        if start < last_start:
            outgoing = ord(text[start]) * high_factor
            incoming = ord(text[start + pattern_len])
            window_hash = (HASH_BASE * (window_hash - outgoing) + incoming) % HASH_MODULUS
    return matches