"""Pattern counting with string-search algorithms and text indexes, plus interactive prompts."""

__version__ = "0.1.0"
__all__ = [
    "base",
    "boyer_moore",
    "knuth_morris_pratt",
    "rabin_karp",
    "suffix_array",
    "suffix_tree",
    "fm_index",
    "prompts",
]