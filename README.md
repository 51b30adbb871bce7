# patternbench

`patternbench` counts how many times a pattern occurs in a text. It provides six
ways to do this.

Three are direct string-search functions:

- `patternbench.boyer_moore.boyer_moore_count(text, pattern)` compares right to left and uses a simplified bad-character skip. After each match it moves past the whole pattern, so overlapping occurrences are **not** counted.
- `patternbench.knuth_morris_pratt.kmp_count(text, pattern)` is Knuth-Morris-Pratt and counts overlapping occurrences. It is built on `failure_table(pattern)`, which is also public.
- `patternbench.rabin_karp.rabin_karp_count(text, pattern)` uses a rolling hash with base 256 and modulus 101, and checks every candidate window. It counts overlapping occurrences. The same module has `case_variations(pattern)`, which lists every upper- and lower-case spelling of a pattern. Only ASCII letters vary.

Three are index structures. Each is built once from a text and then answers any
number of `count(pattern)` queries. All three derive from
`patternbench.base.SearchStructure`.

- `patternbench.suffix_array.SuffixArray(text)` keeps every suffix as a sorted string.
- `patternbench.suffix_tree.SuffixTree(text)` is an uncompressed suffix trie.
- `patternbench.fm_index.FMIndex(text)` uses a Burrows-Wheeler transform with backward search. `fm_index_count(text, pattern)` builds the index and queries it in one call. The building steps are also public: `build_suffix_array`, `build_bwt`, `build_first_occurrence` and `build_occurrences`.

All searches are case sensitive. An empty pattern behaves differently across the six:

- It yields 0 for the three functions and for `FMIndex`.
- `SuffixArray` and `SuffixTree` count it once for every suffix of the text.

`FMIndex` gives exact counts when the last character of the text occurs nowhere
else in it, for example a text ending in `$`.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Usage

```python
from patternbench.knuth_morris_pratt import kmp_count
from patternbench.boyer_moore import boyer_moore_count
from patternbench.fm_index import FMIndex

kmp_count("abracadabra", "abra")      # 2
boyer_moore_count("aaaa", "aa")       # 2 (no overlaps)
kmp_count("aaaa", "aa")               # 3

index = FMIndex("banana$")
index.count("ana")                    # 2
```

## Interactive prompts

`patternbench.prompts` reads the name of a file and a pattern from a text stream. By
default that stream is standard input.

- `ask_pattern()` returns the next word typed.
- `ask_file()` keeps asking until it is given an existing path, then returns that path as an absolute `Path`. A leading `~` is expanded to the home directory.
- `read_input()` asks for a file and then a pattern. It returns the file's text together with the pattern.

Typing `exit` at any prompt raises `SystemExit(0)`.

## What it does not do

The package has no command-line program. It does not time the methods, measure
their memory use, or write reports of any kind. It is a library, and you call its
functions and classes from your own code.