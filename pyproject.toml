[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "patternbench"
version = "0.1.0"
description = "Exact pattern counting with classic string-search algorithms and text indexes."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "pattern matching",
    "string search",
    "boyer-moore",
    "knuth-morris-pratt",
    "rabin-karp",
    "suffix array",
    "suffix tree",
    "fm-index",
    "burrows-wheeler",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Indexing",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["patternbench"]

[tool.hatch.build.targets.sdist]
include = ["patternbench", "tests", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
