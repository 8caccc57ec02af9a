"""
fastfuzzy - Fuzzy substring search with a trie-backed index

A pure-Python library for approximate string matching. Queries are scored
against the best-matching substring of each candidate (Sellers' variant of
Levenshtein or Damerau-Levenshtein distance) after grapheme-aware
normalization.

Example usage:
    >>> import fastfuzzy as ff

    # Score a single pair
    >>> ff.fuzzy("hello", "hello there")
    1.0

    # One-off search over a list
    >>> ff.search("item", ["items", "iterator", "itemize", "item", "temperature"])
    ['item', 'items', 'itemize', 'iterator', 'temperature']

    # Build the index once, search many times
    >>> searcher = ff.Searcher(["hello", "help", "goodbye"])
    >>> searcher.search("helo")
    ['help', 'hello']
"""

import logging
from importlib.metadata import version as _get_version

from fastfuzzy._core import fuzzy, search
from fastfuzzy.engine import Candidate, MatchRecord
from fastfuzzy.enums import SortKind
from fastfuzzy.exceptions import FastFuzzyError, KeySelectorError, ValidationError
from fastfuzzy.normalize import NormalizedText, normalize, normalize_flat
from fastfuzzy.options import MatchOptions
from fastfuzzy.scoring import ScoreResult, Span
from fastfuzzy.searcher import Searcher

# Register the .fuzzy expression namespace
import fastfuzzy.expr  # noqa: E402,F401
from fastfuzzy.polars_ext import match_series  # noqa: E402

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = _get_version("fastfuzzy")
__all__ = [
    # Version
    "__version__",
    # Custom exceptions
    "FastFuzzyError",
    "ValidationError",
    "KeySelectorError",
    # Options
    "MatchOptions",
    "SortKind",
    # Result types
    "MatchRecord",
    "ScoreResult",
    "Span",
    "Candidate",
    "NormalizedText",
    # Matching
    "fuzzy",
    "search",
    "Searcher",
    # Normalization
    "normalize",
    "normalize_flat",
    # Polars integration
    "match_series",
]
