"""Polars expression namespace for fuzzy string matching.

This module registers a `.fuzzy` namespace on Polars expressions, enabling
fastfuzzy scoring directly in Polars expression contexts. Nulls stay null.

Warning:
    Each row is scored in Python via map_elements. For searching many
    queries against one candidate list, build a Searcher once and use
    Searcher.search_series() or fastfuzzy.polars_ext.match_series().

Example:
    >>> import polars as pl
    >>> import fastfuzzy  # Registers the namespace
    >>>
    >>> df = pl.DataFrame({"name": ["John", "Jon", "Jane"]})
    >>> df.with_columns(
    ...     is_match=pl.col("name").fuzzy.is_match("john", threshold=0.75)
    ... )
"""

from typing import List

import polars as pl

from fastfuzzy._core import fuzzy
from fastfuzzy.searcher import Searcher


@pl.api.register_expr_namespace("fuzzy")
class FuzzyExprNamespace:
    """
    Fuzzy matching namespace for Polars expressions.

    Access via `.fuzzy` on any string expression. Keyword arguments are
    MatchOptions fields.
    """

    def __init__(self, expr: pl.Expr):
        self._expr = expr

    def score(self, term: str, **overrides) -> pl.Expr:
        """
        Score ``term`` against every value of this column.

        Returns:
            Float64 expression with scores in [0, 1].

        Example:
            >>> df.with_columns(score=pl.col("name").fuzzy.score("john"))
        """
        overrides["return_match_data"] = False
        return self._expr.map_elements(
            lambda value: fuzzy(term, str(value), **overrides),
            return_dtype=pl.Float64,
        )

    def is_match(self, term: str, threshold: float = 0.6, **overrides) -> pl.Expr:
        """
        Check whether ``term`` matches each value at or above ``threshold``.

        Example:
            >>> df.filter(pl.col("name").fuzzy.is_match("john", threshold=0.75))
        """
        return self.score(term, **overrides) >= threshold

    def best_match(self, choices: List[str], **overrides) -> pl.Expr:
        """
        Find the best matching choice for each value of this column.

        The choices are indexed once and reused for every row.

        Returns:
            Utf8 expression with the best choice, or null when none passes
            the threshold.

        Example:
            >>> categories = ["Electronics", "Clothing", "Food"]
            >>> df.with_columns(
            ...     category=pl.col("raw_category").fuzzy.best_match(categories)
            ... )
        """
        overrides["return_match_data"] = False
        searcher = Searcher(choices, **overrides)

        def find_best(value):
            results = searcher.search(str(value))
            return results[0] if results else None

        return self._expr.map_elements(find_best, return_dtype=pl.Utf8)


__all__ = ["FuzzyExprNamespace"]
