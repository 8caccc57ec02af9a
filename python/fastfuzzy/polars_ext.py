"""Polars Series operations for fastfuzzy.

Functions in This Module
------------------------
- ``match_series()``: Match every query of a Series against a target Series

Example Usage
-------------
>>> import polars as pl
>>> import fastfuzzy as ff
>>>
>>> queries = pl.Series(["apple", "banana"])
>>> targets = pl.Series(["appel", "banan", "cherry"])
>>> ff.match_series(queries, targets, threshold=0.7)

See Also
--------
- ``fastfuzzy.expr``: Polars expression namespace for column operations
- ``fastfuzzy.Searcher.search_series``: Search a Series against a prebuilt index
"""

import polars as pl

from fastfuzzy.searcher import Searcher


def match_series(
    query_series: "pl.Series",
    target_series: "pl.Series",
    **overrides,
) -> "pl.DataFrame":
    """
    Match each value in query_series against all values in target_series.

    The targets are indexed once; every query reuses the index. Null
    queries are skipped and null targets never match.

    Args:
        query_series: Series of query strings
        target_series: Series of target strings to match against
        **overrides: MatchOptions fields (threshold, use_damerau, ...)

    Returns:
        DataFrame with columns: query_idx, query, target_idx, target, score,
        ordered by query_idx and then by rank within each query.

    Example:
        >>> queries = pl.Series(["apple", "banana"])
        >>> targets = pl.Series(["appel", "banan", "cherry"])
        >>> result = match_series(queries, targets, threshold=0.7)
    """
    targets = target_series.to_list()
    overrides.pop("key_selector", None)
    overrides.pop("return_match_data", None)
    # Items are target positions so results carry target_idx directly
    searcher = Searcher(
        [i for i, target in enumerate(targets) if target is not None],
        key_selector=lambda i: str(targets[i]),
        **overrides,
    )

    rows = []
    for query_idx, query in enumerate(query_series.to_list()):
        if query is None:
            continue
        for record in searcher.search(str(query), return_match_data=True):
            rows.append({
                "query_idx": query_idx,
                "query": str(query),
                "target_idx": record.item,
                "target": record.original,
                "score": record.score,
            })

    schema = {
        "query_idx": pl.Int64,
        "query": pl.Utf8,
        "target_idx": pl.Int64,
        "target": pl.Utf8,
        "score": pl.Float64,
    }
    return pl.DataFrame(rows, schema=schema)


__all__ = ["match_series"]
