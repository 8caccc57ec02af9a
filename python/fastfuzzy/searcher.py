"""Searcher for repeated fuzzy searches over the same candidates.

Normalizing candidates and building the trie happens once, in the
constructor and in :meth:`Searcher.add`; every later search reuses it.

Warning:
    This class is NOT thread-safe. ``add()`` mutates the index that
    ``search()`` reads, so concurrent use of one instance must be serialized
    by the caller (for example with a ``threading.Lock``), or each thread
    should build its own Searcher.
"""

import dataclasses
import logging
import warnings
from typing import Any, Iterable, List, Optional

import polars as pl

from fastfuzzy.engine import build_trie, create_candidates, search_core
from fastfuzzy.normalize import normalize_flat
from fastfuzzy.options import NORMALIZATION_FIELDS, MatchOptions, resolve_options
from fastfuzzy.trie import Trie

logger = logging.getLogger(__name__)


class Searcher:
    """
    A reusable fuzzy search index.

    Searcher normalizes its candidates once and indexes them in a trie, so
    repeated queries only pay for scoring. Results are identical to calling
    :func:`fastfuzzy.search` with the same candidates and options.

    Options that shape the normalized keys (``ignore_case``,
    ``ignore_symbols``, ``normalize_whitespace``, ``use_separated_unicode``
    ``key_selector`` and ``segmenter``) are fixed at construction. The
    remaining options can be overridden per search, either with a
    MatchOptions object or with keyword arguments.

    Warning:
        This class is NOT thread-safe. Serialize ``add()`` and ``search()``
        calls externally, or create separate instances for each thread.

    Example:
        >>> searcher = Searcher(["hello", "help", "goodbye"])
        >>> searcher.search("hello")
        ['hello', 'help']
        >>> searcher.add("yellow")
        >>> searcher.search("hello", threshold=0.8)
        ['hello', 'yellow']
    """

    def __init__(
        self,
        candidates: Iterable[Any] = (),
        options: Optional[MatchOptions] = None,
        **overrides,
    ):
        """
        Create a Searcher.

        Args:
            candidates: Initial strings or objects to index.
            options: Base options; defaults apply when omitted.
            **overrides: Individual MatchOptions fields.
        """
        self._options = resolve_options(options, **overrides)
        self._items: List[Any] = []
        self._trie = Trie()
        self.add(*candidates)

    @classmethod
    def from_series(cls, series: "pl.Series", **overrides) -> "Searcher":
        """
        Create a Searcher from a Polars Series of strings.

        Nulls are skipped, as in :func:`fastfuzzy.polars_ext.match_series`.

        Example:
            >>> names = pl.Series(["Apple Inc", "Microsoft Corp", "Google LLC"])
            >>> Searcher.from_series(names).search("microsoft")
            ['Microsoft Corp']
        """
        items = [str(x) for x in series.to_list() if x is not None]
        return cls(items, **overrides)

    @property
    def options(self) -> MatchOptions:
        return self._options

    def add(self, *candidates: Any) -> None:
        """
        Index more candidates.

        Raises:
            KeySelectorError: If a candidate does not yield string keys. No
                candidate from this call is indexed in that case.
        """
        new = create_candidates(candidates, self._options, start=len(self._items))
        build_trie(new, self._trie)
        self._items.extend(candidates)
        logger.debug(
            "indexed %d items (%d keys); searcher now holds %d items",
            len(candidates),
            len(new),
            len(self._items),
        )

    def search(
        self, term: str, options: Optional[MatchOptions] = None, **overrides
    ) -> List[Any]:
        """
        Search the index.

        Call-level settings win over the constructor's, field by field:
        every field of ``options`` replaces the Searcher's value, and
        keyword overrides replace both.

        Args:
            term: Query string.
            options: MatchOptions for this search only.
            **overrides: MatchOptions fields for this search only.

        Returns:
            Items, or MatchRecord objects when ``return_match_data`` is set.
        """
        if not isinstance(term, str):
            raise TypeError(f"term must be a string, got {type(term).__name__}")

        requested = {}
        if options is not None:
            requested.update(
                (field.name, getattr(options, field.name))
                for field in dataclasses.fields(options)
            )
        requested.update(overrides)

        fixed = sorted(
            name
            for name in NORMALIZATION_FIELDS & requested.keys()
            if requested[name] != getattr(self._options, name)
        )
        if fixed:
            warnings.warn(
                f"{', '.join(fixed)} cannot change after the Searcher is built; "
                "pass them to the constructor instead",
                UserWarning,
                stacklevel=2,
            )
        for name in NORMALIZATION_FIELDS:
            requested.pop(name, None)

        merged = self._options.merged(**requested)
        return search_core(normalize_flat(term, self._options), self._trie, merged)

    def batch_search(
        self, queries: Iterable[str], options: Optional[MatchOptions] = None, **overrides
    ) -> List[List[Any]]:
        """Search for several queries, returning one result list per query."""
        return [self.search(q, options, **overrides) for q in queries]

    def search_series(self, queries: "pl.Series", **overrides) -> "pl.DataFrame":
        """
        Search for each query in a Series, returning a DataFrame of matches.

        Returns:
            DataFrame with columns:
            - query_idx: Index of the query in the input Series
            - query: The query string
            - match: The raw key the result matched on
            - score: Similarity score
            - match_index, match_length: Matched span within ``match``

        Example:
            >>> searcher = Searcher.from_series(pl.Series(["apple", "banana"]))
            >>> searcher.search_series(pl.Series(["appel", None]))
        """
        overrides["return_match_data"] = True
        rows = []
        for query_idx, query in enumerate(queries.to_list()):
            if query is None:
                continue
            for record in self.search(str(query), **overrides):
                rows.append({
                    "query_idx": query_idx,
                    "query": str(query),
                    "match": record.original,
                    "score": record.score,
                    "match_index": record.match.index,
                    "match_length": record.match.length,
                })

        schema = {
            "query_idx": pl.Int64,
            "query": pl.Utf8,
            "match": pl.Utf8,
            "score": pl.Float64,
            "match_index": pl.Int64,
            "match_length": pl.Int64,
        }
        return pl.DataFrame(rows, schema=schema)

    def get_items(self) -> List[Any]:
        """Return the indexed items in insertion order."""
        return self._items.copy()

    def __len__(self) -> int:
        """Return the number of indexed items."""
        return len(self._items)

    def __repr__(self) -> str:
        return f"Searcher(size={len(self._items)}, depth={self._trie.depth})"


__all__ = ["Searcher"]
