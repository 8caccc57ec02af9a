"""Single-shot matching functions.

These normalize and index their inputs on every call. When the same
candidates are searched repeatedly, build a :class:`fastfuzzy.Searcher`
once instead.
"""

from typing import Any, Iterable, List, Optional, Union

from fastfuzzy.engine import (
    Candidate,
    MatchRecord,
    build_trie,
    create_candidates,
    search_core,
    to_match_record,
)
from fastfuzzy.normalize import normalize, normalize_flat
from fastfuzzy.options import MatchOptions, resolve_options
from fastfuzzy.scoring import score


def _require_str(name: str, value: Any) -> None:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a string, got {type(value).__name__}")


def fuzzy(
    term: str,
    candidate: str,
    options: Optional[MatchOptions] = None,
    **overrides,
) -> Union[float, MatchRecord]:
    """
    Score how well ``term`` matches ``candidate``.

    Args:
        term: Query string.
        candidate: String to search within.
        options: Base options; defaults apply when omitted.
        **overrides: Individual MatchOptions fields, e.g. ``use_damerau=False``.

    Returns:
        The score in [0, 1], or a MatchRecord when ``return_match_data`` is set.

    Example:
        >>> fuzzy("hello", "hello there")
        1.0
        >>> fuzzy("abcd", "acbd", use_damerau=False)
        0.5
        >>> fuzzy("hello", "  h..e..l..l  ..o", return_match_data=True).match
        Span(index=2, length=10)
    """
    _require_str("term", term)
    _require_str("candidate", candidate)
    opts = resolve_options(options, **overrides)
    term_units = normalize_flat(term, opts)

    if not opts.return_match_data:
        return score(
            term_units, normalize_flat(candidate, opts), opts.use_damerau, opts.use_sellers
        ).score

    normalized = normalize(candidate, opts)
    result = score(term_units, normalized.sequence, opts.use_damerau, opts.use_sellers)
    return to_match_record(Candidate(0, 0, candidate, normalized), result)


def search(
    term: str,
    candidates: Iterable[Any],
    options: Optional[MatchOptions] = None,
    **overrides,
) -> List[Any]:
    """
    Find the candidates matching ``term``.

    Args:
        term: Query string.
        candidates: Strings, or arbitrary objects together with a
            ``key_selector`` returning a string or list of strings.
        options: Base options; defaults apply when omitted.
        **overrides: Individual MatchOptions fields.

    Returns:
        Matching items (or MatchRecord objects when ``return_match_data`` is
        set), ordered according to ``sort_by``.

    Raises:
        KeySelectorError: If a candidate does not yield string keys.

    Example:
        >>> search("item", ["items", "iterator", "itemize", "item", "temperature"])
        ['item', 'items', 'itemize', 'iterator', 'temperature']
    """
    _require_str("term", term)
    opts = resolve_options(options, **overrides)
    trie = build_trie(create_candidates(candidates, opts))
    return search_core(normalize_flat(term, opts), trie, opts)


__all__ = ["fuzzy", "search"]
