"""Search engine: candidate preparation, scoring, deduplication and ranking."""

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from fastfuzzy.enums import SortKind
from fastfuzzy.exceptions import KeySelectorError
from fastfuzzy.normalize import NormalizedText, normalize
from fastfuzzy.options import KeySelector, MatchOptions
from fastfuzzy.scoring import ScoreResult, Span, score
from fastfuzzy.trie import Trie


@dataclass(frozen=True)
class Candidate:
    """One searchable key of one source item."""

    item_index: int
    key_index: int
    item: Any
    normalized: NormalizedText


@dataclass(frozen=True)
class MatchRecord:
    """
    A match returned when ``return_match_data`` is set.

    Attributes:
        item: The source item.
        original: The raw key the item matched on.
        key: The normalized key, joined into a string.
        score: Similarity in [0, 1].
        match: ``(index, length)`` of the matched text within ``original``.
    """

    item: Any
    original: str
    key: str
    score: float
    match: Span


def extract_keys(item: Any, key_selector: Optional[KeySelector] = None) -> Tuple[str, ...]:
    """
    Return the keys an item is searched by.

    Raises:
        KeySelectorError: If the selector (or the item itself, when no
            selector is given) is neither a string nor a list of strings.
    """
    key = item if key_selector is None else key_selector(item)
    if isinstance(key, str):
        return (key,)
    if isinstance(key, (list, tuple)) and all(isinstance(k, str) for k in key):
        return tuple(key)
    raise KeySelectorError(item, key)


def create_candidates(
    items: Iterable[Any], options: MatchOptions, start: int = 0
) -> List[Candidate]:
    """Normalize every key of every item, numbering items from ``start``."""
    candidates = []
    for item_index, item in enumerate(items, start=start):
        for key_index, key in enumerate(extract_keys(item, options.key_selector)):
            candidates.append(
                Candidate(item_index, key_index, item, normalize(key, options))
            )
    return candidates


def build_trie(candidates: Iterable[Candidate], trie: Optional[Trie] = None) -> Trie:
    if trie is None:
        trie = Trie()
    for candidate in candidates:
        trie.insert(candidate.normalized.sequence, candidate)
    return trie


def _scan(
    term: Sequence[str], candidates: Iterable[Candidate], options: MatchOptions
) -> Iterator[Tuple[Candidate, ScoreResult]]:
    for candidate in candidates:
        result = score(
            term, candidate.normalized.sequence, options.use_damerau, options.use_sellers
        )
        if result.score >= options.threshold:
            yield candidate, result


def to_match_record(candidate: Candidate, result: ScoreResult) -> MatchRecord:
    normalized = candidate.normalized
    index, length = normalized.denormalize(result.match.index, result.match.length)
    return MatchRecord(
        item=candidate.item,
        original=normalized.original,
        key=normalized.key,
        score=result.score,
        match=Span(index, length),
    )


def search_core(
    term: Sequence[str],
    source: Union[Trie, Sequence[Candidate]],
    options: MatchOptions,
) -> List[Any]:
    """
    Score, filter, deduplicate and order candidates for a normalized term.

    Args:
        term: Normalized query units.
        source: A Trie of candidates, or a plain sequence of candidates
            that is scanned one by one.
        options: Resolved options for this search.

    Returns:
        Items, or MatchRecord objects when ``options.return_match_data``.
    """
    if isinstance(source, Trie):
        matches = source.matches(term, options, with_spans=options.return_match_data)
    else:
        matches = _scan(term, source, options)

    term_length = len(term)
    best = {}
    for candidate, result in matches:
        rank = (
            -result.score,
            candidate.key_index,
            abs(len(candidate.normalized) - term_length),
        )
        current = best.get(candidate.item_index)
        if current is None or rank < current[0]:
            best[candidate.item_index] = (rank, candidate, result)

    if options.sort_by is SortKind.INSERT_ORDER:
        ordered = sorted(best.values(), key=lambda entry: entry[1].item_index)
    else:
        ordered = sorted(
            best.values(),
            key=lambda entry: (
                -entry[2].score,
                abs(len(entry[1].normalized) - term_length),
                entry[1].item_index,
            ),
        )

    if options.return_match_data:
        return [to_match_record(candidate, result) for _, candidate, result in ordered]
    return [candidate.item for _, candidate, _ in ordered]


__all__ = [
    "Candidate",
    "MatchRecord",
    "build_trie",
    "create_candidates",
    "extract_keys",
    "search_core",
    "to_match_record",
]
