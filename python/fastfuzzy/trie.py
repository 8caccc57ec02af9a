"""Prefix tree over normalized candidate keys.

Searching the trie walks it depth first while extending the edit-distance
table one column per edge, so every candidate sharing a prefix (``item``,
``items``, ``itemize``) reuses the columns computed for that prefix.

Each node records ``depth``, the longest remaining suffix of any key passing
through it. From a column and a depth we can bound the best score any key in
the subtree could still reach; subtrees whose bound falls below the threshold
are skipped.

Warning:
    Tries are append-only and NOT thread-safe. Serialize inserts and searches
    externally when sharing one across threads.
"""

import logging
from typing import Any, Dict, Iterator, List, NamedTuple, Optional, Sequence, Tuple

from fastfuzzy.options import MatchOptions
from fastfuzzy.scoring import (
    EMPTY_SPAN,
    ScoreResult,
    Span,
    advance,
    first_column,
    sellers_score,
    walk_back,
    whole_score,
)

logger = logging.getLogger(__name__)


class TrieNode:
    """A trie node; ``candidates`` holds payloads whose key ends here."""

    __slots__ = ("children", "depth", "candidates")

    def __init__(self):
        self.children: Dict[str, "TrieNode"] = {}
        self.depth = 0
        self.candidates: List[Any] = []


def lowest_reachable_distance(column: Sequence[int], depth: int) -> int:
    """
    Lower bound on the last-row value of any column at most ``depth`` steps on.

    An alignment reaching the last row later must cross the current column at
    some row i, and with only ``depth`` columns left it still needs at least
    ``m - i - depth`` vertical (insertion) steps.
    """
    last = len(column) - 1
    return min(value + max(0, last - row - depth) for row, value in enumerate(column))


def can_reach_threshold(
    depth: int,
    column: Sequence[int],
    denominator: int,
    threshold: float,
    best_so_far: Optional[int] = None,
) -> bool:
    """
    Whether any key in a subtree ``depth`` units deep below ``column`` may pass.

    ``best_so_far`` is the lowest last-row value already seen on the path;
    in substring mode a key's score never drops below what its prefix
    reached.
    """
    if denominator <= 0:
        return True
    best = lowest_reachable_distance(column, depth)
    if best_so_far is not None and best_so_far < best:
        best = best_so_far
    return (denominator - best) / denominator >= threshold


class _Frame(NamedTuple):
    node: TrieNode
    column: List[int]
    unit: Optional[str]
    parent: Optional["_Frame"]
    position: int
    best_value: int
    best_position: int


def _path_columns(frame: _Frame) -> List[List[int]]:
    columns = []
    while frame is not None:
        columns.append(frame.column)
        frame = frame.parent
    columns.reverse()
    return columns


class Trie:
    """
    Trie of normalized keys mapping to arbitrary payloads.

    Warning:
        This class is NOT thread-safe.

    Example:
        >>> trie = Trie()
        >>> trie.insert(tuple("item"), "item")
        >>> trie.insert(tuple("items"), "items")
        >>> [payload for payload, _ in trie.matches(tuple("item"), MatchOptions())]
        ['item', 'items']
    """

    def __init__(self):
        self.root = TrieNode()
        self._size = 0

    def insert(self, sequence: Sequence[str], payload: Any) -> None:
        """Insert ``payload`` under the key ``sequence``."""
        remaining = len(sequence)
        node = self.root
        node.depth = max(node.depth, remaining)
        for unit in sequence:
            remaining -= 1
            child = node.children.get(unit)
            if child is None:
                child = node.children[unit] = TrieNode()
            child.depth = max(child.depth, remaining)
            node = child
        node.candidates.append(payload)
        self._size += 1

    def __len__(self) -> int:
        return self._size

    @property
    def depth(self) -> int:
        return self.root.depth

    def matches(
        self,
        term: Sequence[str],
        options: MatchOptions,
        with_spans: bool = False,
    ) -> Iterator[Tuple[Any, ScoreResult]]:
        """
        Yield ``(payload, result)`` for every key scoring at least the threshold.

        Args:
            term: Normalized query units.
            options: Supplies threshold, cost model and ``max_recursions``.
            with_spans: Recover matched spans; otherwise spans are empty.
        """
        m = len(term)
        threshold = options.threshold
        sellers = options.use_sellers
        damerau = options.use_damerau
        limit = options.max_recursions

        visited = pruned = truncated = 0
        stack = [_Frame(self.root, first_column(m), None, None, 0, m, 0)]
        while stack:
            frame = stack.pop()
            node = frame.node
            visited += 1

            if node.candidates:
                result = self._score_frame(frame, m, sellers, with_spans)
                if result.score >= threshold:
                    for payload in node.candidates:
                        yield payload, result

            if not node.children:
                continue
            if limit is not None and frame.position >= limit:
                truncated += 1
                continue

            position = frame.position + 1
            before = frame.parent.column if damerau and frame.parent is not None else None
            best_so_far = frame.best_value if sellers and frame.position else None
            for unit, child in node.children.items():
                if m:
                    reach = child.depth + 1
                    denominator = m if sellers else max(m, frame.position + reach)
                    if not can_reach_threshold(
                        reach, frame.column, denominator, threshold, best_so_far
                    ):
                        pruned += 1
                        continue
                column = advance(
                    term, frame.column, unit, position, sellers, before, frame.unit
                )
                if frame.position == 0 or column[m] < frame.best_value:
                    best_value, best_position = column[m], position
                else:
                    best_value, best_position = frame.best_value, frame.best_position
                stack.append(
                    _Frame(child, column, unit, frame, position, best_value, best_position)
                )

        logger.debug(
            "trie search visited=%d pruned=%d truncated=%d", visited, pruned, truncated
        )

    @staticmethod
    def _score_frame(frame: _Frame, m: int, sellers: bool, with_spans: bool) -> ScoreResult:
        n = frame.position
        if m == 0:
            return ScoreResult(1.0, EMPTY_SPAN)
        if n == 0:
            return ScoreResult(0.0, EMPTY_SPAN)
        if not sellers:
            return ScoreResult(whole_score(frame.column[m], m, n), Span(0, n))
        span = EMPTY_SPAN
        if with_spans:
            span = walk_back(_path_columns(frame), frame.best_position)
        return ScoreResult(sellers_score(frame.best_value, m), span)


__all__ = ["Trie", "TrieNode", "can_reach_threshold", "lowest_reachable_distance"]
