"""Edit-distance scoring between a query and a candidate.

The default formulation is Sellers' variant of Levenshtein: the first row of
the dynamic-programming table is all zeros, so the query may align with any
contiguous substring of the candidate and a query contained verbatim in a
longer candidate scores 1.0. Turning ``use_sellers`` off gives classical
whole-string distance instead.

The table is evaluated one column per candidate unit with :func:`advance`.
Single-pair scoring builds all columns at once; the trie search builds them
incrementally so that candidates sharing a prefix share its columns.

Runtime is O(m*n) for a query of m units and a candidate of n units.
"""

from dataclasses import dataclass
from typing import List, NamedTuple, Optional, Sequence


class Span(NamedTuple):
    """A ``(index, length)`` span."""

    index: int
    length: int


@dataclass(frozen=True)
class ScoreResult:
    """Score in [0, 1] and the matched span in normalized-sequence coordinates."""

    score: float
    match: Span


EMPTY_SPAN = Span(0, 0)


def first_column(term_length: int) -> List[int]:
    """Column 0: cost of producing the first i query units from nothing."""
    return list(range(term_length + 1))


def advance(
    term: Sequence[str],
    previous: List[int],
    unit: str,
    position: int,
    use_sellers: bool = True,
    before: Optional[List[int]] = None,
    previous_unit: Optional[str] = None,
) -> List[int]:
    """
    Compute the column for the candidate unit at ``position`` (1-based).

    Args:
        term: Query units.
        previous: Column ``position - 1``.
        unit: Candidate unit for this column.
        position: Column number; only used for row 0 in whole-string mode.
        use_sellers: Seed row 0 with zeros instead of ``position``.
        before: Column ``position - 2``. Supplying it (with ``previous_unit``)
            enables Damerau transpositions.
        previous_unit: Candidate unit for column ``position - 1``.

    Returns:
        The new column, ``len(term) + 1`` entries.
    """
    column = [0 if use_sellers else position]
    transpose = before is not None and previous_unit is not None
    for i in range(1, len(term) + 1):
        query_unit = term[i - 1]
        cost = 0 if query_unit == unit else 1
        best = column[i - 1] + 1  # insertion
        value = previous[i] + 1  # deletion
        if value < best:
            best = value
        value = previous[i - 1] + cost  # substitution
        if value < best:
            best = value
        if (
            transpose
            and i > 1
            and query_unit == previous_unit
            and term[i - 2] == unit
        ):
            value = before[i - 2] + 1
            if value < best:
                best = value
        column.append(best)
    return column


def build_columns(
    term: Sequence[str],
    candidate: Sequence[str],
    use_damerau: bool = True,
    use_sellers: bool = True,
) -> List[List[int]]:
    """Build every column of the table for a single pair."""
    columns = [first_column(len(term))]
    for j, unit in enumerate(candidate, start=1):
        if use_damerau and j > 1:
            before, previous_unit = columns[j - 2], candidate[j - 2]
        else:
            before, previous_unit = None, None
        columns.append(
            advance(term, columns[j - 1], unit, j, use_sellers, before, previous_unit)
        )
    return columns


def best_end(columns: Sequence[Sequence[int]]) -> int:
    """Leftmost column (1 or later) holding the minimum of the last row."""
    last = len(columns[0]) - 1
    best_position = 1
    best_value = columns[1][last]
    for position in range(2, len(columns)):
        value = columns[position][last]
        if value < best_value:
            best_value = value
            best_position = position
    return best_position


def walk_back(columns: Sequence[Sequence[int]], end: int) -> Span:
    """
    Recover the matched span ending at column ``end``.

    Walks upward from the row above the last, moving one column left unless
    the current cell is strictly cheaper than its left neighbour, and stops
    at column 1. Runtime is O(m).
    """
    start = end
    for row in range(len(columns[0]) - 2, 0, -1):
        if start <= 1:
            break
        if columns[start][row] >= columns[start - 1][row]:
            start -= 1
    return Span(start - 1, end - start + 1)


def sellers_score(value: int, term_length: int) -> float:
    return (term_length - value) / term_length


def whole_score(value: int, term_length: int, candidate_length: int) -> float:
    longest = max(term_length, candidate_length)
    return (longest - value) / longest


def score(
    term: Sequence[str],
    candidate: Sequence[str],
    use_damerau: bool = True,
    use_sellers: bool = True,
) -> ScoreResult:
    """
    Score ``term`` against ``candidate``.

    Args:
        term: Normalized query units.
        candidate: Normalized candidate units.
        use_damerau: Count adjacent transpositions as a single edit.
        use_sellers: Match against the best substring of the candidate.

    Returns:
        ScoreResult with the span in candidate-sequence coordinates.

    Example:
        >>> score("abcd", "acbd", use_damerau=False).score
        0.5
        >>> score("abcd", "acbd").score
        0.75
        >>> score("ell", "hello")
        ScoreResult(score=1.0, match=Span(index=1, length=3))
    """
    m, n = len(term), len(candidate)
    if m == 0:
        return ScoreResult(1.0, EMPTY_SPAN)
    if n == 0:
        return ScoreResult(0.0, EMPTY_SPAN)

    columns = build_columns(term, candidate, use_damerau, use_sellers)
    if not use_sellers:
        return ScoreResult(whole_score(columns[n][m], m, n), Span(0, n))

    end = best_end(columns)
    return ScoreResult(sellers_score(columns[end][m], m), walk_back(columns, end))


def levenshtein_sellers(term: Sequence[str], candidate: Sequence[str]) -> ScoreResult:
    """Sellers' substring score with plain Levenshtein costs."""
    return score(term, candidate, use_damerau=False)


def damerau_levenshtein_sellers(term: Sequence[str], candidate: Sequence[str]) -> ScoreResult:
    """Sellers' substring score with Damerau-Levenshtein costs."""
    return score(term, candidate, use_damerau=True)


__all__ = [
    "EMPTY_SPAN",
    "ScoreResult",
    "Span",
    "advance",
    "best_end",
    "build_columns",
    "damerau_levenshtein_sellers",
    "first_column",
    "levenshtein_sellers",
    "score",
    "sellers_score",
    "walk_back",
    "whole_score",
]
