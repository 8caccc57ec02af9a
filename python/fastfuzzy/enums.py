"""Enums for fastfuzzy API."""

from enum import Enum


class SortKind(str, Enum):
    """Result orderings for search operations.

    String values are accepted anywhere a SortKind is expected.

    Example:
        >>> from fastfuzzy import SortKind, search
        >>> search("item", ["items", "item"], sort_by=SortKind.INSERT_ORDER)
        ['items', 'item']
    """

    BEST_MATCH = "best_match"
    """Highest score first, then closest key length, then insertion order"""

    INSERT_ORDER = "insert_order"
    """Order in which candidates were supplied, regardless of score"""


__all__ = ["SortKind"]
