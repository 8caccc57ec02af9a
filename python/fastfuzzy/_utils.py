"""Internal utilities for fastfuzzy."""

from typing import Union

from fastfuzzy.enums import SortKind
from fastfuzzy.exceptions import ValidationError

# Accepted spellings, mapped to the canonical enum value
_SORT_ALIASES = {
    "best_match": SortKind.BEST_MATCH,
    "bestmatch": SortKind.BEST_MATCH,
    "insert_order": SortKind.INSERT_ORDER,
    "insertorder": SortKind.INSERT_ORDER,
}


def normalize_sort_kind(sort_by: Union[str, SortKind]) -> SortKind:
    """Convert a sort name to SortKind, validating string values.

    Args:
        sort_by: Either a SortKind value or a string name such as
            ``"best_match"`` or ``"insertOrder"``.

    Returns:
        The matching SortKind.

    Raises:
        ValidationError: If the name is not recognized.
        TypeError: If sort_by is not a string or SortKind.

    Example:
        >>> normalize_sort_kind("insertOrder")
        <SortKind.INSERT_ORDER: 'insert_order'>
    """
    if isinstance(sort_by, SortKind):
        return sort_by

    if isinstance(sort_by, str):
        kind = _SORT_ALIASES.get(sort_by.lower())
        if kind is not None:
            return kind
        raise ValidationError(
            f"Unknown sort_by: '{sort_by}'. "
            f"Valid options: {sorted(k.value for k in SortKind)}"
        )

    raise TypeError(f"sort_by must be str or SortKind enum, got {type(sort_by).__name__}")


__all__ = ["normalize_sort_kind"]
