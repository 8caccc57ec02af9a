"""Matching options shared by every public entry point."""

import dataclasses
import numbers
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Union

from fastfuzzy._utils import normalize_sort_kind
from fastfuzzy.enums import SortKind
from fastfuzzy.exceptions import ValidationError

KeySelector = Callable[[Any], Union[str, List[str]]]
Segmenter = Callable[[str], List[str]]

# Fields that shape the normalized keys, fixed once an index is built
NORMALIZATION_FIELDS = frozenset({
    "ignore_case",
    "ignore_symbols",
    "normalize_whitespace",
    "use_separated_unicode",
    "key_selector",
    "segmenter",
})


@dataclass(frozen=True)
class MatchOptions:
    """
    Immutable matching configuration.

    Every field has a default; derive variants with :meth:`merged`, which
    overrides field by field so that later (call-level) values win over
    earlier (constructor-level) ones.

    Attributes:
        threshold: Minimum score a candidate needs to be returned. Values
            outside [0, 1] are accepted: 0 keeps everything, above 1 keeps
            nothing.
        ignore_case: Lowercase both sides before comparing.
        ignore_symbols: Drop ASCII punctuation and symbols.
        normalize_whitespace: Collapse whitespace runs to a single space and
            strip both ends.
        use_damerau: Count an adjacent transposition as one edit.
        use_sellers: Score against the best-matching substring of the
            candidate rather than the whole candidate.
        use_separated_unicode: Compare code points instead of grapheme
            clusters.
        return_match_data: Return MatchRecord objects instead of bare items.
        key_selector: Maps a candidate to its key (or list of keys).
            Defaults to the identity, which requires string candidates.
        segmenter: Splits a string into comparison units. Overrides the
            default grapheme (or code point) segmentation; the pieces must
            concatenate back to the input so offsets stay valid.
        sort_by: Result ordering.
        max_recursions: Maximum trie depth explored by indexed search.
    """

    threshold: float = 0.6
    ignore_case: bool = True
    ignore_symbols: bool = True
    normalize_whitespace: bool = True
    use_damerau: bool = True
    use_sellers: bool = True
    use_separated_unicode: bool = False
    return_match_data: bool = False
    key_selector: Optional[KeySelector] = None
    segmenter: Optional[Segmenter] = None
    sort_by: SortKind = SortKind.BEST_MATCH
    max_recursions: Optional[int] = None

    def __post_init__(self):
        if isinstance(self.threshold, bool) or not isinstance(self.threshold, numbers.Real):
            raise ValidationError(
                f"threshold must be a number, got {type(self.threshold).__name__}"
            )
        if self.max_recursions is not None:
            if isinstance(self.max_recursions, bool) or not isinstance(
                self.max_recursions, numbers.Integral
            ):
                raise ValidationError(
                    f"max_recursions must be an integer or None, "
                    f"got {type(self.max_recursions).__name__}"
                )
            if self.max_recursions < 0:
                raise ValidationError(
                    f"max_recursions must be non-negative, got {self.max_recursions}"
                )
        if self.key_selector is not None and not callable(self.key_selector):
            raise ValidationError("key_selector must be callable")
        if self.segmenter is not None and not callable(self.segmenter):
            raise ValidationError("segmenter must be callable")
        object.__setattr__(self, "sort_by", normalize_sort_kind(self.sort_by))

    def merged(self, **overrides) -> "MatchOptions":
        """Return a copy with the given fields replaced.

        Raises:
            TypeError: If an override names an unknown field.
        """
        if not overrides:
            return self
        return dataclasses.replace(self, **overrides)


DEFAULT_OPTIONS = MatchOptions()


def resolve_options(options: Optional[MatchOptions] = None, **overrides) -> MatchOptions:
    """Merge defaults, an explicit options object and keyword overrides."""
    base = DEFAULT_OPTIONS if options is None else options
    return base.merged(**overrides)


__all__ = ["MatchOptions", "DEFAULT_OPTIONS", "NORMALIZATION_FIELDS", "resolve_options"]
