"""Text normalization with reversible position tracking.

Strings are split into user-perceived characters (extended grapheme clusters)
before any comparison, so a base letter plus combining marks, a surrogate-pair
character, or a ZWJ emoji sequence each count as one unit of edit distance.

Every retained unit remembers the index in the original string where it
began. A span over the normalized sequence can therefore be translated back
to a span over the raw input:

    >>> text = normalize("  h..e..l..l  ..o", MatchOptions())
    >>> "".join(text.sequence)
    'hell o'
    >>> text.denormalize(0, 4)
    (2, 10)
"""

import unicodedata
from dataclasses import dataclass
from typing import Iterator, List, Tuple

import regex

from fastfuzzy.options import MatchOptions, Segmenter

SYMBOLS = frozenset("`~!@#$%^&*()-=_+{}[]|\\;':\",./<>?")

_GRAPHEME = regex.compile(r"\X")


def segment_graphemes(text: str) -> List[str]:
    """Split text into extended grapheme clusters."""
    return _GRAPHEME.findall(text)


def segment_code_points(text: str) -> List[str]:
    """Split text into individual code points."""
    return list(text)


def is_symbol(unit: str) -> bool:
    return unit in SYMBOLS


def is_whitespace(unit: str) -> bool:
    return unit.isspace()


@dataclass(frozen=True)
class NormalizedText:
    """A comparison-ready grapheme sequence with an offset map into the original.

    Attributes:
        original: The raw input string, untouched.
        sequence: Normalized units in order.
        offset_map: Start offset in ``original`` of each unit of ``sequence``,
            followed by a sentinel equal to ``len(original)``.
    """

    original: str
    sequence: Tuple[str, ...]
    offset_map: Tuple[int, ...]

    @property
    def key(self) -> str:
        return "".join(self.sequence)

    def __len__(self) -> int:
        return len(self.sequence)

    def denormalize(self, index: int, length: int) -> Tuple[int, int]:
        """Map a ``(index, length)`` span over ``sequence`` onto ``original``."""
        start = self.offset_map[index]
        return start, self.offset_map[index + length] - start


def _pick_segmenter(options: MatchOptions) -> Segmenter:
    if options.segmenter is not None:
        return options.segmenter
    return segment_code_points if options.use_separated_unicode else segment_graphemes


def _iter_units(
    raw: str, options: MatchOptions, segment: Segmenter
) -> Iterator[Tuple[int, str]]:
    """Yield ``(offset, unit)`` for every unit that survives normalization."""
    offset = 0
    pending_space = None
    emitted = False
    for grapheme in segment(raw):
        start = offset
        offset += len(grapheme)

        unit = unicodedata.normalize("NFC", grapheme)
        if options.ignore_case:
            unit = unit.lower()
        if options.ignore_symbols and is_symbol(unit):
            continue

        if options.normalize_whitespace and is_whitespace(unit):
            # Runs collapse onto the first whitespace unit; leading runs vanish
            if emitted and pending_space is None:
                pending_space = start
            continue

        if pending_space is not None:
            yield pending_space, " "
            pending_space = None
        emitted = True
        yield start, unit
    # A pending space here is trailing whitespace and is dropped


def normalize(raw: str, options: MatchOptions, segment: Segmenter = None) -> NormalizedText:
    """Normalize ``raw`` and record where each retained unit came from.

    Args:
        raw: Input string.
        options: Controls case folding, symbol removal and whitespace handling.
        segment: Segmenter for this call; defaults to ``options.segmenter``,
            then to grapheme or code point segmentation.

    Returns:
        NormalizedText whose offset map ends with ``len(raw)``.
    """
    if segment is None:
        segment = _pick_segmenter(options)

    offsets = []
    units = []
    for offset, unit in _iter_units(raw, options, segment):
        offsets.append(offset)
        units.append(unit)
    offsets.append(len(raw))
    return NormalizedText(original=raw, sequence=tuple(units), offset_map=tuple(offsets))


def normalize_flat(raw: str, options: MatchOptions, segment: Segmenter = None) -> Tuple[str, ...]:
    """Normalize ``raw`` without building an offset map."""
    if segment is None:
        segment = _pick_segmenter(options)
    return tuple(unit for _, unit in _iter_units(raw, options, segment))


__all__ = [
    "NormalizedText",
    "SYMBOLS",
    "is_symbol",
    "is_whitespace",
    "normalize",
    "normalize_flat",
    "segment_code_points",
    "segment_graphemes",
]
