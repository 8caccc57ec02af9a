"""Tests for text normalization and offset mapping.

This module tests how fastfuzzy turns raw strings into grapheme sequences,
including case folding, symbol removal, whitespace collapsing and the
offset map that translates normalized spans back to the raw string.
"""

import pytest

from fastfuzzy import MatchOptions, normalize, normalize_flat
from fastfuzzy.normalize import is_symbol, is_whitespace, segment_graphemes

DEFAULTS = MatchOptions()


class TestNormalizeDefaults:
    """Tests for normalization with default options."""

    def test_symbols_and_whitespace(self):
        text = normalize("  h..e..l..l  ..o", DEFAULTS)
        assert text.key == "hell o"
        assert text.sequence == ("h", "e", "l", "l", " ", "o")

    def test_offset_map(self):
        text = normalize("  h..e..l..l  ..o", DEFAULTS)
        assert text.offset_map == (2, 5, 8, 11, 12, 16, 17)

    def test_denormalize(self):
        text = normalize("  h..e..l..l  ..o", DEFAULTS)
        assert text.denormalize(0, 4) == (2, 10)
        assert text.denormalize(5, 1) == (16, 1)

    def test_lowercases(self):
        assert normalize_flat("HeLLo \u00c0B", DEFAULTS) == tuple("hello \u00e0b")

    def test_mixed_whitespace_collapses(self):
        text = normalize("a\t\n b", DEFAULTS)
        assert text.sequence == ("a", " ", "b")
        assert text.offset_map == (0, 1, 4, 5)

    def test_whitespace_around_dropped_symbols_is_one_run(self):
        text = normalize("a . b", DEFAULTS)
        assert text.sequence == ("a", " ", "b")
        assert text.offset_map == (0, 1, 4, 5)

    def test_trailing_whitespace_stripped_from_sequence_only(self):
        text = normalize("hello  ", DEFAULTS)
        assert text.key == "hello"
        assert text.original == "hello  "
        assert text.offset_map == (0, 1, 2, 3, 4, 7)

    def test_empty_string(self):
        text = normalize("", DEFAULTS)
        assert text.sequence == ()
        assert text.offset_map == (0,)

    def test_only_whitespace_and_symbols(self):
        text = normalize("  !? ", DEFAULTS)
        assert text.sequence == ()
        assert text.offset_map == (5,)


class TestNormalizeOptions:
    """Tests for each normalization option toggled off."""

    def test_ignore_case_off(self):
        assert normalize_flat("HeLLo", DEFAULTS.merged(ignore_case=False)) == tuple("HeLLo")

    def test_ignore_symbols_off(self):
        assert normalize_flat("h.e", DEFAULTS.merged(ignore_symbols=False)) == ("h", ".", "e")

    def test_normalize_whitespace_off(self):
        options = DEFAULTS.merged(normalize_whitespace=False)
        assert normalize_flat(" a  b", options) == (" ", "a", " ", " ", "b")

    def test_all_off_is_identity(self):
        options = MatchOptions(ignore_case=False, ignore_symbols=False, normalize_whitespace=False)
        raw = " Hi, there!\t"
        text = normalize(raw, options)
        assert text.key == raw
        assert text.offset_map == tuple(range(len(raw) + 1))

    @pytest.mark.parametrize("symbol", list("`~!@#$%^&*()-=_+{}[]|\\;':\",./<>?"))
    def test_every_symbol_is_dropped(self, symbol):
        assert normalize_flat(f"a{symbol}b", DEFAULTS) == ("a", "b")

    def test_non_ascii_punctuation_is_kept(self):
        assert normalize_flat("a\u00bfb", DEFAULTS) == ("a", "\u00bf", "b")


class TestGraphemes:
    """Tests for grapheme-cluster segmentation."""

    def test_combining_mark_is_one_unit(self):
        text = normalize("cafe\u0301", DEFAULTS)
        assert len(text) == 4
        assert text.offset_map == (0, 1, 2, 3, 5)

    def test_composed_and_decomposed_compare_equal(self):
        assert normalize_flat("cafe\u0301", DEFAULTS) == normalize_flat("caf\u00e9", DEFAULTS)

    def test_zwj_emoji_is_one_unit(self):
        family = "\U0001F468\u200d\U0001F469\u200d\U0001F467"
        assert len(normalize_flat(f"a{family}b", DEFAULTS)) == 3

    def test_flag_is_one_unit(self):
        assert len(segment_graphemes("\U0001F1FA\U0001F1F8")) == 1

    def test_separated_unicode_splits_code_points(self):
        options = DEFAULTS.merged(use_separated_unicode=True)
        assert normalize_flat("cafe\u0301", options) == ("c", "a", "f", "e", "\u0301")

    def test_crlf_is_one_whitespace_unit(self):
        text = normalize("a\r\nb", DEFAULTS)
        assert text.sequence == ("a", " ", "b")
        assert text.offset_map == (0, 1, 3, 4)

    def test_custom_segmenter(self):
        text = normalize("abcd", DEFAULTS, segment=lambda s: [s[:2], s[2:]])
        assert text.sequence == ("ab", "cd")
        assert text.offset_map == (0, 2, 4)


class TestFlatMatchesMapped:
    """normalize_flat must agree with normalize().sequence."""

    @pytest.mark.parametrize(
        "raw",
        ["", "  x  ", "Hello, World!", "a\u0301 b\u0302", "tab\there", "..."],
    )
    def test_same_sequence(self, raw):
        assert normalize_flat(raw, DEFAULTS) == normalize(raw, DEFAULTS).sequence


class TestPredicates:
    def test_is_symbol(self):
        assert is_symbol("!")
        assert not is_symbol("a")
        assert not is_symbol("!!")

    def test_is_whitespace(self):
        assert is_whitespace(" ")
        assert is_whitespace("\r\n")
        assert not is_whitespace("a")
