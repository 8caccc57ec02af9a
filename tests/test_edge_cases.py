"""Edge case tests for fastfuzzy: Unicode, degenerate inputs and limits."""

import pytest

import fastfuzzy as ff


class TestUnicode:
    """Tests for grapheme-aware matching."""

    def test_emoji_counts_as_one_edit(self):
        family = "\U0001F468\u200d\U0001F469\u200d\U0001F467"
        assert ff.fuzzy(f"ab{family}cd", "abxcd", use_sellers=False) == pytest.approx(0.8)

    def test_separated_unicode_counts_code_points(self):
        family = "\U0001F468\u200d\U0001F469\u200d\U0001F467"
        grapheme_score = ff.fuzzy("abcd", f"ab{family}cd", use_sellers=False)
        code_point_score = ff.fuzzy(
            "abcd", f"ab{family}cd", use_sellers=False, use_separated_unicode=True
        )
        assert grapheme_score > code_point_score

    def test_decomposed_accent_matches_composed(self):
        assert ff.fuzzy("caf\u00e9", "cafe\u0301") == 1.0

    def test_accent_is_not_stripped(self):
        assert ff.fuzzy("cafe", "caf\u00e9") == pytest.approx(0.75)

    def test_non_ascii_case_folding(self):
        assert ff.fuzzy("\u00e9cole", "\u00c9COLE") == 1.0

    def test_cjk(self):
        assert ff.search("\u6771\u4eac", ["\u6771\u4eac\u90fd", "\u5927\u962a"]) == [
            "\u6771\u4eac\u90fd"
        ]

    def test_match_span_in_code_points(self):
        family = "\U0001F468\u200d\U0001F469\u200d\U0001F467"
        candidate = f"{family} hello"
        [record] = ff.search("hello", [candidate], return_match_data=True)
        index, length = record.match
        assert candidate[index:index + length] == "hello"


class TestDegenerateInputs:
    def test_symbols_only_query_matches_everything(self):
        assert ff.search("!!!", ["a", "b"]) == ["a", "b"]

    def test_whitespace_only_candidate(self):
        assert ff.fuzzy("a", "   ") == 0.0

    def test_single_character(self):
        assert ff.fuzzy("a", "a") == 1.0
        assert ff.fuzzy("a", "b") == 0.0

    def test_long_strings(self):
        haystack = "x" * 2000 + "needle" + "y" * 2000
        record = ff.fuzzy("needle", haystack, return_match_data=True)
        assert record.score == 1.0
        assert record.match == ff.Span(2000, 6)

    def test_many_candidates(self):
        candidates = [f"item{i:05d}" for i in range(5000)]
        assert ff.search("item04242", candidates, threshold=1.0) == ["item04242"]


class TestMaxRecursions:
    """Tests for the traversal depth limit."""

    def test_limit_truncates_deep_keys(self):
        assert ff.search("abc", ["a", "abc"], threshold=0, max_recursions=1) == ["a"]

    def test_no_limit_reaches_all(self):
        assert ff.search("abc", ["a", "abc"], threshold=0) == ["abc", "a"]

    def test_limit_on_searcher_override(self):
        searcher = ff.Searcher(["a", "abc"])
        assert searcher.search("abc", threshold=0, max_recursions=1) == ["a"]
        assert searcher.search("abc", threshold=0) == ["abc", "a"]
