from __future__ import annotations

import pytest

from strwrap.breaks import (
    BreakIndex,
    alternative_punctuation_breaks,
    contains_url,
    find_url,
    line_break_opportunities,
    linebreaks,
    safe_break_after_url,
)
from strwrap.types import BreakOpportunity

ALLOWED = BreakOpportunity.ALLOWED
MANDATORY = BreakOpportunity.MANDATORY


class TestLinebreaks:
    def test_breaks_after_spaces_and_at_end(self) -> None:
        assert list(linebreaks("Hello world")) == [(6, ALLOWED), (11, MANDATORY)]

    def test_break_after_newline_is_mandatory(self) -> None:
        assert list(linebreaks("a\nb")) == [(2, MANDATORY), (3, MANDATORY)]

    def test_crlf_is_a_single_break(self) -> None:
        assert list(linebreaks("a\r\nb")) == [(3, MANDATORY), (4, MANDATORY)]

    def test_empty_text_has_no_breaks(self) -> None:
        assert list(linebreaks("")) == []


class TestLineBreakOpportunities:
    def test_stops_at_the_budget(self) -> None:
        assert list(line_break_opportunities("Neque in sem. Pellentesque", 10, False)) == [
            (6, ALLOWED),
            (9, ALLOWED),
        ]

    def test_trimmable_space_may_overflow_by_one_column(self) -> None:
        text = "Aenean metus. Vestibulum"
        assert list(line_break_opportunities(text, 13, True)) == [(7, ALLOWED), (14, ALLOWED)]
        assert list(line_break_opportunities(text, 13, False)) == [(7, ALLOWED)]

    def test_never_breaks_after_a_dash(self) -> None:
        assert list(line_break_opportunities("self-contained text", 30, False)) == [
            (15, ALLOWED),
            (19, MANDATORY),
        ]

    def test_never_breaks_after_a_backslash(self) -> None:
        assert list(line_break_opportunities("abc\\", 10, False)) == []

    def test_reports_mandatory_breaks(self) -> None:
        assert list(line_break_opportunities("Nulla\nconsequat", 23, False)) == [
            (6, MANDATORY),
            (15, MANDATORY),
        ]

    def test_wide_characters_count_double(self) -> None:
        assert list(line_break_opportunities("日本 語", 4, False)) == [(1, ALLOWED)]
        assert list(line_break_opportunities("日本 語", 5, False)) == [
            (1, ALLOWED),
            (3, ALLOWED),
        ]


class TestAlternativePunctuationBreaks:
    def test_breaks_after_punctuation(self) -> None:
        text = "Placerat_felis._Mauris_porta_ante_sagittis_purus."
        assert list(alternative_punctuation_breaks(text, 20, False)) == [15]

    def test_never_splits_adjacent_punctuation(self) -> None:
        assert list(alternative_punctuation_breaks("a!!b", 10, False)) == [3]

    def test_whitespace_after_punctuation_needs_trimming(self) -> None:
        assert list(alternative_punctuation_breaks("one. two", 10, False)) == []
        assert list(alternative_punctuation_breaks("one. two", 10, True)) == [4]

    def test_respects_the_budget(self) -> None:
        assert list(alternative_punctuation_breaks("a.b.c.d", 3, False)) == [2]

    def test_handles_wide_punctuation(self) -> None:
        assert list(alternative_punctuation_breaks("日本。語", 10, False)) == [3]


class TestUrls:
    def test_contains_url(self) -> None:
        assert contains_url("see https://example.org")
        assert contains_url("file:///tmp/x")
        assert not contains_url("aaa http not an url")

    @pytest.mark.parametrize(
        ("text", "index", "suffix"),
        [
            ("aaa http://example.org something", 23, "http://example.org "),
            ("https://example.org something", 20, "https://example.org "),
            ("aaa ftp://example.org something", 22, "ftp://example.org "),
            ("aaa file://example.org something", 23, "file://example.org "),
            ("aaa file://example.org", 22, "file://example.org"),
        ],
    )
    def test_safe_break_after_url(self, text: str, index: int, suffix: str) -> None:
        assert safe_break_after_url(text) == index
        assert text[:index].endswith(suffix)

    def test_no_url(self) -> None:
        assert safe_break_after_url("aaa http not an url") is None

    def test_url_running_to_the_end_of_non_ascii_text(self) -> None:
        text = "우리 모두가 만들어가는 자유 백과사전 http://ko.wikipedia.org/wiki/위키백과:대문"
        assert safe_break_after_url(text) == len(text)
        assert text.endswith("http://ko.wikipedia.org/wiki/위키백과:대문")

    def test_find_url_reports_start_and_safe_break(self) -> None:
        assert find_url("aaa http://example.org something") == (4, 23)

    def test_find_url_from_offset(self) -> None:
        text = "http://a.org and https://b.org end"
        assert find_url(text) == (0, 13)
        assert find_url(text, 13) == (17, 31)
        assert find_url(text, 31) is None


class TestBreakIndex:
    TEXT = "Neque in sem. Pellentesque 日本 語, http://a.org/x tail"

    @pytest.mark.parametrize("start", [0, 6, 14, 27, 33])
    def test_queries_from_an_offset_match_the_remainder(self, start: int) -> None:
        index = BreakIndex(self.TEXT)
        rest = self.TEXT[start:]
        assert [(idx - start, o) for idx, o in index.opportunities(start, 10, False)] == list(
            line_break_opportunities(rest, 10, False)
        )
        assert [idx - start for idx in index.punctuation_breaks(start, 10, True)] == list(
            alternative_punctuation_breaks(rest, 10, True)
        )

    def test_width_counts_graphemes(self) -> None:
        index = BreakIndex("\U0001f1ef\U0001f1f5 ❤\ufe0f!")
        assert index.width(0, 2) == 2
        assert index.width(2, 5) == 3
        assert index.width(0, 6) == 6

    def test_emoji_sequences_use_their_display_width(self) -> None:
        family = "\U0001f468\u200d\U0001f469\u200d\U0001f467"
        text = f"{family} {family} {family}"
        assert list(line_break_opportunities(text, 6, False)) == [(6, ALLOWED), (12, ALLOWED)]

    def test_url_lookups_from_an_offset(self) -> None:
        index = BreakIndex("http://a.org and https://b.org end")
        assert index.has_url(13)
        assert index.find_url(13) == (17, 31)
        assert not index.has_url(31)
