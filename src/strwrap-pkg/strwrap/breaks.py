"""Break-point discovery: UAX #14 opportunities, punctuation fallbacks and URLs.

Every function here returns positions as str offsets into the text it was
given. Positions mark the start of the next line, so a break at ``i`` splits
``text`` into ``text[:i]`` and ``text[i:]``. Widths are counted per grapheme
cluster.
"""

import re
from bisect import bisect_left, bisect_right
from typing import Iterator

from uniseg.linebreak import line_break_breakables

from .chars import (
    column_offsets,
    grapheme_indices,
    is_punctuation,
    is_punctuation_dash,
    is_separator_space,
    is_whitespace,
)
from .types import BreakOpportunity

# BK, CR, LF and NL line break classes: a break after any of them is mandatory.
HARD_LINE_BREAKS = frozenset("\n\r\x0b\x0c\x85\u2028\u2029")

URL_MARKERS = ("https://", "http://", "ftp://", "file://")
URL_MARKER_RE = re.compile(r"(?:https?|ftp|file)://")
WHITESPACE_RE = re.compile(r"\s")


def linebreaks(text: str) -> Iterator[tuple[int, BreakOpportunity]]:
    """Follow the Unicode Line Breaking Algorithm [UAX #14] over text.

    The end of a non-empty text is always a mandatory break.

    [UAX #14]: http://unicode.org/reports/tr14/
    """
    for idx, breakable in enumerate(line_break_breakables(text)):
        if idx == 0 or not breakable:
            continue
        if text[idx - 1] in HARD_LINE_BREAKS:
            yield idx, BreakOpportunity.MANDATORY
        else:
            yield idx, BreakOpportunity.ALLOWED
    if text:
        yield len(text), BreakOpportunity.MANDATORY


class BreakIndex:
    """Break opportunities, graphemes and column offsets of a text.

    Built once per text. Every query takes a ``start`` offset and looks at
    ``text[start:]`` only, without copying it, so a splitter walking the
    text line by line never rescans what it already consumed.
    """

    def __init__(self, text: str):
        self.text = text
        self.breaks = list(linebreaks(text))
        self.graphemes = list(grapheme_indices(text))
        self.columns = column_offsets(text)
        self._break_positions = [idx for idx, _ in self.breaks]
        self._grapheme_starts = [idx for idx, _ in self.graphemes]

    def width(self, start: int, end: int) -> int:
        """Columns taken by ``text[start:end]``."""
        return self.columns[end] - self.columns[start]

    def opportunities(
        self, start: int, max_graphemes: int, trim_end: bool,
    ) -> Iterator[tuple[int, BreakOpportunity]]:
        """Yield the UAX #14 breaks after start that fit within max_graphemes columns."""
        for k in range(bisect_right(self._break_positions, start), len(self.breaks)):
            idx, opportunity = self.breaks[k]
            last = self.text[idx - 1]

            # Breaking right after a backslash would turn '\\' into '\\\n\\'
            # once the continuation is escaped, and a line ending in a dash
            # reads as a hyphenated word.
            if last == "\\" or is_punctuation_dash(last):
                continue

            width = self.width(start, idx)
            if width <= max_graphemes:
                yield idx, opportunity
            elif width == max_graphemes + 1:
                # One column past the boundary is fine when it is whitespace
                # that will be trimmed away.
                if trim_end and is_separator_space(last):
                    yield idx, opportunity
            else:
                # Widths only grow from here on.
                return

    def punctuation_breaks(
        self, start: int, max_graphemes: int, trim_end: bool,
    ) -> Iterator[int]:
        """Yield positions after start that follow a Po grapheme, within budget."""
        first = bisect_left(self._grapheme_starts, start)
        for k in range(first + 1, len(self.graphemes)):
            idx, g = self.graphemes[k]
            if self.width(start, idx) > max_graphemes:
                return
            prev = self.graphemes[k - 1][1]
            if not is_punctuation(prev) or is_punctuation(g):
                continue
            if trim_end or not is_whitespace(g):
                yield idx

    def has_url(self, start: int = 0) -> bool:
        return URL_MARKER_RE.search(self.text, start) is not None

    def find_url(self, start: int = 0) -> tuple[int, int] | None:
        """Locate the first URL at or after start.

        Returns (url_start, safe_break): where the URL scheme begins and the
        first position the text may be broken at after it. There is no
        whitespace inside a URL, so the safe break is the first break
        opportunity at or after the whitespace that follows it, or the end of
        the text.
        """
        match = URL_MARKER_RE.search(self.text, start)
        if match is None:
            return None

        space = WHITESPACE_RE.search(self.text, match.end())
        if space is None:
            return match.start(), len(self.text)

        k = bisect_left(self._break_positions, space.start())
        if k == len(self._break_positions):
            return match.start(), len(self.text)
        return match.start(), self._break_positions[k]


def line_break_opportunities(
    text: str, max_graphemes: int, trim_end: bool,
) -> Iterator[tuple[int, BreakOpportunity]]:
    """Yield the UAX #14 breaks of text that fit within max_graphemes columns."""
    return BreakIndex(text).opportunities(0, max_graphemes, trim_end)


def alternative_punctuation_breaks(
    text: str, max_graphemes: int, trim_end: bool,
) -> Iterator[int]:
    """Yield positions right after "Punctuation, Other" (Po) graphemes.

    These are the breaks of last resort when UAX #14 offers none within the
    budget. A break is skipped when the following grapheme is punctuation too
    ("!!" never becomes "!\\n!") or whitespace that cannot be trimmed.

    [Punctuation, Other]: https://www.compart.com/en/unicode/category/Po
    """
    return BreakIndex(text).punctuation_breaks(0, max_graphemes, trim_end)


def contains_url(text: str) -> bool:
    return any(marker in text for marker in URL_MARKERS)


def find_url(text: str, start: int = 0) -> tuple[int, int] | None:
    """Locate the first URL at or after start; see BreakIndex.find_url."""
    return BreakIndex(text).find_url(start)


def safe_break_after_url(text: str) -> int | None:
    """Find the next break opportunity after the first URL in text, if any."""
    found = find_url(text)
    if found is None:
        return None
    return found[1]
