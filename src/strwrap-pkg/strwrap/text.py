"""Reflow string literals so they fit the shape they are laid out in."""

import re
from typing import Iterable, Iterator, TypeVar

from .breaks import BreakIndex
from .chars import str_width
from .layout import StringFormat, wrap_str
from .types import (
    BreakOpportunity,
    EndOfInput,
    EndWithLineFeed,
    LineEnd,
    RemovedSignificantLineFeed,
    SnippetState,
)
from .ui import log_debug, log_warning

T = TypeVar("T")

# An unescaped backslash followed by a line break and the next line's
# indentation. Once removed, every remaining whitespace is significant.
LINE_CONTINUATION_RE = re.compile(r"([^\\](\\\\)*)\\[\n\r][ \t\n\x0b\x0c\r]*")


def collapse_line_continuations(text: str) -> str:
    """Join lines that were split with a backslash continuation."""
    return LINE_CONTINUATION_RE.sub(r"\1", text)


def trim_end_but_line_feed(text: str, trim_end: bool) -> str:
    """Remove trailing whitespace except a single final newline.

    >>> trim_end_but_line_feed("some string with trailing whitespace    \\n", True)
    'some string with trailing whitespace\\n'
    >>> trim_end_but_line_feed("untouched   ", False)
    'untouched   '
    """
    if not trim_end:
        return text
    if text.endswith("\n"):
        return text.rstrip() + "\n"
    return text.rstrip()


def _last(items: Iterable[T]) -> T | None:
    last = None
    for last in items:
        pass
    return last


class StringSplitter:
    """Cut a text into lines at valid break points.

    Iterating yields one SnippetState per line. Mandatory and allowed break
    opportunities come from the Unicode Line Breaking Algorithm; when none
    fits the current budget, breaks after "Punctuation, Other" graphemes are
    tried, and as a last resort the whole remainder is consumed.
    """

    def __init__(self, text: str, max_graphemes_with_indent: int,
                 max_graphemes_without_indent: int, newline_max_graphemes: int,
                 is_bareline_ok: bool, trim_end: bool):
        self.source = text
        self.index = BreakIndex(text)
        self.offset = 0
        self.max_graphemes = max_graphemes_with_indent
        self.max_graphemes_with_indent = max_graphemes_with_indent
        self.max_graphemes_without_indent = max_graphemes_without_indent
        self.newline_max_graphemes = newline_max_graphemes
        self.is_bareline_ok = is_bareline_ok
        self.trim_end = trim_end
        self.contains_url = self.index.has_url()

    @classmethod
    def from_format(cls, text: str, fmt: StringFormat,
                    newline_max_graphemes: int) -> "StringSplitter | None":
        """Build a splitter for text, or None if the format leaves no room for it."""
        with_indent = fmt.max_width_with_indent()
        without_indent = fmt.max_width_without_indent()
        if with_indent is None or without_indent is None:
            log_warning(f"shape width {fmt.shape.width} cannot hold a single grapheme")
            return None
        return cls(text, with_indent, without_indent, newline_max_graphemes,
                   fmt.is_bareline_ok, fmt.trim_end)

    @property
    def text(self) -> str:
        """The part of the input not consumed yet."""
        return self.source[self.offset:]

    def __iter__(self) -> Iterator[SnippetState]:
        return self

    def __next__(self) -> SnippetState:
        if self.offset >= len(self.source):
            raise StopIteration

        allowed_break_idx = 0
        for idx, opportunity in self.index.opportunities(
                self.offset, self.max_graphemes, self.trim_end):
            if opportunity is BreakOpportunity.MANDATORY:
                return self._update(idx)
            allowed_break_idx = idx

        if allowed_break_idx:
            return self._update(allowed_break_idx)

        punctuation_break = _last(self.index.punctuation_breaks(
            self.offset, self.max_graphemes, self.trim_end))
        if punctuation_break is not None:
            return self._update(punctuation_break)

        # Nowhere to break: a single unbreakable token.
        return self._update(len(self.source))

    def _skip_urls(self, split_index: int) -> int:
        """Move split_index past any URL it would cut in two."""
        start = self.offset
        while self.contains_url:
            found = self.index.find_url(start)
            if found is None:
                self.contains_url = False
                break
            url_start, safe_break = found
            if url_start >= split_index:
                # Not reached yet, a later step deals with it.
                break
            if safe_break > split_index:
                log_debug(f"break moved from {split_index - self.offset} to "
                          f"{safe_break - self.offset} to keep "
                          f"{self.source[url_start:safe_break].strip()!r} whole")
                split_index = safe_break
            start = safe_break
            self.contains_url = self.index.has_url(safe_break)
        return split_index

    def _update(self, split_index: int) -> SnippetState:
        split_index = self._skip_urls(split_index)

        line = self.source[self.offset:split_index]
        self.offset = split_index
        ends_with_newline = line.endswith("\n")

        if self.trim_end and not ends_with_newline:
            line = line.rstrip()

        if split_index == len(self.source):
            return EndOfInput(line)

        if ends_with_newline:
            if self.is_bareline_ok:
                # The next line can benefit from the full width.
                self.max_graphemes = self.max_graphemes_without_indent
            else:
                self.max_graphemes = self.max_graphemes_with_indent
            if self.trim_end:
                return RemovedSignificantLineFeed(line.rstrip(), self.offset)
            return EndWithLineFeed(line, self.offset)

        self.max_graphemes = self.newline_max_graphemes
        return LineEnd(line, self.offset)


def _trim_result(result: list[str]) -> None:
    result[:] = [trim_end_but_line_feed("".join(result), True)]


def rewrite_string(orig: str, fmt: StringFormat, newline_max_chars: int) -> str | None:
    """Reflow the content of a string literal according to fmt.

    ``orig`` is the literal's content as written in the source, escapes
    included. ``newline_max_chars`` is the budget of lines that follow a soft
    break. Returns the text with ``fmt.opener`` and ``fmt.closer`` around it,
    or None when the result cannot fit the shape; the caller then keeps the
    original text.
    """
    config = fmt.config
    indent_with_newline = fmt.shape.indent.to_string_with_newline(config)
    indent_without_newline = fmt.shape.indent.to_string(config)

    stripped = collapse_line_continuations(orig)
    splitter = StringSplitter.from_format(stripped, fmt, newline_max_chars)
    if splitter is None:
        return None
    is_bareline_ok = splitter.is_bareline_ok

    result = [fmt.opener]
    for state in splitter:
        log_debug(f"snippet state: {state!r}")
        if isinstance(state, LineEnd):
            log_debug(f"line width: {str_width(state.text)}")
            result += [state.text, fmt.line_end, indent_with_newline, fmt.line_start]
        elif isinstance(state, EndWithLineFeed):
            if state.text == "\n" and fmt.trim_end:
                _trim_result(result)
            result.append(state.text)
            if not is_bareline_ok:
                result += [indent_without_newline, fmt.line_start]
        elif isinstance(state, RemovedSignificantLineFeed):
            if not state.text:
                # A blank line: drop the line_start padding written before it.
                _trim_result(result)
            result += [state.text, "\n"]
            if not is_bareline_ok:
                result += [indent_without_newline, fmt.line_start]
        else:
            if state.text == "\n":
                _trim_result(result)
            result.append(state.text)
    result.append(fmt.closer)

    rewritten = wrap_str("".join(result), config.max_width, fmt.shape)
    if rewritten is None:
        log_warning("rewritten string does not fit its shape")
    return rewritten
