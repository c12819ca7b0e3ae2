"""Unicode predicates and width helpers used by the line breaker."""

import unicodedata
from typing import Iterator

import grapheme
from wcwidth import wcswidth, wcwidth


def grapheme_width(g: str) -> int:
    """Display width of one grapheme cluster in terminal columns.

    wcwidth results are not additive over the code points of a cluster, so
    the cluster is measured as a whole. A cluster never takes more than two
    columns, whatever its parts report (ZWJ sequences, flags). Control
    characters such as newlines take no columns.
    """
    width = wcswidth(g)
    if width < 0:
        width = sum(max(wcwidth(ch), 0) for ch in g)
    return min(width, 2)


def str_width(text: str) -> int:
    """Display width of text in terminal columns, summed per grapheme."""
    return sum(grapheme_width(g) for g in graphemes(text))


def column_offsets(text: str) -> list[int]:
    """Columns taken by ``text[:i]``, for every offset ``i`` in text.

    An offset inside a grapheme cluster already counts the whole cluster.
    """
    columns = [0] * (len(text) + 1)
    width = 0
    for start, g in grapheme_indices(text):
        width += grapheme_width(g)
        for i in range(start + 1, start + len(g) + 1):
            columns[i] = width
    return columns


def graphemes(text: str) -> Iterator[str]:
    return grapheme.graphemes(text)


def grapheme_indices(text: str) -> Iterator[tuple[int, str]]:
    """Yield (offset, grapheme) pairs, offsets counted in code points."""
    offset = 0
    for g in grapheme.graphemes(text):
        yield offset, g
        offset += len(g)


def is_whitespace(g: str) -> bool:
    return all(ch.isspace() for ch in g)


def is_punctuation(g: str) -> bool:
    """True when every code point is in the "Punctuation, Other" (Po) category."""
    return all(unicodedata.category(ch) == "Po" for ch in g)


def is_punctuation_dash(ch: str) -> bool:
    return unicodedata.category(ch) == "Pd"


def is_separator_space(ch: str) -> bool:
    return unicodedata.category(ch) == "Zs"
