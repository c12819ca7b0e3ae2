"""strwrap — Unicode-aware reflowing of string literals.

Everything a formatter needs to reflow a literal is importable from here.
"""

__version__ = "0.1.0"

from .breaks import (
    BreakIndex,
    alternative_punctuation_breaks,
    contains_url,
    line_break_opportunities,
    linebreaks,
    safe_break_after_url,
)
from .config import Config
from .layout import StringFormat, fits_shape, wrap_str
from .text import (
    StringSplitter,
    collapse_line_continuations,
    rewrite_string,
    trim_end_but_line_feed,
)
from .types import (
    BreakOpportunity,
    EndOfInput,
    EndWithLineFeed,
    Indent,
    LineEnd,
    RemovedSignificantLineFeed,
    Shape,
    SnippetState,
)

__all__ = [
    # breaks
    "BreakIndex",
    "alternative_punctuation_breaks",
    "contains_url",
    "line_break_opportunities",
    "linebreaks",
    "safe_break_after_url",
    # config
    "Config",
    # layout
    "StringFormat",
    "fits_shape",
    "wrap_str",
    # text
    "StringSplitter",
    "collapse_line_continuations",
    "rewrite_string",
    "trim_end_but_line_feed",
    # types
    "BreakOpportunity",
    "EndOfInput",
    "EndWithLineFeed",
    "Indent",
    "LineEnd",
    "RemovedSignificantLineFeed",
    "Shape",
    "SnippetState",
]
