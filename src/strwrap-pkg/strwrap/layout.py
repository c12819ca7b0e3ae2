"""Layout policy for a piece of text and the final width check."""

from dataclasses import dataclass

from .chars import is_whitespace, str_width
from .config import Config
from .types import Shape


@dataclass(frozen=True)
class StringFormat:
    """Describes the layout of a piece of text.

    The defaults describe an ordinary quoted string literal: the text is
    wrapped in double quotes, every soft break ends with a backslash
    continuation and the next line starts with a single space. Comments and
    other non-literal text override the markers via ``dataclasses.replace``.
    """
    shape: Shape
    config: Config
    opener: str = '"'
    closer: str = '"'
    line_start: str = " "
    line_end: str = "\\"
    trim_end: bool = False

    def max_width_with_indent(self) -> int | None:
        """Maximum number of graphemes on a line, taking indentation into account.

        None when not even a single grapheme fits, in which case the rewrite
        cannot succeed.
        """
        room = self.shape.width - (len(self.opener) + len(self.line_end) + 1)
        if room < 0:
            return None
        return room + 1

    def max_width_without_indent(self) -> int | None:
        """Like max_width_with_indent but ignoring the indentation.

        Lets a line that follows a significant newline hold more graphemes.
        """
        room = self.config.max_width - len(self.line_end)
        if room < 0:
            return None
        return room

    @property
    def is_bareline_ok(self) -> bool:
        """True when continuation lines need no re-indentation."""
        return not self.line_start or is_whitespace(self.line_start)


def fits_shape(text: str, max_width: int, shape: Shape) -> bool:
    """Check that a multi-line text fits the shape it is going to be placed in.

    The first line must fit the shape's width, following lines must fit
    max_width and the last line leaves room for whatever the caller appends.
    """
    if not text:
        return True
    lines = text.split("\n")
    if str_width(lines[0]) > shape.width:
        return False
    if len(lines) == 1:
        return True
    if any(str_width(line) > max_width for line in lines[1:]):
        return False
    return str_width(lines[-1]) <= shape.used_width + shape.width


def wrap_str(text: str, max_width: int, shape: Shape) -> str | None:
    if fits_shape(text, max_width, shape):
        return text
    return None
