"""Core data types for the strwrap line breaker."""

import enum
from dataclasses import dataclass

from .config import Config


class BreakOpportunity(enum.Enum):
    """Kind of a UAX #14 line break opportunity."""
    MANDATORY = "mandatory"
    ALLOWED = "allowed"


@dataclass(frozen=True)
class Indent:
    """Indentation of a line, split into block indentation and alignment.

    With hard tabs only the block part is rendered as tabs; alignment is
    always made of spaces.
    """
    block_indent: int = 0
    alignment: int = 0

    @classmethod
    def empty(cls) -> "Indent":
        return cls()

    @classmethod
    def from_width(cls, config: Config, width: int) -> "Indent":
        if config.hard_tabs:
            tab_num, alignment = divmod(width, config.tab_spaces)
            return cls(config.tab_spaces * tab_num, alignment)
        return cls(width, 0)

    @property
    def width(self) -> int:
        return self.block_indent + self.alignment

    def to_string(self, config: Config) -> str:
        if config.hard_tabs:
            return "\t" * (self.block_indent // config.tab_spaces) + " " * self.alignment
        return " " * self.width

    def to_string_with_newline(self, config: Config) -> str:
        return "\n" + self.to_string(config)


@dataclass(frozen=True)
class Shape:
    """The box a piece of text is laid out in: available width plus indentation."""
    width: int
    indent: Indent
    offset: int = 0

    @classmethod
    def legacy(cls, width: int, indent: Indent) -> "Shape":
        return cls(width=width, indent=indent, offset=indent.alignment)

    @classmethod
    def indented(cls, indent: Indent, config: Config) -> "Shape":
        """Shape spanning from the indentation to the configured max width."""
        return cls(width=max(config.max_width - indent.width, 0),
                   indent=indent, offset=indent.alignment)

    @property
    def used_width(self) -> int:
        return self.indent.block_indent + self.offset


# -- snippet states -----------------------------------------------------------

@dataclass(frozen=True)
class SnippetState:
    """Result of one splitting step: the line to emit and how to continue.

    ``offset`` on the non-terminal states is the number of characters of the
    input consumed so far. It may run ahead of the emitted text when trailing
    whitespace got trimmed.
    """
    text: str


@dataclass(frozen=True)
class EndOfInput(SnippetState):
    """The rest of the input was emitted; rewriting is finished."""


@dataclass(frozen=True)
class LineEnd(SnippetState):
    """A soft break: the line gets ``line_end`` and the next one is indented."""
    offset: int


@dataclass(frozen=True)
class EndWithLineFeed(SnippetState):
    """The line ends in a newline that must be kept verbatim.

    The next line may use more width than the shape allows, e.g. a multiline
    string continuation that needs no indentation.
    """
    offset: int


@dataclass(frozen=True)
class RemovedSignificantLineFeed(SnippetState):
    """Like EndWithLineFeed, but trailing whitespace and the newline were
    trimmed off ``text``; the driver puts the newline back."""
    offset: int
