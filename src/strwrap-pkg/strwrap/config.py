"""Configuration model for the strwrap line breaker."""

from pydantic import BaseModel, ConfigDict, Field


class Config(BaseModel):
    """Document-wide layout settings owned by the embedding pretty-printer.

    All values have sensible defaults matching a stock formatter setup.
    Callers override individual fields as needed; instances are immutable.
    """
    model_config = ConfigDict(frozen=True)

    max_width: int = Field(
        default=100, ge=1,
        description="Maximum width of any emitted line, in columns")
    hard_tabs: bool = Field(
        default=False,
        description="Indent with tab characters instead of spaces")
    tab_spaces: int = Field(
        default=4, ge=1,
        description="Number of columns per indentation level")
