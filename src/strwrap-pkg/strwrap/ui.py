"""Diagnostic output for the strwrap line breaker.

Tracing is off by default. Set ``STRWRAP_LOG`` to ``1``, ``true`` or
``debug`` to have every splitting step printed to stderr.
"""

import os
import sys
from typing import TextIO

ANSI_RESET  = "\033[0m"
ANSI_DIM    = "\033[2m"
ANSI_YELLOW = "\033[33m"

LOG_ENV_VAR = "STRWRAP_LOG"


def ansi(text: str, *codes: str, stream: TextIO | None = None) -> str:
    """Wrap text in ANSI escape codes when the stream is a TTY (no-op otherwise)."""
    stream = stream if stream is not None else sys.stderr
    if not stream.isatty():
        return text
    return "".join(codes) + text + ANSI_RESET


def debug_enabled() -> bool:
    return os.environ.get(LOG_ENV_VAR, "").strip().lower() in ("1", "true", "debug")


def log_debug(msg: str) -> None:
    """Print a dimmed trace line to stderr when debug output is enabled."""
    if not debug_enabled():
        return
    print(ansi(msg, ANSI_DIM), file=sys.stderr)


def log_warning(msg: str) -> None:
    """Print a highlighted line to stderr when debug output is enabled."""
    if not debug_enabled():
        return
    print(ansi(msg, ANSI_YELLOW), file=sys.stderr)
