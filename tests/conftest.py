"""Test harness configuration.

The package lives under ``src/strwrap-pkg``. Put that directory first on
``sys.path`` so tests import the in-repo code even when an older copy of
``strwrap`` is installed.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_configure() -> None:
    repo_root = Path(__file__).resolve().parents[1]
    pkg_dir = str(repo_root / "src" / "strwrap-pkg")
    if sys.path[:1] != [pkg_dir] and pkg_dir not in sys.path:
        sys.path.insert(0, pkg_dir)


@pytest.fixture(autouse=True)
def _quiet_debug_log(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep debug tracing off unless a test turns it on."""
    monkeypatch.delenv("STRWRAP_LOG", raising=False)
