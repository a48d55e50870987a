"""Shared pytest fixtures and configuration for the caesar-cipher test suite.

Guidelines
----------
* Core tests must be pure — no side effects.
* File I/O only inside ``tmp_path``.
* CLI tests run from inside ``tmp_path`` so paths stay short enough to
  pass filename validation.
"""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _plain_console(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep Rich and argparse output plain and unwrapped."""
    for var in ("FORCE_COLOR", "TTY_COMPATIBLE", "TTY_INTERACTIVE"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("COLUMNS", "120")


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Change into an empty temporary directory and return it."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
