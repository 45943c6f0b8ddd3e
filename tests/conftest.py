"""Test setup for markdown-notes-tree."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def end_of_line() -> str:
    """Line ending used by most tests."""
    return "\n"


@pytest.fixture
def notes_dir(tmp_path: Path) -> Path:
    """A small notes directory with a main README.

    Layout::

        README.md
        file1.md
        sub1/
            file1a.md
            sub1a/
                file1a1.md
        empty/
    """
    (tmp_path / "README.md").write_text("# Notes\n\nSome intro.\n", encoding="utf-8")
    (tmp_path / "file1.md").write_text("# Title for file1\n\nBody\n", encoding="utf-8")
    sub1 = tmp_path / "sub1"
    sub1.mkdir()
    (sub1 / "file1a.md").write_text("# Title for file1a\n", encoding="utf-8")
    sub1a = sub1 / "sub1a"
    sub1a.mkdir()
    (sub1a / "file1a1.md").write_text("no heading here\n", encoding="utf-8")
    (tmp_path / "empty").mkdir()
    return tmp_path
