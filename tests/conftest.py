"""Shared fixtures."""

from collections.abc import Iterator
from pathlib import Path

import pytest

from mm_grep.log import setup_logging


@pytest.fixture(autouse=True)
def _quiet_logging() -> Iterator[None]:
    """Reset loguru after each test so a --debug sink never outlives its stream."""
    yield
    setup_logging(debug=False)


@pytest.fixture()
def grep_md(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> str:
    """``grep.md`` with three lines, in a temp dir that is also the cwd."""
    monkeypatch.chdir(tmp_path)
    Path("grep.md").write_text("Utility tool\nother text\nUTILITY again\n")
    return "grep.md"


@pytest.fixture()
def tree(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> str:
    """Directory tree ``docs/`` with nested files, in a temp dir that is also the cwd.

    docs/a/x.txt, docs/a.txt, docs/b.txt, docs/c/d/y.txt
    """
    monkeypatch.chdir(tmp_path)
    root = Path("docs")
    (root / "a").mkdir(parents=True)
    (root / "c" / "d").mkdir(parents=True)
    (root / "a" / "x.txt").write_text("needle in a\n")
    (root / "a.txt").write_text("nothing here\nneedle top\n")
    (root / "b.txt").write_text("plain\n")
    (root / "c" / "d" / "y.txt").write_text("deep needle\n")
    return "docs"
