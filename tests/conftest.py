from __future__ import annotations

import os
from pathlib import Path

import pytest

from indirs.core.console import Console


@pytest.fixture
def workspace(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A scratch cwd holding d1..d3, a regular file and a dangling symlink."""
    for name in ("d1", "d2", "d3"):
        (tmp_path / name).mkdir()
    (tmp_path / "notes.txt").write_text("hello\n", encoding="utf-8")
    os.symlink(tmp_path / "missing-target", tmp_path / "dangling")
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def console() -> Console:
    return Console(verbose=True, color=False)
