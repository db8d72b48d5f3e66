from __future__ import annotations

from pathlib import Path

import pytest

from indirs.core.console import Console
from indirs.core.resolver import resolve
from indirs.core.types import SelectorKind
from indirs.core.utils import dedupe, selector_kind


def test_literal_directories(workspace: Path, console: Console) -> None:
    assert resolve(["d1", "d2"], console) == ["d1", "d2"]


def test_comma_list(workspace: Path, console: Console) -> None:
    assert resolve(["d1,d2"], console) == ["d1", "d2"]


def test_comma_list_with_glob_part(workspace: Path, console: Console) -> None:
    assert resolve(["d1,d[23]"], console) == ["d1", "d2", "d3"]


def test_glob_expands_in_lexical_order(workspace: Path, console: Console) -> None:
    assert resolve(["d*"], console) == ["d1", "d2", "d3"]


def test_duplicates_keep_first_position(workspace: Path, console: Console) -> None:
    assert resolve(["d2", "d*", "d1,d2"], console) == ["d2", "d1", "d3"]


def test_unmatched_glob_is_not_fatal(
    workspace: Path, console: Console, capsys: pytest.CaptureFixture[str]
) -> None:
    assert resolve(["nomatch*"], console) == []
    assert "Pattern 'nomatch*' matched no files." in capsys.readouterr().err


def test_unmatched_glob_quiet_without_verbose(workspace: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert resolve(["nomatch*"], Console(color=False)) == []
    assert capsys.readouterr().err == ""


def test_files_and_broken_symlinks_are_skipped_with_warning(
    workspace: Path, console: Console, capsys: pytest.CaptureFixture[str]
) -> None:
    assert resolve(["notes.txt", "dangling", "d1"], console) == ["d1"]
    err = capsys.readouterr().err
    assert "Skipping file: notes.txt" in err
    assert "Skipping broken symlink: dangling" in err


def test_glob_matching_a_file_skips_it(
    workspace: Path, console: Console, capsys: pytest.CaptureFixture[str]
) -> None:
    assert resolve(["*"], console) == ["d1", "d2", "d3"]
    err = capsys.readouterr().err
    assert "notes.txt" in err
    assert "dangling" in err


def test_missing_literal_is_deferred(workspace: Path, console: Console) -> None:
    assert resolve(["ghost", "d1"], console) == ["ghost", "d1"]


def test_empty_comma_parts_are_ignored(workspace: Path, console: Console) -> None:
    assert resolve(["d1,,d2,"], console) == ["d1", "d2"]


def test_literal_name_containing_glob_chars(workspace: Path, console: Console) -> None:
    (workspace / "odd[1]").mkdir()
    assert resolve(["odd[1]"], console) == ["odd[1]"]


@pytest.mark.parametrize(
    "selector,kind",
    [("d1", SelectorKind.literal), ("a,b*", SelectorKind.comma_list), ("x?", SelectorKind.glob)],
)
def test_selector_kind(selector: str, kind: SelectorKind) -> None:
    assert selector_kind(selector) is kind


def test_dedupe_is_stable() -> None:
    assert dedupe(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]
