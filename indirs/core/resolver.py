"""Expand selectors (literal paths, comma lists, globs) into target directories."""

from __future__ import annotations

import glob
import os
from typing import Iterable, Sequence

from .console import Console
from .constants import LIST_DELIMITER
from .types import SelectorKind
from .utils import dedupe, has_glob, selector_kind


def _check_existing(path: str, console: Console) -> bool:
    """Return True for a directory; warn about files and broken symlinks."""
    if os.path.isdir(path):
        return True
    if os.path.islink(path) and not os.path.exists(path):
        console.warn(f"Skipping broken symlink: {path}")
    else:
        console.warn(f"Skipping file: {path}")
    return False


def _expand_glob(pattern: str, console: Console) -> list[str]:
    matches = sorted(glob.glob(pattern))
    if not matches and not os.path.lexists(pattern):
        console.log(f"Pattern '{pattern}' matched no files.")
        return []
    # a literal entry whose name contains glob characters still counts
    return [m for m in (matches or [pattern]) if _check_existing(m, console)]


def resolve_part(part: str, console: Console) -> list[str]:
    if has_glob(part):
        return _expand_glob(part, console)
    if not os.path.lexists(part):
        # kept so the execution step can report it as "Directory not found"
        return [part]
    return [part] if _check_existing(part, console) else []


def iter_parts(selectors: Iterable[str]) -> Iterable[str]:
    for selector in selectors:
        if selector_kind(selector) is SelectorKind.comma_list:
            yield from (p for p in selector.split(LIST_DELIMITER) if p)
        elif selector:
            yield selector


def resolve(selectors: Sequence[str], console: Console | None = None) -> list[str]:
    """Resolve ``selectors`` to an ordered list of unique directories.

    Unmatched patterns and non-directories only produce diagnostics; the
    caller decides whether an empty result is fatal.
    """
    console = console or Console()
    found: list[str] = []
    for part in iter_parts(selectors):
        found.extend(resolve_part(part, console))
    return dedupe(found)
