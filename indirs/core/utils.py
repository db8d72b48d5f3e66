"""Lightweight helpers for selector handling and child environments."""
from __future__ import annotations

from typing import Iterable, Sequence

from .constants import GLOB_CHARS, LIST_DELIMITER
from .errors import UsageError
from .types import SelectorKind


def has_glob(text: str) -> bool:
    return any(c in text for c in GLOB_CHARS)


def selector_kind(selector: str) -> SelectorKind:
    # A comma list may itself hold glob parts; the list wins.
    if LIST_DELIMITER in selector:
        return SelectorKind.comma_list
    if has_glob(selector):
        return SelectorKind.glob
    return SelectorKind.literal


def dedupe(items: Iterable[str]) -> list[str]:
    """Drop repeats, keeping the first occurrence of each item in place."""
    seen: set[str] = set()
    out: list[str] = []
    for item in items:
        if item in seen:
            continue
        seen.add(item)
        out.append(item)
    return out


def parse_env(env_kvs: Sequence[str]) -> dict[str, str]:
    env: dict[str, str] = {}
    for kv in env_kvs:
        if "=" not in kv:
            raise UsageError(f"--env expects KEY=VAL, got: {kv!r}")
        k, v = kv.split("=", 1)
        env[k] = v
    return env
