"""Small types and Enums used by indirs."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class SelectorKind(str, Enum):
    """How a selector string is interpreted (inferred from its content)."""

    literal = "literal"
    comma_list = "comma-list"
    glob = "glob"


@dataclass(frozen=True)
class UnitResult:
    """Outcome of running the command in one directory."""

    directory: str
    returncode: int
    had_output: bool = False

    @property
    def ok(self) -> bool:
        return self.returncode == 0


@dataclass
class RunSummary:
    results: list[UnitResult] = field(default_factory=list)

    @property
    def ok_count(self) -> int:
        return sum(1 for r in self.results if r.ok)

    @property
    def failed_count(self) -> int:
        return len(self.results) - self.ok_count

    @property
    def exit_code(self) -> int:
        return 0 if all(r.ok for r in self.results) else 1
