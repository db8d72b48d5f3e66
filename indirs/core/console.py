"""Terminal reporting shared by the resolver and the execution manager."""

from __future__ import annotations

import threading

import typer

from .constants import PROG_NAME


class Console:
    """Writes headers, child output and diagnostics.

    Normal output goes to stdout. Warnings, errors and verbose diagnostics
    go to stderr so they never mix with what a command prints when the
    result is piped somewhere.
    """

    def __init__(self, verbose: bool = False, color: bool = True) -> None:
        self.verbose = verbose
        self.color = color
        # one echo at a time; child lines may still interleave between units
        self._lock = threading.Lock()

    def _emit(self, message: str, *, err: bool = False, **style) -> None:
        with self._lock:
            if style and self.color:
                typer.secho(message, err=err, **style)
            else:
                typer.echo(message, err=err)

    # ---------- stdout ----------
    def info(self, message: str) -> None:
        self._emit(message, fg=typer.colors.BLUE)

    def header(self, message: str) -> None:
        self._emit(message, fg=typer.colors.YELLOW)

    def output(self, line: str) -> None:
        self._emit(line)

    # ---------- stderr ----------
    def log(self, message: str) -> None:
        if self.verbose:
            self._emit(f"[{PROG_NAME}] {message}", err=True, dim=True)

    def warn(self, message: str) -> None:
        self._emit(f"[warn] {message}", err=True, fg=typer.colors.YELLOW)

    def error(self, message: str) -> None:
        self._emit(f"[error] {message}", err=True, fg=typer.colors.RED)
