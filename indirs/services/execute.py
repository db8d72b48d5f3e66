"""Service: run one command in each resolved directory."""

from __future__ import annotations

import os
import shlex
import subprocess
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Sequence

from ..core.console import Console
from ..core.constants import NOT_FOUND_EXIT
from ..core.errors import UsageError
from ..core.types import RunSummary, UnitResult


def wants_shell(command: Sequence[str], shell: bool) -> bool:
    """Shell mode is forced by ``--shell`` or implied by a single quoted string."""
    return shell or (len(command) == 1 and any(c.isspace() for c in command[0]))


def format_command(command: Sequence[str], use_shell: bool) -> str:
    if use_shell:
        return " ".join(command)
    return " ".join(shlex.quote(c) for c in command)


def _header(console: Console, directory: str, printable: str, parallel: bool) -> None:
    if parallel:
        console.header(f"[{directory}] running...")
    else:
        console.header(f"in {directory} $ {printable}")


def run_unit(
    directory: str,
    command: Sequence[str],
    *,
    use_shell: bool,
    env: dict[str, str] | None,
    console: Console,
    parallel: bool = False,
    dry_run: bool = False,
) -> UnitResult:
    """Run ``command`` with ``directory`` as the child's working directory.

    The directory is handed to the child process directly; the caller's own
    working directory is never changed.
    """
    printable = format_command(command, use_shell)
    if dry_run:
        console.info(f"[dry-run] {directory}: {printable}")
        return UnitResult(directory, 0)

    if not os.path.isdir(directory):
        console.error(f"Directory not found: {directory}")
        return UnitResult(directory, 1)

    _header(console, directory, printable, parallel)
    args: str | list[str] = " ".join(command) if use_shell else list(command)
    try:
        proc = subprocess.Popen(
            args,
            cwd=directory,
            shell=use_shell,
            env=env,
            stdout=subprocess.PIPE,
            text=True,
            errors="replace",
        )
    except FileNotFoundError:
        console.error(f"Command not found: {command[0]}")
        return UnitResult(directory, NOT_FOUND_EXIT)
    except OSError as e:
        console.error(f"{directory}: {e}")
        return UnitResult(directory, 1)

    # stderr is inherited so the child's errors stay on our stderr
    had_output = False
    with proc:
        for line in proc.stdout or ():
            had_output = True
            console.output(line.rstrip("\n"))
    return UnitResult(directory, proc.returncode, had_output)


def run_all(
    directories: Sequence[str],
    command: Sequence[str],
    *,
    parallel: int = 1,
    shell: bool = False,
    extra_env: dict[str, str] | None = None,
    dry_run: bool = False,
    console: Console | None = None,
) -> RunSummary:
    """Run ``command`` once in every directory and collect the outcomes.

    ``parallel == 1`` runs the directories one after another in order. A
    larger value runs at most that many units at a time; units are
    submitted in order and every unit is waited for before returning.
    A failing unit never stops the others.
    """
    if parallel < 1:
        raise UsageError(f"--parallel must be a positive integer, got: {parallel}")
    console = console or Console()
    use_shell = wants_shell(command, shell)

    env = None
    if extra_env:
        env = os.environ.copy()
        env.update(extra_env)

    summary = RunSummary()
    if parallel == 1:
        for d in directories:
            summary.results.append(
                run_unit(d, command, use_shell=use_shell, env=env, console=console, dry_run=dry_run)
            )
    else:
        with ThreadPoolExecutor(max_workers=parallel) as pool:
            futures = [
                pool.submit(
                    run_unit,
                    d,
                    command,
                    use_shell=use_shell,
                    env=env,
                    console=console,
                    parallel=True,
                    dry_run=dry_run,
                )
                for d in directories
            ]
            for fut in as_completed(futures):
                summary.results.append(fut.result())

    console.log(f"Done. ok={summary.ok_count}, failed={summary.failed_count}.")
    return summary
