"""CLI entrypoint: ``in [OPTIONS] [SELECTORS...] [--] COMMAND...``."""

from __future__ import annotations

import sys
from typing import List, Optional, Sequence

import typer
from pydantic import ValidationError

from ..config.settings import Settings, get_settings
from ..core.classifier import classify
from ..core.console import Console
from ..core.constants import ENV_PREFIX, PROG_NAME, SEPARATOR, VERSION
from ..core.errors import EmptyResolutionError, UsageError
from ..core.resolver import resolve
from ..core.utils import parse_env
from ..services.execute import format_command, run_all, wants_shell

app = typer.Typer(
    add_completion=False,
    help="Run a command in one or more directories.",
)

# options that consume the following argument as their value
_VALUE_OPTIONS = {"-P", "--parallel", "-e", "--env"}


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{PROG_NAME} {VERSION}")
        raise typer.Exit()


def _load_settings() -> Settings:
    try:
        return get_settings()
    except ValidationError as e:
        err = e.errors()[0]
        name = f"{ENV_PREFIX}{err['loc'][0]}".upper() if err["loc"] else ENV_PREFIX
        raise UsageError(f"Invalid setting {name}: {err['msg']}") from e


def parse_parallel(value: str | None, default: int) -> int:
    if value is None:
        jobs = default
    else:
        try:
            jobs = int(value)
        except ValueError:
            raise UsageError(f"--parallel must be a positive integer, got: {value!r}") from None
    if jobs < 1:
        raise UsageError(f"--parallel must be a positive integer, got: {jobs}")
    return jobs


def separator_before_selectors(argv: Sequence[str]) -> bool:
    """True if ``--`` comes right after the options, i.e. with no selector before it.

    The option parser swallows such a ``--``, so it has to be spotted here.
    """
    skip = False
    for arg in argv:
        if skip:
            skip = False
            continue
        if arg == SEPARATOR:
            return True
        if not arg.startswith("-") or arg == "-":
            return False
        skip = arg in _VALUE_OPTIONS
    return False


@app.command(
    context_settings={
        "help_option_names": ["-h", "--help"],
        # options end at the first selector; the rest belongs to us verbatim
        "allow_interspersed_args": False,
        "ignore_unknown_options": True,
    }
)
def run(
    ctx: typer.Context,
    args: Optional[List[str]] = typer.Argument(
        None,
        metavar="[SELECTORS]... [--] COMMAND...",
        help="Directories (paths, comma lists, glob patterns) followed by the command.",
    ),
    parallel: Optional[str] = typer.Option(
        None, "--parallel", "-P", metavar="N", help="Run with N parallel jobs (default: 1)"
    ),
    shell: bool = typer.Option(False, "--shell", "-s", help="Run the command through the system shell"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show diagnostics on stderr"),
    dry_run: bool = typer.Option(False, "--dry-run", "-n", help="Print what would run without executing"),
    env: List[str] = typer.Option(None, "--env", "-e", help="Extra env KEY=VAL for the command (repeatable)"),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit"
    ),
):
    """
    Run COMMAND in every directory named by SELECTORS.

    Examples:
      in project* git status
      in frontend,backend npm install
      in -P 4 'repos/*' -- git pull
      in . "ls *.txt | wc -l"
    """
    if not args:
        typer.echo(ctx.get_help())
        raise typer.Exit(code=1)

    console = Console(verbose=verbose)
    try:
        s = _load_settings()
        console = Console(verbose=verbose or s.verbose, color=s.color)
        jobs = parse_parallel(parallel, s.parallel)

        selectors, command = classify(args)
        extra_env = parse_env(env or [])

        directories = resolve(selectors, console)
        if not directories:
            raise EmptyResolutionError()

        use_shell = wants_shell(command, shell or s.shell)
        console.log(f"Target directories: {' '.join(directories)}")
        console.log(f"Command: {format_command(command, use_shell)}")

        summary = run_all(
            directories,
            command,
            parallel=jobs,
            shell=use_shell,
            extra_env=extra_env,
            dry_run=dry_run,
            console=console,
        )
    except (UsageError, EmptyResolutionError) as e:
        console.error(str(e))
        raise typer.Exit(code=1)
    raise typer.Exit(code=summary.exit_code)


def main(argv: Sequence[str] | None = None) -> None:
    argv = list(sys.argv[1:] if argv is None else argv)
    if separator_before_selectors(argv):
        Console().error("No target directories specified.")
        raise SystemExit(1)
    app(args=argv, prog_name=PROG_NAME)


if __name__ == "__main__":
    main()
