"""Split an argument vector into directory selectors and the command to run."""

from __future__ import annotations

import os
from typing import Sequence

from .constants import LIST_DELIMITER, SEPARATOR
from .errors import UsageError
from .utils import has_glob


def looks_like_selector(arg: str) -> bool:
    """True if ``arg`` names something on disk, is a comma list, or is a glob.

    ``os.path.lexists`` is used so a broken symlink still counts as existing.
    """
    return os.path.lexists(arg) or LIST_DELIMITER in arg or has_glob(arg)


def split_args(args: Sequence[str]) -> tuple[list[str], list[str]]:
    """Partition ``args`` without validating either half.

    An explicit ``--`` always wins. Otherwise leading arguments are taken as
    selectors until the first one that is not; that argument and everything
    after it is the command. A command whose name is an existing path (say a
    local ``./deploy`` script) is therefore read as a selector unless ``--``
    is used.
    """
    args = list(args)
    if SEPARATOR in args:
        i = args.index(SEPARATOR)
        return args[:i], args[i + 1 :]

    for i, arg in enumerate(args):
        if not looks_like_selector(arg):
            return args[:i], args[i:]
    return args, []


def classify(args: Sequence[str]) -> tuple[list[str], list[str]]:
    selectors, command = split_args(args)
    if not selectors:
        raise UsageError("No target directories specified.")
    if not command:
        raise UsageError("No command specified.")
    return selectors, command
