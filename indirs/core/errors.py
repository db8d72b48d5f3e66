"""Fatal error types. The CLI reports either one and exits with status 1."""

from __future__ import annotations


class UsageError(Exception):
    """Bad invocation: no selectors, no command, or an invalid option value."""


class EmptyResolutionError(Exception):
    """Every selector was resolved and nothing usable was left."""

    def __init__(self, message: str = "No valid directories found.") -> None:
        super().__init__(message)
