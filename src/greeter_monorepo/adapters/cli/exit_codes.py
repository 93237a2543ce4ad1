"""POSIX-conventional exit codes for CLI error paths.

Signal-to-exit-code translation is left to ``lib_cli_exit_tools``.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes returned by the CLI entry points.

    Example:
        >>> int(ExitCode.INVALID_ARGUMENT)
        22
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    USAGE_ERROR = 2
    INVALID_ARGUMENT = 22


__all__ = ["ExitCode"]
