"""Per-invocation CLI state and the shared traceback switches.

The root groups resolve configuration and services once, then hand them to
subcommands through ``ctx.obj``. The traceback switches live on
``lib_cli_exit_tools.config`` and are process-wide, so ``main`` snapshots
them before a run and puts them back afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

if TYPE_CHECKING:
    from greeter_monorepo.composition import AppServices


class TracebackState(NamedTuple):
    """Values of the two lib_cli_exit_tools traceback switches."""

    enabled: bool
    force_color: bool


@dataclass(frozen=True, slots=True)
class CLIContext:
    """Resolved state every subcommand of a root group reads."""

    traceback: bool
    config: Config
    services: AppServices
    profile: str | None = None
    # Raw ``--set`` values; ``config --profile`` reapplies them to the config it reloads.
    set_overrides: tuple[str, ...] = ()


def store_cli_context(
    ctx: click.Context,
    *,
    traceback: bool,
    config: Config,
    services: AppServices,
    profile: str | None = None,
    set_overrides: tuple[str, ...] = (),
) -> None:
    """Swap the services factory held in ``ctx.obj`` for a :class:`CLIContext`."""
    ctx.obj = CLIContext(traceback, config, services, profile, set_overrides)


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Return the :class:`CLIContext` a root group stored on ``ctx``.

    Raises:
        RuntimeError: When ``ctx.obj`` still holds something else, which
            means the command ran without going through a root group.
    """
    state = ctx.obj
    if isinstance(state, CLIContext):
        return state
    raise RuntimeError("CLI context not initialized. Call store_cli_context first.")


def apply_traceback_preferences(enabled: bool) -> None:
    """Turn full, coloured tracebacks on or off for the error printer.

    Example:
        >>> apply_traceback_preferences(True)
        >>> snapshot_traceback_state()
        TracebackState(enabled=True, force_color=True)
    """
    flag = bool(enabled)
    lib_cli_exit_tools.config.traceback = flag
    lib_cli_exit_tools.config.traceback_force_color = flag


def snapshot_traceback_state() -> TracebackState:
    settings = lib_cli_exit_tools.config
    return TracebackState(
        enabled=bool(getattr(settings, "traceback", False)),
        force_color=bool(getattr(settings, "traceback_force_color", False)),
    )


def restore_traceback_state(state: TracebackState) -> None:
    """Put back switches captured by :func:`snapshot_traceback_state`."""
    lib_cli_exit_tools.config.traceback = state.enabled
    lib_cli_exit_tools.config.traceback_force_color = state.force_color


__all__ = [
    "CLIContext",
    "TracebackState",
    "apply_traceback_preferences",
    "get_cli_context",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
]
