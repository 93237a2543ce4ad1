"""CLI entry point and execution wrapper.

Provides the main entry point used by every console script and by
``python -m`` execution, ensuring consistent error handling and traceback
restoration.

Contents:
    * :func:`main` - Primary entry point for CLI execution.
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import lib_cli_exit_tools
import lib_log_rich.runtime

from greeter_monorepo import __init__conf__
from greeter_monorepo.domain.enums import AppName

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import (
    apply_traceback_preferences,
    restore_traceback_state,
    snapshot_traceback_state,
)

if TYPE_CHECKING:
    from greeter_monorepo.composition import AppServices


def _run_cli(
    argv: Sequence[str] | None,
    *,
    services_factory: Callable[[], AppServices],
    app: AppName | None,
) -> int:
    """Execute the selected root group with exception handling.

    Args:
        argv: Optional sequence of CLI arguments. None uses sys.argv.
        services_factory: Factory returning AppServices, passed via ctx.obj.
        app: Application whose console script is running, or None for the
            umbrella command.

    Returns:
        Exit code produced by the command.
    """
    import sys

    import click

    from .root import APP_ROOTS, cli

    root = APP_ROOTS[app] if app is not None else cli
    prog_name = app.value if app is not None else __init__conf__.shell_command
    # lib_cli_exit_tools.run_cli cannot pass ctx.obj, so its behaviour is replicated here.
    args = list(argv) if argv is not None else sys.argv[1:]

    try:
        root.main(
            args=args,
            prog_name=prog_name,
            obj=services_factory,
            standalone_mode=False,
        )
        return 0
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except BaseException as exc:
        # SystemExit and KeyboardInterrupt included: every failure leaves through lib_cli_exit_tools.
        tracebacks_enabled = bool(getattr(lib_cli_exit_tools.config, "traceback", False))
        apply_traceback_preferences(tracebacks_enabled)
        length_limit = TRACEBACK_VERBOSE_LIMIT if tracebacks_enabled else TRACEBACK_SUMMARY_LIMIT
        lib_cli_exit_tools.print_exception_message(trace_back=tracebacks_enabled, length_limit=length_limit)
        return lib_cli_exit_tools.get_system_exit_code(exc)


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
    app: AppName | None = None,
) -> int:
    """Execute a CLI root group with error handling and return the exit code.

    Args:
        argv: Optional sequence of CLI arguments. None uses sys.argv.
        restore_traceback: Whether to restore prior traceback configuration after execution.
        services_factory: Factory function returning AppServices. Required.
            Callers outside the adapters layer should pass ``build_production``.
        app: Run this application's root group (``account-app`` or
            ``inventory-app``). None runs the ``greeter-monorepo`` umbrella.

    Returns:
        Exit code reported by the CLI run.

    Raises:
        ValueError: If services_factory is not provided.

    Example:
        >>> from greeter_monorepo.composition import build_production
        >>> main([], services_factory=build_production, app=AppName.INVENTORY)  # doctest: +SKIP
        [inventory-app] Hi, Alice.
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    previous_state = snapshot_traceback_state()
    try:
        return _run_cli(argv, services_factory=services_factory, app=app)
    finally:
        if restore_traceback:
            restore_traceback_state(previous_state)
        # Shutting down from a worker thread would kill logging for the others.
        is_main_thread = threading.current_thread() is threading.main_thread()
        if is_main_thread and lib_log_rich.runtime.is_initialised():
            lib_log_rich.runtime.shutdown()


__all__ = ["main"]
