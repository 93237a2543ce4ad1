"""Root CLI command groups and global option handling.

Three groups share the same global flags (``--traceback``, ``--profile``,
``--set``) and the same housekeeping subcommands:

* :func:`cli` - the ``greeter-monorepo`` umbrella; shows help by default.
* :func:`account_cli` - the ``account-app`` console script; prints the
  account line by default.
* :func:`inventory_cli` - the ``inventory-app`` console script; prints the
  inventory line by default.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import rich_click as click
from lib_layered_config import Config

from greeter_monorepo import __init__conf__
from greeter_monorepo.adapters.config.overrides import apply_overrides
from greeter_monorepo.domain.enums import AppName

from .commands import (
    cli_account,
    cli_config,
    cli_fail,
    cli_info,
    cli_inventory,
    echo_account_line,
    echo_inventory_line,
)
from .constants import CLICK_CONTEXT_SETTINGS
from .context import apply_traceback_preferences, get_cli_context, store_cli_context

if TYPE_CHECKING:
    from greeter_monorepo.composition import AppServices


_traceback_option = click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
_profile_option = click.option(
    "--profile",
    type=str,
    default=None,
    help="Load configuration from a named profile (e.g., 'production', 'test')",
)
_set_option = click.option(
    "--set",
    "set_overrides",
    multiple=True,
    default=(),
    metavar="SECTION.KEY=VALUE",
    help="Override a configuration setting (repeatable).",
)


def _version_option(prog_name: str) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Return a ``--version`` option reporting ``prog_name``."""
    return click.version_option(
        version=__init__conf__.version,
        prog_name=prog_name,
        message=f"{prog_name} version {__init__conf__.version}",
    )


def _apply_cli_overrides(config: Config, set_overrides: tuple[str, ...]) -> Config:
    """Apply ``--set`` overrides to a Config, raising UsageError on failure."""
    try:
        return apply_overrides(config, set_overrides)
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc


def _bootstrap(ctx: click.Context, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    """Build services, load config once, start logging and store the CLI context.

    ``ctx.obj`` arrives as the services factory (production or test) and
    leaves as a :class:`~.context.CLIContext`.
    """
    if not callable(ctx.obj):
        raise RuntimeError("Services factory not provided. This is a bug.")
    services: AppServices = ctx.obj()  # type: ignore[assignment]  # Click's obj is typed as Any
    config = services.get_config(profile=profile)
    config = _apply_cli_overrides(config, set_overrides)
    services.init_logging(config)
    store_cli_context(
        ctx,
        traceback=traceback,
        config=config,
        services=services,
        profile=profile,
        set_overrides=set_overrides,
    )
    apply_traceback_preferences(traceback)


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@_version_option(__init__conf__.shell_command)
@_traceback_option
@_profile_option
@_set_option
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    """Umbrella command running either application as a subcommand.

    Example:
        >>> from click.testing import CliRunner
        >>> from greeter_monorepo.composition import build_production
        >>> result = CliRunner().invoke(cli, ["inventory"], obj=build_production)
        >>> result.stdout
        '[inventory-app] Hi, Alice.\\n'
    """
    _bootstrap(ctx, traceback, profile, set_overrides)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@click.group(
    help="Greet the current profile with the greeter message.",
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@_version_option(AppName.ACCOUNT.value)
@_traceback_option
@_profile_option
@_set_option
@click.pass_context
def account_cli(ctx: click.Context, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    """Root of the ``account-app`` console script."""
    _bootstrap(ctx, traceback, profile, set_overrides)
    if ctx.invoked_subcommand is None:
        echo_account_line(get_cli_context(ctx))


@click.group(
    help="Greet the current profile.",
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@_version_option(AppName.INVENTORY.value)
@_traceback_option
@_profile_option
@_set_option
@click.pass_context
def inventory_cli(ctx: click.Context, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    """Root of the ``inventory-app`` console script."""
    _bootstrap(ctx, traceback, profile, set_overrides)
    if ctx.invoked_subcommand is None:
        echo_inventory_line(get_cli_context(ctx))


def _register_commands() -> None:
    for group in (cli, account_cli, inventory_cli):
        for cmd in (cli_info, cli_config, cli_fail):
            group.add_command(cmd)
    cli.add_command(cli_account)
    cli.add_command(cli_inventory)


_register_commands()

#: Root group behind each application console script.
APP_ROOTS: dict[AppName, click.Group] = {
    AppName.ACCOUNT: account_cli,
    AppName.INVENTORY: inventory_cli,
}


__all__ = ["APP_ROOTS", "account_cli", "cli", "inventory_cli"]
