"""Application commands: print the account or inventory greeting line.

The same helpers back the ``account``/``inventory`` subcommands of the
umbrella CLI and the default action of the ``account-app`` and
``inventory-app`` console scripts.

Contents:
    * :func:`echo_account_line` - Write the account line to stdout.
    * :func:`echo_inventory_line` - Write the inventory line to stdout.
    * :func:`cli_account` - ``account`` subcommand.
    * :func:`cli_inventory` - ``inventory`` subcommand.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from greeter_monorepo.application.account import render_account_line
from greeter_monorepo.application.inventory import render_inventory_line
from greeter_monorepo.domain.enums import AppName

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import CLIContext, get_cli_context

logger = logging.getLogger(__name__)


def echo_account_line(cli_ctx: CLIContext) -> None:
    """Compose the account greeting from the wired providers and print it."""
    services = cli_ctx.services
    with lib_log_rich.runtime.bind(job_id="account-app", extra={"app": AppName.ACCOUNT.value}):
        logger.info("Composing account greeting")
        click.echo(
            render_account_line(
                current_profile=services.get_current_profile,
                greeting=services.get_greeting,
            )
        )


def echo_inventory_line(cli_ctx: CLIContext) -> None:
    """Compose the inventory greeting from the wired profile provider and print it."""
    with lib_log_rich.runtime.bind(job_id="inventory-app", extra={"app": AppName.INVENTORY.value}):
        logger.info("Composing inventory greeting")
        click.echo(render_inventory_line(current_profile=cli_ctx.services.get_current_profile))


@click.command("account", context_settings=CLICK_CONTEXT_SETTINGS)
@click.pass_context
def cli_account(ctx: click.Context) -> None:
    """Greet the current profile with the greeter message."""
    echo_account_line(get_cli_context(ctx))


@click.command("inventory", context_settings=CLICK_CONTEXT_SETTINGS)
@click.pass_context
def cli_inventory(ctx: click.Context) -> None:
    """Greet the current profile."""
    echo_inventory_line(get_cli_context(ctx))


__all__ = [
    "cli_account",
    "cli_inventory",
    "echo_account_line",
    "echo_inventory_line",
]
