"""CLI command implementations, re-exported for registration on the root groups.

Contents:
    * Application commands from :mod:`.apps`
    * Info commands from :mod:`.info`
    * Config commands from :mod:`.config`
"""

from __future__ import annotations

from .apps import cli_account, cli_inventory, echo_account_line, echo_inventory_line
from .config import cli_config
from .info import cli_fail, cli_info

__all__ = [
    "cli_account",
    "cli_config",
    "cli_fail",
    "cli_info",
    "cli_inventory",
    "echo_account_line",
    "echo_inventory_line",
]
