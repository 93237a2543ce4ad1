"""Console script entry points with production wiring.

Sits at package level (outside adapters) so the composition root can be
wired into the adapters layer without breaking layer constraints.
"""

from __future__ import annotations

from .adapters.cli.main import main as cli_main
from .composition import build_production
from .domain.enums import AppName


def main() -> int:
    """``greeter-monorepo`` umbrella command."""
    return cli_main(services_factory=build_production)


def account_main() -> int:
    """``account-app``: print the account greeting line."""
    return cli_main(services_factory=build_production, app=AppName.ACCOUNT)


def inventory_main() -> int:
    """``inventory-app``: print the inventory greeting line."""
    return cli_main(services_factory=build_production, app=AppName.INVENTORY)


__all__ = ["account_main", "inventory_main", "main"]
