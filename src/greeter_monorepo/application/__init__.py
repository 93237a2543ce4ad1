"""Application layer - use cases and port definitions.

Contains the two application use cases that compose the domain libraries,
and the port protocols that define the interfaces for adapter
implementations.

Contents:
    * :mod:`.account` - Account application (profile + greeter)
    * :mod:`.inventory` - Inventory application (profile only)
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
"""

from __future__ import annotations

from .account import ACCOUNT_TAG, compose_account_greeting, render_account_line
from .inventory import INVENTORY_TAG, compose_inventory_greeting, render_inventory_line
from .ports import (
    DisplayConfig,
    GetConfig,
    GetDefaultConfigPath,
    GreetingProvider,
    InitLogging,
    ProfileProvider,
)

__all__ = [
    # Use cases
    "ACCOUNT_TAG",
    "INVENTORY_TAG",
    "compose_account_greeting",
    "compose_inventory_greeting",
    "render_account_line",
    "render_inventory_line",
    # Ports
    "DisplayConfig",
    "GetConfig",
    "GetDefaultConfigPath",
    "GreetingProvider",
    "InitLogging",
    "ProfileProvider",
]
