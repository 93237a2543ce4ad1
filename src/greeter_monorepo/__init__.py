"""Public package surface exposing the libraries, the applications and metadata.

Imports are routed through the architectural layers:

- Domain exports: the greeter and profile libraries
- Application exports: the account and inventory compositions
- Composition exports: wired configuration loader
- Metadata: package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Application exports
from .application.account import compose_account_greeting, render_account_line
from .application.inventory import compose_inventory_greeting, render_inventory_line

# Composition exports (wired adapters)
from .composition import get_config

# Domain exports
from .domain.greeter import GREETER_MESSAGE, get_greeting
from .domain.profile import PROFILE_NAME, get_current_profile

__all__ = [
    "GREETER_MESSAGE",
    "PROFILE_NAME",
    "compose_account_greeting",
    "compose_inventory_greeting",
    "get_config",
    "get_current_profile",
    "get_greeting",
    "print_info",
    "render_account_line",
    "render_inventory_line",
]
