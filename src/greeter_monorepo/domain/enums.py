"""Type-safe domain enums for output formats and application identities."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format options for configuration display.

    Inherits from str to allow direct string comparison and Click integration.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


class AppName(str, Enum):
    """Applications shipped by the monorepo, keyed by their console script.

    Attributes:
        ACCOUNT: Greets the current profile with the greeter message.
        INVENTORY: Greets the current profile only.

    Example:
        >>> AppName.ACCOUNT.value
        'account-app'
        >>> AppName("inventory-app") is AppName.INVENTORY
        True
    """

    ACCOUNT = "account-app"
    INVENTORY = "inventory-app"


__all__ = [
    "AppName",
    "OutputFormat",
]
