"""Static package metadata surfaced to the CLI commands.

Values mirror ``pyproject.toml``; ``tests/test_metadata.py`` keeps the two
in sync.
"""

from __future__ import annotations

from typing import Final

name: Final[str] = "greeter_monorepo"
title: Final[str] = "Greeter and profile libraries composed by the account and inventory apps"
version: Final[str] = "1.0.0"
shell_command: Final[str] = "greeter-monorepo"

#: Console scripts that run a single application directly.
app_shell_commands: Final[tuple[str, ...]] = ("account-app", "inventory-app")

# lib_layered_config identifiers: platform-specific config paths derive from these.
LAYEREDCONF_VENDOR: Final[str] = "example"
LAYEREDCONF_APP: Final[str] = "Greeter Monorepo"
LAYEREDCONF_SLUG: Final[str] = "greeter-monorepo"


def print_info() -> None:
    """Print the summarised metadata block used by the ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for greeter_monorepo:
        ...
    """
    fields = (
        ("name", name),
        ("title", title),
        ("version", version),
        ("shell_command", shell_command),
        ("app_shell_commands", ", ".join(app_shell_commands)),
        ("config_vendor", LAYEREDCONF_VENDOR),
        ("config_app", LAYEREDCONF_APP),
        ("config_slug", LAYEREDCONF_SLUG),
    )
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))
