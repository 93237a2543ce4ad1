"""Inventory application use case: greet the current profile."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from ..domain.profile import get_current_profile

if TYPE_CHECKING:
    from .ports import ProfileProvider

INVENTORY_TAG: Final[str] = "[inventory-app] "


def compose_inventory_greeting(*, current_profile: ProfileProvider = get_current_profile) -> str:
    """Greet the current profile by name.

    Example:
        >>> compose_inventory_greeting()
        'Hi, Alice.'
    """
    return f"Hi, {current_profile()}."


def render_inventory_line(*, current_profile: ProfileProvider = get_current_profile) -> str:
    """Return the single line the inventory application writes to stdout.

    Example:
        >>> render_inventory_line()
        '[inventory-app] Hi, Alice.'
    """
    return INVENTORY_TAG + compose_inventory_greeting(current_profile=current_profile)


__all__ = [
    "INVENTORY_TAG",
    "compose_inventory_greeting",
    "render_inventory_line",
]
