"""Profile library: name of the currently signed-in profile."""

from __future__ import annotations

from typing import Final

PROFILE_NAME: Final[str] = "Alice"


def get_current_profile() -> str:
    """Return the current profile name.

    Example:
        >>> get_current_profile()
        'Alice'
    """
    return PROFILE_NAME


__all__ = [
    "PROFILE_NAME",
    "get_current_profile",
]
