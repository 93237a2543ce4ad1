"""Greeter library: the fixed greeting every application may reuse."""

from __future__ import annotations

from typing import Final

GREETER_MESSAGE: Final[str] = "Hello world from Greeter."


def get_greeting() -> str:
    """Return the greeter library's message.

    Example:
        >>> get_greeting()
        'Hello world from Greeter.'
    """
    return GREETER_MESSAGE


__all__ = [
    "GREETER_MESSAGE",
    "get_greeting",
]
