"""Account application use case: greet the current profile with the greeter message."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from ..domain.greeter import get_greeting
from ..domain.profile import get_current_profile

if TYPE_CHECKING:
    from .ports import GreetingProvider, ProfileProvider

#: Tag the account service puts in front of every line it prints.
ACCOUNT_TAG: Final[str] = "[account-service]: "


def compose_account_greeting(
    *,
    current_profile: ProfileProvider = get_current_profile,
    greeting: GreetingProvider = get_greeting,
) -> str:
    """Combine the profile name and the greeter message.

    The profile is read before the greeting; both providers are called
    exactly once.

    Args:
        current_profile: Source of the profile name.
        greeting: Source of the greeter message.

    Returns:
        ``"Hi, <profile>. <greeting>"``.

    Example:
        >>> compose_account_greeting()
        'Hi, Alice. Hello world from Greeter.'
        >>> compose_account_greeting(current_profile=lambda: "Bob", greeting=lambda: "Howdy.")
        'Hi, Bob. Howdy.'
    """
    profile = current_profile()
    return f"Hi, {profile}. {greeting()}"


def render_account_line(
    *,
    current_profile: ProfileProvider = get_current_profile,
    greeting: GreetingProvider = get_greeting,
) -> str:
    """Return the single line the account application writes to stdout.

    Example:
        >>> render_account_line()
        '[account-service]: Hi, Alice. Hello world from Greeter.'
    """
    return ACCOUNT_TAG + compose_account_greeting(current_profile=current_profile, greeting=greeting)


__all__ = [
    "ACCOUNT_TAG",
    "compose_account_greeting",
    "render_account_line",
]
