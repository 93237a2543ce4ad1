"""Domain layer - the library modules, free of I/O and framework dependencies.

Contents:
    * :mod:`.greeter` - Greeter library (fixed greeting message)
    * :mod:`.profile` - Profile library (current profile name)
    * :mod:`.enums` - Domain enumerations (OutputFormat, AppName)
"""

from __future__ import annotations

from .enums import AppName, OutputFormat
from .greeter import GREETER_MESSAGE, get_greeting
from .profile import PROFILE_NAME, get_current_profile

__all__ = [
    # Libraries
    "GREETER_MESSAGE",
    "PROFILE_NAME",
    "get_current_profile",
    "get_greeting",
    # Enums
    "AppName",
    "OutputFormat",
]
