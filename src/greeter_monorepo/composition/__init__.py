"""Composition root wiring libraries and adapters to application ports.

This is where an application learns which greeter and profile builds it
runs against: production wires the domain libraries, tests may wire any
callable with the same shape.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config, get_default_config_path
from ..adapters.logging.setup import init_logging
from ..domain.greeter import get_greeting
from ..domain.profile import get_current_profile

# Static conformance assertions: pyright checks each function against its Protocol.
if TYPE_CHECKING:
    from ..application.ports import (
        DisplayConfig,
        GetConfig,
        GetDefaultConfigPath,
        GreetingProvider,
        InitLogging,
        ProfileProvider,
    )

    _assert_get_greeting: GreetingProvider = get_greeting
    _assert_get_current_profile: ProfileProvider = get_current_profile
    _assert_get_config: GetConfig = get_config
    _assert_get_default_config_path: GetDefaultConfigPath = get_default_config_path
    _assert_display_config: DisplayConfig = display_config
    _assert_init_logging: InitLogging = init_logging


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_greeting: GreetingProvider
    get_current_profile: ProfileProvider
    get_config: GetConfig
    get_default_config_path: GetDefaultConfigPath
    display_config: DisplayConfig
    init_logging: InitLogging


def build_production() -> AppServices:
    """Wire the domain libraries and production adapters into an AppServices container."""
    return AppServices(
        get_greeting=get_greeting,
        get_current_profile=get_current_profile,
        get_config=get_config,
        get_default_config_path=get_default_config_path,
        display_config=display_config,
        init_logging=init_logging,
    )


def build_testing() -> AppServices:
    """Wire the domain libraries with in-memory adapters.

    Configuration is empty and logging initialisation is a no-op, so no
    file or log runtime is touched.
    """
    from ..adapters.memory import (
        display_config_in_memory,
        get_config_in_memory,
        get_default_config_path_in_memory,
        init_logging_in_memory,
    )

    return AppServices(
        get_greeting=get_greeting,
        get_current_profile=get_current_profile,
        get_config=get_config_in_memory,
        get_default_config_path=get_default_config_path_in_memory,
        display_config=display_config_in_memory,
        init_logging=init_logging_in_memory,
    )


__all__ = [
    # Libraries
    "get_current_profile",
    "get_greeting",
    # Configuration
    "display_config",
    "get_config",
    "get_default_config_path",
    # Logging
    "init_logging",
    # Composition
    "AppServices",
    "build_production",
    "build_testing",
]
