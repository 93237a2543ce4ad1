"""Application ports: callable Protocol definitions for adapter functions.

Each Protocol class defines a ``__call__`` method whose signature exactly
matches the corresponding adapter or library function. Module-level
functions satisfy these protocols automatically via structural subtyping
(PEP 544).

System Role:
    Sits between domain and adapters. ``Config`` is imported under
    ``TYPE_CHECKING`` only so that the layer contracts stay satisfied at
    runtime.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from ..domain.enums import OutputFormat

if TYPE_CHECKING:
    from lib_layered_config import Config


class GreetingProvider(Protocol):
    """Supply the greeter library's message."""

    def __call__(self) -> str: ...


class ProfileProvider(Protocol):
    """Supply the current profile name."""

    def __call__(self) -> str: ...


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class GetDefaultConfigPath(Protocol):
    """Return the path to the bundled default configuration file."""

    def __call__(self) -> Path: ...


class DisplayConfig(Protocol):
    """Display the provided configuration in the requested format."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


__all__ = [
    "DisplayConfig",
    "GetConfig",
    "GetDefaultConfigPath",
    "GreetingProvider",
    "InitLogging",
    "ProfileProvider",
]
