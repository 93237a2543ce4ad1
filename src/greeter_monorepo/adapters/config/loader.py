"""Configuration loader with caching and profile validation."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Protocol, cast

from lib_layered_config import (
    DEFAULT_MAX_PROFILE_LENGTH,
    Config,
    read_config,
    validate_profile_name,
)

from greeter_monorepo import __init__conf__


class ConfigLoaderProtocol(Protocol):
    """Protocol for config loader with cache_clear method."""

    def __call__(self, *, profile: str | None = None, start_dir: str | None = None) -> Config: ...
    def cache_clear(self) -> None: ...


def validate_profile(profile: str, max_length: int | None = None) -> None:
    """Validate a configuration profile name using lib_layered_config.

    Configuration profiles select a config subdirectory
    (``profile/<name>/config.toml``); they are unrelated to the profile
    library's current profile name.

    Args:
        profile: The profile name to validate.
        max_length: Optional maximum length. Defaults to DEFAULT_MAX_PROFILE_LENGTH (64).

    Raises:
        ValueError: If the name is empty, too long, contains invalid
            characters, or attempts path traversal.

    Examples:
        >>> validate_profile("staging-v2")

        >>> validate_profile("../etc/passwd")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValueError: profile contains invalid characters: ../etc/passwd
    """
    length = max_length if max_length is not None else DEFAULT_MAX_PROFILE_LENGTH
    validate_profile_name(profile, max_length=length)


@lru_cache(maxsize=1)
def get_default_config_path() -> Path:
    """Return the path to the bundled ``defaultconfig.toml``.

    Example:
        >>> get_default_config_path().name
        'defaultconfig.toml'
    """
    return Path(__file__).parent / "defaultconfig.toml"


@lru_cache(maxsize=4)
def _get_config_impl(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Cached read of all configuration layers. Callers validate ``profile`` first."""
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=get_default_config_path(),
        start_dir=start_dir,
    )


def _get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Load layered configuration with application defaults.

    Precedence: defaults -> app -> host -> user -> dotenv -> env. Results
    are cached per ``(profile, start_dir)`` for the process lifetime, which
    suits a process that prints one line and exits.

    Args:
        profile: Optional configuration profile name. When given, a
            ``profile/<name>/`` subdirectory is inserted into every
            configuration path.
        start_dir: Optional directory that seeds ``.env`` discovery.
            Defaults to the current working directory.

    Returns:
        Immutable configuration object with provenance tracking.

    Raises:
        ValueError: If ``profile`` is not a valid profile name.

    Example:
        >>> config = get_config()
        >>> config.get("nonexistent", default="fallback")
        'fallback'
    """
    if profile is not None:
        validate_profile(profile)
    return _get_config_impl(profile=profile, start_dir=start_dir)


def _cache_clear() -> None:
    """Drop cached configuration so the next ``get_config()`` re-reads disk."""
    _get_config_impl.cache_clear()


# lru_cache's cache_clear is invisible once the wrapper is cast to a Protocol,
# so the public loader carries its own.
_get_config.cache_clear = _cache_clear  # type: ignore[attr-defined]
get_config: ConfigLoaderProtocol = cast(ConfigLoaderProtocol, _get_config)


__all__ = [
    "get_config",
    "get_default_config_path",
    "validate_profile",
]
