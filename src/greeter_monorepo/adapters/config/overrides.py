"""Parse and apply ``--set SECTION.KEY=VALUE`` command-line overrides."""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]
"""Union of types that :func:`coerce_value` can produce."""


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """One parsed ``--set`` assignment."""

    section: str
    key_path: tuple[str, ...]
    value: CoercedValue


def coerce_value(raw: str) -> CoercedValue:
    """Interpret ``raw`` as JSON, keeping it as a plain string when that fails.

    Examples:
        >>> coerce_value("true")
        True
        >>> coerce_value("42")
        42
        >>> coerce_value('["a","b"]')
        ['a', 'b']
        >>> coerce_value("WARNING")
        'WARNING'
        >>> coerce_value("")
        ''
    """
    if raw == "":
        return ""
    try:
        return orjson.loads(raw)
    except (orjson.JSONDecodeError, ValueError):
        return raw


def parse_override(raw: str) -> ConfigOverride:
    """Split ``SECTION.KEY[.SUBKEY...]=VALUE`` into a :class:`ConfigOverride`.

    The first ``=`` ends the dotted path; the first dot ends the section.

    Raises:
        ValueError: If ``=`` or the section dot is missing, or any path
            component is empty.

    Examples:
        >>> override = parse_override("lib_log_rich.console_level=DEBUG")
        >>> override.section, override.key_path, override.value
        ('lib_log_rich', ('console_level',), 'DEBUG')
    """
    if "=" not in raw:
        raise ValueError(f"Invalid override {raw!r}: must contain '='")

    path_part, value_str = raw.split("=", maxsplit=1)

    if "." not in path_part:
        raise ValueError(f"Invalid override {raw!r}: key must contain at least one dot (SECTION.KEY)")

    section, *key_parts = path_part.split(".")

    if not section:
        raise ValueError(f"Invalid override {raw!r}: section name is empty")
    if not all(key_parts):
        raise ValueError(f"Invalid override {raw!r}: key path contains empty component")

    return ConfigOverride(section=section, key_path=tuple(key_parts), value=coerce_value(value_str))


def _nest_override(target: dict[str, dict[str, object]], override: ConfigOverride) -> None:
    """Write ``override`` into ``target``, creating intermediate tables.

    Raises:
        ValueError: If an earlier override already put a scalar where a
            table is needed.
    """
    node: dict[str, object] = target.setdefault(override.section, {})
    for part in override.key_path[:-1]:
        existing = node.setdefault(part, {})
        if not isinstance(existing, dict):
            raise ValueError(f"Cannot nest under {part!r}: already set to {type(existing).__name__}")
        node = cast("dict[str, object]", existing)
    node[override.key_path[-1]] = override.value


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Deep-merge ``--set`` overrides into ``config``.

    Returns the original object untouched when there are no overrides.

    Raises:
        ValueError: If any override string is malformed.

    Examples:
        >>> cfg = Config({"s": {"k": 1}}, {})
        >>> apply_overrides(cfg, ("s.k=2",))["s"]["k"]
        2
        >>> apply_overrides(cfg, ()) is cfg
        True
    """
    if not raw_overrides:
        return config

    overrides: dict[str, dict[str, object]] = {}
    for raw in raw_overrides:
        _nest_override(overrides, parse_override(raw))

    return config.with_overrides(overrides)


__all__ = [
    "CoercedValue",
    "ConfigOverride",
    "apply_overrides",
    "coerce_value",
    "parse_override",
]
