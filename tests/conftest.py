"""Shared pytest fixtures for library, application, CLI and module-entry tests.

- All shared fixtures live here
- Tests import fixtures implicitly via pytest's conftest discovery
- Fixtures use descriptive names that read as plain English
"""

from __future__ import annotations

import contextlib
import os
import re
import tempfile
from collections.abc import Callable, Iterator
from dataclasses import fields, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

if TYPE_CHECKING:
    from greeter_monorepo.composition import AppServices

_COVERAGE_BASENAME = ".coverage.greeter_monorepo"


def _purge_stale_coverage_files(cov_path: Path) -> None:
    """Delete leftover SQLite database and journal files from crashed runs."""
    for suffix in ("", "-journal", "-wal", "-shm"):
        with contextlib.suppress(FileNotFoundError):
            Path(str(cov_path) + suffix).unlink()


def pytest_configure(config: pytest.Config) -> None:
    """Keep the coverage database on a local temp directory.

    SQLite needs POSIX locking, which network-mounted checkouts lack.
    """
    if "COVERAGE_FILE" not in os.environ:
        cov_path = Path(tempfile.gettempdir()) / _COVERAGE_BASENAME
        _purge_stale_coverage_files(cov_path)
        os.environ["COVERAGE_FILE"] = str(cov_path)


def _load_dotenv() -> None:
    """Load .env file when it exists for local test configuration."""
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)


_load_dotenv()

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))

ACCOUNT_LINE = "[account-service]: Hi, Alice. Hello world from Greeter."
INVENTORY_LINE = "[inventory-app] Hi, Alice."


def _remove_ansi_codes(text: str) -> str:
    """Return *text* stripped of ANSI escape sequences."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` when the exact printed line matters; log output
    goes to stderr.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory for tests."""
    from greeter_monorepo.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return _remove_ansi_codes(value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config lru_cache before each test."""
    from greeter_monorepo.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from test data dicts, without file I/O."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def config_cli_context(
    clear_config_cache: None,
) -> Callable[[dict[str, Any]], Callable[[], AppServices]]:
    """Return a factory turning a config dict into a services factory.

    Only the I/O boundary (``get_config``) is replaced; display, logging and
    the libraries stay production.

    Example:
        def test_config_display(cli_runner, config_cli_context) -> None:
            factory = config_cli_context({"section": {"key": "value"}})
            result = cli_runner.invoke(cli, ["config"], obj=factory)
            assert "key" in result.output
    """
    from greeter_monorepo.composition import build_production

    def _create(config_data: dict[str, Any]) -> Callable[[], AppServices]:
        config = Config(config_data, {})

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        test_services = replace(build_production(), get_config=_fake_get_config)
        return lambda: test_services

    return _create


@pytest.fixture
def inject_config_with_profile_capture(
    clear_config_cache: None,
) -> Callable[[Config, list[str | None]], Callable[[], AppServices]]:
    """Return a factory whose get_config records every profile it is asked for."""
    from greeter_monorepo.composition import build_production

    def _inject(config: Config, captured_profiles: list[str | None]) -> Callable[[], AppServices]:
        def _capturing_get_config(*, profile: str | None = None, **_kwargs: Any) -> Config:
            captured_profiles.append(profile)
            return config

        test_services = replace(build_production(), get_config=_capturing_get_config)
        return lambda: test_services

    return _inject


@pytest.fixture
def inject_providers() -> Callable[..., Callable[[], AppServices]]:
    """Return a factory that swaps in substitute greeter/profile providers.

    Mirrors a dependency substitution: the applications run unchanged
    against whichever library builds are wired in.

    Example:
        def test_substitute(cli_runner, inject_providers) -> None:
            factory = inject_providers(current_profile=lambda: "Bob")
            result = cli_runner.invoke(inventory_cli, [], obj=factory)
            assert result.stdout == "[inventory-app] Hi, Bob.\\n"
    """
    from greeter_monorepo.composition import build_production

    def _inject(
        *,
        greeting: Callable[[], str] | None = None,
        current_profile: Callable[[], str] | None = None,
    ) -> Callable[[], AppServices]:
        services = build_production()
        test_services = replace(
            services,
            get_greeting=greeting if greeting is not None else services.get_greeting,
            get_current_profile=current_profile if current_profile is not None else services.get_current_profile,
        )
        return lambda: test_services

    return _inject


@pytest.fixture
def account_line() -> str:
    """The exact line ``account-app`` prints."""
    return ACCOUNT_LINE


@pytest.fixture
def inventory_line() -> str:
    """The exact line ``inventory-app`` prints."""
    return INVENTORY_LINE
