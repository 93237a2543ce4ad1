"""End-to-end application stories: each console script prints exactly one line."""

from __future__ import annotations

import subprocess
import sys
from collections.abc import Callable
from typing import Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner, Result

from greeter_monorepo.adapters import cli as cli_mod
from greeter_monorepo.composition import build_production
from greeter_monorepo.domain.enums import AppName


@pytest.mark.os_agnostic
def test_account_app_prints_exactly_its_line(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
    account_line: str,
) -> None:
    """account-app with no arguments prints the account line and exits 0."""
    exit_code = cli_mod.main([], services_factory=build_production, app=AppName.ACCOUNT)

    assert exit_code == 0
    assert capsys.readouterr().out == account_line + "\n"


@pytest.mark.os_agnostic
def test_inventory_app_prints_exactly_its_line(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
    inventory_line: str,
) -> None:
    """inventory-app with no arguments prints the inventory line and exits 0."""
    exit_code = cli_mod.main([], services_factory=build_production, app=AppName.INVENTORY)

    assert exit_code == 0
    assert capsys.readouterr().out == inventory_line + "\n"


@pytest.mark.os_agnostic
def test_repeated_runs_print_identical_output(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Nothing carries over between invocations."""
    outputs: list[str] = []
    for _ in range(3):
        cli_mod.main([], services_factory=build_production, app=AppName.ACCOUNT)
        outputs.append(capsys.readouterr().out)

    assert len(set(outputs)) == 1


@pytest.mark.os_agnostic
def test_umbrella_account_subcommand_matches_account_app(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
    account_line: str,
) -> None:
    """greeter-monorepo account prints the same line as account-app."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["account"], obj=production_factory)

    assert result.exit_code == 0
    assert result.stdout == account_line + "\n"


@pytest.mark.os_agnostic
def test_umbrella_inventory_subcommand_matches_inventory_app(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
    inventory_line: str,
) -> None:
    """greeter-monorepo inventory prints the same line as inventory-app."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["inventory"], obj=production_factory)

    assert result.exit_code == 0
    assert result.stdout == inventory_line + "\n"


@pytest.mark.os_agnostic
def test_account_app_runs_against_substituted_libraries(
    cli_runner: CliRunner,
    inject_providers: Callable[..., Callable[[], Any]],
) -> None:
    """Swapped-in providers reach the printed line without code changes."""
    factory = inject_providers(greeting=lambda: "Bonjour from Greeter v2.", current_profile=lambda: "Bob")

    result: Result = cli_runner.invoke(cli_mod.account_cli, [], obj=factory)

    assert result.exit_code == 0
    assert result.stdout == "[account-service]: Hi, Bob. Bonjour from Greeter v2.\n"


@pytest.mark.os_agnostic
def test_inventory_app_ignores_greeter_substitution(
    cli_runner: CliRunner,
    inject_providers: Callable[..., Callable[[], Any]],
    inventory_line: str,
) -> None:
    """Inventory does not depend on the greeter library."""
    factory = inject_providers(greeting=lambda: "never printed")

    result: Result = cli_runner.invoke(cli_mod.inventory_cli, [], obj=factory)

    assert result.exit_code == 0
    assert result.stdout == inventory_line + "\n"


@pytest.mark.os_agnostic
def test_failing_provider_exits_nonzero(
    managed_traceback_state: None,
    inject_providers: Callable[..., Callable[[], Any]],
    capsys: pytest.CaptureFixture[str],
    strip_ansi: Callable[[str], str],
) -> None:
    """An exception from a library terminates the app with a non-zero status."""

    def broken() -> str:
        raise RuntimeError("profile store unavailable")

    exit_code = cli_mod.main([], services_factory=inject_providers(current_profile=broken), app=AppName.INVENTORY)

    captured = capsys.readouterr()
    assert exit_code != 0
    assert captured.out == ""
    assert "profile store unavailable" in strip_ansi(captured.err)


@pytest.mark.os_agnostic
def test_app_subcommand_suppresses_default_line(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
    account_line: str,
) -> None:
    """Running a housekeeping subcommand does not also print the greeting."""
    result: Result = cli_runner.invoke(cli_mod.account_cli, ["info"], obj=production_factory)

    assert result.exit_code == 0
    assert account_line not in result.stdout


@pytest.mark.os_agnostic
@pytest.mark.parametrize("app", list(AppName))
def test_app_version_reports_its_own_name(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
    app: AppName,
) -> None:
    """--version names the console script that was run."""
    from greeter_monorepo import __init__conf__

    exit_code = cli_mod.main(["--version"], services_factory=build_production, app=app)

    assert exit_code == 0
    assert capsys.readouterr().out.strip() == f"{app.value} version {__init__conf__.version}"


@pytest.mark.os_agnostic
def test_app_traceback_flag_is_restored_after_run(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
    account_line: str,
) -> None:
    """--traceback is accepted by the app scripts and reset afterwards."""
    exit_code = cli_mod.main(["--traceback"], services_factory=build_production, app=AppName.ACCOUNT)

    assert exit_code == 0
    assert capsys.readouterr().out == account_line + "\n"
    assert lib_cli_exit_tools.config.traceback is False


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("entry_point", "expected"),
    [
        ("account_main", "[account-service]: Hi, Alice. Hello world from Greeter."),
        ("inventory_main", "[inventory-app] Hi, Alice."),
    ],
)
def test_console_script_subprocess_prints_one_line(entry_point: str, expected: str) -> None:
    """A real process writes exactly one line to stdout and exits 0."""
    code = f"import sys; from greeter_monorepo.entry import {entry_point}; sys.exit({entry_point}())"
    result = subprocess.run(  # noqa: S603
        [sys.executable, "-c", code],
        capture_output=True,
        timeout=30,
        check=False,
        encoding="utf-8",
        errors="replace",
    )

    assert result.returncode == 0
    assert result.stdout == expected + "\n"
