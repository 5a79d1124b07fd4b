"""CLI core stories: traceback handling, main entry, help, info, unknown command."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner, Result

from pykata import __init__conf__
from pykata.adapters import cli as cli_mod
from pykata.adapters.cli.exit_codes import ExitCode
from pykata.composition import build_production


@pytest.mark.os_agnostic
def test_snapshot_traceback_state_is_disabled_by_default(managed_traceback_state: None) -> None:
    assert cli_mod.snapshot_traceback_state() == (False, False)


@pytest.mark.os_agnostic
def test_apply_then_restore_returns_flags_to_previous_values(managed_traceback_state: None) -> None:
    previous = cli_mod.snapshot_traceback_state()
    cli_mod.apply_traceback_preferences(True)

    assert lib_cli_exit_tools.config.traceback is True
    assert lib_cli_exit_tools.config.traceback_force_color is True

    cli_mod.restore_traceback_state(previous)

    assert lib_cli_exit_tools.config.traceback is False
    assert lib_cli_exit_tools.config.traceback_force_color is False


@pytest.mark.os_agnostic
def test_traceback_flag_is_active_while_a_command_runs(
    monkeypatch: pytest.MonkeyPatch,
    managed_traceback_state: None,
) -> None:
    seen: list[tuple[bool, bool]] = []

    def record() -> None:
        seen.append((lib_cli_exit_tools.config.traceback, lib_cli_exit_tools.config.traceback_force_color))

    monkeypatch.setattr(__init__conf__, "print_info", record)

    exit_code = cli_mod.main(["--traceback", "info"], services_factory=build_production)

    assert exit_code == 0
    assert seen == [(True, True)]
    assert lib_cli_exit_tools.config.traceback is False


@pytest.mark.os_agnostic
def test_restore_traceback_false_keeps_flags_enabled(managed_traceback_state: None) -> None:
    cli_mod.main(["--traceback", "info"], restore_traceback=False, services_factory=build_production)

    assert lib_cli_exit_tools.config.traceback is True
    assert lib_cli_exit_tools.config.traceback_force_color is True


@pytest.mark.os_agnostic
def test_main_without_services_factory_is_rejected() -> None:
    with pytest.raises(ValueError, match="services_factory"):
        cli_mod.main(["info"])


@pytest.mark.os_agnostic
def test_main_runs_info_and_returns_zero(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
) -> None:
    assert cli_mod.main(["info"], services_factory=build_production) == 0
    assert f"Info for {__init__conf__.name}:" in capsys.readouterr().out


@pytest.mark.os_agnostic
def test_main_returns_command_output_for_a_kata(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
) -> None:
    assert cli_mod.main(["polynom", "--x", "2", "2", "3", "5"], services_factory=build_production) == 0
    assert capsys.readouterr().out.strip() == "19"


@pytest.mark.os_agnostic
def test_main_without_arguments_prints_help(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
) -> None:
    assert cli_mod.main([], services_factory=build_production) == 0
    assert "Usage:" in capsys.readouterr().out


@pytest.mark.os_agnostic
@pytest.mark.parametrize("args", [[], ["--traceback"]])
def test_root_without_subcommand_prints_help(
    cli_runner: CliRunner, production_factory: Callable[[], Any], args: list[str]
) -> None:
    result = cli_runner.invoke(cli_mod.cli, args, obj=production_factory)

    assert result.exit_code == 0
    assert "Usage:" in result.output


@pytest.mark.os_agnostic
def test_help_lists_every_kata_command(cli_runner: CliRunner, production_factory: Callable[[], Any]) -> None:
    result = cli_runner.invoke(cli_mod.cli, ["--help"], obj=production_factory)

    for command in ("card-id", "config", "ids", "info", "polynom", "rectangle", "rot13"):
        assert command in result.output


@pytest.mark.os_agnostic
def test_version_option_prints_version(cli_runner: CliRunner, production_factory: Callable[[], Any]) -> None:
    result = cli_runner.invoke(cli_mod.cli, ["--version"], obj=production_factory)

    assert result.exit_code == 0
    assert f"{__init__conf__.shell_command} version {__init__conf__.version}" in result.output


@pytest.mark.os_agnostic
def test_traceback_flag_prints_full_traceback_for_domain_errors(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
    strip_ansi: Callable[[str], str],
) -> None:
    exit_code = cli_mod.main(["--traceback", "rectangle", "1", "1"], services_factory=build_production)

    plain_err = strip_ansi(capsys.readouterr().err)

    assert exit_code != 0
    assert "Traceback (most recent call last)" in plain_err
    assert "InvalidDimensionsError: width must be at least 2, got 1" in plain_err
    assert "[TRUNCATED" not in plain_err
    assert lib_cli_exit_tools.config.traceback is False


@pytest.mark.os_agnostic
def test_domain_error_without_traceback_prints_a_summary(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
    strip_ansi: Callable[[str], str],
) -> None:
    exit_code = cli_mod.main(["rectangle", "3", "0"], services_factory=build_production)

    plain_err = strip_ansi(capsys.readouterr().err)

    assert exit_code != 0
    assert "Traceback (most recent call last)" not in plain_err
    assert "height must be at least 2" in plain_err


@pytest.mark.os_agnostic
def test_main_maps_explicit_exit_codes(managed_traceback_state: None) -> None:
    assert cli_mod.main(["card-id", "1♣"], services_factory=build_production) == ExitCode.INVALID_ARGUMENT


@pytest.mark.os_agnostic
def test_info_command_displays_project_metadata(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["info"], obj=production_factory)

    assert result.exit_code == 0
    assert f"Info for {__init__conf__.name}:" in result.output
    assert __init__conf__.version in result.output


@pytest.mark.os_agnostic
def test_unknown_command_shows_no_such_command_error(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["does-not-exist"], obj=production_factory)

    assert result.exit_code != 0
    assert "No such command" in result.output


@pytest.mark.os_agnostic
def test_root_without_services_factory_is_a_bug(cli_runner: CliRunner) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["info"], obj=None)

    assert isinstance(result.exception, RuntimeError)


@pytest.mark.os_agnostic
def test_stored_cli_context_is_returned_to_subcommands() -> None:
    from unittest.mock import MagicMock

    from pykata.adapters.cli.context import CLIContext, get_cli_context
    from pykata.composition import build_testing

    ctx = MagicMock()
    services = build_testing()
    config = services.get_config()

    cli_mod.store_cli_context(ctx, traceback=False, config=config, services=services, profile="test")

    assert get_cli_context(ctx) == CLIContext(traceback=False, config=config, services=services, profile="test")


@pytest.mark.os_agnostic
def test_cli_context_is_required_before_subcommands_run() -> None:
    from unittest.mock import MagicMock

    from pykata.adapters.cli.context import get_cli_context

    ctx = MagicMock()
    ctx.obj = None

    with pytest.raises(RuntimeError, match="not initialized"):
        get_cli_context(ctx)
