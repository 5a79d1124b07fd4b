"""CLI kata stories: rot13, card-id, rectangle, polynom, ids and call tracing."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from click.testing import CliRunner, Result
from lib_layered_config import Config

from pykata.adapters import cli as cli_mod
from pykata.adapters.cli.commands import _shared as shared_mod
from pykata.adapters.cli.exit_codes import ExitCode

ConfigFactory = Callable[[dict[str, Any]], Config]
InjectConfig = Callable[[Config], Callable[[], Any]]


# ======================== rot13 ========================


@pytest.mark.os_agnostic
def test_rot13_prints_encoded_text(cli_runner: CliRunner, production_factory: Callable[[], Any]) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["rot13", "Gb trg gb gur bgure fvqr!"], obj=production_factory)

    assert result.exit_code == 0
    assert result.stdout == "To get to the other side!\n"


# ======================== card-id ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize(("card", "expected"), [("A♣", "0"), ("10♦", "22"), ("K♠", "51")])
def test_card_id_prints_deck_position(
    cli_runner: CliRunner, production_factory: Callable[[], Any], card: str, expected: str
) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["card-id", card], obj=production_factory)

    assert result.exit_code == 0
    assert result.stdout.strip() == expected


@pytest.mark.os_agnostic
def test_card_id_rejects_unknown_card_with_invalid_argument(
    cli_runner: CliRunner, production_factory: Callable[[], Any]
) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["card-id", "Z♣"], obj=production_factory)

    assert result.exit_code == ExitCode.INVALID_ARGUMENT
    assert "Unknown rank" in result.stderr


# ======================== rectangle ========================


@pytest.mark.os_agnostic
def test_rectangle_draws_box(cli_runner: CliRunner, production_factory: Callable[[], Any]) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["rectangle", "6", "4"], obj=production_factory)

    assert result.exit_code == 0
    assert result.stdout == "┌────┐\n│    │\n│    │\n└────┘\n"


@pytest.mark.os_agnostic
def test_rectangle_with_too_small_side_fails(cli_runner: CliRunner, production_factory: Callable[[], Any]) -> None:
    """The domain error propagates out of the command."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["rectangle", "1", "4"], obj=production_factory)

    assert result.exit_code != 0
    assert "width must be at least 2" in str(result.exception)


# ======================== polynom ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("args", "expected"),
    [
        (["--x", "2", "2", "3", "5"], "19"),
        (["--x", "5", "--", "1", "-3"], "2"),
        (["--x", "0.5", "8"], "8"),
        (["--x", "0.5", "1", "0"], "0.5"),
    ],
)
def test_polynom_prints_value(
    cli_runner: CliRunner, production_factory: Callable[[], Any], args: list[str], expected: str
) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["polynom", *args], obj=production_factory)

    assert result.exit_code == 0
    assert result.stdout.strip() == expected


@pytest.mark.os_agnostic
def test_polynom_without_coefficients_is_invalid(cli_runner: CliRunner, production_factory: Callable[[], Any]) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["polynom", "--x", "1"], obj=production_factory)

    assert result.exit_code == ExitCode.INVALID_ARGUMENT
    assert "at least one coefficient" in result.stderr


# ======================== ids ========================


@pytest.mark.os_agnostic
def test_ids_start_from_configured_value(
    cli_runner: CliRunner, config_factory: ConfigFactory, inject_config: InjectConfig
) -> None:
    factory = inject_config(config_factory({"pykata": {"id_start": 40}}))

    result: Result = cli_runner.invoke(cli_mod.cli, ["ids", "--count", "3"], obj=factory)

    assert result.exit_code == 0
    assert result.stdout.split() == ["40", "41", "42"]


@pytest.mark.os_agnostic
def test_ids_start_option_overrides_config(
    cli_runner: CliRunner, config_factory: ConfigFactory, inject_config: InjectConfig
) -> None:
    factory = inject_config(config_factory({"pykata": {"id_start": 40}}))

    result: Result = cli_runner.invoke(cli_mod.cli, ["ids", "--start", "4", "--count", "2"], obj=factory)

    assert result.stdout.split() == ["4", "5"]


@pytest.mark.os_agnostic
def test_ids_rejects_zero_count(cli_runner: CliRunner, production_factory: Callable[[], Any]) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["ids", "--count", "0"], obj=production_factory)

    assert result.exit_code == 2


@pytest.mark.os_agnostic
def test_invalid_settings_exit_with_config_error(
    cli_runner: CliRunner, config_factory: ConfigFactory, inject_config: InjectConfig
) -> None:
    factory = inject_config(config_factory({"pykata": {"id_start": "forty"}}))

    result: Result = cli_runner.invoke(cli_mod.cli, ["ids"], obj=factory)

    assert result.exit_code == ExitCode.CONFIG_ERROR
    assert "invalid [pykata] configuration" in result.stderr


# ======================== trace_calls ========================


@pytest.mark.os_agnostic
def test_trace_calls_logs_starts_and_ends_of_each_kata_call(
    cli_runner: CliRunner,
    config_factory: ConfigFactory,
    inject_config: InjectConfig,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """With trace_calls on, the call logger reports through the trace log."""
    lines: list[str] = []
    monkeypatch.setattr(shared_mod.trace_log, "info", lines.append)
    factory = inject_config(config_factory({"pykata": {"trace_calls": True}}))

    result: Result = cli_runner.invoke(cli_mod.cli, ["rot13", "hello"], obj=factory)

    assert result.exit_code == 0
    assert lines == ["encode_to_rot13(hello) starts", "encode_to_rot13(hello) ends"]


@pytest.mark.os_agnostic
def test_trace_calls_off_leaves_trace_log_silent(
    cli_runner: CliRunner,
    config_factory: ConfigFactory,
    inject_config: InjectConfig,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    lines: list[str] = []
    monkeypatch.setattr(shared_mod.trace_log, "info", lines.append)
    factory = inject_config(config_factory({"pykata": {"trace_calls": False}}))

    result: Result = cli_runner.invoke(cli_mod.cli, ["ids", "--start", "7"], obj=factory)

    assert result.stdout.strip() == "7"
    assert lines == []


@pytest.mark.os_agnostic
def test_trace_calls_names_the_id_generator(
    cli_runner: CliRunner,
    config_factory: ConfigFactory,
    inject_config: InjectConfig,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    lines: list[str] = []
    monkeypatch.setattr(shared_mod.trace_log, "info", lines.append)
    factory = inject_config(config_factory({"pykata": {"trace_calls": True}}))

    cli_runner.invoke(cli_mod.cli, ["ids", "--start", "3", "--count", "2"], obj=factory)

    assert lines == ["next_id() starts", "next_id() ends", "next_id() starts", "next_id() ends"]
