"""String kata commands: ``rot13``, ``card-id`` and ``rectangle``."""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from pykata.domain.errors import InvalidCardError
from pykata.domain.strings import encode_to_rot13, get_card_id, get_rectangle_string

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ..exit_codes import ExitCode
from ._shared import load_settings, traced

logger = logging.getLogger(__name__)


@click.command("rot13", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("text")
@click.pass_context
def cli_rot13(ctx: click.Context, text: str) -> None:
    """Print TEXT encoded with ROT13.

    Example:
        pykata rot13 "Gb trg gb gur bgure fvqr!"
    """
    settings = load_settings(get_cli_context(ctx))
    with lib_log_rich.runtime.bind(job_id="cli-rot13", extra={"command": "rot13"}):
        logger.info("Encoding text with ROT13", extra={"length": len(text)})
        click.echo(traced(settings, encode_to_rot13)(text))


@click.command("card-id", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("card")
@click.pass_context
def cli_card_id(ctx: click.Context, card: str) -> None:
    """Print the position of CARD (e.g. 'A♣', '10♦') in a fresh deck."""
    settings = load_settings(get_cli_context(ctx))
    with lib_log_rich.runtime.bind(job_id="cli-card-id", extra={"command": "card-id", "card": card}):
        try:
            card_id = traced(settings, get_card_id)(card)
        except InvalidCardError as exc:
            logger.warning("Rejected card notation", extra={"card": card})
            click.echo(f"Error: {exc}", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc
        click.echo(str(card_id))


@click.command("rectangle", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("width", type=int)
@click.argument("height", type=int)
@click.pass_context
def cli_rectangle(ctx: click.Context, width: int, height: int) -> None:
    """Draw a WIDTH x HEIGHT rectangle with box-drawing characters."""
    settings = load_settings(get_cli_context(ctx))
    extra = {"command": "rectangle", "width": width, "height": height}
    with lib_log_rich.runtime.bind(job_id="cli-rectangle", extra=extra):
        logger.info("Drawing rectangle", extra={"width": width, "height": height})
        click.echo(traced(settings, get_rectangle_string)(width, height), nl=False)


__all__ = ["cli_card_id", "cli_rectangle", "cli_rot13"]
