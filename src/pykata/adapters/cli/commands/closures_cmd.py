"""Closure kata commands: ``polynom`` and ``ids``."""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from pykata.domain.closures import get_id_generator_function, get_polynom

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ..exit_codes import ExitCode
from ._shared import format_number, load_settings, traced

logger = logging.getLogger(__name__)


@click.command("polynom", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--x", "x", type=float, required=True, help="Point at which to evaluate the polynomial")
@click.argument("coefficients", nargs=-1, type=float)
@click.pass_context
def cli_polynom(ctx: click.Context, x: float, coefficients: tuple[float, ...]) -> None:
    r"""Evaluate the polynomial with COEFFICIENTS (highest degree first) at X.

    \b
    Example:
        pykata polynom --x 2 2 3 5      # 2*x^2 + 3*x + 5 -> 19
        pykata polynom --x 5 -- 1 -3    # negative values after --
    """
    settings = load_settings(get_cli_context(ctx))
    extra = {"command": "polynom", "degree": len(coefficients) - 1}
    with lib_log_rich.runtime.bind(job_id="cli-polynom", extra=extra):
        polynom = get_polynom(*coefficients)
        if polynom is None:
            click.echo("Error: at least one coefficient is required", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT)
        logger.info("Evaluating polynomial", extra={"x": x, "coefficients": list(coefficients)})
        click.echo(format_number(traced(settings, polynom)(x)))


@click.command("ids", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--start", type=int, default=None, help="First id (default: pykata.id_start from config)")
@click.option("--count", type=click.IntRange(min=1), default=1, show_default=True, help="How many ids to print")
@click.pass_context
def cli_ids(ctx: click.Context, start: int | None, count: int) -> None:
    """Print COUNT consecutive ids, one per line."""
    settings = load_settings(get_cli_context(ctx))
    first = settings.id_start if start is None else start
    with lib_log_rich.runtime.bind(job_id="cli-ids", extra={"command": "ids", "start": first, "count": count}):
        logger.info("Generating ids", extra={"start": first, "count": count})
        next_id = traced(settings, get_id_generator_function(first))
        for _ in range(count):
            click.echo(str(next_id()))


__all__ = ["cli_ids", "cli_polynom"]
