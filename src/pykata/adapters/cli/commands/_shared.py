"""Helpers shared by the kata commands."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

import rich_click as click

from pykata.adapters.config.settings import KataSettings
from pykata.domain.closures import logger as call_logger
from pykata.domain.errors import ConfigurationError

from ..context import CLIContext
from ..exit_codes import ExitCode

T = TypeVar("T")

trace_log = logging.getLogger("pykata.trace")


def load_settings(cli_ctx: CLIContext) -> KataSettings:
    """Return the ``[pykata]`` settings or exit with ``CONFIG_ERROR``."""
    try:
        return cli_ctx.services.load_kata_settings(cli_ctx.config)
    except ConfigurationError as exc:
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc


def traced(settings: KataSettings, func: Callable[..., T]) -> Callable[..., T]:
    """Wrap *func* with the starts/ends call logger when ``trace_calls`` is on."""
    if settings.trace_calls:
        return call_logger(func, trace_log.info)
    return func


def format_number(value: float) -> str:
    """Render integral floats without a trailing ``.0``.

    >>> format_number(10.0), format_number(2.5), format_number(float("nan"))
    ('10', '2.5', 'nan')
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


__all__ = ["format_number", "load_settings", "trace_log", "traced"]
