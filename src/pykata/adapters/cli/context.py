"""Click context helpers for CLI state management.

The root ``pykata`` group loads configuration once and parks it, together
with the wired services, on ``ctx.obj``; the kata commands (``rot13``,
``card-id``, ``rectangle``, ``polynom``, ``ids``) and ``config`` read it back
through :func:`get_cli_context`. The traceback helpers keep
``lib_cli_exit_tools`` in step with ``--traceback`` for the duration of one
CLI run.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

if TYPE_CHECKING:
    from pykata.composition import AppServices

TracebackState = tuple[bool, bool]
"""Captured traceback configuration: (traceback_enabled, force_color)."""


@dataclass(slots=True)
class CLIContext:
    """State the root command hands down to every subcommand.

    Attributes:
        traceback: ``--traceback`` was given.
        config: Merged layered configuration; kata commands read ``[pykata]``
            from it via ``services.load_kata_settings``.
        services: Adapters wired by the composition root.
        profile: Root ``--profile``; ``config --profile`` may override it.
    """

    traceback: bool
    config: Config
    services: AppServices
    profile: str | None = None


def store_cli_context(
    ctx: click.Context,
    *,
    traceback: bool,
    config: Config,
    services: AppServices,
    profile: str | None = None,
) -> None:
    """Replace ``ctx.obj`` (the services factory) with a :class:`CLIContext`.

    Args:
        ctx: Click context of the root ``pykata`` invocation.
        traceback: Whether full tracebacks were requested.
        config: Configuration loaded for *profile*.
        services: Services produced by the factory that arrived in ``ctx.obj``.
        profile: Profile name used to load *config*, if any.

    Example:
        >>> from unittest.mock import MagicMock
        >>> from pykata.composition import build_testing
        >>> ctx = MagicMock()
        >>> store_cli_context(ctx, traceback=True, config=MagicMock(), services=build_testing(), profile="test")
        >>> ctx.obj.traceback, ctx.obj.profile
        (True, 'test')
    """
    ctx.obj = CLIContext(traceback=traceback, config=config, services=services, profile=profile)


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Return the :class:`CLIContext` stored by the root command.

    Args:
        ctx: Click context of a subcommand such as ``ids`` or ``config``.

    Returns:
        The state stored by :func:`store_cli_context`.

    Raises:
        RuntimeError: If the root command did not run first, e.g. when a
            subcommand is invoked directly in a test.

    Example:
        >>> from unittest.mock import MagicMock
        >>> ctx = MagicMock()
        >>> ctx.obj = CLIContext(traceback=False, config=MagicMock(), services=MagicMock())
        >>> get_cli_context(ctx).profile is None
        True
    """
    if not isinstance(ctx.obj, CLIContext):
        raise RuntimeError("CLI context not initialized. Call store_cli_context first.")
    return ctx.obj


def apply_traceback_preferences(enabled: bool) -> None:
    """Mirror ``--traceback`` into ``lib_cli_exit_tools.config``.

    With tracebacks on, a failing ``pykata rectangle 1 1`` prints the whole
    ``InvalidDimensionsError`` traceback in colour instead of a one-line
    summary.

    Args:
        enabled: ``True`` enables full, coloured tracebacks.

    Example:
        >>> apply_traceback_preferences(True)
        >>> bool(lib_cli_exit_tools.config.traceback)
        True
    """
    lib_cli_exit_tools.config.traceback = bool(enabled)
    lib_cli_exit_tools.config.traceback_force_color = bool(enabled)


def snapshot_traceback_state() -> TracebackState:
    """Capture the current traceback flags for :func:`restore_traceback_state`.

    Returns:
        ``(traceback_enabled, force_color)``.

    Example:
        >>> state = snapshot_traceback_state()
        >>> isinstance(state, tuple) and len(state) == 2
        True
    """
    return (
        bool(getattr(lib_cli_exit_tools.config, "traceback", False)),
        bool(getattr(lib_cli_exit_tools.config, "traceback_force_color", False)),
    )


def restore_traceback_state(state: TracebackState) -> None:
    """Reapply flags captured by :func:`snapshot_traceback_state`.

    :func:`pykata.adapters.cli.main.main` calls this after each run so one
    ``--traceback`` invocation does not leak into the next one in the same
    process.

    Args:
        state: Tuple from :func:`snapshot_traceback_state`.

    Example:
        >>> original = snapshot_traceback_state()
        >>> apply_traceback_preferences(True)
        >>> restore_traceback_state(original)
        >>> lib_cli_exit_tools.config.traceback == original[0]
        True
    """
    lib_cli_exit_tools.config.traceback, lib_cli_exit_tools.config.traceback_force_color = state


__all__ = [
    "CLIContext",
    "TracebackState",
    "apply_traceback_preferences",
    "get_cli_context",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
]
