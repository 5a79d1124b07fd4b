"""CLI entry point and execution wrapper.

Both the ``pykata`` console script and ``python -m pykata`` end up in
:func:`main`, so a kata command behaves the same either way: explicit exit
codes from the commands (22 for an unknown card or a polynomial without
coefficients, 78 for a broken ``[pykata]`` section) pass through, and any
other exception is formatted by ``lib_cli_exit_tools``.

Contents:
    * :func:`main` - run the CLI, format failures, return an exit code.
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import lib_cli_exit_tools
import lib_log_rich.runtime

from pykata import __init__conf__

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import (
    apply_traceback_preferences,
    restore_traceback_state,
    snapshot_traceback_state,
)
from .exit_codes import ExitCode

if TYPE_CHECKING:
    from pykata.composition import AppServices


def _run_cli(argv: Sequence[str] | None, *, services_factory: Callable[[], AppServices]) -> int:
    """Invoke the root group and translate every outcome into an exit code.

    Args:
        argv: Arguments after the program name; ``None`` reads ``sys.argv``.
        services_factory: Handed to the root group as ``ctx.obj``.

    Returns:
        ``0`` on success, the code carried by ``SystemExit`` or a Click
        error, or the code ``lib_cli_exit_tools`` maps the exception to
        (for example an ``InvalidDimensionsError`` from ``rectangle``).
    """
    import sys

    import click

    from .root import cli

    # lib_cli_exit_tools.run_cli cannot pass ``obj``; mirror it with Click directly.
    args = list(argv) if argv is not None else sys.argv[1:]

    try:
        cli.main(
            args=args,
            prog_name=__init__conf__.shell_command,
            obj=services_factory,
            standalone_mode=False,
        )
        return int(ExitCode.SUCCESS)
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except BaseException as exc:
        # Last boundary: SystemExit and KeyboardInterrupt are formatted here too.
        tracebacks_enabled = bool(getattr(lib_cli_exit_tools.config, "traceback", False))
        apply_traceback_preferences(tracebacks_enabled)
        length_limit = TRACEBACK_VERBOSE_LIMIT if tracebacks_enabled else TRACEBACK_SUMMARY_LIMIT
        lib_cli_exit_tools.print_exception_message(trace_back=tracebacks_enabled, length_limit=length_limit)
        return lib_cli_exit_tools.get_system_exit_code(exc)


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Run the ``pykata`` CLI and return its exit code.

    Shared by the console script and ``python -m pykata``. The lib_log_rich
    runtime started by the root command is shut down here, from the main
    thread only.

    Args:
        argv: CLI arguments such as ``["polynom", "--x", "2", "2", "3", "5"]``;
            ``None`` reads ``sys.argv``.
        restore_traceback: Put the traceback flags back afterwards so a
            ``--traceback`` run does not leak into the next call.
        services_factory: Callable returning :class:`AppServices`; pass
            ``build_production`` outside of tests.

    Returns:
        Process exit code, see :class:`~pykata.adapters.cli.exit_codes.ExitCode`.

    Raises:
        ValueError: If *services_factory* is missing.

    Example:
        >>> from pykata.composition import build_production
        >>> main(["rot13", "uryyb"], services_factory=build_production)  # doctest: +SKIP
        hello
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    previous_state = snapshot_traceback_state()
    try:
        return _run_cli(argv, services_factory=services_factory)
    finally:
        if restore_traceback:
            restore_traceback_state(previous_state)
        if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
            lib_log_rich.runtime.shutdown()


__all__ = ["main"]
