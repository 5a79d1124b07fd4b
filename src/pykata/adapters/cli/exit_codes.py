"""Exit codes used by CLI error paths.

Values follow errno and sysexits.h so scripts can tell a bad argument from
a broken configuration without parsing stderr.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """POSIX-conventional exit codes.

    * 0-1: generic success / failure
    * 22: EINVAL, the user passed something the kata cannot handle
    * 78: EX_CONFIG (sysexits.h), the ``[pykata]`` section is invalid

    Example:
        >>> int(ExitCode.INVALID_ARGUMENT)
        22
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    INVALID_ARGUMENT = 22
    CONFIG_ERROR = 78


__all__ = ["ExitCode"]
