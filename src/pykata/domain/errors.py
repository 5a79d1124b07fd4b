"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Invalid values in the ``[pykata]`` configuration section.

    Example:
        >>> from pykata.domain.errors import ConfigurationError
        >>> str(ConfigurationError("id_start must be an integer"))
        'id_start must be an integer'
    """


class InvalidCardError(ValueError):
    """Playing-card notation that does not name a card of the 52-card deck.

    Inherits from ValueError so callers treating it as bad input keep working.

    Example:
        >>> err = InvalidCardError("Unknown card: 1X")
        >>> isinstance(err, ValueError)
        True
    """


class InvalidDimensionsError(ValueError):
    """Rectangle dimensions too small to hold both borders.

    Example:
        >>> str(InvalidDimensionsError("width must be at least 2, got 1"))
        'width must be at least 2, got 1'
    """


__all__ = [
    "ConfigurationError",
    "InvalidCardError",
    "InvalidDimensionsError",
]
