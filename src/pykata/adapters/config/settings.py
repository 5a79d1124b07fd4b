"""Typed access to the ``[pykata]`` configuration section."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, cast

from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, StrictBool, StrictInt, ValidationError

from pykata.domain.errors import ConfigurationError

SETTINGS_SECTION = "pykata"


class KataSettings(BaseModel):
    """Pydantic model for the ``[pykata]`` section.

    Attributes:
        id_start: First id handed out by ``pykata ids`` without ``--start``.
        trace_calls: Wrap kata calls with the starts/ends call logger.

    Example:
        >>> KataSettings().id_start
        1
        >>> KataSettings(id_start=40, trace_calls=True).trace_calls
        True
    """

    id_start: StrictInt = 1
    trace_calls: StrictBool = False

    model_config = ConfigDict(extra="ignore", frozen=True)


def parse_kata_settings(section: Mapping[str, Any]) -> KataSettings:
    """Validate a raw ``[pykata]`` mapping.

    Raises:
        ConfigurationError: If a value has the wrong type.

    Example:
        >>> parse_kata_settings({"id_start": 7}).id_start
        7
        >>> parse_kata_settings({"id_start": "seven"})  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        pykata.domain.errors.ConfigurationError: invalid [pykata] configuration
    """
    try:
        return KataSettings.model_validate(dict(section))
    except ValidationError as exc:
        problems = "; ".join(f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors())
        raise ConfigurationError(f"invalid [{SETTINGS_SECTION}] configuration: {problems}") from exc


def load_kata_settings(config: Config) -> KataSettings:
    """Read and validate the ``[pykata]`` section of a loaded Config."""
    raw: object = config.get(SETTINGS_SECTION, default={})
    return parse_kata_settings(cast("dict[str, Any]", raw) if raw else {})


__all__ = [
    "SETTINGS_SECTION",
    "KataSettings",
    "load_kata_settings",
    "parse_kata_settings",
]
