"""Application ports - callable Protocol definitions for adapter functions.

Each Protocol's ``__call__`` mirrors the signature of the adapter function
that implements it, so plain module-level functions satisfy the ports by
structural subtyping (PEP 544).
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from ..domain.enums import OutputFormat

if TYPE_CHECKING:
    from lib_layered_config import Config

    from ..adapters.config.settings import KataSettings


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class GetDefaultConfigPath(Protocol):
    """Return the path to the bundled default configuration file."""

    def __call__(self) -> Path: ...


class DisplayConfig(Protocol):
    """Display the provided configuration in the requested format."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class LoadKataSettings(Protocol):
    """Parse the ``[pykata]`` section of a loaded Config."""

    def __call__(self, config: Config) -> KataSettings: ...


class InitLogging(Protocol):
    """Initialize the lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


__all__ = [
    "DisplayConfig",
    "GetConfig",
    "GetDefaultConfigPath",
    "InitLogging",
    "LoadKataSettings",
]
