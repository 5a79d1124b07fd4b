"""In-memory configuration adapters for tests.

Same signatures as the production adapters, but nothing is read from disk.
"""

from __future__ import annotations

import tempfile
from pathlib import Path

from lib_layered_config import Config

from ...domain.enums import OutputFormat
from ..config.settings import KataSettings, parse_kata_settings


def get_config_in_memory(
    *,
    profile: str | None = None,
    start_dir: str | None = None,
) -> Config:
    """Return an empty in-memory Config."""
    return Config({}, {})


def get_default_config_path_in_memory() -> Path:
    """Return a synthetic path (not a real file)."""
    return Path(tempfile.gettempdir()) / "pykata" / "defaultconfig.toml"


def display_config_in_memory(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    profile: str | None = None,
) -> None:
    """No-op display."""


def load_kata_settings_in_memory(config: Config) -> KataSettings:
    """Parse ``[pykata]`` with the real model, treating a missing section as defaults."""
    raw = config.as_dict().get("pykata", {})
    return parse_kata_settings(raw if raw else {})


__all__ = [
    "display_config_in_memory",
    "get_config_in_memory",
    "get_default_config_path_in_memory",
    "load_kata_settings_in_memory",
]
