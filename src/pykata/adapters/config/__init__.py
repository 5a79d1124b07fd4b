"""Configuration adapter - loading, display and typed settings.

Contents:
    * :mod:`.loader` - Layered configuration loading with caching
    * :mod:`.display` - Configuration display in human/JSON formats
    * :mod:`.settings` - Pydantic model for the ``[pykata]`` section
"""

from __future__ import annotations

from .display import display_config
from .loader import get_config, get_default_config_path
from .settings import KataSettings, load_kata_settings

__all__ = [
    "KataSettings",
    "display_config",
    "get_config",
    "get_default_config_path",
    "load_kata_settings",
]
