"""CLI command implementations.

Contents:
    * Info command from :mod:`.info`
    * Config command from :mod:`.config`
    * String kata commands from :mod:`.strings_cmd`
    * Closure kata commands from :mod:`.closures_cmd`
"""

from __future__ import annotations

from .closures_cmd import cli_ids, cli_polynom
from .config import cli_config
from .info import cli_info
from .strings_cmd import cli_card_id, cli_rectangle, cli_rot13

__all__ = [
    "cli_card_id",
    "cli_config",
    "cli_ids",
    "cli_info",
    "cli_polynom",
    "cli_rectangle",
    "cli_rot13",
]
