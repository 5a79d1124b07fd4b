"""Static package metadata and layered-config identifiers.

Keeps the values the CLI banner, ``--version`` and ``lib_layered_config``
need in one importable place, without touching ``importlib.metadata`` at
import time.

Contents:
    * Metadata constants (``name``, ``title``, ``version`` ...)
    * ``LAYEREDCONF_*`` identifiers used to locate configuration files
    * :func:`print_info` - human-readable metadata dump for ``pykata info``
"""

from __future__ import annotations

from typing import Final

name: Final[str] = "pykata"
title: Final[str] = "Closure, decorator and string exercises with a small CLI"
version: Final[str] = "1.0.0"
homepage: Final[str] = "https://github.com/pykata/pykata"
author: Final[str] = "pykata contributors"
author_email: Final[str] = "pykata@example.org"
shell_command: Final[str] = "pykata"

#: Vendor/app/slug triple handed to ``lib_layered_config.read_config``.
LAYEREDCONF_VENDOR: Final[str] = "pykata"
LAYEREDCONF_APP: Final[str] = "pykata"
LAYEREDCONF_SLUG: Final[str] = "pykata"


def print_info() -> None:
    """Print the package metadata as an aligned key/value block.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for pykata:
        ...
    """
    fields = (
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    )
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "author",
    "author_email",
    "homepage",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
