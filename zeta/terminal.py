"""Output capability checks evaluated once per invocation.

Each check reduces the environment to one value that the CLI stores on
``ListingOptions``; formatting code never calls these.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import TextIO

from .format import PermissionStyle

UNICODE_PROBE = "┃━📁"


def stream_is_tty(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except (OSError, ValueError):
        return False


def color_enabled(no_color: bool, stream: TextIO, environ: Mapping[str, str] | None = None) -> bool:
    """Return whether ANSI color should be written to ``stream``.

    Color is off when requested by flag, when ``NO_COLOR`` is set to any
    non-empty value, or when ``stream`` is not a terminal.
    """
    if no_color:
        return False
    if environ is None:
        environ = os.environ
    if environ.get("NO_COLOR", ""):
        return False
    return stream_is_tty(stream)


def unicode_enabled(force_ascii: bool, stream: TextIO) -> bool:
    """Return whether ``stream`` can carry box drawing and emoji icons."""
    if force_ascii:
        return False
    encoding = getattr(stream, "encoding", None) or "utf-8"
    try:
        UNICODE_PROBE.encode(encoding)
    except (LookupError, UnicodeEncodeError):
        return False
    return True


def default_permission_style() -> PermissionStyle:
    """Attribute flags on Windows, POSIX bits everywhere else."""
    if os.name == "nt":
        return PermissionStyle.ATTRIBUTES
    return PermissionStyle.POSIX


__all__ = [
    "stream_is_tty",
    "color_enabled",
    "unicode_enabled",
    "default_permission_style",
]
