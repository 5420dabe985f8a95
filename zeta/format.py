"""Pure display formatting for entry fields.

Size, permission and time rendering. None of these functions perform I/O;
anything environment-dependent (current time, permission style) comes in as
an argument.
"""

from __future__ import annotations

import enum
import time
from datetime import datetime

from .entries import FileType, Permissions

SIZE_UNITS = ("B", "K", "M", "G", "T", "P")
SECONDS_PER_DAY = 86_400
DAYS_PER_MONTH = 30
DAYS_PER_YEAR = 365
MONTH_NAMES = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
UNKNOWN_TIME = "?"

_NS_PER_SECOND = 1_000_000_000


class TimeStyle(enum.Enum):
    RELATIVE = "relative"
    ABSOLUTE = "absolute"


class PermissionStyle(enum.Enum):
    POSIX = "posix"
    ATTRIBUTES = "attributes"


_TYPE_GLYPHS = {
    FileType.DIRECTORY: "d",
    FileType.SYMLINK: "l",
    FileType.SPECIAL: "s",
}


def format_size(size: int) -> str:
    """Render a byte count as ``1023B``, ``1.5K``, ``1.0G`` and so on."""
    if size < 0:
        raise ValueError(f"size must be non-negative: {size}")
    value = float(size)
    unit_index = 0
    while value >= 1024.0 and unit_index < len(SIZE_UNITS) - 1:
        value /= 1024.0
        unit_index += 1
    if unit_index == 0:
        return f"{size}{SIZE_UNITS[0]}"
    return f"{value:.1f}{SIZE_UNITS[unit_index]}"


def _flag(enabled: bool, char: str) -> str:
    return char if enabled else "-"


def format_permissions(
    perms: Permissions,
    file_type: FileType,
    style: PermissionStyle = PermissionStyle.POSIX,
) -> str:
    """Render ``perms`` as ``drwxr-xr-x`` (POSIX) or ``RHSD`` (attributes)."""
    if style is PermissionStyle.ATTRIBUTES:
        if file_type is FileType.DIRECTORY:
            kind = "D"
        elif file_type is FileType.SYMLINK:
            kind = "L"
        elif perms.archive:
            kind = "A"
        else:
            kind = "-"
        return _flag(perms.readonly, "R") + _flag(perms.hidden, "H") + _flag(perms.system, "S") + kind

    return "".join(
        (
            _TYPE_GLYPHS.get(file_type, "-"),
            _flag(perms.owner_read, "r"),
            _flag(perms.owner_write, "w"),
            _flag(perms.owner_execute, "x"),
            _flag(perms.group_read, "r"),
            _flag(perms.group_write, "w"),
            _flag(perms.group_execute, "x"),
            _flag(perms.other_read, "r"),
            _flag(perms.other_write, "w"),
            _flag(perms.other_execute, "x"),
        )
    )


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'' if count == 1 else 's'} ago"


def format_relative_time(timestamp_ns: int, now_ns: int) -> str:
    """Render the age of ``timestamp_ns`` in whole fixed-length days."""
    days = (now_ns - timestamp_ns) // (SECONDS_PER_DAY * _NS_PER_SECOND)
    if days <= 0:
        return "Today"
    if days == 1:
        return "Yesterday"
    if days < DAYS_PER_MONTH:
        return f"{days} days ago"
    if days < DAYS_PER_YEAR:
        return _plural(days // DAYS_PER_MONTH, "month")
    return _plural(days // DAYS_PER_YEAR, "year")


def format_absolute_time(timestamp_ns: int, now_ns: int) -> str:
    """Render ``Mon dd HH:MM`` for this year, ``Mon dd  YYYY`` otherwise.

    Timestamps the platform clock cannot represent render as ``UNKNOWN_TIME``.
    """
    try:
        stamp = datetime.fromtimestamp(timestamp_ns / _NS_PER_SECOND)
        current_year = datetime.fromtimestamp(now_ns / _NS_PER_SECOND).year
    except (ValueError, OverflowError, OSError):
        return UNKNOWN_TIME
    month = MONTH_NAMES[stamp.month - 1]
    if stamp.year == current_year:
        return f"{month} {stamp.day:2d} {stamp.hour:02d}:{stamp.minute:02d}"
    return f"{month} {stamp.day:2d}  {stamp.year:4d}"


def format_time(
    timestamp_ns: int,
    style: TimeStyle = TimeStyle.RELATIVE,
    *,
    now_ns: int | None = None,
) -> str:
    """Render a nanosecond timestamp in the listing's single time style."""
    if now_ns is None:
        now_ns = time.time_ns()
    if style is TimeStyle.ABSOLUTE:
        return format_absolute_time(timestamp_ns, now_ns)
    return format_relative_time(timestamp_ns, now_ns)


def parse_time_style(value: object, default: TimeStyle = TimeStyle.RELATIVE) -> TimeStyle:
    if not isinstance(value, str):
        return default
    try:
        return TimeStyle(value.strip().lower())
    except ValueError:
        return default


__all__ = [
    "SIZE_UNITS",
    "MONTH_NAMES",
    "UNKNOWN_TIME",
    "TimeStyle",
    "PermissionStyle",
    "format_size",
    "format_permissions",
    "format_relative_time",
    "format_absolute_time",
    "format_time",
    "parse_time_style",
]
