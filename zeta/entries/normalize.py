"""Convert raw ``os.stat_result`` data into portable ``Entry`` records.

Everything here works on a stat result that was already obtained. Nothing in
this module touches the filesystem, so a missing platform field can only
default to ``False``/zero and never fail a listing.
"""

from __future__ import annotations

import stat
from pathlib import Path

from .types import Entry, FileType, Permissions

ATTRIBUTE_EXECUTABLE_EXTENSIONS = frozenset({"exe", "bat", "cmd", "com"})

# Windows attribute bits, mirrored from ``stat`` where the constants exist.
_FILE_ATTRIBUTE_READONLY = getattr(stat, "FILE_ATTRIBUTE_READONLY", 0x1)
_FILE_ATTRIBUTE_HIDDEN = getattr(stat, "FILE_ATTRIBUTE_HIDDEN", 0x2)
_FILE_ATTRIBUTE_SYSTEM = getattr(stat, "FILE_ATTRIBUTE_SYSTEM", 0x4)
_FILE_ATTRIBUTE_ARCHIVE = getattr(stat, "FILE_ATTRIBUTE_ARCHIVE", 0x20)

_SPECIAL_KIND_CHECKS = (
    stat.S_ISCHR,
    stat.S_ISBLK,
    stat.S_ISFIFO,
    stat.S_ISSOCK,
    stat.S_ISDOOR,
    stat.S_ISPORT,
    stat.S_ISWHT,
)

_NS_PER_SECOND = 1_000_000_000


def file_type_from_mode(mode: int) -> FileType:
    """Map an ``st_mode`` value onto the five portable kinds."""
    if stat.S_ISREG(mode):
        return FileType.REGULAR
    if stat.S_ISDIR(mode):
        return FileType.DIRECTORY
    if stat.S_ISLNK(mode):
        return FileType.SYMLINK
    if any(check(mode) for check in _SPECIAL_KIND_CHECKS):
        return FileType.SPECIAL
    return FileType.UNKNOWN


def parse_extension(name: str) -> str:
    """Return the text after the last dot of ``name``.

    A dot in first position marks a dotfile, not an extension, and a trailing
    dot has nothing after it; both yield ``""``.
    """
    dot_index = name.rfind(".")
    if dot_index <= 0 or dot_index == len(name) - 1:
        return ""
    return name[dot_index + 1 :]


def _timestamp_ns(raw_stat: object, ns_field: str, seconds_field: str) -> int:
    """Read an integer-nanosecond timestamp, converting float seconds if needed."""
    value = getattr(raw_stat, ns_field, None)
    if isinstance(value, int):
        return value
    seconds = getattr(raw_stat, seconds_field, None)
    if isinstance(seconds, (int, float)):
        return int(seconds * _NS_PER_SECOND)
    return 0


def permissions_from_stat(name: str, raw_stat: object) -> Permissions:
    """Derive POSIX bits and attribute flags from one stat result."""
    mode = int(getattr(raw_stat, "st_mode", 0) or 0)
    attributes = getattr(raw_stat, "st_file_attributes", None)
    attributes = int(attributes) if isinstance(attributes, int) else 0

    owner_write = bool(mode & stat.S_IWUSR)
    owner_execute = bool(mode & stat.S_IXUSR)
    hidden = name.startswith(".") or bool(attributes & _FILE_ATTRIBUTE_HIDDEN)
    readonly = bool(attributes & _FILE_ATTRIBUTE_READONLY) or not owner_write

    if attributes:
        executable = parse_extension(name).lower() in ATTRIBUTE_EXECUTABLE_EXTENSIONS
    else:
        executable = owner_execute

    return Permissions(
        owner_read=bool(mode & stat.S_IRUSR),
        owner_write=owner_write,
        owner_execute=owner_execute,
        group_read=bool(mode & stat.S_IRGRP),
        group_write=bool(mode & stat.S_IWGRP),
        group_execute=bool(mode & stat.S_IXGRP),
        other_read=bool(mode & stat.S_IROTH),
        other_write=bool(mode & stat.S_IWOTH),
        other_execute=bool(mode & stat.S_IXOTH),
        readonly=readonly,
        hidden=hidden,
        system=bool(attributes & _FILE_ATTRIBUTE_SYSTEM),
        archive=bool(attributes & _FILE_ATTRIBUTE_ARCHIVE),
        executable=executable,
    )


def entry_from_stat(directory: Path, name: str, raw_stat: object) -> Entry:
    """Build an ``Entry`` for ``directory / name`` from ``raw_stat``.

    ``raw_stat`` is whichever stat the caller chose: the link's own ``lstat``
    when symlinks are not followed, the target's ``stat`` when they are. The
    entry type and size always describe that same stat result.
    """
    mode = int(getattr(raw_stat, "st_mode", 0) or 0)
    created_ns = getattr(raw_stat, "st_birthtime_ns", None)
    if not isinstance(created_ns, int):
        created_ns = _timestamp_ns(raw_stat, "st_ctime_ns", "st_ctime")

    return Entry(
        path=Path(directory) / name,
        name=name,
        file_type=file_type_from_mode(mode),
        size=max(0, int(getattr(raw_stat, "st_size", 0) or 0)),
        permissions=permissions_from_stat(name, raw_stat),
        modified_time=_timestamp_ns(raw_stat, "st_mtime_ns", "st_mtime"),
        created_time=created_ns,
        extension=parse_extension(name),
    )


__all__ = [
    "ATTRIBUTE_EXECUTABLE_EXTENSIONS",
    "file_type_from_mode",
    "parse_extension",
    "permissions_from_stat",
    "entry_from_stat",
]
