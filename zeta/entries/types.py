"""Domain datatypes for normalized directory entries."""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass
from pathlib import Path


class FileType(enum.Enum):
    """Portable kind of a filesystem object."""

    REGULAR = "regular"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    SPECIAL = "special"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Permissions:
    """Platform-normalized capability set.

    Both the POSIX triplets and the attribute flags live on one record. Fields
    a platform cannot report stay ``False``; the formatter picks which shape to
    show.
    """

    owner_read: bool = False
    owner_write: bool = False
    owner_execute: bool = False
    group_read: bool = False
    group_write: bool = False
    group_execute: bool = False
    other_read: bool = False
    other_write: bool = False
    other_execute: bool = False
    readonly: bool = False
    hidden: bool = False
    system: bool = False
    archive: bool = False
    executable: bool = False


def _path_separators() -> tuple[str, ...]:
    separators = {"/", os.sep}
    if os.altsep:
        separators.add(os.altsep)
    return tuple(sorted(separators))


@dataclass(frozen=True)
class Entry:
    """One filesystem object observed while scanning a directory.

    Timestamps are integer nanoseconds since the Unix epoch. ``extension``
    never carries the leading dot and is empty when the name has none.
    """

    path: Path
    name: str
    file_type: FileType
    size: int
    permissions: Permissions
    modified_time: int
    created_time: int
    extension: str = ""

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("entry name must be non-empty")
        if any(sep in self.name for sep in _path_separators()):
            raise ValueError(f"entry name contains a path separator: {self.name!r}")
        if self.size < 0:
            raise ValueError(f"entry size must be non-negative: {self.size}")

    @property
    def is_dir(self) -> bool:
        return self.file_type is FileType.DIRECTORY


__all__ = [
    "FileType",
    "Permissions",
    "Entry",
]
