"""Directory scanning: one ``os.scandir`` pass producing normalized entries."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from ..errors import ListingError
from .normalize import entry_from_stat
from .types import Entry

logger = logging.getLogger(__name__)


def is_hidden_name(name: str) -> bool:
    return name.startswith(".")


def stat_dir_entry(child: os.DirEntry, follow_symlinks: bool) -> os.stat_result:
    """Return the stat result used to normalize ``child``.

    With ``follow_symlinks`` a link reports its target. A link whose target
    cannot be resolved falls back to the link itself.
    """
    if follow_symlinks and child.is_symlink():
        try:
            return child.stat(follow_symlinks=True)
        except OSError as exc:
            logger.debug("Unresolvable symlink %s (%s), using link metadata", child.path, exc.strerror or exc)
    return child.stat(follow_symlinks=False)


def read_directory(
    path: Path | str,
    *,
    include_hidden: bool = False,
    follow_symlinks: bool = False,
) -> list[Entry]:
    """List ``path`` as unsorted ``Entry`` records.

    Raises ``ListingError`` when the directory itself cannot be opened. A
    child that fails to stat is logged and left out; the scan keeps going.
    """
    directory = Path(path)
    entries: list[Entry] = []
    try:
        with os.scandir(directory) as children:
            for child in children:
                name = child.name
                if not include_hidden and is_hidden_name(name):
                    continue
                try:
                    raw_stat = stat_dir_entry(child, follow_symlinks)
                except OSError as exc:
                    logger.warning("Failed to stat %s: %s", name, exc.strerror or exc)
                    continue
                entries.append(entry_from_stat(directory, name, raw_stat))
    except OSError as exc:
        raise ListingError.from_os_error(directory, exc) from exc
    return entries


__all__ = [
    "is_hidden_name",
    "stat_dir_entry",
    "read_directory",
]
