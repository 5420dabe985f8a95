"""Entry model for directory listings.

This package contains the non-UI listing primitives:
- portable entry/permission datatypes
- stat-result normalization rules
- the single-directory scanner
"""

from __future__ import annotations

from .types import Entry, FileType, Permissions
from .normalize import (
    ATTRIBUTE_EXECUTABLE_EXTENSIONS,
    entry_from_stat,
    file_type_from_mode,
    parse_extension,
    permissions_from_stat,
)
from .scan import is_hidden_name, read_directory, stat_dir_entry

__all__ = [
    "Entry",
    "FileType",
    "Permissions",
    "ATTRIBUTE_EXECUTABLE_EXTENSIONS",
    "entry_from_stat",
    "file_type_from_mode",
    "parse_extension",
    "permissions_from_stat",
    "is_hidden_name",
    "read_directory",
    "stat_dir_entry",
]
