"""Icon and color selection for listing entries.

Regular files are classified through one fixed extension table; every other
entry type maps straight from its ``FileType``. Both lookups are total: an
unmatched extension lands in ``FileCategory.DEFAULT``.
"""

from __future__ import annotations

import enum

from .entries import FileType
from .theme import ListingTheme


class FileCategory(enum.Enum):
    DOCUMENT = "document"
    ARCHIVE = "archive"
    AUDIO = "audio"
    VIDEO = "video"
    IMAGE = "image"
    EXECUTABLE = "executable"
    SCRIPT = "script"
    CODE = "code"
    DEFAULT = "default"


def _table(category: FileCategory, extensions: str) -> dict[str, FileCategory]:
    return {ext: category for ext in extensions.split()}


EXTENSION_CATEGORIES: dict[str, FileCategory] = {
    **_table(FileCategory.DOCUMENT, "pdf txt md rst doc docx odt rtf tex epub csv"),
    **_table(FileCategory.ARCHIVE, "zip rar gz tar tgz bz2 xz zst 7z"),
    **_table(FileCategory.AUDIO, "mp3 wav ogg flac m4a aac opus"),
    **_table(FileCategory.VIDEO, "mp4 avi mkv mov webm wmv"),
    **_table(FileCategory.IMAGE, "jpg jpeg png gif bmp svg webp ico tiff"),
    **_table(FileCategory.EXECUTABLE, "exe bat cmd com msi appimage"),
    **_table(FileCategory.SCRIPT, "sh bash zsh fish ps1 py rb pl lua"),
    **_table(FileCategory.CODE, "zig c h cpp hpp cc rs go java js ts kt swift cs"),
}

# Every Unicode icon is one double-width cell so the icon column stays aligned.
UNICODE_TYPE_ICONS = {
    FileType.DIRECTORY: "📁",
    FileType.SYMLINK: "🔗",
    FileType.SPECIAL: "🔧",
    FileType.UNKNOWN: "❓",
}

UNICODE_CATEGORY_ICONS = {
    FileCategory.DOCUMENT: "📝",
    FileCategory.ARCHIVE: "📦",
    FileCategory.AUDIO: "🎵",
    FileCategory.VIDEO: "🎬",
    FileCategory.IMAGE: "🎨",
    FileCategory.EXECUTABLE: "🚀",
    FileCategory.SCRIPT: "📜",
    FileCategory.CODE: "⚡",
    FileCategory.DEFAULT: "📄",
}

ASCII_TYPE_ICONS = {
    FileType.DIRECTORY: "DIR",
    FileType.SYMLINK: "LNK",
    FileType.SPECIAL: "SPC",
    FileType.UNKNOWN: "???",
    FileType.REGULAR: "",
}

UNICODE_ICON_WIDTH = 2
ASCII_ICON_WIDTH = 3


def categorize_extension(extension: str) -> FileCategory:
    return EXTENSION_CATEGORIES.get(extension.lower(), FileCategory.DEFAULT)


def get_file_icon(file_type: FileType, extension: str, use_unicode: bool = True) -> str:
    """Return the display symbol for an entry of ``file_type``/``extension``."""
    if not use_unicode:
        return ASCII_TYPE_ICONS[file_type]
    if file_type is not FileType.REGULAR:
        return UNICODE_TYPE_ICONS[file_type]
    return UNICODE_CATEGORY_ICONS[categorize_extension(extension)]


def get_entry_color(file_type: FileType, extension: str, theme: ListingTheme) -> str:
    """Return the theme's style token for an entry; ``""`` under the plain theme."""
    if file_type is FileType.DIRECTORY:
        return theme.directory
    if file_type is FileType.SYMLINK:
        return theme.symlink
    if file_type is FileType.SPECIAL:
        return theme.special
    if file_type is FileType.UNKNOWN:
        return theme.unknown

    category = categorize_extension(extension)
    if category is FileCategory.DEFAULT:
        return theme.regular
    return getattr(theme, category.value)


__all__ = [
    "FileCategory",
    "EXTENSION_CATEGORIES",
    "UNICODE_ICON_WIDTH",
    "ASCII_ICON_WIDTH",
    "categorize_extension",
    "get_file_icon",
    "get_entry_color",
]
