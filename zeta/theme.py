"""Listing theme definitions and selection helpers.

Themes are ANSI palettes for entry names and table chrome. The ``plain``
theme carries empty strings everywhere and is the style-disabled mode.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ListingTheme:
    """Semantic ANSI palette used by the listing renderer."""

    name: str
    reset: str
    border: str
    header: str
    footer: str
    directory: str
    symlink: str
    special: str
    unknown: str
    regular: str
    executable: str
    archive: str
    image: str
    audio: str
    video: str
    document: str
    script: str
    code: str


DEFAULT_THEME = ListingTheme(
    name="default",
    reset="\033[0m",
    border="\033[2m",
    header="\033[1m",
    footer="\033[2;38;5;250m",
    directory="\033[1;34m",
    symlink="\033[1;36m",
    special="\033[1;33m",
    unknown="\033[0;35m",
    regular="\033[0m",
    executable="\033[1;32m",
    archive="\033[0;31m",
    image="\033[0;35m",
    audio="\033[0;36m",
    video="\033[0;36m",
    document="\033[38;5;252m",
    script="\033[0;32m",
    code="\033[0;33m",
)

OCEAN_THEME = ListingTheme(
    name="ocean",
    reset="\033[0m",
    border="\033[2;38;5;31m",
    header="\033[1;38;5;45m",
    footer="\033[2;38;5;110m",
    directory="\033[1;38;5;45m",
    symlink="\033[38;5;117m",
    special="\033[38;5;215m",
    unknown="\033[2;38;5;110m",
    regular="\033[38;5;252m",
    executable="\033[1;38;5;84m",
    archive="\033[38;5;203m",
    image="\033[38;5;177m",
    audio="\033[38;5;73m",
    video="\033[38;5;73m",
    document="\033[38;5;153m",
    script="\033[38;5;84m",
    code="\033[38;5;229m",
)

PLAIN_THEME = ListingTheme(
    name="plain",
    reset="",
    border="",
    header="",
    footer="",
    directory="",
    symlink="",
    special="",
    unknown="",
    regular="",
    executable="",
    archive="",
    image="",
    audio="",
    video="",
    document="",
    script="",
    code="",
)

_THEMES: dict[str, ListingTheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> ListingTheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "ListingTheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
