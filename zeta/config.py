"""Persistent JSON config helpers.

Stores listing defaults: hidden-file visibility, sort method, directory
grouping, reverse order, theme and time style. All access is defensive:
malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from .format import TimeStyle, parse_time_style
from .sorting import SortMethod, parse_sort_method
from .theme import DEFAULT_THEME, normalize_theme_name

APP_NAME = "zeta"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


@dataclass(frozen=True)
class ListingDefaults:
    """User defaults that command-line flags may override."""

    show_hidden: bool = False
    sort_method: SortMethod = SortMethod.NAME
    dirs_first: bool = True
    reverse: bool = False
    theme_name: str = DEFAULT_THEME.name
    time_style: TimeStyle = TimeStyle.RELATIVE


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem errors are ignored so a read-only config directory never
    breaks a listing.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError:
        pass


def _load_bool(data: dict[str, object], key: str, default: bool) -> bool:
    """Only explicit JSON booleans are accepted."""
    value = data.get(key)
    return value if isinstance(value, bool) else default


def load_defaults() -> ListingDefaults:
    """Read listing defaults, keeping built-in values for invalid keys."""
    data = load_config()
    builtin = ListingDefaults()
    theme = data.get("theme")
    return ListingDefaults(
        show_hidden=_load_bool(data, "show_hidden", builtin.show_hidden),
        sort_method=parse_sort_method(data.get("sort"), builtin.sort_method),
        dirs_first=_load_bool(data, "dirs_first", builtin.dirs_first),
        reverse=_load_bool(data, "reverse", builtin.reverse),
        theme_name=normalize_theme_name(theme) if isinstance(theme, str) else builtin.theme_name,
        time_style=parse_time_style(data.get("time_style"), builtin.time_style),
    )


def save_defaults(defaults: ListingDefaults) -> None:
    """Merge ``defaults`` into the config file, preserving unrelated keys."""
    config = load_config()
    config.update(
        {
            "show_hidden": bool(defaults.show_hidden),
            "sort": defaults.sort_method.value,
            "dirs_first": bool(defaults.dirs_first),
            "reverse": bool(defaults.reverse),
            "theme": normalize_theme_name(defaults.theme_name),
            "time_style": defaults.time_style.value,
        }
    )
    save_config(config)


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "ListingDefaults",
    "load_config",
    "save_config",
    "load_defaults",
    "save_defaults",
]
