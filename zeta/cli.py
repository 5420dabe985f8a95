"""Command-line front door for zeta.

Parses CLI options, merges them over persisted defaults, and takes the
one-time capability snapshot (color, Unicode, permission style).
Then dispatches into the listing pipeline.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import ListingDefaults, load_defaults, save_defaults
from .errors import ListingError
from .format import PermissionStyle, TimeStyle
from .options import ListingOptions
from .render import render
from .sorting import SORT_METHOD_NAMES, SortMethod
from .terminal import color_enabled, default_permission_style, unicode_enabled
from .theme import available_theme_names, normalize_theme_name
from .version import version_text

LOG_FORMAT = "zeta: %(levelname)s: %(message)s"
PERMISSION_STYLE_CHOICES = ("auto",) + tuple(style.value for style in PermissionStyle)


def configure_logging(debug: bool) -> None:
    """Attach one stderr handler to the ``zeta`` logger hierarchy."""
    logger = logging.getLogger("zeta")
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="zeta",
        description="A modern directory listing tool.",
        epilog="Examples: 'zeta' lists the current directory, 'zeta -a' includes hidden files.",
    )
    parser.add_argument("path", nargs="?", default=None, help="Directory to list. Defaults to current directory.")
    parser.add_argument(
        "-a", "--all", action=argparse.BooleanOptionalAction, default=None, help="Show hidden files."
    )
    parser.add_argument("-v", "--version", action="store_true", help="Show version information.")
    sort_group = parser.add_mutually_exclusive_group()
    sort_group.add_argument("-s", "--size", dest="sort", action="store_const", const="size", help="Sort by file size.")
    sort_group.add_argument(
        "-t", "--time", dest="sort", action="store_const", const="time", help="Sort by modification time, newest first."
    )
    sort_group.add_argument(
        "-X", "--extension", dest="sort", action="store_const", const="extension", help="Sort by file extension."
    )
    sort_group.add_argument("--sort", dest="sort", choices=SORT_METHOD_NAMES, help="Sort method.")
    parser.add_argument(
        "-r", "--reverse", action=argparse.BooleanOptionalAction, default=None, help="Reverse sort order."
    )
    parser.add_argument(
        "--dirs-first",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="List directories before files.",
    )
    parser.add_argument(
        "-L", "--follow-symlinks", action="store_true", help="Report the target's type and size for symlinks."
    )
    parser.add_argument("--no-color", action="store_true", help="Disable colorized output even on TTY.")
    parser.add_argument("--ascii", action="store_true", help="Force ASCII output (no Unicode).")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"Color theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument(
        "--time-style",
        choices=tuple(style.value for style in TimeStyle),
        default=None,
        help="Show modification times as relative ages or absolute dates.",
    )
    parser.add_argument(
        "--permissions",
        choices=PERMISSION_STYLE_CHOICES,
        default="auto",
        help="Permission column style (default: platform convention).",
    )
    parser.add_argument(
        "--save-defaults",
        action="store_true",
        help="Persist the effective sort, hidden, theme and time options as defaults.",
    )
    parser.add_argument("--debug", action="store_true", help="Log debug diagnostics to stderr.")
    return parser


def _choose(flag: object, default):
    return default if flag is None else flag


def resolve_defaults(args: argparse.Namespace, stored: ListingDefaults) -> ListingDefaults:
    """Overlay explicit command-line choices on the stored defaults."""
    return ListingDefaults(
        show_hidden=_choose(args.all, stored.show_hidden),
        sort_method=SortMethod(args.sort) if args.sort else stored.sort_method,
        dirs_first=_choose(args.dirs_first, stored.dirs_first),
        reverse=_choose(args.reverse, stored.reverse),
        theme_name=normalize_theme_name(args.theme) if args.theme else stored.theme_name,
        time_style=TimeStyle(args.time_style) if args.time_style else stored.time_style,
    )


def build_options(args: argparse.Namespace, defaults: ListingDefaults) -> ListingOptions:
    """Combine defaults with the capability snapshot of ``sys.stdout``."""
    if args.permissions == "auto":
        permission_style = default_permission_style()
    else:
        permission_style = PermissionStyle(args.permissions)
    return ListingOptions(
        include_hidden=defaults.show_hidden,
        follow_symlinks=bool(args.follow_symlinks),
        sort_method=defaults.sort_method,
        dirs_first=defaults.dirs_first,
        reverse=defaults.reverse,
        use_color=color_enabled(args.no_color, sys.stdout),
        use_unicode=unicode_enabled(args.ascii, sys.stdout),
        theme_name=defaults.theme_name,
        time_style=defaults.time_style,
        permission_style=permission_style,
    )


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and list one directory.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    parser = build_parser()
    args = parser.parse_args()

    if args.version:
        sys.stdout.write(version_text())
        return

    configure_logging(args.debug)
    defaults = resolve_defaults(args, load_defaults())
    if args.save_defaults:
        save_defaults(defaults)

    if default_path is None:
        default_path = Path.cwd()
    path = Path(args.path or default_path)
    options = build_options(args, defaults)
    try:
        render(path, options, sys.stdout)
    except ListingError as exc:
        raise SystemExit(f"zeta: {exc}") from exc


if __name__ == "__main__":
    main()
