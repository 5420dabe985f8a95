"""Listing pipeline: scan, sort once, format each row, emit the table.

``render`` is the orchestration entry point. ``render_entries`` is the pure
formatting half and takes entries that are already sorted.
"""

from __future__ import annotations

import sys
import time
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from .entries import Entry, read_directory
from .format import format_permissions, format_size, format_time
from .options import ListingOptions
from .sorting import sort_entries
from .style import ASCII_ICON_WIDTH, UNICODE_ICON_WIDTH, get_entry_color, get_file_icon
from .table import Column, TableLayout, border_glyphs
from .theme import ListingTheme, resolve_theme

NAME_COLUMN_WIDTH = 28
SIZE_COLUMN_WIDTH = 8
PERMISSIONS_COLUMN_WIDTH = 11
TIME_COLUMN_WIDTH = 14
TRUNCATION_MARKER = "..."


def build_layout(options: ListingOptions, theme: ListingTheme) -> TableLayout:
    """Return the column policy shared by header, rows, and footer."""
    icon_width = UNICODE_ICON_WIDTH if options.use_unicode else ASCII_ICON_WIDTH
    columns = (
        Column("", icon_width),
        Column("NAME", NAME_COLUMN_WIDTH, truncate=True, marker=TRUNCATION_MARKER),
        Column("SIZE", SIZE_COLUMN_WIDTH, align="right"),
        Column("PERMISSIONS", PERMISSIONS_COLUMN_WIDTH),
        Column("MODIFIED", TIME_COLUMN_WIDTH, truncate=True, marker=TRUNCATION_MARKER),
    )
    return TableLayout(
        columns=columns,
        borders=border_glyphs(options.use_unicode),
        border_style=theme.border,
        header_style=theme.header,
        reset=theme.reset,
    )


def format_row(
    entry: Entry,
    layout: TableLayout,
    options: ListingOptions,
    theme: ListingTheme,
    now_ns: int,
) -> str:
    icon_col, name_col, size_col, perms_col, time_col = layout.columns
    color = get_entry_color(entry.file_type, entry.extension, theme)
    cells = (
        icon_col.fit(get_file_icon(entry.file_type, entry.extension, options.use_unicode)),
        name_col.fit(entry.name, color, theme.reset),
        size_col.fit(format_size(entry.size)),
        perms_col.fit(format_permissions(entry.permissions, entry.file_type, options.permission_style)),
        time_col.fit(format_time(entry.modified_time, options.time_style, now_ns=now_ns)),
    )
    return layout.row(cells)


def footer_text(count: int) -> str:
    noun = "item" if count == 1 else "items"
    return f"  {count} {noun} displayed"


def render_entries(
    entries: Sequence[Entry],
    options: ListingOptions,
    *,
    now_ns: int | None = None,
) -> list[str]:
    """Format sorted ``entries`` into header, row, and footer lines."""
    theme = resolve_theme(options.theme_name, no_color=not options.use_color)
    layout = build_layout(options, theme)
    if now_ns is None:
        now_ns = time.time_ns()

    lines = layout.header_lines()
    lines.extend(format_row(entry, layout, options, theme, now_ns) for entry in entries)
    lines.append(layout.bottom_rule())
    footer = footer_text(len(entries))
    lines.append(f"{theme.footer}{footer}{theme.reset}" if theme.footer else footer)
    return lines


def render(
    path: Path | str,
    options: ListingOptions,
    out: TextIO | None = None,
    *,
    now_ns: int | None = None,
) -> int:
    """List ``path`` to ``out`` and return the number of rows displayed.

    Raises ``ListingError`` before writing anything when the directory cannot
    be opened.
    """
    if out is None:
        out = sys.stdout
    entries = read_directory(
        path,
        include_hidden=options.include_hidden,
        follow_symlinks=options.follow_symlinks,
    )
    ordered = sort_entries(entries, options.sort_context())
    for line in render_entries(ordered, options, now_ns=now_ns):
        out.write(line)
        out.write("\n")
    return len(ordered)


__all__ = [
    "NAME_COLUMN_WIDTH",
    "SIZE_COLUMN_WIDTH",
    "PERMISSIONS_COLUMN_WIDTH",
    "TIME_COLUMN_WIDTH",
    "TRUNCATION_MARKER",
    "build_layout",
    "format_row",
    "footer_text",
    "render_entries",
    "render",
]
