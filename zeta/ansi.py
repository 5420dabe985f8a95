"""ANSI-aware text measurement and cell shaping utilities.

Provides width measurement, clipping, and padding that ignore escape
sequences. These helpers keep table columns aligned when color codes and wide
characters are present.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
TAB_STOP = 8


def char_display_width(ch: str, col: int) -> int:
    """Return terminal column width for one character at visual column ``col``.

    Tabs expand to the next 8-column stop, combining marks and variation
    selectors consume no columns, and East Asian wide/fullwidth characters
    consume two.
    """
    if ch == "\t":
        return TAB_STOP - (col % TAB_STOP)
    if unicodedata.combining(ch) or "\ufe00" <= ch <= "\ufe0f":
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def strip_ansi(text: str) -> str:
    return ANSI_ESCAPE_RE.sub("", text)


def replace_control_chars(text: str, replacement: str = "?") -> str:
    """Swap C0/C1 control characters (tabs, newlines, ESC) for ``replacement``."""
    return "".join(replacement if unicodedata.category(ch) == "Cc" else ch for ch in text)


def display_width(text: str) -> int:
    """Return how many terminal cells ``text`` occupies, escapes excluded."""
    col = 0
    for ch in strip_ansi(text):
        col += char_display_width(ch, col)
    return col


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Trim a styled line to at most ``max_cols`` display columns.

    ANSI escape sequences are preserved verbatim and do not count toward width.
    Tabs are expanded into spaces so clipping aligns with rendered terminal cells.
    """
    if max_cols <= 0 or not text:
        return ""

    out: list[str] = []
    col = 0
    i = 0
    n = len(text)
    while i < n and col < max_cols:
        if text[i] == "\x1b":
            match = ANSI_ESCAPE_RE.match(text, i)
            if match:
                out.append(match.group(0))
                i = match.end()
                continue
        ch = text[i]
        w = char_display_width(ch, col)
        if ch == "\t":
            if col + w > max_cols:
                break
            out.append(" " * w)
            col += w
            i += 1
            continue
        if col + w > max_cols:
            break
        out.append(ch)
        col += w
        i += 1

    return "".join(out)


def truncate_display(text: str, width: int, marker: str = "...") -> str:
    """Fit plain ``text`` into ``width`` cells, ending in ``marker`` when cut."""
    if display_width(text) <= width:
        return text
    marker_width = display_width(marker)
    if marker_width >= width:
        return clip_ansi_line(marker, width)
    return clip_ansi_line(text, width - marker_width) + marker


def pad_ansi(text: str, width: int, align: str = "left") -> str:
    """Pad a styled cell with spaces to exactly ``width`` visible columns.

    Text already at or beyond ``width`` is returned unchanged; callers clip
    or truncate first.
    """
    gap = width - display_width(text)
    if gap <= 0:
        return text
    if align == "right":
        return " " * gap + text
    if align == "center":
        left = gap // 2
        return " " * left + text + " " * (gap - left)
    return text + " " * gap


__all__ = [
    "ANSI_ESCAPE_RE",
    "char_display_width",
    "strip_ansi",
    "replace_control_chars",
    "display_width",
    "clip_ansi_line",
    "truncate_display",
    "pad_ansi",
]
