"""Fixed-width table layout for listing output.

One ``TableLayout`` (column list plus border glyphs) produces the header,
every row, and the closing border, so all lines share one display width.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .ansi import pad_ansi, replace_control_chars, truncate_display

CELL_SEPARATOR = " "


@dataclass(frozen=True)
class Column:
    """Width policy for one table column.

    ``truncate`` columns cut overlong plain text and append ``marker``;
    other columns are expected to fit and are only padded.
    """

    title: str
    width: int
    align: str = "left"
    truncate: bool = False
    marker: str = "..."

    def fit(self, text: str, style: str = "", reset: str = "") -> str:
        """Shape plain ``text`` into exactly ``width`` cells, optionally styled.

        Control characters in ``text`` are shown as ``?`` so raw names cannot
        break the row or emit escapes of their own.
        """
        text = replace_control_chars(text)
        if self.truncate:
            text = truncate_display(text, self.width, self.marker)
        if style and text:
            text = f"{style}{text}{reset}"
        return pad_ansi(text, self.width, self.align)


@dataclass(frozen=True)
class BorderGlyphs:
    top_left: str
    top_right: str
    horizontal: str
    vertical: str
    mid_left: str
    mid_right: str
    bottom_left: str
    bottom_right: str


UNICODE_BORDERS = BorderGlyphs(
    top_left="┏",
    top_right="┓",
    horizontal="━",
    vertical="┃",
    mid_left="┣",
    mid_right="┫",
    bottom_left="┗",
    bottom_right="┛",
)

ASCII_BORDERS = BorderGlyphs(
    top_left="+",
    top_right="+",
    horizontal="-",
    vertical="|",
    mid_left="+",
    mid_right="+",
    bottom_left="+",
    bottom_right="+",
)


def border_glyphs(use_unicode: bool) -> BorderGlyphs:
    return UNICODE_BORDERS if use_unicode else ASCII_BORDERS


@dataclass(frozen=True)
class TableLayout:
    columns: tuple[Column, ...]
    borders: BorderGlyphs
    border_style: str = ""
    header_style: str = ""
    reset: str = ""

    @property
    def inner_width(self) -> int:
        """Cells between the two vertical borders, one space of margin each side."""
        widths = sum(column.width for column in self.columns)
        separators = len(CELL_SEPARATOR) * (len(self.columns) - 1)
        return widths + separators + 2

    @property
    def total_width(self) -> int:
        return self.inner_width + 2

    def _styled_border(self, text: str) -> str:
        if self.border_style:
            return f"{self.border_style}{text}{self.reset}"
        return text

    def _rule(self, left: str, right: str) -> str:
        return self._styled_border(left + self.borders.horizontal * self.inner_width + right)

    def top_rule(self) -> str:
        return self._rule(self.borders.top_left, self.borders.top_right)

    def middle_rule(self) -> str:
        return self._rule(self.borders.mid_left, self.borders.mid_right)

    def bottom_rule(self) -> str:
        return self._rule(self.borders.bottom_left, self.borders.bottom_right)

    def row(self, cells: Sequence[str]) -> str:
        """Join pre-fitted cells between vertical borders."""
        if len(cells) != len(self.columns):
            raise ValueError(f"expected {len(self.columns)} cells, got {len(cells)}")
        vertical = self._styled_border(self.borders.vertical)
        return f"{vertical} {CELL_SEPARATOR.join(cells)} {vertical}"

    def header_lines(self) -> list[str]:
        titles = [column.fit(column.title, self.header_style, self.reset) for column in self.columns]
        return [self.top_rule(), self.row(titles), self.middle_rule()]


__all__ = [
    "CELL_SEPARATOR",
    "Column",
    "BorderGlyphs",
    "UNICODE_BORDERS",
    "ASCII_BORDERS",
    "border_glyphs",
    "TableLayout",
]
