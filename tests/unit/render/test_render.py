"""End-to-end listing tests: scan, sort, format, and emit.

Rows are checked through the plain ASCII rendering so assertions stay
readable; one test covers the colored Unicode path.
"""

from __future__ import annotations

import dataclasses
import io
import tempfile
import time
import unittest
from pathlib import Path
from unittest import mock

from zeta.ansi import display_width, strip_ansi
from zeta.entries import read_directory
from zeta.entries import scan as scan_mod
from zeta.errors import ListingError
from zeta.format import UNKNOWN_TIME, PermissionStyle, TimeStyle
from zeta.options import ListingOptions
from zeta.render import footer_text, render, render_entries
from zeta.sorting import SortMethod
from zeta.theme import DEFAULT_THEME


def plain_options(**overrides) -> ListingOptions:
    values = {"use_color": False, "use_unicode": False}
    values.update(overrides)
    return ListingOptions(**values)


def row_names(output: str) -> list[str]:
    """Pull the NAME cell out of each entry row of an ASCII listing."""
    lines = output.splitlines()
    rows = lines[3:-2]
    return [row[6:34].rstrip() for row in rows]


class RenderScenarioTests(unittest.TestCase):
    def _populate(self, root: Path) -> None:
        (root / "b.txt").write_bytes(b"x" * 10)
        (root / "A").mkdir()
        (root / "a.txt").write_bytes(b"x" * 5)

    def test_name_sort_with_dirs_first(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            self._populate(root)
            out = io.StringIO()
            count = render(root, plain_options(sort_method=SortMethod.NAME, dirs_first=True), out)

            self.assertEqual(count, 3)
            self.assertEqual(row_names(out.getvalue()), ["A", "a.txt", "b.txt"])

    def test_size_sort_without_dirs_first(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            self._populate(root)
            dir_size = (root / "A").stat().st_size
            out = io.StringIO()
            render(root, plain_options(sort_method=SortMethod.SIZE, dirs_first=False), out)

            names = row_names(out.getvalue())
            sizes = {"a.txt": 5, "b.txt": 10, "A": dir_size}
            self.assertEqual(sorted(names), ["A", "a.txt", "b.txt"])
            self.assertEqual([sizes[name] for name in names], sorted(sizes.values()))

    def test_footer_reports_displayed_count(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            self._populate(root)
            (root / ".secret").write_text("s", encoding="utf-8")
            out = io.StringIO()
            render(root, plain_options(), out)
            self.assertEqual(out.getvalue().splitlines()[-1], "  3 items displayed")

            out = io.StringIO()
            count = render(root, plain_options(include_hidden=True), out)
            self.assertEqual(count, 4)
            self.assertEqual(out.getvalue().splitlines()[-1], "  4 items displayed")

    def test_unstattable_entry_is_omitted_and_siblings_listed(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            self._populate(root)
            real_stat = scan_mod.stat_dir_entry

            def flaky_stat(child, follow_symlinks):
                if child.name == "b.txt":
                    raise PermissionError(13, "Permission denied", child.path)
                return real_stat(child, follow_symlinks)

            out = io.StringIO()
            with mock.patch.object(scan_mod, "stat_dir_entry", side_effect=flaky_stat):
                with self.assertLogs("zeta", level="WARNING"):
                    count = render(root, plain_options(), out)

            self.assertEqual(count, 2)
            self.assertEqual(row_names(out.getvalue()), ["A", "a.txt"])
            self.assertEqual(out.getvalue().splitlines()[-1], "  2 items displayed")

    def test_open_failure_writes_nothing(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            out = io.StringIO()
            with self.assertRaises(ListingError):
                render(Path(tmp) / "missing", plain_options(), out)
            self.assertEqual(out.getvalue(), "")


class RenderEntriesFormattingTests(unittest.TestCase):
    def test_rows_carry_size_permissions_and_time(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            target = root / "data.bin"
            target.write_bytes(b"x" * 1536)
            target.chmod(0o640)
            entries = read_directory(root)
            lines = render_entries(entries, plain_options(permission_style=PermissionStyle.POSIX))

            row = lines[3]
            self.assertIn("data.bin", row)
            self.assertIn("    1.5K", row)
            self.assertIn("-rw-r-----", row)
            self.assertIn("Today", row)

    def test_long_names_are_truncated_with_marker(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            long_name = "a" * 40 + ".txt"
            (root / long_name).write_text("x", encoding="utf-8")
            out = io.StringIO()
            render(root, plain_options(), out)

            self.assertEqual(row_names(out.getvalue()), ["a" * 25 + "..."])

    def test_all_lines_share_one_width_in_both_modes(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "docs").mkdir()
            (root / "photo.png").write_bytes(b"x")
            (root / ("表" * 20)).write_text("wide", encoding="utf-8")
            for use_unicode, use_color in ((False, False), (True, True)):
                out = io.StringIO()
                render(root, ListingOptions(use_unicode=use_unicode, use_color=use_color), out)
                table_lines = out.getvalue().splitlines()[:-1]
                with self.subTest(use_unicode=use_unicode):
                    self.assertEqual(len({display_width(line) for line in table_lines}), 1)

    def test_color_mode_wraps_names_and_plain_mode_has_no_escapes(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "docs").mkdir()
            colored = io.StringIO()
            plain = io.StringIO()
            render(root, ListingOptions(use_color=True, use_unicode=True), colored)
            render(root, ListingOptions(use_color=False, use_unicode=True), plain)

            self.assertIn(f"{DEFAULT_THEME.directory}docs{DEFAULT_THEME.reset}", colored.getvalue())
            self.assertIn("📁", colored.getvalue())
            self.assertNotIn("\033[", plain.getvalue())
            self.assertEqual(strip_ansi(colored.getvalue()), plain.getvalue())

    def test_control_characters_in_names_keep_rows_aligned(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            names = ("bad\nname", "tab\tx", "esc\x1b[31mred")
            try:
                for name in names:
                    (root / name).write_text("x", encoding="utf-8")
            except OSError as exc:
                self.skipTest(f"filesystem rejects control characters: {exc}")
            out = io.StringIO()
            render(root, plain_options(), out)

            lines = out.getvalue().splitlines()
            self.assertEqual(len(lines), 3 + len(names) + 2)
            self.assertEqual(len({display_width(line) for line in lines[:-1]}), 1)
            self.assertNotIn("\x1b", out.getvalue())
            self.assertEqual(sorted(row_names(out.getvalue())), ["bad?name", "esc?[31mred", "tab?x"])

    def test_unrepresentable_mtime_does_not_abort_listing(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "future.txt").write_text("x", encoding="utf-8")
            (root / "normal.txt").write_text("x", encoding="utf-8")
            entries = [
                dataclasses.replace(entry, modified_time=10**30) if entry.name == "future.txt" else entry
                for entry in read_directory(root)
            ]
            lines = render_entries(entries, plain_options(time_style=TimeStyle.ABSOLUTE))

            self.assertEqual(lines[-1], "  2 items displayed")
            future_row = next(line for line in lines if "future.txt" in line)
            self.assertIn(f" {UNKNOWN_TIME} ", future_row)

    def test_one_time_snapshot_is_used_for_every_row(self) -> None:
        now_ns = time.time_ns()
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "a").write_text("a", encoding="utf-8")
            entries = read_directory(root)
            lines = render_entries(entries, plain_options(), now_ns=now_ns + 3 * 86_400 * 1_000_000_000)
            self.assertIn("3 days ago", lines[3])


class FooterTextTests(unittest.TestCase):
    def test_singular_and_plural(self) -> None:
        self.assertEqual(footer_text(1), "  1 item displayed")
        self.assertEqual(footer_text(0), "  0 items displayed")


if __name__ == "__main__":
    unittest.main()
