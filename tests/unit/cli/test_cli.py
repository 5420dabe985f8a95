"""CLI argument and default-path behavior tests.

Verifies how ``zeta.cli.main`` maps flags onto listing options and how it
reports directory-open failures.
"""

from __future__ import annotations

import io
import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from zeta import cli
from zeta.config import ListingDefaults
from zeta.format import PermissionStyle, TimeStyle
from zeta.sorting import SortMethod
from zeta.version import VERSION


class CliDispatchTests(unittest.TestCase):
    def setUp(self) -> None:
        patcher = mock.patch("zeta.cli.load_defaults", return_value=ListingDefaults())
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_main_defaults_to_current_working_directory_when_no_path_arg(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            previous_cwd = Path.cwd()
            try:
                os.chdir(root)
                with mock.patch.object(sys, "argv", ["zeta"]), mock.patch("zeta.cli.render") as render:
                    cli.main()
            finally:
                os.chdir(previous_cwd)

            render.assert_called_once()
            path, options, _out = render.call_args.args
            self.assertEqual(path.resolve(), root)
            self.assertIs(options.sort_method, SortMethod.NAME)
            self.assertTrue(options.dirs_first)
            self.assertFalse(options.reverse)
            self.assertFalse(options.include_hidden)

    def test_flags_map_onto_options(self) -> None:
        argv = ["zeta", "-a", "-t", "-r", "--no-dirs-first", "-L", "--ascii", "--time-style", "absolute", "/x"]
        with mock.patch.object(sys, "argv", argv), mock.patch("zeta.cli.render") as render:
            cli.main()

        path, options, _out = render.call_args.args
        self.assertEqual(path, Path("/x"))
        self.assertTrue(options.include_hidden)
        self.assertIs(options.sort_method, SortMethod.TIME)
        self.assertTrue(options.reverse)
        self.assertFalse(options.dirs_first)
        self.assertTrue(options.follow_symlinks)
        self.assertFalse(options.use_unicode)
        self.assertIs(options.time_style, TimeStyle.ABSOLUTE)

    def test_sort_shortcuts(self) -> None:
        for flag, expected in (("-s", SortMethod.SIZE), ("-X", SortMethod.EXTENSION), ("--sort=time", SortMethod.TIME)):
            with mock.patch.object(sys, "argv", ["zeta", flag]), mock.patch("zeta.cli.render") as render:
                cli.main()
            with self.subTest(flag=flag):
                self.assertIs(render.call_args.args[1].sort_method, expected)

    def test_no_color_flag_disables_color(self) -> None:
        with mock.patch.object(sys, "argv", ["zeta", "--no-color"]), mock.patch("zeta.cli.render") as render:
            cli.main()
        self.assertFalse(render.call_args.args[1].use_color)

    def test_explicit_permission_style(self) -> None:
        with mock.patch.object(sys, "argv", ["zeta", "--permissions", "attributes"]), mock.patch(
            "zeta.cli.render"
        ) as render:
            cli.main()
        self.assertIs(render.call_args.args[1].permission_style, PermissionStyle.ATTRIBUTES)

    def test_version_prints_and_skips_listing(self) -> None:
        stdout = io.StringIO()
        with (
            mock.patch.object(sys, "argv", ["zeta", "--version"]),
            mock.patch("zeta.cli.render") as render,
            mock.patch("sys.stdout", stdout),
        ):
            cli.main()

        render.assert_not_called()
        self.assertTrue(stdout.getvalue().startswith(f"zeta version {VERSION}\n"))

    def test_missing_directory_exits_with_message(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp) / "missing"
            stdout = io.StringIO()
            with (
                mock.patch.object(sys, "argv", ["zeta", str(missing)]),
                mock.patch("sys.stdout", stdout),
                self.assertRaises(SystemExit) as ctx,
            ):
                cli.main()

        self.assertEqual(
            str(ctx.exception.code),
            f"zeta: cannot access '{missing}': No such file or directory",
        )
        self.assertEqual(stdout.getvalue(), "")

    def test_lists_real_directory_to_stdout(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "hello.txt").write_text("hi", encoding="utf-8")
            stdout = io.StringIO()
            with mock.patch.object(sys, "argv", ["zeta", "--ascii", str(root)]), mock.patch("sys.stdout", stdout):
                cli.main()

        output = stdout.getvalue()
        self.assertIn("hello.txt", output)
        self.assertNotIn("\033[", output)
        self.assertTrue(output.endswith("  1 item displayed\n"))


class CliDefaultsTests(unittest.TestCase):
    def test_stored_defaults_apply_when_flags_absent(self) -> None:
        stored = ListingDefaults(show_hidden=True, sort_method=SortMethod.SIZE, dirs_first=False, reverse=True)
        with (
            mock.patch("zeta.cli.load_defaults", return_value=stored),
            mock.patch.object(sys, "argv", ["zeta"]),
            mock.patch("zeta.cli.render") as render,
        ):
            cli.main()

        options = render.call_args.args[1]
        self.assertTrue(options.include_hidden)
        self.assertIs(options.sort_method, SortMethod.SIZE)
        self.assertFalse(options.dirs_first)
        self.assertTrue(options.reverse)

    def test_flags_override_stored_defaults(self) -> None:
        stored = ListingDefaults(reverse=True, dirs_first=False)
        with (
            mock.patch("zeta.cli.load_defaults", return_value=stored),
            mock.patch.object(sys, "argv", ["zeta", "--no-reverse", "--dirs-first"]),
            mock.patch("zeta.cli.render") as render,
        ):
            cli.main()

        options = render.call_args.args[1]
        self.assertFalse(options.reverse)
        self.assertTrue(options.dirs_first)

    def test_no_all_hides_files_stored_as_visible(self) -> None:
        stored = ListingDefaults(show_hidden=True)
        with (
            mock.patch("zeta.cli.load_defaults", return_value=stored),
            mock.patch.object(sys, "argv", ["zeta", "--no-all"]),
            mock.patch("zeta.cli.render") as render,
        ):
            cli.main()

        self.assertFalse(render.call_args.args[1].include_hidden)

    def test_save_defaults_persists_effective_values(self) -> None:
        with (
            mock.patch("zeta.cli.load_defaults", return_value=ListingDefaults()),
            mock.patch("zeta.cli.save_defaults") as save_defaults,
            mock.patch.object(sys, "argv", ["zeta", "--save-defaults", "-X", "--theme", "ocean"]),
            mock.patch("zeta.cli.render"),
        ):
            cli.main()

        saved = save_defaults.call_args.args[0]
        self.assertIs(saved.sort_method, SortMethod.EXTENSION)
        self.assertEqual(saved.theme_name, "ocean")


if __name__ == "__main__":
    unittest.main()
