"""CLI listing behavior tests.

Verifies theme selection, colour switches, and listing output of
``lscolorize.cli.main``.
"""

from __future__ import annotations

import io
import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lscolorize import cli
from lscolorize.theme import THEME_DEFAULT, THEME_NO_COLOR, THEME_NO_LSCOLORS


class CliListingTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)
        (self.root / "b.txt").write_text("hello\n", encoding="utf-8")
        (self.root / "a_dir").mkdir()
        (self.root / ".hidden").write_text("", encoding="utf-8")
        self._config = mock.patch("lscolorize.config.CONFIG_PATH", self.root / "config" / "config.json")
        self._config.start()
        self._env = mock.patch.dict(os.environ, {"LS_COLORS": "di=01;34"})
        self._env.start()
        os.environ.pop("NO_COLOR", None)

    def tearDown(self) -> None:
        self._env.stop()
        self._config.stop()
        self._tmp.cleanup()

    def _run(self, *argv: str) -> tuple[int, str, str]:
        with mock.patch("sys.stdout", new_callable=io.StringIO) as out, mock.patch(
            "sys.stderr", new_callable=io.StringIO
        ) as err:
            status = cli.main(list(argv))
        return status, out.getvalue(), err.getvalue()

    def test_no_color_lists_sorted_visible_names(self) -> None:
        status, out, _ = self._run("--no-color", str(self.root / "b.txt"), str(self.root / "a_dir"))
        self.assertEqual(status, 0)
        self.assertIn("b.txt\n", out)
        self.assertNotIn("\033[", out)

    def test_directory_listing_skips_dotfiles_unless_all(self) -> None:
        _, out, _ = self._run("--no-color", str(self.root))
        self.assertEqual(out.splitlines(), ["a_dir", "b.txt"])
        _, out_all, _ = self._run("--no-color", "--all", str(self.root))
        self.assertIn(".hidden", out_all.splitlines())

    def test_default_theme_applies_ls_colors_to_directories(self) -> None:
        _, out, _ = self._run(str(self.root))
        self.assertIn("\033[1;34ma_dir\033[0m", out)

    def test_no_lscolors_theme_uses_builtin_table(self) -> None:
        _, out, _ = self._run("--theme", "no-lscolors", str(self.root))
        self.assertIn("\033[38;5;4ma_dir\033[0m", out)
        self.assertIn("\033[38;5;11mb.txt\033[0m", out)

    def test_no_color_environment_disables_colour(self) -> None:
        with mock.patch.dict(os.environ, {"NO_COLOR": "1"}):
            _, out, _ = self._run(str(self.root))
        self.assertNotIn("\033[", out)

    def test_long_listing_includes_permissions_and_size(self) -> None:
        os.chmod(self.root / "b.txt", 0o640)
        _, out, _ = self._run("--no-color", "--long", str(self.root / "b.txt"))
        fields = out.split()
        self.assertEqual(fields[1], "-rw-r-----")
        self.assertEqual(fields[4], "6")
        self.assertEqual(fields[-1], "b.txt")

    def test_missing_path_sets_exit_status(self) -> None:
        status, _, err = self._run("--no-color", str(self.root / "nope"))
        self.assertEqual(status, 1)
        self.assertIn("No such file or directory", err)

    def test_save_theme_persists_choice(self) -> None:
        self._run("--theme", "no-lscolors", "--save-theme", str(self.root))
        colors = cli.build_colors(None, environ={})
        self.assertEqual(colors.theme, THEME_NO_LSCOLORS)

    def test_save_theme_without_theme_is_a_usage_error(self) -> None:
        with mock.patch("sys.stderr", new_callable=io.StringIO) as err:
            with self.assertRaises(SystemExit) as ctx:
                cli.main(["--save-theme", str(self.root)])
        self.assertEqual(ctx.exception.code, 2)
        self.assertIn("--save-theme requires --theme", err.getvalue())
        self.assertFalse((self.root / "config" / "config.json").exists())

    def test_unreadable_directory_is_reported_not_raised(self) -> None:
        with mock.patch.object(Path, "iterdir", side_effect=PermissionError(13, "Permission denied")):
            status, out, err = self._run("--no-color", str(self.root))
        self.assertEqual(status, 1)
        self.assertEqual(out, "")
        self.assertIn(f"lscolorize: {self.root}: Permission denied", err)

    def test_unreadable_directory_does_not_stop_other_paths(self) -> None:
        real_iterdir = Path.iterdir

        def iterdir(path: Path):
            if path.name == "a_dir":
                raise PermissionError(13, "Permission denied")
            return real_iterdir(path)

        with mock.patch.object(Path, "iterdir", iterdir):
            status, out, err = self._run("--no-color", str(self.root / "a_dir"), str(self.root / "b.txt"))
        self.assertEqual(status, 1)
        self.assertIn("Permission denied", err)
        self.assertIn("b.txt\n", out)

    def test_symlinked_directory_is_expanded_unless_long(self) -> None:
        (self.root / "a_dir" / "inner.txt").write_text("", encoding="utf-8")
        link = self.root / "link_dir"
        link.symlink_to(self.root / "a_dir")

        _, out, _ = self._run("--no-color", str(link))
        self.assertEqual(out.splitlines(), ["inner.txt"])

        _, out_long, _ = self._run("--no-color", "--long", str(link))
        rows = out_long.splitlines()
        self.assertEqual(len(rows), 1)
        self.assertTrue(rows[0].endswith(f"link_dir -> {self.root / 'a_dir'}"))


class BuildColorsTests(unittest.TestCase):
    def test_override_source_comes_from_given_environment(self) -> None:
        colors = cli.build_colors("default", environ={"LS_COLORS": "di=01;34"})
        self.assertIsNotNone(colors.lscolors)
        self.assertTrue(colors.lscolors.has_indicator("di"))
        self.assertIsNone(cli.build_colors("no-lscolors", environ={"LS_COLORS": "di=01;34"}).lscolors)

    def test_flag_and_environment_precedence(self) -> None:
        with mock.patch("lscolorize.config.load_theme_name", return_value="no-lscolors"):
            self.assertEqual(cli.build_colors(None, environ={}).theme, THEME_NO_LSCOLORS)
            self.assertEqual(cli.build_colors("default", environ={"LS_COLORS": ""}).theme, THEME_DEFAULT)
            self.assertEqual(cli.build_colors("default", environ={"NO_COLOR": "1"}).theme, THEME_NO_COLOR)
            self.assertEqual(cli.build_colors("default", no_color=True, environ={}).theme, THEME_NO_COLOR)


if __name__ == "__main__":
    unittest.main()
