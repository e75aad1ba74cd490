"""LS_COLORS parsing and path classification tests."""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path

from lscolorize.lscolors import LsColors, LsColorsError
from lscolorize.style import Colour, Style

BOLD_BLUE = Style(foreground=Colour.basic(4), bold=True)
BOLD_RED = Style(foreground=Colour.basic(1), bold=True)


class ParsingTests(unittest.TestCase):
    def test_indicators_and_patterns_are_split(self) -> None:
        lscolors = LsColors.from_string("rs=0:di=01;34:*.tar=01;31::")
        self.assertEqual(lscolors.style_for_indicator("di"), BOLD_BLUE)
        self.assertEqual(lscolors.style_for_indicator("rs"), Style())
        self.assertIsNone(lscolors.style_for_indicator("ln"))
        self.assertEqual(lscolors.style_for_name("backup.tar"), BOLD_RED)

    def test_later_entries_win(self) -> None:
        lscolors = LsColors.from_string("di=31:di=01;34:*.gz=32:*.tar.gz=01;31")
        self.assertEqual(lscolors.style_for_indicator("di"), BOLD_BLUE)
        self.assertEqual(lscolors.style_for_name("a.tar.gz"), BOLD_RED)
        self.assertEqual(lscolors.style_for_name("a.gz"), Style(foreground=Colour.basic(2)))

    def test_suffix_patterns_ignore_case_and_globs_do_not(self) -> None:
        lscolors = LsColors.from_string("*.jpg=35:*README*=33")
        self.assertIsNotNone(lscolors.style_for_name("PHOTO.JPG"))
        self.assertIsNotNone(lscolors.style_for_name("README.md"))
        self.assertIsNone(lscolors.style_for_name("readme.md"))

    def test_link_target_is_a_flag_not_a_style(self) -> None:
        lscolors = LsColors.from_string("ln=target")
        self.assertTrue(lscolors.link_target)
        self.assertIsNone(lscolors.style_for_indicator("ln"))

    def test_malformed_entries_raise(self) -> None:
        for value in ("di", "=01;34", "di=01;zz"):
            with self.subTest(value=value):
                with self.assertRaises(LsColorsError):
                    LsColors.from_string(value)


class FromEnvTests(unittest.TestCase):
    def test_unset_variable_gives_empty_source(self) -> None:
        lscolors = LsColors.from_env({})
        self.assertIsNone(lscolors.style_for_indicator("di"))

    def test_malformed_variable_is_logged_and_ignored(self) -> None:
        with self.assertLogs("lscolorize.lscolors", level="WARNING") as logs:
            lscolors = LsColors.from_env({"LS_COLORS": "di=01;34:nonsense"})
        self.assertIsNone(lscolors.style_for_indicator("di"))
        self.assertIn("LS_COLORS", logs.output[0])

    def test_valid_variable_is_parsed(self) -> None:
        lscolors = LsColors.from_env({"LS_COLORS": "di=01;34"})
        self.assertEqual(lscolors.style_for_indicator("di"), BOLD_BLUE)


class PathStyleTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_directory_uses_di(self) -> None:
        lscolors = LsColors.from_string("di=01;34")
        self.assertEqual(lscolors.style_for_path(self.root), BOLD_BLUE)

    def test_regular_file_prefers_name_pattern_over_fi(self) -> None:
        target = self.root / "data.tar"
        target.write_bytes(b"")
        lscolors = LsColors.from_string("fi=33:*.tar=01;31")
        self.assertEqual(lscolors.style_for_path(target), BOLD_RED)
        other = self.root / "notes.txt"
        other.write_bytes(b"")
        self.assertEqual(lscolors.style_for_path(other), Style(foreground=Colour.basic(3)))

    def test_executable_file_uses_ex_when_registered(self) -> None:
        target = self.root / "run.tar"
        target.write_bytes(b"")
        os.chmod(target, 0o755)
        self.assertEqual(LsColors.from_string("ex=01;32:*.tar=31").indicator_for_path(target), "ex")
        self.assertEqual(LsColors.from_string("*.tar=31").indicator_for_path(target), "fi")

    def test_symlinks_and_orphans(self) -> None:
        target = self.root / "real.txt"
        target.write_bytes(b"")
        link = self.root / "link"
        link.symlink_to(target)
        orphan = self.root / "orphan"
        orphan.symlink_to(self.root / "gone")

        lscolors = LsColors.from_string("ln=01;36:or=01;31")
        self.assertEqual(lscolors.indicator_for_path(link), "ln")
        self.assertEqual(lscolors.indicator_for_path(orphan), "or")
        self.assertEqual(LsColors.from_string("ln=01;36").indicator_for_path(orphan), "ln")

    def test_link_target_follows_symlink(self) -> None:
        target = self.root / "pkg.tar"
        target.write_bytes(b"")
        link = self.root / "pkg-link.tar"
        link.symlink_to(target)
        lscolors = LsColors.from_string("ln=target:*.tar=01;31")
        self.assertEqual(lscolors.style_for_path(link), BOLD_RED)

    def test_sticky_world_writable_directory(self) -> None:
        shared = self.root / "shared"
        shared.mkdir()
        os.chmod(shared, 0o1777)
        lscolors = LsColors.from_string("di=34:tw=30;42")
        self.assertEqual(lscolors.indicator_for_path(shared), "tw")
        self.assertEqual(LsColors.from_string("di=34").indicator_for_path(shared), "di")

    def test_missing_path_uses_mi_or_nothing(self) -> None:
        missing = self.root / "missing"
        self.assertIsNone(LsColors.from_string("di=34").style_for_path(missing))
        self.assertEqual(LsColors.from_string("mi=05").style_for_path(missing), Style(blink=True))


if __name__ == "__main__":
    unittest.main()
