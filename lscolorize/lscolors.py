"""LS_COLORS override source.

Parses the ``key=SGR`` database GNU ``ls`` reads from ``LS_COLORS`` and answers
two questions: which style is registered for an indicator code such as ``di``,
and which style a concrete path gets from its file type and name patterns.
"""

from __future__ import annotations

import fnmatch
import logging
import os
import stat
from collections.abc import Mapping
from pathlib import Path

from .style import Style, StyleParseError

logger = logging.getLogger("lscolorize.lscolors")

LS_COLORS_ENV = "LS_COLORS"
LINK_TARGET = "target"

INDICATOR_NORMAL = "no"
INDICATOR_FILE = "fi"
INDICATOR_DIR = "di"
INDICATOR_SYMLINK = "ln"
INDICATOR_PIPE = "pi"
INDICATOR_SOCKET = "so"
INDICATOR_BLOCK_DEVICE = "bd"
INDICATOR_CHAR_DEVICE = "cd"
INDICATOR_ORPHAN = "or"
INDICATOR_MISSING = "mi"
INDICATOR_SETUID = "su"
INDICATOR_SETGID = "sg"
INDICATOR_EXEC = "ex"
INDICATOR_MULTI_HARDLINK = "mh"
INDICATOR_STICKY = "st"
INDICATOR_OTHER_WRITABLE = "ow"
INDICATOR_STICKY_OTHER_WRITABLE = "tw"


class LsColorsError(ValueError):
    """Raised for an ``LS_COLORS`` value that cannot be parsed."""


def _literal_suffix(pattern: str) -> str | None:
    """Return the suffix for plain ``*.ext``-style patterns, else ``None``."""
    rest = pattern[1:]
    if not rest or any(ch in rest for ch in "*?["):
        return None
    return rest


class LsColors:
    """Parsed ``LS_COLORS`` tables.

    Instances are read-only once built; later changes to the environment are
    not observed.
    """

    def __init__(
        self,
        indicators: Mapping[str, Style] | None = None,
        patterns: tuple[tuple[str, Style], ...] = (),
        link_target: bool = False,
    ) -> None:
        self._indicators: dict[str, Style] = dict(indicators or {})
        # Later entries take precedence, so lookups walk this in reverse.
        self._patterns: tuple[tuple[str, Style], ...] = tuple(patterns)
        self._link_target = link_target

    @classmethod
    def empty(cls) -> "LsColors":
        return cls()

    @classmethod
    def from_string(cls, value: str) -> "LsColors":
        """Parse an ``LS_COLORS`` value.

        Empty items are skipped. Items without ``=`` and values that are not
        valid SGR parameter strings raise :class:`LsColorsError`.
        """
        indicators: dict[str, Style] = {}
        patterns: list[tuple[str, Style]] = []
        link_target = False
        for item in value.split(":"):
            item = item.strip()
            if not item:
                continue
            key, sep, sgr = item.partition("=")
            if not sep or not key:
                raise LsColorsError(f"malformed LS_COLORS entry: {item!r}")
            if key == INDICATOR_SYMLINK and sgr == LINK_TARGET:
                link_target = True
                continue
            try:
                style = Style.from_sgr(sgr)
            except StyleParseError as exc:
                raise LsColorsError(f"bad style for {key!r}: {exc}") from exc
            if key.startswith("*"):
                patterns.append((key, style))
            else:
                indicators[key] = style
        return cls(indicators, tuple(patterns), link_target)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "LsColors":
        """Build from ``LS_COLORS``, falling back to an empty source.

        Never raises: a malformed value is logged and ignored.
        """
        env = os.environ if environ is None else environ
        value = env.get(LS_COLORS_ENV)
        if not value:
            logger.debug("%s not set; no colour overrides", LS_COLORS_ENV)
            return cls.empty()
        try:
            return cls.from_string(value)
        except LsColorsError as exc:
            logger.warning("ignoring %s: %s", LS_COLORS_ENV, exc)
            return cls.empty()

    @property
    def link_target(self) -> bool:
        return self._link_target

    def has_indicator(self, code: str) -> bool:
        return code in self._indicators

    def style_for_indicator(self, code: str) -> Style | None:
        return self._indicators.get(code)

    def style_for_name(self, name: str) -> Style | None:
        """Return the style of the last pattern matching ``name``."""
        folded = name.casefold()
        for pattern, style in reversed(self._patterns):
            suffix = _literal_suffix(pattern)
            if suffix is not None:
                if folded.endswith(suffix.casefold()):
                    return style
            elif fnmatch.fnmatchcase(name, pattern):
                return style
        return None

    def indicator_for_path(self, path: Path, st: os.stat_result | None = None) -> str:
        """Classify ``path`` into an indicator code the way ``ls`` does.

        Optional indicators (setuid, sticky, orphan, ...) are only chosen when
        this source registers a style for them.
        """
        if st is None:
            try:
                st = os.lstat(path)
            except OSError:
                return INDICATOR_MISSING
        mode = st.st_mode
        if stat.S_ISREG(mode):
            if mode & stat.S_ISUID and self.has_indicator(INDICATOR_SETUID):
                return INDICATOR_SETUID
            if mode & stat.S_ISGID and self.has_indicator(INDICATOR_SETGID):
                return INDICATOR_SETGID
            if mode & (stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH) and self.has_indicator(INDICATOR_EXEC):
                return INDICATOR_EXEC
            if st.st_nlink > 1 and self.has_indicator(INDICATOR_MULTI_HARDLINK):
                return INDICATOR_MULTI_HARDLINK
            return INDICATOR_FILE
        if stat.S_ISDIR(mode):
            sticky = bool(mode & stat.S_ISVTX)
            other_writable = bool(mode & stat.S_IWOTH)
            if sticky and other_writable and self.has_indicator(INDICATOR_STICKY_OTHER_WRITABLE):
                return INDICATOR_STICKY_OTHER_WRITABLE
            if other_writable and self.has_indicator(INDICATOR_OTHER_WRITABLE):
                return INDICATOR_OTHER_WRITABLE
            if sticky and self.has_indicator(INDICATOR_STICKY):
                return INDICATOR_STICKY
            return INDICATOR_DIR
        if stat.S_ISLNK(mode):
            if self.has_indicator(INDICATOR_ORPHAN) and not os.path.exists(path):
                return INDICATOR_ORPHAN
            return INDICATOR_SYMLINK
        if stat.S_ISFIFO(mode):
            return INDICATOR_PIPE
        if stat.S_ISSOCK(mode):
            return INDICATOR_SOCKET
        if stat.S_ISBLK(mode):
            return INDICATOR_BLOCK_DEVICE
        if stat.S_ISCHR(mode):
            return INDICATOR_CHAR_DEVICE
        return INDICATOR_NORMAL

    def style_for_path(self, path: Path | str) -> Style | None:
        """Return the style ``ls`` would use for ``path``, or ``None``."""
        path = Path(path)
        indicator = self.indicator_for_path(path)
        if indicator == INDICATOR_SYMLINK and self._link_target:
            try:
                target_st = os.stat(path)
            except OSError:
                indicator = INDICATOR_ORPHAN
            else:
                indicator = self.indicator_for_path(path, target_st)
        if indicator == INDICATOR_FILE:
            by_name = self.style_for_name(path.name)
            if by_name is not None:
                return by_name
        return self.style_for_indicator(indicator)

    def __repr__(self) -> str:
        return (
            f"LsColors(indicators={len(self._indicators)}, "
            f"patterns={len(self._patterns)}, link_target={self._link_target})"
        )


__all__ = [
    "LS_COLORS_ENV",
    "LsColors",
    "LsColorsError",
]
