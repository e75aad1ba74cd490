"""Style resolution for classified listing entries.

``Colors`` combines three sources in fixed precedence:

1. a per-path ``LS_COLORS`` style (only through ``colorize_using_path``),
2. an ``LS_COLORS`` style registered for the classification's indicator code,
3. the built-in colour table, with a red background behind setuid/setgid
   files and directories.

Only table-resolved styles get the setuid/setgid background; override styles
are returned exactly as configured.
"""

from __future__ import annotations

from pathlib import Path

from .elem import (
    KIND_BLOCK_DEVICE,
    KIND_BROKEN_SYMLINK,
    KIND_CHAR_DEVICE,
    KIND_DIR,
    KIND_FILE,
    KIND_INODE,
    KIND_PIPE,
    KIND_SOCKET,
    KIND_SYMLINK,
    Elem,
)
from .lscolors import LsColors
from .palette import SUID_HIGHLIGHT, light_theme_colour_map
from .style import Colour, Style, StyledText
from .theme import THEME_DEFAULT, normalize_theme_name, uses_colour_table, uses_lscolors

_UNIT_INDICATORS: dict[str, str] = {
    KIND_SYMLINK: "ln",
    KIND_PIPE: "pi",
    KIND_SOCKET: "so",
    KIND_BLOCK_DEVICE: "bd",
    KIND_CHAR_DEVICE: "cd",
    KIND_BROKEN_SYMLINK: "or",
}


def indicator_for_elem(elem: Elem) -> str | None:
    """Return the ``LS_COLORS`` indicator code for ``elem``, if it has one.

    Setuid/setgid files and directories have none, so their highlight always
    comes from the built-in table.
    """
    if elem.kind == KIND_FILE:
        if elem.uid:
            return None
        return "ex" if elem.exec else "fi"
    if elem.kind == KIND_DIR:
        return None if elem.uid else "di"
    if elem.kind == KIND_INODE:
        return "so" if elem.valid else "no"
    return _UNIT_INDICATORS.get(elem.kind)


class Colors:
    """Resolver holding the colour sources selected by a theme mode.

    ``lscolors`` is only consulted in the default mode; when omitted there it
    is read from the environment once, at construction.
    """

    def __init__(self, theme: str = THEME_DEFAULT, lscolors: LsColors | None = None) -> None:
        self.theme = normalize_theme_name(theme)
        self._colors: dict[Elem, Colour] | None = None
        self._lscolors: LsColors | None = None
        if uses_colour_table(self.theme):
            self._colors = light_theme_colour_map()
        if uses_lscolors(self.theme):
            self._lscolors = lscolors if lscolors is not None else LsColors.from_env()

    @property
    def lscolors(self) -> LsColors | None:
        return self._lscolors

    def colorize(self, text: str, elem: Elem) -> StyledText:
        return self.style_for(elem).paint(text)

    def colorize_using_path(self, text: str, path: Path | str, elem: Elem) -> StyledText:
        """Paint ``text`` with the path's override style, else as ``colorize``."""
        path_style = self.style_for_path(path)
        if path_style is not None:
            return path_style.paint(text)
        return self.colorize(text, elem)

    def style_for_path(self, path: Path | str) -> Style | None:
        if self._lscolors is None:
            return None
        return self._lscolors.style_for_path(Path(path))

    def style_for(self, elem: Elem) -> Style:
        if self._lscolors is not None:
            indicator = indicator_for_elem(elem)
            if indicator is not None:
                style = self._lscolors.style_for_indicator(indicator)
                if style is not None:
                    return style
        return self.default_style_for(elem)

    def default_style_for(self, elem: Elem) -> Style:
        """Return the built-in table style, highlighted for setuid/setgid."""
        if self._colors is None:
            return Style()
        style = Style().fg(self._colors[elem])
        if elem.has_suid():
            style = style.on(SUID_HIGHLIGHT)
        return style

    def __repr__(self) -> str:
        return f"Colors(theme={self.theme!r}, lscolors={self._lscolors!r})"


__all__ = ["Colors", "indicator_for_elem"]
