"""Public package surface for lscolorize.

Re-exports the resolver, classification and style types. The CLI entrypoint
is imported lazily to keep library imports lightweight.
"""

from __future__ import annotations

from .colors import Colors, indicator_for_elem
from .elem import Elem, all_elems
from .lscolors import LsColors, LsColorsError
from .style import Colour, Style, StyledText, StyleParseError
from .theme import THEME_DEFAULT, THEME_NO_COLOR, THEME_NO_LSCOLORS


def main(*args, **kwargs):
    """Lazily import CLI entrypoint."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "Colors",
    "Colour",
    "Elem",
    "LsColors",
    "LsColorsError",
    "Style",
    "StyleParseError",
    "StyledText",
    "THEME_DEFAULT",
    "THEME_NO_COLOR",
    "THEME_NO_LSCOLORS",
    "all_elems",
    "indicator_for_elem",
    "main",
]
