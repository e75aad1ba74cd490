"""Theme mode definitions and selection helpers.

A theme mode decides which colour sources a resolver consults: none at all,
the built-in table plus ``LS_COLORS``, or the built-in table alone.
"""

from __future__ import annotations

THEME_NO_COLOR = "no-color"
THEME_DEFAULT = "default"
THEME_NO_LSCOLORS = "no-lscolors"

_THEMES: tuple[str, ...] = (THEME_DEFAULT, THEME_NO_COLOR, THEME_NO_LSCOLORS)


def available_theme_names() -> tuple[str, ...]:
    """Return selectable theme mode names."""
    return tuple(sorted(_THEMES))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return THEME_DEFAULT
    candidate = str(name).strip().lower().replace("_", "-")
    if candidate in _THEMES:
        return candidate
    return THEME_DEFAULT


def resolve_theme(name: str | None, *, no_color: bool = False) -> str:
    """Return concrete theme mode for requested name and color switch."""
    if no_color:
        return THEME_NO_COLOR
    return normalize_theme_name(name)


def uses_colour_table(theme: str) -> bool:
    return theme != THEME_NO_COLOR


def uses_lscolors(theme: str) -> bool:
    return theme == THEME_DEFAULT


__all__ = [
    "THEME_NO_COLOR",
    "THEME_DEFAULT",
    "THEME_NO_LSCOLORS",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
    "uses_colour_table",
    "uses_lscolors",
]
