"""Built-in colour table for listing classifications.

Palette indices refer to the xterm 256-colour table.
"""

from __future__ import annotations

from .elem import (
    BLOCK_DEVICE,
    BROKEN_SYMLINK,
    CHAR_DEVICE,
    DAY_OLD,
    EXEC,
    EXEC_STICKY,
    FILE_LARGE,
    FILE_MEDIUM,
    FILE_SMALL,
    GROUP,
    HOUR_OLD,
    NO_ACCESS,
    NON_FILE,
    OLDER,
    PIPE,
    READ,
    SOCKET,
    SPECIAL,
    SYMLINK,
    USER,
    WRITE,
    Elem,
)
from .style import Colour

# Background painted behind setuid/setgid entries (Red3).
SUID_HIGHLIGHT = Colour.fixed(124)


def light_theme_colour_map() -> dict[Elem, Colour]:
    """Return a fresh mapping from every classification to its default colour."""
    m: dict[Elem, Colour] = {}
    # User / group
    m[USER] = Colour.fixed(6)
    m[GROUP] = Colour.fixed(7)

    # Permissions
    m[READ] = Colour.fixed(2)
    m[WRITE] = Colour.fixed(11)
    m[EXEC] = Colour.fixed(9)
    m[EXEC_STICKY] = Colour.fixed(13)
    m[NO_ACCESS] = Colour.fixed(7)

    # Node types
    m[Elem.file(exec=False, uid=False)] = Colour.fixed(11)
    m[Elem.file(exec=False, uid=True)] = Colour.fixed(11)
    m[Elem.file(exec=True, uid=False)] = Colour.fixed(2)
    m[Elem.file(exec=True, uid=True)] = Colour.fixed(2)
    m[Elem.dir(uid=True)] = Colour.fixed(4)
    m[Elem.dir(uid=False)] = Colour.fixed(4)
    m[PIPE] = Colour.fixed(6)
    m[SYMLINK] = Colour.fixed(6)
    m[BROKEN_SYMLINK] = Colour.fixed(9)
    m[BLOCK_DEVICE] = Colour.fixed(6)
    m[CHAR_DEVICE] = Colour.fixed(3)
    m[SOCKET] = Colour.fixed(6)
    m[SPECIAL] = Colour.fixed(6)

    # Last modified
    m[HOUR_OLD] = Colour.fixed(7)
    m[DAY_OLD] = Colour.fixed(7)
    m[OLDER] = Colour.fixed(7)

    # Size buckets
    m[NON_FILE] = Colour.fixed(7)
    m[FILE_SMALL] = Colour.fixed(3)
    m[FILE_MEDIUM] = Colour.fixed(5)
    m[FILE_LARGE] = Colour.fixed(9)

    # Inode
    m[Elem.inode(valid=True)] = Colour.fixed(13)
    m[Elem.inode(valid=False)] = Colour.fixed(7)
    return m


__all__ = ["SUID_HIGHLIGHT", "light_theme_colour_map"]
