"""Map ``stat`` metadata onto listing classifications."""

from __future__ import annotations

import os
import stat
from pathlib import Path

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
    HOUR_OLD,
    NO_ACCESS,
    NON_FILE,
    OLDER,
    PIPE,
    READ,
    SOCKET,
    SPECIAL,
    SYMLINK,
    WRITE,
    Elem,
)

HOUR_SECONDS = 60 * 60
DAY_SECONDS = 24 * HOUR_SECONDS
FILE_MEDIUM_MIN_BYTES = 1024
FILE_LARGE_MIN_BYTES = 1024 * 1024

_EXEC_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH

# (read, write, exec, special bit, special char) per user/group/other triplet.
_TRIPLETS = (
    (stat.S_IRUSR, stat.S_IWUSR, stat.S_IXUSR, stat.S_ISUID, "s"),
    (stat.S_IRGRP, stat.S_IWGRP, stat.S_IXGRP, stat.S_ISGID, "s"),
    (stat.S_IROTH, stat.S_IWOTH, stat.S_IXOTH, stat.S_ISVTX, "t"),
)


def _has_uid_bit(mode: int) -> bool:
    return bool(mode & (stat.S_ISUID | stat.S_ISGID))


def node_elem(path: Path, st: os.stat_result | None = None) -> Elem:
    """Classify the node at ``path`` without following a final symlink.

    Raises ``OSError`` when ``path`` cannot be stat'ed and ``st`` is omitted.
    """
    if st is None:
        st = os.lstat(path)
    mode = st.st_mode
    if stat.S_ISLNK(mode):
        return SYMLINK if os.path.exists(path) else BROKEN_SYMLINK
    if stat.S_ISDIR(mode):
        return Elem.dir(uid=_has_uid_bit(mode))
    if stat.S_ISREG(mode):
        return Elem.file(exec=bool(mode & _EXEC_BITS), uid=_has_uid_bit(mode))
    if stat.S_ISFIFO(mode):
        return PIPE
    if stat.S_ISBLK(mode):
        return BLOCK_DEVICE
    if stat.S_ISCHR(mode):
        return CHAR_DEVICE
    if stat.S_ISSOCK(mode):
        return SOCKET
    return SPECIAL


def permission_elems(mode: int) -> list[tuple[str, Elem]]:
    """Return the nine ``rwx`` cells of ``mode`` with their classifications.

    Setuid, setgid and sticky bits replace the execute cell: lower-case
    ``s``/``t`` when execute is also set, upper-case ``S``/``T`` when not.
    """
    cells: list[tuple[str, Elem]] = []
    for read_bit, write_bit, exec_bit, special_bit, special_char in _TRIPLETS:
        cells.append(("r", READ) if mode & read_bit else ("-", NO_ACCESS))
        cells.append(("w", WRITE) if mode & write_bit else ("-", NO_ACCESS))
        has_exec = bool(mode & exec_bit)
        if mode & special_bit:
            if has_exec:
                cells.append((special_char, EXEC_STICKY))
            else:
                cells.append((special_char.upper(), NO_ACCESS))
        elif has_exec:
            cells.append(("x", EXEC))
        else:
            cells.append(("-", NO_ACCESS))
    return cells


def date_elem(mtime: float, now: float) -> Elem:
    age = now - mtime
    if age < HOUR_SECONDS:
        return HOUR_OLD
    if age < DAY_SECONDS:
        return DAY_OLD
    return OLDER


def size_elem(st: os.stat_result) -> Elem:
    if not stat.S_ISREG(st.st_mode):
        return NON_FILE
    if st.st_size >= FILE_LARGE_MIN_BYTES:
        return FILE_LARGE
    if st.st_size >= FILE_MEDIUM_MIN_BYTES:
        return FILE_MEDIUM
    return FILE_SMALL


def inode_elem(st: os.stat_result) -> Elem:
    return Elem.inode(valid=st.st_ino != 0)


__all__ = [
    "node_elem",
    "permission_elems",
    "date_elem",
    "size_elem",
    "inode_elem",
]
