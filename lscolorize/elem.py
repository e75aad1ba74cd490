"""Classification datatypes for listing entries.

An ``Elem`` names one reason a listing cell needs a color: node type,
permission bit, recency, owner label, size bucket, or inode validity.
"""

from __future__ import annotations

from dataclasses import dataclass

KIND_FILE = "file"
KIND_SYMLINK = "symlink"
KIND_BROKEN_SYMLINK = "broken_symlink"
KIND_DIR = "dir"
KIND_PIPE = "pipe"
KIND_BLOCK_DEVICE = "block_device"
KIND_CHAR_DEVICE = "char_device"
KIND_SOCKET = "socket"
KIND_SPECIAL = "special"

KIND_READ = "read"
KIND_WRITE = "write"
KIND_EXEC = "exec"
KIND_EXEC_STICKY = "exec_sticky"
KIND_NO_ACCESS = "no_access"

KIND_DAY_OLD = "day_old"
KIND_HOUR_OLD = "hour_old"
KIND_OLDER = "older"

KIND_USER = "user"
KIND_GROUP = "group"

KIND_NON_FILE = "non_file"
KIND_FILE_LARGE = "file_large"
KIND_FILE_MEDIUM = "file_medium"
KIND_FILE_SMALL = "file_small"

KIND_INODE = "inode"

UNIT_KINDS: tuple[str, ...] = (
    KIND_SYMLINK,
    KIND_BROKEN_SYMLINK,
    KIND_PIPE,
    KIND_BLOCK_DEVICE,
    KIND_CHAR_DEVICE,
    KIND_SOCKET,
    KIND_SPECIAL,
    KIND_READ,
    KIND_WRITE,
    KIND_EXEC,
    KIND_EXEC_STICKY,
    KIND_NO_ACCESS,
    KIND_DAY_OLD,
    KIND_HOUR_OLD,
    KIND_OLDER,
    KIND_USER,
    KIND_GROUP,
    KIND_NON_FILE,
    KIND_FILE_LARGE,
    KIND_FILE_MEDIUM,
    KIND_FILE_SMALL,
)
ELEM_KINDS = frozenset(UNIT_KINDS + (KIND_FILE, KIND_DIR, KIND_INODE))


@dataclass(frozen=True)
class Elem:
    """One classification value.

    ``exec`` only belongs to ``file``, ``uid`` to ``file`` and ``dir``, and
    ``valid`` to ``inode``. Flags set on any other kind are cleared so two
    values compare equal exactly when they denote the same variant.
    """

    kind: str
    exec: bool = False
    uid: bool = False
    valid: bool = False

    def __post_init__(self) -> None:
        if self.kind not in ELEM_KINDS:
            raise ValueError(f"unknown element kind: {self.kind!r}")
        if self.kind != KIND_FILE:
            object.__setattr__(self, "exec", False)
        if self.kind not in (KIND_FILE, KIND_DIR):
            object.__setattr__(self, "uid", False)
        if self.kind != KIND_INODE:
            object.__setattr__(self, "valid", False)
        object.__setattr__(self, "exec", bool(self.exec))
        object.__setattr__(self, "uid", bool(self.uid))
        object.__setattr__(self, "valid", bool(self.valid))

    @classmethod
    def file(cls, exec: bool = False, uid: bool = False) -> "Elem":
        return cls(KIND_FILE, exec=exec, uid=uid)

    @classmethod
    def dir(cls, uid: bool = False) -> "Elem":
        return cls(KIND_DIR, uid=uid)

    @classmethod
    def inode(cls, valid: bool) -> "Elem":
        return cls(KIND_INODE, valid=valid)

    def has_suid(self) -> bool:
        """Return whether this is a setuid/setgid file or directory."""
        return self.kind in (KIND_FILE, KIND_DIR) and self.uid

    def __repr__(self) -> str:
        if self.kind == KIND_FILE:
            return f"Elem.file(exec={self.exec}, uid={self.uid})"
        if self.kind == KIND_DIR:
            return f"Elem.dir(uid={self.uid})"
        if self.kind == KIND_INODE:
            return f"Elem.inode(valid={self.valid})"
        return f"Elem({self.kind!r})"


SYMLINK = Elem(KIND_SYMLINK)
BROKEN_SYMLINK = Elem(KIND_BROKEN_SYMLINK)
PIPE = Elem(KIND_PIPE)
BLOCK_DEVICE = Elem(KIND_BLOCK_DEVICE)
CHAR_DEVICE = Elem(KIND_CHAR_DEVICE)
SOCKET = Elem(KIND_SOCKET)
SPECIAL = Elem(KIND_SPECIAL)

READ = Elem(KIND_READ)
WRITE = Elem(KIND_WRITE)
EXEC = Elem(KIND_EXEC)
EXEC_STICKY = Elem(KIND_EXEC_STICKY)
NO_ACCESS = Elem(KIND_NO_ACCESS)

DAY_OLD = Elem(KIND_DAY_OLD)
HOUR_OLD = Elem(KIND_HOUR_OLD)
OLDER = Elem(KIND_OLDER)

USER = Elem(KIND_USER)
GROUP = Elem(KIND_GROUP)

NON_FILE = Elem(KIND_NON_FILE)
FILE_LARGE = Elem(KIND_FILE_LARGE)
FILE_MEDIUM = Elem(KIND_FILE_MEDIUM)
FILE_SMALL = Elem(KIND_FILE_SMALL)


def all_elems() -> tuple[Elem, ...]:
    """Return every concrete classification value, payload combinations included."""
    elems: list[Elem] = []
    for exec_ in (False, True):
        for uid in (False, True):
            elems.append(Elem.file(exec=exec_, uid=uid))
    elems.append(Elem.dir(uid=False))
    elems.append(Elem.dir(uid=True))
    elems.append(Elem.inode(valid=True))
    elems.append(Elem.inode(valid=False))
    elems.extend(Elem(kind) for kind in UNIT_KINDS)
    return tuple(elems)


__all__ = [
    "Elem",
    "ELEM_KINDS",
    "UNIT_KINDS",
    "SYMLINK",
    "BROKEN_SYMLINK",
    "PIPE",
    "BLOCK_DEVICE",
    "CHAR_DEVICE",
    "SOCKET",
    "SPECIAL",
    "READ",
    "WRITE",
    "EXEC",
    "EXEC_STICKY",
    "NO_ACCESS",
    "DAY_OLD",
    "HOUR_OLD",
    "OLDER",
    "USER",
    "GROUP",
    "NON_FILE",
    "FILE_LARGE",
    "FILE_MEDIUM",
    "FILE_SMALL",
    "all_elems",
]
