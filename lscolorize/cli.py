"""Command-line front door for lscolorize.

Lists directories or files with every cell painted through ``Colors``.
Theme selection comes from CLI flags, then persisted config, then default.
"""

from __future__ import annotations

import argparse
import grp
import logging
import os
import pwd
import stat
import sys
import time
from collections.abc import Iterator, Mapping
from pathlib import Path

from . import config
from .classify import date_elem, inode_elem, node_elem, permission_elems, size_elem
from .colors import Colors
from .elem import GROUP, USER
from .lscolors import LsColors
from .theme import available_theme_names, resolve_theme, uses_lscolors

logger = logging.getLogger("lscolorize.cli")

NO_COLOR_ENV = "NO_COLOR"
DATE_FORMAT = "%b %d %H:%M"


def build_colors(
    theme: str | None,
    no_color: bool = False,
    environ: Mapping[str, str] | None = None,
) -> Colors:
    """Construct the resolver for one run.

    ``NO_COLOR`` (any non-empty value) disables colour like ``--no-color``.
    """
    env = os.environ if environ is None else environ
    if env.get(NO_COLOR_ENV):
        no_color = True
    mode = resolve_theme(theme if theme is not None else config.load_theme_name(), no_color=no_color)
    logger.debug("using theme %s", mode)
    lscolors = LsColors.from_env(env) if uses_lscolors(mode) else None
    return Colors(mode, lscolors=lscolors)


def _owner_name(uid: int) -> str:
    try:
        return pwd.getpwuid(uid).pw_name
    except KeyError:
        return str(uid)


def _group_name(gid: int) -> str:
    try:
        return grp.getgrgid(gid).gr_name
    except KeyError:
        return str(gid)


def format_permissions(colors: Colors, mode: int) -> str:
    cells = [stat.filemode(mode)[0]]
    for char, elem in permission_elems(mode):
        cells.append(str(colors.colorize(char, elem)))
    return "".join(cells)


def format_entry(colors: Colors, path: Path, long: bool = False, now: float | None = None) -> str:
    """Render one listing row for ``path``.

    Raises ``OSError`` when ``path`` cannot be stat'ed.
    """
    st = os.lstat(path)
    elem = node_elem(path, st)
    name = str(colors.colorize_using_path(path.name or str(path), path, elem))
    if not long:
        return name

    if now is None:
        now = time.time()
    size_text = str(st.st_size) if stat.S_ISREG(st.st_mode) else "-"
    date_text = time.strftime(DATE_FORMAT, time.localtime(st.st_mtime))
    columns = [
        str(colors.colorize(str(st.st_ino), inode_elem(st))),
        format_permissions(colors, st.st_mode),
        str(colors.colorize(_owner_name(st.st_uid), USER)),
        str(colors.colorize(_group_name(st.st_gid), GROUP)),
        str(colors.colorize(size_text.rjust(9), size_elem(st))),
        str(colors.colorize(date_text, date_elem(st.st_mtime, now))),
        name,
    ]
    row = " ".join(columns)
    if stat.S_ISLNK(st.st_mode):
        try:
            row += f" -> {os.readlink(path)}"
        except OSError as exc:
            logger.debug("cannot read link %s: %s", path, exc)
    return row


def iter_targets(path: Path, show_all: bool = False, follow_symlinks: bool = True) -> Iterator[Path]:
    """Yield ``path`` itself for non-directories, else its sorted children.

    A symlink to a directory is expanded only when ``follow_symlinks`` is set.
    """
    if not path.is_dir() or (path.is_symlink() and not follow_symlinks):
        yield path
        return
    for child in sorted(path.iterdir(), key=lambda p: p.name):
        if not show_all and child.name.startswith("."):
            continue
        yield child


def main(argv: list[str] | None = None) -> int:
    """Parse CLI arguments and print the listing; returns the exit status."""
    parser = argparse.ArgumentParser(
        prog="lscolorize",
        description="List directory contents with LS_COLORS-aware colouring.",
    )
    parser.add_argument("paths", nargs="*", default=[], help="Files or directories. Defaults to current directory.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"Theme mode ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--save-theme", action="store_true", help="Persist --theme as the default.")
    parser.add_argument("-a", "--all", action="store_true", help="Include entries starting with '.'.")
    parser.add_argument(
        "-l",
        "--long",
        action="store_true",
        help="Show inode, permissions, owner, size and date. Symlinked directories are not expanded.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log diagnostics to stderr.")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
    )

    if args.save_theme and args.theme is None:
        parser.error("--save-theme requires --theme")
    if args.save_theme:
        config.save_theme_name(args.theme)

    colors = build_colors(args.theme, no_color=args.no_color)
    paths = [Path(p) for p in args.paths] or [Path.cwd()]
    now = time.time()
    status = 0
    for index, path in enumerate(paths):
        if not os.path.lexists(path):
            sys.stderr.write(f"lscolorize: {path}: No such file or directory\n")
            status = 1
            continue
        follow_symlinks = not args.long
        try:
            targets = list(iter_targets(path, show_all=args.all, follow_symlinks=follow_symlinks))
        except OSError as exc:
            sys.stderr.write(f"lscolorize: {path}: {exc.strerror or exc}\n")
            status = 1
            continue
        if len(paths) > 1 and path.is_dir() and (follow_symlinks or not path.is_symlink()):
            if index > 0:
                sys.stdout.write("\n")
            sys.stdout.write(f"{path}:\n")
        for target in targets:
            try:
                row = format_entry(colors, target, long=args.long, now=now)
            except OSError as exc:
                sys.stderr.write(f"lscolorize: {target}: {exc.strerror or exc}\n")
                status = 1
                continue
            sys.stdout.write(row + "\n")
    return status


if __name__ == "__main__":
    raise SystemExit(main())
