"""Module entrypoint for ``python -m lscolorize``.

All argument parsing and listing happen in ``lscolorize.cli``.
"""

from .cli import main


if __name__ == "__main__":
    raise SystemExit(main())
