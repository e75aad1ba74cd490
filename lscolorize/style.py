"""Terminal style values and SGR rendering.

``Style`` is the resolved foreground/background/attribute set for one cell of
listing output; ``StyledText`` pairs it with the text it paints.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

RESET = "\033[0m"

_ATTRIBUTE_CODES: tuple[tuple[str, str], ...] = (
    ("bold", "1"),
    ("dimmed", "2"),
    ("italic", "3"),
    ("underline", "4"),
    ("blink", "5"),
    ("reverse", "7"),
    ("hidden", "8"),
    ("strikethrough", "9"),
)
_ATTRIBUTE_BY_CODE = {code: name for name, code in _ATTRIBUTE_CODES}
_ATTRIBUTE_BY_CODE["6"] = "blink"


class StyleParseError(ValueError):
    """Raised when an SGR parameter string cannot be parsed."""


@dataclass(frozen=True)
class Colour:
    """A terminal colour.

    ``kind`` is ``"basic"`` (0-7 normal, 8-15 bright), ``"fixed"`` (256-colour
    palette index) or ``"rgb"`` (24-bit ``(r, g, b)``).
    """

    kind: str
    value: int | tuple[int, int, int]

    @classmethod
    def basic(cls, index: int) -> "Colour":
        if not 0 <= index <= 15:
            raise ValueError(f"basic colour index out of range: {index}")
        return cls("basic", index)

    @classmethod
    def fixed(cls, index: int) -> "Colour":
        if not 0 <= index <= 255:
            raise ValueError(f"palette index out of range: {index}")
        return cls("fixed", index)

    @classmethod
    def rgb(cls, r: int, g: int, b: int) -> "Colour":
        for channel in (r, g, b):
            if not 0 <= channel <= 255:
                raise ValueError(f"rgb channel out of range: {channel}")
        return cls("rgb", (r, g, b))

    def _codes(self, base: int, bright_base: int, extended: str) -> list[str]:
        if self.kind == "basic":
            index = int(self.value)
            if index < 8:
                return [str(base + index)]
            return [str(bright_base + index - 8)]
        if self.kind == "fixed":
            return [extended, "5", str(self.value)]
        r, g, b = self.value  # type: ignore[misc]
        return [extended, "2", str(r), str(g), str(b)]

    def fg_codes(self) -> list[str]:
        return self._codes(30, 90, "38")

    def bg_codes(self) -> list[str]:
        return self._codes(40, 100, "48")


@dataclass(frozen=True)
class Style:
    """Foreground, background, and text attributes for one painted span."""

    foreground: Colour | None = None
    background: Colour | None = None
    bold: bool = False
    dimmed: bool = False
    italic: bool = False
    underline: bool = False
    blink: bool = False
    reverse: bool = False
    hidden: bool = False
    strikethrough: bool = False

    def fg(self, colour: Colour) -> "Style":
        return replace(self, foreground=colour)

    def on(self, colour: Colour) -> "Style":
        return replace(self, background=colour)

    @property
    def is_plain(self) -> bool:
        return self == Style()

    def sgr_params(self) -> list[str]:
        """Return SGR parameters: attributes, then background, then foreground."""
        params = [code for name, code in _ATTRIBUTE_CODES if getattr(self, name)]
        if self.background is not None:
            params.extend(self.background.bg_codes())
        if self.foreground is not None:
            params.extend(self.foreground.fg_codes())
        return params

    def prefix(self) -> str:
        params = self.sgr_params()
        if not params:
            return ""
        return "\033[" + ";".join(params) + "m"

    def suffix(self) -> str:
        return "" if self.is_plain else RESET

    def paint(self, text: str) -> "StyledText":
        return StyledText(text, self)

    @classmethod
    def from_sgr(cls, value: str) -> "Style":
        """Parse an SGR parameter string such as ``01;34`` or ``38;5;208``.

        ``0`` resets everything parsed so far. ``39``/``49`` clear the
        foreground/background. Unknown numeric codes are skipped; non-numeric
        tokens and truncated extended colours raise :class:`StyleParseError`.
        """
        fields: dict[str, object] = {}
        tokens = [token.strip() for token in value.strip().split(";")]
        if tokens == [""]:
            return cls()
        i = 0
        n = len(tokens)
        while i < n:
            token = tokens[i]
            if not token:
                i += 1
                continue
            if not (token.isascii() and token.isdigit()):
                raise StyleParseError(f"invalid SGR parameter {token!r} in {value!r}")
            code = int(token)
            if code == 0:
                fields.clear()
            elif token.lstrip("0") in _ATTRIBUTE_BY_CODE:
                fields[_ATTRIBUTE_BY_CODE[token.lstrip("0")]] = True
            elif 30 <= code <= 37:
                fields["foreground"] = Colour.basic(code - 30)
            elif 90 <= code <= 97:
                fields["foreground"] = Colour.basic(code - 90 + 8)
            elif 40 <= code <= 47:
                fields["background"] = Colour.basic(code - 40)
            elif 100 <= code <= 107:
                fields["background"] = Colour.basic(code - 100 + 8)
            elif code == 39:
                fields.pop("foreground", None)
            elif code == 49:
                fields.pop("background", None)
            elif code in (38, 48):
                colour, i = _parse_extended_colour(tokens, i, value)
                fields["foreground" if code == 38 else "background"] = colour
                continue
            i += 1
        return cls(**fields)  # type: ignore[arg-type]


def _parse_extended_colour(tokens: list[str], i: int, value: str) -> tuple[Colour, int]:
    """Parse ``38;5;N`` / ``38;2;R;G;B`` starting at ``tokens[i]``.

    Returns the colour and the index of the first token after it.
    """
    try:
        mode = tokens[i + 1]
        if mode == "5":
            return Colour.fixed(int(tokens[i + 2])), i + 3
        if mode == "2":
            r, g, b = (int(tokens[i + k]) for k in (2, 3, 4))
            return Colour.rgb(r, g, b), i + 5
    except (IndexError, ValueError) as exc:
        raise StyleParseError(f"malformed extended colour in {value!r}") from exc
    raise StyleParseError(f"unsupported extended colour mode in {value!r}")


@dataclass(frozen=True)
class StyledText:
    """Text paired with the style that paints it.

    ``str()`` renders the escape sequences; a plain style renders the text
    unchanged.
    """

    text: str
    style: Style = Style()

    def __str__(self) -> str:
        return f"{self.style.prefix()}{self.text}{self.style.suffix()}"


__all__ = [
    "RESET",
    "Colour",
    "Style",
    "StyledText",
    "StyleParseError",
]
