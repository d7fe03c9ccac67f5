"""Built-in SGR (Select Graphic Rendition) styles, and helpers for truecolor."""

from __future__ import annotations

import dataclasses
import math
import re
from typing import Any, Callable, Dict, Tuple, Union

from typing_extensions import Literal

from ._errors import InvalidColorFormat

ESC = "\x1b["
"""Control sequence introducer. SGR sequences are `ESC + params + "m"`."""


def code(n: int) -> str:
    """Build an SGR sequence from a single parameter. `code(31)` is red."""
    return f"{ESC}{n}m"


FG_BASE = 30  # 30-37
BG_BASE = 40  # 40-47
FG_BRIGHT_BASE = 90  # 90-97
BG_BRIGHT_BASE = 100  # 100-107

FG_CLOSE = code(39)
BG_CLOSE = code(49)

BASE_COLORS: Tuple[str, ...] = (
    "black",
    "red",
    "green",
    "yellow",
    "blue",
    "magenta",
    "cyan",
    "white",
)


@dataclasses.dataclass(frozen=True)
class Style:
    """A pair of escape sequences that open and close one visual effect."""

    open: str
    close: str


StyleFactory = Callable[..., Style]
"""Function that builds a style from runtime arguments, like `rgb(255, 0, 0)`."""

_modifier_codes: Dict[str, Tuple[int, int]] = {
    "reset": (0, 0),
    "bold": (1, 22),
    "dim": (2, 22),
    "italic": (3, 23),
    "underline": (4, 24),
    "inverse": (7, 27),
    "hidden": (8, 28),
    "strikethrough": (9, 29),
}


def _capitalize(s: str) -> str:
    return s[:1].upper() + s[1:]


def builtin_styles() -> Dict[str, Style]:
    """Return a new dictionary with the modifiers, the 8 base colors with their
    bright and background variants, and the gray/grey aliases."""
    styles = {
        name: Style(code(open_code), code(close_code))
        for name, (open_code, close_code) in _modifier_codes.items()
    }
    for i, name in enumerate(BASE_COLORS):
        styles[name] = Style(code(FG_BASE + i), FG_CLOSE)
        styles[f"{name}Bright"] = Style(code(FG_BRIGHT_BASE + i), FG_CLOSE)
        styles[f"bg{_capitalize(name)}"] = Style(code(BG_BASE + i), BG_CLOSE)
        styles[f"bg{_capitalize(name)}Bright"] = Style(
            code(BG_BRIGHT_BASE + i), BG_CLOSE
        )

    # Bright black.
    styles["gray"] = styles["grey"] = Style(code(FG_BRIGHT_BASE), FG_CLOSE)
    styles["bgGray"] = styles["bgGrey"] = Style(code(BG_BRIGHT_BASE), BG_CLOSE)
    return styles


def clamp255(n: Any) -> int:
    """Clamp a value into the 0..255 byte range, flooring decimals. Values that
    can't be read as a number (and NaN) become 0."""
    try:
        x = float(n)
    except (TypeError, ValueError):
        return 0
    except OverflowError:
        # Integers too large for a float.
        return 255 if n > 0 else 0
    if math.isnan(x):
        return 0
    # Clamp before flooring; math.floor() rejects infinities.
    return math.floor(min(255.0, max(0.0, x)))


ColorKind = Literal["fg", "bg"]
_selector_from_kind: Dict[Union[ColorKind, int], int] = {
    "fg": 38,
    "bg": 48,
    38: 38,
    48: 48,
}


def truecolor(
    kind: Union[ColorKind, Literal[38, 48]], r: Any, g: Any, b: Any
) -> Style:
    """Build a 24-bit color style. `kind` selects the foreground (`"fg"` or 38) or
    background (`"bg"` or 48) channel; each component is passed through `clamp255()`.

    The close sequence only resets the selected channel."""
    selector = _selector_from_kind[kind]
    open = f"{ESC}{selector};2;{clamp255(r)};{clamp255(g)};{clamp255(b)}m"
    return Style(open, FG_CLOSE if selector == 38 else BG_CLOSE)


_HEX_DIGITS = re.compile(r"[0-9a-fA-F]+")


def parse_hex(value: str) -> Tuple[int, int, int]:
    """Parse `#RGB` or `#RRGGBB` (the `#` is optional) into an `(r, g, b)` tuple.

    Raises:
        InvalidColorFormat: If the input isn't 3 or 6 hexadecimal digits.
    """
    if not isinstance(value, str):
        raise InvalidColorFormat(value)
    h = value.strip()
    if h.startswith("#"):
        h = h[1:]
    if len(h) == 3:
        h = "".join(c * 2 for c in h)
    if len(h) != 6 or _HEX_DIGITS.fullmatch(h) is None:
        raise InvalidColorFormat(value)
    return (int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16))


def _rgb(r: Any, g: Any, b: Any) -> Style:
    return truecolor("fg", r, g, b)


def _bg_rgb(r: Any, g: Any, b: Any) -> Style:
    return truecolor("bg", r, g, b)


def _hex(value: str) -> Style:
    return truecolor("fg", *parse_hex(value))


def _bg_hex(value: str) -> Style:
    return truecolor("bg", *parse_hex(value))


def builtin_dynamics() -> Dict[str, StyleFactory]:
    """Return a new dictionary with the truecolor factories."""
    return {
        "rgb": _rgb,
        "bgRgb": _bg_rgb,
        "hex": _hex,
        "bgHex": _bg_hex,
    }
