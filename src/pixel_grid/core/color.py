"""Color representation for grid cells."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import ClassVar


NAMED_COLORS: dict[str, tuple[int, int, int]] = {
    "black": (0, 0, 0),
    "white": (255, 255, 255),
    "red": (255, 0, 0),
    "green": (0, 255, 0),
    "blue": (0, 0, 255),
    "magenta": (255, 0, 255),
    "cyan": (0, 255, 255),
    "yellow": (255, 255, 0),
}

_FUNC_PATTERN = re.compile(
    r'rgba?\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*(?:,\s*([\d.]+)\s*)?\)'
)
_TRIPLE_PATTERN = re.compile(r'(\d+)[,\s]+(\d+)[,\s]+(\d+)')
_HEX_DIGITS = set("0123456789abcdef")


@dataclass(frozen=True, slots=True)
class Color:
    """
    An RGBA cell color with 0-255 channels.

    Fully transparent colors collapse to a single value, ``Color.EMPTY``:
    any color built with ``a == 0`` has its RGB channels zeroed, so two
    unset cells always compare equal no matter how they were produced.
    """
    r: int
    g: int
    b: int
    a: int = 255

    EMPTY: ClassVar["Color"]
    BLACK: ClassVar["Color"]
    WHITE: ClassVar["Color"]
    RED: ClassVar["Color"]
    GREEN: ClassVar["Color"]
    BLUE: ClassVar["Color"]

    def __post_init__(self) -> None:
        channels = (self.r, self.g, self.b, self.a)
        if not all(isinstance(c, int) and 0 <= c <= 255 for c in channels):
            raise ValueError(f"RGBA values must be integers 0-255, got {channels}")
        if self.a == 0:
            object.__setattr__(self, "r", 0)
            object.__setattr__(self, "g", 0)
            object.__setattr__(self, "b", 0)

    @property
    def is_empty(self) -> bool:
        return self.a == 0

    @property
    def rgb(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    @property
    def rgba(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)

    @property
    def alpha(self) -> float:
        """Alpha as a 0.0-1.0 fraction."""
        return self.a / 255

    @property
    def hex(self) -> str:
        """Canonical text form: ``#rrggbb`` if opaque, else ``#rrggbbaa``."""
        if self.is_empty:
            return "transparent"
        code = f"#{self.r:02x}{self.g:02x}{self.b:02x}"
        if self.a != 255:
            code += f"{self.a:02x}"
        return code

    @property
    def css(self) -> str:
        if self.is_empty:
            return "transparent"
        return f"rgba({self.r}, {self.g}, {self.b}, {round(self.alpha, 4):g})"

    def __str__(self) -> str:
        return self.hex

    @classmethod
    def from_rgba(cls, r: int, g: int, b: int, a: int = 255) -> Color:
        """Create a Color from 0-255 channels."""
        return cls(r, g, b, a)

    @classmethod
    def from_css_alpha(cls, r: int, g: int, b: int, alpha: float) -> Color:
        """Create a Color whose alpha is given as a 0.0-1.0 fraction."""
        if not 0.0 <= alpha <= 1.0:
            raise ValueError(f"Alpha must be 0.0-1.0, got {alpha}")
        # Halves round up
        return cls(r, g, b, math.floor(alpha * 255 + 0.5))

    @classmethod
    def parse(cls, text: str) -> Color:
        """Parse a color string.

        Accepts:
            - "transparent"
            - Named colors: "black", "white", "red", "green", "blue", ...
            - Hex colors: "#FF00FF", "FF00FF", "#F0F", "#FF00FF80"
            - CSS functions: "rgb(255, 0, 255)", "rgba(255, 0, 255, 0.5)"
            - RGB triples: "255,0,255" or "255 0 255"
        """
        value = text.strip().lower()

        if value == "transparent":
            return cls.EMPTY

        if value in NAMED_COLORS:
            return cls(*NAMED_COLORS[value])

        match = _FUNC_PATTERN.fullmatch(value)
        if match:
            r, g, b, alpha = match.groups()
            if alpha is None:
                return cls(int(r), int(g), int(b))
            return cls.from_css_alpha(int(r), int(g), int(b), float(alpha))

        digits = value[1:] if value.startswith("#") else value
        if digits and set(digits) <= _HEX_DIGITS:
            if len(digits) == 3:
                # Short form: F0F -> FF00FF
                digits = "".join(ch * 2 for ch in digits)
            if len(digits) in (6, 8):
                channels = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
                return cls(*channels)

        match = _TRIPLE_PATTERN.fullmatch(value)
        if match:
            return cls(*(int(group) for group in match.groups()))

        raise ValueError(f"Cannot parse color: {text!r}")

    @classmethod
    def coerce(cls, value: Color | str | tuple[int, ...]) -> Color:
        """Accept a Color, a color string, or an RGB/RGBA tuple."""
        if isinstance(value, Color):
            return value
        if isinstance(value, str):
            return cls.parse(value)
        return cls(*value)


Color.EMPTY = Color(0, 0, 0, 0)
Color.BLACK = Color(0, 0, 0)
Color.WHITE = Color(255, 255, 255)
Color.RED = Color(255, 0, 0)
Color.GREEN = Color(0, 255, 0)
Color.BLUE = Color(0, 0, 255)

EMPTY = Color.EMPTY
