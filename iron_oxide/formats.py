"""Colour value types: 8-bit RGB and RGBA, and floating-point Color."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


def _check_byte(name: str, value: int) -> None:
    if not isinstance(value, int) or not 0 <= value <= 255:
        raise ValueError(f"{name} must be an integer in 0..255, got {value!r}")


@dataclass(frozen=True)
class Color:
    """A colour with float components, usually in 0.0..1.0."""

    r: float
    g: float
    b: float
    a: float

    ZERO: ClassVar[Color]
    BLACK: ClassVar[Color]
    GREY: ClassVar[Color]
    DARKGREY: ClassVar[Color]
    WHITE: ClassVar[Color]
    GREEN: ClassVar[Color]
    BLUE: ClassVar[Color]
    RED: ClassVar[Color]
    PURPLE: ClassVar[Color]
    PINK: ClassVar[Color]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return (self.r, self.g, self.b, self.a) < (other.r, other.g, other.b, other.a)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return (self.r, self.g, self.b, self.a) <= (other.r, other.g, other.b, other.a)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return (self.r, self.g, self.b, self.a) > (other.r, other.g, other.b, other.a)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return (self.r, self.g, self.b, self.a) >= (other.r, other.g, other.b, other.a)

    @classmethod
    def rgb(cls, r: int, g: int, b: int) -> Color:
        """Build an opaque colour from 8-bit components."""
        for name, value in (("r", r), ("g", g), ("b", b)):
            _check_byte(name, value)
        return cls(r / 255.0, g / 255.0, b / 255.0, 1.0)

    @classmethod
    def rgba(cls, r: int, g: int, b: int, a: int) -> Color:
        """Build a colour from 8-bit components including alpha."""
        for name, value in (("r", r), ("g", g), ("b", b), ("a", a)):
            _check_byte(name, value)
        return cls(r / 255.0, g / 255.0, b / 255.0, a / 255.0)


@dataclass(frozen=True)
class RGB:
    """An 8-bit-per-channel colour without alpha."""

    r: int
    g: int
    b: int

    ZERO: ClassVar[RGB]
    BLACK: ClassVar[RGB]
    GREY: ClassVar[RGB]
    WHITE: ClassVar[RGB]
    GREEN: ClassVar[RGB]
    BLUE: ClassVar[RGB]
    RED: ClassVar[RGB]
    PURPLE: ClassVar[RGB]
    PINK: ClassVar[RGB]

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            _check_byte(name, getattr(self, name))

    def as_color(self) -> Color:
        return Color.rgb(self.r, self.g, self.b)


@dataclass(frozen=True)
class RGBA:
    """An 8-bit-per-channel colour with alpha."""

    r: int
    g: int
    b: int
    a: int

    ZERO: ClassVar[RGBA]
    BLACK: ClassVar[RGBA]
    GREY: ClassVar[RGBA]
    WHITE: ClassVar[RGBA]
    GREEN: ClassVar[RGBA]
    BLUE: ClassVar[RGBA]
    RED: ClassVar[RGBA]
    PURPLE: ClassVar[RGBA]
    PINK: ClassVar[RGBA]
    DARKGREY: ClassVar[RGBA]
    LIGHTGREY: ClassVar[RGBA]
    TRANSPARENT: ClassVar[RGBA]

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            _check_byte(name, getattr(self, name))

    def as_color(self) -> Color:
        return Color.rgba(self.r, self.g, self.b, self.a)

    def as_u32(self) -> int:
        """Pack the channels little-endian: r in the lowest byte, a in the highest."""
        return int.from_bytes(bytes((self.r, self.g, self.b, self.a)), "little")

    def to_rgb(self) -> RGB:
        return RGB(self.r, self.g, self.b)


RGB.ZERO = RGB(0, 0, 0)
RGB.BLACK = RGB(0, 0, 0)
RGB.GREY = RGB(10, 100, 100)
RGB.WHITE = RGB(255, 255, 255)
RGB.GREEN = RGB(0, 120, 20)
RGB.BLUE = RGB(0, 10, 150)
RGB.RED = RGB(255, 0, 0)
RGB.PURPLE = RGB(255, 0, 255)
RGB.PINK = RGB(255, 150, 150)

RGBA.ZERO = RGBA(0, 0, 0, 0)
RGBA.BLACK = RGBA(0, 0, 0, 255)
RGBA.GREY = RGBA(80, 80, 80, 255)
RGBA.WHITE = RGBA(255, 255, 255, 255)
RGBA.GREEN = RGBA(0, 120, 20, 255)
RGBA.BLUE = RGBA(0, 0, 255, 255)
RGBA.RED = RGBA(255, 0, 0, 255)
RGBA.PURPLE = RGBA(255, 0, 255, 255)
RGBA.PINK = RGBA(255, 150, 150, 255)
RGBA.DARKGREY = RGBA(8, 8, 8, 255)
RGBA.LIGHTGREY = RGBA(175, 175, 175, 255)
RGBA.TRANSPARENT = RGBA(0, 0, 0, 0)

Color.ZERO = Color(0.0, 0.0, 0.0, 0.0)
Color.BLACK = Color(0.0, 0.0, 0.0, 1.0)
Color.GREY = Color(0.05, 0.4, 0.4, 1.0)
Color.DARKGREY = Color(0.05, 0.05, 0.05, 1.0)
Color.WHITE = Color(1.0, 1.0, 1.0, 1.0)
Color.GREEN = Color(0.0, 0.5, 0.03, 1.0)
Color.BLUE = Color(0.0, 0.0, 1.0, 1.0)
Color.RED = Color(1.0, 0.0, 0.0, 1.0)
Color.PURPLE = Color(1.0, 0.0, 1.0, 1.0)
Color.PINK = Color(1.0, 0.6, 0.6, 1.0)