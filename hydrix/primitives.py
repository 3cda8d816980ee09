"""Small geometric and colour value types and a stretchable bitmap."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Point:
    """Integer position."""

    x: int = 0
    y: int = 0


@dataclass
class FPoint:
    """Floating point position."""

    x: float = 0.0
    y: float = 0.0


@dataclass
class Rect:
    """Integer rectangle: position and extent."""

    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0


@dataclass
class FRect:
    """Floating point rectangle: position and extent."""

    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    h: float = 0.0


@dataclass
class Size:
    """Integer width and height."""

    w: int = 0
    h: int = 0


@dataclass
class FSize:
    """Floating point width and height."""

    w: float = 0.0
    h: float = 0.0


def _check_channels(color: object, names: tuple[str, ...]) -> None:
    for name in names:
        value = getattr(color, name)
        if not 0 <= value <= 255:
            raise ValueError(f"{name} channel {value} is outside 0..255")


@dataclass(frozen=True)
class Color:
    """An 8-bit per channel RGB colour."""

    r: int = 0
    g: int = 0
    b: int = 0

    def __post_init__(self) -> None:
        _check_channels(self, ("r", "g", "b"))


@dataclass(frozen=True)
class ColorA:
    """An 8-bit per channel RGBA colour."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 0

    def __post_init__(self) -> None:
        _check_channels(self, ("r", "g", "b", "a"))


@dataclass
class Bitmap:
    """Row-major pixel values with a width and height."""

    data: list[int] = field(default_factory=list)
    width: int = 0
    height: int = 0

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("bitmap dimensions must not be negative")
        self.data = list(self.data)
        if len(self.data) != self.width * self.height:
            raise ValueError(
                f"bitmap holds {len(self.data)} pixels, "
                f"expected {self.width * self.height}"
            )

    def stretch(self, width: int, height: int) -> Bitmap:
        """A new bitmap of the given size, sampled by nearest pixel."""
        if width < 0 or height < 0:
            raise ValueError("target dimensions must not be negative")
        if width * height and not (self.width and self.height):
            raise ValueError("cannot stretch an empty bitmap to a non-empty size")
        pixels = [
            self.data[(y * self.height // height) * self.width + x * self.width // width]
            for y in range(height)
            for x in range(width)
        ]
        return Bitmap(pixels, width, height)