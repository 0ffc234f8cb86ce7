"""Real-valued geometric types: points, dimensions and rectangles."""

from __future__ import annotations

import struct
from dataclasses import dataclass

_HASH_MASK = 0x7FFFFFFF


def real_to_string(value: float) -> str:
    """Format a real number the way a default-precision stream does (%g)."""
    return f"{float(value):g}"


@dataclass(frozen=True)
class GPoint:
    """A location on the graphics plane."""

    x: float = 0.0
    y: float = 0.0

    def __str__(self) -> str:
        return f"({real_to_string(self.x)}, {real_to_string(self.y)})"


@dataclass(frozen=True)
class GDimension:
    """The size of a graphical object."""

    width: float = 0.0
    height: float = 0.0

    def __str__(self) -> str:
        return f"({real_to_string(self.width)}, {real_to_string(self.height)})"


@dataclass(frozen=True)
class GRectangle:
    """The bounding box of a graphical object."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def is_empty(self) -> bool:
        """Return True if the rectangle has no area."""
        return self.width <= 0 or self.height <= 0

    def contains(self, x: float, y: float) -> bool:
        """Return True if (x, y) lies inside the half-open rectangle."""
        return (
            x >= self.x
            and y >= self.y
            and x < self.x + self.width
            and y < self.y + self.height
        )

    def contains_point(self, pt: GPoint) -> bool:
        """Return True if the point lies inside the rectangle."""
        return self.contains(pt.x, pt.y)

    def __str__(self) -> str:
        parts = (self.x, self.y, self.width, self.height)
        return "(" + ", ".join(real_to_string(v) for v in parts) + ")"


def _words(value: float) -> tuple[int, ...]:
    return struct.unpack("<2I", struct.pack("<d", float(value)))


def _xor_words(*values: float) -> int:
    result = 0
    for value in values:
        for word in _words(value):
            result ^= word
    return result & _HASH_MASK


def hash_code(obj: GPoint | GDimension | GRectangle) -> int:
    """Return a nonnegative hash built by xor-ing the words of each field."""
    if isinstance(obj, GPoint):
        return _xor_words(obj.x, obj.y)
    if isinstance(obj, GDimension):
        return _xor_words(obj.width, obj.height)
    if isinstance(obj, GRectangle):
        return _xor_words(obj.x, obj.y, obj.width, obj.height)
    raise TypeError(f"hash_code: unsupported type {type(obj).__name__}")