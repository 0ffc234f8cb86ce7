"""An integer-valued x-y coordinate point."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A point on a two-dimensional integer grid."""

    x: int = 0
    y: int = 0

    def __str__(self) -> str:
        return f"({self.x},{self.y})"