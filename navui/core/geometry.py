"""
Geometry helpers shared by the element tree and presets.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation from a to b."""
    return a + (b - a) * t


def clamp(value: float, low: float, high: float) -> float:
    """Clamp value into [low, high]."""
    return max(low, min(value, high))


def sign(value: float) -> int:
    """Sign of value as -1, 0 or 1."""
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


@dataclass
class Rect:
    """Axis-aligned rectangle (half-open on the right and bottom edges)."""
    x: float = 0
    y: float = 0
    width: float = 0
    height: float = 0

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> tuple[float, float]:
        return (self.x + self.width / 2, self.y + self.height / 2)

    def contains(self, px: float, py: float) -> bool:
        """Check if point is inside rect."""
        return (self.x <= px < self.x + self.width and
                self.y <= py < self.y + self.height)

    def contains_rect(self, other: 'Rect') -> bool:
        """Check if another rect lies entirely inside this one."""
        return (self.x <= other.x and self.y <= other.y and
                other.right <= self.right and other.bottom <= self.bottom)

    def intersects_bounds(
        self,
        left: float,
        top: float,
        right: float,
        bottom: float,
    ) -> bool:
        """
        Check overlap with a clip region given by its edges.

        Edges may be infinite, so the region is not stored as a Rect.
        """
        return (self.x < right and left < self.right and
                self.y < bottom and top < self.bottom)

    def distance_to_point(self, px: float, py: float) -> float:
        """Distance from point to the closest point of the rect (0 inside)."""
        dx = max(self.x - px, 0.0, px - self.right)
        dy = max(self.y - py, 0.0, py - self.bottom)
        return math.hypot(dx, dy)
