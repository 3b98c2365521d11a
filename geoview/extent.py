"""Axis-aligned bounding box, usable in geographic or screen space."""

import math

from shapely.geometry import Polygon, box

from .vector import Vec2


class Extent:
    """Bounding box stored as its ``min`` and ``max`` corners.

    An extent built with no arguments is empty (``min`` at +inf, ``max`` at
    -inf) and grows as points are added with :meth:`extend_self`.
    """

    def __init__(self, min: Vec2 | None = None, max: Vec2 | None = None):
        if min is None:
            min = (math.inf, math.inf)
        if max is None:
            max = min if min[0] != math.inf else (-math.inf, -math.inf)
        self.min: Vec2 = (float(min[0]), float(min[1]))
        self.max: Vec2 = (float(max[0]), float(max[1]))

    def __repr__(self) -> str:
        return f"Extent(min={self.min}, max={self.max})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Extent):
            return NotImplemented
        return self.min == other.min and self.max == other.max

    def is_empty(self) -> bool:
        return self.min[0] > self.max[0] or self.min[1] > self.max[1]

    def extend_self(self, other: "Extent | Vec2") -> "Extent":
        """Grow this extent in place to include a point or another extent."""
        if isinstance(other, Extent):
            lo, hi = other.min, other.max
        else:
            lo = hi = (float(other[0]), float(other[1]))
        self.min = (min(self.min[0], lo[0]), min(self.min[1], lo[1]))
        self.max = (max(self.max[0], hi[0]), max(self.max[1], hi[1]))
        return self

    def extend(self, other: "Extent | Vec2") -> "Extent":
        """Return a new extent covering this one and ``other``."""
        return Extent(self.min, self.max).extend_self(other)

    def contains(self, point: Vec2) -> bool:
        return (self.min[0] <= point[0] <= self.max[0]
                and self.min[1] <= point[1] <= self.max[1])

    def center(self) -> Vec2:
        return ((self.min[0] + self.max[0]) / 2.0,
                (self.min[1] + self.max[1]) / 2.0)

    def size(self) -> Vec2:
        if self.is_empty():
            return (0.0, 0.0)
        return (self.max[0] - self.min[0], self.max[1] - self.min[1])

    def bbox(self) -> dict[str, float]:
        return {
            "min_x": self.min[0],
            "min_y": self.min[1],
            "max_x": self.max[0],
            "max_y": self.max[1],
        }

    def polygon(self) -> list[Vec2]:
        """Closed ring around the box."""
        return [
            self.min,
            (self.min[0], self.max[1]),
            self.max,
            (self.max[0], self.min[1]),
            self.min,
        ]

    def to_polygon(self) -> Polygon:
        """The box as a shapely polygon (empty if the extent is empty)."""
        if self.is_empty():
            return Polygon()
        return box(self.min[0], self.min[1], self.max[0], self.max[1])
