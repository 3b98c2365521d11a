"""2-D point helpers.  Points are plain ``(x, y)`` tuples."""

import math

Vec2 = tuple[float, float]


def vec_rotate(point: Vec2, angle: float, around: Vec2) -> Vec2:
    """Rotate ``point`` about ``around`` by ``angle`` radians.

    On a y-down screen a positive angle turns clockwise.
    """
    x = point[0] - around[0]
    y = point[1] - around[1]
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    return (x * cos_a - y * sin_a + around[0],
            x * sin_a + y * cos_a + around[1])


def vec_scale(point: Vec2, factor: float) -> Vec2:
    return (point[0] * factor, point[1] * factor)


def vec_subtract(a: Vec2, b: Vec2) -> Vec2:
    return (a[0] - b[0], a[1] - b[1])


def vec_ceil(point: Vec2) -> Vec2:
    """Round both components up to whole numbers (kept as floats)."""
    return (float(math.ceil(point[0])), float(math.ceil(point[1])))
