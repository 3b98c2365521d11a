"""Web Mercator projection: WGS84 lon/lat -> pixel space.

The two pure functions here hold the Mercator math; :class:`Projection` is
the simple translate + scale projector without rotation.
"""

import math

from .constants import DEFAULT_K, DEFAULT_LIMITS, DEG2RAD, HALF_PI, RAD2DEG, ProjectionLimits
from .number import clamp
from .vector import Vec2


def lonlat_to_mercator(loc: Vec2,
                       limits: ProjectionLimits = DEFAULT_LIMITS) -> Vec2:
    """Return unscaled Mercator ``(x, y)`` in radians.  Y grows northward."""
    lam = loc[0] * DEG2RAD
    phi = clamp(loc[1] * DEG2RAD, limits.min_phi, limits.max_phi)
    return (lam, math.log(math.tan((HALF_PI + phi) / 2.0)))


def mercator_to_lonlat(merc: Vec2,
                       limits: ProjectionLimits = DEFAULT_LIMITS) -> Vec2:
    """Inverse of :func:`lonlat_to_mercator`, returning ``(lon, lat)`` degrees."""
    merc_y = clamp(merc[1], -limits.max_merc_y, limits.max_merc_y)
    phi = 2.0 * math.atan(math.exp(merc_y)) - HALF_PI
    return (merc[0] * RAD2DEG, phi * RAD2DEG)


class Projection:
    """Projects lon/lat to screen pixels with a translation and a scale.

    Screen Y grows downward, so northern latitudes map to smaller Y.
    """

    def __init__(self, x: float = 0.0, y: float = 0.0, k: float = DEFAULT_K,
                 limits: ProjectionLimits = DEFAULT_LIMITS):
        self._limits = limits
        self._x = float(x)
        self._y = float(y)
        self._k = self._clamp_k(k)
        self._dimensions: tuple[Vec2, Vec2] = ((0.0, 0.0), (0.0, 0.0))

    def _clamp_k(self, k: float) -> float:
        # a zero scale would make invert() divide by zero
        return clamp(float(k), self._limits.min_k, self._limits.max_k)

    def project(self, loc: Vec2) -> Vec2:
        """Return screen ``(x, y)`` for ``(lon, lat)``."""
        mx, my = lonlat_to_mercator(loc, self._limits)
        return (mx * self._k + self._x, self._y - my * self._k)

    def invert(self, point: Vec2) -> Vec2:
        """Return ``(lon, lat)`` for screen ``(x, y)``."""
        mx = (point[0] - self._x) / self._k
        my = (self._y - point[1]) / self._k
        return mercator_to_lonlat((mx, my), self._limits)

    def get_translation(self) -> Vec2:
        return (self._x, self._y)

    def set_translation(self, val: Vec2) -> "Projection":
        self._x = float(val[0])
        self._y = float(val[1])
        return self

    def get_scale(self) -> float:
        return self._k

    def set_scale(self, k: float) -> "Projection":
        self._k = self._clamp_k(k)
        return self

    def get_transform(self) -> dict[str, float]:
        return {"x": self._x, "y": self._y, "k": self._k}

    def set_transform(self, x: float, y: float, k: float) -> "Projection":
        self._x = float(x)
        self._y = float(y)
        self._k = self._clamp_k(k)
        return self

    def get_dimensions(self) -> tuple[Vec2, Vec2]:
        """Viewport ``(min, max)`` corners."""
        return self._dimensions

    def set_dimensions(self, val: tuple[Vec2, Vec2]) -> "Projection":
        lo, hi = val
        self._dimensions = ((float(lo[0]), float(lo[1])),
                            (float(hi[0]), float(hi[1])))
        return self
