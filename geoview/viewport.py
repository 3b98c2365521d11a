"""Viewport state and rotation-aware lon/lat <-> screen conversion.

Geographic data is WGS84 ``(lon, lat)`` and is projected into screen space
``(x, y)`` with Web Mercator.  A :class:`Transform` holds the parameters:

    x, y  translation from the top-left Mercator coordinate to the top-left
          screen coordinate, in pixels
    k     scale, how many pixels the world spans per radian of longitude
    r     rotation in radians, applied after projection to turn the map
          away from north-up

The screen itself is the rectangle ``[0, w] x [0, h]`` with the origin at the
top-left.  When the map is rotated, the region that has to be drawn to fill
the screen is a larger rectangle tilted by ``r`` around the screen; see
:meth:`Viewport.visible_polygon`.
"""

import logging
import math
from collections.abc import Mapping
from dataclasses import asdict, dataclass, replace

from .constants import DEFAULT_K, DEFAULT_LIMITS, TAU, ProjectionLimits
from .extent import Extent
from .geo import scale_to_zoom, zoom_to_scale
from .number import clamp, wrap
from .projection import lonlat_to_mercator, mercator_to_lonlat
from .vector import Vec2, vec_ceil, vec_rotate, vec_scale

logger = logging.getLogger(__name__)

TRANSFORM_FIELDS = ("x", "y", "k", "r")


@dataclass
class Transform:
    x: float = 0.0
    y: float = 0.0
    k: float = DEFAULT_K
    r: float = 0.0

    @classmethod
    def from_mapping(cls, obj: Mapping) -> "Transform":
        """Build a transform from a dict with any subset of x/y/k/r.

        Missing keys take the defaults.
        """
        return cls(**{name: float(obj[name]) for name in TRANSFORM_FIELDS
                      if obj.get(name) is not None})

    def as_dict(self) -> dict[str, float]:
        return asdict(self)


class Viewport:
    """The state of a map view: one :class:`Transform` and the screen size.

    Out-of-range input is corrected rather than rejected: the scale is
    clamped to the zoom bounds of ``limits`` and the rotation is wrapped to
    ``[0, TAU)``, so the projection is defined for every finite input.

    Setters return the viewport, so calls chain::

        view = Viewport().set_dimensions((800, 600)).set_rotation(math.pi / 4)
    """

    def __init__(self, transform: Transform | None = None,
                 dimensions: Vec2 | None = None,
                 limits: ProjectionLimits = DEFAULT_LIMITS):
        self._limits = limits
        t = transform if transform is not None else Transform()
        self._transform = Transform(
            x=float(t.x),
            y=float(t.y),
            k=self._clamp_scale(t.k),
            r=self._wrap_rotation(t.r),
        )
        self._dimensions: Vec2 = (0.0, 0.0)
        if dimensions is not None:
            self.set_dimensions(dimensions)

    def __repr__(self) -> str:
        return f"Viewport(transform={self._transform!r}, dimensions={self._dimensions!r})"

    @property
    def limits(self) -> ProjectionLimits:
        return self._limits

    def _clamp_scale(self, k: float) -> float:
        k = float(k)
        clamped = clamp(k, self._limits.min_k, self._limits.max_k)
        if clamped != k:
            logger.debug("scale %r clamped to %r", k, clamped)
        return clamped

    def _wrap_rotation(self, r: float) -> float:
        r = float(r)
        wrapped = wrap(r, 0.0, TAU)
        if wrapped != r:
            logger.debug("rotation %r wrapped to %r", r, wrapped)
        return wrapped

    # -- projection -------------------------------------------------------

    def project(self, loc: Vec2, include_rotation: bool = False) -> Vec2:
        """Project ``(lon, lat)`` to screen ``(x, y)``.

        Latitude is clamped just short of the poles.  With
        ``include_rotation`` the point is also turned by ``r`` about the
        screen center.
        """
        t = self._transform
        mx, my = lonlat_to_mercator(loc, self._limits)
        point = (mx * t.k + t.x, t.y - my * t.k)

        if include_rotation and t.r:
            return vec_rotate(point, t.r, self.center())
        return point

    def unproject(self, point: Vec2, include_rotation: bool = False) -> Vec2:
        """Inverse of :meth:`project`, returning ``(lon, lat)``."""
        t = self._transform

        if include_rotation and t.r:
            point = vec_rotate(point, -t.r, self.center())

        mx = (point[0] - t.x) / t.k
        my = (t.y - point[1]) / t.k
        return mercator_to_lonlat((mx, my), self._limits)

    # -- accessors --------------------------------------------------------

    def get_translation(self) -> Vec2:
        return (self._transform.x, self._transform.y)

    def set_translation(self, val: Vec2) -> "Viewport":
        self._transform.x = float(val[0])
        self._transform.y = float(val[1])
        return self

    def get_scale(self) -> float:
        return self._transform.k

    def set_scale(self, k: float) -> "Viewport":
        self._transform.k = self._clamp_scale(k)
        return self

    def get_rotation(self) -> float:
        """Rotation in radians, clockwise; 0 is north-up."""
        return self._transform.r

    def set_rotation(self, r: float) -> "Viewport":
        self._transform.r = self._wrap_rotation(r)
        return self

    def get_transform(self) -> Transform:
        """A copy of the current transform."""
        return replace(self._transform)

    def set_transform(self, x: float | None = None, y: float | None = None,
                      k: float | None = None,
                      r: float | None = None) -> "Viewport":
        """Update only the fields given; the rest are left as they are."""
        if x is not None:
            self._transform.x = float(x)
        if y is not None:
            self._transform.y = float(y)
        if k is not None:
            self._transform.k = self._clamp_scale(k)
        if r is not None:
            self._transform.r = self._wrap_rotation(r)
        return self

    def get_dimensions(self) -> Vec2:
        return self._dimensions

    def set_dimensions(self, val: Vec2) -> "Viewport":
        """Set the screen size; both sides are rounded up to whole pixels."""
        self._dimensions = vec_ceil((float(val[0]), float(val[1])))
        return self

    def zoom(self) -> float:
        return scale_to_zoom(self._transform.k)

    def set_zoom(self, zoom: float) -> "Viewport":
        return self.set_scale(zoom_to_scale(zoom))

    # -- visible region ---------------------------------------------------

    def center(self) -> Vec2:
        """Center of the (unrotated) screen rectangle."""
        return vec_scale(self._dimensions, 0.5)

    def visible_polygon(self) -> list[Vec2]:
        """Screen-space ring that must be drawn to fill the rotated screen.

        The result is the smallest rectangle tilted by ``r`` that contains
        the screen rectangle and shares its center, returned as a closed,
        counter-clockwise ring of five points.

               |  E__
               |r/   ''--..__
               |/           r''--..__
         [0,0] A=======================D__
              /|                       |  ''H
             /r|                       |   /
            /  |           +           |  /
           /   |                       |r/
          F__  |                       |/
             ''B=======================C [w,h]
                  ''--..__r           /|
                          ''--,,__   /r|
                                  ''G  |

        The corners are built from ``|sin r|`` and ``|cos r|``.  While
        ``sin r * cos r >= 0`` the ring, rotated back by ``-r`` about the
        center, is axis-aligned with the size given by
        :meth:`visible_dimensions`; for the other rotations it is the mirror
        image of that rectangle, which still covers the screen.
        """
        w, h = self._dimensions
        r = self._transform.r

        if not r:
            return [(0.0, 0.0), (0.0, h), (w, h), (w, 0.0), (0.0, 0.0)]

        abs_sin = abs(math.sin(r))
        abs_cos = abs(math.cos(r))

        ae = w * abs_sin
        af = h * abs_cos

        ex = ae * abs_sin
        ey = ae * abs_cos
        fx = af * abs_sin
        fy = af * abs_cos

        e = (ex, -ey)
        f = (-fx, fy)
        g = (w - ex, h + ey)
        hh = (w + fx, h - fy)
        return [e, f, g, hh, e]

    def visible_dimensions(self) -> Vec2:
        """Size of the rectangle from :meth:`visible_polygon`, in its own frame."""
        w, h = self._dimensions
        r = self._transform.r

        if not r:
            return (w, h)

        abs_sin = abs(math.sin(r))
        abs_cos = abs(math.cos(r))
        return vec_ceil((w * abs_cos + h * abs_sin,
                         h * abs_cos + w * abs_sin))

    def visible_center(self) -> Vec2:
        return vec_scale(self.visible_dimensions(), 0.5)

    def extent(self) -> Extent:
        """Geographic bounding box of everything visible on screen."""
        polygon = self.visible_polygon()
        extent = Extent()
        for point in polygon[:-1]:  # last point repeats the first
            extent.extend_self(self.unproject(point, include_rotation=True))
        return extent
