"""Slippy-map tile math: which z/x/y tiles cover an extent or a viewport.

Tile coordinates come straight from the unscaled Mercator plane: at zoom
``z`` the square ``[-pi, pi] x [-pi, pi]`` is cut into ``2**z`` columns and
rows, numbered from the north-west corner.
"""

import logging
import math
from typing import NamedTuple

from .constants import MAX_PHI, RAD2DEG, TAU
from .extent import Extent
from .number import clamp
from .projection import lonlat_to_mercator, mercator_to_lonlat
from .vector import Vec2
from .viewport import Viewport

logger = logging.getLogger(__name__)

MAX_LAT = MAX_PHI * RAD2DEG


class Tile(NamedTuple):
    x: int
    y: int
    z: int


def lonlat_to_tile(loc: Vec2, zoom: int) -> tuple[int, int]:
    """Tile column and row holding ``(lon, lat)``, kept on the grid."""
    n = 2 ** zoom
    mx, my = lonlat_to_mercator(loc)
    tx = math.floor((mx + math.pi) / TAU * n)
    ty = math.floor((math.pi - my) / TAU * n)
    return int(clamp(tx, 0, n - 1)), int(clamp(ty, 0, n - 1))


def tile_to_lonlat(tx: int, ty: int, zoom: int) -> Vec2:
    """Return the NW corner ``(lon, lat)`` of tile (tx, ty)."""
    step = TAU / 2 ** zoom
    return mercator_to_lonlat((tx * step - math.pi, math.pi - ty * step))


def tile_extent(tx: int, ty: int, zoom: int) -> Extent:
    """Geographic extent of a tile, ``min`` = SW corner, ``max`` = NE corner."""
    west, north = tile_to_lonlat(tx, ty, zoom)
    east, south = tile_to_lonlat(tx + 1, ty + 1, zoom)
    return Extent((west, south), (east, north))


def _tile_range(extent: Extent, zoom: int) -> tuple[int, int, int, int]:
    x0, y0 = lonlat_to_tile((extent.min[0], extent.max[1]), zoom)   # NW corner
    x1, y1 = lonlat_to_tile((extent.max[0], extent.min[1]), zoom)   # SE corner
    return x0, y0, x1, y1


def tile_count(extent: Extent, zoom: int) -> int:
    if extent.is_empty():
        return 0
    x0, y0, x1, y1 = _tile_range(extent, zoom)
    return (x1 - x0 + 1) * (y1 - y0 + 1)


def tiles_in_extent(extent: Extent, zoom: int) -> list[Tile]:
    """Tiles covering a geographic extent, ordered row by row from the NW."""
    if extent.is_empty():
        return []
    x0, y0, x1, y1 = _tile_range(extent, zoom)
    return [Tile(tx, ty, zoom)
            for ty in range(y0, y1 + 1)
            for tx in range(x0, x1 + 1)]


def pick_zoom(extent: Extent, max_zoom: int, max_tiles: int = 100) -> int:
    """Highest zoom up to ``max_zoom`` whose tile count fits in ``max_tiles``.

    Zoom 0 is a single tile and is returned when nothing else fits.
    """
    return next((z for z in range(max_zoom, 0, -1)
                 if tile_count(extent, z) <= max_tiles), 0)


def tiles_for_viewport(viewport: Viewport, max_zoom: int = 24,
                       max_tiles: int | None = None) -> list[Tile]:
    """Tiles covering everything visible in ``viewport``.

    The tile zoom is the viewport zoom rounded to the nearest level.  With
    ``max_tiles`` the zoom is lowered until the tiles fit in that budget.
    """
    extent = viewport.extent()
    zoom = int(clamp(round(viewport.zoom()), 0, max_zoom))
    if max_tiles is not None:
        zoom = pick_zoom(extent, zoom, max_tiles)
    tiles = tiles_in_extent(extent, zoom)
    logger.debug("viewport %r needs %d tiles at z%d", viewport, len(tiles), zoom)
    return tiles
