"""Conversions between conventional zoom levels and Mercator scale."""

import math

from .constants import TAU, TILE_SIZE


def zoom_to_scale(zoom: float, tile_size: int = TILE_SIZE) -> float:
    """Return the scale ``k`` at which the world is ``tile_size * 2**zoom`` px wide."""
    return tile_size * 2.0 ** zoom / TAU


def scale_to_zoom(k: float, tile_size: int = TILE_SIZE) -> float:
    """Inverse of :func:`zoom_to_scale`.  Non-positive scales give ``-inf``."""
    if k <= 0:
        return -math.inf
    return math.log2(k * TAU / tile_size)
