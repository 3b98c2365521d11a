"""Fixed projection constants and the zoom / latitude limits table."""

import math
from dataclasses import dataclass
from typing import Final

TAU: Final[float] = 2.0 * math.pi
HALF_PI: Final[float] = math.pi / 2.0
DEG2RAD: Final[float] = math.pi / 180.0
RAD2DEG: Final[float] = 180.0 / math.pi

TILE_SIZE: Final[int] = 256

# Mercator scale units: how many pixels the world spans per radian of longitude.
DEFAULT_K: Final[float] = TILE_SIZE / math.pi   # z1


@dataclass(frozen=True)
class ProjectionLimits:
    """Bounds the projection math is kept inside of.

    ``min_k`` / ``max_k`` bound the scale to zoom levels z0..z24.
    ``min_phi`` / ``max_phi`` (radians) keep latitude away from the poles,
    where the Mercator Y diverges.  ``max_merc_y`` bounds the Mercator Y fed
    to the inverse projection.
    """

    min_k: float = TILE_SIZE / TAU                  # z0
    max_k: float = TILE_SIZE * 2.0 ** 24 / TAU      # z24
    max_phi: float = 2.0 * math.atan(math.exp(math.pi)) - HALF_PI   # ~85.0511 deg
    min_phi: float = -(2.0 * math.atan(math.exp(math.pi)) - HALF_PI)
    max_merc_y: float = math.pi


DEFAULT_LIMITS: Final[ProjectionLimits] = ProjectionLimits()

MIN_K: Final[float] = DEFAULT_LIMITS.min_k
MAX_K: Final[float] = DEFAULT_LIMITS.max_k
MIN_PHI: Final[float] = DEFAULT_LIMITS.min_phi
MAX_PHI: Final[float] = DEFAULT_LIMITS.max_phi
