import math

import pytest

from geoview.constants import MAX_PHI, MIN_K, RAD2DEG
from geoview.projection import Projection, lonlat_to_mercator, mercator_to_lonlat

MAX_LAT = 85.0511287798


def test_mercator_is_clamped_at_the_poles() -> None:
    _, north = lonlat_to_mercator((0.0, 90.0))
    _, south = lonlat_to_mercator((0.0, -90.0))
    assert north == pytest.approx(math.pi)
    assert south == pytest.approx(-math.pi)


def test_inverse_mercator_is_clamped() -> None:
    lon, lat = mercator_to_lonlat((0.0, 50.0))
    assert lon == 0.0
    assert lat == pytest.approx(MAX_PHI * RAD2DEG)


def test_projection_known_points() -> None:
    p = Projection()
    assert p.project((0, 0)) == pytest.approx((0, 0), abs=1e-9)
    assert p.project((180, -MAX_LAT)) == pytest.approx((256, 256), abs=1e-6)
    assert p.project((-180, MAX_LAT)) == pytest.approx((-256, -256), abs=1e-6)
    assert p.invert((256, 256)) == pytest.approx((180, -MAX_LAT), abs=1e-6)
    assert p.invert((-256, -256)) == pytest.approx((-180, MAX_LAT), abs=1e-6)


def test_projection_round_trip_with_translation() -> None:
    p = Projection(20, 30, 512 / math.pi)
    for loc in [(12.5, 41.9), (-73.98, 40.75), (151.2, -33.86)]:
        assert p.invert(p.project(loc)) == pytest.approx(loc, abs=1e-9)


def test_projection_accessors_chain() -> None:
    p = (Projection()
         .set_translation((20, 30))
         .set_scale(512 / math.pi)
         .set_dimensions(((0, 0), (800, 600))))
    assert p.get_translation() == (20.0, 30.0)
    assert p.get_scale() == 512 / math.pi
    assert p.get_dimensions() == ((0.0, 0.0), (800.0, 600.0))
    assert p.get_transform() == {"x": 20.0, "y": 30.0, "k": 512 / math.pi}

    p.set_transform(1, 2, 100)
    assert p.get_transform() == {"x": 1.0, "y": 2.0, "k": 100.0}


def test_projection_default_dimensions() -> None:
    assert Projection().get_dimensions() == ((0.0, 0.0), (0.0, 0.0))


def test_projection_zero_scale_is_clamped() -> None:
    p = Projection(k=0)
    assert p.get_scale() == MIN_K
    lon, lat = p.invert((10, 10))
    assert math.isfinite(lon) and math.isfinite(lat)
