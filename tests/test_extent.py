import math

from geoview.extent import Extent


def test_new_extent_is_empty() -> None:
    ext = Extent()
    assert ext.is_empty()
    assert ext.min == (math.inf, math.inf)
    assert ext.max == (-math.inf, -math.inf)
    assert ext.size() == (0.0, 0.0)
    assert ext.to_polygon().is_empty


def test_extend_self_grows_in_place() -> None:
    ext = Extent()
    result = ext.extend_self((1.0, 2.0))
    assert result is ext
    assert ext.min == (1.0, 2.0)
    assert ext.max == (1.0, 2.0)
    assert not ext.is_empty()

    ext.extend_self((-3.0, 5.0)).extend_self((0.0, -1.0))
    assert ext.min == (-3.0, -1.0)
    assert ext.max == (1.0, 5.0)


def test_extend_returns_new_extent() -> None:
    a = Extent((0, 0), (1, 1))
    b = a.extend(Extent((2, 2), (3, 3)))
    assert a == Extent((0, 0), (1, 1))
    assert b == Extent((0, 0), (3, 3))


def test_single_point_constructor() -> None:
    ext = Extent((4, 5))
    assert ext.min == ext.max == (4.0, 5.0)


def test_queries() -> None:
    ext = Extent((-10, -5), (10, 5))
    assert ext.contains((0, 0))
    assert ext.contains((10, 5))
    assert not ext.contains((11, 0))
    assert ext.center() == (0.0, 0.0)
    assert ext.size() == (20.0, 10.0)
    assert ext.bbox() == {"min_x": -10.0, "min_y": -5.0, "max_x": 10.0, "max_y": 5.0}
    ring = ext.polygon()
    assert len(ring) == 5
    assert ring[0] == ring[-1] == (-10.0, -5.0)


def test_to_polygon_matches_bounds() -> None:
    poly = Extent((-10, -5), (10, 5)).to_polygon()
    assert poly.bounds == (-10.0, -5.0, 10.0, 5.0)
    assert poly.area == 200.0
