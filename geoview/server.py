"""Flask application exposing the viewport math as a JSON API."""

import logging
import math

from flask import Flask, jsonify, request
from shapely.geometry import mapping

from .tiles import tiles_for_viewport
from .viewport import Transform, Viewport

logger = logging.getLogger(__name__)

app = Flask(__name__)

MAX_POINTS = 10_000
MAX_TILE_ZOOM = 24
MAX_DIMENSION = 8192


def _parse_point(value) -> tuple[float, float]:
    if len(value) != 2:
        raise ValueError(f"expected a pair of numbers, got {value!r}")
    x, y = float(value[0]), float(value[1])
    if not (math.isfinite(x) and math.isfinite(y)):
        raise ValueError(f"coordinates must be finite, got {value!r}")
    return x, y


def _viewport_from(data: dict) -> Viewport:
    """Build a viewport from ``{"transform": {...}, "dimensions": [w, h]}``."""
    transform = data.get("transform") or {}
    if not isinstance(transform, dict):
        raise TypeError("transform must be an object")
    if not all(math.isfinite(float(v)) for v in transform.values() if v is not None):
        raise ValueError("transform values must be finite")
    dimensions = data.get("dimensions")
    if dimensions is not None:
        dimensions = _parse_point(dimensions)
        if not all(0 <= d <= MAX_DIMENSION for d in dimensions):
            raise ValueError(f"dimensions must be between 0 and {MAX_DIMENSION} px")
    return Viewport(Transform.from_mapping(transform), dimensions)


def _points_from(data: dict) -> list[tuple[float, float]]:
    points = data["points"]
    if not isinstance(points, list):
        raise TypeError("points must be a list")
    if len(points) > MAX_POINTS:
        raise ValueError(f"at most {MAX_POINTS} points per request")
    return [_parse_point(p) for p in points]


def _bad_request(exc: Exception):
    logger.warning("Rejected %s: %s", request.path, exc)
    return jsonify({"error": f"Invalid parameters: {exc}"}), 400


@app.route("/")
def index():
    return jsonify({
        "endpoints": ["/api/project", "/api/unproject", "/api/visible", "/api/tiles"],
    })


@app.route("/api/project", methods=["POST"])
def project():
    data = request.get_json(force=True, silent=True)
    try:
        view = _viewport_from(data)
        points = _points_from(data)
        rotate = bool(data.get("rotate", False))
    except (KeyError, TypeError, ValueError, OverflowError, AttributeError) as exc:
        return _bad_request(exc)

    return jsonify({"points": [list(view.project(p, rotate)) for p in points]})


@app.route("/api/unproject", methods=["POST"])
def unproject():
    data = request.get_json(force=True, silent=True)
    try:
        view = _viewport_from(data)
        points = _points_from(data)
        rotate = bool(data.get("rotate", False))
    except (KeyError, TypeError, ValueError, OverflowError, AttributeError) as exc:
        return _bad_request(exc)

    return jsonify({"points": [list(view.unproject(p, rotate)) for p in points]})


@app.route("/api/visible", methods=["POST"])
def visible():
    data = request.get_json(force=True, silent=True)
    try:
        view = _viewport_from(data)
    except (KeyError, TypeError, ValueError, OverflowError, AttributeError) as exc:
        return _bad_request(exc)

    extent = view.extent()
    return jsonify({
        "transform": view.get_transform().as_dict(),
        "polygon": [list(p) for p in view.visible_polygon()],
        "dimensions": list(view.get_dimensions()),
        "center": list(view.center()),
        "visible_dimensions": list(view.visible_dimensions()),
        "visible_center": list(view.visible_center()),
        "extent": extent.bbox(),
        "geometry": mapping(extent.to_polygon()),
    })


@app.route("/api/tiles", methods=["POST"])
def tiles():
    data = request.get_json(force=True, silent=True)
    try:
        view = _viewport_from(data)
        max_zoom = int(data.get("max_zoom", MAX_TILE_ZOOM))
        max_tiles = data.get("max_tiles")
        if max_tiles is not None:
            max_tiles = int(max_tiles)
    except (KeyError, TypeError, ValueError, OverflowError, AttributeError) as exc:
        return _bad_request(exc)

    if not 0 <= max_zoom <= MAX_TILE_ZOOM:
        return jsonify({"error": f"max_zoom must be between 0 and {MAX_TILE_ZOOM}"}), 400
    if max_tiles is not None and max_tiles < 1:
        return jsonify({"error": "max_tiles must be at least 1"}), 400

    found = tiles_for_viewport(view, max_zoom=max_zoom, max_tiles=max_tiles)
    zoom = found[0].z if found else None
    return jsonify({"zoom": zoom, "tiles": [list(t) for t in found]})
