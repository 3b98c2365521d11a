import math

import pytest

from geoview.server import app

MAX_LAT = 85.0511287798


@pytest.fixture
def client():
    app.config["TESTING"] = True
    with app.test_client() as c:
        yield c


def test_index(client) -> None:
    resp = client.get("/")
    assert resp.status_code == 200
    assert "/api/project" in resp.get_json()["endpoints"]


def test_project(client) -> None:
    resp = client.post("/api/project", json={"points": [[0, 0], [180, -MAX_LAT]]})
    assert resp.status_code == 200
    points = resp.get_json()["points"]
    assert points[0] == pytest.approx([0, 0], abs=1e-9)
    assert points[1] == pytest.approx([256, 256], abs=1e-6)


def test_unproject_with_rotation(client) -> None:
    body = {
        "transform": {"x": 400, "y": 300, "k": 1000, "r": 0.7},
        "dimensions": [800, 600],
        "points": [[12.5, 41.9]],
        "rotate": True,
    }
    projected = client.post("/api/project", json=body).get_json()["points"]
    body["points"] = projected
    resp = client.post("/api/unproject", json=body)
    assert resp.status_code == 200
    assert resp.get_json()["points"][0] == pytest.approx([12.5, 41.9], abs=1e-9)


def test_visible(client) -> None:
    resp = client.post("/api/visible", json={"dimensions": [800, 600]})
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["polygon"] == [[0, 0], [0, 600], [800, 600], [800, 0], [0, 0]]
    assert data["center"] == [400, 300]
    assert data["visible_dimensions"] == [800, 600]
    assert data["geometry"]["type"] == "Polygon"
    assert data["extent"]["min_x"] == pytest.approx(0.0, abs=1e-9)
    assert data["extent"]["max_y"] == pytest.approx(0.0, abs=1e-9)


def test_tiles(client) -> None:
    resp = client.post("/api/tiles", json={"transform": {"x": 256, "y": 256}, "dimensions": [512, 512]})
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["zoom"] == 1
    assert data["tiles"] == [[0, 0, 1], [1, 0, 1], [0, 1, 1], [1, 1, 1]]


@pytest.mark.parametrize("path, body", [
    ("/api/project", {"points": "nope"}),
    ("/api/project", {}),
    ("/api/project", {"points": [[1, 2, 3]]}),
    ("/api/unproject", {"points": [["a", "b"]]}),
    ("/api/visible", {"transform": [1, 2]}),
    ("/api/visible", {"dimensions": [-1, 600]}),
    ("/api/visible", {"transform": {"k": "big"}}),
    ("/api/tiles", {"max_zoom": 99}),
    ("/api/tiles", {"max_tiles": 0}),
    ("/api/project", {"points": [[10 ** 400, 0]]}),
    ("/api/visible", {"transform": {"k": 10 ** 400}}),
    ("/api/visible", {"dimensions": [10 ** 400, 600]}),
])
def test_bad_requests(client, path, body) -> None:
    resp = client.post(path, json=body)
    assert resp.status_code == 400
    assert "error" in resp.get_json()


def test_non_json_body(client) -> None:
    resp = client.post("/api/project", data="not json", content_type="text/plain")
    assert resp.status_code == 400


def test_infinite_max_zoom(client) -> None:
    resp = client.post("/api/tiles", data='{"max_zoom": Infinity}', content_type="application/json")
    assert resp.status_code == 400
    assert "error" in resp.get_json()


def test_tiles_with_budget(client) -> None:
    body = {"transform": {"x": 400, "y": 300, "k": 256 * 2 ** 10 / (2 * math.pi)},
            "dimensions": [800, 600], "max_tiles": 1}
    resp = client.post("/api/tiles", json=body)
    assert resp.status_code == 200
    assert resp.get_json() == {"zoom": 0, "tiles": [[0, 0, 0]]}
