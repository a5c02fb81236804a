"""Mini README: Tests for the HTTP service and command line entry point.

The FastAPI routes are exercised with ``TestClient`` and the Typer commands
with ``CliRunner`` so no server process or real network socket is needed.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from typer.testing import CliRunner

from geobounds.interface import create_application
from geobounds_cli import cli

COLLECTION = {
    "type": "FeatureCollection",
    "features": [
        {"type": "Feature", "id": "a", "geometry": {"type": "Point", "coordinates": [1, 1]}, "properties": {}},
        {"type": "Feature", "id": "b", "geometry": {"type": "Point", "coordinates": [5, 5]}, "properties": {}},
        {"type": "Feature", "id": "c", "geometry": None, "properties": {}},
    ],
}


@pytest.fixture()
def client() -> TestClient:
    return TestClient(create_application())


def test_bounds_route_returns_extent(client: TestClient) -> None:
    response = client.post("/bounds", json=COLLECTION)
    assert response.status_code == 200
    assert response.json() == {
        "type": "FeatureCollection",
        "bbox": [1.0, 1.0, 5.0, 5.0],
        "min": [1.0, 1.0],
        "max": [5.0, 5.0],
        "valid": True,
    }


def test_bounds_route_reports_invalid_extent(client: TestClient) -> None:
    response = client.post("/bounds", json={"type": "MultiPoint", "coordinates": []})
    assert response.status_code == 200
    assert response.json()["valid"] is False
    assert response.json()["bbox"] is None


@pytest.mark.parametrize(
    "document",
    [
        {"type": "Point", "coordinates": [0, 0], "bbox": ["a", 0, 1, 1]},
        {"type": "Point", "coordinates": [0, 0], "bbox": [0, 0, 1]},
        {"type": "Hexagon", "coordinates": []},
        {"type": "Feature", "geometry": None, "properties": [1, 2]},
    ],
)
def test_bounds_route_rejects_bad_documents(client: TestClient, document) -> None:
    response = client.post("/bounds", json=document)
    assert response.status_code == 400
    assert response.json()["detail"]


def test_feature_bounds_route(client: TestClient) -> None:
    response = client.post("/feature-bounds", json=COLLECTION)
    assert response.status_code == 200
    features = response.json()["features"]
    assert [feature["id"] for feature in features] == ["a", "b", "c"]
    assert features[1]["bbox"] == [5.0, 5.0, 5.0, 5.0]
    assert features[2]["valid"] is False


def test_feature_bounds_route_requires_collection(client: TestClient) -> None:
    response = client.post("/feature-bounds", json={"type": "Point", "coordinates": [0, 0]})
    assert response.status_code == 400


def test_cli_compute_prints_bounds(tmp_path: Path) -> None:
    path = tmp_path / "collection.geojson"
    path.write_text(json.dumps(COLLECTION), encoding="utf-8")

    result = CliRunner().invoke(cli, ["compute", str(path), "--per-feature"])
    assert result.exit_code == 0
    output = json.loads(result.stdout)
    assert output["bbox"] == [1.0, 1.0, 5.0, 5.0]
    assert [feature["id"] for feature in output["features"]] == ["a", "b", "c"]


def test_cli_compute_exit_codes(tmp_path: Path) -> None:
    empty = tmp_path / "empty.geojson"
    empty.write_text(json.dumps({"type": "GeometryCollection", "geometries": []}), encoding="utf-8")
    broken = tmp_path / "broken.geojson"
    broken.write_text("{", encoding="utf-8")

    runner = CliRunner()
    assert runner.invoke(cli, ["compute", str(empty)]).exit_code == 2
    assert runner.invoke(cli, ["compute", str(broken)]).exit_code == 1
    assert runner.invoke(cli, ["compute", str(tmp_path / "missing.geojson")]).exit_code == 1


@pytest.mark.parametrize(
    "body",
    [
        '{"type": "Point", "coordinates": [Infinity, 0]}',
        '{"type": "Point", "coordinates": [0, 0], "bbox": [-Infinity, 0, 1, 1]}',
        '{"type": "Point", "coordinates": [NaN, 0]}',
    ],
)
def test_bounds_route_rejects_non_finite_numbers(client: TestClient, body: str) -> None:
    response = client.post("/bounds", content=body, headers={"content-type": "application/json"})
    assert response.status_code == 400
