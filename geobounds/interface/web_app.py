"""Mini README: FastAPI service exposing bounds computation over HTTP.

Structure:
    * create_application - application factory wiring the routes.

Routes accept a GeoJSON document as the JSON request body. Parse and bbox
decode failures are reported as HTTP 400 with the error message as detail.
"""

from __future__ import annotations

from typing import Any, Dict

from fastapi import Body, FastAPI, HTTPException
from fastapi.responses import JSONResponse

from ..geometry import FeatureCollection, bounds, feature_bounds_table
from ..logging_utils import get_logger
from ..utils.geojson import Entity, bounds_payload, parse_geojson

LOGGER = get_logger(__name__)


def _parse_or_400(document: Dict[str, Any]) -> Entity:
    try:
        return parse_geojson(document)
    except ValueError as error:
        LOGGER.info("Rejected GeoJSON payload: %s", error)
        raise HTTPException(status_code=400, detail=str(error)) from error


def create_application() -> FastAPI:
    """Create the FastAPI application with its routes."""

    app = FastAPI(title="geobounds", version="0.1.0")

    @app.post("/bounds")
    async def compute_bounds(document: Dict[str, Any] = Body(...)) -> JSONResponse:
        """Return the bounding box of any GeoJSON geometry, feature or collection."""

        entity = _parse_or_400(document)
        box = bounds(entity)
        LOGGER.info(
            "Computed bounds for %s valid=%s", document.get("type"), box.valid
        )
        payload = {"type": document.get("type")}
        payload.update(bounds_payload(box))
        return JSONResponse(payload)

    @app.post("/feature-bounds")
    async def compute_feature_bounds(document: Dict[str, Any] = Body(...)) -> JSONResponse:
        """Return bounds for every feature of a FeatureCollection."""

        entity = _parse_or_400(document)
        if not isinstance(entity, FeatureCollection):
            raise HTTPException(status_code=400, detail="A FeatureCollection is required")
        features = []
        for feature_id, box in feature_bounds_table(entity):
            entry: Dict[str, Any] = {"id": feature_id}
            entry.update(bounds_payload(box))
            features.append(entry)
        LOGGER.info("Computed bounds for %s features", len(features))
        return JSONResponse({"features": features})

    return app
