"""Mini README: GeoJSON adapter for geobounds.

Structure:
    * GeoJSONError - raised for payloads that cannot become typed entities.
    * parse_geojson - JSON text or mapping to Geometry/Feature/FeatureCollection.
    * bounds_from_geojson - parse and compute bounds in one call.
    * bounding_box_to_geojson / bounds_payload - encode results for output.

This is the boundary where raw decoded JSON becomes typed models. Every
``bbox`` member passes through ``decode_bounding_box``; its errors propagate
unchanged so callers can tell a bad override from a malformed document.
Keeping the adapter separate avoids importing web framework dependencies when
the calculators are used on their own.
"""

from __future__ import annotations

import json
import math
from numbers import Real
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from ..configuration import get_settings
from ..geometry import (
    BBox,
    BoundingBox,
    Coordinate,
    Feature,
    FeatureCollection,
    Geometry,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    bounds,
    decode_bounding_box,
)
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

Entity = Union[Geometry, Feature, FeatureCollection]
Payload = Union[str, bytes, Mapping[str, Any]]


class GeoJSONError(ValueError):
    """Raised when a payload is not usable GeoJSON."""


def _finite(value: Any) -> float:
    """Return ``value`` as a float, rejecting NaN, infinities and overflow."""

    try:
        number = float(value)
    except OverflowError as error:
        raise GeoJSONError(f"Number out of range: {value!r}") from error
    if not math.isfinite(number):
        raise GeoJSONError(f"Non-finite number: {value!r}")
    return number


def _position(value: Any) -> Coordinate:
    """Convert ``[x, y, ...]`` to a coordinate, ignoring any altitude."""

    if (
        not isinstance(value, (list, tuple))
        or len(value) < 2
        or not all(isinstance(part, Real) and not isinstance(part, bool) for part in value[:2])
    ):
        raise GeoJSONError(f"Invalid position: {value!r}")
    return Coordinate(_finite(value[0]), _finite(value[1]))


def _bbox(obj: Mapping[str, Any]) -> Optional[BBox]:
    """Decode the ``bbox`` member; decode errors propagate unchanged."""

    raw = obj.get("bbox")
    try:
        bbox = decode_bounding_box(raw)
    except OverflowError as error:
        raise GeoJSONError(f"Number out of range in bbox: {raw!r}") from error
    if bbox is not None:
        for value in bbox:
            _finite(value)
    return bbox


def _array(value: Any, what: str) -> list:
    if not isinstance(value, (list, tuple)):
        raise GeoJSONError(f"{what} must be an array, got {type(value).__name__}")
    return list(value)


def _positions(value: Any) -> Tuple[Coordinate, ...]:
    return tuple(_position(item) for item in _array(value, "Coordinates"))


def _lines(value: Any) -> Tuple[Tuple[Coordinate, ...], ...]:
    return tuple(_positions(item) for item in _array(value, "Coordinates"))


def _parse_geometry(obj: Any, depth: int, max_depth: int) -> Geometry:
    if not isinstance(obj, Mapping):
        raise GeoJSONError(f"Geometry must be an object, got {type(obj).__name__}")

    geometry_type = obj.get("type")
    bbox = _bbox(obj)

    if geometry_type == "GeometryCollection":
        if depth + 1 > max_depth:
            raise GeoJSONError(f"GeometryCollection nesting exceeds {max_depth} levels")
        children = tuple(
            _parse_geometry(child, depth + 1, max_depth)
            for child in _array(obj.get("geometries"), "GeometryCollection geometries")
        )
        return GeometryCollection(geometries=children, bbox=bbox)

    if "coordinates" not in obj:
        raise GeoJSONError(f"{geometry_type} geometry is missing coordinates")
    coordinates = obj["coordinates"]

    if geometry_type == "Point":
        return Point(_position(coordinates), bbox=bbox)
    if geometry_type == "MultiPoint":
        return MultiPoint(_positions(coordinates), bbox=bbox)
    if geometry_type == "LineString":
        return LineString(_positions(coordinates), bbox=bbox)
    if geometry_type == "MultiLineString":
        return MultiLineString(_lines(coordinates), bbox=bbox)
    if geometry_type == "Polygon":
        return Polygon(_lines(coordinates), bbox=bbox)
    if geometry_type == "MultiPolygon":
        polygons = tuple(_lines(polygon) for polygon in _array(coordinates, "Coordinates"))
        return MultiPolygon(polygons, bbox=bbox)
    raise GeoJSONError(f"Unsupported geometry type: {geometry_type!r}")


def _properties(value: Any) -> Dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise GeoJSONError(f"Feature properties must be an object, got {type(value).__name__}")
    return dict(value)


def _parse_feature(obj: Any, max_depth: int) -> Feature:
    if not isinstance(obj, Mapping) or obj.get("type") != "Feature":
        raise GeoJSONError("FeatureCollection members must be Feature objects")

    raw_geometry = obj.get("geometry")
    if raw_geometry is None:
        # Unlocated feature: an empty collection yields invalid bounds.
        geometry: Geometry = GeometryCollection()
    else:
        geometry = _parse_geometry(raw_geometry, 0, max_depth)
    return Feature(
        geometry=geometry,
        bbox=_bbox(obj),
        id=obj.get("id"),
        properties=_properties(obj.get("properties")),
    )


def parse_geojson(payload: Payload, *, max_depth: Optional[int] = None) -> Entity:
    """Parse GeoJSON text or an already decoded mapping into typed entities."""

    if isinstance(payload, (str, bytes, bytearray)):
        try:
            payload = json.loads(payload)
        except json.JSONDecodeError as error:
            raise GeoJSONError("GeoJSON payload is invalid JSON") from error
        except RecursionError as error:
            raise GeoJSONError("GeoJSON payload is nested too deeply") from error
    if not isinstance(payload, Mapping):
        raise GeoJSONError(f"GeoJSON payload must be an object, got {type(payload).__name__}")

    if max_depth is None:
        max_depth = get_settings().max_collection_depth

    payload_type = payload.get("type")
    if payload_type == "FeatureCollection":
        features = tuple(
            _parse_feature(feature, max_depth)
            for feature in _array(payload.get("features"), "FeatureCollection features")
        )
        LOGGER.debug("Parsed FeatureCollection with %s features", len(features))
        return FeatureCollection(features=features, bbox=_bbox(payload))
    if payload_type == "Feature":
        return _parse_feature(payload, max_depth)
    if payload_type is None:
        raise GeoJSONError("GeoJSON payload is missing a type")
    return _parse_geometry(payload, 0, max_depth)


def bounds_from_geojson(payload: Payload) -> BoundingBox:
    """Parse ``payload`` and return the bounds of the resulting entity."""

    return bounds(parse_geojson(payload))


def bounding_box_to_geojson(box: BoundingBox) -> Optional[List[float]]:
    """Encode as a GeoJSON ``bbox`` member, or ``None`` when the box is invalid."""

    if not box.valid:
        return None
    return list(box.as_bbox())


def bounds_payload(box: BoundingBox) -> Dict[str, Any]:
    """Serialisable summary shared by the CLI and the HTTP service."""

    return {
        "bbox": bounding_box_to_geojson(box),
        "min": list(box.min) if box.valid else None,
        "max": list(box.max) if box.valid else None,
        "valid": box.valid,
    }
