"""Mini README: Bounding box aggregation over geometry trees.

Structure:
    * geometry_bounds - extent of any geometry variant, recursing into
      collections.
    * feature_bounds - feature override or geometry extent.
    * feature_collection_bounds - collection override or fold over features.
    * feature_bounds_table - per-feature extents of a collection.
    * bounds - dispatch helper for any supported entity.

An override on an entity always wins and its children are not consulted.
Otherwise accumulators start at the largest finite float (not infinity) so an
entity that contributes no coordinate keeps ``min > max`` and comes back with
``valid=False``. Children that are themselves invalid are skipped so their
sentinels never leak into a parent. NaN coordinates propagate through the
numpy minimum/maximum folds and leave the result invalid.
"""

from __future__ import annotations

import sys
from itertools import chain
from typing import Iterable, List, Optional, Tuple, Union

import numpy as np

from ..logging_utils import get_logger
from .types import (
    BBox,
    BoundingBox,
    Coordinate,
    Feature,
    FeatureCollection,
    Geometry,
    GEOMETRY_TYPES,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)

LOGGER = get_logger(__name__)

SENTINEL = sys.float_info.max

Extent = Tuple[np.ndarray, np.ndarray]


def _empty_extent() -> Extent:
    return np.array([SENTINEL, SENTINEL]), np.array([-SENTINEL, -SENTINEL])


def _fold_coordinates(extent: Extent, coordinates: Iterable[Coordinate]) -> Extent:
    """Widen ``extent`` to cover every coordinate."""

    # Positions may carry altitude; only x and y are folded.
    points = np.array(
        [(coordinate[0], coordinate[1]) for coordinate in coordinates], dtype=np.float64
    )
    if points.size == 0:
        return extent
    lower, upper = extent
    return np.minimum(lower, points.min(axis=0)), np.maximum(upper, points.max(axis=0))


def _fold_box(extent: Extent, box: BoundingBox) -> Extent:
    lower, upper = extent
    return np.minimum(lower, box.min), np.maximum(upper, box.max)


def _to_bounding_box(extent: Extent) -> BoundingBox:
    lower, upper = extent
    minimum = Coordinate(float(lower[0]), float(lower[1]))
    maximum = Coordinate(float(upper[0]), float(upper[1]))
    return BoundingBox(minimum, maximum, _is_ordered(minimum, maximum))


def _is_ordered(minimum: Coordinate, maximum: Coordinate) -> bool:
    return minimum.x <= maximum.x and minimum.y <= maximum.y


def _from_override(bbox: BBox) -> BoundingBox:
    """Return an override verbatim, flagged invalid when its corners are inverted."""

    min_x, min_y, max_x, max_y = bbox
    minimum = Coordinate(min_x, min_y)
    maximum = Coordinate(max_x, max_y)
    return BoundingBox(minimum, maximum, _is_ordered(minimum, maximum))


def geometry_bounds(geometry: Geometry) -> BoundingBox:
    """Return the bounding box of ``geometry``.

    Raises ``TypeError`` for objects outside the closed set of geometry
    variants.
    """

    if not isinstance(geometry, GEOMETRY_TYPES):
        raise TypeError(f"Unsupported geometry type: {type(geometry).__name__}")
    if geometry.bbox is not None:
        return _from_override(geometry.bbox)

    extent = _empty_extent()
    if isinstance(geometry, Point):
        planar = np.array([geometry.coordinate[0], geometry.coordinate[1]], dtype=np.float64)
        extent = (planar, planar)
    elif isinstance(geometry, (MultiPoint, LineString)):
        extent = _fold_coordinates(extent, geometry.coordinates)
    elif isinstance(geometry, MultiLineString):
        extent = _fold_coordinates(extent, chain.from_iterable(geometry.lines))
    elif isinstance(geometry, Polygon):
        extent = _fold_coordinates(extent, chain.from_iterable(geometry.rings))
    elif isinstance(geometry, MultiPolygon):
        rings = chain.from_iterable(geometry.polygons)
        extent = _fold_coordinates(extent, chain.from_iterable(rings))
    elif isinstance(geometry, GeometryCollection):
        for child in geometry.geometries:
            child_box = geometry_bounds(child)
            if child_box.valid:
                extent = _fold_box(extent, child_box)
    return _to_bounding_box(extent)


def feature_bounds(feature: Feature) -> BoundingBox:
    """Return the feature override if present, else its geometry's extent."""

    if feature.bbox is not None:
        return _from_override(feature.bbox)
    return geometry_bounds(feature.geometry)


def feature_collection_bounds(collection: FeatureCollection) -> BoundingBox:
    """Return the collection override if present, else the union of valid feature extents."""

    if collection.bbox is not None:
        return _from_override(collection.bbox)

    extent = _empty_extent()
    contributing = 0
    for feature in collection.features:
        box = feature_bounds(feature)
        if box.valid:
            extent = _fold_box(extent, box)
            contributing += 1
    LOGGER.debug(
        "Folded %s of %s features into collection bounds",
        contributing,
        len(collection.features),
    )
    return _to_bounding_box(extent)


def feature_bounds_table(
    collection: FeatureCollection,
) -> List[Tuple[Optional[Union[str, int]], BoundingBox]]:
    """Return ``(feature id, bounds)`` for every feature, in collection order."""

    return [(feature.id, feature_bounds(feature)) for feature in collection.features]


def bounds(entity: Union[Geometry, Feature, FeatureCollection]) -> BoundingBox:
    """Compute bounds for a geometry, feature or feature collection."""

    if isinstance(entity, FeatureCollection):
        return feature_collection_bounds(entity)
    if isinstance(entity, Feature):
        return feature_bounds(entity)
    return geometry_bounds(entity)
