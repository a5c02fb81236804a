"""Mini README: Geometry models and bounding box computation.

The ``types`` module defines the immutable entity models, ``bbox`` decodes
untyped override values and ``calculator`` implements the recursive bounds
aggregation. Everything callers need is re-exported here.
"""

from .bbox import (
    BoundingBoxDecodeError,
    DecodeLengthError,
    DecodeTypeError,
    RawBoundingBoxKind,
    classify_bounding_box,
    decode_bounding_box,
)
from .calculator import (
    bounds,
    feature_bounds,
    feature_bounds_table,
    feature_collection_bounds,
    geometry_bounds,
)
from .types import (
    BBox,
    BoundingBox,
    Coordinate,
    Feature,
    FeatureCollection,
    Geometry,
    GeometryCollection,
    GeometryNestingError,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)

__all__ = [
    "BBox",
    "BoundingBox",
    "BoundingBoxDecodeError",
    "Coordinate",
    "DecodeLengthError",
    "DecodeTypeError",
    "Feature",
    "FeatureCollection",
    "Geometry",
    "GeometryCollection",
    "GeometryNestingError",
    "LineString",
    "MultiLineString",
    "MultiPoint",
    "MultiPolygon",
    "Point",
    "Polygon",
    "RawBoundingBoxKind",
    "bounds",
    "classify_bounding_box",
    "decode_bounding_box",
    "feature_bounds",
    "feature_bounds_table",
    "feature_collection_bounds",
    "geometry_bounds",
]
