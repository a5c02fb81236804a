"""Mini README: Typed geometry, feature and bounding box models.

Structure:
    * Coordinate - immutable (x, y) pair.
    * Point, MultiPoint, LineString, MultiLineString, Polygon, MultiPolygon,
      GeometryCollection - the closed set of geometry variants.
    * Feature / FeatureCollection - containers carrying optional overrides.
    * BoundingBox - result of a bounds computation.
    * GeometryNestingError - raised for collections nested too deeply.

Every entity may carry ``bbox``, a pre-supplied ``(min_x, min_y, max_x,
max_y)`` override. All models are frozen so calculators can share them
across threads without copying.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Mapping, NamedTuple, Optional, Sequence, Tuple, Union

from ..configuration import MAX_COLLECTION_DEPTH

BBox = Tuple[float, float, float, float]


class GeometryNestingError(ValueError):
    """Raised when geometry collections nest deeper than ``MAX_COLLECTION_DEPTH``."""


class Coordinate(NamedTuple):
    """Planar position."""

    x: float
    y: float


Line = Sequence[Coordinate]


@dataclass(frozen=True, slots=True)
class Point:
    geojson_type: ClassVar[str] = "Point"

    coordinate: Coordinate
    bbox: Optional[BBox] = None


@dataclass(frozen=True, slots=True)
class MultiPoint:
    geojson_type: ClassVar[str] = "MultiPoint"

    coordinates: Sequence[Coordinate]
    bbox: Optional[BBox] = None


@dataclass(frozen=True, slots=True)
class LineString:
    geojson_type: ClassVar[str] = "LineString"

    coordinates: Sequence[Coordinate]
    bbox: Optional[BBox] = None


@dataclass(frozen=True, slots=True)
class MultiLineString:
    geojson_type: ClassVar[str] = "MultiLineString"

    lines: Sequence[Line]
    bbox: Optional[BBox] = None


@dataclass(frozen=True, slots=True)
class Polygon:
    """Polygon as a sequence of rings; the first ring is the exterior."""

    geojson_type: ClassVar[str] = "Polygon"

    rings: Sequence[Line]
    bbox: Optional[BBox] = None


@dataclass(frozen=True, slots=True)
class MultiPolygon:
    geojson_type: ClassVar[str] = "MultiPolygon"

    polygons: Sequence[Sequence[Line]]
    bbox: Optional[BBox] = None


@dataclass(frozen=True, slots=True)
class GeometryCollection:
    """Ordered collection that exclusively owns its child geometries."""

    geojson_type: ClassVar[str] = "GeometryCollection"

    geometries: Sequence["Geometry"] = ()
    bbox: Optional[BBox] = None

    def __post_init__(self) -> None:
        # Frozen children keep the depth check below authoritative.
        object.__setattr__(self, "geometries", tuple(self.geometries))
        if self.depth > MAX_COLLECTION_DEPTH:
            raise GeometryNestingError(
                f"GeometryCollection nesting depth {self.depth} exceeds {MAX_COLLECTION_DEPTH}"
            )

    @property
    def depth(self) -> int:
        """Number of collection levels from this node down to the deepest leaf."""

        return 1 + max(
            (child.depth for child in self.geometries if isinstance(child, GeometryCollection)),
            default=0,
        )


Geometry = Union[
    Point,
    MultiPoint,
    LineString,
    MultiLineString,
    Polygon,
    MultiPolygon,
    GeometryCollection,
]

GEOMETRY_TYPES: Tuple[type, ...] = (
    Point,
    MultiPoint,
    LineString,
    MultiLineString,
    Polygon,
    MultiPolygon,
    GeometryCollection,
)


@dataclass(frozen=True, slots=True)
class Feature:
    """Geometry plus non-spatial properties, which are carried but never read."""

    geometry: Geometry
    bbox: Optional[BBox] = None
    id: Optional[Union[str, int]] = None
    properties: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class FeatureCollection:
    features: Sequence[Feature] = ()
    bbox: Optional[BBox] = None


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """Computed extent.

    ``min`` and ``max`` are only meaningful when ``valid`` is true; otherwise
    they hold sentinel extrema (or an inverted override) and must not be used
    as real bounds.
    """

    min: Coordinate
    max: Coordinate
    valid: bool

    def as_bbox(self) -> BBox:
        """Return ``(min_x, min_y, max_x, max_y)`` regardless of validity."""

        return (self.min.x, self.min.y, self.max.x, self.max.y)
