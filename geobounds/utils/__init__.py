"""Mini README: Utility helpers for geobounds.

Exports the GeoJSON adapter that turns raw documents into the typed models
consumed by the bounds calculators.
"""

from .geojson import GeoJSONError, bounds_from_geojson, bounds_payload, parse_geojson

__all__ = ["GeoJSONError", "bounds_from_geojson", "bounds_payload", "parse_geojson"]
