"""Mini README: Core package initializer for geobounds.

geobounds computes axis-aligned bounding boxes for geometry trees, features
and feature collections, honouring any pre-supplied ``bbox`` override. The
most common entry points are re-exported here; the web and CLI layers are
left out so importing the package stays lightweight.
"""

from .geometry import BoundingBox, bounds, decode_bounding_box
from .logging_utils import get_logger

__all__ = ["BoundingBox", "bounds", "decode_bounding_box", "get_logger"]
