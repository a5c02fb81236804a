"""Mini README: Decoding of untyped ``bbox`` override values.

Structure:
    * BoundingBoxDecodeError - base class for decode failures.
    * DecodeTypeError - value or element has an unusable type.
    * DecodeLengthError - numeric sequence without exactly four members.
    * RawBoundingBoxKind / classify_bounding_box - boundary classification.
    * decode_bounding_box - classify and convert to a ``BBox`` tuple.

Raw values arrive from JSON decoding or user code. They are classified once
here and nothing untyped travels further into the package. Errors go straight
to the caller; whether to abort entity construction or drop the override is
the caller's decision.
"""

from __future__ import annotations

from enum import Enum
from numbers import Real
from typing import Any, Optional

import numpy as np

from .types import BBox

BBOX_LENGTH = 4


class BoundingBoxDecodeError(ValueError):
    """Raised when a bounding box override cannot be decoded."""


class DecodeTypeError(BoundingBoxDecodeError, TypeError):
    """A bbox value, or one of its elements, is not numeric."""

    def __init__(self, message: str, actual_type: type) -> None:
        super().__init__(message)
        self.actual_type = actual_type


class DecodeLengthError(BoundingBoxDecodeError):
    """A numeric bbox sequence does not hold exactly four values."""

    def __init__(self, length: int) -> None:
        super().__init__(
            f"bounding box must have {BBOX_LENGTH} values [min_x, min_y, max_x, max_y], got {length}"
        )
        self.length = length


class RawBoundingBoxKind(str, Enum):
    """Shapes an untyped bbox value can take."""

    ABSENT = "absent"
    NUMERIC_SEQUENCE = "numeric_sequence"
    INVALID = "invalid"


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _elements(raw: Any) -> Optional[list]:
    """Return the members of a list, tuple or 1-D array, else ``None``."""

    if isinstance(raw, (list, tuple)):
        return list(raw)
    if isinstance(raw, np.ndarray) and raw.ndim == 1:
        return raw.tolist()
    return None


def classify_bounding_box(raw: Any) -> RawBoundingBoxKind:
    """Classify ``raw`` without converting it."""

    if raw is None:
        return RawBoundingBoxKind.ABSENT
    elements = _elements(raw)
    if elements is not None and all(_is_number(element) for element in elements):
        return RawBoundingBoxKind.NUMERIC_SEQUENCE
    return RawBoundingBoxKind.INVALID


def decode_bounding_box(raw: Any) -> Optional[BBox]:
    """Decode an untyped override into ``(min_x, min_y, max_x, max_y)``.

    ``None`` means "no override" and decodes to ``None``. A list, tuple or 1-D
    array of four real numbers decodes to a tuple of floats. Anything else
    raises ``DecodeTypeError`` naming the offending type, or
    ``DecodeLengthError`` when the numeric sequence has the wrong size.
    """

    kind = classify_bounding_box(raw)
    if kind is RawBoundingBoxKind.ABSENT:
        return None

    elements = _elements(raw)
    if elements is None:
        raise DecodeTypeError(
            f"bounding box property not usable, got {type(raw).__name__}", type(raw)
        )
    if kind is RawBoundingBoxKind.INVALID:
        offending = next(element for element in elements if not _is_number(element))
        raise DecodeTypeError(
            f"bounding box coordinate not usable, got {type(offending).__name__}",
            type(offending),
        )
    if len(elements) != BBOX_LENGTH:
        raise DecodeLengthError(len(elements))

    min_x, min_y, max_x, max_y = (float(element) for element in elements)
    return (min_x, min_y, max_x, max_y)
