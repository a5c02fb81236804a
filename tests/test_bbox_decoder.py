"""Mini README: Tests for the bbox override decoder.

Covers absent values, numeric lists, tuples and arrays, type errors for
non-numeric values or elements, and the four-value length check.
"""

from __future__ import annotations

import numpy as np
import pytest

from geobounds.geometry import (
    BoundingBoxDecodeError,
    DecodeLengthError,
    DecodeTypeError,
    RawBoundingBoxKind,
    classify_bounding_box,
    decode_bounding_box,
)


def test_absent_value_means_no_override() -> None:
    assert decode_bounding_box(None) is None
    assert classify_bounding_box(None) is RawBoundingBoxKind.ABSENT


def test_numeric_sequence_is_copied_through() -> None:
    assert decode_bounding_box([1.0, 2.0, 3.0, 4.0]) == (1.0, 2.0, 3.0, 4.0)


def test_integers_tuples_and_arrays_are_converted_to_floats() -> None:
    decoded = decode_bounding_box((0, -1, 2, 3))
    assert decoded == (0.0, -1.0, 2.0, 3.0)
    assert all(isinstance(value, float) for value in decoded)
    assert decode_bounding_box(np.array([0.5, 1.5, 2.5, 3.5])) == (0.5, 1.5, 2.5, 3.5)


def test_non_numeric_element_names_its_type() -> None:
    with pytest.raises(DecodeTypeError) as excinfo:
        decode_bounding_box(["a", 2.0, 3.0, 4.0])
    assert excinfo.value.actual_type is str
    assert "str" in str(excinfo.value)


def test_booleans_are_not_numbers() -> None:
    with pytest.raises(DecodeTypeError) as excinfo:
        decode_bounding_box([True, 0.0, 1.0, 1.0])
    assert excinfo.value.actual_type is bool


@pytest.mark.parametrize("raw, type_name", [(42, "int"), ("0,0,1,1", "str"), ({"min_x": 0}, "dict")])
def test_non_sequence_values_are_rejected(raw, type_name) -> None:
    with pytest.raises(DecodeTypeError) as excinfo:
        decode_bounding_box(raw)
    assert type_name in str(excinfo.value)
    assert classify_bounding_box(raw) is RawBoundingBoxKind.INVALID


@pytest.mark.parametrize("raw", [[], [1.0, 2.0, 3.0], [0, 0, 1, 1, 5, 5]])
def test_wrong_length_is_rejected(raw) -> None:
    with pytest.raises(DecodeLengthError) as excinfo:
        decode_bounding_box(raw)
    assert excinfo.value.length == len(raw)


def test_decode_errors_share_a_value_error_base() -> None:
    assert issubclass(DecodeTypeError, BoundingBoxDecodeError)
    assert issubclass(DecodeLengthError, BoundingBoxDecodeError)
    assert issubclass(BoundingBoxDecodeError, ValueError)
    assert issubclass(DecodeTypeError, TypeError)
