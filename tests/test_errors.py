from __future__ import annotations

import pytest

from numbytes.errors import BaseNumBytesError, LengthMismatchError, UnknownNumberTypeError


@pytest.mark.parametrize("error", [LengthMismatchError(4, 3), UnknownNumberTypeError("x")])
def test_errors_are_value_errors(error: BaseNumBytesError) -> None:
    assert isinstance(error, BaseNumBytesError)
    assert isinstance(error, ValueError)


def test_length_mismatch_error() -> None:
    error = LengthMismatchError(8, 0, "float64")
    assert error.expected == 8
    assert error.actual == 0
    assert str(error) == "Expected 8 bytes for float64. Got 0 bytes."


def test_length_mismatch_error_default_type_name() -> None:
    assert str(LengthMismatchError(2, 5)) == "Expected 2 bytes for this number type. Got 5 bytes."


def test_unknown_number_type_error() -> None:
    assert str(UnknownNumberTypeError("u24")) == "No number type matches 'u24'."
    assert str(UnknownNumberTypeError("custom", "message")) == "('custom', 'message')"
