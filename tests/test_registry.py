from __future__ import annotations

import logging
import re

import numpy as np
import pytest

from numbytes.core.number import (
    Float32,
    Float64,
    Int8,
    Int32,
    Int64,
    Int128,
    ISize,
    UInt8,
    UInt32,
    UInt64,
    UInt128,
    USize,
)
from numbytes.errors import UnknownNumberTypeError
from numbytes.registry import (
    _Registry,
    get_number_type,
    get_number_type_from_numpy,
    number_types,
)


def test_number_types() -> None:
    types = number_types()
    assert len(types) == 14
    assert len(set(types)) == 14
    assert types[0] is UInt8
    assert types[-1] is Float64


class TestGetNumberType:
    @staticmethod
    @pytest.mark.parametrize("number_type", number_types())
    def test_canonical_name(number_type: type) -> None:
        assert get_number_type(number_type.name) is number_type  # type: ignore[attr-defined]

    @staticmethod
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("u8", UInt8),
            ("u128", UInt128),
            ("i8", Int8),
            ("i128", Int128),
            ("f32", Float32),
            ("f64", Float64),
            ("UINT32", UInt32),
            ("Float32", Float32),
            ("USIZE", USize),
            ("isize", ISize),
        ],
    )
    def test_aliases(name: str, expected: type) -> None:
        assert get_number_type(name) is expected

    @staticmethod
    @pytest.mark.parametrize("name", ["uint24", "u", "float16", "complex64", ""])
    def test_unknown(name: str) -> None:
        msg = f"No number type matches {name!r}."
        with pytest.raises(UnknownNumberTypeError, match=re.escape(msg)):
            get_number_type(name)


class TestGetNumberTypeFromNumpy:
    @staticmethod
    @pytest.mark.parametrize(
        ("dtype", "expected"),
        [
            (np.uint8, UInt8),
            (">u4", UInt32),
            ("<u4", UInt32),
            (np.dtype("uint64"), UInt64),
            ("int8", Int8),
            (">i4", Int32),
            (np.int64, Int64),
            (">f4", Float32),
            (np.float64, Float64),
        ],
    )
    def test_lookup(dtype: object, expected: type) -> None:
        assert get_number_type_from_numpy(dtype) is expected  # type: ignore[arg-type]

    @staticmethod
    def test_pointer_width_maps_to_fixed_width() -> None:
        signed = get_number_type_from_numpy(np.intp)
        unsigned = get_number_type_from_numpy(np.uintp)
        assert signed.kind == "int"
        assert signed.byte_width == ISize.byte_width
        assert signed is not ISize
        assert unsigned.kind == "uint"
        assert unsigned.byte_width == USize.byte_width
        assert unsigned is not USize

    @staticmethod
    @pytest.mark.parametrize("dtype", ["float16", "complex64", "bool", "S4", "datetime64[s]"])
    def test_unsupported_dtype(dtype: str) -> None:
        with pytest.raises(UnknownNumberTypeError):
            get_number_type_from_numpy(dtype)

    @staticmethod
    def test_not_a_dtype() -> None:
        with pytest.raises(UnknownNumberTypeError):
            get_number_type_from_numpy("not a dtype")

    @staticmethod
    def test_none_is_not_float64() -> None:
        with pytest.raises(UnknownNumberTypeError, match=re.escape("No number type matches None.")):
            get_number_type_from_numpy(None)


def test_register_logs(caplog: pytest.LogCaptureFixture) -> None:
    registry = _Registry()
    with caplog.at_level(logging.DEBUG, logger="numbytes.registry"):
        registry.register(UInt32)
    assert "Registered number type UInt32" in caplog.text
    assert registry.by_name["uint32"] is UInt32
    assert registry.by_name["u32"] is UInt32
    assert registry.by_numpy[("u", 4)] is UInt32
