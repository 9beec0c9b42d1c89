"""
# Overview

This module defines the closed set of fixed-width number types that numbytes converts to
and from raw bytes.

Each number type is a class deriving from `NumberType`. The classes are never instantiated:
the class itself is the type tag, and it carries everything needed to convert one value of
the type:

- ``name``, the canonical name of the type (e.g. ``"uint32"``)
- ``kind``, one of ``"uint"``, ``"int"`` or ``"float"``
- ``bit_width`` and ``byte_width``, where ``byte_width == bit_width // 8``
- ``to_numpy``, the native-order numpy dtype backing the type, or ``None`` when numpy has no
  dtype of that width

and the six conversion classmethods ``to_native_bytes``, ``to_big_endian_bytes``,
``to_little_endian_bytes``, ``from_native_bytes``, ``from_big_endian_bytes`` and
``from_little_endian_bytes``.

## Backends

The six conversions are written once, on `NumberType`, in terms of two primitives
(``_to_bytes`` and ``_from_bytes``) that take an explicit byte order. Two backends provide
those primitives:

- numpy-backed types pack the value into a one-element array of ``to_numpy`` and byteswap it
  when the requested order differs from the host's
- ``UInt128`` and ``Int128`` have no numpy dtype, so they are backed by Python ``int`` and
  ``int.to_bytes`` / ``int.from_bytes``

## Examples

```python
from numbytes.core.number import Float64, UInt32

UInt32.to_big_endian_bytes(0x12345678)  # b'\\x124Vx'
UInt32.from_little_endian_bytes(b"\\x78\\x56\\x34\\x12")  # np.uint32(305419896)
Float64.byte_width  # 8
```

Integer encodes reduce their input modulo ``2 ** bit_width``, the way a fixed-width cast does,
so that every encode is total. Decodes fail only when the input length differs from
``byte_width``.
"""

from __future__ import annotations

import operator
import sys
from collections.abc import Iterable
from typing import Any, ClassVar, Literal, TypeAlias

import numpy as np
from typing_extensions import Buffer

from numbytes.errors import LengthMismatchError

__all__ = [
    "NATIVE_BYTE_ORDER",
    "ByteOrder",
    "BytesLike",
    "Float32",
    "Float64",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "Int128",
    "ISize",
    "NumberKind",
    "NumberType",
    "UInt8",
    "UInt16",
    "UInt32",
    "UInt64",
    "UInt128",
    "USize",
]

ByteOrder = Literal["<", ">"]
NumberKind = Literal["uint", "int", "float"]

NATIVE_BYTE_ORDER: ByteOrder = "<" if sys.byteorder == "little" else ">"

BytesLike: TypeAlias = Buffer | Iterable[int]
"""Anything that can be read as a byte sequence by ``bytes()``."""

_BYTE_ORDER_NAMES: dict[ByteOrder, Literal["little", "big"]] = {"<": "little", ">": "big"}


# number type attributes can not be reassigned once set
class FrozenClassVariables(type):
    def __setattr__(cls, attr: str, value: object) -> None:
        if hasattr(cls, attr):
            raise ValueError(f"Attribute {attr} on NumberType class can not be changed once set.")
        super().__setattr__(attr, value)


def _wrap_integer(value: Any, bit_width: int, signed: bool) -> int:
    """Reduce an integer into the range of a ``bit_width``-bit integer type."""
    wrapped = operator.index(value) % (1 << bit_width)
    if signed and wrapped >= 1 << (bit_width - 1):
        wrapped -= 1 << bit_width
    return wrapped


class NumberType(metaclass=FrozenClassVariables):
    name: ClassVar[str]
    kind: ClassVar[NumberKind]
    bit_width: ClassVar[int]
    byte_width: ClassVar[int]
    to_numpy: ClassVar[np.dtype[Any] | None]  # None when numpy has no dtype of this width

    def __init_subclass__(  # enforces all required fields are set and basic sanity checks
        cls,
        abstract: bool = False,
        **kwargs: object,
    ) -> None:
        super().__init_subclass__(**kwargs)
        if abstract:
            return

        required_attrs = [
            "name",
            "kind",
            "bit_width",
            "to_numpy",
        ]
        for attr in required_attrs:
            if not hasattr(cls, attr):
                raise ValueError(f"{attr} is a required attribute for a number type.")

        # set on the new class itself, so subclasses of concrete types stay definable
        if "byte_width" not in cls.__dict__:
            type.__setattr__(cls, "byte_width", cls.bit_width // 8)
        cls._validate()  # sanity check on basic requirements

    @classmethod
    def _validate(cls) -> None:
        if cls.bit_width <= 0 or cls.bit_width % 8 != 0:
            raise ValueError("bit_width must be a positive multiple of 8.")
        if cls.byte_width != cls.bit_width // 8:
            raise ValueError(
                f"byte_width must be {cls.bit_width // 8} for a bit_width of {cls.bit_width}."
            )
        if cls.to_numpy is not None:
            if cls.to_numpy.itemsize != cls.byte_width:
                raise ValueError(
                    f"to_numpy has an itemsize of {cls.to_numpy.itemsize}, expected {cls.byte_width}."
                )
            if not cls.to_numpy.isnative:
                raise ValueError("to_numpy must be a native byte order dtype.")

    @classmethod
    def to_native_bytes(cls, value: Any) -> bytes:
        """Return the memory representation of ``value`` in the host's byte order.

        The result is always ``byte_width`` bytes long.
        """
        return cls._to_bytes(value, NATIVE_BYTE_ORDER)

    @classmethod
    def to_big_endian_bytes(cls, value: Any) -> bytes:
        """Return the memory representation of ``value`` in big-endian (network) byte order.

        The result is always ``byte_width`` bytes long.
        """
        return cls._to_bytes(value, ">")

    @classmethod
    def to_little_endian_bytes(cls, value: Any) -> bytes:
        """Return the memory representation of ``value`` in little-endian byte order.

        The result is always ``byte_width`` bytes long.
        """
        return cls._to_bytes(value, "<")

    @classmethod
    def from_native_bytes(cls, data: BytesLike) -> Any:
        """Create a value from its memory representation in the host's byte order.

        Raises
        ------
        LengthMismatchError
            If ``data`` is not exactly ``byte_width`` bytes long.
        """
        return cls._from_bytes(cls._check_length(data), NATIVE_BYTE_ORDER)

    @classmethod
    def from_big_endian_bytes(cls, data: BytesLike) -> Any:
        """Create a value from its memory representation in big-endian byte order.

        Raises
        ------
        LengthMismatchError
            If ``data`` is not exactly ``byte_width`` bytes long.
        """
        return cls._from_bytes(cls._check_length(data), ">")

    @classmethod
    def from_little_endian_bytes(cls, data: BytesLike) -> Any:
        """Create a value from its memory representation in little-endian byte order.

        Raises
        ------
        LengthMismatchError
            If ``data`` is not exactly ``byte_width`` bytes long.
        """
        return cls._from_bytes(cls._check_length(data), "<")

    @classmethod
    def _check_length(cls, data: BytesLike) -> bytes:
        # bytes(n) would silently produce n zero bytes
        if isinstance(data, int):
            raise TypeError(f"Expected a bytes-like object, got {data} with type {type(data)}")
        buf = bytes(data)
        if len(buf) != cls.byte_width:
            raise LengthMismatchError(cls.byte_width, len(buf), cls.name)
        return buf

    @classmethod
    def _to_bytes(cls, value: Any, byteorder: ByteOrder) -> bytes:
        raise NotImplementedError

    @classmethod
    def _from_bytes(cls, data: bytes, byteorder: ByteOrder) -> Any:
        raise NotImplementedError


class _NumpyNumberType(NumberType, abstract=True):
    to_numpy: ClassVar[np.dtype[Any]]

    @classmethod
    def _as_array(cls, value: Any) -> np.ndarray[Any, np.dtype[Any]]:
        if cls.kind != "float":
            return np.array(
                _wrap_integer(value, cls.bit_width, cls.kind == "int"), dtype=cls.to_numpy
            )
        # numpy would parse strings and turn None into nan
        if value is None or isinstance(value, str | bytes | bytearray | memoryview):
            raise TypeError(f"Expected a real number, got {value!r} with type {type(value)}")
        try:
            # out of range floats become inf, as with any narrowing float cast
            with np.errstate(over="ignore"):
                arr = np.array(value, dtype=cls.to_numpy)
        except OverflowError:
            # integers too large to convert to a Python float
            arr = np.array(np.inf if value > 0 else -np.inf, dtype=cls.to_numpy)
        if arr.ndim != 0:
            raise TypeError(f"Expected a scalar, got {value!r} with shape {arr.shape}")
        return arr

    @classmethod
    def _to_bytes(cls, value: Any, byteorder: ByteOrder) -> bytes:
        arr = cls._as_array(value)
        if byteorder != NATIVE_BYTE_ORDER:
            arr = arr.byteswap()
        return arr.tobytes()

    @classmethod
    def _from_bytes(cls, data: bytes, byteorder: ByteOrder) -> Any:
        arr = np.frombuffer(data, dtype=cls.to_numpy)
        if byteorder != NATIVE_BYTE_ORDER:
            arr = arr.byteswap()
        return arr[0]


class _PythonIntNumberType(NumberType, abstract=True):
    to_numpy: ClassVar[None]

    @classmethod
    def _to_bytes(cls, value: Any, byteorder: ByteOrder) -> bytes:
        signed = cls.kind == "int"
        return _wrap_integer(value, cls.bit_width, signed).to_bytes(
            cls.byte_width, _BYTE_ORDER_NAMES[byteorder], signed=signed
        )

    @classmethod
    def _from_bytes(cls, data: bytes, byteorder: ByteOrder) -> int:
        return int.from_bytes(data, _BYTE_ORDER_NAMES[byteorder], signed=cls.kind == "int")


class UInt8(_NumpyNumberType):
    name = "uint8"
    kind = "uint"
    bit_width = 8
    to_numpy = np.dtype("uint8")


class UInt16(_NumpyNumberType):
    name = "uint16"
    kind = "uint"
    bit_width = 16
    to_numpy = np.dtype("uint16")


class UInt32(_NumpyNumberType):
    name = "uint32"
    kind = "uint"
    bit_width = 32
    to_numpy = np.dtype("uint32")


class UInt64(_NumpyNumberType):
    name = "uint64"
    kind = "uint"
    bit_width = 64
    to_numpy = np.dtype("uint64")


class UInt128(_PythonIntNumberType):
    """Unsigned 128-bit integer. Decodes to a Python ``int``."""

    name = "uint128"
    kind = "uint"
    bit_width = 128
    to_numpy = None


class USize(_NumpyNumberType):
    """Unsigned integer as wide as a pointer on the host."""

    name = "usize"
    kind = "uint"
    bit_width = np.dtype(np.uintp).itemsize * 8
    to_numpy = np.dtype(np.uintp)


class Int8(_NumpyNumberType):
    name = "int8"
    kind = "int"
    bit_width = 8
    to_numpy = np.dtype("int8")


class Int16(_NumpyNumberType):
    name = "int16"
    kind = "int"
    bit_width = 16
    to_numpy = np.dtype("int16")


class Int32(_NumpyNumberType):
    name = "int32"
    kind = "int"
    bit_width = 32
    to_numpy = np.dtype("int32")


class Int64(_NumpyNumberType):
    name = "int64"
    kind = "int"
    bit_width = 64
    to_numpy = np.dtype("int64")


class Int128(_PythonIntNumberType):
    """Signed (two's complement) 128-bit integer. Decodes to a Python ``int``."""

    name = "int128"
    kind = "int"
    bit_width = 128
    to_numpy = None


class ISize(_NumpyNumberType):
    """Signed integer as wide as a pointer on the host."""

    name = "isize"
    kind = "int"
    bit_width = np.dtype(np.intp).itemsize * 8
    to_numpy = np.dtype(np.intp)


class Float32(_NumpyNumberType):
    name = "float32"
    kind = "float"
    bit_width = 32
    to_numpy = np.dtype("float32")


class Float64(_NumpyNumberType):
    name = "float64"
    kind = "float"
    bit_width = 64
    to_numpy = np.dtype("float64")
