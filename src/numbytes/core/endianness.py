from __future__ import annotations

import sys
from enum import Enum
from typing import TYPE_CHECKING, Any, Literal, TypeAlias

from numbytes.core.config import BadConfigError, config

if TYPE_CHECKING:
    from numbytes.core.number import BytesLike, NumberType

__all__ = [
    "Endianness",
    "EndiannessLike",
    "EndiannessLiteral",
    "decode",
    "encode",
    "native_endianness",
    "parse_endianness",
]

EndiannessLiteral = Literal["native", "big", "little"]


class Endianness(Enum):
    """
    The order in which the bytes of a multi-byte number are arranged.

    ``NATIVE`` is whatever order the executing host uses, ``BIG`` puts the most
    significant byte first and ``LITTLE`` puts the least significant byte first.
    """

    NATIVE = "native"
    BIG = "big"
    LITTLE = "little"

    def resolve(self) -> Endianness:
        """Return the concrete ``BIG`` or ``LITTLE`` member this tag denotes on this host."""
        if self is Endianness.NATIVE:
            return native_endianness()
        return self


EndiannessLike: TypeAlias = Endianness | EndiannessLiteral


def native_endianness() -> Endianness:
    return Endianness.LITTLE if sys.byteorder == "little" else Endianness.BIG


def parse_endianness(data: object) -> Endianness:
    if isinstance(data, Endianness):
        return data
    if data not in ("native", "big", "little"):
        raise ValueError(f"Expected one of 'native', 'big' or 'little'. Got {data} instead.")
    return Endianness(data)


def _default_endianness() -> Endianness:
    value = config.get("endianness")
    try:
        return parse_endianness(value)
    except ValueError as e:
        raise BadConfigError(BadConfigError._msg % {"endianness": value}) from e


def encode(
    number_type: type[NumberType], value: Any, endianness: EndiannessLike | None = None
) -> bytes:
    """Return the bytes of ``value`` as a ``number_type`` in the requested byte order.

    Parameters
    ----------
    number_type : type[NumberType]
        The number type to encode as, e.g. ``UInt32``.
    value
        The value to encode.
    endianness : Endianness or {"native", "big", "little"}, optional
        The byte order. Defaults to the ``endianness`` config value.

    Returns
    -------
    bytes
        Exactly ``number_type.byte_width`` bytes.
    """
    order = _default_endianness() if endianness is None else parse_endianness(endianness)
    match order:
        case Endianness.NATIVE:
            return number_type.to_native_bytes(value)
        case Endianness.BIG:
            return number_type.to_big_endian_bytes(value)
        case Endianness.LITTLE:
            return number_type.to_little_endian_bytes(value)


def decode(
    number_type: type[NumberType], data: BytesLike, endianness: EndiannessLike | None = None
) -> Any:
    """Read ``data`` as a ``number_type`` stored in the requested byte order.

    Parameters
    ----------
    number_type : type[NumberType]
        The number type to decode as, e.g. ``UInt32``.
    data : BytesLike
        Exactly ``number_type.byte_width`` bytes.
    endianness : Endianness or {"native", "big", "little"}, optional
        The byte order. Defaults to the ``endianness`` config value.

    Returns
    -------
    The decoded value.

    Raises
    ------
    LengthMismatchError
        If ``data`` is not exactly ``number_type.byte_width`` bytes long.
    """
    order = _default_endianness() if endianness is None else parse_endianness(endianness)
    match order:
        case Endianness.NATIVE:
            return number_type.from_native_bytes(data)
        case Endianness.BIG:
            return number_type.from_big_endian_bytes(data)
        case Endianness.LITTLE:
            return number_type.from_little_endian_bytes(data)
