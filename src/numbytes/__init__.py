from numbytes.core.config import config
from numbytes.core.endianness import (
    Endianness,
    decode,
    encode,
    native_endianness,
    parse_endianness,
)
from numbytes.core.number import (
    Float32,
    Float64,
    Int8,
    Int16,
    Int32,
    Int64,
    Int128,
    ISize,
    NumberType,
    UInt8,
    UInt16,
    UInt32,
    UInt64,
    UInt128,
    USize,
)
from numbytes.errors import BaseNumBytesError, LengthMismatchError, UnknownNumberTypeError
from numbytes.registry import get_number_type, get_number_type_from_numpy, number_types

__version__ = "0.1.0"

__all__ = [
    "BaseNumBytesError",
    "Endianness",
    "Float32",
    "Float64",
    "ISize",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "Int128",
    "LengthMismatchError",
    "NumberType",
    "USize",
    "UInt8",
    "UInt16",
    "UInt32",
    "UInt64",
    "UInt128",
    "UnknownNumberTypeError",
    "__version__",
    "config",
    "decode",
    "encode",
    "get_number_type",
    "get_number_type_from_numpy",
    "native_endianness",
    "number_types",
    "parse_endianness",
]
