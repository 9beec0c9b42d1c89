from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import numpy as np

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
from numbytes.errors import UnknownNumberTypeError

if TYPE_CHECKING:
    import numpy.typing as npt

__all__ = [
    "get_number_type",
    "get_number_type_from_numpy",
    "number_types",
]

_logger = logging.getLogger(__name__)

_NUMBER_TYPES: tuple[type[NumberType], ...] = (
    UInt8,
    UInt16,
    UInt32,
    UInt64,
    UInt128,
    USize,
    Int8,
    Int16,
    Int32,
    Int64,
    Int128,
    ISize,
    Float32,
    Float64,
)

_SHORT_PREFIXES = {"uint": "u", "int": "i", "float": "f"}


class _Registry:
    by_name: dict[str, type[NumberType]]
    by_numpy: dict[tuple[str, int], type[NumberType]]

    def __init__(self) -> None:
        self.by_name = {}
        self.by_numpy = {}

    def register(self, number_type: type[NumberType]) -> None:
        names = {number_type.name}
        if number_type.name not in ("usize", "isize"):
            names.add(f"{_SHORT_PREFIXES[number_type.kind]}{number_type.bit_width}")
        for name in names:
            self.by_name[name] = number_type

        # pointer-width dtypes compare equal to the fixed-width dtype of the same size,
        # so the first registration (the fixed-width type) wins
        if number_type.to_numpy is not None:
            key = (number_type.to_numpy.kind, number_type.to_numpy.itemsize)
            self.by_numpy.setdefault(key, number_type)
        _logger.debug("Registered number type %s under %s", number_type.__name__, sorted(names))


_registry = _Registry()
for _number_type in _NUMBER_TYPES:
    _registry.register(_number_type)


def number_types() -> tuple[type[NumberType], ...]:
    """Return every supported number type, unsigned integers first, then signed, then floats."""
    return _NUMBER_TYPES


def get_number_type(name: str) -> type[NumberType]:
    """Look up a number type by its name, e.g. ``"uint32"`` or ``"u32"``.

    The lookup is case-insensitive.

    Raises
    ------
    UnknownNumberTypeError
        If no number type has that name.
    """
    try:
        return _registry.by_name[name.lower()]
    except KeyError as e:
        raise UnknownNumberTypeError(name) from e


def get_number_type_from_numpy(dtype: npt.DTypeLike) -> type[NumberType]:
    """Look up the number type matching a numpy dtype.

    The byte order of ``dtype`` is ignored, so ``">u4"`` and ``"<u4"`` both map to
    ``UInt32``. Pointer-width dtypes map to the fixed-width type of the same size.

    Raises
    ------
    UnknownNumberTypeError
        If ``dtype`` is not a dtype, or no number type matches it.
    """
    # np.dtype(None) is float64
    if dtype is None:
        raise UnknownNumberTypeError(dtype)
    try:
        np_dtype: np.dtype[Any] = np.dtype(dtype)
    except TypeError as e:
        raise UnknownNumberTypeError(dtype) from e
    try:
        return _registry.by_numpy[(np_dtype.kind, np_dtype.itemsize)]
    except KeyError as e:
        raise UnknownNumberTypeError(dtype) from e
