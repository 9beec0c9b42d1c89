__all__ = [
    "BaseNumBytesError",
    "LengthMismatchError",
    "UnknownNumberTypeError",
]


class BaseNumBytesError(ValueError):
    """
    Base class for numbytes errors.
    """


class LengthMismatchError(BaseNumBytesError):
    """
    Raised when a byte sequence presented for decoding does not have exactly
    the byte width of the target number type.

    The expected width and the observed length are kept on the exception as
    ``expected`` and ``actual``.
    """

    _msg = "Expected {} bytes for {}. Got {} bytes."

    expected: int
    actual: int

    def __init__(self, expected: int, actual: int, type_name: str = "this number type") -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(self._msg.format(expected, type_name, actual))


class UnknownNumberTypeError(BaseNumBytesError):
    """Raised when no number type matches a name or numpy dtype."""

    _msg = "No number type matches {!r}."

    def __init__(self, *args: object) -> None:
        if len(args) == 1:
            super().__init__(self._msg.format(args[0]))
        else:
            super().__init__(*args)
