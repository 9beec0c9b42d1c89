"""
The config module is responsible for managing the configuration of numbytes and is based on the Donfig python library.
For selecting custom defaults or for testing, the configuration can be set or modified with `numbytes.config.set`.

Example:
    The default byte order used by ``encode`` and ``decode`` when none is passed
    can be changed for a block of code:

    ```python
    from numbytes import UInt16, config, encode

    with config.set({"endianness": "big"}):
        assert encode(UInt16, 1) == b"\\x00\\x01"
    ```

    The same key can be set from the environment with ``NUMBYTES_ENDIANNESS=big``.
"""

from __future__ import annotations

from typing import Any

from donfig import Config as DConfig


class BadConfigError(ValueError):
    _msg = "bad Config: %r"


class Config(DConfig):  # type: ignore[misc]
    """The Config will collect configuration from config files and environment variables

    Example environment variables:
    Grabs environment variables of the form "NUMBYTES_FOO__BAR_BAZ=123" and
    turns these into config variables of the form ``{"foo": {"bar-baz": 123}}``
    It transforms the key and value in the following way:

    -  Lower-cases the key text
    -  Treats ``__`` (double-underscore) as nested access
    -  Calls ``ast.literal_eval`` on the value

    """

    def reset(self) -> None:
        self.clear()
        self.refresh()


def _defaults() -> list[dict[str, Any]]:
    return [{"endianness": "native"}]


config = Config("numbytes", defaults=_defaults())
