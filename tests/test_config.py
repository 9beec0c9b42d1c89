from __future__ import annotations

import pytest

from numbytes import UInt16, config, decode, encode
from numbytes.core.config import BadConfigError


def test_config_defaults_set() -> None:
    assert config.get("endianness") == "native"


def test_config_set_is_scoped() -> None:
    with config.set({"endianness": "big"}):
        assert config.get("endianness") == "big"
        assert encode(UInt16, 0x0102) == b"\x01\x02"
    assert config.get("endianness") == "native"


def test_config_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NUMBYTES_ENDIANNESS", "little")
    config.refresh()
    assert config.get("endianness") == "little"
    assert encode(UInt16, 0x0102) == b"\x02\x01"


def test_config_reset() -> None:
    config.set({"endianness": "big"})
    assert config.get("endianness") == "big"
    config.reset()
    assert config.get("endianness") == "native"


@pytest.mark.parametrize("value", ["network", ">"])
def test_bad_config(value: str) -> None:
    with config.set({"endianness": value}):
        with pytest.raises(BadConfigError, match="bad Config"):
            encode(UInt16, 1)
        with pytest.raises(BadConfigError, match="bad Config"):
            decode(UInt16, b"\x00\x01")
