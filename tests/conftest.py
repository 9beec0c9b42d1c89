from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from numbytes.core.config import config

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture(autouse=True)
def reset_config() -> Generator[None, None, None]:
    config.reset()
    yield
    config.reset()
