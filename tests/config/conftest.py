from __future__ import annotations

import pytest

from muggle_assert.config.loader import configure, get_settings


@pytest.fixture(autouse=True)
def restore_settings():
    previous = get_settings()
    yield
    configure(previous)
