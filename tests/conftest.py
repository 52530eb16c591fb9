from __future__ import annotations

import pytest

from mono_event.config import reset_config


@pytest.fixture(autouse=True)
def restore_default_config():
    """Keep process-wide defaults from leaking between tests."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def recorder():
    """List plus a handler that appends every value it receives."""
    calls: list = []

    def handler(value):
        calls.append(value)

    handler.calls = calls  # type: ignore[attr-defined]
    return handler
