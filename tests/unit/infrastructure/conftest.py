"""Fixtures for the HTTP layer."""

import pytest

from mailticket.infrastructure.api.rate_limit import limiter


@pytest.fixture(autouse=True)
def reset_limiter():
    limiter.reset()
    yield
    limiter.reset()
