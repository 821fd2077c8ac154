"""
Shared fixtures.
"""

import pendulum
import pytest

TZ = "Europe/Berlin"

FROZEN_NOW = pendulum.datetime(2024, 6, 1, 14, 37, 22, 123456, tz=TZ)


@pytest.fixture
def frozen_now(monkeypatch):
    """Pin pendulum.now() to 2024-06-01 14:37:22 Europe/Berlin."""

    def fake_now(tz=None):
        return FROZEN_NOW if tz is None else FROZEN_NOW.in_timezone(tz)

    monkeypatch.setattr(pendulum, "now", fake_now)
    return FROZEN_NOW
