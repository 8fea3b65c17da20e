"""
Pytest configuration and fixtures.

This file is automatically loaded by pytest and provides
shared fixtures for all tests.
"""

from datetime import datetime, timezone

import pytest

from sportshub.config import get_settings
from sportshub.state import StateAuthority, reset_authority

FIXED_NOW = datetime(2026, 2, 19, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def isolated_globals(monkeypatch):
    """
    Keep cached settings and the process-wide authority out of other tests.

    Settings are re-read for every test so environment overrides set with
    monkeypatch take effect.
    """
    for name in ("SPORTSHUB_SEED_PLAYER_NAMES", "SPORTSHUB_SUBSCRIBER_MAX_PENDING", "SPORTSHUB_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    reset_authority()
    yield
    reset_authority()
    get_settings.cache_clear()


@pytest.fixture
def fixed_now():
    return FIXED_NOW


@pytest.fixture
def authority(fixed_now):
    """
    Create an isolated authority with a fixed clock.

    The seed roster has three players so tests can pick a bystander.
    """
    return StateAuthority(
        seed_names=["Alice", "Bruno", "Chen"],
        clock=lambda: fixed_now,
        max_pending=0,
    )


@pytest.fixture
def seeded(authority):
    """An authority whose roster has been seeded."""
    authority.seed_players()
    return authority
