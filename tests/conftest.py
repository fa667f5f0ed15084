"""Pytest configuration and shared fixtures for klaw-sampling tests."""

from __future__ import annotations

import pytest
from doubles import CountingSource
from klaw_sampling import _config
from klaw_sampling._logging import clear_log_hooks
from klaw_sampling.source import Xoroshiro128Plus


@pytest.fixture(autouse=True)
def reset_sampling_state():
    """Reset the process default source and log hooks around each test."""
    _config._config = None
    _config._default_source = None
    clear_log_hooks()
    yield
    _config._config = None
    _config._default_source = None
    clear_log_hooks()


@pytest.fixture
def rng() -> Xoroshiro128Plus:
    """Deterministic seeded source."""
    return Xoroshiro128Plus(seed=0xC0FFEE)


@pytest.fixture
def counting(rng: Xoroshiro128Plus) -> CountingSource:
    """Seeded source wrapped with a draw counter."""
    return CountingSource(rng)
