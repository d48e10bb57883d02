"""Pytest configuration and shared fixtures for dfmin tests.

This module provides:
- A deterministic numpy RNG fixture
- Restoration of the process-wide debug toggle after every test
"""

import os

import numpy as np
import pytest

from dfmin.debug_mode import is_debug_enabled, set_debug_enabled


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def restore_debug_mode():
    """Keep a test that flips debug mode from leaking into the next one."""
    original = is_debug_enabled()
    yield
    set_debug_enabled(original)
