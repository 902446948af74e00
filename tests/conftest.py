"""Pytest configuration and shared fixtures."""

import numpy as np
import pytest

from rami_utils.config import configure
from rami_utils.handles import Transform


@pytest.fixture
def identity_rotation():
    """Fixture providing the identity quaternion (x, y, z, w)."""
    return np.array([0.0, 0.0, 0.0, 1.0])


@pytest.fixture
def quarter_turn_z():
    """Fixture providing a 90 degree rotation about +Z."""
    half = np.pi / 4
    return np.array([0.0, 0.0, np.sin(half), np.cos(half)])


@pytest.fixture
def origin_transform():
    """Fixture providing a handle at the origin with identity rotation."""
    return Transform()


@pytest.fixture
def bounds_checks():
    """Enable debug bounds warnings for one test, then restore defaults."""
    configure({"debug_bounds_checks": True})
    yield
    configure()
