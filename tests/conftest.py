"""Pytest configuration file with shared point-set fixtures."""

import numpy as np
import pytest


@pytest.fixture
def quadratic_points():
    """Four equally spaced samples of y = x**2."""
    return [(0.0, 0.0), (1.0, 1.0), (2.0, 4.0), (3.0, 9.0)]


@pytest.fixture
def equally_spaced_points():
    """Six equally spaced samples with seeded random values."""
    rng = np.random.default_rng(12345)
    x = -1.0 + 0.5 * np.arange(6)
    y = rng.normal(size=6)
    return list(zip(x.tolist(), y.tolist()))


@pytest.fixture
def irregular_points():
    """Five irregularly spaced samples of cos(x), given out of order."""
    x = np.array([1.1, -1.3, 2.7, 0.4, -0.2])
    return list(zip(x.tolist(), np.cos(x).tolist()))
