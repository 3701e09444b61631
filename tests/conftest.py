"""Shared test fixtures for map2d tests."""

import pytest

from map2d import Map2D, random_map2d


@pytest.fixture
def empty_map():
    """Fresh empty map."""
    return Map2D()


@pytest.fixture
def sample_map():
    """Small map with two rows sharing column ``x``."""
    m = Map2D()
    m.put("A", "x", 1)
    m.put("A", "y", 2)
    m.put("B", "x", 3)
    return m


@pytest.fixture
def random_map():
    """Seeded random sparse map."""
    return random_map2d(12, 9, density=0.4, rng=7)
