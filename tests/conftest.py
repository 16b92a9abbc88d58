"""Pytest configuration and shared fixtures."""

import numpy as np
import pytest

from treelights.core.points import PointCloud


@pytest.fixture
def cone_tree() -> PointCloud:
    """
    A 250-LED string spiralling up a cone, like a real tree.

    Heights run from 0 to 2.0 and the radius shrinks from 0.8 to 0 at the top.
    """
    n = 250
    t = np.linspace(0.0, 1.0, n)
    angle = t * 2 * np.pi * 12
    radius = 0.8 * (1.0 - t)
    coords = np.column_stack([
        radius * np.cos(angle),
        radius * np.sin(angle),
        2.0 * t,
    ])
    return PointCloud(coords)


@pytest.fixture
def single_point() -> PointCloud:
    return PointCloud([(0.0, 0.0, 0.0)])


@pytest.fixture
def vertical_line() -> PointCloud:
    """Eight LEDs stacked straight up the trunk, one per unit of height."""
    return PointCloud([(0.0, 0.0, float(z)) for z in range(8)])


@pytest.fixture
def random_cloud() -> PointCloud:
    rng = np.random.default_rng(7)
    xy = rng.uniform(-0.5, 0.5, size=(60, 2))
    z = rng.uniform(0.0, 1.5, size=(60, 1))
    return PointCloud(np.hstack([xy, z]))
