"""Pytest configuration for pathtracer tests.

Shared fixtures: a seeded random generator and a few ready-made materials
and rays.
"""

import random

import pytest

from pathtracer.core.vector import Vector3
from pathtracer.materials.lambertian import Lambertian


@pytest.fixture
def rng():
    """Seeded generator so stochastic tests are repeatable."""
    return random.Random(1234)


@pytest.fixture
def gray():
    return Lambertian(Vector3(0.5, 0.5, 0.5))


def assert_vec(actual, expected, abs_tol=1e-9):
    """Compare a Vector3 against an (x, y, z) tuple."""
    assert tuple(actual) == pytest.approx(tuple(expected), abs=abs_tol)
