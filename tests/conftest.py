"""Pytest configuration for path tracer tests.

Provides shared fixtures: a seeded random generator for every test, and a few
small materials and scenes reused across modules.
"""

import pytest

from pathtracer.core.utils import seed_rng
from pathtracer.core.vector import Color, Point3
from pathtracer.geometry import HittableList, Sphere
from pathtracer.materials import Lambertian


@pytest.fixture(autouse=True)
def seeded_rng():
    """Seed the process generator so every test is reproducible."""
    return seed_rng(20240601)


@pytest.fixture
def white_lambertian():
    return Lambertian(Color(1.0, 1.0, 1.0))


@pytest.fixture
def single_sphere_world(white_lambertian):
    """One sphere of radius 0.5 at (0, 0, -1), straight ahead of the default camera."""
    return HittableList(Sphere(Point3(0, 0, -1), 0.5, white_lambertian))
