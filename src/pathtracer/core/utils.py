# core/utils.py
"""
Random sampling helpers and vector reflection/refraction.

All randomness is drawn from one numpy Generator per process. The renderer
reseeds it at the start of every image row, which keeps a render
reproducible no matter how rows are distributed over worker processes.
"""
import math
from typing import Optional, Union

import numpy as np

from pathtracer.core.vector import Vector3

_rng = np.random.default_rng()


def get_rng() -> np.random.Generator:
    return _rng


def seed_rng(seed: Union[int, np.random.SeedSequence, None]) -> np.random.Generator:
    """
    Replace the process generator with a fresh one built from seed.
    """
    global _rng
    _rng = np.random.default_rng(seed)
    return _rng


def random_double(low: float = 0.0, high: float = 1.0) -> float:
    """
    Uniform float in [low, high).
    """
    return low + (high - low) * _rng.random()


def random_int(low: int, high: int) -> int:
    """
    Uniform integer in [low, high], both ends inclusive.
    """
    return int(_rng.integers(low, high + 1))


def random_vector(low: float = 0.0, high: float = 1.0) -> Vector3:
    x, y, z = _rng.uniform(low, high, 3)
    return Vector3(float(x), float(y), float(z))


def random_unit_vector() -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    """
    while True:
        p = random_vector(-1.0, 1.0)
        lensq = p.length_squared()
        # Reject points so close to the centre that normalising underflows.
        if 1e-160 < lensq <= 1.0:
            return p / math.sqrt(lensq)


def random_in_unit_disk() -> Vector3:
    """Random point in the unit disk on the z = 0 plane, used for defocus blur."""
    while True:
        x, y = _rng.uniform(-1.0, 1.0, 2)
        p = Vector3(float(x), float(y), 0.0)
        if p.length_squared() < 1.0:
            return p


def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * (2 * v.dot(n))


def refract(uv: Vector3, n: Vector3, etai_over_etat: float) -> Vector3:
    """
    Bends unit vector uv through a surface with unit normal n (Snell's law).
    """
    cos_theta = min(-uv.dot(n), 1.0)
    r_out_perp = (uv + n * cos_theta) * etai_over_etat
    r_out_parallel = n * -math.sqrt(abs(1.0 - r_out_perp.length_squared()))
    return r_out_perp + r_out_parallel


def degrees_to_radians(degrees: float) -> float:
    return degrees * math.pi / 180.0


def as_vector(value: Optional[Union[Vector3, tuple, list]]) -> Optional[Vector3]:
    """Accepts a Vector3 or any 3-sequence of numbers."""
    if value is None or isinstance(value, Vector3):
        return value
    x, y, z = value
    return Vector3(float(x), float(y), float(z))
