# materials/dielectric.py
import math
from typing import TYPE_CHECKING

from pathtracer.core.ray import Ray
from pathtracer.core.utils import random_double, reflect, refract
from pathtracer.core.vector import Color
from pathtracer.materials.material import Material, ScatterResult

if TYPE_CHECKING:
    from pathtracer.geometry.hittable import HitRecord

WHITE = Color(1.0, 1.0, 1.0)


class Dielectric(Material):
    """
    Clear material (glass, water) that refracts or reflects.

    refraction_index is relative to the surrounding medium.
    """
    def __init__(self, refraction_index: float):
        self.refraction_index = refraction_index

    def scatter(self, ray_in: Ray, rec: "HitRecord") -> ScatterResult:
        # Determine if we're entering or exiting the material
        ri = 1.0 / self.refraction_index if rec.front_face else self.refraction_index

        unit_direction = ray_in.direction.normalize()
        cos_theta = min(-unit_direction.dot(rec.normal), 1.0)
        sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))

        cannot_refract = ri * sin_theta > 1.0
        if cannot_refract or reflectance(cos_theta, ri) > random_double():
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refract(unit_direction, rec.normal, ri)

        # Glass doesn't absorb light
        return WHITE, Ray(rec.p, direction, ray_in.time)


def reflectance(cosine: float, refraction_index: float) -> float:
    """
    Schlick's approximation for reflectance.
    """
    # Matched media form no interface, so nothing is reflected.
    if refraction_index == 1.0:
        return 0.0
    r0 = (1.0 - refraction_index) / (1.0 + refraction_index)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow(1.0 - cosine, 5)
