# materials/metal.py
from typing import TYPE_CHECKING, Union

from pathtracer.core.ray import Ray
from pathtracer.core.utils import random_unit_vector, reflect
from pathtracer.core.vector import Color
from pathtracer.materials.material import Material, ScatterResult
from pathtracer.materials.textures import Texture, as_texture

if TYPE_CHECKING:
    from pathtracer.geometry.hittable import HitRecord


class Metal(Material):
    """
    Metal material with reflective properties and optional texture support.

    fuzz (clamped to 1) blurs the mirror reflection by a random offset of
    that radius.
    """
    def __init__(self, albedo: Union[Color, Texture], fuzz: float = 0.0):
        self.texture = as_texture(albedo)
        self.fuzz = min(fuzz, 1.0)

    def scatter(self, ray_in: Ray, rec: "HitRecord") -> ScatterResult:
        reflected = reflect(ray_in.direction, rec.normal).normalize()
        if self.fuzz > 0:
            reflected = reflected + random_unit_vector() * self.fuzz
        scattered = Ray(rec.p, reflected, ray_in.time)

        # Absorb the ray if it does not scatter away from the surface.
        if scattered.direction.dot(rec.normal) <= 0:
            return None
        return self.texture.value(rec.u, rec.v, rec.p), scattered
