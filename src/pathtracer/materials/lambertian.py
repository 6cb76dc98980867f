# materials/lambertian.py
from typing import TYPE_CHECKING, Union

from pathtracer.core.ray import Ray
from pathtracer.core.utils import random_unit_vector
from pathtracer.core.vector import Color
from pathtracer.materials.material import Material, ScatterResult
from pathtracer.materials.textures import Texture, as_texture

if TYPE_CHECKING:
    from pathtracer.geometry.hittable import HitRecord


class Lambertian(Material):
    """
    Lambertian diffuse material with optional texture support.
    """
    def __init__(self, albedo: Union[Color, Texture]):
        self.texture = as_texture(albedo)

    def scatter(self, ray_in: Ray, rec: "HitRecord") -> ScatterResult:
        # Normal plus a random unit vector gives a cosine-weighted direction.
        scatter_direction = rec.normal + random_unit_vector()

        # Catch degenerate scatter direction
        if scatter_direction.near_zero():
            scatter_direction = rec.normal

        scattered = Ray(rec.p, scatter_direction, ray_in.time)
        attenuation = self.texture.value(rec.u, rec.v, rec.p)
        return attenuation, scattered
