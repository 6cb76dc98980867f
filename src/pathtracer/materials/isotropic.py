# materials/isotropic.py
from typing import TYPE_CHECKING, Union

from pathtracer.core.ray import Ray
from pathtracer.core.utils import random_unit_vector
from pathtracer.core.vector import Color
from pathtracer.materials.material import Material, ScatterResult
from pathtracer.materials.textures import Texture, as_texture

if TYPE_CHECKING:
    from pathtracer.geometry.hittable import HitRecord


class Isotropic(Material):
    """Phase function of a participating medium: scatters uniformly in all directions."""
    def __init__(self, albedo: Union[Color, Texture]):
        self.texture = as_texture(albedo)

    def scatter(self, ray_in: Ray, rec: "HitRecord") -> ScatterResult:
        scattered = Ray(rec.p, random_unit_vector(), ray_in.time)
        return self.texture.value(rec.u, rec.v, rec.p), scattered
