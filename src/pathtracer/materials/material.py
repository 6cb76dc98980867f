# materials/material.py
from typing import TYPE_CHECKING, Optional, Tuple

from pathtracer.core.ray import Ray
from pathtracer.core.vector import Color, Vector3

if TYPE_CHECKING:
    from pathtracer.geometry.hittable import HitRecord

BLACK = Color(0.0, 0.0, 0.0)

# (attenuation, scattered ray)
ScatterResult = Optional[Tuple[Color, Ray]]


class Material:
    """
    Abstract material class. Subclasses must implement scatter().

    Materials hold no reference to geometry and are shared read-only by
    every object and hit record that uses them.
    """
    def scatter(self, ray_in: Ray, rec: "HitRecord") -> ScatterResult:
        """
        Computes the attenuation and scattered ray.
        Returns a tuple (attenuation, scattered_ray) or None if the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")

    def emitted(self, u: float, v: float, p: Vector3) -> Color:
        """
        Radiance emitted at the surface point. Black unless the material is a light.
        """
        return BLACK
