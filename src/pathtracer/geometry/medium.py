# geometry/medium.py
import math
from typing import Optional, Union

from pathtracer.core.aabb import AABB
from pathtracer.core.errors import SceneError
from pathtracer.core.interval import Interval
from pathtracer.core.ray import Ray
from pathtracer.core.utils import random_double
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import Hittable, HitRecord
from pathtracer.materials.isotropic import Isotropic
from pathtracer.materials.textures import Texture

# Gap between the entry crossing and the search for the exit crossing.
EXIT_SEARCH_EPSILON = 0.0001


class ConstantMedium(Hittable):
    """
    A volume of constant density (fog, smoke) filling a boundary shape.

    A ray travelling through the volume scatters after a random free-flight
    distance drawn from an exponential distribution; if that distance is
    longer than the ray's path inside the boundary it passes straight through.

    The boundary must be convex: the ray is assumed to cross it exactly twice.
    """
    def __init__(self, boundary: Hittable, density: float, albedo: Union[Vector3, Texture]):
        if density <= 0:
            raise SceneError(f"Medium density must be positive, got {density}")
        self.boundary = boundary
        self.density = density
        self.neg_inv_density = -1.0 / density
        self.phase_function = Isotropic(albedo)

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        rec1 = self.boundary.hit(ray, Interval.UNIVERSE)
        if rec1 is None:
            return None

        rec2 = self.boundary.hit(ray, Interval(rec1.t + EXIT_SEARCH_EPSILON, math.inf))
        if rec2 is None:
            return None

        t_enter = max(rec1.t, ray_t.min)
        t_exit = min(rec2.t, ray_t.max)
        if t_enter >= t_exit:
            return None
        if t_enter < 0:
            t_enter = 0.0

        ray_length = ray.direction.length()
        distance_inside_boundary = (t_exit - t_enter) * ray_length
        # 1 - U lies in (0, 1], so the logarithm is always finite.
        hit_distance = self.neg_inv_density * math.log(1.0 - random_double())

        if hit_distance > distance_inside_boundary:
            return None

        rec = HitRecord()
        rec.t = t_enter + hit_distance / ray_length
        rec.p = ray.at(rec.t)
        rec.normal = Vector3(1, 0, 0)  # arbitrary
        rec.front_face = True          # also arbitrary
        rec.material = self.phase_function
        return rec

    def bounding_box(self) -> AABB:
        return self.boundary.bounding_box()
