# geometry/transforms.py
"""
Instance wrappers that place a hittable in a transformed frame without
copying its geometry.
"""
import math
from typing import Optional, Tuple

from pathtracer.core.aabb import AABB
from pathtracer.core.interval import Interval
from pathtracer.core.ray import Ray
from pathtracer.core.utils import degrees_to_radians
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import Hittable, HitRecord


class Translate(Hittable):
    """
    Moves the wrapped object by offset.
    """
    def __init__(self, obj: Hittable, offset: Vector3):
        self.object = obj
        self.offset = offset
        self.bbox = obj.bounding_box() + offset

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        # Move the ray backwards by the offset, into object space.
        offset_ray = Ray(ray.origin - self.offset, ray.direction, ray.time)

        rec = self.object.hit(offset_ray, ray_t)
        if rec is None:
            return None

        rec.p = rec.p + self.offset
        return rec

    def bounding_box(self) -> AABB:
        return self.bbox


class Rotate(Hittable):
    """
    Rotates the wrapped object about one coordinate axis through the origin.

    Subclasses name the pair of components (i, j) the rotation mixes; the
    remaining component is left alone. The forward (object to world)
    transform is

        i' = cos * i - sin * j
        j' = sin * i + cos * j

    and the inverse flips the sign of the sin terms.
    """
    plane: Tuple[int, int] = (0, 1)

    def __init__(self, obj: Hittable, angle: float):
        self.object = obj
        self.angle = angle
        radians = degrees_to_radians(angle)
        self.sin_theta = math.sin(radians)
        self.cos_theta = math.cos(radians)

        # A rotated box is not axis aligned; enclose all eight rotated corners.
        lo = [math.inf, math.inf, math.inf]
        hi = [-math.inf, -math.inf, -math.inf]
        for corner in obj.bounding_box().corners():
            rotated = self.to_world(corner)
            for c in range(3):
                lo[c] = min(lo[c], rotated[c])
                hi[c] = max(hi[c], rotated[c])
        self.bbox = AABB(Interval(lo[0], hi[0]), Interval(lo[1], hi[1]), Interval(lo[2], hi[2]))

    def _rotate(self, v: Vector3, sin_theta: float) -> Vector3:
        i, j = self.plane
        components = [v.x, v.y, v.z]
        a, b = components[i], components[j]
        components[i] = self.cos_theta * a - sin_theta * b
        components[j] = sin_theta * a + self.cos_theta * b
        return Vector3(*components)

    def to_world(self, v: Vector3) -> Vector3:
        return self._rotate(v, self.sin_theta)

    def to_object(self, v: Vector3) -> Vector3:
        return self._rotate(v, -self.sin_theta)

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        rotated_ray = Ray(self.to_object(ray.origin), self.to_object(ray.direction), ray.time)

        rec = self.object.hit(rotated_ray, ray_t)
        if rec is None:
            return None

        rec.p = self.to_world(rec.p)
        rec.normal = self.to_world(rec.normal)
        return rec

    def bounding_box(self) -> AABB:
        return self.bbox

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.object!r}, {self.angle})"


class RotateX(Rotate):
    plane = (1, 2)


class RotateY(Rotate):
    plane = (2, 0)


class RotateZ(Rotate):
    plane = (0, 1)
