# geometry/quad.py
from typing import Optional

from pathtracer.core.aabb import AABB
from pathtracer.core.interval import Interval
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import Hittable, HitRecord
from pathtracer.geometry.world import HittableList

UNIT_INTERVAL = Interval(0.0, 1.0)


class Quad(Hittable):
    """
    A parallelogram with corner q and edges u and v.

    The hit point is expressed in the plane basis (alpha, beta) relative to q;
    the point is inside when both lie in [0, 1], and they double as the
    surface (u, v) coordinates.
    """
    def __init__(self, q: Vector3, u: Vector3, v: Vector3, material):
        self.q = q
        self.u = u
        self.v = v
        self.material = material

        n = u.cross(v)
        self.normal = n.normalize()
        self.d = self.normal.dot(q)
        self.w = n / n.dot(n) if not n.near_zero() else Vector3(0, 0, 0)

        # Both diagonals, so a box is valid even for a skewed parallelogram.
        box_diagonal1 = AABB.from_points(q, q + u + v)
        box_diagonal2 = AABB.from_points(q + u, q + v)
        self.bbox = AABB.surrounding_box(box_diagonal1, box_diagonal2)

    def bounding_box(self) -> AABB:
        return self.bbox

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        denom = self.normal.dot(ray.direction)

        # No hit if the ray is parallel to the plane.
        if abs(denom) < 1e-8:
            return None

        t = (self.d - self.normal.dot(ray.origin)) / denom
        if not ray_t.contains(t):
            return None

        intersection = ray.at(t)
        planar_hitpt_vector = intersection - self.q
        alpha = self.w.dot(planar_hitpt_vector.cross(self.v))
        beta = self.w.dot(self.u.cross(planar_hitpt_vector))

        if not (UNIT_INTERVAL.contains(alpha) and UNIT_INTERVAL.contains(beta)):
            return None

        rec = HitRecord()
        rec.t = t
        rec.p = intersection
        rec.u = alpha
        rec.v = beta
        rec.material = self.material
        rec.set_face_normal(ray, self.normal)
        return rec


def box(a: Vector3, b: Vector3, material) -> HittableList:
    """
    Returns the 3D box (six sides) that contains the two opposite vertices a and b.
    """
    sides = HittableList()

    lo = Vector3(min(a.x, b.x), min(a.y, b.y), min(a.z, b.z))
    hi = Vector3(max(a.x, b.x), max(a.y, b.y), max(a.z, b.z))

    dx = Vector3(hi.x - lo.x, 0, 0)
    dy = Vector3(0, hi.y - lo.y, 0)
    dz = Vector3(0, 0, hi.z - lo.z)

    sides.add(Quad(Vector3(lo.x, lo.y, hi.z), dx, dy, material))   # front
    sides.add(Quad(Vector3(hi.x, lo.y, hi.z), -dz, dy, material))  # right
    sides.add(Quad(Vector3(hi.x, lo.y, lo.z), -dx, dy, material))  # back
    sides.add(Quad(Vector3(lo.x, lo.y, lo.z), dz, dy, material))   # left
    sides.add(Quad(Vector3(lo.x, hi.y, hi.z), dx, -dz, material))  # top
    sides.add(Quad(Vector3(lo.x, lo.y, lo.z), dx, dz, material))   # bottom

    return sides
