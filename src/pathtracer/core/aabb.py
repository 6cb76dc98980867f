# core/aabb.py
from typing import List

from pathtracer.core.interval import Interval
from pathtracer.core.vector import Vector3

# Smallest extent an axis may have; flat primitives are padded up to it.
MIN_AXIS_WIDTH = 0.0001


class AABB:
    """
    Axis-aligned bounding box stored as one interval per axis.

    Every axis is padded to at least MIN_AXIS_WIDTH so that degenerate boxes
    (a quad lying in an axis plane, for example) can still be hit.
    """
    __slots__ = ("x", "y", "z")

    def __init__(self, x: Interval = Interval.EMPTY, y: Interval = Interval.EMPTY,
                 z: Interval = Interval.EMPTY):
        self.x = x
        self.y = y
        self.z = z
        self._pad_to_minimums()

    @classmethod
    def from_points(cls, a: Vector3, b: Vector3) -> "AABB":
        """Box spanning the two points, treated as opposite corners."""
        return cls(
            Interval(min(a.x, b.x), max(a.x, b.x)),
            Interval(min(a.y, b.y), max(a.y, b.y)),
            Interval(min(a.z, b.z), max(a.z, b.z)),
        )

    @staticmethod
    def surrounding_box(box0: "AABB", box1: "AABB") -> "AABB":
        return AABB(
            Interval.union(box0.x, box1.x),
            Interval.union(box0.y, box1.y),
            Interval.union(box0.z, box1.z),
        )

    def _pad_to_minimums(self):
        # Empty intervals have negative size and are left alone.
        if 0 <= self.x.size() < MIN_AXIS_WIDTH:
            self.x = self.x.expand(MIN_AXIS_WIDTH)
        if 0 <= self.y.size() < MIN_AXIS_WIDTH:
            self.y = self.y.expand(MIN_AXIS_WIDTH)
        if 0 <= self.z.size() < MIN_AXIS_WIDTH:
            self.z = self.z.expand(MIN_AXIS_WIDTH)

    def axis(self, n: int) -> Interval:
        if n == 1:
            return self.y
        if n == 2:
            return self.z
        return self.x

    @property
    def minimum(self) -> Vector3:
        return Vector3(self.x.min, self.y.min, self.z.min)

    @property
    def maximum(self) -> Vector3:
        return Vector3(self.x.max, self.y.max, self.z.max)

    def hit(self, ray, ray_t: Interval) -> bool:
        # Slab method: narrow the parameter window axis by axis.
        t_min = ray_t.min
        t_max = ray_t.max
        for a in range(3):
            ax = self.axis(a)
            origin = ray.origin[a]
            direction = ray.direction[a]
            if direction == 0.0:
                # Parallel to this slab: inside it for every t, or never.
                if origin < ax.min or origin > ax.max:
                    return False
                continue
            inv_d = 1.0 / direction
            t0 = (ax.min - origin) * inv_d
            t1 = (ax.max - origin) * inv_d
            if inv_d < 0:
                t0, t1 = t1, t0
            if t0 > t_min:
                t_min = t0
            if t1 < t_max:
                t_max = t1
            if t_max <= t_min:
                return False
        return True

    def contains_box(self, other: "AABB", tol: float = 1e-9) -> bool:
        for a in range(3):
            mine = self.axis(a)
            theirs = other.axis(a)
            if theirs.min < mine.min - tol or theirs.max > mine.max + tol:
                return False
        return True

    def corners(self) -> List[Vector3]:
        return [
            Vector3(x, y, z)
            for x in (self.x.min, self.x.max)
            for y in (self.y.min, self.y.max)
            for z in (self.z.min, self.z.max)
        ]

    def __add__(self, offset: Vector3) -> "AABB":
        return AABB(self.x + offset.x, self.y + offset.y, self.z + offset.z)

    def __reduce__(self):
        return (AABB, (self.x, self.y, self.z))

    def __repr__(self) -> str:
        return f"AABB({self.x!r}, {self.y!r}, {self.z!r})"


AABB.EMPTY = AABB(Interval.EMPTY, Interval.EMPTY, Interval.EMPTY)
AABB.UNIVERSE = AABB(Interval.UNIVERSE, Interval.UNIVERSE, Interval.UNIVERSE)
