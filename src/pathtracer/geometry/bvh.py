# geometry/bvh.py
import logging
from typing import List, Optional, Sequence

from pathtracer.core.aabb import AABB
from pathtracer.core.errors import SceneError
from pathtracer.core.interval import Interval
from pathtracer.core.ray import Ray
from pathtracer.core.utils import random_int
from pathtracer.geometry.hittable import Hittable, HitRecord

logger = logging.getLogger(__name__)


def _box_min(obj: Hittable, axis: int) -> float:
    return obj.bounding_box().axis(axis).min


class BVHNode(Hittable):
    """
    Bounding volume hierarchy node.

    Each node splits its objects along a randomly chosen axis, ordered by the
    minimum of their bounding boxes on that axis, and recurses on the two
    halves. A single object is stored on both sides. The node box is the
    union of the children's boxes and is computed once.
    """
    def __init__(self, objects: List[Hittable], start: int, end: int):
        object_span = end - start
        if object_span <= 0:
            raise SceneError("Cannot build a BVH node over an empty range of objects")

        axis = random_int(0, 2)

        if object_span == 1:
            self.left = self.right = objects[start]
        elif object_span == 2:
            first, second = objects[start], objects[start + 1]
            if _box_min(first, axis) < _box_min(second, axis):
                self.left, self.right = first, second
            else:
                self.left, self.right = second, first
        else:
            objects[start:end] = sorted(objects[start:end],
                                        key=lambda obj: _box_min(obj, axis))
            mid = start + object_span // 2
            self.left = BVHNode(objects, start, mid)
            self.right = BVHNode(objects, mid, end)

        self.box = AABB.surrounding_box(self.left.bounding_box(), self.right.bounding_box())

    @classmethod
    def from_list(cls, objects: Sequence[Hittable]) -> "BVHNode":
        """
        Builds a tree over the members of a HittableList (or any sequence)
        without reordering the caller's objects.
        """
        items = list(objects)
        if not items:
            raise SceneError("Cannot build a BVH from an empty list of objects")
        logger.debug("Building BVH over %d objects", len(items))
        return cls(items, 0, len(items))

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        if not self.box.hit(ray, ray_t):
            return None

        hit_left = self.left.hit(ray, ray_t)

        # The right branch may only report something closer than the left hit.
        right_t = Interval(ray_t.min, hit_left.t if hit_left is not None else ray_t.max)
        hit_right = self.right.hit(ray, right_t)

        return hit_right if hit_right is not None else hit_left

    def bounding_box(self) -> AABB:
        return self.box

    def depth(self) -> int:
        left = self.left.depth() if isinstance(self.left, BVHNode) else 0
        right = self.right.depth() if isinstance(self.right, BVHNode) else 0
        return 1 + max(left, right)
