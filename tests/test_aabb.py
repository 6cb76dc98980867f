"""Unit tests for axis-aligned bounding boxes.

Tests cover:
- Construction from points and from two boxes
- Minimum-width padding of flat boxes
- Slab intersection, including rays parallel to a slab
- Offsetting and corner enumeration
"""

import math

from pathtracer.core.aabb import AABB, MIN_AXIS_WIDTH
from pathtracer.core.interval import Interval
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3


class TestAABBConstruction:
    """Tests for building boxes."""

    def test_from_points_orders_corners(self):
        box = AABB.from_points(Vector3(1, 5, -2), Vector3(-1, 2, 3))
        assert box.x == Interval(-1, 1)
        assert box.y == Interval(2, 5)
        assert box.z == Interval(-2, 3)

    def test_flat_box_is_padded(self):
        """A degenerate axis still gets a nonzero width."""
        box = AABB.from_points(Vector3(0, 0, 0), Vector3(1, 1, 0))
        assert box.z.size() >= MIN_AXIS_WIDTH
        assert box.z.contains(0.0)
        assert box.x == Interval(0, 1)

    def test_surrounding_box(self):
        a = AABB.from_points(Vector3(0, 0, 0), Vector3(1, 1, 1))
        b = AABB.from_points(Vector3(2, -1, 0), Vector3(3, 0, 4))
        union = AABB.surrounding_box(a, b)
        assert union.contains_box(a)
        assert union.contains_box(b)
        assert union.minimum == Vector3(0, -1, 0)
        assert union.maximum == Vector3(3, 1, 4)

    def test_empty_box_is_identity_for_union(self):
        a = AABB.from_points(Vector3(0, 0, 0), Vector3(1, 1, 1))
        union = AABB.surrounding_box(AABB.EMPTY, a)
        assert union.x == a.x and union.y == a.y and union.z == a.z

    def test_axis_access(self):
        box = AABB(Interval(0, 1), Interval(2, 3), Interval(4, 5))
        assert box.axis(0) == Interval(0, 1)
        assert box.axis(1) == Interval(2, 3)
        assert box.axis(2) == Interval(4, 5)

    def test_offset(self):
        box = AABB.from_points(Vector3(0, 0, 0), Vector3(1, 1, 1)) + Vector3(1, 2, 3)
        assert box.minimum == Vector3(1, 2, 3)
        assert box.maximum == Vector3(2, 3, 4)

    def test_corners(self):
        corners = AABB.from_points(Vector3(0, 0, 0), Vector3(1, 2, 3)).corners()
        assert len(corners) == 8
        assert Vector3(0, 0, 0) in corners
        assert Vector3(1, 2, 3) in corners
        assert Vector3(1, 0, 3) in corners


class TestAABBHit:
    """Tests for slab intersection."""

    unit_box = AABB.from_points(Vector3(-1, -1, -1), Vector3(1, 1, 1))

    def test_ray_through_box(self):
        ray = Ray(Vector3(0, 0, 5), Vector3(0, 0, -1))
        assert self.unit_box.hit(ray, Interval(0, math.inf))

    def test_ray_missing_box(self):
        ray = Ray(Vector3(3, 0, 5), Vector3(0, 0, -1))
        assert not self.unit_box.hit(ray, Interval(0, math.inf))

    def test_box_outside_interval(self):
        ray = Ray(Vector3(0, 0, 5), Vector3(0, 0, -1))
        assert not self.unit_box.hit(ray, Interval(0, 3))

    def test_box_behind_ray(self):
        ray = Ray(Vector3(0, 0, 5), Vector3(0, 0, 1))
        assert not self.unit_box.hit(ray, Interval(0, math.inf))

    def test_diagonal_ray(self):
        ray = Ray(Vector3(-5, -5, -5), Vector3(1, 1, 1))
        assert self.unit_box.hit(ray, Interval(0, math.inf))

    def test_flat_box_hit_head_on(self):
        flat = AABB.from_points(Vector3(-1, -1, 0), Vector3(1, 1, 0))
        ray = Ray(Vector3(0, 0, 5), Vector3(0, 0, -1))
        assert flat.hit(ray, Interval(0.001, math.inf))
