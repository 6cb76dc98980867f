"""Unit tests for the hittable list and the bounding volume hierarchy.

Tests cover:
- Closest-hit selection in a linear scan
- Bounding box union growth on insertion
- BVH traversal agreeing with a linear scan on random scenes
- BVH bounding boxes enclosing every child
- Rejection of empty input
"""

import math

import pytest

from pathtracer.core.errors import SceneError
from pathtracer.core.interval import Interval
from pathtracer.core.ray import Ray
from pathtracer.core.utils import random_double, random_unit_vector, random_vector
from pathtracer.core.vector import Point3, Vector3
from pathtracer.geometry import BVHNode, HittableList, Quad, Sphere


def random_scene(count, material):
    """A mix of spheres and quads scattered through a 20-unit cube."""
    world = HittableList()
    for n in range(count):
        center = random_vector(-10, 10)
        if n % 3 == 2:
            world.add(Quad(center, random_vector(-2, 2), random_vector(-2, 2), material))
        else:
            world.add(Sphere(center, random_double(0.2, 2.0), material))
    return world


def random_rays(count):
    rays = []
    for _ in range(count):
        origin = random_vector(-15, 15)
        # Aim roughly through the scene so most rays have something to hit.
        target = random_vector(-8, 8)
        direction = target - origin
        if direction.near_zero():
            direction = random_unit_vector()
        rays.append(Ray(origin, direction))
    return rays


class TestHittableList:
    """Tests for the linear-scan composite."""

    def test_empty_list_misses(self):
        world = HittableList()
        ray = Ray(Point3(0, 0, 0), Vector3(0, 0, -1))
        assert world.hit(ray, Interval(0.001, math.inf)) is None

    def test_reports_closest_hit(self, white_lambertian):
        far = Sphere(Point3(0, 0, -10), 1.0, white_lambertian)
        near = Sphere(Point3(0, 0, -4), 1.0, white_lambertian)
        world = HittableList()
        world.add(far)
        world.add(near)

        rec = world.hit(Ray(Point3(0, 0, 0), Vector3(0, 0, -1)), Interval(0.001, math.inf))
        assert rec.t == pytest.approx(3.0)

    def test_closest_hit_independent_of_order(self, white_lambertian):
        near = Sphere(Point3(0, 0, -4), 1.0, white_lambertian)
        far = Sphere(Point3(0, 0, -10), 1.0, white_lambertian)
        world = HittableList()
        world.add(near)
        world.add(far)

        rec = world.hit(Ray(Point3(0, 0, 0), Vector3(0, 0, -1)), Interval(0.001, math.inf))
        assert rec.t == pytest.approx(3.0)

    def test_bounding_box_grows_on_add(self, white_lambertian):
        world = HittableList(Sphere(Point3(0, 0, 0), 1.0, white_lambertian))
        world.add(Sphere(Point3(5, 0, 0), 1.0, white_lambertian))
        bbox = world.bounding_box()
        assert bbox.x == Interval(-1, 6)
        for obj in world:
            assert bbox.contains_box(obj.bounding_box())

    def test_clear(self, white_lambertian):
        world = HittableList(Sphere(Point3(0, 0, 0), 1.0, white_lambertian))
        world.clear()
        assert len(world) == 0
        assert world.hit(Ray(Point3(0, 0, 5), Vector3(0, 0, -1)), Interval(0.001, math.inf)) is None


class TestBVH:
    """Tests for BVH construction and traversal."""

    @pytest.mark.parametrize("count", [1, 2, 3, 50])
    def test_matches_linear_scan(self, count, white_lambertian):
        """The tree reports the same closest hit as scanning every object."""
        world = random_scene(count, white_lambertian)
        bvh = BVHNode.from_list(world)
        ray_t = Interval(0.001, math.inf)

        hits = 0
        for ray in random_rays(300):
            expected = world.hit(ray, ray_t)
            actual = bvh.hit(ray, ray_t)
            if expected is None:
                assert actual is None
                continue
            hits += 1
            assert actual is not None
            assert actual.t == pytest.approx(expected.t, rel=1e-9, abs=1e-9)
            assert actual.p.is_close(expected.p, 1e-6)
            assert ray_t.contains(actual.t)
            assert ray.at(actual.t).is_close(actual.p, 1e-6)
        assert hits > 0

    @pytest.mark.parametrize("count", [1, 2, 3, 50])
    def test_box_contains_children(self, count, white_lambertian):
        world = random_scene(count, white_lambertian)
        bvh = BVHNode.from_list(world)
        for obj in world:
            assert bvh.bounding_box().contains_box(obj.bounding_box())

        def check(node):
            if not isinstance(node, BVHNode):
                return
            assert node.bounding_box().contains_box(node.left.bounding_box())
            assert node.bounding_box().contains_box(node.right.bounding_box())
            check(node.left)
            check(node.right)

        check(bvh)

    def test_single_object_aliases_both_branches(self, white_lambertian):
        sphere = Sphere(Point3(0, 0, -2), 1.0, white_lambertian)
        bvh = BVHNode.from_list([sphere])
        assert bvh.left is sphere
        assert bvh.right is sphere

    def test_two_objects_ordered_on_some_axis(self, white_lambertian):
        a = Sphere(Point3(-5, -5, -5), 1.0, white_lambertian)
        b = Sphere(Point3(5, 5, 5), 1.0, white_lambertian)
        bvh = BVHNode.from_list([b, a])
        # a is smaller on every axis, so it always lands on the left.
        assert bvh.left is a
        assert bvh.right is b

    def test_build_does_not_reorder_source_list(self, white_lambertian):
        world = random_scene(10, white_lambertian)
        before = list(world.objects)
        BVHNode.from_list(world)
        assert world.objects == before

    def test_tree_is_balanced(self, white_lambertian):
        world = random_scene(64, white_lambertian)
        assert BVHNode.from_list(world).depth() == 6

    def test_empty_input_rejected(self):
        with pytest.raises(SceneError):
            BVHNode.from_list(HittableList())

    def test_miss_outside_root_box(self, white_lambertian):
        world = random_scene(20, white_lambertian)
        bvh = BVHNode.from_list(world)
        ray = Ray(Point3(100, 100, 100), Vector3(1, 0, 0))
        assert bvh.hit(ray, Interval(0.001, math.inf)) is None
