"""Unit tests for the instance wrappers.

Tests cover:
- Translate: shifted hits and bounding box
- RotateX / RotateY / RotateZ: hit point and normal mapping
- Rotation round trips between object and world space
- Rotated bounding boxes enclosing every rotated corner
"""

import math

import pytest

from pathtracer.core.interval import Interval
from pathtracer.core.ray import Ray
from pathtracer.core.utils import random_vector
from pathtracer.core.vector import Point3, Vector3
from pathtracer.geometry import RotateX, RotateY, RotateZ, Sphere, Translate, box

RAY_T = Interval(0.001, math.inf)


class TestTranslate:
    """Tests for Translate."""

    def test_hit_is_shifted(self, white_lambertian):
        sphere = Sphere(Point3(0, 0, 0), 1.0, white_lambertian)
        moved = Translate(sphere, Vector3(0, 0, -5))

        rec = moved.hit(Ray(Point3(0, 0, 0), Vector3(0, 0, -1)), RAY_T)
        assert rec is not None
        assert rec.t == pytest.approx(4.0)
        assert rec.p.is_close(Point3(0, 0, -4), 1e-12)
        assert rec.normal.is_close(Vector3(0, 0, 1), 1e-12)

    def test_original_position_is_empty(self, white_lambertian):
        sphere = Sphere(Point3(0, 0, 0), 1.0, white_lambertian)
        moved = Translate(sphere, Vector3(10, 0, 0))
        assert moved.hit(Ray(Point3(0, 0, 5), Vector3(0, 0, -1)), RAY_T) is None

    def test_bounding_box_is_shifted(self, white_lambertian):
        sides = box(Point3(0, 0, 0), Point3(1, 1, 1), white_lambertian)
        moved = Translate(sides, Vector3(2, 3, 4))
        bbox = moved.bounding_box()
        assert bbox.minimum.is_close(Point3(2, 3, 4))
        assert bbox.maximum.is_close(Point3(3, 4, 5))

    def test_hit_point_on_world_ray(self, white_lambertian):
        moved = Translate(Sphere(Point3(0.2, 0.1, 0), 0.8, white_lambertian), Vector3(1, -2, -6))
        ray = Ray(Point3(0, 0, 0), Vector3(1.1, -1.9, -6))
        rec = moved.hit(ray, RAY_T)
        assert rec is not None
        assert ray.at(rec.t).is_close(rec.p, 1e-9)


class TestRotate:
    """Tests for the axis rotations."""

    @pytest.mark.parametrize("wrapper, local, world", [
        (RotateX, Vector3(0, 1, 0), Vector3(0, 0, 1)),
        (RotateY, Vector3(0, 0, 1), Vector3(1, 0, 0)),
        (RotateY, Vector3(1, 0, 0), Vector3(0, 0, -1)),
        (RotateZ, Vector3(1, 0, 0), Vector3(0, 1, 0)),
    ])
    def test_quarter_turn_is_right_handed(self, wrapper, local, world, white_lambertian):
        rotated = wrapper(Sphere(Point3(0, 0, 0), 1.0, white_lambertian), 90)
        assert rotated.to_world(local).is_close(world, 1e-12)
        assert rotated.to_object(world).is_close(local, 1e-12)

    def test_rotated_sphere_hit(self, white_lambertian):
        """A sphere at +x rotated 90 degrees about Y ends up at -z."""
        sphere = Sphere(Point3(1, 0, 0), 0.5, white_lambertian)
        rotated = RotateY(sphere, 90)

        rec = rotated.hit(Ray(Point3(0, 0, 0), Vector3(0, 0, -1)), RAY_T)
        assert rec is not None
        assert rec.t == pytest.approx(0.5)
        assert rec.p.is_close(Point3(0, 0, -0.5), 1e-9)
        assert rec.normal.is_close(Vector3(0, 0, 1), 1e-9)
        assert rec.front_face

    def test_rotated_box_normal_is_world_space(self, white_lambertian):
        sides = box(Point3(-1, -1, -1), Point3(1, 1, 1), white_lambertian)
        rotated = RotateZ(sides, 45)
        rec = rotated.hit(Ray(Point3(5, 0.3, 0), Vector3(-1, 0, 0)), RAY_T)
        assert rec is not None
        # The upper right face now lies on the line x + y = sqrt(2).
        assert rec.p.x == pytest.approx(math.sqrt(2) - 0.3)
        assert rec.normal.is_close(Vector3(1, 1, 0).normalize(), 1e-9)
        assert rec.normal.length() == pytest.approx(1.0)
        assert rec.normal.dot(Vector3(-1, 0, 0)) < 0

    @pytest.mark.parametrize("wrapper", [RotateX, RotateY, RotateZ])
    def test_round_trip(self, wrapper, white_lambertian):
        rotated = wrapper(Sphere(Point3(0, 0, 0), 1.0, white_lambertian), 37.5)
        for _ in range(50):
            p = random_vector(-10, 10)
            assert rotated.to_object(rotated.to_world(p)).is_close(p, 1e-9)
            assert rotated.to_world(rotated.to_object(p)).is_close(p, 1e-9)

    @pytest.mark.parametrize("wrapper", [RotateX, RotateY, RotateZ])
    @pytest.mark.parametrize("angle", [0, 15, 45, 90, -18, 200])
    def test_bounding_box_contains_rotated_corners(self, wrapper, angle, white_lambertian):
        sides = box(Point3(0, 0, 0), Point3(165, 330, 165), white_lambertian)
        rotated = wrapper(sides, angle)
        bbox = rotated.bounding_box()
        for corner in sides.bounding_box().corners():
            p = rotated.to_world(corner)
            for a in range(3):
                assert bbox.axis(a).min - 1e-9 <= p[a] <= bbox.axis(a).max + 1e-9

    def test_nested_wrappers(self, white_lambertian):
        sides = box(Point3(0, 0, 0), Point3(165, 330, 165), white_lambertian)
        placed = Translate(RotateY(sides, 15), Vector3(265, 0, 295))
        ray = Ray(Point3(278, 100, -800), Vector3(0, 0, 1))
        rec = placed.hit(ray, RAY_T)
        assert rec is not None
        assert ray.at(rec.t).is_close(rec.p, 1e-6)
        assert placed.bounding_box().z.contains(rec.p.z)
