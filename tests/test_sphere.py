"""Unit tests for sphere intersection.

Tests cover:
- Ray hitting sphere from outside (front face)
- Ray missing sphere
- Ray starting inside sphere (back face)
- Root selection against the [t_min, t_max] interval
- Surface (u, v) mapping and bounding box
"""

import math
import random

import pytest

from conftest import assert_vec
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.sphere import Sphere


@pytest.fixture
def unit_sphere(gray):
    return Sphere(Vector3(0, 0, 0), 1.0, gray)


class TestSphereIntersection:
    """Tests for ray-sphere intersection."""

    def test_direct_hit(self, unit_sphere, gray):
        """Ray from z=5 pointing toward the origin hits at t=4."""
        ray = Ray(Vector3(0, 0, 5), Vector3(0, 0, -1))
        rec = unit_sphere.hit(ray, 0.001, 1000.0)

        assert rec is not None
        assert rec.t == pytest.approx(4.0)
        assert_vec(rec.p, (0, 0, 1))
        assert_vec(rec.normal, (0, 0, 1))
        assert rec.front_face
        assert rec.material is gray

    def test_miss(self, unit_sphere):
        ray = Ray(Vector3(0, 2, 5), Vector3(0, 0, -1))
        assert unit_sphere.hit(ray, 0.001, 1000.0) is None

    def test_non_unit_direction(self, unit_sphere):
        ray = Ray(Vector3(0, 0, 5), Vector3(0, 0, -2))
        rec = unit_sphere.hit(ray, 0.001, 1000.0)
        assert rec.t == pytest.approx(2.0)
        assert_vec(rec.p, (0, 0, 1))

    def test_from_inside_is_back_face(self, unit_sphere):
        ray = Ray(Vector3(0, 0, 0), Vector3(0, 0, 1))
        rec = unit_sphere.hit(ray, 0.001, 1000.0)

        assert rec.t == pytest.approx(1.0)
        assert not rec.front_face
        # Outward normal is (0,0,1); the stored one opposes the ray
        assert_vec(rec.normal, (0, 0, -1))

    def test_falls_back_to_far_root(self, unit_sphere):
        """With the near root below t_min the far root is reported."""
        ray = Ray(Vector3(0, 0, 5), Vector3(0, 0, -1))
        rec = unit_sphere.hit(ray, 4.5, 1000.0)
        assert rec.t == pytest.approx(6.0)
        assert not rec.front_face

    def test_both_roots_out_of_range(self, unit_sphere):
        ray = Ray(Vector3(0, 0, 5), Vector3(0, 0, -1))
        assert unit_sphere.hit(ray, 0.001, 3.0) is None
        assert unit_sphere.hit(ray, 7.0, 1000.0) is None

    def test_normal_always_opposes_ray(self, unit_sphere):
        rng = random.Random(3)
        for _ in range(500):
            origin = Vector3(*(rng.uniform(-3, 3) for _ in range(3)))
            direction = Vector3(*(rng.uniform(-1, 1) for _ in range(3)))
            rec = unit_sphere.hit(Ray(origin, direction), 0.001, math.inf)
            if rec is not None:
                assert rec.normal.dot(direction) <= 0


class TestSphereSurface:
    """Tests for (u, v) and the bounding box."""

    @pytest.mark.parametrize(
        "point, uv",
        [
            ((1, 0, 0), (0.5, 0.5)),
            ((0, 1, 0), (0.5, 1.0)),
            ((0, -1, 0), (0.5, 0.0)),
            ((-1, 0, 0), (1.0, 0.5)),
            ((0, 0, 1), (0.25, 0.5)),
            ((0, 0, -1), (0.75, 0.5)),
        ],
    )
    def test_get_uv(self, point, uv):
        assert Sphere.get_uv(Vector3(*point)) == pytest.approx(uv)

    def test_hit_reports_uv(self, unit_sphere):
        ray = Ray(Vector3(5, 0, 0), Vector3(-1, 0, 0))
        rec = unit_sphere.hit(ray, 0.001, 1000.0)
        assert (rec.u, rec.v) == pytest.approx((0.5, 0.5))

    def test_bounding_box(self, gray):
        box = Sphere(Vector3(1, 2, 3), 0.5, gray).bounding_box()
        assert_vec(box.minimum, (0.5, 1.5, 2.5))
        assert_vec(box.maximum, (1.5, 2.5, 3.5))
