"""Unit tests for the axis-aligned bounding box."""

import random

import pytest

from conftest import assert_vec
from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3


def unit_box():
    return AABB(Vector3(-1, -1, -1), Vector3(1, 1, 1))


class TestSlabHit:
    """Tests for the slab intersection test."""

    def test_hit_head_on(self):
        ray = Ray(Vector3(0, 0, 5), Vector3(0, 0, -1))
        assert unit_box().hit(ray, 0.001, float("inf"))

    def test_miss_to_the_side(self):
        ray = Ray(Vector3(3, 0, 5), Vector3(0, 0, -1))
        assert not unit_box().hit(ray, 0.001, float("inf"))

    def test_negative_direction_component(self):
        ray = Ray(Vector3(5, 5, 5), Vector3(-1, -1, -1))
        assert unit_box().hit(ray, 0.0, 100.0)

    def test_box_behind_ray(self):
        ray = Ray(Vector3(0, 0, 5), Vector3(0, 0, 1))
        assert not unit_box().hit(ray, 0.001, float("inf"))

    def test_t_max_before_box(self):
        ray = Ray(Vector3(0, 0, 5), Vector3(0, 0, -1))
        assert not unit_box().hit(ray, 0.001, 3.0)

    def test_zero_direction_component_inside_slab(self):
        """A zero component must not raise; the slab test handles infinities."""
        ray = Ray(Vector3(0.5, 0, 5), Vector3(0, 0, -1))
        assert unit_box().hit(ray, 0.0, 10.0)

    def test_zero_direction_component_outside_slab(self):
        ray = Ray(Vector3(2, 0, 5), Vector3(0, 0, -1))
        assert not unit_box().hit(ray, 0.0, 10.0)

    def test_negative_zero_component(self):
        ray = Ray(Vector3(0.5, 0, 5), Vector3(-0.0, 0, -1))
        assert unit_box().hit(ray, 0.0, 10.0)

    @pytest.mark.parametrize("x", [-1.0, 1.0])
    def test_origin_on_slab_plane_with_zero_component(self, x):
        """0 * inf on that axis leaves it unconstrained instead of missing."""
        ray = Ray(Vector3(x, 0, 5), Vector3(0, 0, -1))
        assert unit_box().hit(ray, 0.001, float("inf"))

    def test_origin_on_slab_plane_still_checks_other_axes(self):
        ray = Ray(Vector3(-1, 3, 5), Vector3(0, 0, -1))
        assert not unit_box().hit(ray, 0.001, float("inf"))


class TestSurroundingBox:
    """The union of two boxes is the tightest box containing both."""

    def test_union_corners(self):
        a = AABB(Vector3(0, 0, 0), Vector3(1, 2, 3))
        b = AABB(Vector3(-1, 1, 2), Vector3(0.5, 4, 2.5))
        u = AABB.surrounding_box(a, b)
        assert_vec(u.minimum, (-1, 0, 0))
        assert_vec(u.maximum, (1, 4, 3))

    def test_union_contains_both_random(self):
        rng = random.Random(7)
        for _ in range(100):
            boxes = []
            for _ in range(2):
                lo = Vector3(*(rng.uniform(-10, 10) for _ in range(3)))
                size = Vector3(*(rng.uniform(0, 5) for _ in range(3)))
                boxes.append(AABB(lo, lo + size))
            u = AABB.surrounding_box(*boxes)
            for box in boxes:
                assert u.contains(box.minimum)
                assert u.contains(box.maximum)
            # Tight: every face of the union touches one of the inputs
            for axis in range(3):
                assert u.minimum[axis] == min(b.minimum[axis] for b in boxes)
                assert u.maximum[axis] == max(b.maximum[axis] for b in boxes)

    def test_surface_area_and_centroid(self):
        box = AABB(Vector3(0, 0, 0), Vector3(1, 2, 3))
        assert box.surface_area() == pytest.approx(22.0)
        assert_vec(box.centroid(), (0.5, 1, 1.5))
