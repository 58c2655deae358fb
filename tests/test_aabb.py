"""Tests for the axis-aligned bounding box."""

import math

from core.aabb import AABB
from core.ray import Ray
from core.vector import Vector3


def unit_box():
    return AABB(Vector3(-1, -1, -1), Vector3(1, 1, 1))


class TestAABBHit:
    def test_ray_through_center(self):
        ray = Ray(Vector3(-5, -3, 4), Vector3(5, 3, -4))
        assert unit_box().hit(ray, 0, math.inf)

    def test_ray_pointing_away(self):
        ray = Ray(Vector3(5, 0, 0), Vector3(1, 0, 0))
        assert not unit_box().hit(ray, 0, math.inf)

    def test_ray_missing_to_the_side(self):
        ray = Ray(Vector3(-5, 3, 0), Vector3(1, 0, 0))
        assert not unit_box().hit(ray, 0, math.inf)

    def test_axis_aligned_ray_inside_slabs(self):
        # Zero direction components must not raise
        ray = Ray(Vector3(0, 0, 10), Vector3(0, 0, -1))
        assert unit_box().hit(ray, 0, math.inf)

    def test_axis_aligned_ray_outside_slab(self):
        ray = Ray(Vector3(0, 2, 10), Vector3(0, 0, -1))
        assert not unit_box().hit(ray, 0, math.inf)

    def test_window_too_short(self):
        ray = Ray(Vector3(0, 0, 10), Vector3(0, 0, -1))
        assert not unit_box().hit(ray, 0, 5)
        assert not unit_box().hit(ray, 12, math.inf)

    def test_negative_direction(self):
        ray = Ray(Vector3(10, 0.5, 0.5), Vector3(-1, 0, 0))
        assert unit_box().hit(ray, 0, math.inf)

    def test_flat_box(self):
        flat = AABB(Vector3(-1, -1, 0), Vector3(1, 1, 0))
        ray = Ray(Vector3(0, 0, 5), Vector3(0, 0, -1))
        assert flat.hit(ray, 0, math.inf)


class TestSurroundingBox:
    def test_union(self):
        a = AABB(Vector3(0, 0, 0), Vector3(1, 1, 1))
        b = AABB(Vector3(-1, 0.5, 2), Vector3(0.5, 3, 4))
        u = AABB.surrounding_box(a, b)
        assert u == AABB(Vector3(-1, 0, 0), Vector3(1, 3, 4))
        assert u.encloses(a) and u.encloses(b)

    def test_absent_operands(self):
        a = unit_box()
        assert AABB.surrounding_box(a, None) is a
        assert AABB.surrounding_box(None, a) is a
        assert AABB.surrounding_box(None, None) is None

    def test_contains(self):
        box = unit_box()
        assert box.contains(Vector3(0, 0, 0))
        assert not box.contains(Vector3(0, 2, 0))
