"""Tests for ray_color and the background policies."""

import math

import pytest

from core.color import Color, BLACK, WHITE
from core.ray import Ray
from core.vector import Vector3
from geometry.rectangle import RectangleXY
from geometry.sphere import Sphere
from geometry.world import HittableList
from materials.diffuse_light import DiffuseLight
from materials.lambertian import Lambertian
from renderer.integrator import (ray_color, sky_gradient, black_background,
                                 solid_background, SKY_BLUE)


class ExplodingWorld:
    def hit(self, ray, t_min, t_max):
        raise AssertionError("depth 0 must not query the world")


class CountingWorld(HittableList):
    def __init__(self, objects):
        super().__init__(objects)
        self.calls = 0

    def hit(self, ray, t_min, t_max):
        self.calls += 1
        return super().hit(ray, t_min, t_max)


class StubScene:
    def __init__(self, world, background=black_background):
        self.world = world
        self.background = background


class TestTermination:
    def test_depth_zero_is_black_without_lookup(self):
        scene = StubScene(ExplodingWorld(), solid_background(WHITE))
        assert ray_color(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)), scene, 0) == BLACK

    def test_depth_bounds_number_of_bounces(self, rng):
        # Closed white sphere around the camera: every bounce hits it again
        world = CountingWorld([Sphere(Vector3(0, 0, 0), 10, Lambertian(WHITE))])
        scene = StubScene(world, solid_background(WHITE))
        result = ray_color(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)), scene, 7, rng)
        assert result == BLACK
        assert world.calls == 7


class TestRadiance:
    def test_miss_returns_background(self):
        sky = Color(0.1, 0.2, 0.3)
        scene = StubScene(HittableList(), solid_background(sky))
        assert ray_color(Ray(Vector3(0, 0, 0), Vector3(0, 1, 0)), scene, 5) is sky

    def test_light_returns_emission(self, rng):
        emit = Color(3, 2, 1)
        world = HittableList([RectangleXY(-1, 1, -1, 1, -2, DiffuseLight(emit))])
        scene = StubScene(world, solid_background(WHITE))
        assert ray_color(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)), scene, 5, rng) == emit

    def test_single_bounce_attenuates_background(self, rng):
        # Diffuse floor under an open white sky: one bounce always escapes
        albedo = Color(0.5, 0.25, 1.0)
        world = HittableList([RectangleXY(-100, 100, -100, 100, -1, Lambertian(albedo))])
        scene = StubScene(world, solid_background(WHITE))
        ray = Ray(Vector3(0, 0, 0), Vector3(0, 0, -1))
        assert ray_color(ray, scene, 2, rng) == albedo
        # Not enough depth left for the escaping ray
        assert ray_color(ray, scene, 1, rng) == BLACK

    def test_emission_adds_to_scattered_light(self, rng):
        class GlowingDiffuse(Lambertian):
            def emitted(self):
                return Color(0.5, 0.5, 0.5)

        world = HittableList([RectangleXY(-100, 100, -100, 100, -1, GlowingDiffuse(Color(0.5, 0.5, 0.5)))])
        scene = StubScene(world, solid_background(WHITE))
        result = ray_color(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)), scene, 2, rng)
        assert result == Color(1.0, 1.0, 1.0)


class TestBackgrounds:
    def test_sky_gradient(self):
        assert sky_gradient(Ray(Vector3(0, 0, 0), Vector3(0, 5, 0))) == SKY_BLUE
        assert sky_gradient(Ray(Vector3(0, 0, 0), Vector3(0, -5, 0))) == WHITE
        mid = sky_gradient(Ray(Vector3(0, 0, 0), Vector3(1, 0, 0)))
        assert mid.r == pytest.approx(0.75)
        assert mid.b == pytest.approx(1.0)

    def test_black(self):
        assert black_background(Ray(Vector3(0, 0, 0), Vector3(0, 1, 0))) == BLACK
