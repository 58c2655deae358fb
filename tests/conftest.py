"""Pytest configuration and shared fixtures."""

import random
import sys
from pathlib import Path

import pytest

# Add the source root to the path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from core.vector import Vector3  # noqa: E402
from core.color import Color  # noqa: E402
from camera.camera import Camera  # noqa: E402
from materials.lambertian import Lambertian  # noqa: E402
from renderer.integrator import black_background  # noqa: E402
from renderer.scene import Scene  # noqa: E402


@pytest.fixture
def rng():
    """Seeded random source so stochastic tests are repeatable."""
    return random.Random(1234)


@pytest.fixture
def gray():
    return Lambertian(Color(0.5, 0.5, 0.5))


@pytest.fixture
def make_scene():
    """Factory for small scenes looking down -Z from the origin."""
    def _make(objects, width=4, height=4, samples_per_pixel=1, depth=5,
              background=black_background, look_from=None, look_at=None, vfov=90.0):
        look_from = look_from or Vector3(0, 0, 0)
        look_at = look_at or look_from + Vector3(0, 0, -1)
        camera = Camera(look_from, look_at, Vector3(0, 1, 0), vfov, width / height)
        return Scene(width, height, samples_per_pixel, depth, camera, objects, background)
    return _make
