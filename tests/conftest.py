"""Pytest configuration and shared fixtures."""

import numpy as np
import pytest

from pathtracer.camera.camera import Camera
from pathtracer.config import RenderSettings
from pathtracer.core.vector import Color, Point3, Vector3
from pathtracer.geometry.sphere import Sphere
from pathtracer.geometry.world import HittableList
from pathtracer.materials.lambertian import Lambertian


@pytest.fixture
def rng():
    """Seeded generator so sampling tests are repeatable."""
    return np.random.default_rng(1234)


@pytest.fixture
def ground_world():
    """Only a large ground sphere under the origin."""
    return HittableList([Sphere(Point3(0, -100.5, -1), 100, Lambertian(Color(0.5, 0.5, 0.5)))])


@pytest.fixture
def diffuse_sphere_world():
    """A single diffuse sphere straight ahead of the default camera."""
    return HittableList([Sphere(Point3(0, 0, -1), 0.5, Lambertian(Color(0.7, 0.7, 0.7)))])


@pytest.fixture
def small_camera():
    """An 8x4 camera looking down -z, cheap enough to render in tests."""
    return Camera(
        aspect_ratio=2.0,
        image_width=8,
        samples_per_pixel=2,
        max_depth=4,
        vfov=90.0,
        lookfrom=Point3(0, 0, 0),
        lookat=Point3(0, 0, -1),
        vup=Vector3(0, 1, 0),
        focus_dist=1.0,
    )


@pytest.fixture
def inline_settings():
    return RenderSettings(workers=1, seed=42, show_progress=False)


class ScriptedRng:
    """Stands in for a numpy Generator and replays fixed values."""

    def __init__(self, values):
        self._values = iter(values)

    def uniform(self, low=0.0, high=1.0):
        return next(self._values)

    def random(self):
        return next(self._values)


@pytest.fixture
def scripted_rng():
    return ScriptedRng
