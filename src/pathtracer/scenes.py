# scenes.py
from typing import Callable, Dict, Optional, Tuple

import numpy as np

from pathtracer.camera.camera import Camera
from pathtracer.config import ConfigurationError
from pathtracer.core.utils import random_vector
from pathtracer.core.vector import Point3, Vector3
from pathtracer.geometry.sphere import Sphere
from pathtracer.geometry.world import HittableList
from pathtracer.materials.dielectric import Dielectric
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.metal import Metal
from pathtracer.materials.presets import ColorPresets, DielectricPresets, MetalPresets

Scene = Tuple[HittableList, Camera]


def basic_world(image_width: int = 400, samples_per_pixel: int = 20, max_depth: int = 10,
                rng: Optional[np.random.Generator] = None) -> Scene:
    """
    Three spheres on a large ground sphere: a diffuse one in the middle, a
    hollow glass bubble on the left and gold on the right, plus a silver
    sphere floating behind them.
    """
    center = ColorPresets.matte(ColorPresets.NAVY)
    ground = ColorPresets.matte(ColorPresets.OLIVE)
    left = DielectricPresets.glass()
    right = MetalPresets.gold()
    high = MetalPresets.silver()

    world = HittableList()
    world.add(Sphere(Point3(0.0, 0.0, -1.0), 0.5, center))
    # Negative radius turns the inner sphere into the bubble's inside wall.
    world.add(Sphere(Point3(-1.0, 0.0, -1.0), -0.4, left))
    world.add(Sphere(Point3(-1.0, 0.0, -1.0), 0.5, left))
    world.add(Sphere(Point3(1.0, 0.0, -1.0), 0.5, right))
    world.add(Sphere(Point3(3.0, 3.0, -5.0), 1.0, high))
    world.add(Sphere(Point3(0.0, -100.5, -1.0), 100.0, ground))

    camera = Camera(
        aspect_ratio=16.0 / 9.0,
        image_width=image_width,
        samples_per_pixel=samples_per_pixel,
        max_depth=max_depth,
        vfov=30.0,
        lookfrom=Point3(-2.0, 2.0, 1.0),
        lookat=Point3(0.0, 0.0, -1.0),
        vup=Vector3(0.0, 1.0, 0.0),
        defocus_angle=10.0,
        focus_dist=3.4,
    )
    return world, camera


def book_cover(image_width: int = 1200, samples_per_pixel: int = 500, max_depth: int = 50,
               rng: Optional[np.random.Generator] = None) -> Scene:
    """
    A field of small random spheres around three large ones. The layout is
    drawn from rng, so a seeded generator always gives the same scene.
    """
    if rng is None:
        rng = np.random.default_rng()

    world = HittableList()
    world.add(Sphere(Point3(0.0, -1000.0, 0.0), 1000.0, Lambertian(ColorPresets.GRAY)))

    glass = DielectricPresets.glass()
    clearance_point = Point3(4.0, 0.2, 0.0)
    for a in range(-11, 12):
        for b in range(-11, 12):
            choose_mat = rng.random()
            center = Point3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())

            if (center - clearance_point).length() <= 0.9:
                continue

            if choose_mat < 0.8:
                # diffuse
                albedo = random_vector(rng) * random_vector(rng)
                material = Lambertian(albedo)
            elif choose_mat < 0.95:
                # metal
                albedo = random_vector(rng, 0.5, 1.0)
                material = Metal(albedo, fuzz=rng.uniform(0.0, 0.5))
            else:
                material = glass
            world.add(Sphere(center, 0.2, material))

    world.add(Sphere(Point3(0.0, 1.0, 0.0), 1.0, Dielectric(1.5)))
    world.add(Sphere(Point3(-4.0, 1.0, 0.0), 1.0, Lambertian(ColorPresets.BROWN)))
    world.add(Sphere(Point3(4.0, 1.0, 0.0), 1.0, MetalPresets.bronze_mirror()))

    camera = Camera(
        aspect_ratio=16.0 / 9.0,
        image_width=image_width,
        samples_per_pixel=samples_per_pixel,
        max_depth=max_depth,
        vfov=20.0,
        lookfrom=Point3(13.0, 2.0, 3.0),
        lookat=Point3(0.0, 0.0, 0.0),
        vup=Vector3(0.0, 1.0, 0.0),
        defocus_angle=0.6,
        focus_dist=10.0,
    )
    return world, camera


SCENES: Dict[str, Callable[..., Scene]] = {
    "basic": basic_world,
    "cover": book_cover,
}


def build_scene(name: str, **kwargs) -> Scene:
    try:
        factory = SCENES[name]
    except KeyError:
        raise ConfigurationError(
            f"unknown scene {name!r}; choose from {', '.join(sorted(SCENES))}"
        ) from None
    return factory(**kwargs)
