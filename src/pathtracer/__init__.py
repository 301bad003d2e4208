"""Offline Monte Carlo path tracer for sphere scenes."""

from pathtracer.__version__ import __version__
from pathtracer.config import ConfigurationError, RenderSettings
from pathtracer.core import Color, Interval, Point3, Ray, Vector3
from pathtracer.geometry import HitRecord, Hittable, HittableList, Sphere
from pathtracer.materials import Dielectric, Lambertian, Material, Metal, ScatteredRay
from pathtracer.camera import Camera
from pathtracer.renderer import Renderer, save_image, to_rgb8, write_ppm

__all__ = [
    "__version__",
    "ConfigurationError",
    "RenderSettings",
    "Color",
    "Interval",
    "Point3",
    "Ray",
    "Vector3",
    "HitRecord",
    "Hittable",
    "HittableList",
    "Sphere",
    "Dielectric",
    "Lambertian",
    "Material",
    "Metal",
    "ScatteredRay",
    "Camera",
    "Renderer",
    "save_image",
    "to_rgb8",
    "write_ppm",
]
