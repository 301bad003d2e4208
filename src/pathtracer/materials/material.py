# materials/material.py
from typing import NamedTuple, Optional
from numpy.random import Generator
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Color
from pathtracer.geometry.hittable import HitRecord


class ScatteredRay(NamedTuple):
    """Outgoing ray plus the color filter applied to the light it carries."""
    ray: Ray
    attenuation: Color


class Material:
    """
    Abstract material class. Subclasses must implement scatter().
    Materials are immutable and shared by every primitive that uses them.
    """
    def scatter(self, ray_in: Ray, rec: HitRecord, rng: Generator) -> Optional[ScatteredRay]:
        """
        Computes the scattered ray and attenuation.
        Returns a ScatteredRay, or None if the material absorbs the ray.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")
