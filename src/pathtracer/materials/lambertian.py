# materials/lambertian.py
from numpy.random import Generator
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Color
from pathtracer.core.utils import random_unit_vector
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material, ScatteredRay


class Lambertian(Material):
    """
    Lambertian diffuse material.
    """

    def __init__(self, albedo: Color):
        self.albedo = albedo

    def scatter(self, ray_in: Ray, rec: HitRecord, rng: Generator) -> ScatteredRay:
        """
        Scatter a ray according to a Lambertian reflection model.
        """
        # Pick a random scatter direction by adding a random vector to the normal.
        scatter_direction = rec.normal + random_unit_vector(rng)

        # If scatter_direction is degenerate (very small), just use the normal.
        if scatter_direction.near_zero():
            scatter_direction = rec.normal

        return ScatteredRay(Ray(rec.p, scatter_direction), self.albedo)

    def __repr__(self) -> str:
        return f"Lambertian({self.albedo!r})"
