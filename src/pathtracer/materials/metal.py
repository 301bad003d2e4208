# materials/metal.py
from numpy.random import Generator
from pathtracer.core.interval import Interval
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Color
from pathtracer.core.utils import reflect, random_unit_vector
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material, ScatteredRay

_FUZZ_RANGE = Interval(0.0, 1.0)


class Metal(Material):
    """
    Metal material with reflective properties. fuzz in [0, 1] controls how
    glossy the reflection is; 0 is a perfect mirror.
    """
    def __init__(self, albedo: Color, fuzz: float = 0.0):
        self.albedo = albedo
        self.fuzz = _FUZZ_RANGE.clamp(fuzz)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng: Generator) -> ScatteredRay:
        reflected = reflect(ray_in.direction.normalize(), rec.normal)
        if self.fuzz > 0:
            reflected = reflected + random_unit_vector(rng) * self.fuzz
        # Directions fuzzed below the surface are kept.
        return ScatteredRay(Ray(rec.p, reflected), self.albedo)

    def __repr__(self) -> str:
        return f"Metal({self.albedo!r}, fuzz={self.fuzz})"
