# materials/dielectric.py
import math
from numpy.random import Generator
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Color
from pathtracer.core.utils import reflect, refract, schlick
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material, ScatteredRay

WHITE = Color(1.0, 1.0, 1.0)


class Dielectric(Material):
    """
    Transparent material that refracts or reflects at its boundary.
    """
    def __init__(self, ref_idx: float):
        self.ref_idx = ref_idx

    def scatter(self, ray_in: Ray, rec: HitRecord, rng: Generator) -> ScatteredRay:
        attenuation = WHITE  # Glass doesn't absorb light

        # Determine if we're entering or exiting the material
        ratio = 1.0 / self.ref_idx if rec.front_face else self.ref_idx

        unit_direction = ray_in.direction.normalize()

        # Matched indices: there is no optical boundary to reflect from.
        if ratio == 1.0:
            return ScatteredRay(Ray(rec.p, unit_direction), attenuation)

        cos_theta = min(-unit_direction.dot(rec.normal), 1.0)
        sin_theta = math.sqrt(1.0 - cos_theta * cos_theta)

        # Total internal reflection
        if ratio * sin_theta > 1.0:
            return ScatteredRay(Ray(rec.p, reflect(unit_direction, rec.normal)), attenuation)

        if rng.random() < schlick(cos_theta, ratio):
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refract(unit_direction, rec.normal, ratio)
        return ScatteredRay(Ray(rec.p, direction), attenuation)

    def __repr__(self) -> str:
        return f"Dielectric({self.ref_idx})"
