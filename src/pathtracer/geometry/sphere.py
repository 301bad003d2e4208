# geometry/sphere.py
import math
from typing import Optional
from pathtracer.core.interval import Interval
from pathtracer.core.vector import Point3
from pathtracer.core.ray import Ray
from pathtracer.geometry.hittable import Hittable, HitRecord


class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.

    A negative radius keeps the same surface but flips the outward normal,
    which models the inner wall of a hollow shell.
    """
    def __init__(self, center: Point3, radius: float, material):
        self.center = center
        self.radius = radius
        self.material = material

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        oc = ray.origin - self.center
        a = ray.direction.length_squared()
        half_b = oc.dot(ray.direction)
        c = oc.length_squared() - self.radius * self.radius
        discriminant = half_b * half_b - a * c

        if discriminant < 0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        # Find the nearest root that lies strictly inside the acceptable range
        root = (-half_b - sqrt_disc) / a
        if not ray_t.surrounds(root):
            root = (-half_b + sqrt_disc) / a
            if not ray_t.surrounds(root):
                return None

        p = ray.at(root)
        outward_normal = (p - self.center) / self.radius
        return HitRecord.from_outward_normal(ray, root, p, outward_normal, self.material)

    def __repr__(self) -> str:
        return f"Sphere({self.center!r}, {self.radius}, {self.material!r})"
