# geometry/hittable.py
from typing import Optional
from pathtracer.core.interval import Interval
from pathtracer.core.vector import Point3, Vector3
from pathtracer.core.ray import Ray


class HitRecord:
    """
    Records details of a ray-object intersection.
    """
    __slots__ = ("p", "normal", "t", "front_face", "material")

    def __init__(self, p: Point3, normal: Vector3, t: float,
                 front_face: bool, material=None):
        self.p = p                    # Intersection point
        self.normal = normal          # Unit normal, always facing against the ray
        self.t = t                    # Ray parameter at intersection
        self.front_face = front_face  # Whether the hit was on the outward side
        self.material = material

    @classmethod
    def from_outward_normal(cls, ray: Ray, t: float, p: Point3,
                            outward_normal: Vector3, material=None) -> "HitRecord":
        """
        Ensures that the normal always points against the ray.
        """
        front_face = ray.direction.dot(outward_normal) < 0
        normal = outward_normal if front_face else -outward_normal
        return cls(p, normal, t, front_face, material)

    def __repr__(self) -> str:
        return (f"HitRecord(t={self.t}, p={self.p!r}, normal={self.normal!r}, "
                f"front_face={self.front_face})")


class Hittable:
    """
    Abstract class for objects that can be hit by a ray.
    """
    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        raise NotImplementedError("hit() must be implemented by subclasses.")
