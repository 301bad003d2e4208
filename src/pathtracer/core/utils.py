# core/utils.py
import math
from numpy.random import Generator
from pathtracer.core.vector import Vector3


def random_vector(rng: Generator, lo: float = 0.0, hi: float = 1.0) -> Vector3:
    """
    Returns a vector with each component drawn uniformly from [lo, hi).
    """
    return Vector3(rng.uniform(lo, hi), rng.uniform(lo, hi), rng.uniform(lo, hi))


def random_in_unit_sphere(rng: Generator) -> Vector3:
    """
    Returns a random point inside a unit sphere.
    """
    while True:
        p = Vector3(rng.uniform(-1, 1),
                    rng.uniform(-1, 1),
                    rng.uniform(-1, 1))
        if p.dot(p) < 1.0:
            return p


def random_unit_vector(rng: Generator) -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    """
    # Sampling inside the sphere first avoids bunching toward the cube corners.
    return random_in_unit_sphere(rng).normalize()


def random_on_hemisphere(normal: Vector3, rng: Generator) -> Vector3:
    """
    Returns a random unit vector in the hemisphere around normal.
    """
    on_unit_sphere = random_unit_vector(rng)
    if on_unit_sphere.dot(normal) > 0.0:
        return on_unit_sphere
    return -on_unit_sphere


def random_in_unit_disk(rng: Generator) -> Vector3:
    """Generate random point in unit disk for DOF."""
    while True:
        p = Vector3(rng.uniform(-1, 1), rng.uniform(-1, 1), 0)
        if p.dot(p) < 1.0:
            return p


def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)


def refract(uv: Vector3, n: Vector3, ratio: float) -> Vector3:
    """
    Bends the unit vector uv through a boundary with normal n, where ratio
    is the quotient of the refractive indices (incident over transmitted).
    """
    cos_theta = min(-uv.dot(n), 1.0)
    r_out_perp = (uv + n * cos_theta) * ratio
    r_out_parallel = n * (-math.sqrt(abs(1.0 - r_out_perp.length_squared())))
    return r_out_perp + r_out_parallel


def schlick(cos_theta: float, ratio: float) -> float:
    """Schlick's approximation of Fresnel reflectance."""
    r0 = (1.0 - ratio) / (1.0 + ratio)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow((1.0 - cos_theta), 5)
