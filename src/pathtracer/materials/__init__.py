from pathtracer.materials.material import Material, ScatteredRay
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.metal import Metal
from pathtracer.materials.dielectric import Dielectric

__all__ = ["Material", "ScatteredRay", "Lambertian", "Metal", "Dielectric"]
