# materials/presets.py
from pathtracer.core.vector import Color
from pathtracer.materials.metal import Metal
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.dielectric import Dielectric


class MetalPresets:
    """Predefined metal materials."""

    @staticmethod
    def gold() -> Metal:
        return Metal(Color(0.8, 0.6, 0.2), fuzz=0.1)

    @staticmethod
    def silver() -> Metal:
        return Metal(Color(0.8, 0.8, 0.8), fuzz=0.1)

    @staticmethod
    def bronze_mirror() -> Metal:
        return Metal(Color(0.7, 0.6, 0.5), fuzz=0.0)


class DielectricPresets:
    """Predefined dielectric materials with realistic refractive indices."""

    @staticmethod
    def glass() -> Dielectric:
        return Dielectric(1.5)

    @staticmethod
    def air() -> Dielectric:
        return Dielectric(1.0)


class ColorPresets:
    """Common color presets for materials."""

    NAVY = Color(0.1, 0.2, 0.5)
    OLIVE = Color(0.8, 0.8, 0.0)
    GRAY = Color(0.5, 0.5, 0.5)
    BROWN = Color(0.4, 0.2, 0.1)

    @staticmethod
    def matte(color: Color) -> Lambertian:
        """Create a matte material with the given color."""
        return Lambertian(color)
