from pathtracer.core.vector import Vector3, Point3, Color
from pathtracer.core.interval import Interval, EMPTY, UNIVERSE
from pathtracer.core.ray import Ray

__all__ = ["Vector3", "Point3", "Color", "Interval", "EMPTY", "UNIVERSE", "Ray"]
