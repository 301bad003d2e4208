# camera/camera.py
import math
from numpy.random import Generator
from pathtracer.config import ConfigurationError
from pathtracer.core.interval import Interval
from pathtracer.core.vector import Color, Point3, Vector3
from pathtracer.core.ray import Ray
from pathtracer.core.utils import random_in_unit_disk

BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
SKY_BLUE = Color(0.5, 0.7, 1.0)

# Lower bound keeps a scattered ray from re-hitting the surface it left.
SHADOW_ACNE_T_MIN = 0.001


class Camera:
    """
    Pinhole or thin-lens camera placed with look-from / look-at / up vectors.

    All derived state is computed once in the constructor and never changes
    while rendering, so a camera can be shared by every render worker.
    """
    def __init__(self, aspect_ratio: float = 16.0 / 9.0, image_width: int = 400,
                 samples_per_pixel: int = 20, max_depth: int = 10, vfov: float = 90.0,
                 lookfrom: Point3 = Point3(0, 0, 0), lookat: Point3 = Point3(0, 0, -1),
                 vup: Vector3 = Vector3(0, 1, 0), defocus_angle: float = 0.0,
                 focus_dist: float = 10.0, jitter: bool = True):
        if aspect_ratio <= 0:
            raise ConfigurationError(f"aspect_ratio must be positive, got {aspect_ratio}")
        if image_width < 1:
            raise ConfigurationError(f"image_width must be at least 1, got {image_width}")
        image_height = int(image_width / aspect_ratio)
        if image_height < 1:
            raise ConfigurationError(
                f"image_width {image_width} with aspect_ratio {aspect_ratio} gives an empty image"
            )
        if samples_per_pixel < 1:
            raise ConfigurationError(f"samples_per_pixel must be at least 1, got {samples_per_pixel}")
        if max_depth < 1:
            raise ConfigurationError(f"max_depth must be at least 1, got {max_depth}")
        if not 0 < vfov < 180:
            raise ConfigurationError(f"vfov must lie in (0, 180) degrees, got {vfov}")
        if focus_dist <= 0:
            raise ConfigurationError(f"focus_dist must be positive, got {focus_dist}")

        self.aspect_ratio = aspect_ratio
        self.image_width = image_width
        self.image_height = image_height
        self.samples_per_pixel = samples_per_pixel
        self.max_depth = max_depth
        self.vfov = vfov
        self.lookfrom = lookfrom
        self.lookat = lookat
        self.vup = vup
        self.defocus_angle = defocus_angle
        self.focus_dist = focus_dist
        self.jitter = jitter
        self.center = lookfrom
        self.update_camera()

    def update_camera(self):
        """Computes the camera's basis vectors and viewport."""
        view = self.lookfrom - self.lookat
        if view.near_zero():
            raise ConfigurationError("lookfrom and lookat must be distinct points")
        self.w = view.normalize()
        side = self.vup.cross(self.w)
        if side.near_zero():
            raise ConfigurationError("vup must not be parallel to the view direction")
        self.u = side.normalize()
        self.v = self.w.cross(self.u)

        # Viewport dimensions at the focus plane
        h = math.tan(math.radians(self.vfov) / 2)
        viewport_height = 2.0 * h * self.focus_dist
        viewport_width = viewport_height * (self.image_width / self.image_height)

        # Vectors across the horizontal and down the vertical viewport edges
        viewport_u = self.u * viewport_width
        viewport_v = -self.v * viewport_height

        self.pixel_delta_u = viewport_u / self.image_width
        self.pixel_delta_v = viewport_v / self.image_height

        viewport_upper_left = (self.center -
                               self.w * self.focus_dist -
                               viewport_u / 2 -
                               viewport_v / 2)
        self.pixel00_loc = viewport_upper_left + (self.pixel_delta_u + self.pixel_delta_v) * 0.5

        defocus_radius = self.focus_dist * math.tan(math.radians(self.defocus_angle / 2))
        self.defocus_disk_u = self.u * defocus_radius
        self.defocus_disk_v = self.v * defocus_radius

    def get_ray(self, row: int, col: int, rng: Generator) -> Ray:
        """
        Returns a ray towards a random point in the square around pixel
        (row, col), leaving from the defocus disk when depth of field is on.
        """
        pixel_sample = (self.pixel00_loc +
                        self.pixel_delta_u * col +
                        self.pixel_delta_v * row)
        if self.jitter:
            pixel_sample = (pixel_sample +
                            self.pixel_delta_u * (rng.random() - 0.5) +
                            self.pixel_delta_v * (rng.random() - 0.5))

        ray_origin = self.center if self.defocus_angle <= 0 else self.defocus_disk_sample(rng)
        return Ray(ray_origin, pixel_sample - ray_origin)

    def defocus_disk_sample(self, rng: Generator) -> Point3:
        p = random_in_unit_disk(rng)
        return self.center + self.defocus_disk_u * p.x + self.defocus_disk_v * p.y

    def ray_color(self, ray: Ray, world, rng: Generator, depth: int = None) -> Color:
        """
        Follows a ray through the scene, multiplying in each surface's
        attenuation until it escapes to the sky, is absorbed, or runs out
        of bounces. Exhausting the bounce budget contributes black.
        """
        if depth is None:
            depth = self.max_depth
        attenuation = WHITE
        while depth > 0:
            rec = world.hit(ray, Interval(SHADOW_ACNE_T_MIN, math.inf))
            if rec is None:
                return attenuation * self.background(ray)
            scattered = rec.material.scatter(ray, rec, rng)
            if scattered is None:
                return BLACK
            attenuation = attenuation * scattered.attenuation
            ray = scattered.ray
            depth -= 1
        return BLACK

    @staticmethod
    def background(ray: Ray) -> Color:
        """Vertical white-to-sky-blue gradient seen by escaping rays."""
        a = 0.5 * (ray.direction.normalize().y + 1.0)
        return WHITE * (1.0 - a) + SKY_BLUE * a

    def render_pixel(self, row: int, col: int, world, rng: Generator) -> Color:
        """Sum (not average) of samples_per_pixel ray colors for one pixel."""
        pixel_color = BLACK
        for _ in range(self.samples_per_pixel):
            pixel_color = pixel_color + self.ray_color(self.get_ray(row, col, rng), world, rng)
        return pixel_color

    def __repr__(self) -> str:
        return (f"Camera({self.image_width}x{self.image_height}, spp={self.samples_per_pixel}, "
                f"max_depth={self.max_depth}, lookfrom={self.lookfrom!r}, lookat={self.lookat!r})")
