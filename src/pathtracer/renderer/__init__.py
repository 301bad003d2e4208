from pathtracer.renderer.raytracer import Renderer, render_row
from pathtracer.renderer.tone_mapping import to_rgb8
from pathtracer.renderer.image_io import write_ppm, save_image

__all__ = ["Renderer", "render_row", "to_rgb8", "write_ppm", "save_image"]
