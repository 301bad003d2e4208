# renderer/raytracer.py
import logging
import time
from concurrent.futures import ProcessPoolExecutor, ThreadPoolExecutor, as_completed
from typing import List, Optional

import numpy as np
from tqdm import tqdm

from pathtracer.camera.camera import Camera
from pathtracer.config import RenderSettings
from pathtracer.geometry.hittable import Hittable
from .tone_mapping import to_rgb8

logger = logging.getLogger(__name__)


def render_row(camera: Camera, world: Hittable, row: int,
               seed_seq: np.random.SeedSequence) -> np.ndarray:
    """
    Sum every sample of every pixel in one scanline.

    The row draws from its own generator, so its result does not depend on
    which worker runs it or in what order rows finish.
    """
    rng = np.random.default_rng(seed_seq)
    out = np.empty((camera.image_width, 3), dtype=np.float64)
    for col in range(camera.image_width):
        pixel = camera.render_pixel(row, col, world, rng)
        out[col, 0] = pixel.x
        out[col, 1] = pixel.y
        out[col, 2] = pixel.z
    return out


class Renderer:
    """
    Row-parallel render driver. Each scanline is an independent task; its
    result lands in that row of a shared buffer, which is only read after
    every task has finished.
    """
    def __init__(self, camera: Camera, settings: Optional[RenderSettings] = None):
        self.camera = camera
        self.settings = settings if settings is not None else RenderSettings()
        self.width = camera.image_width
        self.height = camera.image_height

    def row_seeds(self) -> List[np.random.SeedSequence]:
        return np.random.SeedSequence(self.settings.seed).spawn(self.height)

    def accumulate(self, world: Hittable) -> np.ndarray:
        """
        Returns the (H, W, 3) float64 buffer of summed sample colors.
        """
        settings = self.settings
        accumulation_buffer = np.zeros((self.height, self.width, 3), dtype=np.float64)
        seeds = self.row_seeds()

        logger.info("Rendering %dx%d, %d samples per pixel, max depth %d, %d %s worker(s)",
                    self.width, self.height, self.camera.samples_per_pixel,
                    self.camera.max_depth, settings.workers, settings.executor)
        start = time.perf_counter()

        with tqdm(total=self.height, desc="Scanlines", unit="row",
                  disable=not settings.show_progress) as progress:
            if settings.workers == 1:
                for row in range(self.height):
                    accumulation_buffer[row] = render_row(self.camera, world, row, seeds[row])
                    progress.update()
            else:
                pool_class = ThreadPoolExecutor if settings.executor == "thread" else ProcessPoolExecutor
                with pool_class(max_workers=settings.workers) as pool:
                    futures = {
                        pool.submit(render_row, self.camera, world, row, seeds[row]): row
                        for row in range(self.height)
                    }
                    for future in as_completed(futures):
                        accumulation_buffer[futures[future]] = future.result()
                        progress.update()

        logger.info("Finished in %.2fs", time.perf_counter() - start)
        return accumulation_buffer

    def render(self, world: Hittable) -> np.ndarray:
        """
        Render the world into an (H, W, 3) uint8 image in raster order.
        """
        accumulated = self.accumulate(world)
        return to_rgb8(accumulated, self.camera.samples_per_pixel, self.settings.gamma_correct)
