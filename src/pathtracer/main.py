# main.py
import logging
import sys

import configargparse
import numpy as np

from pathtracer.config import DEFAULT_SEED, DEFAULT_WORKERS, EXECUTORS, LOG_LEVEL, ConfigurationError, RenderSettings
from pathtracer.logging_config import setup_logging
from pathtracer.renderer.image_io import save_image, write_ppm
from pathtracer.renderer.raytracer import Renderer
from pathtracer.scenes import SCENES, build_scene

logger = logging.getLogger(__name__)


def get_options(argv=None, delayed_parse=False):
    parser = configargparse.ArgumentParser(description="Offline Monte Carlo path tracer")
    parser.add_argument("--config", is_config_file=True, help="Config file path")
    parser.add_argument("--scene",       default="basic", choices=sorted(SCENES), help="Scene to render")
    parser.add_argument("-o", "--output", default=None, help="Output image path (.ppm, .png, ...); PPM on stdout when omitted")
    parser.add_argument("--width",       default=None, type=int, help="Image width in pixels")
    parser.add_argument("--samples",     default=None, type=int, help="Samples per pixel")
    parser.add_argument("--max-depth",   default=None, type=int, help="Maximum number of ray bounces")
    parser.add_argument("--workers",     default=DEFAULT_WORKERS, type=int, help="Number of render workers")
    parser.add_argument("--executor",    default="thread", choices=EXECUTORS, help="Worker pool kind")
    parser.add_argument("--seed",        default=DEFAULT_SEED, type=int, help="Seed for scene layout and sampling")
    parser.add_argument("--no-gamma",    default=False, action="store_true", help="Write linear values without gamma correction")
    parser.add_argument("--no-progress", default=False, action="store_true", help="Hide the scanline progress bar")
    parser.add_argument("--log-level",   default=LOG_LEVEL, help="Logging level")

    if delayed_parse:
        return parser
    return parser.parse_args(argv)


def run(options) -> int:
    settings = RenderSettings(
        workers=options.workers,
        executor=options.executor,
        seed=options.seed,
        gamma_correct=not options.no_gamma,
        show_progress=not options.no_progress,
    )
    scene_kwargs = {"rng": np.random.default_rng(options.seed)}
    if options.width is not None:
        scene_kwargs["image_width"] = options.width
    if options.samples is not None:
        scene_kwargs["samples_per_pixel"] = options.samples
    if options.max_depth is not None:
        scene_kwargs["max_depth"] = options.max_depth

    world, camera = build_scene(options.scene, **scene_kwargs)
    logger.info("Scene %r: %d objects, %r", options.scene, len(world), camera)

    image = Renderer(camera, settings).render(world)

    if options.output is None:
        write_ppm(sys.stdout, image)
        sys.stdout.flush()
    else:
        path = save_image(options.output, image)
        logger.info("Wrote %s", path)
    return 0


def main(argv=None) -> int:
    options = get_options(argv)
    setup_logging("pathtracer", options.log_level)
    try:
        return run(options)
    except ConfigurationError as e:
        logger.error("Invalid configuration: %s", e)
        return 2


if __name__ == "__main__":
    sys.exit(main())
