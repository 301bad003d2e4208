# renderer/image_io.py

from pathlib import Path
from typing import TextIO, Union

import numpy as np
from PIL import Image

MAX_CHANNEL_VALUE = 255


def write_ppm(stream: TextIO, image: np.ndarray) -> None:
    """
    Write an (H, W, 3) uint8 image as a plain-text portable pixmap (P3).

    The header carries width, height and the max channel value; pixels
    follow one "r g b" line each in row-major order, top row first.
    """
    height, width, _ = image.shape
    stream.write(f"P3\n{width} {height}\n{MAX_CHANNEL_VALUE}\n")
    for row in image:
        stream.write("".join(f"{r} {g} {b}\n" for r, g, b in row.tolist()))


def save_image(path: Union[str, Path], image: np.ndarray) -> Path:
    """
    Save an image to disk. ``.ppm`` files use the plain-text writer; every
    other extension is handed to Pillow.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    if path.suffix.lower() == ".ppm":
        with open(path, "w", encoding="ascii") as fh:
            write_ppm(fh, image)
    else:
        Image.fromarray(np.ascontiguousarray(image, dtype=np.uint8)).save(path)
    return path
