import io

import numpy as np
from PIL import Image

from pathtracer.renderer.image_io import save_image, write_ppm


def sample_image():
    return np.array([
        [[255, 0, 0], [0, 255, 0], [0, 0, 255]],
        [[1, 2, 3], [128, 128, 128], [0, 0, 0]],
    ], dtype=np.uint8)


def test_write_ppm_text():
    stream = io.StringIO()
    write_ppm(stream, sample_image())
    assert stream.getvalue() == (
        "P3\n3 2\n255\n"
        "255 0 0\n0 255 0\n0 0 255\n"
        "1 2 3\n128 128 128\n0 0 0\n"
    )


def test_save_ppm(tmp_path):
    path = save_image(tmp_path / "out" / "image.ppm", sample_image())
    assert path.exists()
    assert path.read_text(encoding="ascii").startswith("P3\n3 2\n255\n")
    with Image.open(path) as img:
        np.testing.assert_array_equal(np.asarray(img.convert("RGB")), sample_image())


def test_save_png(tmp_path):
    path = save_image(str(tmp_path / "image.png"), sample_image())
    with Image.open(path) as img:
        assert img.size == (3, 2)
        np.testing.assert_array_equal(np.asarray(img.convert("RGB")), sample_image())
