import numpy as np
import pytest

from pathtracer.config import ConfigurationError
from pathtracer.renderer.tone_mapping import to_rgb8


def buffer(value, shape=(1, 1, 3)):
    return np.full(shape, value, dtype=np.float64)


@pytest.mark.parametrize("value, spp, gamma, expected", [
    (1.0, 1, True, 255),
    (1.0, 1, False, 255),
    (0.25, 1, True, 128),
    (0.25, 1, False, 64),
    (1.0, 4, True, 128),
    (8.0, 2, True, 255),
    (0.0, 1, True, 0),
    (-0.5, 1, True, 0),
    (-0.5, 1, False, 0),
])
def test_quantize(value, spp, gamma, expected):
    assert to_rgb8(buffer(value), spp, gamma)[0, 0, 0] == expected


def test_channels_are_independent():
    accumulated = np.array([[[1.0, 0.25, 0.0]]])
    assert to_rgb8(accumulated, 1).tolist() == [[[255, 128, 0]]]


def test_shape_and_dtype_preserved():
    out = to_rgb8(buffer(0.5, (3, 5, 3)), 1)
    assert out.shape == (3, 5, 3)
    assert out.dtype == np.uint8


def test_input_is_not_modified():
    accumulated = buffer(2.0, (2, 2, 3))
    to_rgb8(accumulated, 4)
    assert (accumulated == 2.0).all()


def test_rejects_zero_samples():
    with pytest.raises(ConfigurationError):
        to_rgb8(buffer(1.0), 0)


def test_rejects_wrong_shape():
    with pytest.raises(ValueError):
        to_rgb8(np.zeros((2, 2)), 1)
