# renderer/tone_mapping.py
import math
import numpy as np
from numba import njit
from pathtracer.config import ConfigurationError


@njit
def gamma_quantize_kernel(accumulated, scale, gamma_correct, output):
    """
    Average, gamma-correct and quantize an accumulation buffer into output.
    Channels are clamped to [0, 0.999] before scaling by 256 so that the
    result always fits in a byte.
    """
    height, width, channels = accumulated.shape
    for y in range(height):
        for x in range(width):
            for c in range(channels):
                value = accumulated[y, x, c] * scale
                if gamma_correct:
                    value = math.sqrt(value) if value > 0.0 else 0.0
                value = min(max(value, 0.0), 0.999)
                output[y, x, c] = int(256.0 * value)


def to_rgb8(accumulated: np.ndarray, samples_per_pixel: int, gamma_correct: bool = True) -> np.ndarray:
    """
    Convert a (H, W, 3) buffer of summed linear radiance samples into an
    8-bit RGB image.
    """
    if samples_per_pixel < 1:
        raise ConfigurationError(f"samples_per_pixel must be at least 1, got {samples_per_pixel}")
    linear = np.ascontiguousarray(accumulated, dtype=np.float64)
    if linear.ndim != 3 or linear.shape[2] != 3:
        raise ValueError(f"expected an (H, W, 3) buffer, got shape {linear.shape}")
    output = np.empty(linear.shape, dtype=np.uint8)
    gamma_quantize_kernel(linear, 1.0 / samples_per_pixel, gamma_correct, output)
    return output
