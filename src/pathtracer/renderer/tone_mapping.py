# renderer/tone_mapping.py
import math

import numpy as np
from numba import njit


def linear_to_gamma(linear_component: float) -> float:
    """
    Inverse of "gamma 2": the square root, with non-positive input mapped to 0.
    """
    if linear_component > 0:
        return math.sqrt(linear_component)
    return 0.0


@njit(cache=False)
def gamma_quantize_kernel(linear_image, output_image):
    height, width, channels = linear_image.shape
    for j in range(height):
        for i in range(width):
            for c in range(channels):
                x = linear_image[j, i, c]
                # NaN fails this comparison too and ends up black.
                if x > 0.0:
                    x = math.sqrt(x)
                else:
                    x = 0.0
                if x > 0.999:
                    x = 0.999
                output_image[j, i, c] = int(256.0 * x)


def to_display(linear_image: np.ndarray) -> np.ndarray:
    """
    Converts an (H, W, 3) array of averaged linear radiance into 8-bit
    display values.
    """
    linear_image = np.ascontiguousarray(linear_image, dtype=np.float64)
    output = np.empty(linear_image.shape, dtype=np.uint8)
    gamma_quantize_kernel(linear_image, output)
    return output
