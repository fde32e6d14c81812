"""
Brightness Sampling

Reduces an image (or sub-image) to a single perceptual brightness
score in [0, 1], and a grid of sub-images to a brightness matrix.
"""

from typing import Callable, List
import numpy as np

from .image import Image


MAX_RGB_VALUE = 255

# Rec. 709 luma weights
LUMA_WEIGHTS = np.array([0.2126, 0.7152, 0.0722], dtype=np.float64)


def calculate_brightness(image: Image) -> float:
    """
    Average perceptual luminance of an image, normalized to [0, 1].

    Each pixel contributes L = 0.2126*R + 0.7152*G + 0.0722*B; the sum
    over all pixels is divided by width * height * 255. No gamma
    correction is applied.

    Args:
        image: Image to sample

    Returns:
        0.0 for fully black, 1.0 for fully white
    """
    pixels = image.pixels.astype(np.float64)
    total = float(np.sum(pixels @ LUMA_WEIGHTS))
    return total / (image.width * image.height * MAX_RGB_VALUE)


def brightness_matrix(
    sub_images: List[List[Image]],
    sampler: Callable[[Image], float] = calculate_brightness,
) -> np.ndarray:
    """Sample every cell of a sub-image grid into a (rows, cols) float array."""
    rows = len(sub_images)
    cols = len(sub_images[0]) if rows else 0
    matrix = np.empty((rows, cols), dtype=np.float64)
    for r, row in enumerate(sub_images):
        for c, cell in enumerate(row):
            matrix[r, c] = sampler(cell)
    return matrix
