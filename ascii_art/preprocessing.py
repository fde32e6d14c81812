"""
Image Partitioning Utilities

Prepares an image for brightness sampling:
- Padding to power-of-two dimensions (white border, centered content)
- Splitting into a grid of square sub-images
- Resolution bounds for a given source image
"""

from typing import List, Tuple
import logging
import numpy as np
import cv2

from .image import Image, WHITE
from .exceptions import InvalidResolutionError


logger = logging.getLogger(__name__)


def next_power_of_two(n: int) -> int:
    """Smallest power of two >= n (powers start at 1)."""
    power = 1
    while power < n:
        power *= 2
    return power


def pad_image(image: Image) -> Image:
    """
    Pad an image with white so both dimensions are powers of two.

    The original image is centered; the offset on each axis is
    (new_dim - old_dim) // 2, so any odd remainder goes to the
    bottom/right border.

    Args:
        image: Source image

    Returns:
        The same object if already power-of-two sized, otherwise a new Image
    """
    height, width = image.height, image.width
    new_height = next_power_of_two(height)
    new_width = next_power_of_two(width)

    if new_height == height and new_width == width:
        return image

    top = (new_height - height) // 2
    left = (new_width - width) // 2
    bottom = new_height - height - top
    right = new_width - width - left

    padded = cv2.copyMakeBorder(
        np.ascontiguousarray(image.pixels),
        top, bottom, left, right,
        cv2.BORDER_CONSTANT,
        value=WHITE,
    )
    logger.debug("Padded %dx%d image to %dx%d", width, height, new_width, new_height)
    return Image(padded)


def split_image(image: Image, resolution: int) -> List[List[Image]]:
    """
    Split a padded image into a grid of square sub-images.

    Each sub-image is (width // resolution) pixels on a side. The grid has
    `resolution` columns and height // sub_size rows. The input is assumed
    to be padded and the resolution valid; nothing is checked here.

    Args:
        image: Padded image (power-of-two dimensions)
        resolution: Number of sub-images per row

    Returns:
        Row-major grid of sub-images (views into the padded pixels)
    """
    sub_size = image.width // resolution
    rows = image.height // sub_size
    pixels = image.pixels

    grid = []
    for row in range(rows):
        y = row * sub_size
        grid.append([
            Image(pixels[y:y + sub_size, col * sub_size:(col + 1) * sub_size])
            for col in range(resolution)
        ])
    return grid


def resolution_bounds(image: Image) -> Tuple[int, int]:
    """
    Allowed (min_chars, max_chars) resolution for an image.

    Computed on the original (unpadded) dimensions:
    min_chars = max(1, width // height), max_chars = width.
    """
    min_chars = max(1, image.width // image.height)
    max_chars = image.width
    return min_chars, max_chars


def validate_resolution(image: Image, resolution: int) -> int:
    """
    Check that a resolution can be used for this image.

    Raises:
        InvalidResolutionError: If outside resolution_bounds(), if it
            does not evenly divide the padded width, or if one tile would
            not fit in the padded height
    """
    min_chars, max_chars = resolution_bounds(image)
    if resolution < min_chars or resolution > max_chars:
        raise InvalidResolutionError(
            f"Resolution {resolution} outside [{min_chars}, {max_chars}] "
            f"for {image.width}x{image.height} image"
        )
    padded_width = next_power_of_two(image.width)
    if padded_width % resolution != 0:
        raise InvalidResolutionError(
            f"Resolution {resolution} does not evenly divide padded width {padded_width}"
        )
    padded_height = next_power_of_two(image.height)
    sub_size = padded_width // resolution
    if sub_size > padded_height:
        raise InvalidResolutionError(
            f"Resolution {resolution} gives {sub_size}px tiles, "
            f"taller than padded height {padded_height}"
        )
    return resolution
