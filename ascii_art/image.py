"""
Image Container

A small immutable RGB image backed by a read-only numpy array of shape
(height, width, 3) and dtype uint8. Loading from disk goes through PIL;
everything downstream works on the array.
"""

from typing import Tuple, Union
from pathlib import Path
import numpy as np
from PIL import Image as PILImage, UnidentifiedImageError

from .exceptions import ImageLoadError


WHITE = (255, 255, 255)


class Image:
    """
    Immutable RGB image.

    Attributes:
        pixels: Read-only (height, width, 3) uint8 array

    Example:
        >>> img = Image.from_file("cat.png")
        >>> img.width, img.height
        (512, 384)
        >>> img.get_pixel(0, 0)
        (255, 255, 255)
    """

    def __init__(self, pixels: np.ndarray):
        arr = np.asarray(pixels)
        if arr.ndim != 3 or arr.shape[2] != 3:
            raise ValueError(f"Expected (height, width, 3) pixel array, got shape {arr.shape}")
        if arr.dtype != np.uint8:
            arr = np.clip(arr, 0, 255).astype(np.uint8)
        if arr.flags.writeable:
            arr = arr.copy()
            arr.flags.writeable = False
        self._pixels = arr

    @classmethod
    def from_array(cls, pixels: np.ndarray) -> "Image":
        """Build an image from an (H, W, 3) or (H, W) grayscale array."""
        arr = np.asarray(pixels)
        if arr.ndim == 2:
            arr = np.stack([arr, arr, arr], axis=-1)
        return cls(arr)

    @classmethod
    def from_pil(cls, image: PILImage.Image) -> "Image":
        if image.mode != 'RGB':
            image = image.convert('RGB')
        return cls(np.array(image))

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "Image":
        """
        Decode an image file into an RGB Image.

        Raises:
            ImageLoadError: If the file is missing or not a readable image
        """
        try:
            with PILImage.open(path) as pil_image:
                return cls.from_pil(pil_image)
        except (OSError, UnidentifiedImageError) as e:
            raise ImageLoadError(f"Failed to load image: {e}") from e

    @classmethod
    def filled(cls, width: int, height: int, color: Tuple[int, int, int] = WHITE) -> "Image":
        """Create a uniformly colored image."""
        arr = np.empty((height, width, 3), dtype=np.uint8)
        arr[:, :] = color
        return cls(arr)

    @property
    def pixels(self) -> np.ndarray:
        return self._pixels

    @property
    def width(self) -> int:
        return self._pixels.shape[1]

    @property
    def height(self) -> int:
        return self._pixels.shape[0]

    def get_pixel(self, row: int, col: int) -> Tuple[int, int, int]:
        """RGB triple at (row, col)."""
        r, g, b = self._pixels[row, col]
        return int(r), int(g), int(b)

    def to_pil(self) -> PILImage.Image:
        return PILImage.fromarray(np.ascontiguousarray(self._pixels))

    def __repr__(self) -> str:
        return f"Image(width={self.width}, height={self.height})"
