"""
Image-to-ASCII Assembly

Orchestrates the full conversion:
- Pad the image to power-of-two dimensions
- Split it into square sub-images
- Sample each sub-image's brightness (cached per image and resolution)
- Optionally invert, then match each brightness to a character

This is the main entry point for the library.
"""

from typing import Callable, List, Optional
import logging
import weakref
import numpy as np

from .brightness import brightness_matrix, calculate_brightness
from .charsets import GlyphBrightnessTable, GlyphIndex
from .image import Image
from .matcher import match_brightness
from .preprocessing import pad_image, split_image


logger = logging.getLogger(__name__)

CharGrid = List[List[str]]


class BrightnessCache:
    """
    Single-slot cache of the last computed brightness matrix.

    Keyed by image identity (not pixel content) and resolution. Storing
    a new matrix evicts the previous one. The image is tracked by weak
    reference, so a cached entry never keeps its image alive and a
    collected image can never be mistaken for a new one.

    Lookups and stores are not synchronized; callers sharing one cache
    across threads must hold their own lock around get()/put().
    """

    def __init__(self):
        self._image_ref: Optional[weakref.ref] = None
        self._resolution: Optional[int] = None
        self._matrix: Optional[np.ndarray] = None

    def get(self, image: Image, resolution: int) -> Optional[np.ndarray]:
        """Cached matrix for this exact image object and resolution, or None."""
        if self._matrix is None or self._image_ref is None:
            return None
        if self._image_ref() is not image or self._resolution != resolution:
            return None
        return self._matrix

    def put(self, image: Image, resolution: int, matrix: np.ndarray):
        self._image_ref = weakref.ref(image)
        self._resolution = resolution
        self._matrix = matrix

    def clear(self):
        self._image_ref = None
        self._resolution = None
        self._matrix = None

    def __len__(self) -> int:
        return 0 if self._matrix is None else 1


class AsciiArtAssembler:
    """
    Converts images into character grids.

    Example:
        >>> table = GlyphBrightnessTable("0123456789")
        >>> assembler = AsciiArtAssembler()
        >>> grid = assembler.run(Image.from_file("cat.png"), 64, table.index)
        >>> print("\\n".join("".join(row) for row in grid))
    """

    def __init__(
        self,
        cache: Optional[BrightnessCache] = None,
        sampler: Callable[[Image], float] = calculate_brightness,
    ):
        """
        Initialize the assembler.

        Args:
            cache: Brightness cache to use (a private one if not given)
            sampler: Sub-image -> brightness in [0, 1]
        """
        self.cache = cache if cache is not None else BrightnessCache()
        self.sampler = sampler

    def brightness(self, image: Image, resolution: int) -> np.ndarray:
        """
        Brightness matrix for an image at a resolution.

        Reuses the cached matrix when called again with the same image
        object and resolution; otherwise computes and caches a new one.
        """
        cached = self.cache.get(image, resolution)
        if cached is not None:
            logger.debug("Brightness cache hit (resolution=%d)", resolution)
            return cached

        logger.debug("Brightness cache miss (resolution=%d), sampling", resolution)
        padded = pad_image(image)
        sub_images = split_image(padded, resolution)
        matrix = brightness_matrix(sub_images, self.sampler)
        matrix.flags.writeable = False

        self.cache.put(image, resolution, matrix)
        return matrix

    def run(
        self,
        image: Image,
        resolution: int,
        index: GlyphIndex,
        invert: bool = False,
    ) -> CharGrid:
        """
        Convert an image to a grid of characters.

        Args:
            image: Source image
            resolution: Characters per row
            index: Glyph index snapshot to match against
            invert: Map brightness b to 1 - b before matching

        Returns:
            Row-major grid of single characters

        Raises:
            EmptyCharacterSetError: If the index is empty
        """
        matrix = self.brightness(image, resolution)
        if invert:
            matrix = 1.0 - matrix

        return [
            [match_brightness(index, float(value)) for value in row]
            for row in matrix
        ]


def image_to_ascii(
    image: Image,
    resolution: int,
    characters: str = "0123456789",
    invert: bool = False,
) -> str:
    """
    Convenience function for one-shot conversion.

    Args:
        image: Source image
        resolution: Characters per row
        characters: Character set to draw with
        invert: Invert brightness before matching

    Returns:
        ASCII art as a newline-separated string
    """
    table = GlyphBrightnessTable(characters)
    grid = AsciiArtAssembler().run(image, resolution, table.index, invert)
    return "\n".join("".join(row) for row in grid)
