"""
Brightness-Matched ASCII Art

Converts raster images into grids of characters whose ink density
follows the image's local brightness:
- Power-of-two padding and square tiling of the source image
- Rec. 709 luminance sampling per tile, cached per image and resolution
- Nearest-brightness glyph matching over a mutable character set
"""

__version__ = "0.4.0"
__author__ = "ASCII_Gen"

from .charsets import GlyphBrightnessTable, GlyphIndex, rasterize_glyph
from .exceptions import (
    AsciiArtError,
    EmptyCharacterSetError,
    ImageLoadError,
    InputError,
    InvalidResolutionError,
)
from .image import Image
from .matcher import match_brightness
from .pipeline import AsciiArtAssembler, BrightnessCache, image_to_ascii

__all__ = [
    "AsciiArtAssembler",
    "AsciiArtError",
    "BrightnessCache",
    "EmptyCharacterSetError",
    "GlyphBrightnessTable",
    "GlyphIndex",
    "Image",
    "ImageLoadError",
    "InputError",
    "InvalidResolutionError",
    "image_to_ascii",
    "match_brightness",
    "rasterize_glyph",
]
