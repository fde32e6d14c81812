"""
Character Sets and Glyph Brightness

Provides the active character set used for brightness matching:
- Rasterization of a character into a fixed 16x16 boolean ink mask
- Raw brightness (ink ratio) and set-relative normalized brightness
- GlyphIndex: ordered normalized-brightness -> characters lookup

The index is rebuilt in full on every membership change, because
adding or removing one character can move the min/max bounds that
every other character is normalized against.
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Callable, Dict, Iterable, List, Optional, Tuple
import logging
import numpy as np
from PIL import Image, ImageDraw, ImageFont

from .config import PRINTABLE_RANGE, RasterConfig


logger = logging.getLogger(__name__)

GLYPH_MASK_SIZE = 16
GLYPH_MASK_AREA = GLYPH_MASK_SIZE * GLYPH_MASK_SIZE

# Brightness assigned to every character when the set has no spread
UNIFORM_BRIGHTNESS = 0.5

Rasterizer = Callable[[str], np.ndarray]


# ============================================================================
# CHARACTER RANGES
# ============================================================================

def printable_characters() -> List[str]:
    """All printable ASCII characters, code points 32..126 inclusive."""
    first, last = PRINTABLE_RANGE
    return [chr(code) for code in range(first, last + 1)]


def character_range(start: str, end: str) -> List[str]:
    """Inclusive range of characters between two endpoints, in either order."""
    lo, hi = sorted((ord(start), ord(end)))
    return [chr(code) for code in range(lo, hi + 1)]


# ============================================================================
# GLYPH RASTERIZATION
# ============================================================================

_DEFAULT_RASTER_CONFIG = RasterConfig()
_font: Optional[ImageFont.ImageFont] = None


def _get_font(size: int) -> ImageFont.ImageFont:
    """Get a monospace font for rendering."""
    global _font
    if _font is None:
        for font_name in _DEFAULT_RASTER_CONFIG.font_candidates:
            try:
                _font = ImageFont.truetype(font_name, size)
                break
            except (OSError, IOError):
                continue

        if _font is None:
            logger.debug("No monospace TrueType font found, using PIL default font")
            _font = ImageFont.load_default()

    return _font


@lru_cache(maxsize=None)
def rasterize_glyph(char: str) -> np.ndarray:
    """
    Render a single character to a 16x16 boolean ink mask.

    The character is drawn in black on a white square canvas, centered
    on its bounding box, then thresholded: True marks an ink cell.
    Deterministic for a given font, so results are cached.

    Args:
        char: Single character to render

    Returns:
        Read-only (16, 16) bool array
    """
    size = _DEFAULT_RASTER_CONFIG.mask_size

    img = Image.new('L', (size, size), color=255)
    draw = ImageDraw.Draw(img)
    font = _get_font(size - 2)

    bbox = draw.textbbox((0, 0), char, font=font)
    text_width = bbox[2] - bbox[0]
    text_height = bbox[3] - bbox[1]

    x = (size - text_width) // 2 - bbox[0]
    y = (size - text_height) // 2 - bbox[1]

    draw.text((x, y), char, fill=0, font=font)

    mask = np.array(img) < _DEFAULT_RASTER_CONFIG.ink_threshold
    mask.flags.writeable = False
    return mask


def raw_brightness(char: str, rasterizer: Rasterizer = rasterize_glyph) -> float:
    """Fraction of ink cells in the character's 16x16 mask."""
    mask = np.asarray(rasterizer(char), dtype=bool)
    if mask.shape != (GLYPH_MASK_SIZE, GLYPH_MASK_SIZE):
        raise ValueError(
            f"Glyph mask for {char!r} must be {GLYPH_MASK_SIZE}x{GLYPH_MASK_SIZE}, got {mask.shape}"
        )
    return np.count_nonzero(mask) / GLYPH_MASK_AREA


# ============================================================================
# GLYPH INDEX
# ============================================================================

@dataclass(frozen=True)
class GlyphIndex:
    """
    Immutable snapshot of normalized brightness -> characters.

    Attributes:
        keys: Distinct brightness values, ascending
        groups: Characters for each key, each sorted by code point
    """
    keys: Tuple[float, ...] = ()
    groups: Tuple[Tuple[str, ...], ...] = ()

    @classmethod
    def from_brightness(cls, brightness: Dict[str, float]) -> "GlyphIndex":
        """Group characters by identical brightness value."""
        grouped: Dict[float, List[str]] = {}
        for char, value in brightness.items():
            grouped.setdefault(value, []).append(char)

        keys = tuple(sorted(grouped))
        groups = tuple(tuple(sorted(grouped[key])) for key in keys)
        return cls(keys=keys, groups=groups)

    def __len__(self) -> int:
        return len(self.keys)

    def is_empty(self) -> bool:
        return not self.keys

    def items(self) -> List[Tuple[float, Tuple[str, ...]]]:
        return list(zip(self.keys, self.groups))

    def characters(self) -> List[str]:
        """Every indexed character, sorted by code point."""
        return sorted(c for group in self.groups for c in group)


# ============================================================================
# GLYPH BRIGHTNESS TABLE
# ============================================================================

class GlyphBrightnessTable:
    """
    Active character set with precomputed normalized brightness.

    Example:
        >>> table = GlyphBrightnessTable("0123456789")
        >>> table.add("@")
        True
        >>> index = table.index  # immutable snapshot for matching
    """

    def __init__(
        self,
        characters: Iterable[str] = (),
        rasterizer: Rasterizer = rasterize_glyph,
    ):
        """
        Initialize the table.

        Args:
            characters: Initial characters (duplicates ignored)
            rasterizer: char -> 16x16 boolean ink mask
        """
        self._rasterizer = rasterizer
        self._chars = set()
        self._raw: Dict[str, float] = {}
        self._normalized: Dict[str, float] = {}
        self._index = GlyphIndex()

        for char in characters:
            self._check_char(char)
            self._chars.add(char)
        self._rebuild()

    @staticmethod
    def _check_char(char: str):
        if not isinstance(char, str) or len(char) != 1:
            raise ValueError(f"Expected a single character, got {char!r}")

    def add(self, char: str) -> bool:
        """Add a character; returns False if it was already present."""
        self._check_char(char)
        if char in self._chars:
            return False
        self._chars.add(char)
        self._rebuild()
        return True

    def remove(self, char: str) -> bool:
        """Remove a character; returns False if it was not present."""
        self._check_char(char)
        if char not in self._chars:
            return False
        self._chars.remove(char)
        self._rebuild()
        return True

    def _rebuild(self):
        """Recompute raw and normalized brightness for the whole set."""
        self._raw = {c: raw_brightness(c, self._rasterizer) for c in self._chars}

        if len(self._raw) == 1:
            # A lone character keeps its raw brightness as key
            self._normalized = dict(self._raw)
        elif self._raw:
            lo = min(self._raw.values())
            hi = max(self._raw.values())
            spread = hi - lo
            if spread == 0:
                self._normalized = {c: UNIFORM_BRIGHTNESS for c in self._raw}
            else:
                self._normalized = {c: (raw - lo) / spread for c, raw in self._raw.items()}
        else:
            self._normalized = {}

        self._index = GlyphIndex.from_brightness(self._normalized)
        logger.debug(
            "Rebuilt glyph index: %d characters, %d brightness levels",
            len(self._chars), len(self._index),
        )

    @property
    def index(self) -> GlyphIndex:
        """Current immutable index snapshot."""
        return self._index

    @property
    def characters(self) -> List[str]:
        """Active characters sorted by code point."""
        return sorted(self._chars)

    def raw_brightness(self, char: str) -> float:
        return self._raw[char]

    def normalized_brightness(self, char: str) -> float:
        return self._normalized[char]

    def __contains__(self, char) -> bool:
        return char in self._chars

    def __len__(self) -> int:
        return len(self._chars)

    def __repr__(self) -> str:
        return f"GlyphBrightnessTable(characters={''.join(self.characters)!r})"
