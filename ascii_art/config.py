"""
Configuration defaults for the rasterizer and the interactive shell.
"""

from dataclasses import dataclass, field
from typing import Tuple


# Printable ASCII, inclusive on both ends
PRINTABLE_RANGE: Tuple[int, int] = (32, 126)


@dataclass
class RasterConfig:
    """Configuration for rendering a character into a luminance mask."""
    mask_size: int = 16                # Mask is mask_size x mask_size cells
    ink_threshold: int = 128           # Gray values below this count as ink
    font_candidates: Tuple[str, ...] = (
        "/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf",  # Linux
        "/System/Library/Fonts/Menlo.ttc",                       # macOS
        "/System/Library/Fonts/Monaco.dfont",                    # macOS fallback
        "Consolas",                                              # Windows
        "DejaVuSansMono.ttf",
    )


@dataclass
class ShellConfig:
    """Defaults used by the interactive shell."""
    default_chars: Tuple[str, ...] = tuple("0123456789")
    default_resolution: int = 2
    resolution_step: int = 2           # res up / res down factor
    prompt: str = ">>> "
    html_file_name: str = "out.html"
    html_font_name: str = "Courier New"
    printable_range: Tuple[int, int] = field(default=PRINTABLE_RANGE)
