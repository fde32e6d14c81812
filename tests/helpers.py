"""Shared fakes for the test suite."""

import numpy as np


def fake_rasterizer(ink_counts=None):
    """
    Rasterizer whose masks have a known number of ink cells.

    Characters not listed get ord(char) - 32 ink cells, so the whole
    printable range has distinct brightness.
    """
    ink_counts = ink_counts or {}

    def rasterize(char):
        count = ink_counts.get(char, max(0, min(256, ord(char) - 32)))
        mask = np.zeros(256, dtype=bool)
        mask[:count] = True
        return mask.reshape(16, 16)

    return rasterize


def split_image_array(width=8, height=8):
    """Black left half, white right half."""
    arr = np.zeros((height, width, 3), dtype=np.uint8)
    arr[:, width // 2:] = 255
    return arr
