"""
Brightness Matcher Tests
Nearest-key search and tie-breaking.
"""

import unittest

from ascii_art.charsets import GlyphBrightnessTable, GlyphIndex
from ascii_art.exceptions import EmptyCharacterSetError
from ascii_art.matcher import match_brightness
from helpers import fake_rasterizer


class TestMatchBrightness(unittest.TestCase):

    def setUp(self):
        # 'a' raw 0.25 -> normalized 0, 'b' raw 0.75 -> normalized 1
        table = GlyphBrightnessTable("ab", rasterizer=fake_rasterizer({"a": 64, "b": 192}))
        self.index = table.index

    def test_two_character_scenario(self):
        self.assertEqual(match_brightness(self.index, 0.9), "b")
        self.assertEqual(match_brightness(self.index, 0.1), "a")

    def test_exact_tie_prefers_lower_code(self):
        self.assertEqual(match_brightness(self.index, 0.5), "a")

    def test_tie_prefers_lower_code_from_ceiling(self):
        index = GlyphIndex(keys=(0.25, 0.75), groups=(("z",), ("c",)))
        self.assertEqual(match_brightness(index, 0.5), "c")

    def test_closer_neighbour_wins(self):
        index = GlyphIndex(keys=(0.2, 0.8), groups=(("X",), ("Y",)))
        self.assertEqual(match_brightness(index, 0.0), "X")
        self.assertEqual(match_brightness(index, 0.3), "X")
        self.assertEqual(match_brightness(index, 0.7), "Y")
        self.assertEqual(match_brightness(index, 1.0), "Y")

    def test_exact_key_returns_smallest_in_group(self):
        index = GlyphIndex(keys=(0.0, 0.5, 1.0), groups=(("a",), ("q", "r"), ("z",)))
        self.assertEqual(match_brightness(index, 0.5), "q")

    def test_single_neighbour(self):
        index = GlyphIndex(keys=(0.4,), groups=(("k",),))
        self.assertEqual(match_brightness(index, 0.0), "k")
        self.assertEqual(match_brightness(index, 1.0), "k")

    def test_out_of_range_brightness(self):
        self.assertEqual(match_brightness(self.index, -0.5), "a")
        self.assertEqual(match_brightness(self.index, 1.5), "b")

    def test_empty_index_raises(self):
        with self.assertRaises(EmptyCharacterSetError) as ctx:
            match_brightness(GlyphIndex(), 0.5)
        self.assertIn("empty", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
