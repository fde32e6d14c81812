"""
Glyph Brightness Table Tests
Normalization, grouping and membership changes.
"""

import unittest
import numpy as np

from ascii_art.charsets import (
    GlyphBrightnessTable,
    GlyphIndex,
    character_range,
    printable_characters,
    rasterize_glyph,
    raw_brightness,
)
from helpers import fake_rasterizer


class TestCharacterRanges(unittest.TestCase):

    def test_printable_range(self):
        chars = printable_characters()
        self.assertEqual(len(chars), 95)
        self.assertEqual(chars[0], " ")
        self.assertEqual(chars[-1], "~")

    def test_character_range_either_order(self):
        self.assertEqual(character_range("a", "d"), ["a", "b", "c", "d"])
        self.assertEqual(character_range("d", "a"), ["a", "b", "c", "d"])


class TestRasterizer(unittest.TestCase):

    def test_mask_shape(self):
        mask = rasterize_glyph("@")
        self.assertEqual(mask.shape, (16, 16))
        self.assertEqual(mask.dtype, np.bool_)

    def test_space_has_no_ink(self):
        self.assertEqual(raw_brightness(" "), 0.0)

    def test_dense_glyph_has_ink(self):
        self.assertGreater(raw_brightness("@"), 0.0)

    def test_wrong_mask_size_rejected(self):
        with self.assertRaises(ValueError):
            raw_brightness("x", lambda c: np.zeros((8, 8), dtype=bool))


class TestGlyphBrightnessTable(unittest.TestCase):

    def setUp(self):
        self.rasterizer = fake_rasterizer({"a": 64, "b": 192, "c": 128, "d": 128})

    def test_min_max_normalization(self):
        table = GlyphBrightnessTable("abc", rasterizer=self.rasterizer)
        self.assertEqual(table.raw_brightness("a"), 0.25)
        self.assertEqual(table.raw_brightness("b"), 0.75)
        self.assertEqual(table.normalized_brightness("a"), 0.0)
        self.assertEqual(table.normalized_brightness("b"), 1.0)
        self.assertEqual(table.normalized_brightness("c"), 0.5)

    def test_uniform_brightness_maps_to_half(self):
        table = GlyphBrightnessTable("cd", rasterizer=self.rasterizer)
        self.assertEqual(table.index.keys, (0.5,))
        self.assertEqual(table.index.groups, (("c", "d"),))

    def test_single_character_keeps_raw_brightness(self):
        table = GlyphBrightnessTable("a", rasterizer=self.rasterizer)
        self.assertEqual(table.index.keys, (0.25,))
        self.assertEqual(table.index.groups, (("a",),))

    def test_empty_table(self):
        table = GlyphBrightnessTable(rasterizer=self.rasterizer)
        self.assertTrue(table.index.is_empty())
        self.assertEqual(len(table), 0)

    def test_groups_sorted_by_code(self):
        table = GlyphBrightnessTable("dcab", rasterizer=self.rasterizer)
        self.assertEqual(table.index.keys, (0.0, 0.5, 1.0))
        self.assertEqual(table.index.groups, (("a",), ("c", "d"), ("b",)))

    def test_every_character_in_exactly_one_group(self):
        table = GlyphBrightnessTable(printable_characters(), rasterizer=fake_rasterizer())
        self.assertEqual(table.index.characters(), printable_characters())
        self.assertEqual(len(set(table.index.keys)), len(table.index.keys))

    def test_add_rebuilds_bounds(self):
        table = GlyphBrightnessTable("ac", rasterizer=self.rasterizer)
        self.assertEqual(table.normalized_brightness("c"), 1.0)
        self.assertTrue(table.add("b"))
        self.assertEqual(table.normalized_brightness("c"), 0.5)

    def test_add_existing_is_noop(self):
        table = GlyphBrightnessTable("ab", rasterizer=self.rasterizer)
        before = table.index
        self.assertFalse(table.add("a"))
        self.assertIs(table.index, before)

    def test_remove(self):
        table = GlyphBrightnessTable("abc", rasterizer=self.rasterizer)
        self.assertTrue(table.remove("b"))
        self.assertNotIn("b", table)
        self.assertEqual(table.normalized_brightness("c"), 1.0)
        self.assertFalse(table.remove("z"))

    def test_remove_down_to_single_uses_raw(self):
        table = GlyphBrightnessTable("ab", rasterizer=self.rasterizer)
        table.remove("a")
        self.assertEqual(table.index.keys, (0.75,))

    def test_rejects_multi_character_strings(self):
        table = GlyphBrightnessTable(rasterizer=self.rasterizer)
        with self.assertRaises(ValueError):
            table.add("ab")


class TestGlyphIndex(unittest.TestCase):

    def test_from_brightness(self):
        index = GlyphIndex.from_brightness({"z": 0.3, "m": 0.3, "a": 0.9})
        self.assertEqual(index.items(), [(0.3, ("m", "z")), (0.9, ("a",))])
        self.assertEqual(len(index), 2)


if __name__ == "__main__":
    unittest.main()
