"""
Braille packing tests.
"""

import unittest

from braille_gen.braille import BRAILLE_BASE, braille_char, braille_mask, render_braille
from braille_gen.dithering import dither

from image_factory import gray_buffer, random_buffer


def single_dark(col, row):
    rows = [[255, 255] for _ in range(4)]
    rows[row][col] = 0
    return gray_buffer(rows)


class TestBrailleRenderer(unittest.TestCase):

    def test_full_cell(self):
        self.assertEqual(render_braille(gray_buffer([[0, 0]] * 4)), "⣿\n")

    def test_empty_cell(self):
        self.assertEqual(render_braille(gray_buffer([[255, 255]] * 4)), "⠀\n")

    def test_dot_bit_layout(self):
        expected = {
            (0, 0): 0, (0, 1): 1, (0, 2): 2,
            (1, 0): 3, (1, 1): 4, (1, 2): 5,
            (0, 3): 6, (1, 3): 7,
        }
        for (col, row), bit in expected.items():
            text = render_braille(single_dark(col, row))
            self.assertEqual(text, chr(BRAILLE_BASE + (1 << bit)) + "\n", (col, row))

    def test_out_of_bounds_reads_as_light(self):
        # 1x1 dark pixel: only dot 1 is inside the image
        self.assertEqual(render_braille(gray_buffer([[0]])), "⠁\n")
        # Inverted, the padding counts as dark
        self.assertEqual(render_braille(gray_buffer([[0]]), invert=True), chr(0x28FE) + "\n")

    def test_dark_threshold(self):
        self.assertEqual(render_braille(gray_buffer([[127]])), "⠁\n")
        self.assertEqual(render_braille(gray_buffer([[128]])), "⠀\n")

    def test_row_layout(self):
        text = render_braille(gray_buffer([[0] * 4] * 8))
        self.assertEqual(text, "⣿⣿\n⣿⣿\n")

        # 5x5 pixels -> 3 columns, 2 rows of cells
        lines = render_braille(gray_buffer([[0] * 5] * 5)).split("\n")
        self.assertEqual(lines[-1], "")
        self.assertEqual([len(line) for line in lines[:-1]], [3, 3])

    def test_invert_is_bit_complement(self):
        dithered = dither(random_buffer(9, 13, seed=3))
        normal = render_braille(dithered, invert=False)
        inverted = render_braille(dithered, invert=True)

        self.assertEqual(len(normal), len(inverted))
        for a, b in zip(normal, inverted):
            if a == "\n":
                self.assertEqual(b, "\n")
            else:
                self.assertEqual(braille_mask(a) ^ braille_mask(b), 0xFF)


class TestBrailleHelpers(unittest.TestCase):

    def test_char_and_mask(self):
        self.assertEqual(braille_char(0), "⠀")
        self.assertEqual(braille_char(0xFF), "⣿")
        self.assertEqual(braille_mask("⠛"), 0x1B)

    def test_invalid_values(self):
        with self.assertRaises(ValueError):
            braille_char(256)
        with self.assertRaises(ValueError):
            braille_mask("A")


if __name__ == "__main__":
    unittest.main()
