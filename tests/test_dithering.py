"""
Floyd-Steinberg golden outputs.

These pin the diffusion order (row-major, 7/3/5/1 weights, per-step
clamping and byte rounding); any reordering changes them.
"""

import unittest

import numpy as np

from braille_gen.dithering import dither, dither_plane

from image_factory import gray_buffer, random_buffer, red_plane


class TestDitherGolden(unittest.TestCase):

    def test_error_pushed_right(self):
        # 100 -> 0, error 100; right neighbour 100 + 43.75 -> 144 -> 255
        self.assertEqual(dither_plane(np.array([[100, 100]])).tolist(), [[0, 255]])

    def test_two_by_two(self):
        out = dither(gray_buffer([[100, 100], [100, 100]]))
        self.assertEqual(red_plane(out), [[0, 255], [0, 0]])

    def test_negative_error(self):
        # 200 -> 255 (error -55), 100 - 24.0625 -> 76 -> 0, 50 + 33.25 -> 83 -> 0
        self.assertEqual(dither_plane(np.array([[200, 100, 50]])).tolist(), [[255, 0, 0]])

    def test_neighbour_rounds_half_to_even(self):
        # 124 + 8 * 7/16 = 127.5 -> 128, which clears threshold 127
        out = dither_plane(np.array([[8, 124]]), threshold=127)
        self.assertEqual(out.tolist(), [[0, 255]])

    def test_threshold_is_strict(self):
        self.assertEqual(dither_plane(np.array([[128]])).tolist(), [[0]])
        self.assertEqual(dither_plane(np.array([[129]])).tolist(), [[255]])

    def test_solid_extremes_unchanged(self):
        black = dither(gray_buffer([[0] * 4] * 4))
        white = dither(gray_buffer([[255] * 4] * 4))
        self.assertTrue((black.data.reshape(-1, 4)[:, :3] == 0).all())
        self.assertTrue((white.data.reshape(-1, 4)[:, :3] == 255).all())


class TestDitherProperties(unittest.TestCase):

    def test_binary_output_and_alpha_preserved(self):
        src = random_buffer(17, 11, seed=7)
        out = dither(src)
        rgba = out.data.reshape(-1, 4)

        self.assertTrue(set(np.unique(rgba[:, :3]).tolist()) <= {0, 255})
        self.assertTrue((rgba[:, 0] == rgba[:, 1]).all())
        self.assertTrue((rgba[:, 1] == rgba[:, 2]).all())
        self.assertTrue((rgba[:, 3] == src.data.reshape(-1, 4)[:, 3]).all())

    def test_input_not_mutated(self):
        src = gray_buffer([[100, 100], [100, 100]])
        before = src.data.copy()
        dither(src)
        self.assertTrue((src.data == before).all())

    def test_mid_gray_is_roughly_half_dark(self):
        out = dither(gray_buffer([[127] * 32] * 32))
        dark = int((out.as_array()[:, :, 0] == 0).sum())
        self.assertTrue(400 < dark < 624, dark)


if __name__ == "__main__":
    unittest.main()
