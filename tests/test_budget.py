"""
Byte-budget fitter tests.
"""

import unittest

from braille_gen.budget import (
    braille_rows,
    closed_form_width,
    fit_width,
    max_chars,
    payload_size,
    trim_rows,
)
from braille_gen.errors import ConfigurationError

from image_factory import solid_buffer


class TestFitWidth(unittest.TestCase):

    def test_character_cap(self):
        self.assertEqual(max_chars(), 333)
        self.assertEqual(max_chars(999, 3), 333)
        self.assertEqual(max_chars(2, 3), 0)

    def test_rows(self):
        self.assertEqual(braille_rows(40, 1.0), 20)
        self.assertEqual(braille_rows(1, 0.01), 1)

    def test_square(self):
        # 25 * 13 = 325 fits, 26 * 13 = 338 does not
        self.assertEqual(fit_width(1.0, 100), 25)

    def test_tall_buffer(self):
        # 8 * 40 = 320 fits, 9 * 45 = 405 does not
        self.assertEqual(fit_width(solid_buffer(10, 100, 0), 80), 8)

    def test_already_fits(self):
        self.assertEqual(fit_width(1.0, 10), 10)

    def test_floor_of_one(self):
        self.assertEqual(fit_width(2000.0, 50), 1)

    def test_idempotent(self):
        for aspect in (0.1, 0.5, 1.0, 1.37, 3.0, 2000.0):
            for requested in (1, 7, 40, 120, 500):
                once = fit_width(aspect, requested)
                self.assertEqual(fit_width(aspect, once), once, (aspect, requested))

    def test_result_fits_unless_at_floor(self):
        for aspect in (0.25, 0.8, 1.0, 2.5):
            width = fit_width(aspect, 300)
            self.assertLessEqual(width * braille_rows(width, aspect), 333)

    def test_invalid_width(self):
        with self.assertRaises(ConfigurationError):
            fit_width(1.0, 0)

    def test_closed_form_estimate(self):
        self.assertEqual(closed_form_width(1.0), 25)
        self.assertLessEqual(abs(closed_form_width(10.0) - fit_width(10.0, 500)), 1)


class TestTrimRows(unittest.TestCase):

    def test_under_budget_untouched(self):
        text = "ab\ncd\n"
        self.assertEqual(trim_rows(text), (text, 0))

    def test_drops_trailing_rows(self):
        # cap = 12 // 3 = 4 characters
        self.assertEqual(trim_rows("ab\ncd\nef\n", byte_budget=12), ("ab\ncd\n", 1))

    def test_nothing_fits(self):
        self.assertEqual(trim_rows("ab\ncd\nef\n", byte_budget=2), ("", 3))

    def test_empty_input(self):
        self.assertEqual(trim_rows(""), ("", 0))

    def test_payload_size(self):
        self.assertEqual(payload_size("⣿⣿\n⣿\n"), 9)
        self.assertEqual(payload_size("ab\n"), 2)


if __name__ == "__main__":
    unittest.main()
