"""
Charset registry tests.
"""

import unittest

from braille_gen.charsets import (
    BLOCK,
    BRAILLE_PATTERNS,
    STANDARD,
    CharsetRegistry,
    is_braille_charset,
    list_charsets,
)
from braille_gen.errors import ConfigurationError
from braille_gen.generator import BrailleArtGenerator


class TestCharsetRegistry(unittest.TestCase):

    def test_builtins(self):
        registry = CharsetRegistry()
        self.assertEqual(registry.get("block"), BLOCK)
        self.assertEqual(registry.get("standard"), STANDARD)
        self.assertEqual(len(BRAILLE_PATTERNS), 256)
        self.assertEqual(set(list_charsets()), {"default", "braille", "block", "standard"})

    def test_braille_sentinels(self):
        self.assertTrue(is_braille_charset("default"))
        self.assertTrue(is_braille_charset("braille"))
        self.assertFalse(is_braille_charset("standard"))

    def test_register_and_overwrite(self):
        registry = CharsetRegistry()
        registry.register("dots", " .:oO@")
        self.assertEqual(registry.resolve("dots"), " .:oO@")
        registry.register("dots", "@ ")
        self.assertEqual(registry.resolve("dots"), "@ ")
        self.assertIn("dots", registry.names())

    def test_register_rejects_empty(self):
        registry = CharsetRegistry()
        with self.assertRaises(ConfigurationError):
            registry.register("custom", "")
        with self.assertRaises(ConfigurationError):
            registry.register("", "abc")
        self.assertNotIn("custom", registry)

    def test_register_rejects_sentinel_names(self):
        with self.assertRaises(ConfigurationError):
            CharsetRegistry().register("braille", "@ ")

    def test_unknown_name_is_literal_ramp(self):
        self.assertEqual(CharsetRegistry().resolve("#+. "), "#+. ")
        with self.assertRaises(ConfigurationError):
            CharsetRegistry().resolve("")

    def test_snapshot_is_read_only(self):
        registry = CharsetRegistry()
        snap = registry.snapshot()
        with self.assertRaises(TypeError):
            snap["x"] = "y"
        registry.register("later", "ab")
        self.assertNotIn("later", snap)

    def test_extra_seed(self):
        registry = CharsetRegistry(extra={"mine": "xo"})
        self.assertEqual(registry.resolve("mine"), "xo")


class TestRegistryIsolation(unittest.TestCase):

    def test_generators_do_not_share_registrations(self):
        first = BrailleArtGenerator()
        second = BrailleArtGenerator()

        first.register_charset("custom", "#.")

        self.assertIn("custom", first.available_charsets())
        self.assertNotIn("custom", second.available_charsets())

    def test_injected_registry_is_used(self):
        registry = CharsetRegistry()
        generator = BrailleArtGenerator(registry=registry)
        generator.register_charset("shared", "ab")
        self.assertEqual(registry.get("shared"), "ab")

    def test_generator_register_rejects_empty(self):
        with self.assertRaises(ConfigurationError):
            BrailleArtGenerator().register_charset("custom", "")


if __name__ == "__main__":
    unittest.main()
