"""
Image-to-Braille Art Generator

Turns a decoded RGBA image into Unicode Braille text (2x4 dots per
character, Floyd-Steinberg dithered) or character-ramp text, with an
optional byte-budget mode that keeps Braille output under 1000 bytes.
"""

__version__ = "0.1.0"

from .charsets import CharsetRegistry, list_charsets
from .config import GeneratorConfig
from .errors import ConfigurationError, FailureKind
from .generator import BrailleArtGenerator, GenerateOptions, image_to_braille
from .pixel_buffer import PixelBuffer, load_pixel_buffer
from .result import RenderFailure, RenderResult
from .validation import FileValidation, validate_file

__all__ = [
    "BrailleArtGenerator",
    "CharsetRegistry",
    "ConfigurationError",
    "FailureKind",
    "FileValidation",
    "GenerateOptions",
    "GeneratorConfig",
    "PixelBuffer",
    "RenderFailure",
    "RenderResult",
    "image_to_braille",
    "list_charsets",
    "load_pixel_buffer",
    "validate_file",
]
