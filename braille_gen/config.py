"""
Generator Configuration

Defaults for the Braille / ramp renderer. Everything the pipeline treats
as a constant lives here so the width search and the row trimmer always
read the same byte budget.
"""

from dataclasses import dataclass
from typing import Tuple


# Downstream consumers reject payloads of 1000 bytes or more
BYTE_BUDGET = 999

# Every Braille pattern (U+2800..U+28FF) is 3 bytes in UTF-8
BYTES_PER_BRAILLE_CHAR = 3

# Floyd-Steinberg binarization threshold (old > threshold -> white)
DITHER_THRESHOLD = 128

# Monospace glyphs are roughly twice as tall as they are wide
GLYPH_ASPECT = 0.5

MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB
ACCEPTED_TYPES = ("image/jpeg", "image/png")

DEFAULT_WIDTH = 60
DEFAULT_CHARSET = "braille"
DEFAULT_LOCALE = "en"


@dataclass
class GeneratorConfig:
    """Configuration for a BrailleArtGenerator instance."""
    byte_budget: int = BYTE_BUDGET             # Steam mode ceiling (bytes)
    bytes_per_char: int = BYTES_PER_BRAILLE_CHAR
    dither_threshold: int = DITHER_THRESHOLD
    glyph_aspect: float = GLYPH_ASPECT         # Ramp path vertical compression
    max_file_size: int = MAX_FILE_SIZE
    accepted_types: Tuple[str, ...] = ACCEPTED_TYPES
    default_width: int = DEFAULT_WIDTH
    locale: str = DEFAULT_LOCALE               # Language of validation messages
