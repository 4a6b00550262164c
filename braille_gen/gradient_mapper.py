"""
Ramp Mapper
Lower-fidelity alternative to Braille: one character per pixel, picked
from a ramp by brightness.

Ramps are written dense -> sparse (e.g. "@%#*+=-:. "). Intensity maps to
floor(v / 255 * (n - 1)) and the index is then mirrored, so a dark pixel
lands on the sparse end of such a ramp. ``invert`` mirrors it back.
"""

import numpy as np

from .config import GLYPH_ASPECT
from .errors import ConfigurationError
from .preprocessing import round_half_up


def ramp_height(
    char_width: int,
    source_width: int,
    source_height: int,
    glyph_aspect: float = GLYPH_ASPECT,
) -> int:
    """
    Output rows for a ramp render.

    round(width * (h / w) * 0.5); the 0.5 compensates for glyphs being
    about twice as tall as wide. Never below 1.
    """
    rows = int(round_half_up(char_width * (source_height / source_width) * glyph_aspect))
    return max(1, rows)


class RampMapper:
    """
    Maps grayscale intensities to ramp characters.

    Example:
        >>> mapper = RampMapper("@%#*+=-:. ")
        >>> text = mapper.convert(gray)
    """

    def __init__(self, ramp: str, invert: bool = False):
        if not ramp:
            raise ConfigurationError("Character ramp must not be empty")
        self.ramp = ramp
        self.invert = invert
        self._precompute_ramp()

    def _precompute_ramp(self):
        """Precompute character lookup for fast conversion."""
        self.ramp_length = len(self.ramp)
        self.char_array = np.array(list(self.ramp))

    def indices(self, gray: np.ndarray) -> np.ndarray:
        """Ramp index for every intensity."""
        last = self.ramp_length - 1
        scaled = np.asarray(gray, dtype=np.float64) / 255 * last
        idx = np.clip(np.floor(scaled).astype(np.int64), 0, last)

        idx = last - idx
        if self.invert:
            idx = last - idx
        return idx

    def convert(self, gray: np.ndarray) -> str:
        """
        Convert a (height, width) intensity array to text.

        Returns:
            Rows joined by newlines, each row newline-terminated
        """
        char_map = self.char_array[self.indices(gray)]
        return ''.join(''.join(row) + '\n' for row in char_map)


def render_ramp(gray: np.ndarray, ramp: str, invert: bool = False) -> str:
    """Render already-resized intensities with a character ramp."""
    return RampMapper(ramp, invert=invert).convert(gray)
