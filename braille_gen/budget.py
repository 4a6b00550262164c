"""
Byte-Budget Fitter

Keeps Braille output under a hard byte ceiling (999 bytes by default,
i.e. strictly under 1000). Every Braille character costs 3 bytes in
UTF-8, so the budget is really a character cap.

Two passes share the same budget:
1. fit_width(): shrink the requested character width until the
   predicted cell count fits. Rows are re-derived at every step because
   rounding makes the cell count non-monotonic in small ranges.
2. trim_rows(): fallback on the rendered text, dropping trailing rows
   while it is still over the cap.
"""

import logging
import math
from typing import Tuple, Union

from .braille import CELL_HEIGHT, CELL_WIDTH
from .config import BYTE_BUDGET, BYTES_PER_BRAILLE_CHAR
from .errors import ConfigurationError
from .pixel_buffer import PixelBuffer


logger = logging.getLogger(__name__)

MIN_CHAR_WIDTH = 1


def max_chars(byte_budget: int = BYTE_BUDGET, bytes_per_char: int = BYTES_PER_BRAILLE_CHAR) -> int:
    """Characters allowed by the budget (333 for 999 bytes)."""
    return max(0, byte_budget // bytes_per_char)


def braille_pixel_height(char_width: int, aspect_ratio: float) -> int:
    """Pixel height of the resized image for a Braille render (>= 1)."""
    pixel_width = char_width * CELL_WIDTH
    return max(1, math.floor(pixel_width * aspect_ratio + 0.5))


def braille_rows(char_width: int, aspect_ratio: float) -> int:
    """Rows of Braille cells produced at the given character width."""
    return -(-braille_pixel_height(char_width, aspect_ratio) // CELL_HEIGHT)


def _aspect_of(source: Union[PixelBuffer, float]) -> float:
    if isinstance(source, PixelBuffer):
        return source.aspect_ratio
    return float(source)


def fit_width(
    source: Union[PixelBuffer, float],
    requested_width: int,
    byte_budget: int = BYTE_BUDGET,
    bytes_per_char: int = BYTES_PER_BRAILLE_CHAR,
) -> int:
    """
    Largest width <= requested_width whose render fits the budget.

    Linear search downwards, stopping at 1 even if width 1 is still
    over budget (trim_rows() handles that case).

    Args:
        source: Source buffer, or its height / width ratio
        requested_width: Desired width in characters (>= 1)
        byte_budget: Maximum serialized size in bytes

    Returns:
        Effective character width
    """
    if requested_width < MIN_CHAR_WIDTH:
        raise ConfigurationError(f"Width must be at least 1, got {requested_width}")

    aspect = _aspect_of(source)
    cap = max_chars(byte_budget, bytes_per_char)

    width = requested_width
    while width > MIN_CHAR_WIDTH and width * braille_rows(width, aspect) > cap:
        width -= 1

    return width


def closed_form_width(
    source: Union[PixelBuffer, float],
    byte_budget: int = BYTE_BUDGET,
    bytes_per_char: int = BYTES_PER_BRAILLE_CHAR,
) -> int:
    """
    Analytic estimate of the widest fitting width.

    W * (2W * aspect / 4) <= cap  =>  W <= sqrt(2 * cap / aspect).
    Ignores rounding, so it can be off by one either way; fit_width()
    stays authoritative.
    """
    aspect = _aspect_of(source)
    cap = max_chars(byte_budget, bytes_per_char)
    if aspect <= 0:
        return cap
    return max(MIN_CHAR_WIDTH, int(math.sqrt(2 * cap / aspect)))


def trim_rows(
    text: str,
    byte_budget: int = BYTE_BUDGET,
    bytes_per_char: int = BYTES_PER_BRAILLE_CHAR,
) -> Tuple[str, int]:
    """
    Drop trailing rows until the character count fits the budget.

    Args:
        text: Rendered, newline-terminated rows
        byte_budget: Same budget used by fit_width()

    Returns:
        (trimmed text, number of rows dropped). The text is empty when no
        row fits.
    """
    cap = max_chars(byte_budget, bytes_per_char)

    lines = text.split('\n')
    if lines and lines[-1] == '':
        lines.pop()

    total = sum(len(line) for line in lines)
    dropped = 0
    while total > cap and lines:
        total -= len(lines.pop())
        dropped += 1

    if dropped:
        logger.info("Byte budget: dropped %d trailing row(s)", dropped)

    if total > cap or not lines:
        return '', dropped

    return '\n'.join(lines) + '\n', dropped


def payload_size(text: str) -> int:
    """UTF-8 size of the row characters; line breaks are not counted."""
    return len(text.replace('\n', '').encode('utf-8'))
