"""
Braille Renderer

Packs 2x4 pixel blocks into Unicode Braille patterns (U+2800..U+28FF).
Each character carries 8 dots, so a row of W characters shows 2W x 4
pixels. Dot numbering follows the Unicode standard:

    (0,0) bit0   (1,0) bit3
    (0,1) bit1   (1,1) bit4
    (0,2) bit2   (1,2) bit5
    (0,3) bit6   (1,3) bit7
"""

from typing import Dict, Tuple

import numpy as np

from .pixel_buffer import PixelBuffer


BRAILLE_BASE = 0x2800
CELL_WIDTH = 2
CELL_HEIGHT = 4

# Pixels at or above this are light
DARK_THRESHOLD = 128

# (column, row) inside the cell -> bit index
DOT_BITS: Dict[Tuple[int, int], int] = {
    (0, 0): 0,
    (0, 1): 1,
    (0, 2): 2,
    (1, 0): 3,
    (1, 1): 4,
    (1, 2): 5,
    (0, 3): 6,
    (1, 3): 7,
}


def braille_char(mask: int) -> str:
    """Braille character for an 8-bit dot mask."""
    if not 0 <= mask <= 0xFF:
        raise ValueError(f"Braille mask must be in [0, 255], got {mask}")
    return chr(BRAILLE_BASE + mask)


def braille_mask(char: str) -> int:
    """Dot mask of a Braille pattern character."""
    mask = ord(char) - BRAILLE_BASE
    if not 0 <= mask <= 0xFF:
        raise ValueError(f"{char!r} is not a Braille pattern")
    return mask


def cell_masks(plane: np.ndarray, invert: bool = False) -> np.ndarray:
    """
    Compute the dot mask of every 2x4 cell.

    Samples past the right / bottom edge read as 255 (background).

    Args:
        plane: (height, width) intensities
        invert: Light pixels become dots instead of dark ones

    Returns:
        int array of shape (ceil(height / 4), ceil(width / 2))
    """
    height, width = plane.shape
    rows = -(-height // CELL_HEIGHT)
    cols = -(-width // CELL_WIDTH)

    padded = np.full((rows * CELL_HEIGHT, cols * CELL_WIDTH), 255, dtype=np.uint8)
    padded[:height, :width] = plane

    dark = padded >= DARK_THRESHOLD if invert else padded < DARK_THRESHOLD
    cells = dark.reshape(rows, CELL_HEIGHT, cols, CELL_WIDTH)

    masks = np.zeros((rows, cols), dtype=np.int32)
    for (dx, dy), bit in DOT_BITS.items():
        masks |= cells[:, dy, :, dx].astype(np.int32) << bit

    return masks


def render_braille(buffer: PixelBuffer, invert: bool = False) -> str:
    """
    Render a dithered buffer as Braille text.

    The red channel is sampled (R == G == B after dithering). Every row
    of cells, including the last, ends with a newline.

    Args:
        buffer: Binarized RGBA buffer
        invert: Show dots where pixels are light

    Returns:
        Newline-terminated rows of Braille characters
    """
    plane = buffer.as_array()[:, :, 0]
    masks = cell_masks(plane, invert=invert)

    lines = []
    for row in masks:
        lines.append(''.join(chr(BRAILLE_BASE + int(m)) for m in row))

    return ''.join(line + '\n' for line in lines)
