"""
Floyd-Steinberg Dithering

Binarizes a grayscale RGBA buffer to pure black / white while pushing
the quantization error onto pixels that have not been visited yet:

          .   X   7
          3   5   1      (/16)

The scan is strictly row-major and single pass. Each neighbour is
clamped to [0, 255] and rounded to a byte after receiving its share, so
results are reproducible bit for bit.
"""

import numpy as np

from .config import DITHER_THRESHOLD
from .pixel_buffer import PixelBuffer


def _to_byte(value: float) -> int:
    # Clamp, then round half to even
    if value <= 0:
        return 0
    if value >= 255:
        return 255
    return round(value)


def dither_plane(plane: np.ndarray, threshold: int = DITHER_THRESHOLD) -> np.ndarray:
    """
    Apply Floyd-Steinberg dithering to a 2D intensity array.

    Args:
        plane: (height, width) array of 0-255 intensities
        threshold: Values strictly above become 255, the rest 0

    Returns:
        uint8 array of the same shape containing only 0 and 255
    """
    height, width = plane.shape
    img = np.asarray(plane, dtype=np.uint8).tolist()

    for y in range(height):
        row = img[y]
        below = img[y + 1] if y + 1 < height else None

        for x in range(width):
            old = row[x]
            new = 255 if old > threshold else 0
            row[x] = new

            error = old - new
            if error == 0:
                continue

            if x + 1 < width:
                row[x + 1] = _to_byte(row[x + 1] + error * 7 / 16)
            if below is not None:
                if x > 0:
                    below[x - 1] = _to_byte(below[x - 1] + error * 3 / 16)
                below[x] = _to_byte(below[x] + error * 5 / 16)
                if x + 1 < width:
                    below[x + 1] = _to_byte(below[x + 1] + error * 1 / 16)

    return np.array(img, dtype=np.uint8).reshape(height, width)


def dither(buffer: PixelBuffer, threshold: int = DITHER_THRESHOLD) -> PixelBuffer:
    """
    Dither a grayscale RGBA buffer (R == G == B).

    The red channel drives quantization; the result is written to R, G
    and B. Alpha is copied unchanged and the input is not modified.

    Args:
        buffer: Output of gray_to_rgba()
        threshold: Binarization threshold (default 128)

    Returns:
        New PixelBuffer with R = G = B in {0, 255}
    """
    rgba = buffer.as_array()
    binary = dither_plane(rgba[:, :, 0], threshold)

    out = rgba.copy()
    out[:, :, 0] = binary
    out[:, :, 1] = binary
    out[:, :, 2] = binary

    return PixelBuffer(width=buffer.width, height=buffer.height, data=out.reshape(-1))
