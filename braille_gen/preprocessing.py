"""
Image Preprocessing Utilities

Resizing and grayscale conversion for the Braille / ramp renderers:
- Nearest-neighbor resampling (no interpolation, no antialiasing)
- Luminosity grayscale (ITU-R BT.601 weights)
- Gray-to-RGBA expansion for the dithering stage
"""

import numpy as np

from .errors import ConfigurationError
from .pixel_buffer import PixelBuffer


# ITU-R BT.601 luma weights
LUMA_WEIGHTS = (0.299, 0.587, 0.114)


def round_half_up(values):
    """Round .5 away from zero for non-negative inputs (like JS Math.round)."""
    return np.floor(np.asarray(values, dtype=np.float64) + 0.5)


def resize(buffer: PixelBuffer, target_width: int, target_height: int) -> PixelBuffer:
    """
    Nearest-neighbor resize.

    Target pixel (x, y) copies source pixel
    (floor(x * sw / tw), floor(y * sh / th)) verbatim.

    Args:
        buffer: Source pixels
        target_width: Output width in pixels (>= 1)
        target_height: Output height in pixels (>= 1)

    Returns:
        New PixelBuffer of target_width x target_height
    """
    if target_width < 1 or target_height < 1:
        raise ConfigurationError(
            f"Resize target must be at least 1x1, got {target_width}x{target_height}"
        )

    sw, sh = buffer.width, buffer.height

    # Integer arithmetic keeps floor() exact at ratio boundaries
    xs = np.minimum((np.arange(target_width) * sw) // target_width, sw - 1)
    ys = np.minimum((np.arange(target_height) * sh) // target_height, sh - 1)

    src = buffer.as_array()
    out = src[ys[:, None], xs[None, :]]

    return PixelBuffer(width=target_width, height=target_height, data=out.reshape(-1).copy())


def to_gray(buffer: PixelBuffer) -> np.ndarray:
    """
    Convert RGBA to grayscale intensities.

    gray = round(0.299 R + 0.587 G + 0.114 B), alpha ignored.

    Returns:
        uint8 array of shape (height, width)
    """
    rgba = buffer.data.reshape(-1, 4).astype(np.float64)
    wr, wg, wb = LUMA_WEIGHTS
    gray = wr * rgba[:, 0] + wg * rgba[:, 1] + wb * rgba[:, 2]
    gray = np.clip(round_half_up(gray), 0, 255).astype(np.uint8)
    return gray.reshape(buffer.height, buffer.width)


def gray_to_rgba(buffer: PixelBuffer) -> PixelBuffer:
    """Rewrite R, G and B to the gray value, keeping alpha."""
    gray = to_gray(buffer).reshape(-1)
    rgba = buffer.data.reshape(-1, 4).copy()
    rgba[:, 0] = gray
    rgba[:, 1] = gray
    rgba[:, 2] = gray
    return PixelBuffer(width=buffer.width, height=buffer.height, data=rgba.reshape(-1))
