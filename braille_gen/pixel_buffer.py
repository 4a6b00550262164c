"""
RGBA Pixel Buffer

The decoded image handed to the renderer: width, height and a flat
row-major array of interleaved R, G, B, A bytes. Decoding itself is done
by Pillow in load_pixel_buffer(); the pipeline never parses file formats.
"""

import io
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple, Union

import numpy as np
from PIL import Image

from .errors import ConfigurationError


ImageSource = Union[str, Path, bytes, Image.Image]


@dataclass(frozen=True, eq=False)
class PixelBuffer:
    """
    Decoded RGBA image.

    Attributes:
        width: Width in pixels (>= 1)
        height: Height in pixels (>= 1)
        data: Flat uint8 array, len == width * height * 4
    """
    width: int
    height: int
    data: np.ndarray

    def __post_init__(self):
        if self.width < 1 or self.height < 1:
            raise ConfigurationError(
                f"Pixel buffer must be at least 1x1, got {self.width}x{self.height}"
            )

        data = self.data
        if isinstance(data, (bytes, bytearray)):
            data = np.frombuffer(bytes(data), dtype=np.uint8)
        else:
            data = np.asarray(data).ravel()
            if data.dtype != np.uint8:
                if data.size and (data.min() < 0 or data.max() > 255):
                    raise ConfigurationError("Channel values must be in [0, 255]")
                data = data.astype(np.uint8)

        expected = self.width * self.height * 4
        if data.size != expected:
            raise ConfigurationError(
                f"Expected {expected} channel values for "
                f"{self.width}x{self.height} RGBA, got {data.size}"
            )

        object.__setattr__(self, "data", data)

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    @property
    def aspect_ratio(self) -> float:
        """Height / width."""
        return self.height / self.width

    def as_array(self) -> np.ndarray:
        """View the data as a (height, width, 4) array."""
        return self.data.reshape(self.height, self.width, 4)

    def pixel(self, x: int, y: int) -> Tuple[int, int, int, int]:
        """Get the (r, g, b, a) tuple at (x, y)."""
        idx = (y * self.width + x) * 4
        return tuple(int(v) for v in self.data[idx:idx + 4])

    def to_image(self) -> Image.Image:
        """Convert back to a PIL RGBA image."""
        return Image.fromarray(np.ascontiguousarray(self.as_array()))

    @classmethod
    def from_image(cls, image: Image.Image) -> "PixelBuffer":
        """Build a buffer from any PIL image (converted to RGBA)."""
        if image.mode != "RGBA":
            image = image.convert("RGBA")
        arr = np.asarray(image, dtype=np.uint8)
        return cls(width=image.width, height=image.height, data=arr.reshape(-1).copy())

    @classmethod
    def filled(cls, width: int, height: int, rgba: Tuple[int, int, int, int]) -> "PixelBuffer":
        """Create a uniformly coloured buffer."""
        data = np.tile(np.array(rgba, dtype=np.uint8), max(width, 0) * max(height, 0))
        return cls(width=width, height=height, data=data)


def load_pixel_buffer(source: ImageSource) -> PixelBuffer:
    """
    Decode an image into a PixelBuffer.

    Args:
        source: Path, raw encoded bytes, or an already opened PIL Image

    Returns:
        PixelBuffer with RGBA data

    Raises:
        PIL.UnidentifiedImageError / OSError from Pillow, unchanged.
    """
    if isinstance(source, Image.Image):
        return PixelBuffer.from_image(source)

    if isinstance(source, (bytes, bytearray)):
        source = io.BytesIO(source)

    with Image.open(source) as img:
        img.load()
        return PixelBuffer.from_image(img)
