"""
Braille Art Generator

Facade over the rendering pipeline:

    Braille:  resize (2W x round(2W * h/w)) -> grayscale -> dither -> pack 2x4 cells
    Ramp:     resize (W x round(W * h/w * 0.5)) -> grayscale -> ramp lookup

With ``steam`` set, Braille output is kept under the byte budget: the
width is shrunk before rendering and trailing rows are trimmed after.

generate() returns a RenderResult on success and a RenderFailure for
invalid options, so callers branch on the result instead of catching.
"""

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from .braille import render_braille
from .budget import (
    braille_pixel_height,
    closed_form_width,
    fit_width,
    max_chars,
    trim_rows,
)
from .charsets import CharsetRegistry, is_braille_charset
from .config import DEFAULT_CHARSET, GeneratorConfig
from .dithering import dither
from .errors import ConfigurationError, FailureKind
from .gradient_mapper import ramp_height, render_ramp
from .pixel_buffer import ImageSource, PixelBuffer, load_pixel_buffer
from .preprocessing import gray_to_rgba, resize, to_gray
from .result import GenerateOutcome, RenderFailure, RenderResult, create_result
from .validation import FileValidation, validate_file, validate_path


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerateOptions:
    """Per-call render options."""
    width: int                        # Target character columns
    charset: str = DEFAULT_CHARSET    # Name or literal ramp
    invert: bool = False
    steam: bool = False               # Byte-budget mode (Braille only)

    def validate(self):
        if not isinstance(self.width, int) or self.width < 1:
            raise ConfigurationError(f"Width must be a positive integer, got {self.width!r}")
        if not self.charset:
            raise ConfigurationError("Charset must not be empty")


class BrailleArtGenerator:
    """
    Image-to-text generator with its own charset registry.

    Example:
        >>> generator = BrailleArtGenerator()
        >>> outcome = generator.generate(buffer, GenerateOptions(width=40))
        >>> if outcome.ok:
        ...     print(outcome.text)
    """

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        registry: Optional[CharsetRegistry] = None,
    ):
        """
        Args:
            config: Budget, thresholds and validation limits
            registry: Charset registry; a fresh one seeded with the
                built-ins is created when omitted
        """
        self.config = config or GeneratorConfig()
        self.registry = registry if registry is not None else CharsetRegistry()

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def generate(self, buffer: PixelBuffer, options: GenerateOptions) -> GenerateOutcome:
        """
        Render a pixel buffer.

        Args:
            buffer: Decoded RGBA image
            options: Width, charset, invert and steam flags

        Returns:
            RenderResult, or RenderFailure(kind=CONFIGURATION)
        """
        start_time = time.time()
        try:
            options.validate()
            if is_braille_charset(options.charset):
                result = self._generate_braille(buffer, options)
            else:
                result = self._generate_ramp(buffer, options)
        except ConfigurationError as e:
            logger.warning("Rejected render options: %s", e)
            return RenderFailure(kind=FailureKind.CONFIGURATION, message=str(e))

        result.metadata['render_time'] = f"{time.time() - start_time:.3f}s"
        logger.debug(
            "Generated chars=%d, estBytes=%d",
            result.char_count, result.metadata.get('estimated_bytes', 0),
        )
        return result

    def _generate_braille(self, buffer: PixelBuffer, options: GenerateOptions) -> RenderResult:
        cfg = self.config
        char_width = options.width

        if options.steam:
            char_width = fit_width(buffer, options.width, cfg.byte_budget, cfg.bytes_per_char)
            if char_width != options.width:
                logger.info(
                    "Steam mode: adjusted char width from %d -> %d (closed-form estimate %d)",
                    options.width, char_width,
                    closed_form_width(buffer, cfg.byte_budget, cfg.bytes_per_char),
                )

        pixel_width = char_width * 2
        pixel_height = braille_pixel_height(char_width, buffer.aspect_ratio)

        resized = resize(buffer, pixel_width, pixel_height)
        dithered = dither(gray_to_rgba(resized), cfg.dither_threshold)
        text = render_braille(dithered, invert=options.invert)

        rows_trimmed = 0
        budget_exhausted = False
        if options.steam:
            trimmed, rows_trimmed = trim_rows(text, cfg.byte_budget, cfg.bytes_per_char)
            budget_exhausted = bool(text) and not trimmed
            text = trimmed

        char_count = len(text.replace('\n', ''))
        return create_result(
            text=text,
            adjusted_width=char_width,
            charset=options.charset,
            mode="braille",
            requested_width=options.width,
            invert=options.invert,
            steam=options.steam,
            char_cap=max_chars(cfg.byte_budget, cfg.bytes_per_char) if options.steam else None,
            rows_trimmed=rows_trimmed,
            budget_exhausted=budget_exhausted,
            estimated_bytes=char_count * cfg.bytes_per_char,
        )

    def _generate_ramp(self, buffer: PixelBuffer, options: GenerateOptions) -> RenderResult:
        ramp = self.registry.resolve(options.charset)
        height = ramp_height(options.width, buffer.width, buffer.height, self.config.glyph_aspect)

        resized = resize(buffer, options.width, height)
        text = render_ramp(to_gray(resized), ramp, invert=options.invert)

        return create_result(
            text=text,
            charset=options.charset,
            mode="ramp",
            requested_width=options.width,
            invert=options.invert,
            ramp_length=len(ramp),
            estimated_bytes=len(text.replace('\n', '').encode('utf-8')),
        )

    def generate_from_image(self, image: ImageSource, options: GenerateOptions) -> GenerateOutcome:
        """
        Decode with Pillow, then render.

        Decoder errors (PIL.UnidentifiedImageError, OSError) propagate.
        """
        return self.generate(load_pixel_buffer(image), options)

    def generate_from_path(self, path: Union[str, Path], options: GenerateOptions) -> GenerateOutcome:
        """Validate a file on disk, then decode and render it."""
        check = self.validate_path(path)
        if not check.valid:
            return RenderFailure(kind=check.kind, message=check.reason)
        return self.generate_from_image(path, options)

    # ------------------------------------------------------------------
    # Charsets and validation
    # ------------------------------------------------------------------

    def register_charset(self, name: str, characters: str):
        """Add or overwrite a custom ramp (raises ConfigurationError if empty)."""
        self.registry.register(name, characters)

    def available_charsets(self) -> List[str]:
        return self.registry.names()

    def validate_file(self, mime_type: str, size: int, locale: Optional[str] = None) -> FileValidation:
        return validate_file(
            mime_type,
            size,
            locale=locale or self.config.locale,
            accepted_types=self.config.accepted_types,
            max_size=self.config.max_file_size,
        )

    def validate_path(self, path: Union[str, Path], locale: Optional[str] = None) -> FileValidation:
        return validate_path(
            path,
            locale=locale or self.config.locale,
            accepted_types=self.config.accepted_types,
            max_size=self.config.max_file_size,
        )


# Convenience function for quick usage
def image_to_braille(
    image: ImageSource,
    width: int = 60,
    charset: str = DEFAULT_CHARSET,
    invert: bool = False,
    steam: bool = False,
) -> GenerateOutcome:
    """
    Quick function to convert an image to Braille (or ramp) text.

    Args:
        image: Path, encoded bytes, or PIL Image
        width: Output width in characters
        charset: "braille", a registered ramp name, or a literal ramp
        invert: Swap dark and light
        steam: Keep Braille output under the byte budget

    Returns:
        RenderResult or RenderFailure
    """
    generator = BrailleArtGenerator()
    options = GenerateOptions(width=width, charset=charset, invert=invert, steam=steam)
    return generator.generate_from_image(image, options)
