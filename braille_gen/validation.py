"""
Upload Validation

Checks an image file's media type and size before decoding. Problems are
returned as values with a human-readable, localized reason so a caller
can show them to the user directly.
"""

import mimetypes
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, Union

from .config import ACCEPTED_TYPES, DEFAULT_LOCALE, MAX_FILE_SIZE
from .errors import FailureKind


MESSAGES = {
    "en": {
        FailureKind.UNSUPPORTED_FILE: "Only JPG and PNG images are supported",
        FailureKind.OVERSIZE_FILE: "Image size must not exceed {limit}",
    },
    "zh": {
        FailureKind.UNSUPPORTED_FILE: "仅支持 JPG 和 PNG 格式的图片",
        FailureKind.OVERSIZE_FILE: "图片大小不能超过 {limit}",
    },
}


@dataclass(frozen=True)
class FileValidation:
    """Outcome of a file check."""
    valid: bool
    reason: Optional[str] = None
    kind: Optional[FailureKind] = None

    def __bool__(self) -> bool:
        return self.valid


def format_size(size: int) -> str:
    """Compact size label: 10MB, 512KB or 300B."""
    if size >= 1024 * 1024 and size % (1024 * 1024) == 0:
        return f"{size // (1024 * 1024)}MB"
    if size >= 1024 and size % 1024 == 0:
        return f"{size // 1024}KB"
    return f"{size}B"


def message_for(kind: FailureKind, locale: str = DEFAULT_LOCALE, max_size: int = MAX_FILE_SIZE) -> str:
    """Localized reason text; unknown locales fall back to English."""
    template = MESSAGES.get(locale, MESSAGES[DEFAULT_LOCALE])[kind]
    return template.format(limit=format_size(max_size))


def validate_file(
    mime_type: str,
    size: int,
    locale: str = DEFAULT_LOCALE,
    accepted_types: Sequence[str] = ACCEPTED_TYPES,
    max_size: int = MAX_FILE_SIZE,
) -> FileValidation:
    """
    Validate an upload by media type and byte size.

    The type is checked first, so an oversize GIF reports the type.

    Args:
        mime_type: e.g. "image/png"
        size: File size in bytes
        locale: "en" or "zh"

    Returns:
        FileValidation
    """
    if mime_type not in accepted_types:
        kind = FailureKind.UNSUPPORTED_FILE
        return FileValidation(valid=False, reason=message_for(kind, locale, max_size), kind=kind)

    if size > max_size:
        kind = FailureKind.OVERSIZE_FILE
        return FileValidation(valid=False, reason=message_for(kind, locale, max_size), kind=kind)

    return FileValidation(valid=True)


def validate_path(
    path: Union[str, Path],
    locale: str = DEFAULT_LOCALE,
    accepted_types: Sequence[str] = ACCEPTED_TYPES,
    max_size: int = MAX_FILE_SIZE,
) -> FileValidation:
    """Validate a file on disk, guessing its type from the extension."""
    mime_type, _ = mimetypes.guess_type(str(path))
    size = os.path.getsize(path)
    return validate_file(mime_type or "", size, locale, accepted_types, max_size)
