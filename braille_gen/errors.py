"""
Error types shared by the rendering pipeline.

Building blocks raise ConfigurationError and fail fast. The generator
facade turns it into a RenderFailure so callers can branch on
FailureKind instead of catching exceptions.
"""

from enum import Enum


class ConfigurationError(ValueError):
    """Invalid options or a malformed pixel buffer."""


class FailureKind(str, Enum):
    """Why a render or file check did not produce art."""
    CONFIGURATION = "configuration"
    UNSUPPORTED_FILE = "unsupported_file"
    OVERSIZE_FILE = "oversize_file"
