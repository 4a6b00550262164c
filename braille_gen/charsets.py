"""
Character Set Definitions and Registry

Built-in charsets:
- default / braille: sentinel names selecting the Braille renderer
- block: shade blocks (░▒▓█)
- standard: 10-step ASCII ramp (@%#*+=-:. )

Custom ramps are registered per CharsetRegistry instance; each generator
owns its own registry, so registrations never leak between instances.
"""

from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

from .errors import ConfigurationError


# ============================================================================
# CHARACTER SET DEFINITIONS
# ============================================================================

# All 256 Braille patterns (U+2800..U+28FF), in code point order
BRAILLE_PATTERNS = ''.join(chr(0x2800 + i) for i in range(256))

# Shade blocks, light to solid
BLOCK = "░▒▓█"

# Dense to sparse ASCII
STANDARD = "@%#*+=-:. "

# Used by the CLI when "custom" is chosen without characters
DEFAULT_CUSTOM_CHARS = "⢠⢉⠾⠃⠈⠱⣞⡿"

# Charset names that select the Braille algorithm instead of a ramp
BRAILLE_SENTINELS = frozenset({"default", "braille"})

BUILTIN_CHARSETS: Dict[str, str] = {
    "default": BRAILLE_PATTERNS,
    "braille": BRAILLE_PATTERNS,
    "block": BLOCK,
    "standard": STANDARD,
}


def is_braille_charset(charset: str) -> bool:
    """True if the charset option selects the Braille renderer."""
    return charset in BRAILLE_SENTINELS


# ============================================================================
# REGISTRY
# ============================================================================

class CharsetRegistry:
    """
    Mapping of charset name -> ramp string.

    Example:
        >>> registry = CharsetRegistry()
        >>> registry.register("dots", " .:oO@")
        >>> registry.resolve("dots")
        ' .:oO@'
    """

    def __init__(self, extra: Optional[Mapping[str, str]] = None):
        self._ramps: Dict[str, str] = dict(BUILTIN_CHARSETS)
        if extra:
            for name, characters in extra.items():
                self.register(name, characters)

    def register(self, name: str, characters: str):
        """
        Add or overwrite a named ramp.

        Raises:
            ConfigurationError: empty name or characters, or a Braille
                sentinel name
        """
        if not name:
            raise ConfigurationError("Charset name must not be empty")
        if not characters:
            raise ConfigurationError(f"Charset '{name}' must contain at least one character")
        if name in BRAILLE_SENTINELS:
            raise ConfigurationError(f"'{name}' is reserved for the Braille renderer")
        self._ramps[name] = characters

    def get(self, name: str) -> Optional[str]:
        return self._ramps.get(name)

    def resolve(self, charset: str) -> str:
        """
        Ramp for a charset option.

        Registered names return their ramp; any other string is used
        literally as the ramp.
        """
        if not charset:
            raise ConfigurationError("Charset must not be empty")
        return self.snapshot().get(charset, charset)

    def snapshot(self) -> Mapping[str, str]:
        """Read-only copy for use during a single render."""
        return MappingProxyType(dict(self._ramps))

    def names(self) -> List[str]:
        return list(self._ramps)

    def __contains__(self, name: str) -> bool:
        return name in self._ramps

    def __len__(self) -> int:
        return len(self._ramps)


def list_charsets(registry: Optional[CharsetRegistry] = None) -> List[str]:
    """List charset names (built-ins only when no registry is given)."""
    if registry is None:
        return list(BUILTIN_CHARSETS)
    return registry.names()
