"""
Character Ramp Definitions

A ramp is an ordered string of glyphs, darkest first. The renderer reads it
back to front, so low luminance lands on the last (sparse) glyphs and high
luminance on the first (dense) ones.

Ramps are plain values: pass them to the renderer explicitly.
"""

from dataclasses import dataclass
from typing import Dict, List, Union

from .errors import InvalidRampError


# ============================================================================
# RAMP DEFINITIONS - dark to light
# ============================================================================

# Classic 71-character ramp
RAMP_CLASSIC = "$@B%8&WM#*oahkbdpqwmZO0QLCJUYXzcvunxrjft/\\|()1{}[]?-_+~<>i!lI;:,\"^`'. "

# Standard ramp - 10 characters (good balance)
RAMP_STANDARD = "@%#*+=-:. "

# Minimal ramp for a stylized look
RAMP_MINIMAL = "@#S%?*+;:. "

# Block ramp - uses block characters for density
RAMP_BLOCKS = "█▓▒░ "

# Structural ramp - emphasizes edges and structure
RAMP_STRUCTURAL = "@#$%&8BMW*oahkbd|/\\(){}[]<>+=-~:;,.`' "

MIN_RAMP_LENGTH = 2


@dataclass(frozen=True)
class CharacterRamp:
    """
    An ordered, immutable glyph sequence.

    Attributes:
        glyphs: Characters from darkest (index 0) to lightest
        name: Optional identifier, used in result metadata
    """
    glyphs: str
    name: str = "custom"

    def __post_init__(self):
        validate_ramp(self.glyphs)

    def __len__(self) -> int:
        return len(self.glyphs)

    def __getitem__(self, index: int) -> str:
        return self.glyphs[index]

    def __str__(self) -> str:
        return self.glyphs


RampLike = Union[CharacterRamp, str]


def validate_ramp(glyphs) -> str:
    """
    Check that ``glyphs`` is a usable ramp and return it as a string.

    Raises:
        InvalidRampError: if the ramp is not a string or is shorter than 2 glyphs
    """
    if isinstance(glyphs, CharacterRamp):
        return glyphs.glyphs
    if not isinstance(glyphs, str):
        raise InvalidRampError(f"Ramp must be a string, got {type(glyphs).__name__}")
    if len(glyphs) < MIN_RAMP_LENGTH:
        raise InvalidRampError(
            f"Ramp needs at least {MIN_RAMP_LENGTH} glyphs, got {len(glyphs)}"
        )
    return glyphs


# ============================================================================
# RAMP REGISTRY
# ============================================================================

_RAMPS: Dict[str, str] = {
    "classic": RAMP_CLASSIC,
    "standard": RAMP_STANDARD,
    "minimal": RAMP_MINIMAL,
    "blocks": RAMP_BLOCKS,
    "structural": RAMP_STRUCTURAL,
}


def get_ramp(name: str = "classic") -> CharacterRamp:
    """
    Get a preset ramp by name.

    Available ramps:
        - classic: 71 characters, the default
        - standard: 10 characters
        - minimal: stylized 11-character set
        - blocks: block graphics (█▓▒░)
        - structural: line-friendly subset

    Raises:
        ValueError: for an unknown name
    """
    if name not in _RAMPS:
        raise ValueError(f"Unknown ramp: {name}. Available: {list_ramps()}")
    return CharacterRamp(glyphs=_RAMPS[name], name=name)


def list_ramps() -> List[str]:
    """List all preset ramp names."""
    return list(_RAMPS.keys())
