"""
Fallback Renderer

Fixed placeholder block used when the source image cannot be rasterized.
Pure and deterministic: only the label varies.
"""

from typing import Tuple

PATTERN_ROWS: Tuple[str, ...] = (
    "01001010101010101",
    "10101010101010101",
    "01010101010101010",
    "10101010101010101",
    "01010101010101010",
)

DIVIDER = "-" * 20
LABEL_INDENT = "    "
DEFAULT_LABEL = "Image conversion failed"


def render_fallback(label: str = DEFAULT_LABEL) -> str:
    """
    Build the placeholder block for ``label``.

    Layout: blank line, pattern rows, divider, indented upper-cased label,
    divider, pattern rows mirrored top-to-bottom, trailing newline.
    """
    header = "\n".join(PATTERN_ROWS)
    footer = "\n".join(reversed(PATTERN_ROWS))

    return (
        f"\n{header}\n"
        f"{DIVIDER}\n"
        f"{LABEL_INDENT}{str(label).upper()}\n"
        f"{DIVIDER}\n"
        f"{footer}\n"
    )
