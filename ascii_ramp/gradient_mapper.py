"""
Ramp Renderer

Brightness-to-character mapping over a luminance grid:
1. Bucket each 8-bit sample into one of len(ramp) slots
2. Read the ramp back to front so dark samples get sparse glyphs
3. Emit one text line per row, each terminated by a newline
"""

import numpy as np

from .charsets import RAMP_CLASSIC, RampLike, validate_ramp
from .preprocessing import LuminanceBuffer


# Samples are bucketed over 256 levels, not 255
LUMINANCE_LEVELS = 256


def char_indices(samples: np.ndarray, ramp_length: int) -> np.ndarray:
    """
    Bucket index for each sample: floor(v / 256 * ramp_length), clamped.

    Integer arithmetic gives the same floor as the float formula for 0..255.
    """
    indices = (samples.astype(np.int64) * ramp_length) // LUMINANCE_LEVELS
    return np.clip(indices, 0, ramp_length - 1)


class RampRenderer:
    """
    Stateless luminance-to-text renderer.

    Example:
        >>> renderer = RampRenderer()
        >>> renderer.render(LuminanceBuffer.from_rows([[0, 255]]))
        ' $\\n'
    """

    def __init__(self, ramp: RampLike = RAMP_CLASSIC):
        self.ramp = validate_ramp(ramp)
        self.char_array = np.array(list(self.ramp))

    def _map_brightness_to_char(self, samples: np.ndarray) -> np.ndarray:
        """
        Map samples to glyphs.

        Bright pixels (white) land on the first ramp glyphs, dark pixels on
        the last ones.
        """
        ramp_length = len(self.ramp)
        indices = char_indices(samples, ramp_length)
        return self.char_array[ramp_length - 1 - indices]

    def render(self, buffer: LuminanceBuffer) -> str:
        """
        Render a luminance buffer to text.

        Args:
            buffer: Grayscale grid

        Returns:
            ``buffer.height`` lines of ``buffer.width`` glyphs, each followed by "\\n"
        """
        if buffer.height == 0 or buffer.width == 0:
            return "\n" * buffer.height
        char_map = self._map_brightness_to_char(buffer.samples)
        return "".join("".join(row) + "\n" for row in char_map)


def render(buffer: LuminanceBuffer, ramp: RampLike = RAMP_CLASSIC) -> str:
    """
    Render ``buffer`` with ``ramp``.

    Raises:
        InvalidRampError: if the ramp is empty or shorter than 2 glyphs
    """
    return RampRenderer(ramp).render(buffer)
