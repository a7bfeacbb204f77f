"""
Image-to-ASCII Rendering Engine

Converts encoded images to character art:
- Pillow or OpenCV decoding with aspect-ratio correction
- Luminance-ordered character ramps (classic 71-glyph default)
- Deterministic placeholder block when an image cannot be decoded
"""

__version__ = "0.1.0"

from .charsets import RAMP_CLASSIC, CharacterRamp, get_ramp, list_ramps
from .errors import ASCIIRampError, DecodeError, InvalidRampError
from .fallback import render_fallback
from .gradient_mapper import RampRenderer, render
from .pipeline import ImageToASCII, RenderConfig, image_to_ascii
from .preprocessing import (
    LuminanceBuffer,
    OpenCVRasterizer,
    PillowRasterizer,
    aspect_corrected_height,
    decode_and_resize,
)
from .result import ASCIIResult

__all__ = [
    "RAMP_CLASSIC",
    "CharacterRamp",
    "get_ramp",
    "list_ramps",
    "ASCIIRampError",
    "DecodeError",
    "InvalidRampError",
    "render_fallback",
    "RampRenderer",
    "render",
    "ImageToASCII",
    "RenderConfig",
    "image_to_ascii",
    "LuminanceBuffer",
    "OpenCVRasterizer",
    "PillowRasterizer",
    "aspect_corrected_height",
    "decode_and_resize",
    "ASCIIResult",
]
