"""
Image Preprocessing - Rasterizer Adapters

Turns raw image bytes into a grayscale luminance grid for the ramp renderer:
- Decoding of any encoding the backend understands
- Resizing to exact character-grid dimensions
- Aspect-ratio correction for glyphs that are taller than wide

Two interchangeable backends are provided: Pillow (default) and OpenCV.
Any backend failure surfaces as DecodeError.
"""

import io
import math
from dataclasses import dataclass
from typing import Dict, Sequence, Type

import cv2
import numpy as np
from PIL import Image

from .errors import DecodeError


# Characters are ~2x taller than wide in a monospace font
ASPECT_RATIO = 0.5


def aspect_corrected_height(height_chars: int) -> int:
    """
    Pixel height to request for ``height_chars`` rows of text.

    Zero is a legitimate answer (e.g. for a single row) and is passed on as-is.
    """
    return int(math.floor(height_chars * ASPECT_RATIO))


@dataclass(frozen=True, eq=False)
class LuminanceBuffer:
    """
    Row-major grid of 8-bit luminance samples (0 = black, 255 = white).

    The underlying array is made read-only on construction.

    Attributes:
        samples: 2-D uint8 array of shape (height, width)
    """
    samples: np.ndarray

    def __post_init__(self):
        samples = np.asarray(self.samples)
        if samples.ndim != 2:
            raise ValueError(f"Luminance buffer must be 2-D, got shape {samples.shape}")
        if samples.dtype != np.uint8:
            if samples.size and (samples.min() < 0 or samples.max() > 255):
                raise ValueError("Luminance samples must lie in [0, 255]")
            samples = samples.astype(np.uint8)
        else:
            samples = samples.copy()
        samples.flags.writeable = False
        object.__setattr__(self, "samples", samples)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "LuminanceBuffer":
        """Build a buffer from nested lists of sample values."""
        if len(rows) == 0:
            return cls(np.zeros((0, 0), dtype=np.uint8))
        return cls(np.array(rows, dtype=np.int64).reshape(len(rows), -1))

    @property
    def width(self) -> int:
        return self.samples.shape[1]

    @property
    def height(self) -> int:
        return self.samples.shape[0]

    def __getitem__(self, key):
        return self.samples[key]


class Rasterizer:
    """
    Decode + resize + grayscale capability.

    Subclasses implement ``_decode_and_resize``; argument checks and error
    wrapping happen here.
    """

    name = "base"

    def decode_and_resize(self, data: bytes, width_px: int, height_px: int) -> LuminanceBuffer:
        """
        Decode ``data`` and resize it to exactly ``width_px`` x ``height_px``.

        Raises:
            DecodeError: on empty/unsupported bytes, non-positive dimensions,
                or any other backend failure
        """
        if width_px <= 0 or height_px <= 0:
            raise DecodeError(f"Invalid resize dimensions: {width_px}x{height_px}")
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise DecodeError(f"Expected image bytes, got {type(data).__name__}")
        if len(data) == 0:
            raise DecodeError("Empty image data")

        try:
            gray = self._decode_and_resize(bytes(data), width_px, height_px)
            return LuminanceBuffer(gray)
        except (DecodeError, NotImplementedError):
            raise
        except Exception as e:
            raise DecodeError(f"{self.name} backend failed: {e}") from e

    def _decode_and_resize(self, data: bytes, width_px: int, height_px: int) -> np.ndarray:
        raise NotImplementedError


class PillowRasterizer(Rasterizer):
    """Pillow backend: LANCZOS resize, ITU-R 601 luma."""

    name = "pillow"

    def _decode_and_resize(self, data: bytes, width_px: int, height_px: int) -> np.ndarray:
        try:
            with Image.open(io.BytesIO(data)) as image:
                image.load()
                resized = image.resize((width_px, height_px), Image.Resampling.LANCZOS)
                gray = resized.convert("L")
        except (OSError, ValueError, SyntaxError, Image.DecompressionBombError) as e:
            raise DecodeError(f"Pillow could not decode image: {e}") from e

        return np.array(gray, dtype=np.uint8)


class OpenCVRasterizer(Rasterizer):
    """OpenCV backend: decodes straight to grayscale, INTER_AREA resize."""

    name = "opencv"

    def _decode_and_resize(self, data: bytes, width_px: int, height_px: int) -> np.ndarray:
        try:
            gray = cv2.imdecode(np.frombuffer(data, dtype=np.uint8), cv2.IMREAD_GRAYSCALE)
            if gray is None:
                raise DecodeError("OpenCV could not decode image")
            resized = cv2.resize(gray, (width_px, height_px), interpolation=cv2.INTER_AREA)
        except cv2.error as e:
            raise DecodeError(f"OpenCV could not decode image: {e}") from e

        return resized.astype(np.uint8)


_BACKENDS: Dict[str, Type[Rasterizer]] = {
    "pillow": PillowRasterizer,
    "opencv": OpenCVRasterizer,
}


def get_rasterizer(backend: str = "pillow") -> Rasterizer:
    """
    Create a rasterizer for a backend name ("pillow" or "opencv").

    Raises:
        ValueError: for an unknown backend
    """
    if backend not in _BACKENDS:
        raise ValueError(f"Unknown backend: {backend}. Available: {list_backends()}")
    return _BACKENDS[backend]()


def list_backends():
    """List available rasterizer backend names."""
    return list(_BACKENDS.keys())


def decode_and_resize(
    data: bytes,
    width_px: int,
    height_px: int,
    backend: str = "pillow",
) -> LuminanceBuffer:
    """Decode and resize with the named backend. See Rasterizer.decode_and_resize."""
    return get_rasterizer(backend).decode_and_resize(data, width_px, height_px)
