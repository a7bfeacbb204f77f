"""
End-to-End Image-to-ASCII Pipeline

Bytes in, text out:
1. Aspect-correct the requested row count
2. Decode + resize + grayscale through a rasterizer backend
3. Render with the character ramp
4. On any decode failure, swap in the fallback block

This is the main entry point for the library. A conversion always returns
an ASCIIResult; only a broken ramp raises.
"""

import base64
import binascii
import logging
import os
import queue
import threading
import time
from dataclasses import dataclass
from typing import Optional, Union

from .charsets import RAMP_CLASSIC, CharacterRamp, RampLike, get_ramp
from .errors import DecodeError
from .fallback import DEFAULT_LABEL, render_fallback
from .gradient_mapper import RampRenderer
from .preprocessing import (
    LuminanceBuffer,
    Rasterizer,
    aspect_corrected_height,
    get_rasterizer,
)
from .result import ASCIIResult, create_result

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 80
DEFAULT_HEIGHT = 40


def _check_dimension(name: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValueError(f"{name} must be a positive integer, got {value!r}")


@dataclass
class RenderConfig:
    """Configuration for image-to-ASCII conversion."""
    width: int = DEFAULT_WIDTH             # Output width in characters
    height: int = DEFAULT_HEIGHT           # Requested height in character rows
    ramp: RampLike = RAMP_CLASSIC          # Glyphs, darkest first
    backend: str = "pillow"                # Rasterizer backend: pillow | opencv
    fallback_label: str = DEFAULT_LABEL    # Label shown in the placeholder block
    timeout: Optional[float] = None        # Seconds allowed for decode/resize

    def __post_init__(self):
        _check_dimension("width", self.width)
        _check_dimension("height", self.height)
        if self.timeout is not None and self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout!r}")

    @property
    def ramp_name(self) -> str:
        if isinstance(self.ramp, CharacterRamp):
            return self.ramp.name
        return "classic" if self.ramp == RAMP_CLASSIC else "custom"

    @classmethod
    def from_env(cls, **overrides) -> "RenderConfig":
        """
        Build a config from environment variables.

        Reads ASCII_WIDTH, ASCII_HEIGHT, ASCII_RAMP (preset name) and
        ASCII_BACKEND; keyword overrides win over the environment.
        """
        values = {}

        width = os.getenv("ASCII_WIDTH")
        if width:
            values["width"] = _parse_int("ASCII_WIDTH", width)

        height = os.getenv("ASCII_HEIGHT")
        if height:
            values["height"] = _parse_int("ASCII_HEIGHT", height)

        ramp = os.getenv("ASCII_RAMP")
        if ramp:
            values["ramp"] = get_ramp(ramp)

        backend = os.getenv("ASCII_BACKEND")
        if backend:
            values["backend"] = backend

        values.update(overrides)
        return cls(**values)


def _parse_int(name: str, raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


class ImageToASCII:
    """
    Image-to-ASCII converter.

    Example:
        >>> converter = ImageToASCII(RenderConfig(width=60, height=30))
        >>> result = converter.convert(png_bytes)
        >>> result.display()
    """

    def __init__(
        self,
        config: Optional[RenderConfig] = None,
        rasterizer: Optional[Rasterizer] = None,
    ):
        """
        Args:
            config: Conversion settings (defaults to RenderConfig())
            rasterizer: Decode/resize capability (defaults to config.backend)

        Raises:
            InvalidRampError: if the configured ramp is unusable
        """
        self.config = config or RenderConfig()
        self._renderer = RampRenderer(self.config.ramp)
        self._rasterizer = rasterizer or get_rasterizer(self.config.backend)

    @property
    def backend(self) -> str:
        return getattr(self._rasterizer, "name", type(self._rasterizer).__name__)

    def _rasterize(self, data: bytes, width_px: int, height_px: int) -> LuminanceBuffer:
        """Run the adapter, bounded by config.timeout when set."""
        timeout = self.config.timeout
        if timeout is None:
            return self._rasterizer.decode_and_resize(data, width_px, height_px)

        # Daemon thread so a hung decode cannot hold up interpreter exit
        outcome: queue.Queue = queue.Queue(maxsize=1)

        def worker():
            try:
                outcome.put((True, self._rasterizer.decode_and_resize(data, width_px, height_px)))
            except Exception as e:
                outcome.put((False, e))

        thread = threading.Thread(target=worker, name="ascii-ramp-decode", daemon=True)
        thread.start()
        try:
            ok, value = outcome.get(timeout=timeout)
        except queue.Empty:
            raise DecodeError(f"Decoding timed out after {timeout}s") from None
        if not ok:
            raise value
        return value

    def convert(
        self,
        data: bytes,
        width: Optional[int] = None,
        height: Optional[int] = None,
    ) -> ASCIIResult:
        """
        Convert image bytes to ASCII art.

        Args:
            data: Encoded image bytes (PNG, JPEG, ...)
            width: Output width in characters (config.width if None)
            height: Requested character rows (config.height if None)

        Returns:
            ASCIIResult; ``is_fallback`` is set when decoding failed
        """
        width = self.config.width if width is None else width
        height = self.config.height if height is None else height
        _check_dimension("width", width)
        _check_dimension("height", height)

        pixel_height = aspect_corrected_height(height)
        logger.debug("Rasterizing to %dx%d px (%d rows requested)", width, pixel_height, height)

        start_time = time.time()
        try:
            buffer = self._rasterize(data, width, pixel_height)
        except DecodeError as e:
            logger.warning("Error converting image to ASCII: %s", e)
            return self._fallback(width=width, height=height, pixel_height=pixel_height, error=str(e))

        text = self._renderer.render(buffer)

        return create_result(
            text=text,
            ramp=self.config.ramp_name,
            backend=self.backend,
            width_chars=width,
            height_chars=height,
            pixel_height=pixel_height,
            conversion_time=f"{time.time() - start_time:.3f}s",
        )

    def convert_base64(
        self,
        encoded: Union[str, bytes],
        width: Optional[int] = None,
        height: Optional[int] = None,
    ) -> ASCIIResult:
        """
        Convert a base64 image (optionally a ``data:...;base64,`` URL).

        Undecodable base64 is treated like undecodable image bytes.
        """
        if isinstance(encoded, bytes):
            encoded = encoded.decode("ascii", errors="replace")
        if encoded.startswith("data:") and "," in encoded:
            encoded = encoded.split(",", 1)[1]
        # MIME-wrapped and unpadded input are both accepted
        encoded = "".join(encoded.split())
        encoded += "=" * (-len(encoded) % 4)

        try:
            data = base64.b64decode(encoded, validate=True)
        except (binascii.Error, ValueError) as e:
            logger.warning("Error decoding base64 image: %s", e)
            width = self.config.width if width is None else width
            height = self.config.height if height is None else height
            return self._fallback(width=width, height=height, error=str(e))

        return self.convert(data, width=width, height=height)

    def _fallback(self, **metadata) -> ASCIIResult:
        return create_result(
            text=render_fallback(self.config.fallback_label),
            is_fallback=True,
            ramp=self.config.ramp_name,
            backend=self.backend,
            **metadata,
        )


# Convenience function for quick usage
def image_to_ascii(
    data: bytes,
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
    ramp: RampLike = RAMP_CLASSIC,
    backend: str = "pillow",
    **kwargs
) -> ASCIIResult:
    """
    Quick function to convert image bytes to ASCII art.

    Args:
        data: Encoded image bytes
        width: Output width in characters
        height: Requested character rows (halved for aspect correction)
        ramp: Ramp glyphs or CharacterRamp
        backend: "pillow" or "opencv"
        **kwargs: Additional RenderConfig fields

    Returns:
        ASCIIResult with the art, or the fallback block
    """
    config = RenderConfig(width=width, height=height, ramp=ramp, backend=backend, **kwargs)
    return ImageToASCII(config).convert(data)
