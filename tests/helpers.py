"""Shared fixtures: in-memory test images."""

import io

from PIL import Image


def make_png(size=(64, 64), color=255, mode="L") -> bytes:
    """Encode a solid-color image as PNG bytes."""
    image = Image.new(mode, size, color=color)
    buf = io.BytesIO()
    image.save(buf, format="PNG")
    return buf.getvalue()


def make_split_png(size=(64, 64)) -> bytes:
    """Left half black, right half white."""
    image = Image.new("L", size, color=255)
    image.paste(0, (0, 0, size[0] // 2, size[1]))
    buf = io.BytesIO()
    image.save(buf, format="PNG")
    return buf.getvalue()
