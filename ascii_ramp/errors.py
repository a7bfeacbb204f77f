"""
Exception types raised by the rendering engine.
"""


class ASCIIRampError(Exception):
    """Base class for all engine errors."""


class DecodeError(ASCIIRampError):
    """
    Source bytes could not be decoded or resized.

    Recovered by the pipeline, which swaps in the fallback block.
    """


class InvalidRampError(ASCIIRampError, ValueError):
    """Character ramp is empty or malformed. Never recovered."""
