# errors.py
"""
Error types raised by img2wav.

Every stage either succeeds fully or raises one of these; nothing is retried.
"""


class Img2WavError(Exception):
    """Base class for all img2wav failures."""


class UsageError(Img2WavError):
    """Missing or invalid command-line input."""


class DecodeError(Img2WavError, ValueError):
    """Image could not be read, or has a pixel mode we cannot convert."""


class InvalidGrid(Img2WavError, ValueError):
    """Pixel grid is empty, ragged, or holds values outside 0..1."""


class DimensionMismatch(InvalidGrid):
    """Opacity matrix does not have the same shape as the intensity matrix."""


class SinkError(Img2WavError, OSError):
    """Output WAV file could not be opened or written."""


class SynthesisCancelled(Img2WavError):
    """Synthesis was stopped at a row boundary by the caller."""
