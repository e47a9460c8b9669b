# conversion.py
"""
Image file -> PixelGrid.

Flow:
  open (Pillow) -> exif_transpose -> optional thumbnail -> grayscale (+ alpha)
  -> flip top/bottom -> rotate 90 deg counter-clockwise -> normalize to 0..1

After orienting, grid rows are the image's columns and grid columns its rows.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from PIL import Image, ImageOps, UnidentifiedImageError

from img2wav.errors import DecodeError
from img2wav.pixel_grid import PixelGrid

log = logging.getLogger(__name__)

SUPPORTED_MODES = {"1", "L", "LA", "P", "PA", "RGB", "RGBA", "CMYK"}
ALPHA_MODES = {"LA", "RGBA"}


def _orient(im: Image.Image) -> Image.Image:
    im = im.transpose(Image.Transpose.FLIP_TOP_BOTTOM)
    return im.transpose(Image.Transpose.ROTATE_90)   # Pillow's ROTATE_90 is counter-clockwise


def _normalized_rows(band: Image.Image) -> List[List[float]]:
    w, h = band.size
    data = band.tobytes()   # one byte per pixel for an "L" band
    if len(data) != w * h:
        raise DecodeError("Pixel data length mismatch after conversion")
    return [[v / 255.0 for v in data[r * w:(r + 1) * w]] for r in range(h)]


def grid_from_image(im: Image.Image, max_size: Optional[int] = None) -> PixelGrid:
    """Build a PixelGrid from an already-opened image."""
    if im.mode not in SUPPORTED_MODES:
        raise DecodeError(f"Unsupported pixel mode: {im.mode}")

    if im.mode == "CMYK":
        im = im.convert("RGB")
    elif im.mode == "PA" or (im.mode == "P" and "transparency" in im.info):
        im = im.convert("RGBA")
    has_alpha = im.mode in ALPHA_MODES

    if max_size is not None:
        if max_size < 1:
            raise ValueError("max_size must be >= 1")
        im = im.copy()
        im.thumbnail((max_size, max_size))

    gray = _orient(im.convert("L"))
    alpha = _orient(im.getchannel("A")) if has_alpha else None

    intensity = _normalized_rows(gray)
    opacity = _normalized_rows(alpha) if alpha is not None else None
    grid = PixelGrid(intensity, opacity)
    log.debug("decoded %s image into %r", im.mode, grid)
    return grid


def read_image(path, max_size: Optional[int] = None) -> PixelGrid:
    if max_size is not None and max_size < 1:
        raise ValueError("max_size must be >= 1")
    p = Path(path)
    if not p.exists():
        raise DecodeError(f"Image not found: {p}")
    try:
        with Image.open(p) as im:
            im = ImageOps.exif_transpose(im)
            return grid_from_image(im, max_size)
    except DecodeError:
        raise
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as e:
        raise DecodeError(f"Failed to open/read image: {p.name}") from e
