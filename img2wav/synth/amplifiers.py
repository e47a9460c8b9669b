# amplifiers.py
"""
Output stage: hard clamp to [-1, 1], then quantize to PCM16.

Summed columns can go well past full scale; they are clipped, not
normalized, so loud images distort.
"""

from array import array
from typing import Iterable

FULL_SCALE = 32767


def clamp_unit(x: float) -> float:
    return -1.0 if x < -1.0 else 1.0 if x > 1.0 else x


def to_pcm16(values: Iterable[float]) -> array:
    out = array("h")
    for x in values:
        out.append(round(clamp_unit(x) * FULL_SCALE))
    return out
