# oscillators.py
"""
Sine oscillator banks.

A "voice" is an (amplitude, frequency_hz) pair. Each bank renders the sum of
its voices for `frames` samples starting at absolute sample index `start`,
so time keeps running across calls instead of restarting at zero.

- sine_bank             : math.sin per voice per sample (reference)
- sine_bank_recurrence  : phase rotation, seeded with sin/cos at `start`
"""

from __future__ import annotations

import math
from typing import List, Sequence, Tuple

Voice = Tuple[float, float]

TWO_PI = 2.0 * math.pi


def sine_bank(voices: Sequence[Voice], start: int, frames: int, sample_rate: int) -> List[float]:
    out = [0.0] * frames
    if not voices:
        return out
    for i in range(frames):
        t = (start + i) / sample_rate
        value = 0.0
        for amp, freq in voices:
            value += amp * math.sin(TWO_PI * freq * t)
        out[i] = value
    return out


def sine_bank_recurrence(voices: Sequence[Voice], start: int, frames: int, sample_rate: int) -> List[float]:
    """
    Same sum as sine_bank, without a trig call per sample.

    Each voice keeps (sin, cos) of its current phase and rotates it by the
    per-sample step. Reseeding at every call keeps rounding drift bounded
    to one row.
    """
    out = [0.0] * frames
    if not voices:
        return out
    t0 = start / sample_rate
    amps = [amp for amp, _ in voices]
    s = [math.sin(TWO_PI * freq * t0) for _, freq in voices]
    c = [math.cos(TWO_PI * freq * t0) for _, freq in voices]
    step_s = [math.sin(TWO_PI * freq / sample_rate) for _, freq in voices]
    step_c = [math.cos(TWO_PI * freq / sample_rate) for _, freq in voices]
    n = len(voices)
    for i in range(frames):
        value = 0.0
        for k in range(n):
            sk = s[k]
            ck = c[k]
            value += amps[k] * sk
            s[k] = sk * step_c[k] + ck * step_s[k]
            c[k] = ck * step_c[k] - sk * step_s[k]
        out[i] = value
    return out


BANKS = {
    "direct": sine_bank,
    "recurrence": sine_bank_recurrence,
}
