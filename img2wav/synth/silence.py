# silence.py
"""
Trim leading and trailing near-silence.

A sample counts as silent when |sample| < threshold. There is no smoothing:
the first sample at or above the threshold stops the scan.
"""

from __future__ import annotations

from typing import Sequence, Tuple

# ===== TRIM DEFAULTS (EDIT HERE) =====
SILENCE_THRESHOLD = 500   # out of 32767


def silent_span(samples: Sequence[int], threshold: int = SILENCE_THRESHOLD) -> Tuple[int, int]:
    """Return (start, end) of the audible part; start == end when all silent."""
    if threshold < 0:
        raise ValueError("threshold must not be negative")
    n = len(samples)
    start = 0
    while start < n and abs(samples[start]) < threshold:
        start += 1
    end = n
    while end > start and abs(samples[end - 1]) < threshold:
        end -= 1
    return start, end


def trim_silence(samples, threshold: int = SILENCE_THRESHOLD):
    start, end = silent_span(samples, threshold)
    return samples[start:end]
