# params.py
"""Synthesis parameters and their defaults."""

from __future__ import annotations

from dataclasses import dataclass

# ===== SYNTH DEFAULTS (EDIT HERE) =====
SAMPLE_RATE_DEFAULT = 44_100
MIN_FREQUENCY_HZ = 200.0       # column 0
MAX_FREQUENCY_HZ = 8000.0      # last column
OPACITY_FLOOR = 0.1            # quietest a visible (non-transparent) pixel may get


@dataclass(frozen=True)
class SynthesisParameters:
    samples_per_row: int
    sample_rate: int = SAMPLE_RATE_DEFAULT
    min_frequency: float = MIN_FREQUENCY_HZ
    max_frequency: float = MAX_FREQUENCY_HZ
    opacity_floor: float = OPACITY_FLOOR

    def __post_init__(self):
        if self.sample_rate <= 0:
            raise ValueError("sample_rate must be positive")
        if self.samples_per_row < 1:
            raise ValueError("samples_per_row must be >= 1")
        if self.min_frequency < 0:
            raise ValueError("min_frequency must not be negative")
        if not self.min_frequency < self.max_frequency:
            raise ValueError("min_frequency must be below max_frequency")
        if not 0.0 <= self.opacity_floor <= 1.0:
            raise ValueError("opacity_floor must be in 0..1")
