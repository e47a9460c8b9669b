# composer.py
"""
Compose a WAV from an image.

Flow:
  conversion.read_image -> duration policy -> synthesize -> trim_silence -> write_wav
"""

from __future__ import annotations

import logging
from array import array
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from img2wav.audio_sink import write_wav
from img2wav.conversion import read_image
from img2wav.synth.duration import DEFAULT_POLICY, DurationPlan, get_policy
from img2wav.synth.generator import synthesize
from img2wav.synth.params import (
    MAX_FREQUENCY_HZ,
    MIN_FREQUENCY_HZ,
    OPACITY_FLOOR,
    SAMPLE_RATE_DEFAULT,
    SynthesisParameters,
)
from img2wav.synth.silence import SILENCE_THRESHOLD, trim_silence

log = logging.getLogger(__name__)

WAV_SUFFIX = ".wav"


@dataclass
class Rendering:
    samples: array
    sample_rate: int
    raw_length: int
    plan: DurationPlan

    @property
    def duration_s(self) -> float:
        return len(self.samples) / self.sample_rate


def output_path_for(image_path) -> Path:
    return Path(image_path).with_suffix(WAV_SUFFIX)


def render_image(
    image_path,
    *,
    policy=None,
    sample_rate: int = SAMPLE_RATE_DEFAULT,
    min_frequency: float = MIN_FREQUENCY_HZ,
    max_frequency: float = MAX_FREQUENCY_HZ,
    threshold: int = SILENCE_THRESHOLD,
    opacity_floor: float = OPACITY_FLOOR,
    workers: int = 1,
    method: str = "direct",
    max_size: Optional[int] = None,
) -> Rendering:
    """Decode, synthesize and trim. Nothing is written."""
    if policy is None:
        policy = get_policy(DEFAULT_POLICY)

    grid = read_image(image_path, max_size=max_size)
    plan = policy.plan(grid.rows, grid.cols, sample_rate)
    params = SynthesisParameters(
        samples_per_row=plan.samples_per_row,
        sample_rate=sample_rate,
        min_frequency=min_frequency,
        max_frequency=max_frequency,
        opacity_floor=opacity_floor,
    )
    raw = synthesize(grid, params, workers=workers, method=method)
    samples = trim_silence(raw, threshold)
    log.info("trimmed %d -> %d samples", len(raw), len(samples))
    return Rendering(samples=samples, sample_rate=sample_rate, raw_length=len(raw), plan=plan)


def convert_file(image_path, output_path=None, **options) -> Path:
    """Render `image_path` and write it as WAV; returns the written path."""
    rendering = render_image(image_path, **options)
    out = Path(output_path) if output_path is not None else output_path_for(image_path)
    log.info("%s: %.2f s of audio", image_path, rendering.duration_s)
    return write_wav(out, rendering.samples, rendering.sample_rate)
