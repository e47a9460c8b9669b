# generator.py
"""
Additive synthesizer: PixelGrid -> PCM16 mono samples.

Flow per row r (rows play one after another):
  amplitudes[r] + column frequencies -> oscillator bank -> clamp -> PCM16

For every sample i of row r:
    t = (i + r * samples_per_row) / sample_rate
    v = sum over columns c of amplitude[r][c] * sin(2*pi*f_c*t)
    sample = round(clamp(v, -1, 1) * 32767)

Cost is O(rows * samples_per_row * cols). A 200x200 image over 5 s is on the
order of 10^7 to 10^8 sine terms, so pure Python is slow for big images.
What helps:
- frequencies are computed once per column (frequency_table)
- silent columns are skipped per row
- method="recurrence" rotates phases instead of calling sin per sample
- workers > 1 renders rows in separate processes

Rows never depend on each other, so every row is rendered on its own and
copied into its fixed slot [r * spr, (r + 1) * spr). Output is the same
for any worker count.
"""

from __future__ import annotations

import logging
from array import array
from concurrent.futures import ProcessPoolExecutor
from typing import Callable, Optional, Sequence

from img2wav.errors import InvalidGrid, SynthesisCancelled
from img2wav.pixel_grid import PixelGrid
from img2wav.synth.amplifiers import to_pcm16
from img2wav.synth.frequency import frequency_table
from img2wav.synth.oscillators import BANKS
from img2wav.synth.params import SynthesisParameters

log = logging.getLogger(__name__)

METHODS = tuple(BANKS)


def render_row(
    amplitudes: Sequence[float],
    frequencies: Sequence[float],
    row: int,
    samples_per_row: int,
    sample_rate: int,
    method: str = "direct",
) -> array:
    """Render one row's span of samples."""
    bank = BANKS.get(method)
    if bank is None:
        raise ValueError(f"Unknown synthesis method: {method!r} (valid: {list(METHODS)})")
    # amp * sin(...) is exactly 0.0 for silent columns, so skipping them is lossless
    voices = [(a, f) for a, f in zip(amplitudes, frequencies) if a != 0.0]
    values = bank(voices, row * samples_per_row, samples_per_row, sample_rate)
    return to_pcm16(values)


def _render_row_job(job):
    return render_row(*job)


def synthesize(
    grid: PixelGrid,
    params: SynthesisParameters,
    *,
    workers: int = 1,
    method: str = "direct",
    should_cancel: Optional[Callable[[], bool]] = None,
) -> array:
    """
    Render the whole grid. Returns array('h') of rows * samples_per_row samples.

    Raises InvalidGrid for an empty grid and SynthesisCancelled when
    should_cancel() turns true between rows.
    """
    if grid.rows == 0 or grid.cols == 0:
        raise InvalidGrid(f"cannot synthesize a {grid.rows}x{grid.cols} grid")
    if method not in BANKS:
        raise ValueError(f"Unknown synthesis method: {method!r} (valid: {list(METHODS)})")
    if workers < 1:
        raise ValueError("workers must be >= 1")

    spr = params.samples_per_row
    freqs = frequency_table(grid.cols, params.min_frequency, params.max_frequency)
    amps = grid.amplitudes(params.opacity_floor)
    jobs = [(amps[r], freqs, r, spr, params.sample_rate, method) for r in range(grid.rows)]

    log.info(
        "synthesizing %dx%d grid: %d samples/row, %d Hz, method=%s, workers=%d",
        grid.rows, grid.cols, spr, params.sample_rate, method, workers,
    )
    buf = array("h", [0]) * (grid.rows * spr)

    def place(r: int, samples: array) -> None:
        buf[r * spr:(r + 1) * spr] = samples
        log.debug("row %d/%d done", r + 1, grid.rows)

    def check_cancel(r: int) -> None:
        if should_cancel is not None and should_cancel():
            raise SynthesisCancelled(f"cancelled before row {r}")

    if workers == 1:
        for r, job in enumerate(jobs):
            check_cancel(r)
            place(r, render_row(*job))
        return buf

    with ProcessPoolExecutor(max_workers=workers) as pool:
        futures = [pool.submit(_render_row_job, job) for job in jobs]
        try:
            for r, fut in enumerate(futures):
                check_cancel(r)
                place(r, fut.result())
        except BaseException:
            for fut in futures:
                fut.cancel()
            raise
    return buf
