# duration.py
"""
Duration policies: grid size -> how many samples each row gets.

Three strategies, pick one by name:
- "fixed-total"    : constant total length (5 s), split evenly across rows
- "size-heuristic" : length grows with sqrt(rows * cols)
- "per-row"        : constant length per row (0.1 s), total grows with rows

Each policy returns a DurationPlan(sample_rate, samples_per_row, total_samples).
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Dict, Type

from img2wav.errors import InvalidGrid

log = logging.getLogger(__name__)

# ===== DURATION DEFAULTS (EDIT HERE) =====
DEFAULT_TOTAL_SECONDS = 5.0
DEFAULT_ROW_SECONDS = 0.1
DEFAULT_SECONDS_PER_SIDE = 0.05   # 100x100 image -> 5 s
DEFAULT_POLICY = "fixed-total"


@dataclass(frozen=True)
class DurationPlan:
    sample_rate: int
    samples_per_row: int
    rows: int

    @property
    def total_samples(self) -> int:
        return self.rows * self.samples_per_row

    @property
    def duration_s(self) -> float:
        return self.total_samples / self.sample_rate


def _positive_seconds(name: str, value: float) -> float:
    if not math.isfinite(value) or value <= 0:
        raise ValueError(f"{name} must be a finite positive number, got {value}")
    return value


def _check_dims(rows: int, cols: int) -> None:
    if rows < 1 or cols < 1:
        raise InvalidGrid(f"grid must be at least 1x1, got {rows}x{cols}")


class FixedTotalDuration:
    name = "fixed-total"

    def __init__(self, seconds: float = DEFAULT_TOTAL_SECONDS):
        self.seconds = _positive_seconds("seconds", seconds)

    def plan(self, rows: int, cols: int, sample_rate: int) -> DurationPlan:
        _check_dims(rows, cols)
        total = int(sample_rate * self.seconds)
        return DurationPlan(sample_rate, max(1, total // rows), rows)


class SizeHeuristicDuration:
    name = "size-heuristic"

    def __init__(self, seconds_per_side: float = DEFAULT_SECONDS_PER_SIDE):
        self.seconds_per_side = _positive_seconds("seconds_per_side", seconds_per_side)

    def plan(self, rows: int, cols: int, sample_rate: int) -> DurationPlan:
        _check_dims(rows, cols)
        seconds = math.sqrt(rows * cols) * self.seconds_per_side
        total = int(sample_rate * seconds)
        return DurationPlan(sample_rate, max(1, total // rows), rows)


class FixedRowDuration:
    name = "per-row"

    def __init__(self, row_seconds: float = DEFAULT_ROW_SECONDS):
        self.row_seconds = _positive_seconds("row_seconds", row_seconds)

    def plan(self, rows: int, cols: int, sample_rate: int) -> DurationPlan:
        _check_dims(rows, cols)
        return DurationPlan(sample_rate, max(1, int(round(sample_rate * self.row_seconds))), rows)


_POLICIES: Dict[str, Type] = {
    FixedTotalDuration.name: FixedTotalDuration,
    SizeHeuristicDuration.name: SizeHeuristicDuration,
    FixedRowDuration.name: FixedRowDuration,
}
POLICY_NAMES = tuple(_POLICIES)


def get_policy(name: str = DEFAULT_POLICY, **options):
    """Build a policy by name; options go to its constructor."""
    cls = _POLICIES.get(name)
    if cls is None:
        raise ValueError(f"Unknown duration policy: {name!r} (valid: {list(POLICY_NAMES)})")
    log.debug("duration policy %s %s", name, options)
    return cls(**options)
