# frequency.py
"""
Column -> tone frequency.

Linear spread: column 0 plays min_frequency, the last column plays
max_frequency. A one-column image plays the midpoint.
"""

from __future__ import annotations

from typing import Tuple


def column_frequency(col: int, cols: int, min_frequency: float, max_frequency: float) -> float:
    if cols < 1:
        raise ValueError("cols must be >= 1")
    if not 0 <= col < cols:
        raise ValueError(f"col {col} outside 0..{cols - 1}")
    if cols == 1:
        return (min_frequency + max_frequency) / 2.0
    return min_frequency + (max_frequency - min_frequency) * col / (cols - 1)


def frequency_table(cols: int, min_frequency: float, max_frequency: float) -> Tuple[float, ...]:
    """One frequency per column, computed once per render."""
    return tuple(column_frequency(c, cols, min_frequency, max_frequency) for c in range(cols))
