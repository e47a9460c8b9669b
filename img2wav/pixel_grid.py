# pixel_grid.py
"""
Normalized pixel grid consumed by the synthesizer.

PixelGrid(intensity, opacity=None)
- intensity[row][col] in 0..1 (grayscale brightness)
- opacity[row][col]   in 0..1, only when the source image has an alpha channel

Rows are played in time order; each column is a fixed tone.
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

from img2wav.errors import DimensionMismatch, InvalidGrid

Matrix = Tuple[Tuple[float, ...], ...]


def _freeze(name: str, values: Sequence[Sequence[float]]) -> Matrix:
    rows = tuple(tuple(float(v) for v in row) for row in values)
    if rows:
        width = len(rows[0])
        for r, row in enumerate(rows):
            if len(row) != width:
                raise InvalidGrid(f"{name} row {r} has {len(row)} values, expected {width}")
            for c, v in enumerate(row):
                if not 0.0 <= v <= 1.0:
                    raise InvalidGrid(f"{name}[{r}][{c}]={v} is outside 0..1")
    return rows


def _shape(m: Matrix) -> Tuple[int, int]:
    return len(m), (len(m[0]) if m else 0)


class PixelGrid:
    def __init__(self, intensity, opacity=None):
        self._intensity = _freeze("intensity", intensity)
        self._opacity: Optional[Matrix] = None
        if opacity is not None:
            self._opacity = _freeze("opacity", opacity)
            if _shape(self._opacity) != _shape(self._intensity):
                raise DimensionMismatch(
                    f"opacity is {_shape(self._opacity)}, intensity is {_shape(self._intensity)}"
                )

    @property
    def rows(self) -> int:
        return len(self._intensity)

    @property
    def cols(self) -> int:
        return _shape(self._intensity)[1]

    @property
    def intensity(self) -> Matrix:
        return self._intensity

    @property
    def opacity(self) -> Optional[Matrix]:
        return self._opacity

    @property
    def has_opacity(self) -> bool:
        return self._opacity is not None

    def amplitudes(self, opacity_floor: float) -> Matrix:
        """
        Per-pixel amplitude: intensity * effective opacity.

        Effective opacity is 1.0 without an alpha channel. With one, fully
        transparent pixels stay silent and every other pixel is raised to at
        least `opacity_floor`.
        """
        if self._opacity is None:
            return self._intensity
        out = []
        for i_row, o_row in zip(self._intensity, self._opacity):
            out.append(tuple(
                i * (0.0 if o == 0.0 else max(o, opacity_floor))
                for i, o in zip(i_row, o_row)
            ))
        return tuple(out)

    def __repr__(self):
        return f"PixelGrid(rows={self.rows}, cols={self.cols}, has_opacity={self.has_opacity})"

    def __eq__(self, other):
        if not isinstance(other, PixelGrid):
            return NotImplemented
        return self._intensity == other._intensity and self._opacity == other._opacity

    def __hash__(self):
        return hash((self._intensity, self._opacity))
