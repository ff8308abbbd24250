"""Dimensions of a regular sampling grid along each axis."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from .curl import EPSILON_FL


@dataclass
class GridDim:
    """One axis: ``n`` intervals between ``begin`` and ``end``."""

    begin: float = 0.0
    end: float = 0.0
    n: int = 0

    def span(self) -> float:
        return self.end - self.begin

    def enabled(self) -> bool:
        return self.n > 0


GridDims = Sequence[GridDim]


def _float_eq(a: float, b: float) -> bool:
    return abs(a - b) < EPSILON_FL


def _dim_eq(a: GridDim, b: GridDim) -> bool:
    return a.n == b.n and _float_eq(a.begin, b.begin) and _float_eq(a.end, b.end)


def dims_equal(a: GridDim | GridDims, b: GridDim | GridDims) -> bool:
    """Compare single axes or whole sets of axes."""
    if isinstance(a, GridDim) and isinstance(b, GridDim):
        return _dim_eq(a, b)
    if isinstance(a, GridDim) or isinstance(b, GridDim):
        return False
    return len(a) == len(b) and all(_dim_eq(x, y) for x, y in zip(a, b))


def grid_dims_begin(gd: GridDims) -> np.ndarray:
    return np.array([d.begin for d in gd], dtype=float)


def grid_dims_end(gd: GridDims) -> np.ndarray:
    return np.array([d.end for d in gd], dtype=float)


def format_grid_dims(gd: GridDims) -> str:
    """Render one ``n [begin .. end]`` line per axis."""
    return "".join(f"{d.n} [{d.begin:g} .. {d.end:g}]\n" for d in gd)