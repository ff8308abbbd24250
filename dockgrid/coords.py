"""Comparison of poses by RMSD and a bounded, energy-sorted pose container."""

from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass, field
from typing import Any, Sequence

import numpy as np

from .curl import MAX_FL


@dataclass
class OutputType:
    """A docked pose: its energy, its atom coordinates and optional state."""

    e: float
    coords: np.ndarray = field(default_factory=lambda: np.zeros((0, 3)))
    conf: Any = None

    def __post_init__(self) -> None:
        self.coords = np.asarray(self.coords, dtype=float).reshape(-1, 3)


def rmsd_upper_bound(a: Sequence, b: Sequence) -> float:
    """Root mean square distance between paired coordinates, 0 when empty."""
    pa = np.asarray(a, dtype=float).reshape(-1, 3)
    pb = np.asarray(b, dtype=float).reshape(-1, 3)
    if len(pa) != len(pb):
        raise ValueError(f"coordinate counts differ: {len(pa)} != {len(pb)}")
    if len(pa) == 0:
        return 0.0
    return math.sqrt(float(((pa - pb) ** 2).sum()) / len(pa))


def find_closest(a: Sequence, outputs: Sequence[OutputType]) -> tuple[int, float]:
    """Index and RMSD of the pose in ``outputs`` closest to ``a``.

    An empty ``outputs`` gives ``(0, MAX_FL)``.
    """
    best = (len(outputs), MAX_FL)
    for index, pose in enumerate(outputs):
        res = rmsd_upper_bound(a, pose.coords)
        if index == 0 or res < best[1]:
            best = (index, res)
    return best


def add_to_output_container(
    out: list[OutputType], t: OutputType, min_rmsd: float, max_size: int
) -> None:
    """Add ``t`` to ``out`` unless a similar or better pose is already there.

    A pose within ``min_rmsd`` of ``t`` is replaced if ``t`` has lower energy.
    Otherwise ``t`` is appended while there is room, or replaces the worst
    pose if it beats it. ``out`` is left sorted by ascending energy.
    """
    index, rmsd = find_closest(t.coords, out)
    if index < len(out) and rmsd < min_rmsd:
        if t.e < out[index].e:
            out[index] = dataclasses.replace(t)
    elif len(out) < max_size:
        out.append(dataclasses.replace(t))
    elif out and t.e < out[-1].e:
        out[-1] = dataclasses.replace(t)
    out.sort(key=lambda pose: pose.e)