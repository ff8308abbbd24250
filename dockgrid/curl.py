"""Soft capping of positive energies and their derivatives."""

from __future__ import annotations

import sys
from typing import TypeVar

import numpy as np

EPSILON_FL = sys.float_info.epsilon
MAX_FL = sys.float_info.max

D = TypeVar("D")


def not_max(x: float) -> bool:
    """Return True when ``x`` is well below the largest representable float."""
    return x < 0.1 * MAX_FL


def curl(e: float, v: float, deriv: D | None = None) -> tuple[float, D | None]:
    """Cap a positive energy ``e`` smoothly at ``v``.

    Returns the new energy together with ``deriv`` scaled by the square of the
    same factor. ``deriv`` may be a number, a sequence or an array; ``None``
    is passed through unchanged.
    """
    if e > 0 and not_max(v):
        factor = 0.0 if v < EPSILON_FL else v / (v + e)
        e = e * factor
        if deriv is not None:
            scale = factor * factor
            if isinstance(deriv, (int, float)):
                deriv = deriv * scale
            else:
                deriv = np.asarray(deriv, dtype=float) * scale
    return e, deriv