"""Trilinearly interpolated energy grid with an out-of-box penalty."""

from __future__ import annotations

import numpy as np

from .curl import curl
from .grid_dim import GridDims


class Grid:
    """Values sampled on a regular 3-D lattice."""

    def __init__(self, gd: GridDims | None = None) -> None:
        self.origin = np.zeros(3)
        self.span = np.ones(3)
        self.factor = np.ones(3)
        self.dim_fl_minus_1 = -np.ones(3)
        self.factor_inv = np.ones(3)
        self.data = np.zeros((0, 0, 0))
        if gd is not None:
            self.init(gd)

    def init(self, gd: GridDims) -> None:
        """Size the lattice for ``gd`` and zero its values."""
        dims = list(gd)
        if len(dims) != 3:
            raise ValueError("grid needs exactly three dimensions")
        span = np.array([d.span() for d in dims], dtype=float)
        if np.any(span <= 0):
            raise ValueError("every grid dimension must have a positive span")
        shape = tuple(d.n + 1 for d in dims)
        self.data = np.zeros(shape)
        self.origin = np.array([d.begin for d in dims], dtype=float)
        self.span = span
        self.dim_fl_minus_1 = np.array(shape, dtype=float) - 1.0
        self.factor = self.dim_fl_minus_1 / self.span
        with np.errstate(divide="ignore"):
            self.factor_inv = 1.0 / self.factor

    def index_to_argument(self, x: int, y: int, z: int) -> np.ndarray:
        """Return the coordinates of lattice node ``(x, y, z)``."""
        return self.origin + self.factor_inv * np.array([x, y, z], dtype=float)

    def initialized(self) -> bool:
        return all(d > 0 for d in self.data.shape)

    def evaluate(self, location, slope: float, v: float) -> float:
        """Interpolated value at ``location`` plus the out-of-box penalty."""
        value, _ = self._evaluate(location, slope, v, with_deriv=False)
        return value

    def evaluate_deriv(self, location, slope: float, v: float) -> tuple[float, np.ndarray]:
        """Like :meth:`evaluate`, also returning the gradient."""
        value, deriv = self._evaluate(location, slope, v, with_deriv=True)
        return value, deriv

    def _evaluate(self, location, slope, v, with_deriv):
        shape = self.data.shape
        if len(shape) != 3 or any(d < 2 for d in shape):
            raise ValueError("grid must have at least two points along each axis")
        s = (np.asarray(location, dtype=float) - self.origin) * self.factor
        miss = np.zeros(3)
        region = np.zeros(3, dtype=int)
        corner = [0, 0, 0]
        for axis, (size, last) in enumerate(zip(shape, self.dim_fl_minus_1)):
            if s[axis] < 0:
                miss[axis] = -s[axis]
                region[axis] = -1
                s[axis] = 0.0
            elif s[axis] >= last:
                miss[axis] = s[axis] - last
                region[axis] = 1
                corner[axis] = size - 2
                s[axis] = 1.0
            else:
                corner[axis] = int(s[axis])
                s[axis] -= corner[axis]

        penalty = slope * float(miss @ self.factor_inv)

        x0, y0, z0 = corner
        cube = self.data[x0 : x0 + 2, y0 : y0 + 2, z0 : z0 + 2]
        x, y, z = s
        wx = np.array([1.0 - x, x])
        wy = np.array([1.0 - y, y])
        wz = np.array([1.0 - z, z])
        f = float(np.einsum("ijk,i,j,k->", cube, wx, wy, wz))

        if not with_deriv:
            f, _ = curl(f, v)
            return f + penalty, None

        step = np.array([-1.0, 1.0])
        gradient = np.array(
            [
                np.einsum("ijk,i,j,k->", cube, step, wy, wz),
                np.einsum("ijk,i,j,k->", cube, wx, step, wz),
                np.einsum("ijk,i,j,k->", cube, wx, wy, step),
            ]
        )
        f, gradient = curl(f, v, gradient)
        inside = np.where(region == 0, gradient, 0.0)
        deriv = self.factor * inside + slope * region
        return f + penalty, deriv