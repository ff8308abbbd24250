"""Rigid-body and torsional conformations, quaternions and random mutation."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Sequence

import numpy as np

from .curl import EPSILON_FL
from .limits import TOLERANCE

EL_TYPE_H = 0


def normalize_angle(x: float) -> float:
    """Bring an angle into ``[-pi, pi]``."""
    pi = math.pi
    while True:
        if -pi <= x <= pi:
            break
        if x > 3 * pi:
            x -= 2 * pi * math.ceil((x - pi) / (2 * pi))
        elif x < -3 * pi:
            x += 2 * pi * math.ceil((-x - pi) / (2 * pi))
        elif x > pi:
            x -= 2 * pi
        elif x < -pi:
            x += 2 * pi
        else:
            break
    return x


def quaternion_is_normalized(q: Sequence[float]) -> bool:
    """True unless the squared norm of ``q`` exceeds 1 by 0.001 or more."""
    q_pow = float(np.dot(q, q))
    return (q_pow - 1 < 0.001) and (math.sqrt(q_pow) - 1 < 0.001)


def axis_angle_to_quaternion(axis: Sequence[float], angle: float) -> np.ndarray:
    """Quaternion for a rotation by ``angle`` about the unit vector ``axis``."""
    axis = np.asarray(axis, dtype=float)
    if abs(float(np.linalg.norm(axis)) - 1) >= 0.001:
        raise ValueError("rotation axis must be a unit vector")
    angle = normalize_angle(angle)
    c = math.cos(angle / 2)
    s = math.sin(angle / 2)
    return np.array([c, s * axis[0], s * axis[1], s * axis[2]])


def angle_to_quaternion(rotation: Sequence[float]) -> np.ndarray:
    """Quaternion for a rotation vector (axis scaled by angle)."""
    rotation = np.asarray(rotation, dtype=float)
    angle = float(np.linalg.norm(rotation))
    if angle > EPSILON_FL:
        return axis_angle_to_quaternion(rotation / angle, angle)
    return np.array([1.0, 0.0, 0.0, 0.0])


def quaternion_multiply(a: Sequence[float], b: Sequence[float]) -> np.ndarray:
    """Hamilton product ``a * b``."""
    a0, a1, a2, a3 = a
    b0, b1, b2, b3 = b
    return np.array(
        [
            a0 * b0 - a1 * b1 - a2 * b2 - a3 * b3,
            a0 * b1 + a1 * b0 + a2 * b3 - a3 * b2,
            a0 * b2 - a1 * b3 + a2 * b0 + a3 * b1,
            a0 * b3 + a1 * b2 - a2 * b1 + a3 * b0,
        ],
        dtype=float,
    )


def quaternion_normalize_approx(q: Sequence[float]) -> np.ndarray:
    """Scale ``q`` to unit norm unless it is already unit within tolerance."""
    q = np.asarray(q, dtype=float)
    s = float(np.dot(q, q))
    if abs(s - 1) < TOLERANCE:
        return q.copy()
    a = math.sqrt(s)
    if a <= EPSILON_FL:
        raise ValueError("cannot normalize a zero quaternion")
    return q * (1 / a)


def quaternion_increment(q: Sequence[float], rotation: Sequence[float]) -> np.ndarray:
    """Apply the rotation vector ``rotation`` on top of orientation ``q``."""
    return quaternion_normalize_approx(quaternion_multiply(angle_to_quaternion(rotation), q))


def quaternion_to_matrix(q: Sequence[float]) -> np.ndarray:
    """3x3 rotation matrix of the unit quaternion ``q``."""
    a, b, c, d = (float(v) for v in q)
    aa, ab, ac, ad = a * a, a * b, a * c, a * d
    bb, bc, bd = b * b, b * c, b * d
    cc, cd = c * c, c * d
    dd = d * d
    return np.array(
        [
            [aa + bb - cc - dd, 2 * (-ad + bc), 2 * (ac + bd)],
            [2 * (ad + bc), aa - bb + cc - dd, 2 * (-ab + cd)],
            [2 * (-ac + bd), 2 * (ab + cd), aa - bb - cc + dd],
        ]
    )


def _vector(values: Sequence[float], size: int) -> np.ndarray:
    arr = np.asarray(values, dtype=float).reshape(-1)
    if len(arr) != size:
        raise ValueError(f"expected {size} components, got {len(arr)}")
    return arr.copy()


@dataclass
class Change:
    """A gradient or step: position, rotation vector and torsion components.

    Components are indexable in the order position, orientation, torsions.
    """

    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    orientation: np.ndarray = field(default_factory=lambda: np.zeros(3))
    lig_torsion: list[float] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.position = _vector(self.position, 3)
        self.orientation = _vector(self.orientation, 3)
        self.lig_torsion = [float(t) for t in self.lig_torsion]

    @classmethod
    def zeros(cls, num_torsions: int) -> Change:
        return cls(lig_torsion=[0.0] * num_torsions)

    def copy(self) -> Change:
        return Change(self.position, self.orientation, list(self.lig_torsion))

    def __len__(self) -> int:
        return 6 + len(self.lig_torsion)

    def __getitem__(self, index: int) -> float:
        if index < 0:
            raise IndexError(index)
        if index < 3:
            return float(self.position[index])
        if index < 6:
            return float(self.orientation[index - 3])
        return self.lig_torsion[index - 6]

    def __setitem__(self, index: int, value: float) -> None:
        if index < 0:
            raise IndexError(index)
        if index < 3:
            self.position[index] = value
        elif index < 6:
            self.orientation[index - 3] = value
        else:
            self.lig_torsion[index - 6] = float(value)

    def dot(self, other: Change) -> float:
        """Scalar product over all components."""
        if len(self) != len(other):
            raise ValueError("changes have different sizes")
        return float(
            np.dot(self.position, other.position)
            + np.dot(self.orientation, other.orientation)
            + sum(a * b for a, b in zip(self.lig_torsion, other.lig_torsion))
        )


@dataclass
class Conformation:
    """Ligand pose: root position, orientation quaternion and torsions."""

    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    orientation: np.ndarray = field(default_factory=lambda: np.array([1.0, 0.0, 0.0, 0.0]))
    lig_torsion: list[float] = field(default_factory=list)
    e: float = 0.0

    def __post_init__(self) -> None:
        self.position = _vector(self.position, 3)
        self.orientation = _vector(self.orientation, 4)
        self.lig_torsion = [float(t) for t in self.lig_torsion]

    def copy(self) -> Conformation:
        return Conformation(self.position, self.orientation, list(self.lig_torsion), self.e)

    def increment(self, change: Change, factor: float) -> None:
        """Move along ``change`` scaled by ``factor``, keeping angles normalized."""
        self.position = self.position + factor * change.position
        self.orientation = quaternion_increment(self.orientation, factor * change.orientation)
        for k, torsion in enumerate(self.lig_torsion):
            step = normalize_angle(factor * change.lig_torsion[k])
            self.lig_torsion[k] = normalize_angle(torsion + step)


def gyration_radius(
    types: Sequence[int],
    coords: Sequence,
    begin: int,
    end: int,
    origin: Sequence[float],
) -> float:
    """RMS distance of the heavy atoms ``begin..end-1`` from ``origin``.

    ``types`` are element types; hydrogens are skipped. Returns 0 when there
    are no heavy atoms.
    """
    origin = np.asarray(origin, dtype=float)
    points = np.asarray(coords, dtype=float).reshape(-1, 3)
    distances = [
        float(((points[i] - origin) ** 2).sum())
        for i in range(begin, end)
        if types[i] != EL_TYPE_H
    ]
    return math.sqrt(sum(distances) / len(distances)) if distances else 0.0


def mutate_conf(
    conf: Conformation,
    which: int,
    sphere_point: Sequence[float],
    torsion_value: float,
    gyration: float,
    amplitude: float,
) -> None:
    """Mutate one degree of freedom of ``conf`` in place.

    ``which`` 0 shifts the position by ``amplitude * sphere_point``; 1 rotates
    by ``amplitude / gyration * sphere_point`` when the gyration radius is
    positive; ``2 + k`` sets torsion ``k`` to ``torsion_value``. Larger values
    leave the conformation unchanged.
    """
    if which < 0:
        raise ValueError("mutation selector must not be negative")
    point = np.asarray(sphere_point, dtype=float)
    if which == 0:
        conf.position = conf.position + amplitude * point
        return
    if which == 1:
        if gyration > EPSILON_FL:
            conf.orientation = quaternion_increment(conf.orientation, amplitude / gyration * point)
        return
    which -= 2
    if which < len(conf.lig_torsion):
        conf.lig_torsion[which] = float(torsion_value)