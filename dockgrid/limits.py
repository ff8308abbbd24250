"""Fixed capacity limits of the packed grid and docking data layouts."""

from __future__ import annotations

from typing import Iterable, Sequence, Sized

TOLERANCE = 1e-16

# Neighbour lookup table
MAX_NUM_OF_EVERY_M_DATA_ELEMENT = 512
MAX_M_DATA_MI = 16
MAX_M_DATA_MJ = 16
MAX_M_DATA_MK = 16
MAX_NUM_OF_TOTAL_M_DATA = (
    MAX_M_DATA_MI * MAX_M_DATA_MJ * MAX_M_DATA_MK * MAX_NUM_OF_EVERY_M_DATA_ELEMENT
)

# Ligand and search limits
MAX_NUM_OF_LIG_TORSION = 48
MAX_NUM_OF_FLEX_TORSION = 1
MAX_NUM_OF_RIGID = 48
MAX_NUM_OF_ATOMS = 130
MAX_HESSIAN_MATRIX_SIZE = (
    (6 + MAX_NUM_OF_LIG_TORSION + MAX_NUM_OF_FLEX_TORSION)
    * (6 + MAX_NUM_OF_LIG_TORSION + MAX_NUM_OF_FLEX_TORSION + 1)
    // 2
)
MAX_NUM_OF_LIG_PAIRS = 4096
MAX_NUM_OF_BFGS_STEPS = 64
MAX_NUM_OF_RANDOM_MAP = 1000
GRIDS_SIZE = 17

MAX_NUM_OF_GRID_MI = 128
MAX_NUM_OF_GRID_MJ = 128
MAX_NUM_OF_GRID_MK = 128

MAX_P_DATA_M_DATA_SIZE = 256
FAST_SIZE = 2051
SMOOTH_SIZE = 2051
MAX_CONTAINER_SIZE_EVERY_WI = 5


def neighbour_table_fits(dims: Sequence[int], cells: Iterable[Sized]) -> bool:
    """Check a neighbour lookup table against the packed-table limits.

    ``dims`` are the three table dimensions and ``cells`` the per-cell atom
    lists. The table is accepted when any one of the dimensions, or the
    largest cell, is within its limit.
    """
    if len(dims) != 3:
        raise ValueError("a neighbour table has exactly three dimensions")
    largest = max((len(cell) for cell in cells), default=0)
    dim0, dim1, dim2 = dims
    return (
        dim0 <= MAX_M_DATA_MI
        or dim1 <= MAX_M_DATA_MJ
        or dim2 <= MAX_M_DATA_MK
        or largest <= MAX_NUM_OF_EVERY_M_DATA_ELEMENT
    )