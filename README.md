# dockgrid

Building blocks for grid-based scoring of a ligand docked into a rigid
receptor: interpolated affinity grids, pose bookkeeping, quaternion and
torsion handling, and a few storage and parsing helpers.

## Modules

- `dockgrid.grid_dim` – `GridDim` (`begin`, `end`, `n` intervals) with
  `span()` and `enabled()`, plus `dims_equal`, `grid_dims_begin`,
  `grid_dims_end` and `format_grid_dims` (one `n [begin .. end]` line per axis).
- `dockgrid.grid` – `Grid`, values on a regular 3-D lattice. `init(gd)` sizes
  the lattice to `n + 1` points per axis and zeros it; `index_to_argument`
  gives the coordinates of a node; `evaluate(location, slope, v)` returns the
  trilinear interpolation, softened by `curl`, plus `slope` times the distance
  outside the box; `evaluate_deriv` also returns the gradient.
- `dockgrid.curl` – `curl(e, v, deriv=None)` caps a positive energy smoothly
  at `v` and scales an optional derivative to match; `not_max` tells whether a
  value is well below the largest float.
- `dockgrid.coords` – `OutputType` (energy, coordinates, optional state),
  `rmsd_upper_bound`, `find_closest` and `add_to_output_container`, which keeps
  a list of poses that are distinct by RMSD, bounded in size and sorted by
  ascending energy.
- `dockgrid.conformation` – `normalize_angle`, quaternion helpers
  (`angle_to_quaternion`, `axis_angle_to_quaternion`, `quaternion_multiply`,
  `quaternion_normalize_approx`, `quaternion_increment`,
  `quaternion_to_matrix`, `quaternion_is_normalized`), the `Conformation`
  pose and `Change` step types, `gyration_radius` and `mutate_conf`.
- `dockgrid.matrix` – `Matrix` (column-major), `TriangularMatrix` and
  `StrictlyTriangularMatrix`, flat storage indexed by `m[i, j]`, and
  `triangular_matrix_index`.
- `dockgrid.limits` – fixed capacity limits of the packed data layouts and
  `neighbour_table_fits`.
- `dockgrid.convert_substring` – `convert_substring(text, i, j, kind)` reads a
  fixed-column field (1-based, inclusive) as `str`, `int`, `float` or
  `"unsigned"`; `substring_is_blank` tests a field for whitespace. Bad ranges
  and bad values raise `BadConversion`, a `ValueError`.
- `dockgrid.progress` – `ParallelProgress`, a text progress bar that several
  threads may advance with `increment()` after `start(total)`.

## Installation

```
pip install .
```

Install with the test extra to run the test suite:

```
pip install ".[test]"
pytest
```

## Example

```python
from dockgrid.grid_dim import GridDim
from dockgrid.grid import Grid

dims = (GridDim(0.0, 10.0, 10), GridDim(0.0, 10.0, 10), GridDim(0.0, 10.0, 10))
grid = Grid(dims)
print(grid.initialized())                                  # True
grid.data[5, 5, 5] = -1.0
print(grid.evaluate((5.0, 5.0, 5.0), slope=1e6, v=1000.0))  # -1.0
```

Positions outside the grid box are scored with the value at the box edge plus
`slope` times their distance outside the box, so an optimiser is pushed back
towards the box.

```python
from dockgrid.coords import OutputType, add_to_output_container

poses = []
add_to_output_container(poses, OutputType(-5.0, [[0, 0, 0]]), min_rmsd=1.0, max_size=9)
add_to_output_container(poses, OutputType(-6.0, [[0.2, 0, 0]]), min_rmsd=1.0, max_size=9)
print([p.e for p in poses])  # [-6.0]: the better, similar pose replaced the first
```

## What the package does not do

The package has no receptor or ligand file reader, does not compute
atom-pair interaction energies, and does not fill grids from receptor atoms:
a `Grid` holds whatever values are written into its `data` array. It has no
model of a ligand torsion tree, no energy or gradient of a whole ligand, no
local optimiser or search driver, and no command-line program.