import numpy as np

from dockgrid.grid_dim import (
    GridDim,
    dims_equal,
    format_grid_dims,
    grid_dims_begin,
    grid_dims_end,
)


def _dims():
    return (GridDim(-1.5, 2.25, 4), GridDim(0.0, 3.0, 6), GridDim(1.0, 2.0, 2))


def test_default_dim_disabled():
    d = GridDim()
    assert d.enabled() is False
    assert d.span() == 0.0


def test_span_and_enabled():
    d = GridDim(1.0, 4.5, 7)
    assert d.span() == 3.5
    assert d.enabled() is True


def test_equal_single_dims():
    assert dims_equal(GridDim(0.0, 1.0, 3), GridDim(0.0, 1.0, 3)) is True


def test_different_n_not_equal():
    assert dims_equal(GridDim(0.0, 1.0, 3), GridDim(0.0, 1.0, 4)) is False


def test_different_begin_not_equal():
    assert dims_equal(GridDim(0.0, 1.0, 3), GridDim(0.1, 1.0, 3)) is False


def test_equal_dim_sets():
    assert dims_equal(_dims(), list(_dims())) is True


def test_unequal_dim_sets():
    other = list(_dims())
    other[2] = GridDim(1.0, 2.5, 2)
    assert dims_equal(_dims(), other) is False


def test_single_vs_set_not_equal():
    assert dims_equal(GridDim(), _dims()) is False


def test_begin_and_end_vectors():
    gd = _dims()
    assert np.array_equal(grid_dims_begin(gd), [d.begin for d in gd])
    assert np.array_equal(grid_dims_end(gd), [d.end for d in gd])
    assert np.allclose(grid_dims_end(gd) - grid_dims_begin(gd), [d.span() for d in gd])


def test_format():
    text = format_grid_dims(_dims())
    lines = text.splitlines()
    assert lines[0] == "4 [-1.5 .. 2.25]"
    assert len(lines) == 3
    assert text.endswith("\n")