import numpy as np
import pytest

from dockgrid.curl import MAX_FL
from dockgrid.grid import Grid
from dockgrid.grid_dim import GridDim


def _linear(x, y, z):
    return 1.0 + x + 2.0 * y + 3.0 * z


def _unit_grid():
    gd = (GridDim(0.0, 2.0, 2), GridDim(0.0, 2.0, 2), GridDim(0.0, 2.0, 2))
    g = Grid(gd)
    g.data = np.fromfunction(_linear, g.data.shape)
    return g


def test_default_grid_not_initialized():
    assert Grid().initialized() is False


def test_init_shape_and_corners():
    gd = (GridDim(-1.0, 3.0, 4), GridDim(0.0, 1.0, 2), GridDim(2.0, 5.0, 3))
    g = Grid(gd)
    assert g.initialized() is True
    assert g.data.shape == (5, 3, 4)
    assert np.allclose(g.index_to_argument(0, 0, 0), [-1.0, 0.0, 2.0])
    assert np.allclose(g.index_to_argument(4, 2, 3), [3.0, 1.0, 5.0])
    assert np.allclose(g.factor * g.factor_inv, 1.0)


def test_init_rejects_empty_span():
    with pytest.raises(ValueError):
        Grid((GridDim(0.0, 0.0, 2), GridDim(0.0, 1.0, 2), GridDim(0.0, 1.0, 2)))


def test_uninitialized_evaluate_raises():
    with pytest.raises(ValueError):
        Grid().evaluate([0.0, 0.0, 0.0], 1.0, MAX_FL)


def test_values_at_nodes():
    g = _unit_grid()
    for node in [(0, 0, 0), (1, 2, 0), (2, 2, 2)]:
        assert g.evaluate(g.index_to_argument(*node), 0.0, MAX_FL) == pytest.approx(g.data[node])


@pytest.mark.parametrize("point", [(0.5, 0.5, 0.5), (1.25, 0.1, 1.9), (0.0, 1.5, 0.3)])
def test_linear_interpolation_exact(point):
    g = _unit_grid()
    assert g.evaluate(point, 1.0, MAX_FL) == pytest.approx(_linear(*point))


def test_interior_gradient():
    g = _unit_grid()
    value, deriv = g.evaluate_deriv((0.5, 1.2, 0.7), 1.0, MAX_FL)
    assert value == pytest.approx(_linear(0.5, 1.2, 0.7))
    assert np.allclose(deriv, [1.0, 2.0, 3.0])


def test_outside_penalty_and_derivative():
    g = _unit_grid()
    slope = 10.0
    value, deriv = g.evaluate_deriv((-1.0, 0.5, 0.5), slope, MAX_FL)
    assert value == pytest.approx(_linear(0.0, 0.5, 0.5) + slope * 1.0)
    assert deriv[0] == pytest.approx(-slope)
    assert deriv[1:] == pytest.approx([2.0, 3.0])


def test_outside_above_upper_bound():
    g = _unit_grid()
    slope = 4.0
    value, deriv = g.evaluate_deriv((1.0, 3.0, 1.0), slope, MAX_FL)
    assert value == pytest.approx(_linear(1.0, 2.0, 1.0) + slope * 1.0)
    assert deriv[1] == pytest.approx(slope)


def test_evaluate_matches_evaluate_deriv():
    g = _unit_grid()
    point = (1.7, -0.4, 2.5)
    value, _ = g.evaluate_deriv(point, 2.0, 1.0)
    assert g.evaluate(point, 2.0, 1.0) == pytest.approx(value)


def test_curl_caps_positive_values():
    g = _unit_grid()
    point = (0.5, 0.5, 0.5)
    capped = g.evaluate(point, 0.0, 1.0)
    assert 0.0 < capped < min(1.0, g.evaluate(point, 0.0, MAX_FL))