"""Unit tests for the four interpolation method classes."""

import numpy as np
import pytest

from interpkit.methods import (
    LagrangeInterpolator,
    NewtonBackwardInterpolator,
    NewtonDividedInterpolator,
    NewtonForwardInterpolator,
    PolynomialInterpolator,
)

ALL_CLASSES = [
    LagrangeInterpolator,
    NewtonForwardInterpolator,
    NewtonBackwardInterpolator,
    NewtonDividedInterpolator,
]

X_QUAD = [0.0, 1.0, 2.0, 3.0]
Y_QUAD = [0.0, 1.0, 4.0, 9.0]


@pytest.mark.parametrize("cls", ALL_CLASSES)
def test_quadratic_midpoint(cls):
    """Tests that every method recovers y = x**2 at x = 1.5."""
    assert cls(X_QUAD, Y_QUAD).evaluate(1.5) == pytest.approx(2.25, abs=1e-6)


@pytest.mark.parametrize("cls", ALL_CLASSES)
def test_scalar_in_float_out(cls):
    """Tests that a scalar target returns a Python float."""
    out = cls(X_QUAD, Y_QUAD).evaluate(0.5)
    assert isinstance(out, float)


@pytest.mark.parametrize("cls", ALL_CLASSES)
def test_array_in_array_out(cls):
    """Tests that an array of targets returns an array of the same shape."""
    xs = np.array([[0.5, 1.5], [2.5, 3.5]])
    out = cls(X_QUAD, Y_QUAD).evaluate(xs)

    assert out.shape == (2, 2)
    np.testing.assert_allclose(out, xs**2, atol=1e-9)


@pytest.mark.parametrize("cls", ALL_CLASSES)
def test_call_is_evaluate(cls):
    """Tests that calling the interpolator is the same as evaluate."""
    interp = cls(X_QUAD, Y_QUAD)
    assert interp(2.5) == interp.evaluate(2.5)


@pytest.mark.parametrize("cls", ALL_CLASSES)
def test_exact_at_nodes(cls):
    """Tests that every method reproduces the node values."""
    x = 0.5 * np.arange(6) - 1.0
    y = np.sin(3.0 * x)
    interp = cls(x, y)
    np.testing.assert_allclose(interp.evaluate(x), y, atol=1e-9)


def test_newton_forward_linear_midpoint():
    """Tests linear interpolation between two points."""
    assert NewtonForwardInterpolator([0.0, 1.0], [0.0, 1.0]).evaluate(0.5) == 0.5


@pytest.mark.parametrize("cls", [NewtonForwardInterpolator, NewtonBackwardInterpolator])
def test_finite_difference_fallbacks(cls):
    """Tests that forward and backward return the lone y, or 0 for no points."""
    assert cls([2.0], [7.0]).evaluate(123.0) == 7.0
    assert cls([], []).evaluate(1.0) == 0.0


def test_divided_single_point_and_empty():
    """Tests the divided-difference fallbacks for one and zero points."""
    assert NewtonDividedInterpolator([2.0], [7.0]).evaluate(-4.0) == 7.0
    assert NewtonDividedInterpolator([], []).evaluate(1.0) == 0.0


def test_lagrange_single_point_and_empty():
    """Tests that Lagrange gives the constant polynomial or 0."""
    assert LagrangeInterpolator([2.0], [7.0]).evaluate(5.0) == 7.0
    assert LagrangeInterpolator([], []).evaluate(1.0) == 0.0


@pytest.mark.parametrize("cls", ALL_CLASSES)
@pytest.mark.parametrize("x", [1.0, 1.5])
def test_duplicate_x_is_non_finite_without_raising(cls, x):
    """Tests that duplicate nodes give NaN or infinity, never an exception or warning."""
    with np.errstate(all="raise"):
        out = cls([1.0, 1.0], [2.0, 5.0]).evaluate(x)
    assert not np.isfinite(out)


def test_backward_uses_last_node_as_anchor():
    """Tests the backward formula on a cubic near the right end."""
    x = np.array([0.0, 1.0, 2.0, 3.0])
    y = x**3 - 2.0 * x
    out = NewtonBackwardInterpolator(x, y).evaluate(2.75)
    assert out == pytest.approx(2.75**3 - 5.5, abs=1e-10)


def test_forward_on_unequal_spacing_is_finite_but_wrong():
    """Tests that forward differences silently mis-evaluate unequally spaced nodes."""
    x = [0.0, 1.0, 3.0, 4.0]
    y = [0.0, 1.0, 27.0, 64.0]

    out = NewtonForwardInterpolator(x, y).evaluate(3.0)

    assert np.isfinite(out)
    assert out == pytest.approx(64.0)


def test_nodes_are_copied():
    """Tests that the interpolator does not keep references to caller arrays."""
    x = np.array([0.0, 1.0])
    y = np.array([0.0, 1.0])
    interp = LagrangeInterpolator(x, y)
    y[1] = 100.0
    assert interp.evaluate(1.0) == 1.0


def test_mismatched_lengths_raise():
    """Tests that node arrays of different lengths are rejected."""
    with pytest.raises(ValueError, match="equal length"):
        LagrangeInterpolator([0.0, 1.0], [0.0])


def test_base_class_is_abstract():
    """Tests that the base class cannot evaluate on its own."""
    with pytest.raises(NotImplementedError):
        PolynomialInterpolator([0.0], [1.0]).evaluate(0.0)


@pytest.mark.parametrize("cls", ALL_CLASSES)
def test_metadata(cls):
    """Tests that every method carries a name, label and description."""
    assert cls.name and cls.label and cls.description
