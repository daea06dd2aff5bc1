"""Tests for interpkit.utils.numerics."""

import numpy as np
import pytest

from interpkit.utils.numerics import (
    as_float_output,
    format_value,
    is_finite,
    within_bound,
)


@pytest.mark.parametrize("value", [np.nan, np.inf, -np.inf])
def test_format_value_undefined(value):
    """Tests that non-finite values display as 'undefined'."""
    assert not is_finite(value)
    assert format_value(value) == "undefined"


def test_format_value_digits():
    """Tests fixed-point formatting of finite values."""
    assert format_value(2.25) == "2.250000"
    assert format_value(np.float64(-1.0 / 3.0), digits=2) == "-0.33"


def test_within_bound():
    """Tests the finite-and-bounded mask."""
    mask = within_bound([0.0, 1e6, -999_999.0, np.nan, np.inf], 1e6)
    np.testing.assert_array_equal(mask, [True, False, True, False, False])


def test_as_float_output():
    """Tests scalar and array outputs."""
    assert type(as_float_output(np.array(2.0), True)) is float
    out = as_float_output(np.array([1, 2]), False)
    assert out.dtype == np.float64
