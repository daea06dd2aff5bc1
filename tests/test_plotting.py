"""Tests for interpkit.plotting."""

import logging

import numpy as np
import pytest

matplotlib = pytest.importorskip("matplotlib")
matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402

from interpkit.curves import CurveConfig  # noqa: E402
from interpkit.interpolation_api import generate_curve  # noqa: E402
from interpkit.plotting import curve_segments, plot_interpolation  # noqa: E402

HILL = [(-2.0, 0.0), (-1.0, 3.0), (0.0, 4.0), (1.0, 3.0), (2.0, 0.0)]


@pytest.fixture(autouse=True)
def _close_figures():
    yield
    plt.close("all")


def test_curve_segments_inserts_nan_at_gap():
    """Tests that a gap in the middle of a curve becomes one NaN row."""
    curve = generate_curve(HILL, "lagrange", config=CurveConfig(max_abs_y=2.0))
    segments = curve_segments(curve)

    assert segments.shape[0] == curve.count() + 1
    assert np.isnan(segments[:, 0]).sum() == 1


def test_curve_segments_without_gap():
    """Tests that a complete curve is returned unchanged."""
    curve = generate_curve(HILL, "lagrange", 30)
    np.testing.assert_array_equal(curve_segments(curve), curve.to_array())


def test_plot_interpolation_draws_each_method():
    """Tests one line per method plus the scattered data."""
    methods = ["lagrange", "newton-forward", "newton-divided"]
    ax = plot_interpolation(HILL, methods)

    labels = [line.get_label() for line in ax.get_lines()]
    assert labels == ["Lagrange", "Newton's Forward", "Newton's Divided"]
    assert len(ax.collections) == 1
    assert ax.get_legend() is not None


def test_plot_interpolation_marks_evaluated_x():
    """Tests that eval_x adds a marker with the formatted value."""
    _, ax = plt.subplots()
    out = plot_interpolation(HILL, ["lagrange"], ax=ax, eval_x=0.5)

    assert out is ax
    labels = [line.get_label() for line in ax.get_lines()]
    assert "Lagrange f(0.5) = 3.750000" in labels


def test_plot_interpolation_warns_on_empty_curve(caplog):
    """Tests that a method without finite samples is skipped with a warning."""
    with caplog.at_level(logging.WARNING, logger="interpkit"):
        ax = plot_interpolation([(1.0, 2.0), (1.0, 5.0)], ["lagrange"])

    assert len(ax.get_lines()) == 0
    assert any("No finite samples" in rec.getMessage() for rec in caplog.records)


def test_plot_interpolation_no_points():
    """Tests that an empty point set draws an empty chart."""
    ax = plot_interpolation([])
    assert len(ax.get_lines()) == 0
    assert ax.get_legend() is None
