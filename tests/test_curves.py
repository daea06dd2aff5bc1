"""Tests for interpkit.curves."""

import logging
import warnings

import numpy as np
import pytest

from interpkit.curves import DEFAULT_RESOLUTION, CurveConfig, CurveSample
from interpkit.interpolation_api import generate_curve
from interpkit.methods import LagrangeInterpolator
from interpkit.points import DataPoint

HILL = [(-2.0, 0.0), (-1.0, 3.0), (0.0, 4.0), (1.0, 3.0), (2.0, 0.0)]


def test_curve_config_defaults():
    """Tests the default sampling configuration."""
    cfg = CurveConfig()
    assert cfg.resolution == DEFAULT_RESOLUTION == 150
    assert cfg.padding == 0.1
    assert cfg.max_abs_y == 1e6


@pytest.mark.parametrize("bad", [0, -3, 2.5, True, float("inf")])
def test_curve_config_rejects_bad_resolution(bad):
    """Tests that resolution must be a positive integer."""
    with pytest.raises(ValueError):
        CurveConfig(resolution=bad)


def test_curve_is_lazy(monkeypatch):
    """Tests that nothing is evaluated until the curve is iterated."""
    calls = []
    original = LagrangeInterpolator._evaluate

    def spy(self, x):
        calls.append(x.size)
        return original(self, x)

    monkeypatch.setattr(LagrangeInterpolator, "_evaluate", spy)

    curve = generate_curve(HILL, "lagrange", 20)
    assert calls == []

    list(curve)
    assert calls == [21]


def test_list_and_count_each_evaluate_once(monkeypatch):
    """Tests that materializing or counting a curve samples it exactly once."""
    calls = []
    original = LagrangeInterpolator._evaluate

    def spy(self, x):
        calls.append(x.size)
        return original(self, x)

    monkeypatch.setattr(LagrangeInterpolator, "_evaluate", spy)
    curve = generate_curve(HILL, "lagrange", 10)

    assert len(tuple(curve)) == 11
    assert calls == [11]
    assert curve.count() == 11
    assert calls == [11, 11]


@pytest.mark.parametrize("method", ["lagrange", "newton-divided", "newton-forward"])
def test_curve_over_overflowing_domain_is_silent(method):
    """Tests that an infinite padded domain yields no warnings and no bad samples."""
    pts = [(-1e308, 0.0), (1e308, 1.0)]
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        with np.errstate(all="raise"):
            samples = list(generate_curve(pts, method, 8))

    assert all(np.isfinite(p.x) and np.isfinite(p.y) for p in samples)


def test_curve_is_restartable():
    """Tests that iterating twice yields the same points."""
    curve = generate_curve(HILL, "newton-divided", 40)
    first = list(curve)
    second = list(curve)

    assert first == second
    assert all(isinstance(p, DataPoint) for p in first)


def test_curve_does_not_see_later_changes_to_nodes():
    """Tests that the curve owns a private copy of its nodes."""
    x = np.array([0.0, 1.0])
    y = np.array([0.0, 1.0])
    curve = CurveSample("lagrange", LagrangeInterpolator, x, y, CurveConfig(resolution=4))
    y[1] = 50.0

    assert max(p.y for p in curve) == pytest.approx(1.1)


def test_to_array_shape():
    """Tests the array form of a curve."""
    arr = generate_curve(HILL, "lagrange", 8).to_array()
    assert arr.shape == (9, 2)

    empty = generate_curve([], "lagrange").to_array()
    assert empty.shape == (0, 2)


def test_custom_padding():
    """Tests that the padding fraction widens the domain."""
    curve = generate_curve(HILL, "lagrange", config=CurveConfig(padding=0.5))
    assert curve.domain == pytest.approx((-4.0, 4.0))


def test_threshold_leaves_a_gap():
    """Tests that dropped samples in the middle of the domain leave a gap."""
    # 4 - x**2 stays below 2 in magnitude only for 2 < x**2 < 6.
    curve = generate_curve(HILL, "lagrange", config=CurveConfig(max_abs_y=2.0))
    arr = curve.to_array()

    assert np.all(np.abs(arr[:, 1]) < 2.0)
    assert np.any(arr[:, 0] < 0.0) and np.any(arr[:, 0] > 0.0)
    assert not np.any(np.abs(arr[:, 0]) < 1.4)


def test_dropped_samples_are_logged_at_debug(caplog):
    """Tests that dropping samples is logged, not raised."""
    with caplog.at_level(logging.DEBUG, logger="interpkit"):
        list(generate_curve(HILL, "lagrange", config=CurveConfig(max_abs_y=2.0)))

    assert any("dropped" in rec.getMessage() for rec in caplog.records)


def test_empty_curve_properties():
    """Tests the attributes of an empty curve."""
    curve = CurveSample.empty("lagrange", CurveConfig())
    assert curve.domain is None
    assert curve.count() == 0
    assert curve.sample_x().size == 0
    assert "lagrange" in repr(curve)
