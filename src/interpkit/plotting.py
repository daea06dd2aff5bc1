"""Matplotlib rendering of data points and interpolation curves.

Requires the optional ``plot`` extra (``pip install interpkit[plot]``).

Curves are drawn from :class:`~interpkit.curves.CurveSample` objects. Where
samples were dropped the line is broken instead of bridged, so divergent
regions show up as gaps.
"""

from __future__ import annotations

from typing import Iterable

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.axes import Axes

from interpkit.curves import DEFAULT_RESOLUTION, CurveSample
from interpkit.interpolation_api import evaluate, generate_curve
from interpkit.logger import interpkit_logger
from interpkit.points import sorted_nodes
from interpkit.registry import method_info
from interpkit.utils.numerics import format_value, is_finite
from interpkit.utils.types import FloatArray, PointsLike

__all__ = ["curve_segments", "plot_interpolation"]

METHOD_COLORS = {
    "lagrange": "#3b9ab2",
    "newton-forward": "#e1af00",
    "newton-backward": "#f21901",
    "newton-divided": "#78b7c5",
}


def curve_segments(curve: CurveSample) -> FloatArray:
    """Returns the curve as an ``(M, 2)`` array with NaN rows at gaps.

    A gap is any jump between consecutive kept samples larger than one
    sampling step. Matplotlib does not draw line segments through NaN.
    """
    arr = curve.to_array()
    if arr.shape[0] < 2 or curve.domain is None:
        return arr

    start, end = curve.domain
    step = (end - start) / curve.resolution
    breaks = np.nonzero(np.diff(arr[:, 0]) > 1.5 * step)[0] + 1
    return np.insert(arr, breaks, np.nan, axis=0)


def plot_interpolation(
    points: PointsLike,
    methods: Iterable[str] | None = None,
    *,
    ax: Axes | None = None,
    resolution: int = DEFAULT_RESOLUTION,
    eval_x: float | None = None,
) -> Axes:
    """Plots the data points and the curve of each requested method.

    Args:
        points: Ordered collection of ``(x, y)`` points.
        methods: Method names to draw. Defaults to ``["lagrange"]``.
        ax: Axes to draw on. A new figure is created when omitted.
        resolution: Number of sampling intervals per curve.
        eval_x: Optional x at which each method's value is marked.

    Returns:
        The axes that were drawn on.
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(8, 5))

    names = list(methods) if methods is not None else ["lagrange"]
    x_nodes, y_nodes = sorted_nodes(points)

    for name in names:
        info = method_info(name)
        color = METHOD_COLORS.get(info.name)
        curve = generate_curve(points, info.name, resolution)
        segments = curve_segments(curve)
        if segments.shape[0] == 0:
            if x_nodes.size >= 2:
                interpkit_logger.warning("No finite samples to draw for method '%s'.", info.name)
            continue
        ax.plot(segments[:, 0], segments[:, 1], color=color, lw=2, label=info.label)

        if eval_x is not None and x_nodes.size >= 2:
            value = evaluate(points, info.name, eval_x)
            if is_finite(value):
                ax.plot(
                    [eval_x], [value], marker="D", color=color, ls="none",
                    label=f"{info.label} f({eval_x:g}) = {format_value(value)}",
                )

    if x_nodes.size:
        ax.scatter(x_nodes, y_nodes, color="black", zorder=3, label="Data points")

    ax.set_xlabel("x")
    ax.set_ylabel("y")
    ax.grid(True, alpha=0.3)
    if ax.get_legend_handles_labels()[0]:
        ax.legend()
    return ax
