"""Functional interface to the interpolation methods.

Every function takes the point set explicitly and recomputes from scratch;
nothing is cached between calls and the caller's collection is never
modified. Points are sorted by x internally before any method sees them.

Methods are named ``"lagrange"``, ``"newton-forward"``, ``"newton-backward"``
or ``"newton-divided"`` (see :mod:`interpkit.registry` for aliases).

Degenerate or ill-conditioned input never raises. Too few points give
defined fallbacks (``0``, the single y-value, an empty curve, zero error
metrics) and duplicate x-values give NaN or infinity. Check results with
:func:`interpkit.utils.numerics.is_finite` before display.

Examples:
    >>> from interpkit.interpolation_api import evaluate, calculate_error
    >>> pts = [(0, 0), (1, 1), (2, 4), (3, 9)]
    >>> round(evaluate(pts, "newton-backward", 1.5), 12)
    2.25
    >>> calculate_error(pts, "lagrange").max_error < 1e-12
    True
"""

from __future__ import annotations

from typing import Iterable

from numpy.typing import ArrayLike

from interpkit.curves import CurveConfig, CurveSample
from interpkit.metrics import ErrorMetrics, error_metrics
from interpkit.points import sorted_nodes
from interpkit.registry import available_methods, canonical_name, resolve_method
from interpkit.utils.types import FloatArray, PointsLike
from interpkit.utils.validate import validate_equal_spacing

__all__ = [
    "evaluate",
    "evaluate_all",
    "generate_curve",
    "calculate_error",
]

_EQUAL_SPACING_METHODS = ("newton-forward", "newton-backward")


def evaluate(
    points: PointsLike,
    method: str,
    x: ArrayLike,
    *,
    check_spacing: bool = False,
) -> float | FloatArray:
    """Evaluates a method's interpolating polynomial at ``x``.

    Args:
        points: Ordered collection of ``(x, y)`` points. Sorted internally.
        method: Method name or alias.
        x: Target point, or an array of target points.
        check_spacing: If True, Newton's forward and backward methods first
            verify that the nodes are equally spaced. Off by default, in
            which case unequal spacing silently gives a wrong result.

    Returns:
        A float for scalar ``x``, otherwise an array shaped like ``x``.

    Raises:
        ValueError: If ``method`` is unknown, ``points`` is malformed, or
            ``check_spacing`` is set and the spacing check fails.
    """
    interpolator_cls = resolve_method(method)
    x_nodes, y_nodes = sorted_nodes(points)
    if check_spacing and canonical_name(method) in _EQUAL_SPACING_METHODS:
        validate_equal_spacing(x_nodes)
    return interpolator_cls(x_nodes, y_nodes).evaluate(x)


def evaluate_all(
    points: PointsLike,
    x: ArrayLike,
    *,
    methods: Iterable[str] | None = None,
) -> dict[str, float | FloatArray]:
    """Evaluates several methods at the same ``x``.

    Args:
        points: Ordered collection of ``(x, y)`` points.
        x: Target point or array of target points.
        methods: Method names; defaults to every available method.

    Returns:
        Mapping from canonical method name to the interpolated value.
    """
    names = available_methods() if methods is None else [canonical_name(m) for m in methods]
    x_nodes, y_nodes = sorted_nodes(points)
    return {name: resolve_method(name)(x_nodes, y_nodes).evaluate(x) for name in names}


def generate_curve(
    points: PointsLike,
    method: str,
    resolution: int | None = None,
    *,
    config: CurveConfig | None = None,
) -> CurveSample:
    """Samples a method's interpolant densely for plotting.

    The domain is the data range widened by ``config.padding`` (10% by
    default) on each side. Samples are taken at ``resolution + 1`` evenly
    spaced x-values, endpoints included. Samples that are non-finite or
    have ``|y| >= config.max_abs_y`` are dropped silently, so the curve may
    have gaps.

    Args:
        points: Ordered collection of ``(x, y)`` points. Sorted internally.
        method: Method name or alias.
        resolution: Number of sampling intervals. Overrides
            ``config.resolution`` when given. Defaults to
            :data:`~interpkit.curves.DEFAULT_RESOLUTION`.
        config: Sampling configuration.

    Returns:
        A lazy, restartable :class:`~interpkit.curves.CurveSample`. It is
        empty when fewer than two points are given.

    Raises:
        ValueError: If ``method`` is unknown or ``resolution`` is not a
            positive integer.
    """
    cfg = config or CurveConfig()
    if resolution is not None:
        cfg = CurveConfig(resolution=resolution, padding=cfg.padding, max_abs_y=cfg.max_abs_y)

    interpolator_cls = resolve_method(method)
    name = canonical_name(method)
    x_nodes, y_nodes = sorted_nodes(points)
    if x_nodes.size < 2:
        return CurveSample.empty(name, cfg)
    return CurveSample(name, interpolator_cls, x_nodes, y_nodes, cfg)


def calculate_error(points: PointsLike, method: str) -> ErrorMetrics:
    """Measures how well a method reproduces the points it was built from.

    The interpolant of the full sorted point set is evaluated at each
    point's own x and compared with its y. For exact interpolation the
    errors are pure floating-point rounding.

    Args:
        points: Ordered collection of ``(x, y)`` points.
        method: Method name or alias.

    Returns:
        :class:`~interpkit.metrics.ErrorMetrics`. All zeros when fewer than
        two points are given.
    """
    interpolator_cls = resolve_method(method)
    x_nodes, y_nodes = sorted_nodes(points)
    if x_nodes.size < 2:
        return ErrorMetrics.zero()
    predicted = interpolator_cls(x_nodes, y_nodes).evaluate(x_nodes)
    return error_metrics(y_nodes, predicted)

