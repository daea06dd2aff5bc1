"""Validation utilities for InterpKit."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import numpy as np
from numpy.typing import ArrayLike

from interpkit.utils.types import FloatArray, PointsLike

__all__ = [
    "validate_points",
    "validate_equal_spacing",
    "validate_resolution",
]


def _coerce_point(point: Any) -> tuple[float, float]:
    """Converts one point-like object into an ``(x, y)`` float pair."""
    if isinstance(point, Mapping):
        try:
            return float(point["x"]), float(point["y"])
        except KeyError:
            raise ValueError(
                f"point mappings must have 'x' and 'y' keys; got {sorted(point)}."
            ) from None
    pair = tuple(point)
    if len(pair) != 2:
        raise ValueError(f"each point must have exactly two coordinates; got {pair!r}.")
    return float(pair[0]), float(pair[1])


def validate_points(points: PointsLike) -> tuple[FloatArray, FloatArray]:
    """Validates a point collection and splits it into ``x`` and ``y`` arrays.

    Accepted inputs:
      - a sequence of ``DataPoint`` or ``(x, y)`` pairs,
      - a sequence of ``{"x": ..., "y": ...}`` mappings,
      - a NumPy array of shape ``(N, 2)``.

    The returned arrays are fresh copies; the caller's collection is never
    modified. No minimum length is enforced here, and non-finite coordinates
    are passed through untouched.

    Args:
        points: The point collection.

    Returns:
        Tuple ``(x, y)`` of 1D float arrays of equal length.

    Raises:
        ValueError: If the input cannot be read as a list of 2D points.
    """
    if isinstance(points, np.ndarray):
        arr = np.array(points, dtype=float)
    else:
        arr = np.asarray([_coerce_point(p) for p in points], dtype=float)

    if arr.size == 0:
        return np.empty(0, dtype=float), np.empty(0, dtype=float)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"points must have shape (N, 2); got {arr.shape}.")

    return arr[:, 0].copy(), arr[:, 1].copy()


def validate_equal_spacing(x: ArrayLike, *, rtol: float = 1e-9) -> float:
    """Checks that nodes are equally spaced and returns the common step.

    Newton's forward and backward formulas assume ``x_{k+1} - x_k = h`` for
    every ``k``. They do not check this themselves; this helper is the
    opt-in strict mode.

    Args:
        x: 1D node array, sorted ascending.
        rtol: Allowed deviation of any step from ``h``, relative to ``|h|``.

    Returns:
        The step ``h``. Returns ``0.0`` when fewer than two nodes are given.

    Raises:
        ValueError: If any step differs from ``h`` by more than ``rtol * |h|``
            or if ``h`` is zero.
    """
    x_arr = np.asarray(x, dtype=float)
    if x_arr.size < 2:
        return 0.0

    steps = np.diff(x_arr)
    h = float(steps[0])
    if h == 0.0:
        raise ValueError("nodes must be distinct; found a zero step between x[0] and x[1].")

    max_dev = float(np.max(np.abs(steps - h)))
    if max_dev > rtol * abs(h):
        raise ValueError(
            f"nodes must be equally spaced within rtol={rtol:.1e}; "
            f"h={h:.6g}, max deviation={max_dev:.3e}."
        )
    return h


def validate_resolution(resolution: int) -> int:
    """Validates the number of curve intervals.

    Raises:
        ValueError: If ``resolution`` is not a positive integer.
    """
    message = f"resolution must be a positive integer; got {resolution!r}."
    if isinstance(resolution, bool):
        raise ValueError(message)
    try:
        as_int = int(resolution)
    except (TypeError, ValueError, OverflowError):
        raise ValueError(message) from None
    if as_int != resolution or as_int < 1:
        raise ValueError(message)
    return as_int
