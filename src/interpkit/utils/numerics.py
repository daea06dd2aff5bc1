"""Numerical utilities."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

__all__ = [
    "is_finite",
    "format_value",
    "within_bound",
    "as_float_output",
]


def is_finite(value: float) -> bool:
    """Returns True if ``value`` is neither NaN nor infinite."""
    return bool(np.isfinite(value))


def format_value(value: float, digits: int = 6) -> str:
    """Formats an interpolated value for display.

    Non-finite values are what the interpolation methods return for
    ill-conditioned input (for example duplicate x-values), so they are
    shown as ``"undefined"`` instead of ``nan`` or ``inf``.

    Args:
        value: The value to format.
        digits: Number of digits after the decimal point.

    Returns:
        The formatted string.
    """
    if not is_finite(value):
        return "undefined"
    return f"{float(value):.{digits}f}"


def within_bound(y: ArrayLike, max_abs: float) -> NDArray[np.bool_]:
    """Returns a mask of entries that are finite and strictly below ``max_abs`` in magnitude."""
    y_arr = np.asarray(y, dtype=float)
    with np.errstate(invalid="ignore"):
        return np.isfinite(y_arr) & (np.abs(y_arr) < max_abs)


def as_float_output(result: NDArray[np.floating], was_scalar: bool) -> float | NDArray[np.float64]:
    """Returns a Python float for scalar inputs and a float array otherwise."""
    if was_scalar:
        return float(result)
    return np.asarray(result, dtype=float)

