"""Error metrics of an interpolant at its own nodes."""

from __future__ import annotations

from typing import NamedTuple

import numpy as np
from numpy.typing import ArrayLike

__all__ = ["ErrorMetrics", "error_metrics"]


class ErrorMetrics(NamedTuple):
    """Maximum, mean and root-mean-square absolute error."""

    max_error: float
    avg_error: float
    rms_error: float

    @classmethod
    def zero(cls) -> ErrorMetrics:
        return cls(0.0, 0.0, 0.0)


def error_metrics(actual: ArrayLike, predicted: ArrayLike) -> ErrorMetrics:
    """Aggregates the absolute errors ``|actual - predicted|``.

    Non-finite predictions propagate into every metric.

    Args:
        actual: Observed values.
        predicted: Interpolated values at the same x.

    Returns:
        The metrics, or all zeros for empty input.
    """
    a = np.asarray(actual, dtype=float)
    p = np.asarray(predicted, dtype=float)
    if a.size == 0:
        return ErrorMetrics.zero()

    with np.errstate(invalid="ignore", over="ignore"):
        errors = np.abs(a - p)
        return ErrorMetrics(
            max_error=float(np.max(errors)),
            avg_error=float(np.mean(errors)),
            rms_error=float(np.sqrt(np.mean(errors**2))),
        )
