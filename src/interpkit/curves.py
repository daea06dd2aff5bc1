"""Dense curve samples of an interpolating polynomial, for plotting.

A curve covers the data range plus a padding margin on each side, sampled
at evenly spaced x-values. Samples whose value is non-finite or too large
in magnitude are dropped, so a curve can have gaps; plotting code should
draw those gaps as discontinuities.
"""

from __future__ import annotations

from typing import Iterator, Type

import numpy as np

from interpkit.logger import interpkit_logger
from interpkit.methods.base import PolynomialInterpolator
from interpkit.points import DataPoint
from interpkit.utils.numerics import within_bound
from interpkit.utils.types import FloatArray
from interpkit.utils.validate import validate_resolution

__all__ = [
    "DEFAULT_RESOLUTION",
    "CurveConfig",
    "CurveSample",
]

DEFAULT_RESOLUTION = 150


class CurveConfig:
    """Configuration for dense curve sampling."""

    def __init__(
        self,
        resolution: int = DEFAULT_RESOLUTION,
        padding: float = 0.1,
        max_abs_y: float = 1e6,
    ):
        """Initialize configuration.

        Args:
            resolution:
                Number of intervals between the first and the last sample.
                The curve is evaluated at ``resolution + 1`` x-values,
                endpoints included.

            padding:
                Margin added on each side of the data range, as a fraction
                of that range. The sampled domain is
                ``[min(x) - padding * range, max(x) + padding * range]``.

            max_abs_y:
                Samples with ``|y| >= max_abs_y`` are dropped. This keeps
                the divergent tails of high-degree polynomials (Runge's
                phenomenon) and division-by-zero spikes off the chart.
        """
        self.resolution = validate_resolution(resolution)
        self.padding = float(padding)
        self.max_abs_y = float(max_abs_y)

    def __repr__(self) -> str:
        return (
            f"CurveConfig(resolution={self.resolution}, padding={self.padding}, "
            f"max_abs_y={self.max_abs_y})"
        )


class CurveSample:
    """A lazily evaluated, restartable sequence of curve points.

    Nothing is computed at construction. Every iteration evaluates the
    interpolant afresh over the sample grid and yields the points that pass
    the magnitude filter, in ascending x order.

    Attributes:
        method: Canonical name of the interpolation method.
        domain: ``(start, end)`` of the sampled x-range, or ``None`` for an
            empty curve.
        config: Sampling configuration.
    """

    def __init__(
        self,
        method: str,
        interpolator_cls: Type[PolynomialInterpolator] | None,
        x_nodes: FloatArray,
        y_nodes: FloatArray,
        config: CurveConfig,
    ) -> None:
        self.method = method
        self.config = config
        self._interpolator_cls = interpolator_cls
        self._x_nodes = np.array(x_nodes, dtype=float)
        self._y_nodes = np.array(y_nodes, dtype=float)

        if interpolator_cls is None or self._x_nodes.size < 2:
            self.domain: tuple[float, float] | None = None
        else:
            lo = float(self._x_nodes.min())
            hi = float(self._x_nodes.max())
            margin = (hi - lo) * config.padding
            self.domain = (lo - margin, hi + margin)

    @classmethod
    def empty(cls, method: str, config: CurveConfig) -> CurveSample:
        """Returns a curve with no samples."""
        return cls(method, None, np.empty(0), np.empty(0), config)

    @property
    def resolution(self) -> int:
        return self.config.resolution

    def sample_x(self) -> FloatArray:
        """Returns the x-values the curve is evaluated at, before filtering."""
        if self.domain is None:
            return np.empty(0, dtype=float)
        start, end = self.domain
        with np.errstate(invalid="ignore", over="ignore"):
            return np.linspace(start, end, self.resolution + 1)

    def _evaluate(self) -> tuple[FloatArray, FloatArray]:
        xs = self.sample_x()
        if xs.size == 0:
            return xs, xs
        interpolator = self._interpolator_cls(self._x_nodes, self._y_nodes)
        ys = np.asarray(interpolator.evaluate(xs), dtype=float)
        keep = within_bound(ys, self.config.max_abs_y) & np.isfinite(xs)
        dropped = int(xs.size - np.count_nonzero(keep))
        if dropped:
            interpkit_logger.debug(
                "%s curve: dropped %d of %d samples (non-finite or |y| >= %g).",
                self.method, dropped, xs.size, self.config.max_abs_y,
            )
        return xs[keep], ys[keep]

    def __iter__(self) -> Iterator[DataPoint]:
        xs, ys = self._evaluate()
        for x, y in zip(xs, ys):
            yield DataPoint(float(x), float(y))

    def count(self) -> int:
        """Returns the number of kept samples. Evaluates the curve once."""
        return int(self._evaluate()[0].size)

    def to_array(self) -> FloatArray:
        """Returns the kept samples as an array of shape ``(M, 2)``."""
        xs, ys = self._evaluate()
        return np.column_stack([xs, ys]) if xs.size else np.empty((0, 2), dtype=float)

    def __repr__(self) -> str:
        return f"CurveSample(method={self.method!r}, domain={self.domain}, resolution={self.resolution})"
