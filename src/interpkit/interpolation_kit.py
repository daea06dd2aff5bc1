"""Provides the InterpolationKit API.

This class is a lightweight front end over InterpKit's interpolation
methods. You provide the data points once, then evaluate, sample or score
any method by name (e.g., ``"lagrange"`` or ``"newton-divided"``).

Examples:
    Basic usage:

        >>> from interpkit.interpolation_kit import InterpolationKit
        >>> kit = InterpolationKit([(0, 0), (1, 1), (2, 4), (3, 9)])
        >>> round(kit.evaluate(1.5), 12)
        2.25
        >>> sorted(kit.evaluate_all(1.5))
        ['lagrange', 'newton-backward', 'newton-divided', 'newton-forward']

Notes:
    - The kit keeps its own copy of the points. Changing the caller's list
      afterwards has no effect; build a new kit instead.
    - Method names are case/spacing/punctuation insensitive. For available
      canonical method names at runtime, call
      :func:`interpkit.registry.available_methods`.
"""

from __future__ import annotations


from numpy.typing import ArrayLike

from interpkit.curves import CurveConfig, CurveSample
from interpkit.interpolation_api import (
    calculate_error,
    evaluate,
    evaluate_all,
    generate_curve,
)
from interpkit.metrics import ErrorMetrics
from interpkit.points import DataPoint, as_data_points
from interpkit.registry import available_methods
from interpkit.utils.types import FloatArray, PointsLike

__all__ = ["DEFAULT_METHOD", "InterpolationKit"]

DEFAULT_METHOD = "lagrange"


class InterpolationKit:
    """Unified interface to the four interpolation methods.

    Attributes:
        points: The data points, as an immutable tuple of DataPoint in the
            order given.
        default_method: Method used when none is specified.
        curve_config: Sampling configuration used by :meth:`curve`.
    """

    def __init__(
        self,
        points: PointsLike,
        *,
        default_method: str = DEFAULT_METHOD,
        curve_config: CurveConfig | None = None,
    ):
        """Initializes the kit with a point set.

        Args:
            points: Ordered collection of ``(x, y)`` points.
            default_method: Method used when none is specified.
            curve_config: Sampling configuration for :meth:`curve`.
        """
        self.points: tuple[DataPoint, ...] = tuple(as_data_points(points))
        self.default_method = default_method
        self.curve_config = curve_config or CurveConfig()

    def __len__(self) -> int:
        return len(self.points)

    def evaluate(
        self,
        x: ArrayLike,
        *,
        method: str | None = None,
        check_spacing: bool = False,
    ) -> float | FloatArray:
        """Evaluates the chosen method at ``x``.

        See :func:`interpkit.interpolation_api.evaluate`.
        """
        chosen = method or self.default_method
        return evaluate(self.points, chosen, x, check_spacing=check_spacing)

    def evaluate_all(self, x: ArrayLike) -> dict[str, float | FloatArray]:
        """Evaluates every available method at ``x``."""
        return evaluate_all(self.points, x)

    def curve(self, method: str | None = None, resolution: int | None = None) -> CurveSample:
        """Samples the chosen method for plotting.

        See :func:`interpkit.interpolation_api.generate_curve`.
        """
        chosen = method or self.default_method
        return generate_curve(self.points, chosen, resolution, config=self.curve_config)

    def error(self, method: str | None = None) -> ErrorMetrics:
        """Returns the error metrics of the chosen method at the data points."""
        return calculate_error(self.points, method or self.default_method)

    def errors(self) -> dict[str, ErrorMetrics]:
        """Returns the error metrics of every available method."""
        return {name: calculate_error(self.points, name) for name in available_methods()}
