"""Shared plumbing for the interpolation methods."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from interpkit.utils.numerics import as_float_output
from interpkit.utils.types import FloatArray


class PolynomialInterpolator:
    """Base class for the interpolating-polynomial methods.

    Subclasses implement :meth:`_evaluate` on a float array of target
    points. This class converts the targets, silences floating-point
    warnings so that ill-conditioned nodes surface as NaN or infinity, and
    returns a Python float for scalar targets.

    The nodes are used in the order given; sorting is the caller's job.

    Attributes:
        x: Node x-values.
        y: Node y-values.
        name: Canonical method name.
        label: Human-readable method name.
        description: One-line summary of the method.
    """

    name: str = ""
    label: str = ""
    description: str = ""

    def __init__(self, x: ArrayLike, y: ArrayLike) -> None:
        """Initializes the interpolator with private copies of the nodes.

        Args:
            x: 1D node x-values.
            y: 1D node y-values of the same length.

        Raises:
            ValueError: If ``x`` and ``y`` differ in length or are not 1D.
        """
        self.x = np.array(x, dtype=float)
        self.y = np.array(y, dtype=float)
        if self.x.ndim != 1 or self.x.shape != self.y.shape:
            raise ValueError(
                f"x and y must be 1D with equal length; got {self.x.shape} and {self.y.shape}."
            )

    @property
    def n(self) -> int:
        """Number of nodes."""
        return self.x.size

    def evaluate(self, x: ArrayLike) -> float | FloatArray:
        """Evaluates the interpolating polynomial at ``x``.

        Args:
            x: A scalar or an array of target points.

        Returns:
            A float for scalar ``x``, otherwise an array shaped like ``x``.
            Ill-conditioned nodes give NaN or infinity rather than raising.
        """
        x_arr = np.asarray(x, dtype=float)
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            result = self._evaluate(x_arr)
        return as_float_output(np.broadcast_to(result, x_arr.shape), x_arr.ndim == 0)

    def __call__(self, x: ArrayLike) -> float | FloatArray:
        return self.evaluate(x)

    def _evaluate(self, x: FloatArray) -> FloatArray:
        raise NotImplementedError
