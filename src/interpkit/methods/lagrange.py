"""Lagrange interpolation.

The interpolating polynomial is written as a weighted sum of the node
values::

    p(x) = sum_i y_i * prod_{j != i} (x - x_j) / (x_i - x_j)

No ordering or spacing of the nodes is required. Two nodes with the same
x divide by zero, so the result is NaN or infinite.

Example:
    >>> from interpkit.methods.lagrange import LagrangeInterpolator
    >>> LagrangeInterpolator([0.0, 1.0, 2.0, 3.0], [0.0, 1.0, 4.0, 9.0]).evaluate(1.5)
    2.25
"""

from __future__ import annotations

import numpy as np

from interpkit.methods.base import PolynomialInterpolator
from interpkit.utils.types import FloatArray


class LagrangeInterpolator(PolynomialInterpolator):
    """Lagrange form of the interpolating polynomial. Costs O(n²) per target."""

    name = "lagrange"
    label = "Lagrange"
    description = "Polynomial interpolation through all points"

    def _evaluate(self, x: FloatArray) -> FloatArray:
        result = np.zeros_like(x)
        for i in range(self.n):
            term = np.full_like(x, self.y[i])
            for j in range(self.n):
                if i != j:
                    term = term * ((x - self.x[j]) / (self.x[i] - self.x[j]))
            result = result + term
        return result
