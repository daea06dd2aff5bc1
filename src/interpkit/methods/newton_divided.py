"""Newton's divided-difference interpolation.

Works for arbitrary, distinct nodes::

    p(x) = f[x_0] + sum_{i=1}^{n-1} f[x_0, ..., x_i] (x - x_0) ... (x - x_{i-1})

The coefficients are the leading entries of the divided-difference table.
This form is less prone to cancellation than the Lagrange sum, but no extra
stabilization is applied. Duplicate nodes give non-finite results.
"""

from __future__ import annotations

import numpy as np

from interpkit.methods.base import PolynomialInterpolator
from interpkit.tables import divided_difference_table
from interpkit.utils.types import FloatArray


class NewtonDividedInterpolator(PolynomialInterpolator):
    """Newton form with divided differences, for any node spacing."""

    name = "newton-divided"
    label = "Newton's Divided"
    description = "Divided difference for any spacing"

    def _evaluate(self, x: FloatArray) -> FloatArray:
        if self.n < 1:
            return np.zeros_like(x)

        coeffs = divided_difference_table(self.x, self.y).leading

        result = np.full_like(x, coeffs[0])
        product = np.ones_like(x)
        for i in range(1, self.n):
            product = product * (x - self.x[i - 1])
            result = result + product * coeffs[i]
        return result
