"""Newton's forward-difference interpolation.

For equally spaced nodes ``x_k = x_0 + k h`` the interpolating polynomial
can be written with forward differences anchored at the first node::

    u = (x - x_0) / h
    p(x) = y_0 + sum_{i=1}^{n-1} [u (u - 1) ... (u - i + 1) / i!] Δ^i y_0

The step ``h`` is taken from the first two nodes. Equal spacing is assumed
but not checked; unequally spaced nodes give a finite but wrong result.

Example:
    >>> from interpkit.methods.newton_forward import NewtonForwardInterpolator
    >>> NewtonForwardInterpolator([0.0, 1.0], [0.0, 1.0]).evaluate(0.5)
    0.5
"""

from __future__ import annotations

import numpy as np

from interpkit.methods.base import PolynomialInterpolator
from interpkit.tables import forward_difference_table
from interpkit.utils.types import FloatArray


class NewtonForwardInterpolator(PolynomialInterpolator):
    """Newton's forward-difference formula for equally spaced, ascending nodes."""

    name = "newton-forward"
    label = "Newton's Forward"
    description = "Forward difference formula (equally spaced)"

    def _evaluate(self, x: FloatArray) -> FloatArray:
        if self.n < 2:
            fallback = self.y[0] if self.n else 0.0
            return np.full_like(x, fallback)

        table = forward_difference_table(self.y)
        h = self.x[1] - self.x[0]
        u = (x - self.x[0]) / h

        result = np.full_like(x, table[0][0])
        u_product = np.ones_like(x)
        for i in range(1, self.n):
            u_product = u_product * (u - (i - 1)) / i
            result = result + u_product * table[i][0]
        return result
