"""Newton's backward-difference interpolation.

The mirror image of the forward formula, anchored at the last node::

    u = (x - x_{n-1}) / h
    p(x) = y_{n-1} + sum_{i=1}^{n-1} [u (u + 1) ... (u + i - 1) / i!] ∇^i y_{n-1}

The backward differences are read from the forward-difference table along
its trailing diagonal. As with the forward formula, equal spacing is assumed
and not checked.
"""

from __future__ import annotations

import numpy as np

from interpkit.methods.base import PolynomialInterpolator
from interpkit.tables import forward_difference_table
from interpkit.utils.types import FloatArray


class NewtonBackwardInterpolator(PolynomialInterpolator):
    """Newton's backward-difference formula for equally spaced, ascending nodes."""

    name = "newton-backward"
    label = "Newton's Backward"
    description = "Backward difference formula (equally spaced)"

    def _evaluate(self, x: FloatArray) -> FloatArray:
        if self.n < 2:
            fallback = self.y[0] if self.n else 0.0
            return np.full_like(x, fallback)

        nabla = forward_difference_table(self.y).trailing
        h = self.x[1] - self.x[0]
        u = (x - self.x[-1]) / h

        result = np.full_like(x, nabla[0])
        u_product = np.ones_like(x)
        for i in range(1, self.n):
            u_product = u_product * (u + (i - 1)) / i
            result = result + u_product * nabla[i]
        return result
