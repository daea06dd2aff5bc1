"""The four interpolating-polynomial methods."""

from interpkit.methods.base import PolynomialInterpolator
from interpkit.methods.lagrange import LagrangeInterpolator
from interpkit.methods.newton_backward import NewtonBackwardInterpolator
from interpkit.methods.newton_divided import NewtonDividedInterpolator
from interpkit.methods.newton_forward import NewtonForwardInterpolator

__all__ = [
    "PolynomialInterpolator",
    "LagrangeInterpolator",
    "NewtonForwardInterpolator",
    "NewtonBackwardInterpolator",
    "NewtonDividedInterpolator",
]
