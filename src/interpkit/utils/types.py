"""Shared typing aliases for InterpKit."""

from __future__ import annotations

from typing import Mapping, Sequence, TypeAlias

import numpy as np
from numpy.typing import NDArray

FloatArray: TypeAlias = NDArray[np.float64]

PointLike: TypeAlias = Sequence[float] | Mapping[str, float]
PointsLike: TypeAlias = Sequence[PointLike] | NDArray[np.floating]
