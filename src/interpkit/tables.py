"""Difference tables used by Newton's interpolation formulas.

A difference table for ``n`` samples is a triangular array. Row ``0`` holds
the y-values and row ``i`` holds the differences of row ``i - 1``, so row
``i`` has exactly ``n - i`` entries::

    y0     y1     y2     y3        row 0
    Δy0    Δy1    Δy2              row 1
    Δ²y0   Δ²y1                    row 2
    Δ³y0                           row 3

Forward and backward differences share the same table: Newton's forward
formula reads it along column ``0`` (:attr:`DifferenceTable.leading`) and
the backward formula along the trailing diagonal
(:attr:`DifferenceTable.trailing`), since ``∇^i y_{n-1} = Δ^i y_{n-1-i}``.

Divided differences replace the plain difference by
``(row[j + 1] - row[j]) / (x[j + i] - x[j])``.

Tables are rebuilt for every evaluation and never cached.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from interpkit.utils.types import FloatArray

__all__ = [
    "DifferenceTable",
    "forward_difference_table",
    "divided_difference_table",
]


class DifferenceTable:
    """Ragged triangular table of differences.

    Attributes:
        rows: List of 1D arrays; ``rows[i]`` has ``n - i`` entries.
    """

    def __init__(self, rows: list[FloatArray]) -> None:
        self.rows = rows

    @property
    def size(self) -> int:
        """Number of samples the table was built from."""
        return len(self.rows[0]) if self.rows else 0

    @property
    def order(self) -> int:
        """Highest difference order held by the table."""
        return len(self.rows) - 1

    def __len__(self) -> int:
        return len(self.rows)

    def __getitem__(self, order: int) -> FloatArray:
        return self.rows[order]

    @property
    def leading(self) -> FloatArray:
        """First entry of every row: ``Δ^i y_0`` (or ``f[x_0..x_i]``)."""
        return np.array([row[0] for row in self.rows], dtype=float)

    @property
    def trailing(self) -> FloatArray:
        """Last entry of every row: ``row_i[n - 1 - i]``, i.e. ``∇^i y_{n-1}``."""
        return np.array([row[-1] for row in self.rows], dtype=float)


def forward_difference_table(y: ArrayLike) -> DifferenceTable:
    """Builds the forward-difference table of ``y``.

    Row ``i``, column ``j`` is ``row_{i-1}[j + 1] - row_{i-1}[j]``.

    Args:
        y: 1D sequence of sample values.

    Returns:
        The difference table. An empty input yields a table with no rows.
    """
    row = np.array(y, dtype=float)
    if row.size == 0:
        return DifferenceTable([])

    rows = [row]
    with np.errstate(invalid="ignore", over="ignore"):
        for _ in range(1, row.size):
            row = row[1:] - row[:-1]
            rows.append(row)
    return DifferenceTable(rows)


def divided_difference_table(x: ArrayLike, y: ArrayLike) -> DifferenceTable:
    """Builds the divided-difference table of ``y`` over the nodes ``x``.

    Row ``i``, column ``j`` is
    ``(row_{i-1}[j + 1] - row_{i-1}[j]) / (x[j + i] - x[j])``. Duplicate
    nodes divide by zero and yield non-finite entries.

    Args:
        x: 1D node array.
        y: 1D sample values, same length as ``x``.

    Returns:
        The divided-difference table.
    """
    x_arr = np.asarray(x, dtype=float)
    row = np.array(y, dtype=float)
    if row.size == 0:
        return DifferenceTable([])

    rows = [row]
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        for i in range(1, row.size):
            row = (row[1:] - row[:-1]) / (x_arr[i:] - x_arr[:-i])
            rows.append(row)
    return DifferenceTable(rows)
