"""Data points and point-set helpers.

A point set is any ordered collection of ``(x, y)`` pairs. This module
provides the :class:`DataPoint` value type, the conversion of a point set
into sorted node arrays used by the interpolation methods, and plain JSON
import/export in the ``[{"x": ..., "y": ...}, ...]`` layout.

Example:
    >>> from interpkit.points import DataPoint, sorted_nodes
    >>> pts = [DataPoint(2.0, 4.0), DataPoint(0.0, 0.0), DataPoint(1.0, 1.0)]
    >>> x, y = sorted_nodes(pts)
    >>> x.tolist(), y.tolist()
    ([0.0, 1.0, 2.0], [0.0, 1.0, 4.0])
"""

from __future__ import annotations

import json
import os
from importlib import resources
from typing import NamedTuple

import numpy as np
from numpy.typing import ArrayLike

from interpkit.utils.types import FloatArray, PointsLike
from interpkit.utils.validate import validate_points

__all__ = [
    "DataPoint",
    "as_data_points",
    "sorted_nodes",
    "points_from_table",
    "read_points_json",
    "write_points_json",
    "load_sample_points",
]

SAMPLE_DATA_FILE = "sample_points.json"


class DataPoint(NamedTuple):
    """An immutable ``(x, y)`` sample."""

    x: float
    y: float

    def to_dict(self) -> dict[str, float]:
        """Returns the point as a ``{"x": ..., "y": ...}`` mapping."""
        return {"x": self.x, "y": self.y}


def as_data_points(points: PointsLike) -> list[DataPoint]:
    """Converts any accepted point collection into a new list of DataPoint."""
    x, y = validate_points(points)
    return [DataPoint(float(xi), float(yi)) for xi, yi in zip(x, y)]


def sorted_nodes(points: PointsLike) -> tuple[FloatArray, FloatArray]:
    """Returns ``(x, y)`` node arrays sorted ascending by x.

    The sort is stable, so points sharing an x-value keep their relative
    order. The arrays are private copies.

    Args:
        points: Any point collection accepted by
            :func:`interpkit.utils.validate.validate_points`.

    Returns:
        Tuple of 1D float arrays ``(x, y)``.
    """
    x, y = validate_points(points)
    order = np.argsort(x, kind="stable")
    return x[order], y[order]


def points_from_table(table: ArrayLike) -> list[DataPoint]:
    """Builds a point list from a simple 2D ``(x, y)`` table.

    Supported layouts:
        * ``(N, 2)``: column 0 = x, column 1 = y.
        * ``(2, N)``: row 0 = x, row 1 = y.

    A ``(2, 2)`` table is read column-wise, like every other ``(N, 2)`` table.

    Args:
        table: 2D array, for example loaded with ``numpy.loadtxt``.

    Returns:
        List of DataPoint in table order.

    Raises:
        ValueError: If the input does not match any of the supported layouts.
    """
    arr = np.asarray(table, dtype=float)
    if arr.ndim != 2:
        raise ValueError("table must be a 2D array.")

    match arr.shape:
        case (_, 2):
            x, y = arr[:, 0], arr[:, 1]
        case (2, _):
            x, y = arr[0, :], arr[1, :]
        case _:
            raise ValueError(
                f"Unexpected table shape {arr.shape}; expected (N, 2) or (2, N)."
            )

    return [DataPoint(float(xi), float(yi)) for xi, yi in zip(x, y)]


def read_points_json(path: str | os.PathLike) -> list[DataPoint]:
    """Reads a point set exported with :func:`write_points_json`.

    Args:
        path: Path to a JSON file holding a list of ``{"x": ..., "y": ...}``
            objects.

    Returns:
        List of DataPoint in file order.

    Raises:
        ValueError: If the file does not hold a list of point objects.
    """
    with open(path, encoding="utf-8") as fh:
        payload = json.load(fh)

    if not isinstance(payload, list):
        raise ValueError(
            f"expected a JSON list of points in {os.fspath(path)!r}; "
            f"got {type(payload).__name__}."
        )
    return as_data_points(payload)


def write_points_json(points: PointsLike, path: str | os.PathLike) -> None:
    """Writes a point set as a JSON list of ``{"x": ..., "y": ...}`` objects."""
    payload = [p.to_dict() for p in as_data_points(points)]
    with open(path, "w", encoding="utf-8") as fh:
        json.dump(payload, fh, indent=2)
        fh.write("\n")


def load_sample_points() -> list[DataPoint]:
    """Loads the bundled sample data set.

    The sample holds a handful of equally spaced points, so every method,
    including Newton's forward and backward formulas, applies to it.
    """
    source = resources.files("interpkit.data").joinpath(SAMPLE_DATA_FILE)
    with source.open(encoding="utf-8") as fh:
        return as_data_points(json.load(fh))
