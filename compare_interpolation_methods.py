"""Quick comparison of the interpolation methods in InterpKit.

Run with:
    python compare_interpolation_methods.py
"""

from __future__ import annotations

from typing import Any

import numpy as np

from interpkit.interpolation_kit import InterpolationKit
from interpkit.points import load_sample_points
from interpkit.registry import available_methods
from interpkit.utils.numerics import format_value


def rel_err(a: float, b: float) -> float:
    """Relative error with a safe denominator."""
    d = max(1.0, abs(a), abs(b))
    return abs(a - b) / d


def main() -> None:
    """Main comparison routine."""
    # name -> nodes, true function, evaluation points
    cases: list[dict[str, Any]] = [
        {
            "name": "x^2 on 4 equally spaced nodes",
            "x": np.arange(4.0),
            "f": lambda x: x ** 2,
            "x_eval": [0.5, 1.5, 2.9],
        },
        {
            "name": "sin on 7 equally spaced nodes",
            "x": np.linspace(0.0, np.pi, 7),
            "f": np.sin,
            "x_eval": [0.1, 1.0, 3.0],
        },
        {
            # forward/backward assume equal spacing; expect them to be off here
            "name": "exp on irregular nodes",
            "x": np.array([0.0, 0.3, 1.1, 1.5, 2.6]),
            "f": np.exp,
            "x_eval": [0.2, 1.3, 2.0],
        },
        {
            "name": "Runge 1 / (1 + 25x^2), 11 nodes",
            "x": np.linspace(-1.0, 1.0, 11),
            "f": lambda x: 1.0 / (1.0 + 25.0 * x ** 2),
            "x_eval": [0.0, 0.5, 0.95],
        },
        {
            "name": "duplicate x",
            "x": np.array([1.0, 1.0, 2.0]),
            "f": lambda x: x,
            "x_eval": [1.5],
        },
    ]

    line = "-" * 80

    for case in cases:
        x = case["x"]
        f = case["f"]
        kit = InterpolationKit(np.column_stack([x, f(x)]))

        print(line)
        print(f"Data: {case['name']!r}")
        print(line)

        for x0 in case["x_eval"]:
            truth = float(f(x0))
            print(f"\nx = {x0:.6g}, exact = {truth:.12g}")
            print("  {:>18s}  {:>18s}  {:>18s}".format("method", "estimate", "rel_err"))
            print("  " + "-" * 60)
            for name, est in kit.evaluate_all(x0).items():
                err = rel_err(est, truth) if np.isfinite(est) else float("nan")
                print(f"  {name:>18s}  {format_value(est, 10):>18s}  {format_value(err, 10):>18s}")

        print("\n  max |error| at nodes:")
        for name, metrics in kit.errors().items():
            print(f"  {name:>18s}  {format_value(metrics.max_error, 3)}")
        print()

    sample = InterpolationKit(load_sample_points())
    print(line)
    print("Sample data curve sizes (150 intervals):")
    for name in available_methods():
        print(f"  {name:>18s}  {sample.curve(name).count()} samples")


if __name__ == "__main__":
    main()
