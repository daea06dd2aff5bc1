"""Provides all interpkit methods."""

from importlib.metadata import PackageNotFoundError, version

from interpkit.curves import CurveConfig, CurveSample
from interpkit.interpolation_api import (
    calculate_error,
    evaluate,
    evaluate_all,
    generate_curve,
)
from interpkit.interpolation_kit import InterpolationKit
from interpkit.metrics import ErrorMetrics
from interpkit.points import DataPoint
from interpkit.registry import available_methods, register_method

try:
    __version__ = version("interpkit")
except PackageNotFoundError:
    pass

__all__ = [
    "CurveConfig",
    "CurveSample",
    "DataPoint",
    "ErrorMetrics",
    "InterpolationKit",
    "available_methods",
    "calculate_error",
    "evaluate",
    "evaluate_all",
    "generate_curve",
    "register_method",
]
