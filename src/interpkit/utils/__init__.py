"""Utility functions for InterpKit package."""

from .numerics import format_value, is_finite
from .validate import validate_equal_spacing, validate_points

__all__ = [
    "format_value",
    "is_finite",
    "validate_equal_spacing",
    "validate_points",
]
