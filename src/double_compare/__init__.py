"""Tolerance-aware comparison of IEEE 754 double-precision values."""

from __future__ import annotations

from double_compare.bits import double_to_int64_bits, int64_bits_to_double, to_ordered_int
from double_compare.comparer import (
    DEFAULT_RELATIVE_TOLERANCE,
    MAX_RELATIVE_TOLERANCE,
    RelativeComparison,
    approx_equal,
    approx_equal_absolute,
    compare,
    compare_relative,
    is_greater_than,
    is_less_than,
    ulp_distance,
)
from double_compare.errors import ToleranceOutOfRangeError

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_RELATIVE_TOLERANCE",
    "MAX_RELATIVE_TOLERANCE",
    "RelativeComparison",
    "ToleranceOutOfRangeError",
    "__version__",
    "approx_equal",
    "approx_equal_absolute",
    "compare",
    "compare_relative",
    "double_to_int64_bits",
    "int64_bits_to_double",
    "is_greater_than",
    "is_less_than",
    "to_ordered_int",
    "ulp_distance",
]
