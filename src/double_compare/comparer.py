"""ULP-distance and absolute-tolerance comparison of doubles.

The relative comparison reads both operands as signed 64-bit integers, maps
them onto a single ordered integer line and measures how many representable
doubles separate them. Two operands are equal when that count is within the
tolerance.
"""

from __future__ import annotations

import logging
from typing import NamedTuple

from double_compare.bits import double_to_int64_bits, to_ordered_int
from double_compare.errors import ToleranceOutOfRangeError

LOGGER = logging.getLogger(__name__)

DEFAULT_RELATIVE_TOLERANCE = 100
# Width of the significand; a larger tolerance would let the default quiet NaN
# match finite values.
MAX_RELATIVE_TOLERANCE = 2**53 - 1


class RelativeComparison(NamedTuple):
    """Outcome of a ULP comparison: the tri-state result and the signed distance."""

    result: int
    difference: int


def _validate_tolerance(tolerance: int) -> int:
    if isinstance(tolerance, bool) or not isinstance(tolerance, int):
        raise TypeError(f"tolerance must be an int, got {type(tolerance).__name__}")
    if tolerance < 0 or tolerance > MAX_RELATIVE_TOLERANCE:
        LOGGER.debug("tolerance_rejected tolerance=%s", tolerance)
        raise ToleranceOutOfRangeError(tolerance, upper=MAX_RELATIVE_TOLERANCE)
    return tolerance


def compare_relative(left: float, right: float, tolerance: int) -> RelativeComparison:
    """Compare two doubles allowing ``tolerance`` representable values of slack.

    Returns ``RelativeComparison(result, difference)`` where ``result`` is
    ``+1`` when ``left`` exceeds ``right`` by more than ``tolerance`` ULPs,
    ``-1`` when it falls short by more than that, and ``0`` otherwise.
    ``difference`` is the signed number of ULPs from ``right`` to ``left``.

    Raises:
        ToleranceOutOfRangeError: ``tolerance`` is negative or ``>= 2**53``.
    """

    tolerance = _validate_tolerance(tolerance)

    xi = to_ordered_int(double_to_int64_bits(left))
    yi = to_ordered_int(double_to_int64_bits(right))

    difference = xi - yi
    if xi > yi + tolerance:
        return RelativeComparison(1, difference)
    if xi < yi - tolerance:
        return RelativeComparison(-1, difference)
    return RelativeComparison(0, difference)


def compare(left: float, right: float, tolerance: int = DEFAULT_RELATIVE_TOLERANCE) -> int:
    """Return only the tri-state result of :func:`compare_relative`."""

    return compare_relative(left, right, tolerance).result


def ulp_distance(left: float, right: float) -> int:
    """Return the unsigned number of representable doubles between the operands."""

    return abs(compare_relative(left, right, 0).difference)


def approx_equal_absolute(left: float, right: float, tolerance: float) -> bool:
    """Return whether ``left`` and ``right`` differ by strictly less than ``tolerance``."""

    return abs(left - right) < tolerance


def approx_equal(
    left: float, right: float, tolerance: int = DEFAULT_RELATIVE_TOLERANCE
) -> bool:
    return compare_relative(left, right, tolerance).result == 0


def is_greater_than(left: float, right: float) -> bool:
    """Return whether ``left`` exceeds ``right`` beyond the default tolerance."""

    return compare_relative(left, right, DEFAULT_RELATIVE_TOLERANCE).result == 1


def is_less_than(left: float, right: float) -> bool:
    """Return whether ``left`` falls below ``right`` beyond the default tolerance."""

    return compare_relative(left, right, DEFAULT_RELATIVE_TOLERANCE).result == -1
