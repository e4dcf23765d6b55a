"""Exception types raised by tolerance comparisons."""

from __future__ import annotations


class ToleranceOutOfRangeError(ValueError):
    """Raised when a relative tolerance falls outside ``[0, upper]``."""

    def __init__(self, tolerance: int, *, upper: int) -> None:
        super().__init__(f"Tolerance must be in the range [0x0, {upper:#x}]; got {tolerance}")
        self.tolerance = tolerance
        self.upper = upper
