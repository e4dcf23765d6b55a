"""Bit-level reinterpretation between doubles and signed 64-bit integers."""

from __future__ import annotations

import struct

MIN_INT64 = -(2**63)
MAX_INT64 = 2**63 - 1
_MAX_UINT64 = 2**64 - 1

_DOUBLE = struct.Struct("<d")
_INT64 = struct.Struct("<q")
_UINT64 = struct.Struct("<Q")


def _coerce_double(value: float) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"expected a float operand, got {type(value).__name__}")
    return float(value)


def double_to_int64_bits(value: float) -> int:
    """Return the raw bit pattern of ``value`` read as a signed 64-bit integer."""

    return _INT64.unpack(_DOUBLE.pack(_coerce_double(value)))[0]


def int64_bits_to_double(bits: int) -> float:
    """Return the double whose bit pattern is ``bits``.

    Both signed (``[-2**63, 2**63 - 1]``) and unsigned (``[0, 2**64 - 1]``)
    readings of a 64-bit pattern are accepted.
    """

    if isinstance(bits, bool) or not isinstance(bits, int):
        raise TypeError(f"expected integer bits, got {type(bits).__name__}")
    if MIN_INT64 <= bits < 0:
        return _DOUBLE.unpack(_INT64.pack(bits))[0]
    if 0 <= bits <= _MAX_UINT64:
        return _DOUBLE.unpack(_UINT64.pack(bits))[0]
    raise ValueError(f"bits must fit in 64 bits, got {bits:#x}")


def to_ordered_int(bits: int) -> int:
    """Map sign-magnitude bits onto integers ordered like the doubles they encode.

    Negative patterns become ``MIN_INT64 - bits``, so ``-0.0`` lands on ``0``
    next to ``+0.0`` and more negative doubles map to smaller integers.
    """

    if bits < 0:
        return MIN_INT64 - bits
    return bits
