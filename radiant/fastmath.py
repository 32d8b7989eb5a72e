"""Fast approximate square roots and angle conversions."""

from __future__ import annotations

import math
import struct

PI_OVER_180 = math.pi / 180.0

_MAGIC = 0x5F3759DF
_MASK32 = 0xFFFFFFFF


def _float_to_bits(value: float) -> int:
    return struct.unpack("<I", struct.pack("<f", value))[0]


def _bits_to_float(bits: int) -> float:
    return struct.unpack("<f", struct.pack("<I", bits & _MASK32))[0]


def _signed32(bits: int) -> int:
    return bits - (1 << 32) if bits & 0x80000000 else bits


def fast_inverse_square_root(value: float) -> float:
    """Approximate 1/sqrt(value) with one Newton step on a bit-level guess."""
    half = value * 0.5
    bits = _signed32(_float_to_bits(value))
    guess = _bits_to_float(_MAGIC - (bits >> 1))
    return guess * (1.5 - half * guess * guess)


def fast_square_root(value: float) -> float:
    """Approximate sqrt(value) as the reciprocal of the fast inverse root."""
    return 1.0 / fast_inverse_square_root(value)


def degrees_to_radians(angle: float) -> float:
    """Convert an angle in degrees to radians."""
    return angle * PI_OVER_180


def radians_to_degrees(angle: float) -> float:
    """Convert an angle in radians to degrees."""
    return angle / PI_OVER_180