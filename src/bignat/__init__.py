"""
Top-level API for bignat (integer-domain).

Exposes the immutable BigNatural value type (base-10^9 limbs) with its
constructors, arithmetic, ordering and decimal rendering. Lower-level limb
kernels live in `bignat.core.limbs`.
"""

from __future__ import annotations

from .core import (
    RADIX,
    RADIX_DECIMAL_DIGITS,
    BigNatural,
    ZERO,
    ONE,
    value_of,
    BigNaturalError,
    NaturalRangeError,
    DigitFormatError,
    InvariantViolation,
)

__all__ = [
    "RADIX",
    "RADIX_DECIMAL_DIGITS",
    "BigNatural",
    "ZERO",
    "ONE",
    "value_of",
    "BigNaturalError",
    "NaturalRangeError",
    "DigitFormatError",
    "InvariantViolation",
]
