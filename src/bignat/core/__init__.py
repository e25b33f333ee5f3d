"""
BigNatural Core
===============

Unified exports for the integer-domain natural number type and its helpers.
All arithmetic runs on base-10^9 limb tuples; decimal text is produced only
by the formatting layer.
"""

# NOTE:
#   Every BigNatural is normalised on construction (no leading zero limb, zero is ()).
#   Kernel functions in `limbs` work on private list buffers and return normalised tuples.

# Integer-domain constants
from .constants import (
    RADIX,
    RADIX_DECIMAL_DIGITS,
    NATIVE_LIMBS,
    MIN_RADIX,
    MAX_RADIX,
    HASH_MULTIPLIER,
)

# Limb storage and arithmetic kernel
from .limbs import (
    normalise_limbs,
    add_limbs,
    mul_limbs,
    short_div_limbs,
    compare_limbs,
)

# Value type
from .natural import (
    BigNatural,
    ZERO,
    ONE,
    value_of,
)

# Formatting helpers
from .fmt import (
    limbs_to_decimal,
    fmt_limbs,
    fmt_sci,
)

# Core exceptions
from .exc import BigNaturalError, NaturalRangeError, DigitFormatError, InvariantViolation

__all__ = [
    # constants
    "RADIX",
    "RADIX_DECIMAL_DIGITS",
    "NATIVE_LIMBS",
    "MIN_RADIX",
    "MAX_RADIX",
    "HASH_MULTIPLIER",
    # limbs
    "normalise_limbs",
    "add_limbs",
    "mul_limbs",
    "short_div_limbs",
    "compare_limbs",
    # natural
    "BigNatural",
    "ZERO",
    "ONE",
    "value_of",
    # fmt
    "limbs_to_decimal",
    "fmt_limbs",
    "fmt_sci",
    # exceptions
    "BigNaturalError",
    "NaturalRangeError",
    "DigitFormatError",
    "InvariantViolation",
]
