"""
BigNatural Core Constants (integer domain)
==========================================

Limb radix and conversion bounds. Everything here is a plain int; no
runtime configuration exists beyond these module constants.
"""

# NOTE: RADIX must stay a power of ten so that decimal text maps onto limbs by chunking.

# ---------------------------------------------------------------------------
# Limb storage
# ---------------------------------------------------------------------------

#: Number of decimal digits held by one limb.
RADIX_DECIMAL_DIGITS: int = 9

#: Base of every limb; limbs live in [0, RADIX).
RADIX: int = 10 ** RADIX_DECIMAL_DIGITS   # 1e9

#: Limbs needed for the largest unsigned 64-bit native integer.
NATIVE_LIMBS: int = 3


# ---------------------------------------------------------------------------
# Positional conversion (Horner's method)
# ---------------------------------------------------------------------------

#: Radix bounds for textual input (base-36 digit semantics).
MIN_RADIX: int = 2
MAX_RADIX: int = 36

#: Multiplier for the polynomial limb hash.
HASH_MULTIPLIER: int = 13


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------

__all__ = [
    "RADIX_DECIMAL_DIGITS",
    "RADIX",
    "NATIVE_LIMBS",
    "MIN_RADIX",
    "MAX_RADIX",
    "HASH_MULTIPLIER",
]
