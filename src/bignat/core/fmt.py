"""
Decimal formatting helpers (text rendering only).

The canonical rendering works directly on limb tuples so that the value type
can use it without an import cycle. The display helpers below it are for logs
and tests and accept anything exposing a `limbs` tuple.
"""

from typing import Any

from .constants import RADIX_DECIMAL_DIGITS
from .exc import NaturalRangeError

# Debug printing control (formatting layer)
DEBUG_FMT = False

def _dbg(msg: str) -> None:
    if DEBUG_FMT:
        print(msg)


# ---------------------------------------------------------------------------
# Canonical decimal text
# ---------------------------------------------------------------------------

def limbs_to_decimal(limbs) -> str:
    """Render normalised limbs as decimal text.

    The leading limb is unpadded and every following limb is zero-padded to
    RADIX_DECIMAL_DIGITS, e.g.:
      ()              -> '0'
      (1, 0)          -> '1000000000'
      (12, 3, 456)    -> '12000000003000000456'
    """
    if not limbs:
        return "0"
    head = str(limbs[0])
    tail = "".join(str(limb).zfill(RADIX_DECIMAL_DIGITS) for limb in limbs[1:])
    _dbg(f"limbs_to_decimal: n_limbs={len(limbs)}")
    return head + tail


# ---------------------------------------------------------------------------
# Logging/display helpers
# ---------------------------------------------------------------------------

def _limbs_of(x: Any):
    limbs = getattr(x, "limbs", None)
    if limbs is None:
        raise NaturalRangeError("expected a value exposing a limbs tuple")
    return limbs


def fmt_limbs(x: Any) -> str:
    """Raw storage view for debugging, e.g. 'Big: [1, 0]'."""
    return "Big: " + str(list(_limbs_of(x)))


def fmt_sci(x: Any, places: int = 6) -> str:
    """Scientific notation with fixed fractional digits, truncated (not rounded).

    Stable for logs and tests, e.g.:
      0               -> '0.000000E+0'
      1               -> '1.000000E+0'
      1234567890123   -> '1.234567E+12'
    """
    if places < 0:
        raise NaturalRangeError(f"places must be >= 0, got {places}")
    digits = limbs_to_decimal(_limbs_of(x))
    exponent = len(digits) - 1 if digits != "0" else 0
    mantissa = (digits[1:] + "0" * places)[:places]
    if places == 0:
        return f"{digits[0]}E+{exponent}"
    return f"{digits[0]}.{mantissa}E+{exponent}"


__all__ = [
    "limbs_to_decimal",
    "fmt_limbs",
    "fmt_sci",
]
