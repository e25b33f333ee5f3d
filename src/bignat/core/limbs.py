"""
Limb storage and arithmetic kernel (integer domain).

- Storage: a tuple of limbs, most significant first, each in [0, RADIX).
- Normalisation: leading zero limbs are stripped; zero is the empty tuple.
- Kernel: addition, schoolbook multiplication and short division work on
  private list buffers and hand back normalised tuples.

Every raw result leaves this module through `normalise_limbs`, so callers
never observe a working buffer.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import List, Sequence, Tuple

from .constants import RADIX
from .exc import NaturalRangeError, InvariantViolation

# Debug printing control
DEBUG_LIMBS = False

def _dbg(msg: str) -> None:
    if DEBUG_LIMBS:
        print(msg)


Limbs = Tuple[int, ...]


# ----------------------------
# Normalisation (single choke point)
# ----------------------------

def _check_limb(limb: object) -> int:
    if isinstance(limb, bool) or not isinstance(limb, int):
        raise NaturalRangeError(f"limb must be an int, got {limb!r}")
    if limb < 0 or limb >= RADIX:
        raise NaturalRangeError(f"{limb} is out of bounds for a limb in [0, {RADIX})")
    return limb


def normalise_limbs(raw: Iterable[int]) -> Limbs:
    """Validate raw limbs and strip leading zeros.

    - Every limb must be an int in [0, RADIX); otherwise NaturalRangeError.
    - All-zero (or empty) input is canonicalised to ().
    """
    if isinstance(raw, (str, bytes)) or not isinstance(raw, Iterable):
        raise NaturalRangeError(f"limbs must be an iterable of ints, got {raw!r}")
    limbs = [_check_limb(limb) for limb in raw]
    first = 0
    while first < len(limbs) and limbs[first] == 0:
        first += 1
    return tuple(limbs[first:])


# ----------------------------
# Carry propagation
# ----------------------------

def _fold_into(buf: List[int], pos: int, amount: int) -> None:
    """Add `amount` at buf[pos] and walk any carry leftward until absorbed."""
    while amount:
        if pos < 0:
            raise InvariantViolation(f"carry {amount} escaped a buffer of {len(buf)} limbs")
        total = buf[pos] + amount
        buf[pos] = total % RADIX
        amount = total // RADIX
        pos -= 1


# ----------------------------
# Kernel operations
# ----------------------------

def add_limbs(a: Sequence[int], b: Sequence[int]) -> Limbs:
    """Sum of two normalised limb sequences."""
    size = max(len(a), len(b)) + 1
    buf = [0] * size
    for operand in (a, b):
        offset = size - len(operand)
        for i in range(len(operand) - 1, -1, -1):
            _fold_into(buf, offset + i, operand[i])
    _dbg(f"add: a={list(a)} b={list(b)} buf={buf}")
    return normalise_limbs(buf)


def mul_limbs(a: Sequence[int], b: Sequence[int]) -> Limbs:
    """Schoolbook product of two normalised limb sequences.

    Each limb product is split into `product % RADIX` at position i + j + 1
    and `product // RADIX` at position i + j of a buffer of len(a) + len(b).
    """
    if not a or not b:
        return ()
    buf = [0] * (len(a) + len(b))
    for i in range(len(a) - 1, -1, -1):
        if a[i] == 0:
            continue
        for j in range(len(b) - 1, -1, -1):
            product = a[i] * b[j]
            low, high = product % RADIX, product // RADIX
            _fold_into(buf, i + j + 1, low)
            _fold_into(buf, i + j, high)
    _dbg(f"mul: a={list(a)} b={list(b)} buf={buf}")
    return normalise_limbs(buf)


def short_div_limbs(a: Sequence[int], divisor: int) -> Limbs:
    """Floor quotient of a limb sequence by a single-limb divisor in (0, RADIX).

    The final remainder is discarded.
    """
    if isinstance(divisor, bool) or not isinstance(divisor, int):
        raise NaturalRangeError(f"divisor must be an int, got {divisor!r}")
    if divisor <= 0 or divisor >= RADIX:
        raise NaturalRangeError(f"divisor {divisor} outside (0, {RADIX})")
    buf = [0] * len(a)
    r = 0
    for i, limb in enumerate(a):
        v = limb + RADIX * r
        buf[i] = v // divisor
        r = v % divisor
    _dbg(f"div: a={list(a)} divisor={divisor} q={buf} r={r}")
    return normalise_limbs(buf)


def compare_limbs(a: Limbs, b: Limbs) -> int:
    """Three-way compare of normalised limb tuples (-1, 0, 1)."""
    if len(a) != len(b):
        return (len(a) > len(b)) - (len(a) < len(b))
    return (a > b) - (a < b)


__all__ = [
    "Limbs",
    "normalise_limbs",
    "add_limbs",
    "mul_limbs",
    "short_div_limbs",
    "compare_limbs",
]
