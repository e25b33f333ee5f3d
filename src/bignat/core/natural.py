"""
BigNatural: immutable arbitrary-precision natural number (integer domain).

- Storage: tuple of limbs in base RADIX = 10^9, most significant first.
- Non-negative domain: there is no sign; negative inputs are rejected at construction.
- Every instance is normalised in __post_init__ (no leading zero limb, zero is ()).
- Arithmetic delegates to the limb kernel and always returns new instances.

Construction entry points:
  from_limbs / from_decimal_string / from_int / from_radix_string / from_digits,
with `value_of` as a type-dispatching convenience.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from collections.abc import Sequence
from typing import ClassVar, Iterable, List, Optional, Tuple, Union

from .constants import (
    RADIX,
    RADIX_DECIMAL_DIGITS,
    MIN_RADIX,
    MAX_RADIX,
    HASH_MULTIPLIER,
)
from .exc import NaturalRangeError, DigitFormatError
from .limbs import (
    Limbs,
    normalise_limbs,
    add_limbs,
    mul_limbs,
    short_div_limbs,
    compare_limbs,
)
from .fmt import limbs_to_decimal


# ----------------------------
# Text helpers
# ----------------------------

_DECIMAL_DIGITS = frozenset("0123456789")

_BASE36_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"
_BASE36_VALUES = {ch: i for i, ch in enumerate(_BASE36_ALPHABET)}
_BASE36_VALUES.update({ch.upper(): i for ch, i in list(_BASE36_VALUES.items()) if ch.isalpha()})

# hash() of a non-negative int reduces modulo this prime
_HASH_MODULUS = sys.hash_info.modulus


def _check_native(n: object, what: str) -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise NaturalRangeError(f"{what} must be an int, got {n!r}")
    if n < 0:
        raise NaturalRangeError(f"{what} must be >= 0, got {n}")
    return n


def _int_to_limbs(n: int) -> Limbs:
    out: List[int] = []
    while n:
        n, limb = divmod(n, RADIX)
        out.append(limb)
    out.reverse()
    return normalise_limbs(out)


def _horner(digits: Iterable[int], radix: int) -> Limbs:
    """Evaluate value = value * radix + digit over the limb kernel, from ZERO."""
    radix_limbs = _int_to_limbs(radix)
    value: Limbs = ()
    for digit in digits:
        value = add_limbs(mul_limbs(value, radix_limbs), _int_to_limbs(digit))
    return value


# ----------------------------
# BigNatural
# ----------------------------

Operand = Union["BigNatural", int]


@dataclass(frozen=True, eq=False)
class BigNatural:
    """Natural number stored as base-10^9 limbs, most significant first."""

    limbs: Tuple[int, ...] = ()

    ZERO: ClassVar["BigNatural"]
    ONE: ClassVar["BigNatural"]

    def __post_init__(self):
        object.__setattr__(self, "limbs", normalise_limbs(self.limbs))

    # ------------- constructors -------------

    @classmethod
    def from_limbs(cls, *limbs: int) -> "BigNatural":
        """Build from raw limbs given as positional arguments."""
        return cls(limbs)

    @classmethod
    def from_decimal_string(cls, text: str) -> "BigNatural":
        """Parse ASCII decimal text in right-aligned chunks of RADIX_DECIMAL_DIGITS."""
        if not isinstance(text, str):
            raise NaturalRangeError(f"text must be a str, got {text!r}")
        if not text:
            raise DigitFormatError(text, 10, None)
        for pos, ch in enumerate(text):
            if ch not in _DECIMAL_DIGITS:
                raise DigitFormatError(text, 10, pos)
        head = len(text) % RADIX_DECIMAL_DIGITS or RADIX_DECIMAL_DIGITS
        chunks = [text[:head]]
        chunks.extend(
            text[i:i + RADIX_DECIMAL_DIGITS]
            for i in range(head, len(text), RADIX_DECIMAL_DIGITS)
        )
        return cls(tuple(int(chunk) for chunk in chunks))

    @classmethod
    def from_int(cls, n: int) -> "BigNatural":
        """Bridge from a non-negative native int (3 limbs cover any 64-bit value)."""
        return cls(_int_to_limbs(_check_native(n, "native value")))

    @classmethod
    def from_radix_string(cls, text: str, radix: int) -> "BigNatural":
        """Parse big-endian base-`radix` text (2..36, case-insensitive letters)."""
        radix = _check_native(radix, "radix")
        if radix < MIN_RADIX or radix > MAX_RADIX:
            raise NaturalRangeError(f"radix {radix} outside [{MIN_RADIX}, {MAX_RADIX}]")
        if not isinstance(text, str):
            raise NaturalRangeError(f"text must be a str, got {text!r}")
        if not text:
            raise DigitFormatError(text, radix, None)
        digits = []
        for pos, ch in enumerate(text):
            d = _BASE36_VALUES.get(ch)
            if d is None or d >= radix:
                raise DigitFormatError(text, radix, pos)
            digits.append(d)
        return cls(_horner(digits, radix))

    @classmethod
    def from_digits(cls, digits: Sequence[int], radix: int) -> "BigNatural":
        """Evaluate pre-parsed big-endian digits in any radix >= 2. Empty gives ZERO."""
        radix = _check_native(radix, "radix")
        if radix < MIN_RADIX:
            raise NaturalRangeError(f"radix {radix} must be >= {MIN_RADIX}")
        checked = []
        for d in digits:
            d = _check_native(d, "digit")
            if d >= radix:
                raise NaturalRangeError(f"digit {d} out of range for radix {radix}")
            checked.append(d)
        return cls(_horner(checked, radix))

    # ------------- conversions -------------

    def to_decimal_string(self) -> str:
        """Canonical decimal text: no leading zeros, "0" for zero."""
        return limbs_to_decimal(self.limbs)

    def to_int(self) -> int:
        """Native int view (display/tests only)."""
        n = 0
        for limb in self.limbs:
            n = n * RADIX + limb
        return n

    def __str__(self) -> str:
        return self.to_decimal_string()

    # ------------- predicates -------------

    def is_zero(self) -> bool:
        return not self.limbs

    def limb_count(self) -> int:
        return len(self.limbs)

    def __bool__(self) -> bool:
        return bool(self.limbs)

    # ------------- comparisons -------------

    def compare_to(self, other: "BigNatural") -> int:
        """Three-way ordering: longer limb tuples are larger, then lexicographic."""
        if not isinstance(other, BigNatural):
            raise NaturalRangeError("compare_to requires a BigNatural operand")
        return compare_limbs(self.limbs, other.limbs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BigNatural):
            return NotImplemented
        return self.compare_to(other) == 0

    def __lt__(self, other: "BigNatural") -> bool:
        if not isinstance(other, BigNatural):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: "BigNatural") -> bool:
        if not isinstance(other, BigNatural):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: "BigNatural") -> bool:
        if not isinstance(other, BigNatural):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: "BigNatural") -> bool:
        if not isinstance(other, BigNatural):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __hash__(self) -> int:
        h = 0
        for limb in self.limbs:
            h = (h * HASH_MULTIPLIER + limb) % _HASH_MODULUS
        return hash(h)

    # ------------- arithmetic -------------

    def plus(self, other: "BigNatural") -> "BigNatural":
        if not isinstance(other, BigNatural):
            raise NaturalRangeError("plus requires a BigNatural operand")
        return BigNatural(add_limbs(self.limbs, other.limbs))

    def times(self, other: "BigNatural") -> "BigNatural":
        if not isinstance(other, BigNatural):
            raise NaturalRangeError("times requires a BigNatural operand")
        return BigNatural(mul_limbs(self.limbs, other.limbs))

    def divide_by(self, divisor: int) -> "BigNatural":
        """Floor quotient by a single-limb divisor in (0, RADIX); remainder is dropped."""
        return BigNatural(short_div_limbs(self.limbs, divisor))

    def __add__(self, other: Operand) -> "BigNatural":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.plus(rhs)

    __radd__ = __add__

    def __mul__(self, other: Operand) -> "BigNatural":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.times(rhs)

    __rmul__ = __mul__

    def __floordiv__(self, divisor: int) -> "BigNatural":
        if isinstance(divisor, bool) or not isinstance(divisor, int):
            return NotImplemented
        return self.divide_by(divisor)


def _coerce(x: object) -> Optional[BigNatural]:
    if isinstance(x, BigNatural):
        return x
    if isinstance(x, int) and not isinstance(x, bool):
        return BigNatural.from_int(x)
    return None


ZERO = BigNatural()
ONE = BigNatural((1,))
BigNatural.ZERO = ZERO
BigNatural.ONE = ONE


def value_of(x: Union[str, int, Sequence[int]], radix: Optional[int] = None) -> BigNatural:
    """Dispatch to the matching constructor by input type.

    - str              -> from_decimal_string
    - str, radix       -> from_radix_string
    - int              -> from_int
    - sequence, radix  -> from_digits
    """
    if isinstance(x, str):
        if radix is None:
            return BigNatural.from_decimal_string(x)
        return BigNatural.from_radix_string(x, radix)
    if isinstance(x, int) and not isinstance(x, bool):
        if radix is not None:
            raise NaturalRangeError("value_of(int) takes no radix")
        return BigNatural.from_int(x)
    if isinstance(x, Sequence) and not isinstance(x, (bytes, bytearray)):
        if radix is None:
            raise NaturalRangeError("value_of(digits) requires a radix")
        return BigNatural.from_digits(x, radix)
    raise NaturalRangeError(f"value_of(): unsupported input {x!r}")


__all__ = [
    "BigNatural",
    "ZERO",
    "ONE",
    "value_of",
]
