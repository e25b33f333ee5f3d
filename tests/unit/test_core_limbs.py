import pytest

from bignat.core.constants import RADIX
from bignat.core.exc import NaturalRangeError, InvariantViolation
from bignat.core.limbs import (
    normalise_limbs,
    add_limbs,
    mul_limbs,
    short_div_limbs,
    compare_limbs,
    _fold_into,
)


# -----------------------------
# Normalisation
# -----------------------------

@pytest.mark.parametrize(
    "raw,expected",
    [
        ((), ()),
        ((0,), ()),
        ((0, 0, 0, 0), ()),
        ((0, 0, 5), (5,)),
        ((1, 0), (1, 0)),
        ((0, 1, 0, 0), (1, 0, 0)),
        ((RADIX - 1,), (RADIX - 1,)),
    ],
)
def test_normalise_strips_leading_zeros(raw, expected):
    print(f"[normalise] {raw} -> expect {expected}")
    assert normalise_limbs(raw) == expected


def test_normalise_is_idempotent():
    print("[normalise-idempotent] normalising a normalised tuple is a no-op")
    once = normalise_limbs([0, 0, 3, 0, 7])
    assert normalise_limbs(once) == once == (3, 0, 7)


@pytest.mark.parametrize("bad", [-1, RADIX, RADIX + 5, 1.0, "1", True])
def test_normalise_rejects_out_of_range_limbs(bad):
    print(f"[normalise-range] limb={bad!r} -> expect NaturalRangeError")
    with pytest.raises(NaturalRangeError):
        normalise_limbs([1, bad])


# -----------------------------
# Carry propagation
# -----------------------------

def test_fold_into_walks_long_carry_chain():
    print("[fold-carry] [0, R-1, R-1, R-1] + 1 at the end -> [1, 0, 0, 0]")
    buf = [0, RADIX - 1, RADIX - 1, RADIX - 1]
    _fold_into(buf, 3, 1)
    assert buf == [1, 0, 0, 0]


def test_fold_into_escaping_carry_raises():
    print("[fold-escape] carry past the leading limb -> expect InvariantViolation")
    buf = [RADIX - 1, RADIX - 1]
    with pytest.raises(InvariantViolation):
        _fold_into(buf, 1, 1)


# -----------------------------
# Kernel
# -----------------------------

def test_add_limbs_all_max_operands():
    print("[add-max] (R-1, R-1, R-1) + (R-1, R-1, R-1) -> 2*10^27 - 2")
    a = (RADIX - 1,) * 3
    s = add_limbs(a, a)
    assert s == (1, RADIX - 1, RADIX - 1, RADIX - 2)


def test_add_limbs_different_lengths():
    print("[add-lengths] (1,) + (R-1, R-1) -> (1, 0, 0)")
    assert add_limbs((1,), (RADIX - 1, RADIX - 1)) == (1, 0, 0)
    assert add_limbs((RADIX - 1, RADIX - 1), (1,)) == (1, 0, 0)


def test_add_limbs_with_zero():
    assert add_limbs((), ()) == ()
    assert add_limbs((4, 2), ()) == (4, 2)


def test_mul_limbs_carry_uses_radix():
    print("[mul-carry] (R-1,) * (R-1,) -> (R-2, 1)")
    assert mul_limbs((RADIX - 1,), (RADIX - 1,)) == (RADIX - 2, 1)


def test_mul_limbs_zero_operand():
    assert mul_limbs((), (5,)) == ()
    assert mul_limbs((5, 0), ()) == ()


def test_short_div_limbs_divides_by_divisor():
    print("[short-div] (1, 0) // 3 -> (333333333,)")
    assert short_div_limbs((1, 0), 3) == (333_333_333,)


@pytest.mark.parametrize("divisor", [0, -1, RADIX, RADIX + 1, 2.0, True])
def test_short_div_limbs_bad_divisor(divisor):
    print(f"[short-div-range] divisor={divisor!r} -> expect NaturalRangeError")
    with pytest.raises(NaturalRangeError):
        short_div_limbs((10,), divisor)


def test_compare_limbs_length_then_lexicographic():
    assert compare_limbs((1, 0), (RADIX - 1,)) == 1
    assert compare_limbs((5,), (5, 0)) == -1
    assert compare_limbs((3, 4), (3, 5)) == -1
    assert compare_limbs((3, 4), (3, 4)) == 0
    assert compare_limbs((), ()) == 0
