from __future__ import annotations
from typing import List

import pytest

from bignat.core import BigNatural


# -----------------------------
# Pytest fixtures
# -----------------------------

@pytest.fixture()
def sample_ints() -> List[int]:
    """Reference magnitudes straddling limb boundaries."""
    return [
        0,
        1,
        7,
        999_999_999,
        1_000_000_000,
        1_000_000_001,
        123_456_789_012_345_678,
        999_999_999_999_999_999,
        1_000_000_000_000_000_000,
        2 ** 64 - 1,
        10 ** 27 - 1,
        31_415_926_535_897_932_384_626_433_832_795,
    ]


@pytest.fixture()
def sample_naturals(sample_ints) -> List[BigNatural]:
    return [BigNatural.from_int(n) for n in sample_ints]
