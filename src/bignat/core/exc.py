"""
Core exception types for bignat.core.

These are dependency-free and may be imported by all core modules.
"""

__all__ = [
    "BigNaturalError",
    "NaturalRangeError",
    "DigitFormatError",
    "InvariantViolation",
]


class BigNaturalError(Exception):
    """Base class for every error raised by bignat.core."""
    pass


class NaturalRangeError(BigNaturalError, ValueError):
    """Raised when a value, limb, digit, radix or divisor lies outside its domain."""
    pass


class DigitFormatError(BigNaturalError, ValueError):
    """Raised when text contains a character that is not a digit of the declared radix.

    Attributes
    ----------
    text : str
        The offending input.
    position : int | None
        Index of the first invalid character, if any (None for empty input).
    radix : int
        The radix the text was parsed against.
    """

    def __init__(self, text, radix, position=None):
        super().__init__(text, radix, position)
        self.text = text
        self.radix = radix
        self.position = position

    def __str__(self):
        if self.position is None:
            return f"empty text is not a base-{self.radix} number"
        ch = self.text[self.position]
        return f"invalid base-{self.radix} digit {ch!r} at index {self.position} in {self.text!r}"


class InvariantViolation(BigNaturalError):
    """Raised when a kernel working buffer would break limb invariants."""
    pass
