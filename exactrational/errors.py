"""Exception hierarchy for exact rational arithmetic."""
from __future__ import annotations


class ExactRationalError(Exception):
    """Base class for every failure raised by :mod:`exactrational`."""


class DivideByZeroError(ExactRationalError, ZeroDivisionError):
    """A zero denominator, divisor, reciprocal or negative power of zero."""


class InvalidOperandError(ExactRationalError, ValueError):
    """An operand that has no exact rational value (NaN, infinity, wrong kind)."""


class MalformedInputError(ExactRationalError, ValueError):
    """Text that does not follow the ``decimal ["/" decimal]`` grammar."""


class RoundingRequiredError(ExactRationalError, ArithmeticError):
    """``UNNECESSARY`` rounding was requested for a non-integral value."""


class UnsupportedModeError(ExactRationalError, ValueError):
    """A rounding mode that cannot be resolved to ``UP`` or ``DOWN``."""


__all__ = [
    "ExactRationalError",
    "DivideByZeroError",
    "InvalidOperandError",
    "MalformedInputError",
    "RoundingRequiredError",
    "UnsupportedModeError",
]
