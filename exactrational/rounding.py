"""Rounding of exact quotients to integers."""
from __future__ import annotations

import decimal
import enum
from typing import Any, Tuple, Union

import numpy as np

from .errors import RoundingRequiredError, UnsupportedModeError


class RoundingMode(enum.Enum):
    """Rounding rules, valued by the matching :mod:`decimal` constant."""

    UP = decimal.ROUND_UP
    DOWN = decimal.ROUND_DOWN
    CEILING = decimal.ROUND_CEILING
    FLOOR = decimal.ROUND_FLOOR
    HALF_UP = decimal.ROUND_HALF_UP
    HALF_DOWN = decimal.ROUND_HALF_DOWN
    HALF_EVEN = decimal.ROUND_HALF_EVEN
    UNNECESSARY = "ROUND_UNNECESSARY"

    @classmethod
    def coerce(cls, mode: Union["RoundingMode", str]) -> "RoundingMode":
        """Accept a member or a :mod:`decimal` rounding constant."""
        if isinstance(mode, cls):
            return mode
        try:
            return cls(mode)
        except ValueError:
            raise UnsupportedModeError(f"Unsupported rounding mode: {mode!r}") from None


_HALF_MODES = frozenset({RoundingMode.HALF_UP, RoundingMode.HALF_DOWN, RoundingMode.HALF_EVEN})


def truncated_divmod(numerator: int, denominator: int) -> Tuple[int, int]:
    """Divide rounding toward zero; the remainder takes the numerator's sign.

    ``denominator`` must be positive.
    """
    quotient, remainder = divmod(abs(numerator), denominator)
    if numerator < 0:
        return -quotient, -remainder
    return quotient, remainder


def round_quotient(
    numerator: int,
    denominator: int,
    mode: Union[RoundingMode, str] = RoundingMode.HALF_UP,
) -> int:
    """Round ``numerator / denominator`` to an integer under *mode*.

    The pair must be in lowest terms with a positive denominator: the value is
    integral iff ``denominator == 1`` and the remainder is exactly one half
    iff ``denominator == 2``.
    """
    mode = RoundingMode.coerce(mode)
    if denominator == 1:
        return numerator
    if mode is RoundingMode.UNNECESSARY:
        raise RoundingRequiredError("Rounding necessary")

    if mode in _HALF_MODES and denominator != 2:
        quotient, remainder = truncated_divmod(numerator, denominator)
    else:
        quotient = truncated_divmod(numerator, denominator)[0]
        remainder = None

    if mode in _HALF_MODES:
        if remainder is None:
            if mode is RoundingMode.HALF_UP or (mode is RoundingMode.HALF_EVEN and quotient & 1):
                mode = RoundingMode.UP
            else:
                mode = RoundingMode.DOWN
        elif 2 * abs(remainder) <= denominator:
            mode = RoundingMode.DOWN
        else:
            mode = RoundingMode.UP

    # Sign of the numerator, not the quotient, so (-1, 0) rounds correctly.
    if mode is RoundingMode.CEILING:
        mode = RoundingMode.UP if numerator > 0 else RoundingMode.DOWN
    elif mode is RoundingMode.FLOOR:
        mode = RoundingMode.DOWN if numerator > 0 else RoundingMode.UP

    if mode is RoundingMode.DOWN:
        return quotient
    if mode is RoundingMode.UP:
        return quotient + 1 if numerator > 0 else quotient - 1
    raise UnsupportedModeError(f"Unsupported rounding mode: {mode!r}")


def saturate(value: int, dtype: Any) -> np.integer:
    """Clamp *value* into the range of the NumPy integer *dtype*."""
    dtype = np.dtype(dtype)
    info = np.iinfo(dtype)
    return dtype.type(min(max(value, int(info.min)), int(info.max)))


__all__ = ["RoundingMode", "round_quotient", "saturate", "truncated_divmod"]
