"""Exact arbitrary-precision rational numbers."""

import logging

from .arrays import as_rational_array, to_float_array, zeros, zeros_like
from .errors import (
    DivideByZeroError,
    ExactRationalError,
    InvalidOperandError,
    MalformedInputError,
    RoundingRequiredError,
    UnsupportedModeError,
)
from .kinds import NumberKind, kind_for_dtype
from .rational import (
    DEFAULT_ROUNDING,
    DOUBLE_DIGITS,
    DOUBLE_EXTRACTION_PRECISION,
    FLOAT_DIGITS,
    FLOAT_EXTRACTION_PRECISION,
    MAX_TEXT_EXPONENT,
    ONE,
    TEN,
    ZERO,
    ExactRational,
    rationalize,
)
from .rounding import RoundingMode

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ExactRational",
    "rationalize",
    "ZERO",
    "ONE",
    "TEN",
    "RoundingMode",
    "NumberKind",
    "kind_for_dtype",
    "DEFAULT_ROUNDING",
    "DOUBLE_DIGITS",
    "FLOAT_DIGITS",
    "DOUBLE_EXTRACTION_PRECISION",
    "FLOAT_EXTRACTION_PRECISION",
    "MAX_TEXT_EXPONENT",
    "as_rational_array",
    "to_float_array",
    "zeros",
    "zeros_like",
    "ExactRationalError",
    "DivideByZeroError",
    "InvalidOperandError",
    "MalformedInputError",
    "RoundingRequiredError",
    "UnsupportedModeError",
]
