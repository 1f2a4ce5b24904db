"""Exact rational numbers with NumPy interoperability."""
from __future__ import annotations

import decimal
import logging
import math
import numbers
import operator
import re
import struct
from decimal import Decimal
from typing import Any, ClassVar, Optional, Tuple, Union

import numpy as np

from .errors import (
    DivideByZeroError,
    InvalidOperandError,
    MalformedInputError,
)
from .kinds import NumberKind, kind_for_dtype
from .rounding import RoundingMode, round_quotient, saturate, truncated_divmod

logger = logging.getLogger(__name__)

IntegerLike = Union[int, numbers.Integral]

DEFAULT_ROUNDING = RoundingMode.HALF_UP

# Significant digits of the decimal64 and decimal32 interchange formats.
DOUBLE_DIGITS = 16
FLOAT_DIGITS = 7
# Two guard digits make from_float(d).to_float64() == d for every finite double.
DOUBLE_EXTRACTION_PRECISION = DOUBLE_DIGITS + 2
FLOAT_EXTRACTION_PRECISION = FLOAT_DIGITS + 2
# Largest decimal exponent accepted by from_string; ingestion costs 10**|exponent|.
MAX_TEXT_EXPONENT = 100_000

_LOG2_10 = 3.321928094887362
_MANTISSA_BITS = 52
_EXPONENT_BIAS = 1023
_IMPLICIT_BIT = 1 << _MANTISSA_BITS
_MANTISSA_MASK = _IMPLICIT_BIT - 1

_DECIMAL_LITERAL = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?\Z")
_FORMAT_PRECISION = re.compile(r"\.(\d+)([eEfFgGn%]?)\Z")


def _ensure_int(value: Any, *, name: str) -> int:
    """Convert *value* to ``int`` when it represents an integer."""
    if isinstance(value, numbers.Integral):
        return int(value)
    raise TypeError(f"{name} must be an integer, got {type(value)!r}")


def _ensure_float(value: Any, *, name: str) -> float:
    if isinstance(value, numbers.Real):
        return float(value)
    raise TypeError(f"{name} must be a real number, got {type(value)!r}")


def _digits(value: int) -> str:
    """Decimal digits of *value*, free of the interpreter's int-to-str limit."""
    return str(Decimal(value))


def _lowest_set_bit(value: int) -> int:
    """Index of the lowest one bit of *value* (``-1`` for zero)."""
    return (value & -value).bit_length() - 1


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _decimal_context(precision: int, rounding: str = decimal.ROUND_HALF_EVEN) -> decimal.Context:
    return decimal.Context(
        prec=precision,
        rounding=rounding,
        Emax=decimal.MAX_EMAX,
        Emin=decimal.MIN_EMIN,
    )


def _scaled_pair(value: Decimal) -> Tuple[int, int]:
    """Return ``(unscaled, scale)`` with ``value == unscaled / 10**scale``."""
    if not isinstance(value, Decimal):
        raise TypeError(f"expected a Decimal, got {type(value)!r}")
    sign, digits, exponent = value.as_tuple()
    if not isinstance(exponent, int):
        raise InvalidOperandError(f"decimal value is not finite: {value}")
    unscaled = 0
    for digit in digits:
        unscaled = unscaled * 10 + digit
    return (-unscaled if sign else unscaled), -exponent


def _scaled_decimal(unscaled: int, scale: int) -> Decimal:
    """Build ``unscaled / 10**scale`` exactly, without a context rounding step."""
    sign, digits, _ = Decimal(unscaled).as_tuple()
    return Decimal((sign, digits, -scale))


def _parse_decimal(text: str) -> Decimal:
    if not _DECIMAL_LITERAL.match(text):
        raise MalformedInputError(f"malformed decimal literal: {text!r}")
    value = Decimal(text)
    if abs(value.as_tuple().exponent) > MAX_TEXT_EXPONENT:
        raise MalformedInputError(f"decimal exponent out of range: {text!r}")
    return value


class ExactRational:
    """Immutable ratio of two integers, always kept in lowest terms.

    The denominator is positive, so the sign lives on the numerator and two
    instances are equal exactly when their numerators and denominators are.
    """

    __slots__ = ("_numerator", "_denominator")
    __array_priority__ = 1000.0  # Prefer ExactRational semantics in NumPy expressions.

    ZERO: ClassVar["ExactRational"]
    ONE: ClassVar["ExactRational"]
    TEN: ClassVar["ExactRational"]

    def __init__(self, numerator: IntegerLike = 0, denominator: IntegerLike = 1) -> None:
        self._assign(
            _ensure_int(numerator, name="numerator"),
            _ensure_int(denominator, name="denominator"),
            reduced=False,
        )

    def _assign(self, numerator: int, denominator: int, reduced: bool) -> None:
        if denominator == 0:
            raise DivideByZeroError("Divide by zero: fraction denominator is zero.")
        if denominator < 0:
            numerator, denominator = -numerator, -denominator
        if not reduced:
            gcd = math.gcd(numerator, denominator)
            numerator //= gcd
            denominator //= gcd
        self._numerator = numerator
        self._denominator = denominator

    @classmethod
    def _create(cls, numerator: int, denominator: int, reduced: bool) -> "ExactRational":
        instance = object.__new__(cls)
        instance._assign(numerator, denominator, reduced)
        return instance

    # ------------------------------------------------------------------
    # Constructors
    @classmethod
    def from_int(cls, value: IntegerLike) -> "ExactRational":
        return cls._create(_ensure_int(value, name="value"), 1, True)

    @classmethod
    def from_float(cls, value: float) -> "ExactRational":
        """Return the exact value of the IEEE-754 double *value*.

        ``from_float(1.1)`` is ``2476979795053773/2251799813685248``, the binary
        value actually stored; ``from_string(repr(x))`` is usually what people
        expect instead.
        """
        value = _ensure_float(value, name="value")
        if math.isinf(value):
            raise InvalidOperandError("float value is infinite")
        if math.isnan(value):
            raise InvalidOperandError("float value is NaN")
        if value == 0:
            return ZERO

        bits = struct.unpack(">Q", struct.pack(">d", value))[0]
        sign = bits >> 63
        biased_exponent = (bits >> _MANTISSA_BITS) & 0x7FF
        mantissa = bits & _MANTISSA_MASK
        if biased_exponent:
            significand = _IMPLICIT_BIT + mantissa
            exponent = biased_exponent - _EXPONENT_BIAS
        else:
            # Subnormal: no implicit leading bit.
            significand = mantissa
            exponent = 1 - _EXPONENT_BIAS

        # value == significand * 2**(exponent - 52)
        numerator = significand
        denominator = 1
        if exponent > _MANTISSA_BITS:
            numerator <<= exponent - _MANTISSA_BITS
        elif exponent < _MANTISSA_BITS:
            # gcd(significand, 2**(52 - exponent)) is 2**shift.
            shift = min(_lowest_set_bit(significand), _MANTISSA_BITS - exponent)
            numerator >>= shift
            denominator <<= _MANTISSA_BITS - exponent - shift

        if sign:
            numerator = -numerator
        return cls._create(numerator, denominator, True)

    @classmethod
    def from_floats(cls, numerator: float, denominator: float) -> "ExactRational":
        """Return the exact quotient of two doubles."""
        numerator = _ensure_float(numerator, name="numerator")
        denominator = _ensure_float(denominator, name="denominator")
        if denominator == 0:
            raise DivideByZeroError("Divide by zero: fraction denominator is zero.")
        if denominator < 0:
            numerator, denominator = -numerator, -denominator

        top = cls.from_float(numerator)
        bottom = cls.from_float(denominator)

        # Both are n / 2**x with n odd whenever x > 0, so the only common factor
        # beyond gcd(n1, n2) is the power of two folded in by the shifts below.
        gcd = math.gcd(top._numerator, bottom._numerator)
        new_numerator = top._numerator // gcd
        new_denominator = bottom._numerator // gcd

        x1 = _lowest_set_bit(top._denominator)
        x2 = _lowest_set_bit(bottom._denominator)
        if x1 < x2:
            new_numerator <<= x2 - x1
        elif x1 > x2:
            new_denominator <<= x1 - x2

        return cls._create(new_numerator, new_denominator, False)

    @classmethod
    def from_scaled(cls, unscaled: IntegerLike, scale: IntegerLike) -> "ExactRational":
        """Return ``unscaled / 10**scale`` in lowest terms."""
        unscaled = _ensure_int(unscaled, name="unscaled")
        scale = _ensure_int(scale, name="scale")
        if unscaled == 0:
            return ZERO

        denominator = 1
        if scale < 0:
            unscaled *= 10 ** -scale
        elif scale > 0:
            # gcd(unscaled, 2**scale * 5**scale) == 2**common_twos * 5**common_fives
            common_twos = min(scale, _lowest_set_bit(unscaled))
            unscaled >>= common_twos
            denominator <<= scale - common_twos

            common_fives = 0
            while common_fives < scale:
                quotient, remainder = divmod(unscaled, 5)
                if remainder:
                    break
                unscaled = quotient
                common_fives += 1
            denominator *= 5 ** (scale - common_fives)

        return cls._create(unscaled, denominator, True)

    @classmethod
    def from_decimal(cls, value: Decimal) -> "ExactRational":
        return cls.from_scaled(*_scaled_pair(value))

    @classmethod
    def from_scaled_pair(
        cls,
        numerator_unscaled: IntegerLike,
        numerator_scale: IntegerLike,
        denominator_unscaled: IntegerLike,
        denominator_scale: IntegerLike,
    ) -> "ExactRational":
        """Return ``(u1 / 10**s1) / (u2 / 10**s2)`` in lowest terms."""
        numerator = _ensure_int(numerator_unscaled, name="numerator_unscaled")
        denominator = _ensure_int(denominator_unscaled, name="denominator_unscaled")
        numerator_scale = _ensure_int(numerator_scale, name="numerator_scale")
        denominator_scale = _ensure_int(denominator_scale, name="denominator_scale")
        if denominator == 0:
            raise DivideByZeroError("Divide by zero: fraction denominator is zero.")

        if numerator_scale > denominator_scale:
            denominator *= 10 ** (numerator_scale - denominator_scale)
        elif numerator_scale < denominator_scale:
            numerator *= 10 ** (denominator_scale - numerator_scale)

        gcd = math.gcd(numerator, denominator)
        numerator //= gcd
        denominator //= gcd
        if denominator < 0:
            numerator, denominator = -numerator, -denominator
        return cls._create(numerator, denominator, True)

    @classmethod
    def from_decimals(cls, numerator: Decimal, denominator: Decimal) -> "ExactRational":
        return cls.from_scaled_pair(*_scaled_pair(numerator), *_scaled_pair(denominator))

    @classmethod
    def from_string(cls, text: str) -> "ExactRational":
        """Parse ``"N"`` or ``"N/D"`` where each side is a decimal literal.

        Both sides accept an optional sign, fractional part and exponent, so
        ``"1.5/-2e1"`` is ``-3/40``.
        """
        if not isinstance(text, str):
            raise TypeError(f"expected a string, got {type(text)!r}")
        numerator_text, slash, denominator_text = text.partition("/")
        numerator = _parse_decimal(numerator_text)
        if not slash:
            return cls.from_decimal(numerator)
        return cls.from_decimals(numerator, _parse_decimal(denominator_text))

    @classmethod
    def of(cls, value: Any, kind: NumberKind) -> "ExactRational":
        """Convert *value* using the ingestion path named by *kind*."""
        kind = NumberKind(kind)
        if kind is NumberKind.INTEGER:
            return cls.from_int(value)
        if kind is NumberKind.FLOAT:
            return cls.from_float(value)
        if kind is NumberKind.DECIMAL:
            return cls.from_decimal(value)
        if kind is NumberKind.TEXT:
            return cls.from_string(str(value))
        operand = cls._coerce_operand(value)
        if operand is None:
            raise TypeError(f"Cannot interpret {type(value)!r} as ExactRational")
        return operand

    # ------------------------------------------------------------------
    # Properties and helpers
    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    def signum(self) -> int:
        return _sign(self._numerator)

    def reciprocal(self) -> "ExactRational":
        if self._numerator == 1 and self._denominator == 1:
            return self
        if self._numerator == 0:
            raise DivideByZeroError("Divide by zero: reciprocal of zero.")
        return ExactRational._create(self._denominator, self._numerator, True)

    def complement(self) -> "ExactRational":
        """Return ``1 - self``."""
        return ExactRational._create(self._denominator - self._numerator, self._denominator, True)

    # ------------------------------------------------------------------
    # Rounding and numeric protocol
    def round(self, mode: Union[RoundingMode, str] = DEFAULT_ROUNDING) -> int:
        """Round to an integer; ``HALF_UP`` unless another *mode* is given."""
        return round_quotient(self._numerator, self._denominator, mode)

    def __int__(self) -> int:
        return self.round(RoundingMode.DOWN)

    def __trunc__(self) -> int:
        return self.round(RoundingMode.DOWN)

    def __floor__(self) -> int:
        return self.round(RoundingMode.FLOOR)

    def __ceil__(self) -> int:
        return self.round(RoundingMode.CEILING)

    def __round__(self, ndigits: Optional[int] = None) -> Union[int, "ExactRational"]:
        """Round half-even, to an ``int`` or to *ndigits* decimal places."""
        if ndigits is None:
            return self.round(RoundingMode.HALF_EVEN)
        shift = 10 ** abs(ndigits)
        if ndigits > 0:
            scaled = round_quotient(self._numerator * shift, self._denominator, RoundingMode.HALF_EVEN)
            return ExactRational(scaled, shift)
        scaled = round_quotient(self._numerator, self._denominator * shift, RoundingMode.HALF_EVEN)
        return ExactRational(scaled * shift)

    def __bool__(self) -> bool:
        return self._numerator != 0

    def to_int64(self) -> np.int64:
        return saturate(self.round(RoundingMode.DOWN), np.int64)

    def to_int32(self) -> np.int32:
        return saturate(self.round(RoundingMode.DOWN), np.int32)

    def to_int16(self) -> np.int16:
        return saturate(self.round(RoundingMode.DOWN), np.int16)

    def to_int8(self) -> np.int8:
        return saturate(self.round(RoundingMode.DOWN), np.int8)

    def to_float64(self) -> float:
        return float(self._divide_decimal(DOUBLE_EXTRACTION_PRECISION))

    def to_float32(self) -> np.float32:
        return np.float32(float(self._divide_decimal(FLOAT_EXTRACTION_PRECISION)))

    def __float__(self) -> float:
        return self.to_float64()

    # ------------------------------------------------------------------
    # Decimal expansion
    def to_decimal(self, precision: Optional[int] = None) -> Decimal:
        """Return the value as a :class:`decimal.Decimal`.

        With *precision*, the quotient is rounded half-even to that many
        significant digits. Without it, terminating values are returned exactly
        and repeating ones get enough digits to cover both operands, never fewer
        than :data:`DOUBLE_EXTRACTION_PRECISION`.
        """
        if precision is not None:
            return self._divide_decimal(precision)

        # Terminates in base 10 iff the denominator is 2**twos * 5**fives.
        twos = _lowest_set_bit(self._denominator)
        remaining = self._denominator >> twos
        fives = 0
        while remaining % 5 == 0:
            remaining //= 5
            fives += 1

        if remaining == 1:
            unscaled = self._numerator
            scale = max(twos, fives)
            if twos < fives:
                unscaled <<= fives - twos
            elif fives < twos:
                unscaled *= 5 ** (twos - fives)
            return _scaled_decimal(unscaled, scale)

        bits = max(self._numerator.bit_length(), self._denominator.bit_length())
        precision = max(math.ceil(bits / _LOG2_10), DOUBLE_EXTRACTION_PRECISION)
        logger.debug("non-terminating expansion of %s to %d digits", self, precision)
        return self._divide_decimal(precision)

    def _divide_decimal(self, precision: int, rounding: str = decimal.ROUND_HALF_EVEN) -> Decimal:
        if precision < 1:
            raise ValueError("precision must be >= 1")
        context = _decimal_context(precision, rounding)
        return context.divide(Decimal(self._numerator), Decimal(self._denominator))

    # ------------------------------------------------------------------
    # Representation
    def __repr__(self) -> str:
        return f"ExactRational({_digits(self._numerator)}, {_digits(self._denominator)})"

    def __str__(self) -> str:
        return f"{_digits(self._numerator)}/{_digits(self._denominator)}"

    def to_mixed_string(self) -> str:
        """Render as ``"W R/D"``, e.g. ``-4/3`` as ``"-1 1/3"``."""
        if self._denominator == 1:
            return _digits(self._numerator)
        if abs(self._numerator) < self._denominator:
            return str(self)
        whole, remainder = truncated_divmod(self._numerator, self._denominator)
        return f"{_digits(whole)} {_digits(abs(remainder))}/{_digits(self._denominator)}"

    def __format__(self, format_spec: str) -> str:
        if format_spec in ("", "r", "R"):
            return str(self)
        if format_spec == "m":
            return self.to_mixed_string()
        try:
            return format(self._format_decimal(format_spec), format_spec)
        except (ValueError, TypeError):
            return format(str(self), format_spec)

    def _format_decimal(self, format_spec: str) -> Decimal:
        """Decimal carrying enough digits for *format_spec* to round correctly."""
        match = _FORMAT_PRECISION.search(format_spec)
        if match is None:
            return self.to_decimal()
        places = int(match.group(1))
        presentation = match.group(2)
        if presentation in ("e", "E"):
            digits = places + 1
        elif presentation in ("f", "F", "%"):
            magnitude = self._divide_decimal(DOUBLE_EXTRACTION_PRECISION).adjusted() + 1
            digits = magnitude + places + (2 if presentation == "%" else 0)
        else:
            digits = places
        # ROUND_05UP keeps the second rounding inside format() correct.
        return self._divide_decimal(max(digits, 1) + 2, decimal.ROUND_05UP)

    def __reduce__(self):
        return (self.__class__, (self._numerator, self._denominator))

    def __copy__(self) -> "ExactRational":
        return self

    def __deepcopy__(self, memo) -> "ExactRational":
        return self

    # ------------------------------------------------------------------
    # Internal helpers
    @staticmethod
    def _coerce_operand(value: Any) -> Optional["ExactRational"]:
        if isinstance(value, ExactRational):
            return value
        if isinstance(value, numbers.Integral):
            return ExactRational.from_int(value)
        return None

    def _binary_operation(self, other: Any, op, *, reflected: bool = False) -> Any:
        if isinstance(other, np.ndarray):
            operands = coerce_array(other)
            if reflected:
                vectorised = np.vectorize(lambda x: op(x, self), otypes=[object])
            else:
                vectorised = np.vectorize(lambda x: op(self, x), otypes=[object])
            return vectorised(operands)
        other_rat = self._coerce_operand(other)
        if other_rat is None:
            return NotImplemented
        if reflected:
            return op(other_rat, self)
        return op(self, other_rat)

    @staticmethod
    def _coerce_power(value: Any) -> Optional[int]:
        if isinstance(value, numbers.Integral):
            return int(value)
        if isinstance(value, ExactRational):
            if value._denominator != 1:
                raise ValueError("Exponent must be an integer")
            return value._numerator
        return None

    # ------------------------------------------------------------------
    # Arithmetic operators
    def __add__(self, other: Any) -> Any:
        return self._binary_operation(other, _add)

    def __radd__(self, other: Any) -> Any:
        return self._binary_operation(other, _add, reflected=True)

    def __sub__(self, other: Any) -> Any:
        return self._binary_operation(other, _sub)

    def __rsub__(self, other: Any) -> Any:
        return self._binary_operation(other, _sub, reflected=True)

    def __mul__(self, other: Any) -> Any:
        return self._binary_operation(other, _mul)

    def __rmul__(self, other: Any) -> Any:
        return self._binary_operation(other, _mul, reflected=True)

    def __truediv__(self, other: Any) -> Any:
        return self._binary_operation(other, _truediv)

    def __rtruediv__(self, other: Any) -> Any:
        return self._binary_operation(other, _truediv, reflected=True)

    def __pow__(self, exponent: Any, modulo: Any = None) -> Any:
        if modulo is not None:
            return NotImplemented
        if isinstance(exponent, np.ndarray):
            vectorised = np.vectorize(lambda x: self.__pow__(x), otypes=[object])
            return vectorised(exponent)
        power = self._coerce_power(exponent)
        if power is None:
            return NotImplemented
        if power < 0 and self._numerator == 0:
            raise DivideByZeroError("Divide by zero: raising zero to negative exponent.")
        if power == 0:
            return ONE
        if power == 1:
            return self
        if power > 0:
            return ExactRational._create(self._numerator ** power, self._denominator ** power, True)
        positive = -power
        return ExactRational._create(self._denominator ** positive, self._numerator ** positive, True)

    def __neg__(self) -> "ExactRational":
        if self._numerator == 0:
            return self
        return ExactRational._create(-self._numerator, self._denominator, True)

    def __pos__(self) -> "ExactRational":
        return self

    def __abs__(self) -> "ExactRational":
        return -self if self._numerator < 0 else self

    # ------------------------------------------------------------------
    # Comparisons
    def compare_to(self, other: "ExactRational") -> int:
        """Return -1, 0 or 1 as ``self`` is less than, equal to or greater than *other*."""
        if not isinstance(other, ExactRational):
            raise TypeError(f"cannot compare ExactRational with {type(other)!r}")
        sign, other_sign = self.signum(), other.signum()
        if sign != other_sign:
            return -1 if sign < other_sign else 1
        if self._denominator == other._denominator:
            return _sign(self._numerator - other._numerator)
        return _sign(self._numerator * other._denominator - other._numerator * self._denominator)

    def compare_number(self, value: Any, kind: NumberKind) -> int:
        return self.compare_to(ExactRational.of(value, kind))

    def equals_number(self, value: Any, kind: NumberKind) -> bool:
        """Numeric equality against a raw *value* ingested as *kind*."""
        return self == ExactRational.of(value, kind)

    def min(self, other: "ExactRational") -> "ExactRational":
        return self if self.compare_to(other) <= 0 else other

    def max(self, other: "ExactRational") -> "ExactRational":
        return self if self.compare_to(other) >= 0 else other

    def _compare(self, other: Any, op) -> Any:
        if not isinstance(other, ExactRational):
            return NotImplemented
        return op(self.compare_to(other), 0)

    def __eq__(self, other: Any) -> Any:
        if not isinstance(other, ExactRational):
            return NotImplemented
        return self._numerator == other._numerator and self._denominator == other._denominator

    def __lt__(self, other: Any) -> Any:
        return self._compare(other, operator.lt)

    def __le__(self, other: Any) -> Any:
        return self._compare(other, operator.le)

    def __gt__(self, other: Any) -> Any:
        return self._compare(other, operator.gt)

    def __ge__(self, other: Any) -> Any:
        return self._compare(other, operator.ge)

    def __hash__(self) -> int:
        return hash((self._numerator, self._denominator))

    # ------------------------------------------------------------------
    # NumPy interoperability
    _UFUNC_DISPATCH = {
        np.add: operator.add,
        np.subtract: operator.sub,
        np.multiply: operator.mul,
        np.divide: operator.truediv,
        np.true_divide: operator.truediv,
        np.negative: operator.neg,
        np.positive: operator.pos,
        np.absolute: abs,
        np.power: operator.pow,
        np.reciprocal: lambda a: a.reciprocal(),
        np.sign: lambda a: ExactRational.from_int(a.signum()),
        np.floor: lambda a: ExactRational.from_int(math.floor(a)),
        np.ceil: lambda a: ExactRational.from_int(math.ceil(a)),
        np.trunc: lambda a: ExactRational.from_int(math.trunc(a)),
    }

    def __array_ufunc__(self, ufunc, method, *inputs, **kwargs):
        if method != "__call__":
            return NotImplemented
        if kwargs.get("out") is not None:
            raise NotImplementedError("`out` argument is not supported for ExactRational ufuncs")
        op = self._UFUNC_DISPATCH.get(ufunc)
        if op is None:
            return NotImplemented

        coerced = []
        has_array = False
        for value in inputs:
            if isinstance(value, np.ndarray):
                coerced.append(coerce_array(value))
                has_array = True
                continue
            operand = self._coerce_operand(value)
            if operand is None:
                return NotImplemented
            coerced.append(operand)
        if has_array:
            vectorised = np.vectorize(lambda *args: op(*args), otypes=[object])
            return vectorised(*coerced)
        return op(*coerced)


def _add(a: ExactRational, b: ExactRational) -> ExactRational:
    if b._denominator == 1:
        # n1/d1 + n2 = (n1 + d1*n2)/d1
        return ExactRational._create(a._numerator + a._denominator * b._numerator, a._denominator, False)
    return ExactRational._create(
        a._numerator * b._denominator + a._denominator * b._numerator,
        a._denominator * b._denominator,
        False,
    )


def _sub(a: ExactRational, b: ExactRational) -> ExactRational:
    if b._denominator == 1:
        return ExactRational._create(a._numerator - a._denominator * b._numerator, a._denominator, False)
    return ExactRational._create(
        a._numerator * b._denominator - a._denominator * b._numerator,
        a._denominator * b._denominator,
        False,
    )


def _mul(a: ExactRational, b: ExactRational) -> ExactRational:
    return ExactRational._create(a._numerator * b._numerator, a._denominator * b._denominator, False)


def _truediv(a: ExactRational, b: ExactRational) -> ExactRational:
    if b._numerator == 0:
        raise DivideByZeroError("Divide by zero")
    return ExactRational._create(a._numerator * b._denominator, a._denominator * b._numerator, False)


ZERO = ExactRational._create(0, 1, True)
ONE = ExactRational._create(1, 1, True)
TEN = ExactRational._create(10, 1, True)

ExactRational.ZERO = ZERO
ExactRational.ONE = ONE
ExactRational.TEN = TEN


def coerce_array(values: np.ndarray, kind: Optional[NumberKind] = None) -> np.ndarray:
    """Return an object array of :class:`ExactRational` shaped like *values*.

    The element kind comes from *kind* or, when omitted, from the array dtype.
    Object arrays may mix :class:`ExactRational` and integer elements.
    """
    if kind is None:
        kind = kind_for_dtype(values.dtype)

    def convert(item: Any) -> ExactRational:
        return ExactRational.of(item, kind)

    if values.size == 0:
        return np.empty(values.shape, dtype=object)
    vectorised = np.vectorize(convert, otypes=[object])
    return vectorised(values)


def rationalize(value: Any, kind: NumberKind = NumberKind.RATIONAL) -> ExactRational:
    """Public helper to convert *value* of the given *kind* into :class:`ExactRational`."""

    return ExactRational.of(value, kind)


__all__ = [
    "ExactRational",
    "ZERO",
    "ONE",
    "TEN",
    "DEFAULT_ROUNDING",
    "DOUBLE_DIGITS",
    "FLOAT_DIGITS",
    "DOUBLE_EXTRACTION_PRECISION",
    "FLOAT_EXTRACTION_PRECISION",
    "MAX_TEXT_EXPONENT",
    "coerce_array",
    "rationalize",
]
