import decimal
import random
import unittest
from decimal import Decimal

import numpy as np

from exactrational import (
    DivideByZeroError,
    ExactRational,
    RoundingMode,
    RoundingRequiredError,
    UnsupportedModeError,
)
from exactrational.rounding import round_quotient, saturate, truncated_divmod

R = RoundingMode


class RoundingTableTests(unittest.TestCase):
    def test_half_modes_on_exact_halves(self):
        seven_halves = ExactRational(7, 2)
        self.assertEqual(seven_halves.round(R.HALF_UP), 4)
        self.assertEqual(seven_halves.round(R.HALF_DOWN), 3)
        self.assertEqual(seven_halves.round(R.HALF_EVEN), 4)
        self.assertEqual(ExactRational(5, 2).round(R.HALF_EVEN), 2)

    def test_half_modes_on_negative_halves(self):
        value = ExactRational(-7, 2)
        self.assertEqual(value.round(R.HALF_UP), -4)
        self.assertEqual(value.round(R.HALF_DOWN), -3)
        self.assertEqual(value.round(R.HALF_EVEN), -4)
        self.assertEqual(ExactRational(-5, 2).round(R.HALF_EVEN), -2)
        self.assertEqual(ExactRational(-1, 2).round(R.HALF_EVEN), 0)

    def test_half_modes_away_from_the_midpoint(self):
        self.assertEqual(ExactRational(5, 3).round(R.HALF_DOWN), 2)
        self.assertEqual(ExactRational(4, 3).round(R.HALF_UP), 1)
        self.assertEqual(ExactRational(-5, 3).round(R.HALF_UP), -2)
        self.assertEqual(ExactRational(-4, 3).round(R.HALF_EVEN), -1)

    def test_directed_modes(self):
        self.assertEqual(ExactRational(7, 3).round(R.UP), 3)
        self.assertEqual(ExactRational(7, 3).round(R.DOWN), 2)
        self.assertEqual(ExactRational(-7, 3).round(R.UP), -3)
        self.assertEqual(ExactRational(-7, 3).round(R.DOWN), -2)
        self.assertEqual(ExactRational(7, 3).round(R.CEILING), 3)
        self.assertEqual(ExactRational(7, 3).round(R.FLOOR), 2)
        self.assertEqual(ExactRational(-7, 3).round(R.CEILING), -2)
        self.assertEqual(ExactRational(-7, 3).round(R.FLOOR), -3)

    def test_values_between_minus_one_and_zero(self):
        value = ExactRational(-1, 3)
        self.assertEqual(value.round(R.FLOOR), -1)
        self.assertEqual(value.round(R.CEILING), 0)
        self.assertEqual(value.round(R.UP), -1)
        self.assertEqual(value.round(R.DOWN), 0)

    def test_integral_values_in_every_mode(self):
        value = ExactRational(6, 3)
        for mode in RoundingMode:
            self.assertEqual(value.round(mode), 2)

    def test_unnecessary_on_fraction(self):
        with self.assertRaises(RoundingRequiredError):
            ExactRational(1, 3).round(R.UNNECESSARY)
        with self.assertRaises(ArithmeticError):
            ExactRational(1, 2).round(R.UNNECESSARY)

    def test_default_is_half_up(self):
        self.assertEqual(ExactRational(5, 2).round(), 3)
        self.assertEqual(ExactRational(-5, 2).round(), -3)

    def test_builtin_round_is_half_even(self):
        self.assertEqual(round(ExactRational(5, 2)), 2)
        self.assertEqual(round(ExactRational(7, 2)), 4)
        self.assertEqual(round(ExactRational(-7, 3)), -2)
        self.assertIsInstance(round(ExactRational(7, 2)), int)

    def test_builtin_round_to_decimal_places(self):
        self.assertEqual(round(ExactRational(1234567, 1000), 2), ExactRational(123457, 100))
        self.assertEqual(round(ExactRational(-1, 3), 3), ExactRational(-333, 1000))
        self.assertEqual(round(ExactRational(5, 8), 2), ExactRational(31, 50))
        self.assertEqual(round(ExactRational(1250), -2), ExactRational(1200))
        self.assertEqual(round(ExactRational(1350), -2), ExactRational(1400))
        self.assertEqual(round(ExactRational(7, 2), 0), ExactRational(4))

    def test_decimal_constants_accepted(self):
        self.assertEqual(ExactRational(5, 2).round(decimal.ROUND_HALF_EVEN), 2)
        self.assertIs(RoundingMode.coerce(decimal.ROUND_FLOOR), R.FLOOR)

    def test_unknown_mode(self):
        with self.assertRaises(UnsupportedModeError):
            ExactRational(1, 3).round("sideways")

    def test_matches_decimal_quantize(self):
        rng = random.Random(808)
        context = decimal.Context(prec=100)
        modes = [mode for mode in RoundingMode if mode is not R.UNNECESSARY]
        for _ in range(300):
            denominator = 2 ** rng.randint(0, 6) * 5 ** rng.randint(0, 4)
            value = ExactRational(rng.randint(-10**12, 10**12), denominator)
            exact = value.to_decimal()
            for mode in modes:
                expected = exact.quantize(Decimal(1), rounding=mode.value, context=context)
                self.assertEqual(value.round(mode), int(expected), msg=f"{value} {mode}")


class HelperTests(unittest.TestCase):
    def test_truncated_divmod(self):
        self.assertEqual(truncated_divmod(7, 2), (3, 1))
        self.assertEqual(truncated_divmod(-7, 2), (-3, -1))
        self.assertEqual(truncated_divmod(-6, 3), (-2, 0))

    def test_round_quotient(self):
        self.assertEqual(round_quotient(-3, 2, R.HALF_EVEN), -2)
        self.assertEqual(round_quotient(11, 4, R.HALF_DOWN), 3)

    def test_saturate(self):
        self.assertEqual(saturate(10 ** 20, np.int64), np.iinfo(np.int64).max)
        self.assertEqual(saturate(-(10 ** 20), np.int16), -32768)
        self.assertEqual(saturate(12, np.int8), 12)
        self.assertIsInstance(saturate(12, np.int8), np.int8)

    def test_division_errors_are_zero_division_errors(self):
        self.assertTrue(issubclass(DivideByZeroError, ZeroDivisionError))


if __name__ == "__main__":  # pragma: no cover - direct execution helper
    unittest.main()
