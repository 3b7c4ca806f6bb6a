"""
Тесты для модуля Native Numerics

Проверяет:
1. Wrap/saturate в диапазон int64
2. Нативное усечение float → int64
3. IEEE-754 деление
4. Конверсии int/Fraction → double с переполнением
5. Decimal-контекст BigFloat (глобальный контекст не изменяется)
"""

import decimal
import math
from decimal import Decimal
from fractions import Fraction

import pytest

from numtower.core.math.native import (
    INT64_INDEFINITE,
    INT64_MAX,
    INT64_MIN,
    bigfloat_context,
    decimal_digits,
    decimal_from_rational,
    fits_int64,
    ieee_divide,
    int_to_float,
    rational_to_float,
    saturate_int64,
    truncate_float_to_int64,
    wrap_int64,
)

# =============================================================================
# ТЕСТЫ INT64
# =============================================================================


class TestWrapInt64:
    """Тесты для wrap_int64"""

    def test_in_range_unchanged(self) -> None:
        """Значения в диапазоне не изменяются"""
        assert wrap_int64(5) == 5
        assert wrap_int64(-1) == -1
        assert wrap_int64(INT64_MAX) == INT64_MAX
        assert wrap_int64(INT64_MIN) == INT64_MIN

    def test_overflow_wraps_to_min(self) -> None:
        """MAX + 1 переполняется в MIN"""
        assert wrap_int64(INT64_MAX + 1) == INT64_MIN

    def test_underflow_wraps_to_max(self) -> None:
        """MIN - 1 переполняется в MAX"""
        assert wrap_int64(INT64_MIN - 1) == INT64_MAX

    def test_modulo_two_pow_64(self) -> None:
        """Обёртка по модулю 2**64"""
        assert wrap_int64(2 ** 64 + 7) == 7
        assert wrap_int64(2 ** 64) == 0
        assert wrap_int64(-(2 ** 64) - 3) == -3


class TestSaturateInt64:
    """Тесты для saturate_int64"""

    def test_in_range_unchanged(self) -> None:
        assert saturate_int64(42) == 42

    def test_saturates_at_bounds(self) -> None:
        assert saturate_int64(2 ** 70) == INT64_MAX
        assert saturate_int64(-(2 ** 70)) == INT64_MIN

    def test_decimal_truncates_toward_zero(self) -> None:
        assert saturate_int64(Decimal("2.9")) == 2
        assert saturate_int64(Decimal("-2.9")) == -2
        assert saturate_int64(Decimal("9223372036854775807.5")) == INT64_MAX
        assert saturate_int64(Decimal("-9223372036854775808.5")) == INT64_MIN

    def test_decimal_huge_exponent_saturates(self) -> None:
        """Огромная экспонента насыщается без построения целого"""
        assert saturate_int64(Decimal("1E+20000000")) == INT64_MAX
        assert saturate_int64(Decimal("-1E+20000000")) == INT64_MIN
        assert saturate_int64(Decimal("Infinity")) == INT64_MAX
        assert saturate_int64(Decimal("-Infinity")) == INT64_MIN


class TestFitsInt64:
    """Тесты для fits_int64"""

    def test_bounds(self) -> None:
        assert fits_int64(INT64_MAX)
        assert fits_int64(INT64_MIN)
        assert not fits_int64(INT64_MAX + 1)
        assert not fits_int64(INT64_MIN - 1)


class TestTruncateFloatToInt64:
    """Тесты для truncate_float_to_int64"""

    def test_truncates_toward_zero(self) -> None:
        """Усечение к нулю в обе стороны"""
        assert truncate_float_to_int64(2.9) == 2
        assert truncate_float_to_int64(-2.9) == -2
        assert truncate_float_to_int64(-0.5) == 0

    def test_large_in_range_value(self) -> None:
        assert truncate_float_to_int64(9.2e18) == 9200000000000000000

    def test_non_finite_gives_indefinite(self) -> None:
        """NaN и ±Inf дают INT64_INDEFINITE"""
        assert truncate_float_to_int64(math.nan) == INT64_INDEFINITE
        assert truncate_float_to_int64(math.inf) == INT64_INDEFINITE
        assert truncate_float_to_int64(-math.inf) == INT64_INDEFINITE

    def test_out_of_range_gives_indefinite(self) -> None:
        """Переполнение не проверяется: значение вне int64 → INT64_INDEFINITE"""
        assert truncate_float_to_int64(1e19) == INT64_INDEFINITE
        assert truncate_float_to_int64(-1e30) == INT64_INDEFINITE


# =============================================================================
# ТЕСТЫ КОНВЕРСИЙ В DOUBLE
# =============================================================================


class TestDoubleConversions:
    """Тесты для int_to_float и rational_to_float"""

    def test_int_to_float_exact(self) -> None:
        assert int_to_float(3) == 3.0

    def test_int_to_float_overflow_to_infinity(self) -> None:
        """Переполнение даёт ±Inf вместо OverflowError"""
        assert int_to_float(10 ** 400) == math.inf
        assert int_to_float(-(10 ** 400)) == -math.inf

    def test_rational_to_float_nearest(self) -> None:
        assert rational_to_float(Fraction(1, 4)) == 0.25
        assert rational_to_float(Fraction(1, 3)) == 1 / 3

    def test_rational_to_float_overflow_to_infinity(self) -> None:
        assert rational_to_float(Fraction(10 ** 400, 3)) == math.inf
        assert rational_to_float(Fraction(-(10 ** 400), 3)) == -math.inf


# =============================================================================
# ТЕСТЫ IEEE ДЕЛЕНИЯ
# =============================================================================


class TestIeeeDivide:
    """Тесты для ieee_divide"""

    def test_regular_division(self) -> None:
        assert ieee_divide(6.0, 3.0) == 2.0

    def test_division_by_zero_signed_infinity(self) -> None:
        """x / ±0.0 → ±Inf по правилу знаков"""
        assert ieee_divide(1.0, 0.0) == math.inf
        assert ieee_divide(-1.0, 0.0) == -math.inf
        assert ieee_divide(1.0, -0.0) == -math.inf
        assert ieee_divide(-1.0, -0.0) == math.inf

    def test_infinity_by_zero(self) -> None:
        assert ieee_divide(math.inf, 0.0) == math.inf

    def test_zero_by_zero_is_nan(self) -> None:
        """0 / 0 и NaN / 0 → NaN"""
        assert math.isnan(ieee_divide(0.0, 0.0))
        assert math.isnan(ieee_divide(-0.0, 0.0))
        assert math.isnan(ieee_divide(math.nan, 0.0))

    def test_never_raises(self) -> None:
        """Деление на ноль не бросает ZeroDivisionError"""
        for numerator in (1.0, -1.0, 0.0, math.nan, math.inf):
            ieee_divide(numerator, 0.0)


# =============================================================================
# ТЕСТЫ DECIMAL КОНТЕКСТА
# =============================================================================


class TestBigFloatContext:
    """Тесты для bigfloat_context и decimal_from_rational"""

    def test_precision_applied(self) -> None:
        with bigfloat_context(5) as ctx:
            assert ctx.prec == 5
            assert Decimal(1) / Decimal(3) == Decimal("0.33333")

    def test_global_context_untouched(self) -> None:
        """Глобальный decimal-контекст не изменяется"""
        before = decimal.getcontext().prec
        with bigfloat_context(100):
            pass
        assert decimal.getcontext().prec == before

    def test_division_by_zero_gives_infinity(self) -> None:
        with bigfloat_context(10):
            assert Decimal(1) / Decimal(0) == Decimal("Infinity")
            assert Decimal(-1) / Decimal(0) == Decimal("-Infinity")

    def test_nan_result_raises(self) -> None:
        with pytest.raises(decimal.InvalidOperation):
            with bigfloat_context(10):
                Decimal(0) / Decimal(0)

    def test_decimal_from_rational(self) -> None:
        assert decimal_from_rational(Fraction(1, 3), 5) == Decimal("0.33333")
        assert decimal_from_rational(Fraction(1, 4), 5) == Decimal("0.25")

    def test_decimal_digits(self) -> None:
        assert decimal_digits(0) == 1
        assert decimal_digits(-12345) == 5
        assert decimal_digits(10 ** 50) == 51

    def test_decimal_digits_beyond_str_limit(self) -> None:
        """Больше 4300 цифр: подсчёт без int → str"""
        assert decimal_digits(10 ** 5000) == 5001
        assert decimal_digits(10 ** 5000 - 1) == 5000
        assert decimal_digits(-(10 ** 9000) - 7) == 9001

    @pytest.mark.parametrize("exponent", [1, 15, 16, 17, 300, 4299, 4300, 4301])
    def test_decimal_digits_at_powers_of_ten(self, exponent: int) -> None:
        assert decimal_digits(10 ** exponent - 1) == exponent
        assert decimal_digits(10 ** exponent) == exponent + 1
