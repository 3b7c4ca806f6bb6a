"""
Native Numerics — машинные примитивы числовой башни

Модуль содержит низкоуровневые операции, которые воспроизводят поведение
машинных типов поверх Python-чисел:
- Обёртка (wrap) и насыщение (saturate) в диапазон int64
- Нативное усечение float → int64 (как CVTTSD2SI на x86-64)
- IEEE-754 деление для float (Python бросает ZeroDivisionError, IEEE — нет)
- Безопасная конверсия int/Fraction → float с переполнением в ±Inf
- Decimal-контекст для арифметики BigFloat

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Глобальный decimal-контекст никогда не изменяется (только localcontext)
2. Float деление никогда не бросает исключение
3. Все операции детерминированы и не имеют состояния
"""

import decimal
import math
from contextlib import contextmanager
from decimal import Decimal
from fractions import Fraction
from typing import Final, Iterator

# =============================================================================
# INT64 ДИАПАЗОН
# =============================================================================

INT64_BITS: Final[int] = 64
INT64_MIN: Final[int] = -(2 ** 63)
INT64_MAX: Final[int] = 2 ** 63 - 1

# Результат усечения float → int64 вне диапазона / NaN / Inf
# ("integer indefinite" на x86-64)
INT64_INDEFINITE: Final[int] = INT64_MIN

_INT64_MODULUS: Final[int] = 2 ** INT64_BITS


# =============================================================================
# BIGFLOAT ПАРАМЕТРЫ
# =============================================================================

# Точность BigFloat по умолчанию (значащие десятичные цифры, как decimal128)
DEFAULT_BIGFLOAT_PRECISION: Final[int] = 34

# Верхняя граница точности, принимаемая конфигурацией
MAX_BIGFLOAT_PRECISION: Final[int] = 10_000

_LOG10_2: Final[float] = math.log10(2)


# =============================================================================
# INT64: WRAP / SATURATE
# =============================================================================


def fits_int64(value: int) -> bool:
    """Проверка, помещается ли целое в int64."""
    return INT64_MIN <= value <= INT64_MAX


def wrap_int64(value: int) -> int:
    """
    Сужение целого до int64 с переполнением (two's complement).

    Используется для арифметики Integer и для BigInteger → Integer.

    Args:
        value: Произвольное целое

    Returns:
        value по модулю 2**64, приведённое к знаковому диапазону

    Examples:
        >>> wrap_int64(5)
        5
        >>> wrap_int64(2 ** 63)
        -9223372036854775808
        >>> wrap_int64(2 ** 64 + 7)
        7
    """
    wrapped = value % _INT64_MODULUS
    if wrapped > INT64_MAX:
        wrapped -= _INT64_MODULUS
    return wrapped


def saturate_int64(value: int | Decimal) -> int:
    """
    Сужение до int64 с усечением к нулю и насыщением на границах.

    Decimal (включая ±Infinity) сравнивается с границами до конверсии в int.

    Examples:
        >>> saturate_int64(2 ** 70)
        9223372036854775807
        >>> saturate_int64(-(2 ** 70))
        -9223372036854775808
    """
    if value > INT64_MAX:
        return INT64_MAX
    if value < INT64_MIN:
        return INT64_MIN
    return int(value)


def truncate_float_to_int64(value: float) -> int:
    """
    Нативное усечение float → int64 (toward zero).

    Переполнение не проверяется: NaN, ±Inf и значения вне диапазона int64
    дают INT64_INDEFINITE, как аппаратное усечение на x86-64.

    Examples:
        >>> truncate_float_to_int64(2.9)
        2
        >>> truncate_float_to_int64(-2.9)
        -2
        >>> truncate_float_to_int64(float('nan'))
        -9223372036854775808
    """
    if not math.isfinite(value):
        return INT64_INDEFINITE

    truncated = int(value)
    if not fits_int64(truncated):
        return INT64_INDEFINITE
    return truncated


# =============================================================================
# КОНВЕРСИИ В DOUBLE
# =============================================================================


def int_to_float(value: int) -> float:
    """
    Конверсия целого в ближайший double, ±Inf при переполнении.

    Python float(int) бросает OverflowError для > ~1.8e308.
    """
    try:
        return float(value)
    except OverflowError:
        return math.copysign(math.inf, value)


def rational_to_float(value: Fraction) -> float:
    """
    Точное частное, округлённое до ближайшего double.

    Examples:
        >>> rational_to_float(Fraction(1, 4))
        0.25
        >>> rational_to_float(Fraction(10 ** 400, 3))
        inf
    """
    try:
        return float(value)
    except OverflowError:
        return math.copysign(math.inf, value)


# =============================================================================
# IEEE-754 ДЕЛЕНИЕ
# =============================================================================


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Деление double по правилам IEEE-754.

    В отличие от оператора `/` никогда не бросает ZeroDivisionError:
    - x / ±0.0 (x != 0) → ±Inf (знак = произведение знаков)
    - 0 / 0, NaN / 0 → NaN

    Examples:
        >>> ieee_divide(1.0, 0.0)
        inf
        >>> ieee_divide(1.0, -0.0)
        -inf
        >>> math.isnan(ieee_divide(0.0, 0.0))
        True
    """
    if denominator != 0.0:
        return numerator / denominator

    if numerator == 0.0 or math.isnan(numerator):
        return math.nan

    sign = math.copysign(1.0, numerator) * math.copysign(1.0, denominator)
    return math.copysign(math.inf, sign)


# =============================================================================
# DECIMAL КОНТЕКСТ ДЛЯ BIGFLOAT
# =============================================================================


def decimal_digits(value: int) -> int:
    """
    Количество десятичных цифр в abs(value) (не менее 1).

    Считается через bit_length без int → str: CPython ограничивает
    такую конверсию 4300 цифрами (sys.set_int_max_str_digits).

    Examples:
        >>> decimal_digits(10 ** 5000)
        5001
    """
    magnitude = abs(value)
    if magnitude == 0:
        return 1

    # Оценка снизу по числу бит, затем поправка на ±1
    digits = int((magnitude.bit_length() - 1) * _LOG10_2) + 1
    if magnitude >= 10 ** digits:
        digits += 1
    elif magnitude < 10 ** (digits - 1):
        digits -= 1
    return digits


@contextmanager
def bigfloat_context(precision: int) -> Iterator[decimal.Context]:
    """
    Локальный decimal-контекст для одной операции BigFloat.

    - Округление half-even (round-to-nearest-even)
    - Деление ненулевого на ноль → signed Infinity (ловушка DivisionByZero снята)
    - Результаты NaN → decimal.InvalidOperation (ловушка остаётся)
    - Расширенный диапазон экспоненты

    Args:
        precision: Количество значащих десятичных цифр

    Yields:
        Активный локальный контекст
    """
    with decimal.localcontext() as ctx:
        ctx.prec = precision
        ctx.rounding = decimal.ROUND_HALF_EVEN
        ctx.Emax = decimal.MAX_EMAX
        ctx.Emin = decimal.MIN_EMIN
        ctx.traps[decimal.DivisionByZero] = False
        ctx.traps[decimal.InvalidOperation] = True
        ctx.traps[decimal.Overflow] = False
        yield ctx


def decimal_from_rational(value: Fraction, precision: int) -> Decimal:
    """Частное numerator / denominator, вычисленное с заданной точностью."""
    with bigfloat_context(precision):
        return Decimal(value.numerator) / Decimal(value.denominator)
