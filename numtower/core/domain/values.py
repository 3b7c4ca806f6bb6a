"""
Numeric Values — пять неизменяемых представлений числовой башни

Каждое значение реализует протокол конверсии Number: to_integer, to_float,
to_big_integer, to_big_float, to_rational.

Представления:
- Integer     — машинное целое (int64), точное
- Float       — IEEE-754 double (NaN/±Inf допустимы)
- BigInteger  — целое произвольной точности
- BigFloat    — Decimal произвольной точности (±Inf допустимы, NaN нет)
- Rational    — Fraction, всегда несократимая, знаменатель > 0

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все значения frozen: операции возвращают новые значения
2. Rational всегда несократимая (гарантирует fractions.Fraction)
3. ConversionPolicy.LEGACY воспроизводит исторические потери точности:
   - BigInteger → Float через int64
   - BigFloat → Rational через Float
   - Rational → Integer/BigInteger/BigFloat через Float
   ConversionPolicy.EXACT заменяет их прямыми конверсиями (явное
   изменение поведения, только по запросу)
"""

import math
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from typing import Any, ClassVar, Protocol, runtime_checkable

from numtower.core.domain.kinds import NumberKind
from numtower.core.errors import DivideByZeroError, NotRepresentableError
from numtower.core.math.native import (
    DEFAULT_BIGFLOAT_PRECISION,
    INT64_MAX,
    INT64_MIN,
    decimal_digits,
    decimal_from_rational,
    fits_int64,
    int_to_float,
    rational_to_float,
    saturate_int64,
    truncate_float_to_int64,
    wrap_int64,
)


# =============================================================================
# ENUMS
# =============================================================================


class ConversionPolicy(str, Enum):
    """Политика конверсий с потерей точности"""

    LEGACY = "legacy"
    EXACT = "exact"


# =============================================================================
# ПРОТОКОЛ КОНВЕРСИИ
# =============================================================================


@runtime_checkable
class Number(Protocol):
    """Контракт, которому удовлетворяет любое числовое значение."""

    def to_integer(self, *, policy: ConversionPolicy = ConversionPolicy.LEGACY) -> "Integer":
        ...

    def to_float(self, *, policy: ConversionPolicy = ConversionPolicy.LEGACY) -> "Float":
        ...

    def to_big_integer(
        self, *, policy: ConversionPolicy = ConversionPolicy.LEGACY
    ) -> "BigInteger":
        ...

    def to_big_float(
        self,
        *,
        policy: ConversionPolicy = ConversionPolicy.LEGACY,
        precision: int = DEFAULT_BIGFLOAT_PRECISION,
    ) -> "BigFloat":
        ...

    def to_rational(self, *, policy: ConversionPolicy = ConversionPolicy.LEGACY) -> "Rational":
        ...


# =============================================================================
# ВАЛИДАЦИЯ PAYLOAD
# =============================================================================


def _require_int(value: Any, owner: str) -> None:
    # bool: подкласс int, но не число башни
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{owner} value must be int, got {type(value).__name__}")


def _require_finite(value: float, target: NumberKind) -> None:
    if not math.isfinite(value):
        raise NotRepresentableError(f"{value!r} cannot be converted to {target.value}")


# =============================================================================
# БАЗОВЫЙ КЛАСС
# =============================================================================


class NumberValue:
    """
    Общая часть пяти значений: Python-операторы и is_zero.

    Операторы делегируют в числовую башню по умолчанию
    (numtower.tower.dispatcher), поэтому `Integer(1) / Integer(3)`
    продвигается так же, как `divide(Integer(1), Integer(3))`.
    Native Python числа справа/слева конвертируются через from_python.
    """

    __slots__ = ()

    kind: ClassVar[NumberKind]

    def is_zero(self) -> bool:
        from numtower.core.math.promotion import table_for

        return table_for(self.kind).is_zero(self)

    # Арифметика

    def __add__(self, other: Any) -> Any:
        return _apply("add", self, other)

    def __radd__(self, other: Any) -> Any:
        return _apply("add", other, self)

    def __sub__(self, other: Any) -> Any:
        return _apply("subtract", self, other)

    def __rsub__(self, other: Any) -> Any:
        return _apply("subtract", other, self)

    def __mul__(self, other: Any) -> Any:
        return _apply("multiply", self, other)

    def __rmul__(self, other: Any) -> Any:
        return _apply("multiply", other, self)

    def __truediv__(self, other: Any) -> Any:
        return _apply("divide", self, other)

    def __rtruediv__(self, other: Any) -> Any:
        return _apply("divide", other, self)

    # Сравнения (>= выводится отрицанием <)

    def __lt__(self, other: Any) -> Any:
        return _apply("lt", self, other)

    def __le__(self, other: Any) -> Any:
        return _apply("lte", self, other)

    def __gt__(self, other: Any) -> Any:
        return _apply("gt", self, other)

    def __ge__(self, other: Any) -> Any:
        return _apply("gte", self, other)


def _as_operand(obj: Any) -> "NumberValue | None":
    if isinstance(obj, NumberValue):
        return obj
    try:
        return from_python(obj)
    except TypeError:
        return None


def _apply(operation: str, x: Any, y: Any) -> Any:
    from numtower.tower import dispatcher

    left = _as_operand(x)
    right = _as_operand(y)
    if left is None or right is None:
        return NotImplemented
    return getattr(dispatcher, operation)(left, right)


# =============================================================================
# INTEGER
# =============================================================================


@dataclass(frozen=True)
class Integer(NumberValue):
    """Машинное целое int64."""

    value: int

    kind: ClassVar[NumberKind] = NumberKind.INTEGER

    def __post_init__(self) -> None:
        _require_int(self.value, "Integer")
        if not fits_int64(self.value):
            raise ValueError(
                f"Integer value must be in int64 range [{INT64_MIN}, {INT64_MAX}], "
                f"got {self.value}"
            )

    def to_integer(self, *, policy: ConversionPolicy = ConversionPolicy.LEGACY) -> "Integer":
        return self

    def to_float(self, *, policy: ConversionPolicy = ConversionPolicy.LEGACY) -> "Float":
        return Float(float(self.value))

    def to_big_integer(
        self, *, policy: ConversionPolicy = ConversionPolicy.LEGACY
    ) -> "BigInteger":
        return BigInteger(self.value)

    def to_big_float(
        self,
        *,
        policy: ConversionPolicy = ConversionPolicy.LEGACY,
        precision: int = DEFAULT_BIGFLOAT_PRECISION,
    ) -> "BigFloat":
        return BigFloat(Decimal(self.value), max(precision, decimal_digits(self.value)))

    def to_rational(self, *, policy: ConversionPolicy = ConversionPolicy.LEGACY) -> "Rational":
        return Rational(Fraction(self.value))


# =============================================================================
# FLOAT
# =============================================================================


@dataclass(frozen=True)
class Float(NumberValue):
    """IEEE-754 double."""

    value: float

    kind: ClassVar[NumberKind] = NumberKind.FLOAT

    def __post_init__(self) -> None:
        if not isinstance(self.value, float):
            raise TypeError(f"Float value must be float, got {type(self.value).__name__}")

    def to_integer(self, *, policy: ConversionPolicy = ConversionPolicy.LEGACY) -> "Integer":
        return Integer(truncate_float_to_int64(self.value))

    def to_float(self, *, policy: ConversionPolicy = ConversionPolicy.LEGACY) -> "Float":
        return self

    def to_big_integer(
        self, *, policy: ConversionPolicy = ConversionPolicy.LEGACY
    ) -> "BigInteger":
        if policy is ConversionPolicy.EXACT:
            _require_finite(self.value, NumberKind.BIG_INTEGER)
            return BigInteger(int(self.value))
        return BigInteger(truncate_float_to_int64(self.value))

    def to_big_float(
        self,
        *,
        policy: ConversionPolicy = ConversionPolicy.LEGACY,
        precision: int = DEFAULT_BIGFLOAT_PRECISION,
    ) -> "BigFloat":
        if math.isnan(self.value):
            raise NotRepresentableError("NaN cannot be converted to big_float")
        return BigFloat(Decimal(self.value), precision)

    def to_rational(self, *, policy: ConversionPolicy = ConversionPolicy.LEGACY) -> "Rational":
        # Точное двоичное значение double, не десятичное приближение
        _require_finite(self.value, NumberKind.RATIONAL)
        return Rational(Fraction(self.value))


# =============================================================================
# BIG INTEGER
# =============================================================================


@dataclass(frozen=True)
class BigInteger(NumberValue):
    """Целое произвольной точности."""

    value: int

    kind: ClassVar[NumberKind] = NumberKind.BIG_INTEGER

    def __post_init__(self) -> None:
        _require_int(self.value, "BigInteger")

    def to_integer(self, *, policy: ConversionPolicy = ConversionPolicy.LEGACY) -> "Integer":
        return Integer(wrap_int64(self.value))

    def to_float(self, *, policy: ConversionPolicy = ConversionPolicy.LEGACY) -> "Float":
        if policy is ConversionPolicy.EXACT:
            return Float(int_to_float(self.value))
        # Через int64: неверно для модулей > 2**63
        return Float(float(wrap_int64(self.value)))

    def to_big_integer(
        self, *, policy: ConversionPolicy = ConversionPolicy.LEGACY
    ) -> "BigInteger":
        return self

    def to_big_float(
        self,
        *,
        policy: ConversionPolicy = ConversionPolicy.LEGACY,
        precision: int = DEFAULT_BIGFLOAT_PRECISION,
    ) -> "BigFloat":
        return BigFloat(Decimal(self.value), max(precision, decimal_digits(self.value)))

    def to_rational(self, *, policy: ConversionPolicy = ConversionPolicy.LEGACY) -> "Rational":
        return Rational(Fraction(self.value))


# =============================================================================
# BIG FLOAT
# =============================================================================


@dataclass(frozen=True)
class BigFloat(NumberValue):
    """
    Decimal произвольной точности.

    precision — количество значащих десятичных цифр, с которым значение
    участвует в арифметике (результат берёт max точностей операндов).
    """

    value: Decimal
    precision: int = DEFAULT_BIGFLOAT_PRECISION

    kind: ClassVar[NumberKind] = NumberKind.BIG_FLOAT

    def __post_init__(self) -> None:
        if not isinstance(self.value, Decimal):
            raise TypeError(f"BigFloat value must be Decimal, got {type(self.value).__name__}")
        if self.value.is_nan():
            raise ValueError("BigFloat value cannot be NaN")
        _require_int(self.precision, "BigFloat precision")
        if self.precision < 1:
            raise ValueError(f"BigFloat precision must be positive, got {self.precision}")

    @classmethod
    def of(
        cls, value: int | float | Decimal, precision: int = DEFAULT_BIGFLOAT_PRECISION
    ) -> "BigFloat":
        """
        Построение BigFloat из int, float или Decimal.

        Examples:
            >>> BigFloat.of(1)
            BigFloat(value=Decimal('1'), precision=34)
        """
        if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
            raise TypeError(f"Cannot build BigFloat from {type(value).__name__}")
        if isinstance(value, float) and math.isnan(value):
            raise NotRepresentableError("NaN cannot be converted to big_float")
        return cls(Decimal(value), precision)

    def to_integer(self, *, policy: ConversionPolicy = ConversionPolicy.LEGACY) -> "Integer":
        # Усечение с насыщением на границах int64
        return Integer(saturate_int64(self.value))

    def to_float(self, *, policy: ConversionPolicy = ConversionPolicy.LEGACY) -> "Float":
        return Float(float(self.value))

    def to_big_integer(
        self, *, policy: ConversionPolicy = ConversionPolicy.LEGACY
    ) -> "BigInteger":
        if self.value.is_infinite():
            raise NotRepresentableError(f"{self.value} cannot be converted to big_integer")
        return BigInteger(int(self.value))

    def to_big_float(
        self,
        *,
        policy: ConversionPolicy = ConversionPolicy.LEGACY,
        precision: int = DEFAULT_BIGFLOAT_PRECISION,
    ) -> "BigFloat":
        return self

    def to_rational(self, *, policy: ConversionPolicy = ConversionPolicy.LEGACY) -> "Rational":
        if policy is ConversionPolicy.EXACT:
            if self.value.is_infinite():
                raise NotRepresentableError(f"{self.value} cannot be converted to rational")
            return Rational(Fraction(self.value))
        # Через double: теряет всё, что за пределами 53 бит мантиссы
        return self.to_float().to_rational()


# =============================================================================
# RATIONAL
# =============================================================================


@dataclass(frozen=True)
class Rational(NumberValue):
    """Точная несократимая дробь."""

    value: Fraction

    kind: ClassVar[NumberKind] = NumberKind.RATIONAL

    def __post_init__(self) -> None:
        if not isinstance(self.value, Fraction):
            raise TypeError(f"Rational value must be Fraction, got {type(self.value).__name__}")

    @classmethod
    def of(cls, numerator: int, denominator: int = 1) -> "Rational":
        """
        Построение Rational из числителя и знаменателя.

        Raises:
            DivideByZeroError: Если denominator == 0

        Examples:
            >>> Rational.of(2, 4)
            Rational(value=Fraction(1, 2))
        """
        _require_int(numerator, "Rational numerator")
        _require_int(denominator, "Rational denominator")
        if denominator == 0:
            raise DivideByZeroError(numerator, NumberKind.RATIONAL)
        return cls(Fraction(numerator, denominator))

    @property
    def numerator(self) -> int:
        return self.value.numerator

    @property
    def denominator(self) -> int:
        return self.value.denominator

    def to_integer(self, *, policy: ConversionPolicy = ConversionPolicy.LEGACY) -> "Integer":
        if policy is ConversionPolicy.EXACT:
            return Integer(wrap_int64(math.trunc(self.value)))
        return Integer(truncate_float_to_int64(rational_to_float(self.value)))

    def to_float(self, *, policy: ConversionPolicy = ConversionPolicy.LEGACY) -> "Float":
        return Float(rational_to_float(self.value))

    def to_big_integer(
        self, *, policy: ConversionPolicy = ConversionPolicy.LEGACY
    ) -> "BigInteger":
        if policy is ConversionPolicy.EXACT:
            return BigInteger(math.trunc(self.value))
        return BigInteger(truncate_float_to_int64(rational_to_float(self.value)))

    def to_big_float(
        self,
        *,
        policy: ConversionPolicy = ConversionPolicy.LEGACY,
        precision: int = DEFAULT_BIGFLOAT_PRECISION,
    ) -> "BigFloat":
        if policy is ConversionPolicy.EXACT:
            return BigFloat(decimal_from_rational(self.value, precision), precision)
        return BigFloat(Decimal(rational_to_float(self.value)), precision)

    def to_rational(self, *, policy: ConversionPolicy = ConversionPolicy.LEGACY) -> "Rational":
        return self


# =============================================================================
# NATIVE PYTHON → ЗНАЧЕНИЕ
# =============================================================================


def from_python(obj: Any) -> NumberValue:
    """
    Значение башни для native Python числа.

    - int     → Integer (если помещается в int64), иначе BigInteger
    - float   → Float
    - Fraction → Rational
    - Decimal → BigFloat (точность по умолчанию)

    Raises:
        TypeError: Для bool и нечисловых объектов

    Examples:
        >>> from_python(2 ** 64)
        BigInteger(value=18446744073709551616)
    """
    if isinstance(obj, bool):
        raise TypeError("bool is not a number")
    if isinstance(obj, int):
        return Integer(obj) if fits_int64(obj) else BigInteger(obj)
    if isinstance(obj, float):
        return Float(obj)
    if isinstance(obj, Fraction):
        return Rational(obj)
    if isinstance(obj, Decimal):
        return BigFloat(obj)
    raise TypeError(f"Cannot convert {type(obj).__name__} to a number")
