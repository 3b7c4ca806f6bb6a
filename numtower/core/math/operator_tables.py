"""
Operator Tables — арифметика и сравнения для каждого kind

Пять stateless singleton-таблиц. Каждая работает только с операндами,
уже сконвертированными в её собственный kind (см. coerce).

Операции: add, subtract, multiply, divide, is_zero, lt, lte, gt.
gte не предоставляется: вызывающий код отрицает lt.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Integer/BigInteger divide: точное рациональное частное; если оно целое,
   результат остаётся в kind, иначе уходит в Rational (exactness escape)
2. Rational/Float/BigFloat divide всегда остаются в своём kind
3. Деление на точный ноль в Integer/BigInteger/Rational → DivideByZeroError
4. Float деление на ноль → IEEE-754 (±Inf, NaN), никогда не ошибка
5. Integer add/subtract/multiply переполняются по модулю 2**64
"""

import decimal
import operator
from abc import ABC, abstractmethod
from decimal import Decimal
from fractions import Fraction
from typing import Callable, ClassVar

from numtower.core.domain.kinds import NumberKind
from numtower.core.domain.tower_config import DEFAULT_TOWER_CONFIG, TowerConfig
from numtower.core.domain.values import (
    BigFloat,
    BigInteger,
    Float,
    Integer,
    Number,
    NumberValue,
    Rational,
)
from numtower.core.errors import DivideByZeroError, NotRepresentableError
from numtower.core.math.native import bigfloat_context, ieee_divide, wrap_int64


# =============================================================================
# BASE
# =============================================================================


class OperatorTable(ABC):
    """Abstract Base Class для таблицы операций одного kind"""

    kind: ClassVar[NumberKind]

    @abstractmethod
    def coerce(self, value: Number, config: TowerConfig = DEFAULT_TOWER_CONFIG) -> NumberValue:
        """Конверсия произвольного значения в kind таблицы"""

    @abstractmethod
    def add(self, x, y) -> NumberValue:
        """x + y"""

    @abstractmethod
    def subtract(self, x, y) -> NumberValue:
        """x - y"""

    @abstractmethod
    def multiply(self, x, y) -> NumberValue:
        """x * y"""

    @abstractmethod
    def divide(self, x, y) -> NumberValue:
        """x / y"""

    @abstractmethod
    def is_zero(self, x) -> bool:
        """x == 0"""

    @abstractmethod
    def lt(self, x, y) -> bool:
        """x < y"""

    @abstractmethod
    def lte(self, x, y) -> bool:
        """x <= y"""

    @abstractmethod
    def gt(self, x, y) -> bool:
        """x > y"""

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.kind.value}>"


# =============================================================================
# INTEGER
# =============================================================================


class IntegerOps(OperatorTable):
    """Таблица Integer: int64 с переполнением."""

    kind: ClassVar[NumberKind] = NumberKind.INTEGER

    def coerce(self, value: Number, config: TowerConfig = DEFAULT_TOWER_CONFIG) -> Integer:
        return value.to_integer(policy=config.conversion_policy)

    def add(self, x: Integer, y: Integer) -> Integer:
        return Integer(wrap_int64(x.value + y.value))

    def subtract(self, x: Integer, y: Integer) -> Integer:
        return Integer(wrap_int64(x.value - y.value))

    def multiply(self, x: Integer, y: Integer) -> Integer:
        return Integer(wrap_int64(x.value * y.value))

    def divide(self, x: Integer, y: Integer) -> Integer | Rational:
        if y.value == 0:
            raise DivideByZeroError(x, self.kind)

        quotient = Fraction(x.value, y.value)
        if quotient.denominator == 1:
            # MIN_INT64 / -1 переполняется обратно в MIN_INT64
            return Integer(wrap_int64(quotient.numerator))
        return Rational(quotient)

    def is_zero(self, x: Integer) -> bool:
        return x.value == 0

    def lt(self, x: Integer, y: Integer) -> bool:
        return x.value < y.value

    def lte(self, x: Integer, y: Integer) -> bool:
        return x.value <= y.value

    def gt(self, x: Integer, y: Integer) -> bool:
        return x.value > y.value


# =============================================================================
# FLOAT
# =============================================================================


class FloatOps(OperatorTable):
    """Таблица Float: IEEE-754 double."""

    kind: ClassVar[NumberKind] = NumberKind.FLOAT

    def coerce(self, value: Number, config: TowerConfig = DEFAULT_TOWER_CONFIG) -> Float:
        return value.to_float(policy=config.conversion_policy)

    def add(self, x: Float, y: Float) -> Float:
        return Float(x.value + y.value)

    def subtract(self, x: Float, y: Float) -> Float:
        return Float(x.value - y.value)

    def multiply(self, x: Float, y: Float) -> Float:
        return Float(x.value * y.value)

    def divide(self, x: Float, y: Float) -> Float:
        return Float(ieee_divide(x.value, y.value))

    def is_zero(self, x: Float) -> bool:
        # -0.0 == 0.0, NaN != 0.0
        return x.value == 0.0

    def lt(self, x: Float, y: Float) -> bool:
        return x.value < y.value

    def lte(self, x: Float, y: Float) -> bool:
        return x.value <= y.value

    def gt(self, x: Float, y: Float) -> bool:
        return x.value > y.value


# =============================================================================
# BIG INTEGER
# =============================================================================


class BigIntegerOps(OperatorTable):
    """Таблица BigInteger: целые произвольной точности."""

    kind: ClassVar[NumberKind] = NumberKind.BIG_INTEGER

    def coerce(self, value: Number, config: TowerConfig = DEFAULT_TOWER_CONFIG) -> BigInteger:
        return value.to_big_integer(policy=config.conversion_policy)

    def add(self, x: BigInteger, y: BigInteger) -> BigInteger:
        return BigInteger(x.value + y.value)

    def subtract(self, x: BigInteger, y: BigInteger) -> BigInteger:
        return BigInteger(x.value - y.value)

    def multiply(self, x: BigInteger, y: BigInteger) -> BigInteger:
        return BigInteger(x.value * y.value)

    def divide(self, x: BigInteger, y: BigInteger) -> BigInteger | Rational:
        if y.value == 0:
            raise DivideByZeroError(x, self.kind)

        quotient = Fraction(x.value, y.value)
        if quotient.denominator == 1:
            return BigInteger(quotient.numerator)
        return Rational(quotient)

    def is_zero(self, x: BigInteger) -> bool:
        return x.value == 0

    def lt(self, x: BigInteger, y: BigInteger) -> bool:
        return x.value < y.value

    def lte(self, x: BigInteger, y: BigInteger) -> bool:
        return x.value <= y.value

    def gt(self, x: BigInteger, y: BigInteger) -> bool:
        return x.value > y.value


# =============================================================================
# BIG FLOAT
# =============================================================================


class BigFloatOps(OperatorTable):
    """
    Таблица BigFloat: Decimal арифметика.

    Точность результата = max(precision операндов), округление half-even.
    x / 0 (x != 0) → signed Infinity. Операции, дающие NaN
    (0/0, Inf - Inf, 0 * Inf, Inf / Inf) → NotRepresentableError.
    """

    kind: ClassVar[NumberKind] = NumberKind.BIG_FLOAT

    def coerce(self, value: Number, config: TowerConfig = DEFAULT_TOWER_CONFIG) -> BigFloat:
        return value.to_big_float(
            policy=config.conversion_policy,
            precision=config.bigfloat_precision,
        )

    def _compute(
        self,
        op: Callable[[Decimal, Decimal], Decimal],
        x: BigFloat,
        y: BigFloat,
    ) -> BigFloat:
        precision = max(x.precision, y.precision)
        try:
            with bigfloat_context(precision):
                result = op(x.value, y.value)
        except decimal.InvalidOperation as exc:
            raise NotRepresentableError(
                f"big_float {op.__name__}({x.value}, {y.value}) is NaN"
            ) from exc
        return BigFloat(result, precision)

    def add(self, x: BigFloat, y: BigFloat) -> BigFloat:
        return self._compute(operator.add, x, y)

    def subtract(self, x: BigFloat, y: BigFloat) -> BigFloat:
        return self._compute(operator.sub, x, y)

    def multiply(self, x: BigFloat, y: BigFloat) -> BigFloat:
        return self._compute(operator.mul, x, y)

    def divide(self, x: BigFloat, y: BigFloat) -> BigFloat:
        return self._compute(operator.truediv, x, y)

    def is_zero(self, x: BigFloat) -> bool:
        return x.value.is_zero()

    def lt(self, x: BigFloat, y: BigFloat) -> bool:
        return x.value < y.value

    def lte(self, x: BigFloat, y: BigFloat) -> bool:
        return x.value <= y.value

    def gt(self, x: BigFloat, y: BigFloat) -> bool:
        return x.value > y.value


# =============================================================================
# RATIONAL
# =============================================================================


class RationalOps(OperatorTable):
    """Таблица Rational: точные дроби."""

    kind: ClassVar[NumberKind] = NumberKind.RATIONAL

    def coerce(self, value: Number, config: TowerConfig = DEFAULT_TOWER_CONFIG) -> Rational:
        return value.to_rational(policy=config.conversion_policy)

    def add(self, x: Rational, y: Rational) -> Rational:
        return Rational(x.value + y.value)

    def subtract(self, x: Rational, y: Rational) -> Rational:
        return Rational(x.value - y.value)

    def multiply(self, x: Rational, y: Rational) -> Rational:
        return Rational(x.value * y.value)

    def divide(self, x: Rational, y: Rational) -> Rational:
        if y.value == 0:
            raise DivideByZeroError(x, self.kind)
        return Rational(x.value / y.value)

    def is_zero(self, x: Rational) -> bool:
        return x.value == 0

    def lt(self, x: Rational, y: Rational) -> bool:
        return x.value < y.value

    def lte(self, x: Rational, y: Rational) -> bool:
        return x.value <= y.value

    def gt(self, x: Rational, y: Rational) -> bool:
        return x.value > y.value


# =============================================================================
# SINGLETONS
# =============================================================================

INTEGER_OPS = IntegerOps()
FLOAT_OPS = FloatOps()
BIG_INTEGER_OPS = BigIntegerOps()
BIG_FLOAT_OPS = BigFloatOps()
RATIONAL_OPS = RationalOps()
