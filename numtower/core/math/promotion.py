"""
Promotion Lattice — выбор управляющего kind для пары операндов

    INTEGER < BIG_INTEGER < RATIONAL < FLOAT < BIG_FLOAT

combine(a, b) = kind с max(rank(a), rank(b)):
- INTEGER — нижний элемент (уступает любому kind)
- BIG_FLOAT — поглощающий элемент (побеждает любой kind)
- FLOAT уступает только BIG_FLOAT
- RATIONAL побеждает INTEGER/BIG_INTEGER, уступает FLOAT/BIG_FLOAT
- BIG_INTEGER побеждает только INTEGER

classify() для представлений вне пяти kind возвращает INTEGER
(исторический fallback) и пишет warning, либо бросает
UnclassifiedNumberError в strict-режиме.
"""

from typing import Any, Final

from numtower.core.domain.kinds import KIND_RANK, NumberKind
from numtower.core.domain.values import BigFloat, BigInteger, Float, Integer, Rational
from numtower.core.errors import UnclassifiedNumberError
from numtower.core.logging_config import get_logger
from numtower.core.math.operator_tables import (
    BIG_FLOAT_OPS,
    BIG_INTEGER_OPS,
    FLOAT_OPS,
    INTEGER_OPS,
    RATIONAL_OPS,
    OperatorTable,
)

logger = get_logger(__name__)


_KIND_BY_TYPE: Final[tuple[tuple[type, NumberKind], ...]] = (
    (Integer, NumberKind.INTEGER),
    (Float, NumberKind.FLOAT),
    (BigInteger, NumberKind.BIG_INTEGER),
    (BigFloat, NumberKind.BIG_FLOAT),
    (Rational, NumberKind.RATIONAL),
)

_TABLES: Final[dict[NumberKind, OperatorTable]] = {
    NumberKind.INTEGER: INTEGER_OPS,
    NumberKind.FLOAT: FLOAT_OPS,
    NumberKind.BIG_INTEGER: BIG_INTEGER_OPS,
    NumberKind.BIG_FLOAT: BIG_FLOAT_OPS,
    NumberKind.RATIONAL: RATIONAL_OPS,
}


def rank(kind: NumberKind) -> int:
    """Ранг kind в решётке продвижения."""
    return KIND_RANK[kind]


def combine(a: NumberKind, b: NumberKind) -> NumberKind:
    """
    Управляющий kind для пары kind. Коммутативна.

    Examples:
        >>> combine(NumberKind.INTEGER, NumberKind.RATIONAL)
        <NumberKind.RATIONAL: 'rational'>
        >>> combine(NumberKind.BIG_FLOAT, NumberKind.FLOAT)
        <NumberKind.BIG_FLOAT: 'big_float'>
    """
    return a if KIND_RANK[a] >= KIND_RANK[b] else b


def classify(value: Any, strict: bool = False) -> NumberKind:
    """
    Kind значения по его конкретному представлению.

    Args:
        value: Значение башни
        strict: Бросать ошибку для неизвестных представлений

    Returns:
        NumberKind; для неизвестных представлений — INTEGER

    Raises:
        UnclassifiedNumberError: Если strict и представление неизвестно
    """
    for cls, kind in _KIND_BY_TYPE:
        if isinstance(value, cls):
            return kind

    if strict:
        raise UnclassifiedNumberError(
            f"{type(value).__name__} is not one of the five numeric kinds"
        )

    logger.warning(
        "Unclassified numeric representation %s, defaulting to %s",
        type(value).__name__,
        NumberKind.INTEGER.value,
    )
    return NumberKind.INTEGER


def table_for(kind: NumberKind) -> OperatorTable:
    """Singleton-таблица операций для kind."""
    return _TABLES[kind]
