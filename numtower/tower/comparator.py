"""Comparator — сравнение чисел разных kind по значению.

compare_numbers даёт порядок, пригодный для сортировки и для равенства
по значению между kind: Integer(3) и Float(3.0) равны.
"""

import functools
from typing import Any, Callable, Iterable

from numtower.core.domain.values import NumberValue
from numtower.tower.dispatcher import DEFAULT_TOWER, NumericTower


def compare_numbers(x: Any, y: Any, tower: NumericTower | None = None) -> int:
    """
    Сравнение двух чисел через управляющий kind.

    Args:
        x: Первое значение
        y: Второе значение
        tower: Башня с нужной конфигурацией (default: DEFAULT_TOWER)

    Returns:
        -1 если x < y, 1 если x > y, 0 если равны

    Examples:
        >>> from numtower import BigInteger, Float, Integer
        >>> compare_numbers(Integer(3), Float(3.0))
        0
        >>> compare_numbers(BigInteger(2), Integer(1))
        1
    """
    return (tower or DEFAULT_TOWER).compare(x, y)


def numbers_equal(x: Any, y: Any, tower: NumericTower | None = None) -> bool:
    """Равенство по значению (compare_numbers == 0)."""
    return compare_numbers(x, y, tower) == 0


def number_sort_key(tower: NumericTower | None = None) -> Callable[[Any], Any]:
    """Key-функция для sorted()/list.sort() на основе compare_numbers."""
    active = tower or DEFAULT_TOWER
    return functools.cmp_to_key(active.compare)


def sort_numbers(
    values: Iterable[NumberValue],
    reverse: bool = False,
    tower: NumericTower | None = None,
) -> list[NumberValue]:
    """
    Стабильная сортировка значений разных kind.

    Examples:
        >>> from numtower import Float, Integer, Rational
        >>> sort_numbers([Float(2.5), Integer(1), Rational.of(3, 2)])
        [Integer(value=1), Rational(value=Fraction(3, 2)), Float(value=2.5)]
    """
    return sorted(values, key=number_sort_key(tower), reverse=reverse)
