"""Tower — диспетчеризация смешанной арифметики и сравнений.

- NumericTower: classify → combine → coerce → execute
- Comparator: порядок по значению между kind
"""

from .dispatcher import (
    DEFAULT_TOWER,
    NumericTower,
    add,
    divide,
    gt,
    gte,
    is_zero,
    lt,
    lte,
    multiply,
    subtract,
)
from .comparator import (
    compare_numbers,
    number_sort_key,
    numbers_equal,
    sort_numbers,
)

__all__ = [
    "NumericTower",
    "DEFAULT_TOWER",
    "add",
    "subtract",
    "multiply",
    "divide",
    "is_zero",
    "lt",
    "lte",
    "gt",
    "gte",
    "compare_numbers",
    "numbers_equal",
    "number_sort_key",
    "sort_numbers",
]
