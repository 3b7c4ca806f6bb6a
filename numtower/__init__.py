"""
numtower — числовая башня для динамически типизированного runtime.

Пять представлений (Integer, Float, BigInteger, BigFloat, Rational) и
арифметика/сравнения, автоматически выбирающие общее представление
с минимальной потерей точности:

    >>> from numtower import Integer, Rational, Float, add
    >>> add(Integer(1), Rational.of(1, 2))
    Rational(value=Fraction(3, 2))
    >>> add(Integer(1), Float(1.0))
    Float(value=2.0)
"""

from numtower.core.domain import (
    DEFAULT_TOWER_CONFIG,
    EXACT_KINDS,
    KIND_RANK,
    BigFloat,
    BigInteger,
    ConversionPolicy,
    Float,
    Integer,
    Number,
    NumberKind,
    NumberValue,
    Rational,
    TowerConfig,
    from_python,
)
from numtower.core.errors import (
    DivideByZeroError,
    NotRepresentableError,
    NumericTowerError,
    UnclassifiedNumberError,
)
from numtower.core.logging_config import get_logger, setup_logging
from numtower.core.math.operator_tables import (
    BIG_FLOAT_OPS,
    BIG_INTEGER_OPS,
    FLOAT_OPS,
    INTEGER_OPS,
    RATIONAL_OPS,
    OperatorTable,
)
from numtower.core.math.promotion import classify, combine, rank, table_for
from numtower.tower import (
    DEFAULT_TOWER,
    NumericTower,
    add,
    compare_numbers,
    divide,
    gt,
    gte,
    is_zero,
    lt,
    lte,
    multiply,
    number_sort_key,
    numbers_equal,
    sort_numbers,
    subtract,
)

__version__ = "0.1.0"

__all__ = [
    # Kinds
    "NumberKind",
    "KIND_RANK",
    "EXACT_KINDS",
    # Values
    "Number",
    "NumberValue",
    "Integer",
    "Float",
    "BigInteger",
    "BigFloat",
    "Rational",
    "ConversionPolicy",
    "from_python",
    # Config
    "TowerConfig",
    "DEFAULT_TOWER_CONFIG",
    # Errors
    "NumericTowerError",
    "DivideByZeroError",
    "NotRepresentableError",
    "UnclassifiedNumberError",
    # Operator tables
    "OperatorTable",
    "INTEGER_OPS",
    "FLOAT_OPS",
    "BIG_INTEGER_OPS",
    "BIG_FLOAT_OPS",
    "RATIONAL_OPS",
    # Promotion
    "classify",
    "combine",
    "rank",
    "table_for",
    # Tower
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
    # Comparator
    "compare_numbers",
    "numbers_equal",
    "number_sort_key",
    "sort_numbers",
    # Logging
    "get_logger",
    "setup_logging",
]
