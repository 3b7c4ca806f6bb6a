"""
NumberKind — закрытый набор kind числовой башни и их ранги.

Порядок продвижения (promotion lattice):

    INTEGER < BIG_INTEGER < RATIONAL < FLOAT < BIG_FLOAT

Управляющий kind пары операндов — kind с большим рангом.
"""

from enum import Enum
from typing import Final


class NumberKind(str, Enum):
    """Kind числового представления"""

    INTEGER = "integer"
    BIG_INTEGER = "big_integer"
    RATIONAL = "rational"
    FLOAT = "float"
    BIG_FLOAT = "big_float"


# Ранг kind в решётке продвижения
KIND_RANK: Final[dict[NumberKind, int]] = {
    NumberKind.INTEGER: 0,
    NumberKind.BIG_INTEGER: 1,
    NumberKind.RATIONAL: 2,
    NumberKind.FLOAT: 3,
    NumberKind.BIG_FLOAT: 4,
}

# Точные kind: деление на ноль является ошибкой, а не IEEE
EXACT_KINDS: Final[frozenset[NumberKind]] = frozenset(
    {NumberKind.INTEGER, NumberKind.BIG_INTEGER, NumberKind.RATIONAL}
)
