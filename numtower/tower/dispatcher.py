"""Numeric Tower Dispatcher — смешанная арифметика через promotion lattice.

Поток каждой бинарной операции:
1. classify обоих операндов
2. combine → управляющий kind
3. coerce обоих операндов в kind управляющей таблицы
4. вызов метода таблицы
5. результат (для Integer/BigInteger divide — возможен уход в Rational)

Модульные функции add/subtract/... работают через башню по умолчанию.
"""

from typing import Any

from numtower.core.domain.kinds import NumberKind
from numtower.core.domain.tower_config import DEFAULT_TOWER_CONFIG, TowerConfig
from numtower.core.domain.values import NumberValue
from numtower.core.logging_config import get_logger
from numtower.core.math.operator_tables import OperatorTable
from numtower.core.math.promotion import classify, combine, table_for

logger = get_logger(__name__)


class NumericTower:
    """Точка входа для арифметики и сравнений над всеми kind.

    Stateless относительно операндов: хранит только immutable config,
    поэтому один экземпляр можно разделять между потоками.
    """

    def __init__(self, config: TowerConfig | None = None):
        """
        Args:
            config: конфигурация башни (опционально, используется default)
        """
        self.config = config or DEFAULT_TOWER_CONFIG

    # -------------------------------------------------------------------------
    # Promotion
    # -------------------------------------------------------------------------

    def classify(self, value: Any) -> NumberKind:
        return classify(value, strict=self.config.strict_classification)

    def governing_kind(self, x: Any, y: Any) -> NumberKind:
        return combine(self.classify(x), self.classify(y))

    def governing_table(self, x: Any, y: Any) -> OperatorTable:
        return table_for(self.governing_kind(x, y))

    def _coerce_pair(self, x: Any, y: Any) -> tuple[OperatorTable, NumberValue, NumberValue]:
        table = self.governing_table(x, y)
        logger.debug(
            "dispatch %s x %s -> %s",
            type(x).__name__,
            type(y).__name__,
            table.kind.value,
        )
        return table, table.coerce(x, self.config), table.coerce(y, self.config)

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def add(self, x: Any, y: Any) -> NumberValue:
        table, a, b = self._coerce_pair(x, y)
        return table.add(a, b)

    def subtract(self, x: Any, y: Any) -> NumberValue:
        table, a, b = self._coerce_pair(x, y)
        return table.subtract(a, b)

    def multiply(self, x: Any, y: Any) -> NumberValue:
        table, a, b = self._coerce_pair(x, y)
        return table.multiply(a, b)

    def divide(self, x: Any, y: Any) -> NumberValue:
        """Деление с exactness escape для Integer/BigInteger.

        Raises:
            DivideByZeroError: делитель — точный ноль в Integer/BigInteger/Rational
        """
        table, a, b = self._coerce_pair(x, y)
        result = table.divide(a, b)
        if result.kind is not table.kind:
            logger.debug(
                "inexact %s quotient escaped to %s", table.kind.value, result.kind.value
            )
        return result

    def is_zero(self, x: Any) -> bool:
        table = table_for(self.classify(x))
        return table.is_zero(table.coerce(x, self.config))

    # -------------------------------------------------------------------------
    # Сравнения
    # -------------------------------------------------------------------------

    def lt(self, x: Any, y: Any) -> bool:
        table, a, b = self._coerce_pair(x, y)
        return table.lt(a, b)

    def lte(self, x: Any, y: Any) -> bool:
        table, a, b = self._coerce_pair(x, y)
        return table.lte(a, b)

    def gt(self, x: Any, y: Any) -> bool:
        table, a, b = self._coerce_pair(x, y)
        return table.gt(a, b)

    def gte(self, x: Any, y: Any) -> bool:
        # Отрицание lt: для NaN даёт True
        return not self.lt(x, y)

    def compare(self, x: Any, y: Any) -> int:
        """Сравнение по значению через управляющий kind.

        Returns:
            -1 если x < y, 1 если y < x, иначе 0
        """
        table, a, b = self._coerce_pair(x, y)
        if table.lt(a, b):
            return -1
        if table.lt(b, a):
            return 1
        return 0


# =============================================================================
# DEFAULT TOWER
# =============================================================================

DEFAULT_TOWER = NumericTower()


def add(x: Any, y: Any) -> NumberValue:
    return DEFAULT_TOWER.add(x, y)


def subtract(x: Any, y: Any) -> NumberValue:
    return DEFAULT_TOWER.subtract(x, y)


def multiply(x: Any, y: Any) -> NumberValue:
    return DEFAULT_TOWER.multiply(x, y)


def divide(x: Any, y: Any) -> NumberValue:
    return DEFAULT_TOWER.divide(x, y)


def is_zero(x: Any) -> bool:
    return DEFAULT_TOWER.is_zero(x)


def lt(x: Any, y: Any) -> bool:
    return DEFAULT_TOWER.lt(x, y)


def lte(x: Any, y: Any) -> bool:
    return DEFAULT_TOWER.lte(x, y)


def gt(x: Any, y: Any) -> bool:
    return DEFAULT_TOWER.gt(x, y)


def gte(x: Any, y: Any) -> bool:
    return DEFAULT_TOWER.gte(x, y)
