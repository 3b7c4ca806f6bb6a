"""
Исключения числовой башни.

Иерархия:
    NumericTowerError (ArithmeticError)
    ├── DivideByZeroError (+ ZeroDivisionError)
    ├── NotRepresentableError (+ ValueError)
    └── UnclassifiedNumberError (+ TypeError)

Float деление на ноль НЕ является ошибкой (IEEE-754: ±Inf / NaN).
"""

from typing import Any


class NumericTowerError(ArithmeticError):
    """Базовое исключение для всех ошибок числовой башни."""


class DivideByZeroError(NumericTowerError, ZeroDivisionError):
    """
    Деление на точный ноль для Integer, BigInteger или Rational.

    Прерывает текущую операцию. Восстановимая ошибка: вызывающий код
    (evaluator/REPL) перехватывает её и сообщает пользователю.

    Attributes:
        dividend: Делимое (значение числовой башни)
        kind: Управляющий kind операции
    """

    def __init__(self, dividend: Any, kind: Any):
        self.dividend = dividend
        self.kind = kind
        # Делимое не форматируется: repr BigInteger ограничен 4300 цифрами
        super().__init__(f"Divide by zero in {getattr(kind, 'value', kind)} division")


class NotRepresentableError(NumericTowerError, ValueError):
    """
    Значение не представимо в целевом kind.

    Примеры: NaN/Inf → Rational, NaN → BigFloat, 0/0 в BigFloat.
    """


class UnclassifiedNumberError(NumericTowerError, TypeError):
    """
    Значение вне закрытого набора из пяти kind.

    Бросается только при strict_classification; по умолчанию classify
    возвращает Integer.
    """
