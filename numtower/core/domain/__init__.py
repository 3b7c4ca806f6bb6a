"""
Domain models and value objects.

Kind числовой башни, пять неизменяемых значений, протокол конверсии
и конфигурация башни.
"""

from numtower.core.domain.kinds import EXACT_KINDS, KIND_RANK, NumberKind
from numtower.core.domain.tower_config import DEFAULT_TOWER_CONFIG, TowerConfig
from numtower.core.domain.values import (
    BigFloat,
    BigInteger,
    ConversionPolicy,
    Float,
    Integer,
    Number,
    NumberValue,
    Rational,
    from_python,
)

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
]
