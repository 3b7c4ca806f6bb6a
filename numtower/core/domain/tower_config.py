"""
TowerConfig — конфигурация числовой башни

Immutable Pydantic модель. Передаётся в NumericTower; операторные таблицы
получают её в coerce() при конверсии операндов.
"""

from pydantic import BaseModel, Field

from numtower.core.domain.values import ConversionPolicy
from numtower.core.math.native import DEFAULT_BIGFLOAT_PRECISION, MAX_BIGFLOAT_PRECISION


class TowerConfig(BaseModel):
    """
    Конфигурация числовой башни.

    - bigfloat_precision: точность (десятичные цифры) для значений,
      конвертируемых в BigFloat
    - conversion_policy: LEGACY (исторические потери точности) или EXACT
    - strict_classification: бросать UnclassifiedNumberError вместо
      fallback на Integer
    """

    bigfloat_precision: int = Field(
        DEFAULT_BIGFLOAT_PRECISION,
        ge=1,
        le=MAX_BIGFLOAT_PRECISION,
        description="Точность BigFloat (значащие десятичные цифры)",
    )
    conversion_policy: ConversionPolicy = Field(
        ConversionPolicy.LEGACY, description="Политика конверсий с потерей точности"
    )
    strict_classification: bool = Field(
        False, description="Ошибка вместо Integer для неизвестных представлений"
    )

    model_config = {"frozen": True}


DEFAULT_TOWER_CONFIG = TowerConfig()
