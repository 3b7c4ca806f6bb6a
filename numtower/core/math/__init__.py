"""
Core math modules для numtower

Машинные примитивы (native), операторные таблицы пяти kind
(operator_tables) и решётка продвижения (promotion).

Модули импортируются напрямую: values зависит от native, а
operator_tables — от values.
"""
