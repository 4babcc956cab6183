"""
Lesson pricing module.

Usage:
    >>> from lesson_billing.pricing import TimedCostStrategy
    >>>
    >>> strategy = TimedCostStrategy(hourly_rate=2300)
    >>> strategy.cost(lesson), strategy.charge_type()
    (2300, <ChargeType.HOURLY: 'hourly'>)
"""

from .base import ChargeType, CostStrategy
from .errors import InvalidInputError, InvalidRateError, PricingError
from .selector import StrategySelector
from .strategies import FixedCostStrategy, TimedCostStrategy

__all__ = [
    "ChargeType",
    "CostStrategy",
    "FixedCostStrategy",
    "TimedCostStrategy",
    "StrategySelector",
    "PricingError",
    "InvalidInputError",
    "InvalidRateError",
]
