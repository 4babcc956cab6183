"""
Runtime selection of a cost strategy from a lesson's category.
"""

import logging
from typing import Dict, List, Optional

from ..models.lesson import Lesson
from .base import CostStrategy
from .strategies import FixedCostStrategy, TimedCostStrategy


logger = logging.getLogger(__name__)


class StrategySelector:
    """
    Maps lesson categories to cost strategies.

    Lookup order for a lesson's category:
    1. Exact match
    2. Partial match (e.g. "専属" matches "専属レッスン")
    3. Default strategy

    Examples:
        >>> selector = StrategySelector(default=TimedCostStrategy(2300))
        >>> selector.register("単発レッスン", FixedCostStrategy(3000))
        >>> strategy = selector.select(lesson)
        >>> amount = strategy.cost(lesson)
    """

    def __init__(self, default: CostStrategy):
        """
        Initialize selector.

        Args:
            default: Strategy used when no category matches
        """
        if not isinstance(default, CostStrategy):
            raise TypeError(
                f"default must be a CostStrategy, got {type(default).__name__}"
            )
        self._default = default
        self._strategies: Dict[str, CostStrategy] = {}

    @property
    def default(self) -> CostStrategy:
        return self._default

    def register(self, category: str, strategy: CostStrategy):
        """
        Register a strategy for a lesson category.

        Args:
            category: Lesson category label
            strategy: Strategy applied to lessons of that category

        Raises:
            ValueError: If category is empty
            TypeError: If strategy is not a CostStrategy
        """
        if not category:
            raise ValueError("category must not be empty")
        if not isinstance(strategy, CostStrategy):
            raise TypeError(
                f"strategy must be a CostStrategy, got {type(strategy).__name__}"
            )

        self._strategies[category] = strategy
        logger.debug(f"Registered {strategy!r} for category '{category}'")

    def categories(self) -> List[str]:
        """Get registered categories in registration order."""
        return list(self._strategies.keys())

    def select(self, lesson: Lesson) -> CostStrategy:
        """
        Pick the strategy for a lesson.

        Args:
            lesson: Lesson to be priced

        Returns:
            Matching strategy, or the default strategy
        """
        category = lesson.category or ""

        if category in self._strategies:
            return self._strategies[category]

        if category:
            for key, strategy in self._strategies.items():
                if category in key or key in category:
                    logger.debug(f"Partial category match: '{category}' -> '{key}'")
                    return strategy

        if self._strategies:
            logger.warning(
                f"Unknown category '{category}' for lesson {lesson.id}, "
                f"using default {self._default!r}"
            )
        return self._default

    @classmethod
    def from_config(cls, config) -> 'StrategySelector':
        """
        Build the standard selector from configuration.

        Lessons are charged hourly unless their category is one of the
        configured flat-rate categories.

        Args:
            config: Config providing hourly_rate, flat_rate and
                flat_rate_categories

        Returns:
            Configured StrategySelector
        """
        selector = cls(default=TimedCostStrategy(config.hourly_rate))

        flat: Optional[FixedCostStrategy] = None
        for category in config.flat_rate_categories:
            if flat is None:
                flat = FixedCostStrategy(config.flat_rate)
            selector.register(category, flat)

        logger.info(
            f"Strategy selector configured: default={selector.default!r}, "
            f"flat-rate categories={selector.categories()}"
        )
        return selector
