"""
Cost strategy interface.

This module defines the contract every lesson pricing strategy satisfies,
so callers can price a lesson and label the charge without knowing which
concrete strategy is in use.
"""

from abc import ABC, abstractmethod
from enum import Enum

from ..models.lesson import Lesson


class ChargeType(str, Enum):
    """Billing category of a computed cost."""
    HOURLY = "hourly"
    FLAT_RATE = "flat-rate"

    def __str__(self) -> str:
        return self.value


class CostStrategy(ABC):
    """
    Abstract base class for lesson cost strategies.

    Subclasses implement both cost() and charge_type(). Concrete
    strategies hold only configuration that is fixed at construction,
    which makes a single instance safe to share between threads.
    """

    @abstractmethod
    def cost(self, lesson: Lesson) -> int:
        """
        Compute the cost of a lesson.

        Args:
            lesson: Lesson to price (never modified)

        Returns:
            Non-negative amount in the smallest unit of the billing currency

        Raises:
            InvalidInputError: If the lesson lacks data the strategy needs
        """
        pass

    @abstractmethod
    def charge_type(self) -> str:
        """
        Get the billing category label of this strategy.

        Returns:
            Non-empty ChargeType label (e.g. "hourly")
        """
        pass
