"""
Concrete cost strategies.

Examples:
    >>> FixedCostStrategy(50).cost(lesson)
    50
    >>> TimedCostStrategy(20).cost(three_hour_lesson)
    60
"""

import logging
import math
from decimal import Decimal, ROUND_HALF_UP

from ..models.lesson import Lesson
from .base import ChargeType, CostStrategy
from .errors import InvalidInputError, InvalidRateError


logger = logging.getLogger(__name__)

MINUTES_PER_HOUR = 60


def _validate_rate(rate: int, name: str) -> int:
    # bool is a subclass of int
    if isinstance(rate, bool) or not isinstance(rate, int):
        raise InvalidRateError(
            f"{name} must be an integer, got {type(rate).__name__}"
        )
    if rate < 0:
        raise InvalidRateError(f"{name} must not be negative, got {rate}")
    return rate


def _require_lesson(lesson: Lesson) -> Lesson:
    if lesson is None:
        raise InvalidInputError("Lesson is required", field="lesson")
    return lesson


class FixedCostStrategy(CostStrategy):
    """
    Charge the same amount for every lesson.

    Attributes:
        rate: Amount charged per lesson
    """

    def __init__(self, rate: int):
        self._rate = _validate_rate(rate, "rate")

    @property
    def rate(self) -> int:
        return self._rate

    def cost(self, lesson: Lesson) -> int:
        _require_lesson(lesson)
        return self._rate

    def charge_type(self) -> str:
        return ChargeType.FLAT_RATE

    def __repr__(self) -> str:
        return f"FixedCostStrategy(rate={self._rate})"


class TimedCostStrategy(CostStrategy):
    """
    Charge by lesson duration.

    The cost is hourly_rate * duration_minutes / 60, rounded half-up to a
    whole amount. A zero-minute lesson costs nothing.

    Attributes:
        hourly_rate: Amount charged per hour
    """

    def __init__(self, hourly_rate: int):
        self._hourly_rate = _validate_rate(hourly_rate, "hourly_rate")

    @property
    def hourly_rate(self) -> int:
        return self._hourly_rate

    def cost(self, lesson: Lesson) -> int:
        """
        Compute the duration-based cost of a lesson.

        Raises:
            InvalidInputError: If the duration is missing or negative
        """
        _require_lesson(lesson)

        duration = lesson.duration
        if duration is None:
            raise InvalidInputError(
                f"Lesson {lesson.id} has no duration",
                field="duration",
                lesson_id=lesson.id
            )
        if isinstance(duration, bool) or not isinstance(duration, (int, float)):
            raise InvalidInputError(
                f"Lesson {lesson.id} duration must be a number, "
                f"got {type(duration).__name__}",
                field="duration",
                lesson_id=lesson.id
            )
        if not math.isfinite(duration):
            raise InvalidInputError(
                f"Lesson {lesson.id} duration must be finite, got {duration}",
                field="duration",
                lesson_id=lesson.id
            )
        if duration < 0:
            raise InvalidInputError(
                f"Lesson {lesson.id} has negative duration: {duration}",
                field="duration",
                lesson_id=lesson.id
            )

        amount = (
            Decimal(self._hourly_rate) * Decimal(str(duration)) / MINUTES_PER_HOUR
        ).quantize(Decimal("1"), rounding=ROUND_HALF_UP)

        logger.debug(
            f"Timed cost for lesson {lesson.id}: "
            f"{duration}min x {self._hourly_rate}/h = {amount}"
        )
        return int(amount)

    def charge_type(self) -> str:
        return ChargeType.HOURLY

    def __repr__(self) -> str:
        return f"TimedCostStrategy(hourly_rate={self._hourly_rate})"
