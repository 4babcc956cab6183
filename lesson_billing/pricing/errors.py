"""
Pricing error types.
"""

from typing import Optional


class PricingError(Exception):
    """Base class for lesson pricing errors."""
    pass


class InvalidInputError(PricingError, ValueError):
    """
    Raised when a lesson lacks data a cost strategy requires.

    Attributes:
        field: Name of the missing or invalid lesson field
        lesson_id: Identifier of the offending lesson, if known
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        lesson_id: Optional[str] = None
    ):
        super().__init__(message)
        self.field = field
        self.lesson_id = lesson_id


class InvalidRateError(PricingError, ValueError):
    """Raised when a cost strategy is configured with an invalid rate."""
    pass
