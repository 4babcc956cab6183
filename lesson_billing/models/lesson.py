"""
Lesson data models.

This module provides the TypedDict wire form of a lesson and the
immutable Lesson value that pricing strategies receive.
"""

from dataclasses import dataclass, asdict
from typing import TypedDict, Literal, Optional, Dict, Any


# Type aliases for status values
LessonStatus = Literal["completed", "pending", "cancelled"]

VALID_STATUSES = ("completed", "pending", "cancelled")


class LessonData(TypedDict):
    """
    Lesson data structure as read from JSON files.

    Attributes:
        id: Unique lesson identifier
        date: Lesson date (YYYY-MM-DD format)
        student_id: Student identifier
        student_name: Student name
        status: Lesson status (completed/pending/cancelled)
        duration: Lesson duration in minutes (may be missing)
        category: Lesson category

    Examples:
        >>> lesson: LessonData = {
        ...     "id": "lesson_12345",
        ...     "date": "2025-10-15",
        ...     "student_id": "student_789",
        ...     "student_name": "山田太郎",
        ...     "status": "completed",
        ...     "duration": 60,
        ...     "category": "専属レッスン"
        ... }
    """

    id: str
    date: str
    student_id: str
    student_name: str
    status: LessonStatus
    duration: Optional[float]
    category: str


@dataclass(frozen=True)
class Lesson:
    """
    A single billable teaching session.

    Frozen so that a strategy can never modify the lesson it prices.

    Attributes:
        id: Unique lesson identifier
        date: Lesson date (YYYY-MM-DD format)
        student_id: Student identifier
        student_name: Student name
        status: Lesson status
        duration: Duration in minutes, None when unknown
        category: Lesson category used to pick a cost strategy

    Examples:
        >>> lesson = Lesson.from_dict(lesson_data)
        >>> lesson.hours
        1.0
    """

    id: str
    date: str
    student_id: str
    student_name: str
    status: LessonStatus = "completed"
    duration: Optional[float] = None
    category: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Lesson':
        """
        Create a Lesson from its dictionary form.

        Args:
            data: Lesson dictionary (see LessonData)

        Returns:
            Lesson instance

        Raises:
            KeyError: If id, date, student_id or student_name is missing
        """
        return cls(
            id=data["id"],
            date=data["date"],
            student_id=data["student_id"],
            student_name=data["student_name"],
            status=data.get("status", "completed"),
            duration=data.get("duration"),
            category=data.get("category", "")
        )

    def to_dict(self) -> LessonData:
        """Convert to dictionary format."""
        return asdict(self)

    @property
    def hours(self) -> Optional[float]:
        """Duration in hours, or None when the duration is unknown."""
        if self.duration is None:
            return None
        return self.duration / 60

    @property
    def month(self) -> str:
        """Lesson month (YYYY-MM)."""
        return self.date[:7]

    @property
    def is_completed(self) -> bool:
        """Check if the lesson took place."""
        return self.status == "completed"
