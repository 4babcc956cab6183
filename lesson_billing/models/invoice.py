"""
Invoice data models.

This module provides data structures for monthly invoicing,
including priced invoice lines and batch processing results.
"""

from dataclasses import dataclass, field
from typing import Dict, Any, List, Optional
from enum import Enum

from .lesson import Lesson


class InvoiceStatus(Enum):
    """Invoice processing status."""
    SUCCESS = "success"
    FAILED = "failed"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class InvoiceLine:
    """
    A priced lesson on an invoice.

    Attributes:
        lesson_id: Identifier of the priced lesson
        date: Lesson date (YYYY-MM-DD)
        student_id: Student identifier
        student_name: Student name
        category: Lesson category
        duration: Lesson duration in minutes (None if unknown)
        charge_type: Billing category reported by the cost strategy
        amount: Amount charged
    """

    lesson_id: str
    date: str
    student_id: str
    student_name: str
    category: str
    duration: Optional[float]
    charge_type: str
    amount: int

    @classmethod
    def for_lesson(cls, lesson: Lesson, charge_type: str, amount: int) -> 'InvoiceLine':
        return cls(
            lesson_id=lesson.id,
            date=lesson.date,
            student_id=lesson.student_id,
            student_name=lesson.student_name,
            category=lesson.category,
            duration=lesson.duration,
            charge_type=str(charge_type),
            amount=amount
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary format."""
        return {
            "lesson_id": self.lesson_id,
            "date": self.date,
            "student_id": self.student_id,
            "student_name": self.student_name,
            "category": self.category,
            "duration": self.duration,
            "charge_type": self.charge_type,
            "amount": self.amount
        }


@dataclass
class InvoiceResult:
    """
    Result of processing one lesson.

    Attributes:
        lesson: Lesson that was processed
        status: Processing status
        line: Invoice line if the lesson was priced
        message: Reason for a failure or skip

    Examples:
        >>> result = InvoiceResult(
        ...     lesson=lesson,
        ...     status=InvoiceStatus.SKIPPED,
        ...     message="Lesson status is cancelled"
        ... )
        >>> result.is_skipped
        True
    """

    lesson: Lesson
    status: InvoiceStatus
    line: Optional[InvoiceLine] = None
    message: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary format."""
        return {
            "lesson_id": self.lesson.id,
            "date": self.lesson.date,
            "student_name": self.lesson.student_name,
            "status": self.status.value,
            "charge_type": self.line.charge_type if self.line else None,
            "amount": self.line.amount if self.line else None,
            "message": self.message
        }

    @property
    def is_success(self) -> bool:
        """Check if processing was successful."""
        return self.status == InvoiceStatus.SUCCESS

    @property
    def is_failure(self) -> bool:
        """Check if processing failed."""
        return self.status == InvoiceStatus.FAILED

    @property
    def is_skipped(self) -> bool:
        """Check if processing was skipped."""
        return self.status == InvoiceStatus.SKIPPED


@dataclass
class InvoiceSummary:
    """
    Summary of a monthly invoice run.

    Attributes:
        target_month: Target month (YYYY-MM format)
        execution_time: Execution timestamp (ISO 8601)
        total_lessons: Number of lessons in the target month
        existing_invoices: Number of invoice items that already existed
        processed: Number of lessons priced (success + failed)
        success: Number of lessons priced successfully
        failed: Number of lessons that could not be priced
        skipped: Number of lessons skipped (not completed or duplicate)
        results: Individual results
        errors: Error details for failed lessons
    """

    target_month: str
    execution_time: str
    total_lessons: int = 0
    existing_invoices: int = 0
    processed: int = 0
    success: int = 0
    failed: int = 0
    skipped: int = 0
    results: List[InvoiceResult] = field(default_factory=list)
    errors: List[Dict[str, Any]] = field(default_factory=list)

    def add_result(self, result: InvoiceResult):
        """Record a result and update the counters."""
        self.results.append(result)

        if result.is_success:
            self.processed += 1
            self.success += 1
        elif result.is_failure:
            self.processed += 1
            self.failed += 1
            self.errors.append({
                "lesson_id": result.lesson.id,
                "message": result.message
            })
        else:
            self.skipped += 1

    @property
    def lines(self) -> List[InvoiceLine]:
        """Invoice lines of successfully priced lessons."""
        return [r.line for r in self.results if r.is_success]

    @property
    def total_amount(self) -> int:
        """Sum of all invoice line amounts."""
        return sum(line.amount for line in self.lines)

    def totals_by_charge_type(self) -> Dict[str, int]:
        """
        Sum invoice amounts per charge type.

        Returns:
            Mapping of charge type label to total amount
        """
        totals: Dict[str, int] = {}
        for line in self.lines:
            totals[line.charge_type] = totals.get(line.charge_type, 0) + line.amount
        return totals

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary format."""
        return {
            "target_month": self.target_month,
            "execution_time": self.execution_time,
            "total_lessons": self.total_lessons,
            "existing_invoices": self.existing_invoices,
            "processed": self.processed,
            "success": self.success,
            "failed": self.failed,
            "skipped": self.skipped,
            "total_amount": self.total_amount,
            "totals_by_charge_type": self.totals_by_charge_type(),
            "lines": [line.to_dict() for line in self.lines],
            "results": [r.to_dict() for r in self.results],
            "errors": self.errors
        }
