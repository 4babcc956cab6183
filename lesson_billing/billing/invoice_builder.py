"""
Monthly invoice builder.

Selects a cost strategy for each lesson, prices it and collects the
outcome into an InvoiceSummary.
"""

import logging
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional

from ..models.invoice import InvoiceLine, InvoiceResult, InvoiceStatus, InvoiceSummary
from ..models.lesson import Lesson
from ..models.result import Result
from ..pricing.errors import PricingError
from ..pricing.selector import StrategySelector


logger = logging.getLogger(__name__)


class InvoiceBuilder:
    """
    Builds invoices from lessons.

    Examples:
        >>> builder = InvoiceBuilder(StrategySelector.from_config(config))
        >>> summary = builder.build("2025-10", lessons)
        >>> print(summary.total_amount)
    """

    def __init__(self, selector: StrategySelector):
        """
        Initialize builder.

        Args:
            selector: Strategy selector used to price lessons
        """
        self.selector = selector

    def price_lesson(self, lesson: Lesson) -> Result[InvoiceLine]:
        """
        Price a single lesson.

        Args:
            lesson: Lesson to price

        Returns:
            Result containing the invoice line, or a failure carrying the
            pricing error
        """
        strategy = self.selector.select(lesson)

        try:
            amount = strategy.cost(lesson)
        except PricingError as e:
            logger.error(
                f"Failed to price lesson {lesson.id} "
                f"student_name={lesson.student_name}: {e}"
            )
            return Result.failure(str(e), e)

        line = InvoiceLine.for_lesson(lesson, strategy.charge_type(), amount)
        logger.debug(
            f"Priced lesson {lesson.id} student_name={lesson.student_name}: "
            f"{line.amount} ({line.charge_type})"
        )
        return Result.success(line)

    @staticmethod
    def is_duplicate(
        lesson: Lesson,
        existing_invoices: List[Dict[str, Any]]
    ) -> bool:
        """
        Check if lesson is already invoiced.

        Args:
            lesson: Lesson to check
            existing_invoices: Existing invoice items (dicts with date and
                student_id or student_name)

        Returns:
            True if duplicate found
        """
        for invoice in existing_invoices:
            if invoice.get("date") != lesson.date:
                continue

            if invoice.get("student_id") == lesson.student_id:
                return True

            # Fallback for invoice items recorded without a student id
            if invoice.get("student_name") == lesson.student_name:
                return True

        return False

    def build(
        self,
        target_month: str,
        lessons: Iterable[Lesson],
        existing_invoices: Optional[List[Dict[str, Any]]] = None
    ) -> InvoiceSummary:
        """
        Build the invoice for a month.

        Lessons outside target_month are ignored. Lessons that are not
        completed, or that are already invoiced, are skipped.

        Args:
            target_month: Target month (YYYY-MM)
            lessons: Candidate lessons
            existing_invoices: Invoice items that already exist

        Returns:
            InvoiceSummary with one result per lesson in the month
        """
        existing_invoices = existing_invoices or []
        month_lessons = [lesson for lesson in lessons if lesson.month == target_month]

        summary = InvoiceSummary(
            target_month=target_month,
            execution_time=datetime.now().astimezone().isoformat(),
            total_lessons=len(month_lessons),
            existing_invoices=len(existing_invoices)
        )

        logger.info(
            f"Building invoice for {target_month}: {len(month_lessons)} lessons, "
            f"{len(existing_invoices)} existing invoice items"
        )

        for lesson in month_lessons:
            if not lesson.is_completed:
                summary.add_result(InvoiceResult(
                    lesson=lesson,
                    status=InvoiceStatus.SKIPPED,
                    message=f"Lesson status is {lesson.status}"
                ))
                continue

            if self.is_duplicate(lesson, existing_invoices):
                summary.add_result(InvoiceResult(
                    lesson=lesson,
                    status=InvoiceStatus.SKIPPED,
                    message="Already invoiced"
                ))
                continue

            result = self.price_lesson(lesson)
            if result.is_success:
                summary.add_result(InvoiceResult(
                    lesson=lesson,
                    status=InvoiceStatus.SUCCESS,
                    line=result.value
                ))
            else:
                summary.add_result(InvoiceResult(
                    lesson=lesson,
                    status=InvoiceStatus.FAILED,
                    message=result.message
                ))

        logger.info(
            f"Invoice built for {target_month}: success={summary.success}, "
            f"failed={summary.failed}, skipped={summary.skipped}, "
            f"total={summary.total_amount}"
        )
        return summary
