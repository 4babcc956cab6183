"""
Lesson data validator.

Validates raw lesson dictionaries before they become Lesson values.
"""

from typing import Dict, Any

from ..models.lesson import VALID_STATUSES
from .validators import Validator, ValidationResult


class LessonValidator(Validator):
    """
    Validator for lesson data.

    Duration is optional here: whether a lesson needs one depends on the
    cost strategy that prices it.

    Examples:
        >>> validator = LessonValidator()
        >>> result = validator.validate(lesson_dict)
        >>> if not result.is_valid:
        ...     print(result.get_summary())
    """

    # Business rule constraints
    MAX_DURATION = 180  # minutes

    REQUIRED_FIELDS = [
        "id",
        "date",
        "student_id",
        "student_name",
        "status",
        "category"
    ]

    def validate(self, data: Dict[str, Any]) -> ValidationResult:
        """
        Validate lesson data.

        Args:
            data: Lesson data dictionary

        Returns:
            ValidationResult with errors and warnings
        """
        result = ValidationResult(is_valid=True)

        if not isinstance(data, dict):
            return result.add_error(
                f"Lesson must be an object, got {type(data).__name__}"
            )

        for error in self.validate_required_fields(data, self.REQUIRED_FIELDS):
            result.add_error(error)

        if not result.is_valid:
            return result

        string_fields = [
            ("id", 100),
            ("student_id", 100),
            ("student_name", 200),
            ("category", 100),
        ]
        for name, max_length in string_fields:
            error = self.validate_string_length(
                data[name],
                name,
                min_length=1,
                max_length=max_length
            )
            if error:
                result.add_error(error)

        error = self.validate_date_format(data["date"], "date")
        if error:
            result.add_error(error)

        if data["status"] not in VALID_STATUSES:
            result.add_error(
                f"Invalid status: {data['status']} "
                f"(must be one of: {', '.join(VALID_STATUSES)})"
            )

        duration = data.get("duration")
        if duration is not None:
            error = self.validate_non_negative_number(duration, "duration")
            if error:
                result.add_error(error)
            elif duration > self.MAX_DURATION:
                result.add_warning(
                    f"Duration unusually long: {duration} minutes "
                    f"(maximum recommended: {self.MAX_DURATION})"
                )

        return result
