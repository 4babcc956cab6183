"""
Lesson file loading.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

from ..models.lesson import Lesson
from ..models.result import Result
from ..utils.file_utils import load_json
from ..validation.lesson_validator import LessonValidator


logger = logging.getLogger(__name__)


@dataclass
class LessonBatch:
    """
    Lessons read from a file.

    Attributes:
        lessons: Lessons that passed validation
        rejected: Entries that failed validation, with the reason
    """

    lessons: List[Lesson] = field(default_factory=list)
    rejected: List[Dict[str, Any]] = field(default_factory=list)


def load_lessons(path: Path) -> Result[LessonBatch]:
    """
    Load and validate lessons from a JSON file.

    The file holds either a list of lesson objects or an object with a
    "lessons" list.

    Args:
        path: Path to the JSON file

    Returns:
        Result containing the LessonBatch, or a failure if the file cannot
        be read
    """
    data = load_json(path)
    if data is None:
        return Result.failure(f"Could not read lessons from {path}")

    if isinstance(data, dict):
        data = data.get("lessons")
    if not isinstance(data, list):
        return Result.failure(f"{path} must contain a list of lessons")

    validator = LessonValidator()
    batch = LessonBatch()

    for index, entry in enumerate(data):
        validation = validator.validate(entry)

        for warning in validation.warnings:
            logger.warning(f"Lesson #{index}: {warning}")

        if not validation.is_valid:
            logger.warning(f"Rejected lesson #{index}: {'; '.join(validation.errors)}")
            batch.rejected.append({
                "index": index,
                "lesson": entry,
                "errors": validation.errors,
                "summary": validation.get_summary()
            })
            continue

        batch.lessons.append(Lesson.from_dict(entry))

    logger.info(
        f"Loaded {len(batch.lessons)} lessons from {path} "
        f"({len(batch.rejected)} rejected)"
    )
    return Result.success(batch)
