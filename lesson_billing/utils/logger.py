"""
Logging utilities.

This module provides logging setup with:
- Configurable log levels and output destinations
- Log rotation for file handlers
- Student name masking
- Structured log format
"""

import logging
import re
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional


def mask_name(name: str) -> str:
    """
    Mask a student name for safe logging.

    Args:
        name: Name to mask

    Returns:
        First character followed by "***"

    Examples:
        >>> mask_name("山田太郎")
        '山***'
        >>> mask_name("")
        '***'
    """
    if not name:
        return "***"
    return name[0] + "***"


class StudentNameFilter(logging.Filter):
    """
    Logging filter that masks student names.

    Matches "student_name=VALUE" and "student_name: VALUE" in the
    rendered message.
    """

    PATTERN = re.compile(
        r'(student_name["\']?\s*[:=]\s*["\']?)([^"\'\s,:]+)',
        flags=re.IGNORECASE
    )

    def filter(self, record: logging.LogRecord) -> bool:
        """
        Mask student names in the log record.

        Returns:
            Always True (allows all records through after masking)
        """
        message = record.getMessage()
        masked = self.PATTERN.sub(
            lambda m: m.group(1) + mask_name(m.group(2)),
            message
        )
        if masked != message:
            record.msg = masked
            record.args = None
        return True


def setup_logger(
    name: str = "lesson_billing",
    level: int = logging.INFO,
    log_file: Optional[str] = None
) -> logging.Logger:
    """
    Set up and configure a logger instance.

    Args:
        name: Logger name (default: "lesson_billing")
        level: Logging level (default: logging.INFO)
        log_file: Optional path to log file for file output

    Returns:
        Configured logger instance

    Examples:
        >>> logger = setup_logger()
        >>> logger.info("Billing started")

        >>> logger = setup_logger(
        ...     level=logging.DEBUG,
        ...     log_file="output/billing_logs/billing.log"
        ... )
    """
    logger = logging.getLogger(name)

    # Avoid duplicate handlers
    if logger.handlers:
        return logger

    logger.setLevel(level)

    formatter = logging.Formatter(
        fmt='%(asctime)s [%(levelname)s] %(name)s:%(funcName)s:%(lineno)d %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    name_filter = StudentNameFilter()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.addFilter(name_filter)
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setFormatter(formatter)
        file_handler.addFilter(name_filter)
        logger.addHandler(file_handler)

    return logger
