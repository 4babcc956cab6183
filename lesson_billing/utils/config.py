"""
Configuration management with environment variables.

This module provides centralized billing configuration
with validation.
"""

import os
import re
from pathlib import Path
from typing import List
from dotenv import load_dotenv


class Config:
    """
    Application configuration manager.

    Loads configuration from environment variables (and a .env file when
    present) and provides validated access to configuration values.

    Attributes:
        hourly_rate: Rate per hour for duration-based lessons
        flat_rate: Amount per lesson for flat-rate categories
        flat_rate_categories: Lesson categories charged at the flat rate
        currency: ISO 4217 code of the billing currency
        output_dir: Output directory for logs and reports
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Examples:
        >>> config = Config()
        >>> if config.validate():
        ...     selector = StrategySelector.from_config(config)
    """

    VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

    @staticmethod
    def _parse_int(value: str, name: str) -> int:
        """
        Parse an integer environment variable.

        Raises:
            ValueError: If value is not an integer
        """
        try:
            return int(value)
        except (TypeError, ValueError):
            raise ValueError(f"{name} must be an integer, got: {value!r}")

    @staticmethod
    def _parse_list(value: str) -> List[str]:
        return [item.strip() for item in value.split(",") if item.strip()]

    def __init__(self):
        """Initialize configuration by loading environment variables."""
        load_dotenv()

        # Pricing
        self._hourly_rate = self._parse_int(
            os.getenv("LESSON_HOURLY_RATE", "2300"), "LESSON_HOURLY_RATE"
        )
        self._flat_rate = self._parse_int(
            os.getenv("LESSON_FLAT_RATE", "2300"), "LESSON_FLAT_RATE"
        )
        self._flat_rate_categories = self._parse_list(
            os.getenv("LESSON_FLAT_RATE_CATEGORIES", "")
        )
        self._currency = os.getenv("BILLING_CURRENCY", "JPY").upper()

        # Output settings
        self._output_dir = Path(os.getenv("OUTPUT_DIR", "output"))
        self._log_level = os.getenv("LOG_LEVEL", "INFO").upper()

    @property
    def hourly_rate(self) -> int:
        """Get the hourly rate in the smallest currency unit."""
        return self._hourly_rate

    @property
    def flat_rate(self) -> int:
        """Get the per-lesson flat rate in the smallest currency unit."""
        return self._flat_rate

    @property
    def flat_rate_categories(self) -> List[str]:
        """Get lesson categories charged at the flat rate."""
        return list(self._flat_rate_categories)

    @property
    def currency(self) -> str:
        """Get billing currency code."""
        return self._currency

    @property
    def output_dir(self) -> Path:
        """Get output directory path."""
        return self._output_dir

    @property
    def log_level(self) -> str:
        """Get logging level."""
        return self._log_level

    def validate(self) -> bool:
        """
        Validate configuration values.

        Returns:
            True if all configuration is valid

        Raises:
            ValueError: If validation fails
        """
        errors = []

        if self._hourly_rate < 0:
            errors.append("LESSON_HOURLY_RATE must not be negative")

        if self._flat_rate < 0:
            errors.append("LESSON_FLAT_RATE must not be negative")

        if not re.match(r'^[A-Z]{3}$', self._currency):
            errors.append(
                f"BILLING_CURRENCY must be a 3-letter currency code, got: {self._currency}"
            )

        if self._log_level not in self.VALID_LOG_LEVELS:
            errors.append(
                f"LOG_LEVEL must be one of: {', '.join(self.VALID_LOG_LEVELS)}"
            )

        if errors:
            error_msg = "Configuration validation failed:\n  - " + "\n  - ".join(errors)
            raise ValueError(error_msg)

        return True

    def create_output_directories(self):
        """Create output directories if they don't exist."""
        for directory in [
            self.output_dir / "billing_logs",
            self.output_dir / "billing_data",
        ]:
            directory.mkdir(parents=True, exist_ok=True)


# Singleton instance
config = Config()
