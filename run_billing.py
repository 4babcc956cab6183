#!/usr/bin/env python3
"""
Monthly Lesson Billing Script.

This script prices the lessons of a month with the configured cost
strategies and writes the invoice report.

Usage:
    python run_billing.py --month 2025-10 --lessons lessons.json [--existing invoices.json]

Examples:
    # Build the October 2025 invoice
    python run_billing.py --month 2025-10 --lessons data/lessons_202510.json

    # Skip lessons that were already invoiced
    python run_billing.py --month 2025-10 --lessons lessons.json --existing invoices.json

    # Print the summary only, without writing report files
    python run_billing.py --month 2025-10 --lessons lessons.json --no-export

    # Charge single lessons at a flat rate
    export LESSON_FLAT_RATE_CATEGORIES="単発レッスン"
    export LESSON_FLAT_RATE=3000
    python run_billing.py --month 2025-10 --lessons lessons.json
"""

import sys
import argparse
import logging
from pathlib import Path
from typing import List, Optional

from lesson_billing.billing.invoice_builder import InvoiceBuilder
from lesson_billing.billing.lesson_loader import load_lessons
from lesson_billing.billing.report import charge_type_report, save_invoice_report
from lesson_billing.models.invoice import InvoiceSummary
from lesson_billing.pricing import PricingError, StrategySelector
from lesson_billing.utils.config import config
from lesson_billing.utils.file_utils import load_json
from lesson_billing.utils.logger import setup_logger


def parse_arguments(argv: Optional[List[str]] = None):
    """
    Parse command-line arguments.

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        description="Build the monthly lesson invoice",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )

    parser.add_argument(
        "--month",
        required=True,
        help="Target month in YYYY-MM format (e.g., 2025-10)"
    )

    parser.add_argument(
        "--lessons",
        required=True,
        type=Path,
        help="JSON file with the lessons to bill"
    )

    parser.add_argument(
        "--existing",
        type=Path,
        help="JSON file with invoice items that already exist"
    )

    parser.add_argument(
        "--output-dir",
        type=Path,
        help="Directory for report files (default: OUTPUT_DIR/billing_data)"
    )

    parser.add_argument(
        "--no-export",
        action="store_true",
        help="Do not write report files"
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Logging level (default: LOG_LEVEL or INFO)"
    )

    return parser.parse_args(argv)


def parse_target_month(month_str: str) -> str:
    """
    Normalize a YYYY-MM month string.

    Raises:
        ValueError: If format is invalid
    """
    try:
        year, month = (int(part) for part in month_str.split("-"))
    except ValueError:
        raise ValueError(f"Invalid month format '{month_str}': expected YYYY-MM")

    if not (1 <= month <= 12):
        raise ValueError(f"Invalid month format '{month_str}': month must be between 1 and 12")

    return f"{year:04d}-{month:02d}"


def display_summary(summary: InvoiceSummary, currency: str):
    """Print the invoice lines and totals."""
    print("\n" + "=" * 60)
    print(f"INVOICE SUMMARY {summary.target_month}")
    print("=" * 60)
    print(f"Lessons in month:         {summary.total_lessons}")
    print(f"Already invoiced:         {summary.existing_invoices}")
    print(f"Priced:                   {summary.success}")
    print(f"Failed:                   {summary.failed}")
    print(f"Skipped:                  {summary.skipped}")
    print("=" * 60)

    if summary.lines:
        print("\nInvoice lines:")
        print("-" * 60)
        for idx, line in enumerate(summary.lines, 1):
            duration = f"{line.duration:>3g}min" if line.duration is not None else "  -   "
            print(
                f"{idx:2d}. {line.date} | {line.student_name:20s} | "
                f"{duration} | {line.charge_type:9s} | {line.amount:>8,d} {currency}"
            )
        print("-" * 60)

        report = charge_type_report(summary)
        for row in report.itertuples(index=False):
            print(f"{row.charge_type:12s} {int(row.lessons):3d} lessons  {int(row.amount):>10,d} {currency}")
        print(f"{'TOTAL':12s} {summary.success:3d} lessons  {summary.total_amount:>10,d} {currency}")

    if summary.errors:
        print("\nFailed lessons:")
        for error in summary.errors:
            print(f"  ✗ {error['lesson_id']}: {error['message']}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main execution function."""
    args = parse_arguments(argv)

    logger = setup_logger(
        "lesson_billing",
        level=getattr(logging, args.log_level or config.log_level, logging.INFO)
    )

    try:
        target_month = parse_target_month(args.month)
        logger.info(f"Target month: {target_month}")

        logger.info("Validating configuration")
        config.validate()

        selector = StrategySelector.from_config(config)
    except (ValueError, PricingError) as e:
        logger.error(f"Startup failed: {e}")
        print(f"ERROR: {e}")
        return 1

    print(f"\n[1/3] Loading lessons from {args.lessons}...")
    lessons_result = load_lessons(args.lessons)
    if lessons_result.is_failure:
        logger.error(lessons_result.message)
        print(f"ERROR: {lessons_result.message}")
        return 1

    batch = lessons_result.value
    print(f"✓ Loaded {len(batch.lessons)} lessons")
    if batch.rejected:
        print(f"✗ Rejected {len(batch.rejected)} invalid entries")

    existing_invoices = []
    if args.existing:
        existing = load_json(args.existing)
        if not isinstance(existing, list):
            print(f"ERROR: Could not read existing invoices from {args.existing}")
            return 1

        invalid = [index for index, item in enumerate(existing) if not isinstance(item, dict)]
        if invalid:
            logger.error(
                f"Existing invoices in {args.existing} must be objects, "
                f"invalid entries at: {invalid}"
            )
            print(f"ERROR: Invalid existing invoice entries at {invalid} in {args.existing}")
            return 1
        existing_invoices = existing

    print(f"\n[2/3] Pricing lessons for {target_month}...")
    summary = InvoiceBuilder(selector).build(target_month, batch.lessons, existing_invoices)
    display_summary(summary, config.currency)

    if args.no_export:
        print("\n[3/3] Export disabled, skipping report")
    else:
        output_dir = args.output_dir or (config.output_dir / "billing_data")
        print(f"\n[3/3] Saving report to {output_dir}...")
        try:
            written = save_invoice_report(summary, output_dir)
        except OSError as e:
            logger.error(f"Report export failed: {e}")
            print(f"ERROR: {e}")
            return 1
        for kind, path in written.items():
            print(f"✓ {kind.upper()} saved to: {path}")

    print("\n" + "=" * 60)
    print("EXECUTION COMPLETE")
    print("=" * 60)

    return 0 if not (summary.failed or batch.rejected) else 1


if __name__ == "__main__":
    sys.exit(main())
