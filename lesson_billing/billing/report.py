"""
Invoice reporting.

Builds pandas views over an InvoiceSummary and writes the JSON/CSV
report files.
"""

import logging
from pathlib import Path
from typing import Dict

import pandas as pd

from ..models.invoice import InvoiceSummary
from ..models.schema_version import VersionedData
from ..utils.file_utils import generate_filename, save_csv, save_json


logger = logging.getLogger(__name__)

LINE_COLUMNS = [
    "lesson_id",
    "date",
    "student_id",
    "student_name",
    "category",
    "duration",
    "charge_type",
    "amount",
]


def invoice_dataframe(summary: InvoiceSummary) -> pd.DataFrame:
    """
    Tabulate the invoice lines of a summary.

    Returns:
        DataFrame with one row per invoice line (LINE_COLUMNS)
    """
    return pd.DataFrame(
        [line.to_dict() for line in summary.lines],
        columns=LINE_COLUMNS
    )


def charge_type_report(summary: InvoiceSummary) -> pd.DataFrame:
    """
    Aggregate invoice lines by charge type.

    Returns:
        DataFrame with columns charge_type, lessons, amount
    """
    df = invoice_dataframe(summary)
    if df.empty:
        return pd.DataFrame(columns=["charge_type", "lessons", "amount"])

    return (
        df.groupby("charge_type", sort=True)
        .agg(lessons=("lesson_id", "count"), amount=("amount", "sum"))
        .reset_index()
    )


def save_invoice_report(summary: InvoiceSummary, output_dir: Path) -> Dict[str, Path]:
    """
    Save the invoice report.

    Writes a versioned JSON report and, when there are invoice lines, a
    CSV of the lines.

    Args:
        summary: Invoice summary to save
        output_dir: Directory for the report files

    Returns:
        Mapping of "json"/"csv" to the written file paths

    Raises:
        OSError: If the JSON report cannot be written
    """
    month = summary.target_month.replace("-", "")
    written: Dict[str, Path] = {}

    json_path = output_dir / generate_filename(f"invoice_report_{month}", "json")
    if not save_json(VersionedData.wrap(summary.to_dict()).to_dict(), json_path):
        raise OSError(f"Failed to write invoice report: {json_path}")
    written["json"] = json_path

    if summary.lines:
        csv_path = output_dir / generate_filename(f"invoice_lines_{month}", "csv")
        if save_csv(invoice_dataframe(summary), csv_path):
            written["csv"] = csv_path
        else:
            logger.warning(f"Invoice lines CSV was not written: {csv_path}")

    logger.info(f"Invoice report saved: {', '.join(str(p) for p in written.values())}")
    return written
