#!/usr/bin/env python3
"""
CSV Export

Writes every expense to a CSV file with the header
ID,Date,Description,Amount,Category. Descriptions are wrapped in double quotes
as-is; quotes or commas inside a description are not escaped.
"""

import logging
from pathlib import Path

from .models import Expense

logger = logging.getLogger(__name__)

CSV_HEADER = "ID,Date,Description,Amount,Category"


def format_csv_row(expense: Expense) -> str:
    """Format one expense as a CSV row."""
    return (
        f"{expense.id},{expense.date.to_iso_string()},"
        f'"{expense.description}",{expense.amount.to_plain_string()},{expense.category}'
    )


def format_csv(expenses: list[Expense]) -> str:
    """
    Render expenses as CSV content.

    Rows are newline-separated with no newline after the last row.
    """
    rows = [format_csv_row(expense) for expense in expenses]
    return CSV_HEADER + "\n" + "\n".join(rows)


def export_csv(expenses: list[Expense], filepath: str | Path) -> Path:
    """
    Write expenses to a CSV file, replacing any existing file.

    Args:
        expenses: Expenses in load order (must be non-empty)
        filepath: Target file

    Returns:
        Path of the written file

    Raises:
        ValueError: If there are no expenses to export
        OSError: If the file can't be written
    """
    if not expenses:
        raise ValueError("No expenses to export")

    filepath = Path(filepath)
    with open(filepath, "w", encoding="utf-8", newline="") as f:
        f.write(format_csv(expenses))

    logger.debug(f"Exported {len(expenses)} expenses to {filepath}")
    return filepath
