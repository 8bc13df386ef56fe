#!/usr/bin/env python3
"""
Text rendering for the list and summary commands.
"""

from .models import Expense
from .summary import ExpenseSummary

TABLE_HEADER = "ID  Date       Description                Amount    Category"
TABLE_RULE = "--  ---------- -------------------------- --------- ----------"


def format_expense_row(expense: Expense) -> str:
    """Format one expense as a fixed-width table row."""
    return (
        f"{str(expense.id):<2}  "
        f"{expense.date.to_iso_string():<10} "
        f"{expense.description:<26} "
        f"{str(expense.amount):<9} "
        f"{expense.category}"
    )


def format_expense_table(expenses: list[Expense]) -> list[str]:
    """
    Render expenses as a table, header first.

    Values longer than their column are not truncated.
    """
    return [TABLE_HEADER, TABLE_RULE] + [format_expense_row(expense) for expense in expenses]


def format_summary(summary: ExpenseSummary) -> list[str]:
    """Render a summary as output lines."""
    lines = [f"{summary.label}: {summary.total}"]

    if summary.breakdown:
        lines.append("")
        lines.append("Breakdown by category:")
        for category, subtotal in summary.breakdown:
            lines.append(f"  {category}: {subtotal}")

    return lines
