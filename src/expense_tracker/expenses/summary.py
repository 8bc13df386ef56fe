#!/usr/bin/env python3
"""
Expense Summary Calculations

Totals and per-category breakdowns over the expense list, optionally
restricted to one month of the current year and/or one category.
"""

from dataclasses import dataclass, field

from ..core.dates import FinancialDate, month_name
from ..core.money import Money
from .models import Expense, ExpenseQuery
from .tracker import filter_by_category


@dataclass
class ExpenseSummary:
    """Result of summarizing a filtered set of expenses."""

    label: str
    total: Money
    expense_count: int
    # Empty when a category filter is active
    breakdown: list[tuple[str, Money]] = field(default_factory=list)


def filter_by_month(expenses: list[Expense], year: int, month: int) -> list[Expense]:
    """Keep expenses dated in the given calendar month, in load order."""
    return [expense for expense in expenses if expense.date.in_month(year, month)]


def total_amount(expenses: list[Expense]) -> Money:
    """Sum the amounts of expenses."""
    total = Money.zero()
    for expense in expenses:
        total = total + expense.amount
    return total


def category_breakdown(expenses: list[Expense]) -> list[tuple[str, Money]]:
    """
    Subtotal expenses per category.

    Categories are grouped by their stored spelling and sorted by descending
    subtotal; ties keep the order in which categories first appear.

    Returns:
        List of (category, subtotal) pairs
    """
    totals: dict[str, Money] = {}
    for expense in expenses:
        totals[expense.category] = totals.get(expense.category, Money.zero()) + expense.amount

    return sorted(totals.items(), key=lambda item: item[1].amount, reverse=True)


def summarize(expenses: list[Expense], query: ExpenseQuery, today: FinancialDate | None = None) -> ExpenseSummary:
    """
    Summarize expenses for the summary command.

    The month filter (current year only) is applied first, then the category
    filter. A breakdown by category is included only when no category filter
    is active and at least one expense matched.

    Args:
        expenses: All expenses in load order
        query: Validated month/category filters
        today: Reference date for "current year" (default: the current date)

    Returns:
        ExpenseSummary with label, total and optional breakdown
    """
    today = today or FinancialDate.today()
    selected = list(expenses)
    label = "Total expenses"

    if query.month is not None:
        selected = filter_by_month(selected, today.year, query.month)
        label = f"Total expenses for {month_name(query.month)}"

    if query.category:
        selected = filter_by_category(selected, query.category)
        label += f" ({query.category})"

    breakdown = []
    if not query.category and selected:
        breakdown = category_breakdown(selected)

    return ExpenseSummary(
        label=label,
        total=total_amount(selected),
        expense_count=len(selected),
        breakdown=breakdown,
    )
