"""
Expenses Package

Expense records, their JSON store, and the operations the CLI exposes on them.

Key Components:
- Expense / NewExpense / ExpenseChanges / ExpenseQuery: record and request models
- ExpenseStore: whole-file persistence in expenses.json
- ExpenseTracker: add, update, delete and list
- summarize(): totals and per-category breakdowns
- export_csv(): CSV export of every record
"""

from .datastore import ExpenseStore
from .export import export_csv, format_csv
from .models import DEFAULT_CATEGORY, Expense, ExpenseChanges, ExpenseQuery, NewExpense
from .report import format_expense_table, format_summary
from .summary import ExpenseSummary, category_breakdown, filter_by_month, summarize, total_amount
from .tracker import ExpenseTracker, filter_by_category, next_expense_id

__all__ = [
    "DEFAULT_CATEGORY",
    "Expense",
    "ExpenseChanges",
    "ExpenseQuery",
    "ExpenseStore",
    "ExpenseSummary",
    "ExpenseTracker",
    "NewExpense",
    "category_breakdown",
    "export_csv",
    "filter_by_category",
    "filter_by_month",
    "format_csv",
    "format_expense_table",
    "format_summary",
    "next_expense_id",
    "summarize",
    "total_amount",
]
