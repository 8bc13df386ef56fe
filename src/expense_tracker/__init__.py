"""
Expense Tracker - Personal Finance Record-Keeping from the Command Line

Records expenses and monthly budgets in flat JSON files. Every command loads
the full dataset, performs one change or query, writes the files back and
prints a human-readable result.

Domain Packages:
- core: Money and date primitives, configuration, JSON stores, validation, errors
- expenses: Expense records, tracker service, summaries and CSV export
- budgets: Monthly budgets and spending checks
- cli: The expense-tracker command

Example Usage:
    from expense_tracker.expenses import ExpenseStore, ExpenseTracker, NewExpense

    tracker = ExpenseTracker(ExpenseStore(Path("expenses.json")))
    tracker.add(NewExpense.from_options("Lunch", "20", "Food"))
"""

__version__ = "0.1.0"
__author__ = "Karl Davis"

from .core.config import Environment, get_config
from .core.dates import FinancialDate
from .core.money import Money
from .expenses.models import Expense

__all__ = [
    "Environment",
    "Expense",
    "FinancialDate",
    "Money",
    "get_config",
]
