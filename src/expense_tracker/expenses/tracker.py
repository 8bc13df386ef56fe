#!/usr/bin/env python3
"""
Expense Tracker Service

Add, update, delete and query expense records. Every mutating call reloads
the complete list from the store, applies one change and writes the complete
list back.
"""

import logging

from ..core.dates import FinancialDate
from ..core.validation import find_expense, find_expense_index
from .datastore import ExpenseStore
from .models import Expense, ExpenseChanges, NewExpense

logger = logging.getLogger(__name__)


def next_expense_id(expenses: list[Expense]) -> int:
    """
    Get the id for a new expense.

    Returns:
        One more than the largest existing id, or 1 for an empty list
    """
    if not expenses:
        return 1
    return max(expense.id for expense in expenses) + 1


def filter_by_category(expenses: list[Expense], category: str | None) -> list[Expense]:
    """Keep expenses whose category matches case-insensitively, in load order."""
    if not category:
        return list(expenses)
    return [expense for expense in expenses if expense.matches_category(category)]


class ExpenseTracker:
    """
    Service for managing expense records.

    Operates on an ExpenseStore; "today" is injectable so creation dates are
    deterministic in tests.
    """

    def __init__(self, store: ExpenseStore, today: FinancialDate | None = None):
        """
        Initialize expense tracker.

        Args:
            store: Store holding the expense list
            today: Date stamped on new expenses (default: the current date)
        """
        self.store = store
        self._today = today

    @property
    def today(self) -> FinancialDate:
        return self._today or FinancialDate.today()

    def add(self, request: NewExpense) -> Expense:
        """
        Append a new expense and persist the list.

        Args:
            request: Validated add options

        Returns:
            The created expense with its assigned id
        """
        expenses = self.store.load()

        expense = Expense(
            id=next_expense_id(expenses),
            date=self.today,
            description=request.description,
            amount=request.amount,
            category=request.category,
        )

        expenses.append(expense)
        self.store.save(expenses)

        logger.debug(f"Added expense {expense.id}: {expense.description} {expense.amount}")
        return expense

    def update(self, changes: ExpenseChanges) -> Expense:
        """
        Overwrite the supplied fields of one expense and persist the list.

        Raises:
            NotFoundError: If no expense has the requested id
        """
        expenses = self.store.load()
        expense = find_expense(expenses, changes.expense_id)

        changes.apply_to(expense)
        self.store.save(expenses)

        logger.debug(f"Updated expense {expense.id}")
        return expense

    def delete(self, expense_id: str) -> Expense:
        """
        Remove the first expense with the given id and persist the list.

        Raises:
            NotFoundError: If no expense has the requested id
        """
        expenses = self.store.load()
        index = find_expense_index(expenses, expense_id)

        removed = expenses.pop(index)
        self.store.save(expenses)

        logger.debug(f"Deleted expense {removed.id}")
        return removed

    def get(self, expense_id: str) -> Expense:
        """
        Get the first expense with the given id.

        Raises:
            NotFoundError: If no expense has the requested id
        """
        return find_expense(self.store.load(), expense_id)

    def list_expenses(self, category: str | None = None) -> list[Expense]:
        """
        Get expenses in load order, optionally filtered by category.

        Args:
            category: Case-insensitive exact category to keep

        Returns:
            Matching expenses (no sorting)
        """
        return filter_by_category(self.store.load(), category)
