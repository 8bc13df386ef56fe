#!/usr/bin/env python3
"""
Expense DataStore

Whole-file persistence of the expense list in expenses.json.
"""

from pathlib import Path
from typing import Any

from ..core.datastore_mixin import JsonFileStoreMixin
from .models import Expense


class ExpenseStore(JsonFileStoreMixin[list[Expense]]):
    """
    DataStore for expense records.

    The file holds a JSON list of expense objects in the order they were added.
    """

    label = "expenses"

    def __init__(self, path: Path):
        """
        Initialize expense store.

        Args:
            path: Location of expenses.json
        """
        super().__init__(path)

    def empty(self) -> list[Expense]:
        return []

    def decode(self, raw: Any) -> list[Expense]:
        if not isinstance(raw, list):
            raise TypeError(f"expected a list of expenses, got {type(raw).__name__}")
        return [Expense.from_dict(item) for item in raw]

    def encode(self, data: list[Expense]) -> list[dict[str, Any]]:
        return [expense.to_dict() for expense in data]

    def item_count(self) -> int | None:
        """Get count of stored expenses."""
        if not self.exists():
            return None
        return len(self.load())

    def summary_text(self) -> str:
        """Get human-readable summary."""
        count = self.item_count()
        if count is None:
            return "No expenses recorded"
        return f"Expenses: {count} records"
