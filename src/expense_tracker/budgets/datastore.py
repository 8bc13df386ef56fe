#!/usr/bin/env python3
"""
Budget DataStore

Whole-file persistence of monthly budgets in budgets.json, a JSON object
mapping "<year>-<month>" keys to amounts.
"""

from pathlib import Path
from typing import Any

from ..core.datastore_mixin import JsonFileStoreMixin
from ..core.money import Money


class BudgetStore(JsonFileStoreMixin[dict[str, Money]]):
    """DataStore for monthly budgets keyed by "<year>-<month>"."""

    label = "budgets"

    def __init__(self, path: Path):
        """
        Initialize budget store.

        Args:
            path: Location of budgets.json
        """
        super().__init__(path)

    def empty(self) -> dict[str, Money]:
        return {}

    def decode(self, raw: Any) -> dict[str, Money]:
        if not isinstance(raw, dict):
            raise TypeError(f"expected an object of budgets, got {type(raw).__name__}")
        return {str(key): Money.from_json(value) for key, value in raw.items()}

    def encode(self, data: dict[str, Money]) -> dict[str, Any]:
        return {key: amount.to_json() for key, amount in data.items()}

    def item_count(self) -> int | None:
        """Get count of months with a budget."""
        if not self.exists():
            return None
        return len(self.load())

    def summary_text(self) -> str:
        """Get human-readable summary."""
        count = self.item_count()
        if count is None:
            return "No budgets set"
        return f"Budgets: {count} months"
