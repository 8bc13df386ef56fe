#!/usr/bin/env python3
"""
Expense Data Models

The persisted Expense record plus the typed request structures each command
builds from its raw options. Requests are validated once, when they are built,
so the tracker only ever sees clean values.
"""

from dataclasses import dataclass
from typing import Any

from ..core.dates import FinancialDate
from ..core.money import Money
from ..core.validation import require_argument, validate_amount, validate_month

DEFAULT_CATEGORY = "General"


@dataclass
class Expense:
    """
    One persisted spending entry.

    The id is assigned on creation and never changes; the date records when the
    expense was added and is not editable.
    """

    id: int
    date: FinancialDate
    description: str
    amount: Money
    category: str = DEFAULT_CATEGORY

    def matches_category(self, category: str) -> bool:
        """Case-insensitive exact category match."""
        return self.category.lower() == category.lower()

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "date": self.date.to_iso_string(),
            "description": self.description,
            "amount": self.amount.to_json(),
            "category": self.category,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Expense":
        """
        Create Expense from a stored dictionary.

        Raises:
            KeyError, TypeError, ValueError: If a field is missing or malformed
        """
        expense_id = data["id"]
        if isinstance(expense_id, bool) or not isinstance(expense_id, int):
            raise TypeError(f"expense id must be an integer, got {expense_id!r}")

        return cls(
            id=expense_id,
            date=FinancialDate.from_string(data["date"]),
            description=str(data["description"]),
            amount=Money.from_json(data["amount"]),
            category=str(data.get("category", DEFAULT_CATEGORY)),
        )


@dataclass(frozen=True)
class NewExpense:
    """Validated options for the add command."""

    description: str
    amount: Money
    category: str = DEFAULT_CATEGORY

    @classmethod
    def from_options(
        cls,
        description: str | None,
        amount: str | None,
        category: str | None = None,
        default_category: str = DEFAULT_CATEGORY,
    ) -> "NewExpense":
        """
        Validate add options.

        Raises:
            MissingArgumentError: If description or amount is missing
            InvalidAmountError: If amount is not a positive number
        """
        description = require_argument(description, "--description", "Description")
        amount = require_argument(amount, "--amount", "Amount")

        return cls(
            description=description.strip(),
            amount=validate_amount(amount),
            category=(category or "").strip() or default_category,
        )


@dataclass(frozen=True)
class ExpenseChanges:
    """Validated options for the update command; None means "leave as is"."""

    expense_id: str
    description: str | None = None
    amount: Money | None = None
    category: str | None = None

    @classmethod
    def from_options(
        cls,
        expense_id: str | None,
        description: str | None = None,
        amount: str | None = None,
        category: str | None = None,
    ) -> "ExpenseChanges":
        """
        Validate update options.

        Empty values are treated as not supplied.

        Raises:
            MissingArgumentError: If the id is missing
            InvalidAmountError: If an amount is supplied but not positive
        """
        expense_id = require_argument(expense_id, "--id", "Expense ID")

        return cls(
            expense_id=expense_id.strip(),
            description=description.strip() if description else None,
            amount=validate_amount(amount) if amount else None,
            category=category.strip() if category else None,
        )

    def apply_to(self, expense: Expense) -> None:
        """Overwrite the supplied fields on expense in place."""
        if self.description is not None:
            expense.description = self.description
        if self.amount is not None:
            expense.amount = self.amount
        if self.category is not None:
            expense.category = self.category


@dataclass(frozen=True)
class ExpenseQuery:
    """Validated filters for the list and summary commands."""

    month: int | None = None
    category: str | None = None

    @classmethod
    def from_options(cls, month: str | None = None, category: str | None = None) -> "ExpenseQuery":
        """
        Validate filter options.

        Raises:
            InvalidMonthError: If a month is supplied but not 1-12
        """
        return cls(
            month=validate_month(month) if month else None,
            category=category if category else None,
        )
