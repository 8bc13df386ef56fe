#!/usr/bin/env python3
"""
Budget Data Models
"""

from dataclasses import dataclass

from ..core.dates import month_name, year_month_key
from ..core.errors import MissingArgumentError
from ..core.money import Money
from ..core.validation import validate_amount, validate_month


@dataclass(frozen=True)
class BudgetRequest:
    """Validated options for the budget command."""

    month: int
    amount: Money

    @classmethod
    def from_options(cls, month: str | None, amount: str | None) -> "BudgetRequest":
        """
        Validate budget options.

        Raises:
            MissingArgumentError: If month or amount is missing
            InvalidMonthError: If month is not 1-12
            InvalidAmountError: If amount is not a positive number
        """
        if not month or not amount:
            flag = "--month" if not month else "--amount"
            raise MissingArgumentError(flag, "Both --month and --amount are required")

        return cls(month=validate_month(month), amount=validate_amount(amount))


@dataclass(frozen=True)
class Budget:
    """Spending ceiling for one calendar month."""

    year: int
    month: int
    amount: Money

    @property
    def key(self) -> str:
        """Key used in budgets.json, e.g. "2024-8"."""
        return year_month_key(self.year, self.month)

    @property
    def month_name(self) -> str:
        return month_name(self.month)


@dataclass(frozen=True)
class BudgetStatus:
    """Spending for a month compared against its budget."""

    budget: Budget
    spent: Money

    @property
    def over_budget(self) -> bool:
        """True only when spending strictly exceeds the budget."""
        return self.spent > self.budget.amount

    @property
    def overage(self) -> Money:
        """Amount spent beyond the budget (zero when within budget)."""
        if not self.over_budget:
            return Money.zero()
        return self.spent - self.budget.amount

    @property
    def remaining(self) -> Money:
        """Budget left to spend (zero when over budget)."""
        if self.over_budget:
            return Money.zero()
        return self.budget.amount - self.spent
