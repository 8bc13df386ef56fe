#!/usr/bin/env python3
"""
Budget Service

Sets monthly budgets for the current year and compares them against what has
been spent so far in that month.
"""

import logging

from ..core.dates import FinancialDate
from ..expenses.datastore import ExpenseStore
from ..expenses.summary import filter_by_month, total_amount
from .datastore import BudgetStore
from .models import Budget, BudgetRequest, BudgetStatus

logger = logging.getLogger(__name__)


class BudgetService:
    """
    Service for monthly budgets.

    Reads expenses to compute spending but never modifies them.
    """

    def __init__(
        self,
        budget_store: BudgetStore,
        expense_store: ExpenseStore,
        today: FinancialDate | None = None,
    ):
        """
        Initialize budget service.

        Args:
            budget_store: Store holding budgets.json
            expense_store: Store holding expenses.json
            today: Reference date for "current year" (default: the current date)
        """
        self.budget_store = budget_store
        self.expense_store = expense_store
        self._today = today

    @property
    def today(self) -> FinancialDate:
        return self._today or FinancialDate.today()

    def set_budget(self, request: BudgetRequest) -> Budget:
        """
        Store or overwrite the budget for a month of the current year.

        Args:
            request: Validated month and amount

        Returns:
            The stored budget
        """
        budget = Budget(year=self.today.year, month=request.month, amount=request.amount)

        budgets = self.budget_store.load()
        budgets[budget.key] = budget.amount
        self.budget_store.save(budgets)

        logger.debug(f"Budget {budget.key} set to {budget.amount}")
        return budget

    def check_spending(self, budget: Budget) -> BudgetStatus:
        """
        Compare a budget against the expenses recorded in its month.

        Expenses are reloaded from the store so the result reflects the file.
        """
        expenses = filter_by_month(self.expense_store.load(), budget.year, budget.month)
        return BudgetStatus(budget=budget, spent=total_amount(expenses))

    def set_and_check(self, request: BudgetRequest) -> BudgetStatus:
        """Set a budget, then report spending against it."""
        return self.check_spending(self.set_budget(request))
