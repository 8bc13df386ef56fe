"""
Budgets Package

Monthly spending ceilings stored in budgets.json and checked against the
expenses recorded for the same month.
"""

from .datastore import BudgetStore
from .models import Budget, BudgetRequest, BudgetStatus
from .service import BudgetService

__all__ = [
    "Budget",
    "BudgetRequest",
    "BudgetService",
    "BudgetStatus",
    "BudgetStore",
]
