"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

from datetime import date
from pathlib import Path

import pytest

import expense_tracker.core.config as config_module
from expense_tracker.core.dates import FinancialDate
from expense_tracker.expenses.datastore import ExpenseStore
from expense_tracker.expenses.models import Expense
from expense_tracker.budgets.datastore import BudgetStore
from tests.fixtures.sample_data import make_expense

CONFIG_ENV_VARS = (
    "EXPENSE_TRACKER_EXPENSES_FILE",
    "EXPENSE_TRACKER_BUDGETS_FILE",
    "EXPENSE_TRACKER_EXPORT_FILE",
    "DEFAULT_CATEGORY",
    "DEBUG",
    "LOG_LEVEL",
)


@pytest.fixture
def data_dir(tmp_path) -> Path:
    """Directory holding the JSON data files for one test."""
    return tmp_path / "data"


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch, data_dir):
    """Set up test environment variables."""
    # Ensure tests never touch files in the working directory
    monkeypatch.setenv("EXPENSE_TRACKER_ENV", "test")
    monkeypatch.setenv("EXPENSE_TRACKER_DATA_DIR", str(data_dir))
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)

    # Force the next get_config() to read the environment above
    monkeypatch.setattr(config_module, "_config", None)


@pytest.fixture
def today() -> FinancialDate:
    """Fixed reference date for services that need "today"."""
    return FinancialDate(date=date(2024, 8, 15))


@pytest.fixture
def expense_store(data_dir) -> ExpenseStore:
    return ExpenseStore(data_dir / "expenses.json")


@pytest.fixture
def budget_store(data_dir) -> BudgetStore:
    return BudgetStore(data_dir / "budgets.json")


@pytest.fixture
def sample_expenses() -> list[Expense]:
    """Expenses spread over July and August 2024 plus August 2023."""
    return [
        make_expense(1, "2024-08-01", "Groceries", "45.50", "Food"),
        make_expense(2, "2024-08-03", "Bus pass", "30", "Transport"),
        make_expense(3, "2024-07-20", "Dinner out", "62.25", "Food"),
        make_expense(4, "2024-08-10", "Coffee", "4.50", "food"),
        make_expense(5, "2023-08-12", "Old groceries", "20", "Food"),
        make_expense(6, "2024-08-14", "Notebook", "12", "General"),
    ]


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "integration: Integration tests for complete workflows"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests that run the CLI in a subprocess"
    )
    config.addinivalue_line(
        "markers", "currency: Tests for currency handling and precision"
    )
    config.addinivalue_line(
        "markers", "expenses: Tests for expense records"
    )
    config.addinivalue_line(
        "markers", "budgets: Tests for monthly budgets"
    )
