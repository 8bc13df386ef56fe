"""
Core Utilities Package

Shared primitives and infrastructure used by the expense and budget domains.

This package provides:
- Currency handling with Decimal arithmetic for exact totals
- Date primitives for ISO calendar dates and year-month keys
- Configuration management for environment-specific settings
- Whole-file JSON stores with atomic replace
- Argument validators and the tracker's error types
"""

from .config import (
    Config,
    Environment,
    get_config,
    get_data_dir,
    is_development,
    is_production,
    is_test,
    reload_config,
)
from .currency import format_dollars, parse_decimal, plain_decimal_str
from .dates import FinancialDate, month_name, year_month_key
from .errors import (
    ErrorKind,
    InvalidAmountError,
    InvalidMonthError,
    MissingArgumentError,
    NotFoundError,
    StoreReadError,
    StoreWriteError,
    TrackerError,
)
from .money import Money
from .validation import find_expense, require_argument, validate_amount, validate_month

__all__ = [
    # Configuration
    "Config",
    "Environment",
    # Errors
    "ErrorKind",
    "FinancialDate",
    "InvalidAmountError",
    "InvalidMonthError",
    "MissingArgumentError",
    "Money",
    "NotFoundError",
    "StoreReadError",
    "StoreWriteError",
    "TrackerError",
    # Validation
    "find_expense",
    "format_dollars",
    "get_config",
    "get_data_dir",
    "is_development",
    "is_production",
    "is_test",
    "month_name",
    "parse_decimal",
    "plain_decimal_str",
    "reload_config",
    "require_argument",
    "validate_amount",
    "validate_month",
    "year_month_key",
]
