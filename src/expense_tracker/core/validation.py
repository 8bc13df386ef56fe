#!/usr/bin/env python3
"""
Argument Validators

Pure functions that turn raw command-line strings into typed values, raising a
TrackerError subclass with a user-facing message when the input is unusable.
"""

from collections.abc import Sequence
from typing import Protocol, TypeVar

from .errors import InvalidAmountError, InvalidMonthError, MissingArgumentError, NotFoundError
from .money import Money


class HasId(Protocol):
    id: int


R = TypeVar("R", bound=HasId)


def require_argument(value: str | None, flag: str, label: str | None = None) -> str:
    """
    Ensure a required flag was supplied with a non-blank value.

    Args:
        value: Raw option value (None when the flag was omitted)
        flag: Flag name used in the error message, e.g. "--description"
        label: Human name for the value, e.g. "Description"

    Returns:
        The value unchanged

    Raises:
        MissingArgumentError: If the value is None or blank
    """
    if value is None or not value.strip():
        message = f"{label} is required ({flag})" if label else None
        raise MissingArgumentError(flag, message)
    return value


def validate_amount(raw: str) -> Money:
    """
    Parse a positive amount.

    Raises:
        InvalidAmountError: If the value is not a number, is <= 0, or has no
            JSON number that stores it
    """
    try:
        money = Money.from_string(raw)
        money.to_json()
    except ValueError as e:
        raise InvalidAmountError() from e

    if not money.is_positive():
        raise InvalidAmountError()
    return money


def validate_month(raw: str) -> int:
    """
    Parse a month number.

    Raises:
        InvalidMonthError: If the value is not an integer between 1 and 12
    """
    try:
        month = int(str(raw).strip())
    except ValueError as e:
        raise InvalidMonthError() from e

    if not 1 <= month <= 12:
        raise InvalidMonthError()
    return month


def parse_expense_id(raw: str) -> int | None:
    """Parse an identifier, returning None when it is not an integer."""
    try:
        return int(str(raw).strip())
    except ValueError:
        return None


def find_expense(expenses: Sequence[R], raw_id: str) -> R:
    """
    Find the first record whose id matches the requested identifier.

    Args:
        expenses: Records in load order
        raw_id: Identifier as typed on the command line

    Returns:
        The matching record

    Raises:
        NotFoundError: If no record matches (including non-numeric ids)
    """
    return expenses[find_expense_index(expenses, raw_id)]


def find_expense_index(expenses: Sequence[R], raw_id: str) -> int:
    """Position of the first record matching raw_id; see find_expense()."""
    expense_id = parse_expense_id(raw_id)
    if expense_id is not None:
        for index, expense in enumerate(expenses):
            if expense.id == expense_id:
                return index
    raise NotFoundError(raw_id)
