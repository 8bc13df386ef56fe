#!/usr/bin/env python3
"""
Error Types for the Expense Tracker

Every failure the tracker can report carries one of the ErrorKind values.
Validation and lookup errors propagate to the CLI dispatcher, which prints them
as "Error: <message>" and exits with status 1. Store errors are raised by the
low-level read/write helpers and handled inside the stores, which log them and
degrade instead of aborting the command.
"""

from enum import Enum


class ErrorKind(Enum):
    """Kinds of failures reported by the tracker."""

    MISSING_ARGUMENT = "missing_argument"
    INVALID_AMOUNT = "invalid_amount"
    INVALID_MONTH = "invalid_month"
    NOT_FOUND = "not_found"
    STORE_READ_FAILURE = "store_read_failure"
    STORE_WRITE_FAILURE = "store_write_failure"


class TrackerError(Exception):
    """Base class for all expense tracker errors."""

    kind: ErrorKind

    def __init__(self, message: str, kind: ErrorKind | None = None):
        super().__init__(message)
        self.message = message
        if kind is not None:
            self.kind = kind

    def __str__(self) -> str:
        return self.message


class MissingArgumentError(TrackerError):
    """A required command-line flag was not supplied."""

    kind = ErrorKind.MISSING_ARGUMENT

    def __init__(self, flag: str, message: str | None = None):
        super().__init__(message or f"{flag} is required")
        self.flag = flag


class InvalidAmountError(TrackerError):
    """An amount was not a positive number."""

    kind = ErrorKind.INVALID_AMOUNT

    def __init__(self, message: str = "Amount must be a positive number"):
        super().__init__(message)


class InvalidMonthError(TrackerError):
    """A month was not an integer between 1 and 12."""

    kind = ErrorKind.INVALID_MONTH

    def __init__(self, message: str = "Month must be a number between 1 and 12"):
        super().__init__(message)


class NotFoundError(TrackerError):
    """No expense matched the requested identifier."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, expense_id: object):
        super().__init__(f"Expense with ID {expense_id} not found")
        self.expense_id = expense_id


class StoreReadError(TrackerError):
    """A persisted file could not be read or decoded."""

    kind = ErrorKind.STORE_READ_FAILURE


class StoreWriteError(TrackerError):
    """A persisted file could not be written."""

    kind = ErrorKind.STORE_WRITE_FAILURE
