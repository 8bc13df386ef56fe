#!/usr/bin/env python3
"""
FinancialDate Primitive Type

Immutable date wrapper with consistent formatting for expense records.
Expense dates are stored as ISO calendar dates (YYYY-MM-DD) with no time part.
"""

import calendar
from dataclasses import dataclass
from datetime import date, datetime


def month_name(month: int) -> str:
    """
    Get the English name for a month number.

    Args:
        month: Month number 1-12

    Returns:
        Month name, e.g. month_name(8) -> "August"
    """
    return calendar.month_name[month]


def year_month_key(year: int, month: int) -> str:
    """
    Build the budget key for a calendar month.

    Months are not zero-padded: year_month_key(2024, 8) -> "2024-8"
    """
    return f"{year}-{month}"


@dataclass(frozen=True)
class FinancialDate:
    """Immutable financial date wrapper with consistent formatting."""

    date: date

    @classmethod
    def from_string(cls, date_str: str, date_format: str = "%Y-%m-%d") -> "FinancialDate":
        """
        Parse from string in specified format.

        Args:
            date_str: Date string to parse
            date_format: Date format (default: ISO format "%Y-%m-%d")

        Returns:
            FinancialDate object

        Raises:
            ValueError: If the string does not match the format
        """
        return cls(date=datetime.strptime(date_str, date_format).date())

    @classmethod
    def today(cls) -> "FinancialDate":
        """Get today's date."""
        return cls(date=date.today())

    @property
    def year(self) -> int:
        return self.date.year

    @property
    def month(self) -> int:
        return self.date.month

    def in_month(self, year: int, month: int) -> bool:
        """Check whether this date falls in the given calendar month."""
        return self.date.year == year and self.date.month == month

    def to_iso_string(self) -> str:
        """Format as YYYY-MM-DD."""
        return self.date.isoformat()

    def age_days(self, other: "FinancialDate | None" = None) -> int:
        """
        Calculate days between this date and another (or today).

        Args:
            other: Other date to compare to (default: today)

        Returns:
            Number of days difference
        """
        if other is None:
            other = FinancialDate.today()
        return (other.date - self.date).days

    def __str__(self) -> str:
        """String representation."""
        return self.to_iso_string()

    def __lt__(self, other: "FinancialDate") -> bool:
        """Less than comparison."""
        return self.date < other.date

    def __le__(self, other: "FinancialDate") -> bool:
        """Less than or equal comparison."""
        return self.date <= other.date

    def __gt__(self, other: "FinancialDate") -> bool:
        """Greater than comparison."""
        return self.date > other.date

    def __ge__(self, other: "FinancialDate") -> bool:
        """Greater than or equal comparison."""
        return self.date >= other.date

    def __repr__(self) -> str:
        """Repr format."""
        return f"FinancialDate(date={self.date!r})"
