#!/usr/bin/env python3
"""
DataStore Protocol - Standard interface for persisted collections.

Every store holds exactly one collection in one file and follows the same
discipline: load the whole collection, hand it to the caller, and write the
whole collection back. There are no partial reads or writes.
"""

from datetime import datetime
from typing import Protocol, TypeVar

T = TypeVar("T")


class DataStore(Protocol[T]):
    """
    Protocol for whole-file persistence of one collection.

    Type parameter T is the in-memory collection type (the list of expenses,
    the mapping of monthly budgets).
    """

    def exists(self) -> bool:
        """
        Check if the data file exists.

        Returns:
            True if the file exists, False otherwise
        """
        ...

    def load(self) -> T:
        """
        Load the complete collection.

        Never raises for a missing or unreadable file: the failure is logged
        and an empty collection is returned.

        Returns:
            The persisted collection, or an empty one
        """
        ...

    def save(self, data: T) -> None:
        """
        Replace the persisted collection with data.

        Write failures are logged, not raised.

        Args:
            data: Complete collection to persist
        """
        ...

    def last_modified(self) -> datetime | None:
        """
        Get timestamp of the last write.

        Returns:
            datetime of last modification, or None if the file doesn't exist
        """
        ...

    def age_days(self) -> int | None:
        """
        Get age of data in days since last modification.

        Returns:
            Number of days since last modification, or None if the file doesn't exist
        """
        ...

    def item_count(self) -> int | None:
        """
        Get count of records in the stored collection.

        Returns:
            Count of records, or None if the file doesn't exist
        """
        ...

    def size_bytes(self) -> int | None:
        """
        Get file size in bytes.

        Returns:
            Size of the data file, or None if it doesn't exist
        """
        ...

    def summary_text(self) -> str:
        """
        Get human-readable summary of current data state.

        Returns:
            Brief text description for verbose CLI output and logs
        """
        ...
