#!/usr/bin/env python3
"""
DataStore Mixin - Common functionality for single-file JSON stores.

Provides the shared load/save discipline and metadata methods so each concrete
store only describes how its collection maps to and from JSON.
"""

import logging
from abc import abstractmethod
from datetime import datetime
from decimal import InvalidOperation
from pathlib import Path
from typing import Any, Generic, TypeVar

from .errors import StoreReadError, StoreWriteError
from .json_utils import read_json, write_json

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Anything a malformed document can raise while being decoded
DECODE_ERRORS = (KeyError, TypeError, ValueError, AttributeError, InvalidOperation)


class JsonFileStoreMixin(Generic[T]):
    """
    Mixin providing whole-file JSON persistence.

    Provides:
    - load(): read + decode, degrading to an empty collection on failure
    - save(): encode + atomic replace, logging failures instead of raising
    - read()/write(): the strict variants that raise StoreReadError/StoreWriteError
    - Common metadata methods (exists, last_modified, age_days, size_bytes)

    Subclasses must implement:
    - label (class attribute, e.g. "expenses")
    - empty() -> T
    - decode(raw) -> T
    - encode(data) -> Any
    - item_count() -> int | None
    - summary_text() -> str
    """

    label: str = "data"

    def __init__(self, path: Path):
        """
        Initialize the store.

        Args:
            path: JSON file holding the collection
        """
        self.path = Path(path)

    @abstractmethod
    def empty(self) -> T:
        """Create an empty collection."""
        ...

    @abstractmethod
    def decode(self, raw: Any) -> T:
        """Convert parsed JSON into the in-memory collection."""
        ...

    @abstractmethod
    def encode(self, data: T) -> Any:
        """Convert the in-memory collection into JSON-serializable data."""
        ...

    @abstractmethod
    def item_count(self) -> int | None:
        """Get count of records in stored data."""
        ...

    @abstractmethod
    def summary_text(self) -> str:
        """Get human-readable summary of current data state."""
        ...

    def read(self) -> T:
        """
        Read and decode the file.

        Returns:
            The stored collection, or an empty one if the file doesn't exist

        Raises:
            StoreReadError: If the file can't be read or its content is invalid
        """
        if not self.exists():
            return self.empty()

        try:
            raw = read_json(self.path)
        except (OSError, ValueError) as e:
            raise StoreReadError(f"Error loading {self.label}: {e}") from e

        try:
            return self.decode(raw)
        except DECODE_ERRORS as e:
            raise StoreReadError(f"Error loading {self.label}: invalid record in {self.path}: {e}") from e

    def write(self, data: T) -> None:
        """
        Encode and atomically replace the file.

        Raises:
            StoreWriteError: If the file can't be written
        """
        try:
            write_json(self.path, self.encode(data))
        except (OSError, TypeError, ValueError) as e:
            raise StoreWriteError(f"Error saving {self.label}: {e}") from e

    def load(self) -> T:
        """
        Load the collection, treating any read failure as empty.

        Returns:
            The stored collection, or an empty one
        """
        try:
            data = self.read()
        except StoreReadError as e:
            logger.error(str(e))
            return self.empty()

        logger.debug(f"Loaded {self.label} from {self.path}")
        return data

    def save(self, data: T) -> None:
        """
        Persist the collection, logging (not raising) a write failure.

        Args:
            data: Complete collection to persist
        """
        try:
            self.write(data)
        except StoreWriteError as e:
            logger.error(str(e))
            return

        logger.debug(f"Saved {self.label} to {self.path}")

    def exists(self) -> bool:
        """Check if the data file exists."""
        return self.path.is_file()

    def last_modified(self) -> datetime | None:
        """Get timestamp of the data file."""
        if not self.exists():
            return None
        return datetime.fromtimestamp(self.path.stat().st_mtime)

    def age_days(self) -> int | None:
        """
        Get age of data in days since last modification.

        Returns:
            Number of days since last modification, or None if data doesn't exist
        """
        last_mod = self.last_modified()
        if last_mod is None:
            return None
        return (datetime.now() - last_mod).days

    def size_bytes(self) -> int | None:
        """Get size of the data file."""
        if not self.exists():
            return None
        return self.path.stat().st_size
