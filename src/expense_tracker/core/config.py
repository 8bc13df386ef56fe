#!/usr/bin/env python3
"""
Configuration Management for the Expense Tracker

Handles environment-based configuration with sensible defaults and validation.
Supports multiple environments (development, test, production); the data files
live in the current working directory unless EXPENSE_TRACKER_DATA_DIR says
otherwise.
"""

import logging
import os
import tempfile
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Environment(Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


@dataclass
class StorageConfig:
    """Names of the persisted data files."""

    expenses_file: str = "expenses.json"
    budgets_file: str = "budgets.json"
    export_file: str = "expenses.csv"


@dataclass
class Config:
    """
    Main configuration class for the expense tracker.

    Loads configuration from environment variables with defaults that match
    running the tool directly in a working directory.
    """

    environment: Environment

    # Core directories
    data_dir: Path

    # Component configurations
    storage: StorageConfig

    # Application settings
    default_category: str = "General"
    debug: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_environment(cls) -> "Config":
        """Create configuration from environment variables."""
        env = Environment(os.getenv("EXPENSE_TRACKER_ENV", "development"))

        # Base directory
        if env == Environment.TEST:
            default_test_dir = Path(tempfile.gettempdir()) / "test_expense_tracker"
            data_dir = Path(os.getenv("EXPENSE_TRACKER_DATA_DIR", str(default_test_dir)))
        else:
            data_dir = Path(os.getenv("EXPENSE_TRACKER_DATA_DIR", ".")).expanduser().resolve()

        data_dir.mkdir(parents=True, exist_ok=True)

        storage = StorageConfig(
            expenses_file=os.getenv("EXPENSE_TRACKER_EXPENSES_FILE", "expenses.json"),
            budgets_file=os.getenv("EXPENSE_TRACKER_BUDGETS_FILE", "budgets.json"),
            export_file=os.getenv("EXPENSE_TRACKER_EXPORT_FILE", "expenses.csv"),
        )

        return cls(
            environment=env,
            data_dir=data_dir,
            storage=storage,
            default_category=os.getenv("DEFAULT_CATEGORY", "General"),
            debug=os.getenv("DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    @property
    def expenses_path(self) -> Path:
        """Path of the expense records file."""
        return self.data_dir / self.storage.expenses_file

    @property
    def budgets_path(self) -> Path:
        """Path of the monthly budgets file."""
        return self.data_dir / self.storage.budgets_file

    @property
    def export_path(self) -> Path:
        """Default CSV export target."""
        return self.data_dir / self.storage.export_file

    def validate(self) -> list:
        """Validate configuration and return list of errors."""
        errors = []

        if not self.data_dir.exists():
            errors.append(f"data_dir does not exist: {self.data_dir}")

        for name in ("expenses_file", "budgets_file", "export_file"):
            if not getattr(self.storage, name).strip():
                errors.append(f"storage.{name} must not be empty")

        if self.storage.expenses_file == self.storage.budgets_file:
            errors.append("expenses_file and budgets_file must be different files")

        if not self.default_category.strip():
            errors.append("DEFAULT_CATEGORY must not be empty")

        if self.log_level not in VALID_LOG_LEVELS:
            errors.append(f"LOG_LEVEL must be one of {', '.join(VALID_LOG_LEVELS)}")

        return errors

    def setup_logging(self) -> None:
        """Configure logging based on configuration."""
        level = getattr(logging, self.log_level, logging.INFO)
        if self.debug:
            level = logging.DEBUG

        # Configure format based on environment
        if self.environment == Environment.DEVELOPMENT:
            format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_str = "%(asctime)s - %(levelname)s - %(message)s"

        logging.basicConfig(level=level, format=format_str, datefmt="%Y-%m-%d %H:%M:%S")
        logging.getLogger("expense_tracker").setLevel(level)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a JSON-friendly dictionary."""
        result: dict[str, Any] = {}

        for field_name, field_value in self.__dict__.items():
            if isinstance(field_value, StorageConfig):
                result[field_name] = dict(field_value.__dict__)
            elif isinstance(field_value, Path):
                result[field_name] = str(field_value)
            elif isinstance(field_value, Enum):
                result[field_name] = field_value.value
            else:
                result[field_name] = field_value

        return result


# Global configuration instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        config = Config.from_environment()

        # Validate configuration
        errors = config.validate()
        if errors:
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

        # Setup logging
        config.setup_logging()
        _config = config

    return _config


def reload_config() -> Config:
    """Reload configuration from environment (useful for testing)."""
    global _config
    _config = None
    return get_config()


# Convenience functions
def get_data_dir() -> Path:
    """Get the data directory path."""
    return get_config().data_dir


def is_development() -> bool:
    """Check if running in development environment."""
    return get_config().environment == Environment.DEVELOPMENT


def is_test() -> bool:
    """Check if running in test environment."""
    return get_config().environment == Environment.TEST


def is_production() -> bool:
    """Check if running in production environment."""
    return get_config().environment == Environment.PRODUCTION
