"""Allow running the tracker with ``python -m expense_tracker``."""

from .cli.main import main

if __name__ == "__main__":
    main(prog_name="expense-tracker")
