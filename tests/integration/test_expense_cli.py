#!/usr/bin/env python3
"""
Integration tests for the expense commands.

Runs add/update/delete/list/summary/export through click's CliRunner against
a temporary data directory.
"""

import calendar
import json
from datetime import date

import pytest
from click.testing import CliRunner

from expense_tracker.cli.main import main
from tests.fixtures.sample_data import make_expense


def current_month_date(day: int) -> str:
    today = date.today()
    return date(today.year, today.month, day).isoformat()


@pytest.mark.integration
@pytest.mark.expenses
class TestAddCommand:
    """Test the add command."""

    def setup_method(self):
        self.runner = CliRunner()

    def test_add_then_list_shows_record(self, data_dir):
        result = self.runner.invoke(main, ["add", "--description", "Lunch", "--amount", "20", "--category", "Food"])

        assert result.exit_code == 0
        assert result.stdout == "Expense added successfully (ID: 1)\n"

        listing = self.runner.invoke(main, ["list"])

        assert listing.exit_code == 0
        lines = listing.stdout.splitlines()
        assert lines[0] == "ID  Date       Description                Amount    Category"
        assert lines[1] == "--  ---------- -------------------------- --------- ----------"
        assert lines[2] == f"1   {date.today().isoformat()} {'Lunch':<26} {'$20':<9} Food"

    def test_ids_increment(self):
        for n in range(1, 4):
            result = self.runner.invoke(main, ["add", "--description", f"Item {n}", "--amount", "1"])
            assert f"(ID: {n})" in result.stdout

    def test_persists_plain_json(self, data_dir):
        self.runner.invoke(main, ["add", "--description", "Café", "--amount", "12.50"])

        records = json.loads((data_dir / "expenses.json").read_text(encoding="utf-8"))

        assert records == [
            {
                "id": 1,
                "date": date.today().isoformat(),
                "description": "Café",
                "amount": 12.5,
                "category": "General",
            }
        ]

    def test_default_category_from_environment(self, monkeypatch, data_dir):
        monkeypatch.setenv("DEFAULT_CATEGORY", "Misc")

        self.runner.invoke(main, ["add", "--description", "Stamp", "--amount", "1"])

        assert json.loads((data_dir / "expenses.json").read_text(encoding="utf-8"))[0]["category"] == "Misc"

    @pytest.mark.parametrize(
        "args, message",
        [
            (["--amount", "20"], "Error: Description is required (--description)"),
            (["--description", "Lunch"], "Error: Amount is required (--amount)"),
            ([], "Error: Description is required (--description)"),
            (["--description", "Lunch", "--amount", "-5"], "Error: Amount must be a positive number"),
            (["--description", "Lunch", "--amount", "0"], "Error: Amount must be a positive number"),
            (["--description", "Lunch", "--amount", "lots"], "Error: Amount must be a positive number"),
            (["--description", "Lunch", "--amount"], "Error: Amount is required (--amount)"),
            (["--amount", "20", "--description"], "Error: Description is required (--description)"),
            (["--description", "Lunch", "--amount", "1,5"], "Error: Amount must be a positive number"),
            (["--description", "Lunch", "--amount", "1e5000"], "Error: Amount must be a positive number"),
            (["--description", "Lunch", "--amount", "1e-400"], "Error: Amount must be a positive number"),
        ],
    )
    def test_invalid_input_fails_without_writing(self, data_dir, args, message):
        result = self.runner.invoke(main, ["add", *args])

        assert result.exit_code == 1
        assert message in result.stderr
        assert result.stdout == ""
        assert not (data_dir / "expenses.json").exists()

    def test_trailing_category_flag_uses_default(self, data_dir):
        result = self.runner.invoke(main, ["add", "--description", "Lunch", "--amount", "5", "--category"])

        assert result.exit_code == 0
        assert json.loads((data_dir / "expenses.json").read_text(encoding="utf-8"))[0]["category"] == "General"

    def test_unknown_flags_are_ignored(self, data_dir):
        result = self.runner.invoke(main, ["add", "--description", "Lunch", "--colour", "red", "--amount", "5"])

        assert result.exit_code == 0
        assert result.stdout == "Expense added successfully (ID: 1)\n"

    def test_large_amount_round_trips(self, data_dir):
        self.runner.invoke(main, ["add", "--description", "House", "--amount", "1e20"])

        result = self.runner.invoke(main, ["list"])

        assert "$100000000000000000000" in result.stdout


@pytest.mark.integration
@pytest.mark.expenses
class TestUpdateDeleteCommands:
    """Test update and delete."""

    def setup_method(self):
        self.runner = CliRunner()

    @pytest.fixture(autouse=True)
    def seeded(self, expense_store):
        expense_store.save([
            make_expense(1, "2024-08-01", "Lunch", "20", "Food"),
            make_expense(2, "2024-08-02", "Bus", "2.50", "Transport"),
        ])

    def test_update_supplied_fields(self, expense_store):
        result = self.runner.invoke(
            main, ["update", "--id", "1", "--description", "Business Lunch", "--amount", "25"]
        )

        assert result.exit_code == 0
        assert result.stdout == "Expense updated successfully (ID: 1)\n"
        updated = expense_store.load()[0]
        assert updated.description == "Business Lunch"
        assert str(updated.amount) == "$25"
        assert updated.category == "Food"
        assert updated.date.to_iso_string() == "2024-08-01"

    def test_update_missing_id_flag(self):
        result = self.runner.invoke(main, ["update", "--description", "x"])

        assert result.exit_code == 1
        assert "Error: Expense ID is required (--id)" in result.stderr

    def test_update_unknown_id_leaves_file_unchanged(self, expense_store):
        before = expense_store.path.read_bytes()

        result = self.runner.invoke(main, ["update", "--id", "99", "--description", "x"])

        assert result.exit_code == 1
        assert "Error: Expense with ID 99 not found" in result.stderr
        assert expense_store.path.read_bytes() == before

    def test_update_non_numeric_id_is_not_found(self):
        result = self.runner.invoke(main, ["update", "--id", "abc", "--category", "x"])

        assert result.exit_code == 1
        assert "Error: Expense with ID abc not found" in result.stderr

    def test_update_invalid_amount(self, expense_store):
        result = self.runner.invoke(main, ["update", "--id", "1", "--amount", "-1"])

        assert result.exit_code == 1
        assert "Error: Amount must be a positive number" in result.stderr
        assert str(expense_store.load()[0].amount) == "$20"

    def test_delete_then_delete_again(self, expense_store):
        result = self.runner.invoke(main, ["delete", "--id", "1"])

        assert result.exit_code == 0
        assert result.stdout == "Expense deleted successfully\n"
        assert [expense.id for expense in expense_store.load()] == [2]

        again = self.runner.invoke(main, ["delete", "--id", "1"])

        assert again.exit_code == 1
        assert "Error: Expense with ID 1 not found" in again.stderr

    def test_delete_requires_id(self):
        result = self.runner.invoke(main, ["delete"])

        assert result.exit_code == 1
        assert "Error: Expense ID is required (--id)" in result.stderr

    def test_delete_trailing_id_flag_is_missing_argument(self):
        result = self.runner.invoke(main, ["delete", "--id"])

        assert result.exit_code == 1
        assert "Error: Expense ID is required (--id)" in result.stderr

    def test_update_unknown_id_reported_before_invalid_amount(self, expense_store):
        result = self.runner.invoke(main, ["update", "--id", "999", "--amount", "-5"])

        assert result.exit_code == 1
        assert "Error: Expense with ID 999 not found" in result.stderr


@pytest.mark.integration
@pytest.mark.expenses
class TestListAndSummaryCommands:
    """Test list and summary output."""

    def setup_method(self):
        self.runner = CliRunner()

    def test_list_empty_store(self):
        result = self.runner.invoke(main, ["list"])

        assert result.exit_code == 0
        assert result.stdout == "No expenses found\n"

    def test_list_category_filter(self, expense_store, sample_expenses):
        expense_store.save(sample_expenses)

        result = self.runner.invoke(main, ["list", "--category", "FOOD"])

        rows = result.stdout.splitlines()[2:]
        assert [row.split()[0] for row in rows] == ["1", "3", "4", "5"]

    def test_list_ignores_unknown_flags(self, expense_store, sample_expenses):
        expense_store.save(sample_expenses)

        result = self.runner.invoke(main, ["list", "--bogus", "x"])

        assert result.exit_code == 0
        assert len(result.stdout.splitlines()) == 2 + len(sample_expenses)

    def test_list_trailing_category_flag_lists_everything(self, expense_store, sample_expenses):
        expense_store.save(sample_expenses)

        result = self.runner.invoke(main, ["list", "--category"])

        assert result.exit_code == 0
        assert len(result.stdout.splitlines()) == 2 + len(sample_expenses)

    def test_list_unmatched_category(self, expense_store, sample_expenses):
        expense_store.save(sample_expenses)

        result = self.runner.invoke(main, ["list", "--category", "Travel"])

        assert result.stdout == "No expenses found\n"

    def test_summary_month_of_current_year(self, expense_store):
        today = date.today()
        expense_store.save([
            make_expense(1, current_month_date(1), "Groceries", "45.50", "Food"),
            make_expense(2, current_month_date(2), "Bus pass", "30", "Transport"),
            make_expense(3, current_month_date(3), "Coffee", "4.50", "Food"),
            make_expense(4, date(today.year - 1, today.month, 1).isoformat(), "Last year", "100", "Food"),
        ])

        result = self.runner.invoke(main, ["summary", "--month", str(today.month)])

        assert result.exit_code == 0
        assert result.stdout.splitlines() == [
            f"Total expenses for {calendar.month_name[today.month]}: $80",
            "",
            "Breakdown by category:",
            "  Food: $50",
            "  Transport: $30",
        ]

    def test_summary_with_category_has_no_breakdown(self, expense_store, sample_expenses):
        expense_store.save(sample_expenses)

        result = self.runner.invoke(main, ["summary", "--category", "Food"])

        assert result.stdout == "Total expenses (Food): $132.25\n"

    def test_summary_empty_store(self):
        result = self.runner.invoke(main, ["summary"])

        assert result.exit_code == 0
        assert result.stdout == "Total expenses: $0\n"

    @pytest.mark.parametrize("month", ["0", "13", "August"])
    def test_summary_invalid_month(self, month):
        result = self.runner.invoke(main, ["summary", "--month", month])

        assert result.exit_code == 1
        assert "Error: Month must be a number between 1 and 12" in result.stderr

    def test_corrupt_file_reads_as_empty(self, data_dir):
        data_dir.mkdir(parents=True, exist_ok=True)
        (data_dir / "expenses.json").write_text("{not json", encoding="utf-8")

        result = self.runner.invoke(main, ["list"])

        assert result.exit_code == 0
        assert result.stdout == "No expenses found\n"


@pytest.mark.integration
@pytest.mark.expenses
class TestExportCommand:
    """Test CSV export."""

    def setup_method(self):
        self.runner = CliRunner()

    def test_export_empty_store_writes_nothing(self, data_dir):
        result = self.runner.invoke(main, ["export"])

        assert result.exit_code == 0
        assert result.stdout == "No expenses to export\n"
        assert not (data_dir / "expenses.csv").exists()

    def test_export_default_file(self, data_dir, expense_store):
        expense_store.save([make_expense(1, "2024-08-01", "Lunch", "20", "Food")])

        result = self.runner.invoke(main, ["export"])

        target = data_dir / "expenses.csv"
        assert result.exit_code == 0
        assert result.stdout == f"Expenses exported to {target}\n"
        assert target.read_text(encoding="utf-8") == 'ID,Date,Description,Amount,Category\n1,2024-08-01,"Lunch",20,Food'

    def test_export_relative_file_goes_to_working_directory(self, tmp_path, monkeypatch, expense_store, sample_expenses):
        expense_store.save(sample_expenses)
        monkeypatch.chdir(tmp_path)

        result = self.runner.invoke(main, ["export", "--file", "august-expenses.csv"])

        assert result.stdout == "Expenses exported to august-expenses.csv\n"
        lines = (tmp_path / "august-expenses.csv").read_text(encoding="utf-8").split("\n")
        assert len(lines) == 1 + len(sample_expenses)
        assert lines[2] == '2,2024-08-03,"Bus pass",30,Transport'

    def test_trailing_file_flag_uses_default(self, data_dir, expense_store, sample_expenses):
        expense_store.save(sample_expenses)

        result = self.runner.invoke(main, ["export", "--file"])

        assert result.exit_code == 0
        assert (data_dir / "expenses.csv").exists()

    def test_export_unwritable_target(self, tmp_path, expense_store, sample_expenses):
        expense_store.save(sample_expenses)

        result = self.runner.invoke(main, ["export", "--file", str(tmp_path / "missing" / "out.csv")])

        assert result.exit_code == 1
        assert "Could not open file" in result.stderr
