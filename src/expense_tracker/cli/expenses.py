#!/usr/bin/env python3
"""
Expense CLI - add, update, delete, list, summary and export commands.

Options are read as plain strings (see options.py) and validated into typed
requests by the models, so every problem is reported as "Error: <message>"
with exit status 1 rather than as a click usage error.
"""

from pathlib import Path
from typing import Optional

import click

from ..core.validation import require_argument
from ..expenses import (
    ExpenseChanges,
    ExpenseQuery,
    NewExpense,
    export_csv,
    format_expense_table,
    format_summary,
    summarize,
)
from .context import expense_store, expense_tracker, get_context_config
from .options import COMMAND_SETTINGS, value_option


@click.command(context_settings=COMMAND_SETTINGS)
@value_option("--description", help="What the money was spent on")
@value_option("--amount", help="Positive amount, e.g. 20 or 12.50")
@value_option("--category", help="Category (default: General)")
@click.pass_context
def add(ctx: click.Context, description: Optional[str], amount: Optional[str], category: Optional[str]) -> None:
    """
    Add a new expense dated today.

    Examples:
      expense-tracker add --description "Lunch" --amount 20
      expense-tracker add --description "Dinner" --amount 10 --category "Food"
    """
    config = get_context_config(ctx)
    request = NewExpense.from_options(description, amount, category, default_category=config.default_category)

    expense = expense_tracker(ctx).add(request)

    click.echo(f"Expense added successfully (ID: {expense.id})")


@click.command(context_settings=COMMAND_SETTINGS)
@value_option("--id", "expense_id", help="ID of the expense to update")
@value_option("--description", help="New description")
@value_option("--amount", help="New amount")
@value_option("--category", help="New category")
@click.pass_context
def update(
    ctx: click.Context,
    expense_id: Optional[str],
    description: Optional[str],
    amount: Optional[str],
    category: Optional[str],
) -> None:
    """
    Update fields of an existing expense.

    Only the supplied fields change; the date is never modified.

    Example:
      expense-tracker update --id 1 --description "Business Lunch" --amount 25
    """
    tracker = expense_tracker(ctx)

    # An unknown id is reported before any problem with the new values
    tracker.get(require_argument(expense_id, "--id", "Expense ID"))
    changes = ExpenseChanges.from_options(expense_id, description, amount, category)

    expense = tracker.update(changes)

    click.echo(f"Expense updated successfully (ID: {expense.id})")


@click.command(context_settings=COMMAND_SETTINGS)
@value_option("--id", "expense_id", help="ID of the expense to delete")
@click.pass_context
def delete(ctx: click.Context, expense_id: Optional[str]) -> None:
    """
    Delete an expense.

    Example:
      expense-tracker delete --id 2
    """
    expense_tracker(ctx).delete(require_argument(expense_id, "--id", "Expense ID"))

    click.echo("Expense deleted successfully")


@click.command("list", context_settings=COMMAND_SETTINGS)
@value_option("--category", help="Only show this category (case-insensitive)")
@click.pass_context
def list_expenses(ctx: click.Context, category: Optional[str]) -> None:
    """
    List expenses in the order they were added.

    Examples:
      expense-tracker list
      expense-tracker list --category "Food"
    """
    query = ExpenseQuery.from_options(category=category)
    expenses = expense_tracker(ctx).list_expenses(query.category)

    if not expenses:
        click.echo("No expenses found")
        return

    for line in format_expense_table(expenses):
        click.echo(line)


@click.command(context_settings=COMMAND_SETTINGS)
@value_option("--month", help="Month of the current year (1-12)")
@value_option("--category", help="Only total this category (case-insensitive)")
@click.pass_context
def summary(ctx: click.Context, month: Optional[str], category: Optional[str]) -> None:
    """
    Show total spending, with a per-category breakdown.

    Examples:
      expense-tracker summary
      expense-tracker summary --month 8
      expense-tracker summary --category "Food"
    """
    query = ExpenseQuery.from_options(month=month, category=category)
    result = summarize(expense_store(ctx).load(), query)

    for line in format_summary(result):
        click.echo(line)


@click.command(context_settings=COMMAND_SETTINGS)
@value_option("--file", "filename", help="CSV file to write (default: expenses.csv)")
@click.pass_context
def export(ctx: click.Context, filename: Optional[str]) -> None:
    """
    Export all expenses to a CSV file.

    Example:
      expense-tracker export --file "august-expenses.csv"
    """
    expenses = expense_store(ctx).load()

    if not expenses:
        click.echo("No expenses to export")
        return

    filepath = Path(filename) if filename else get_context_config(ctx).export_path

    try:
        written = export_csv(expenses, filepath)
    except OSError as e:
        raise click.FileError(str(filepath), hint=e.strerror or str(e)) from e

    click.echo(f"Expenses exported to {filename or written}")
