#!/usr/bin/env python3
"""
Main CLI Entry Point for the Expense Tracker

Provides the expense-tracker command and dispatches to the expense and budget
commands. Every failure a command reports ends the process with exit status 1.
"""

import logging
import os
from typing import Any

import click

from ..core.config import get_config, reload_config
from ..core.errors import TrackerError
from ..core.json_utils import format_json
from .context import budget_store, expense_store

USAGE_HINT = 'Run "expense-tracker" without arguments to see usage information.'


class ExpenseTrackerGroup(click.Group):
    """
    Command group with the tracker's error conventions.

    - Unknown command: message on stderr, usage hint, exit status 1
    - TrackerError from any command: "Error: <message>" on stderr, exit status 1
    - Remaining click usage errors (bad global option, bad --config-env value)
      also exit with status 1 instead of click's 2
    """

    def make_context(
        self,
        info_name: str | None,
        args: list[str],
        parent: click.Context | None = None,
        **extra: Any,
    ) -> click.Context:
        try:
            return super().make_context(info_name, args, parent=parent, **extra)
        except click.UsageError as e:
            e.exit_code = 1
            raise

    def resolve_command(self, ctx: click.Context, args: list[str]) -> tuple[Any, ...]:
        cmd_name = args[0] if args else None
        if cmd_name and not cmd_name.startswith("-") and self.get_command(ctx, cmd_name) is None:
            click.echo(f"Unknown command: {cmd_name}", err=True)
            click.echo(USAGE_HINT)
            ctx.exit(1)
        return super().resolve_command(ctx, args)

    def invoke(self, ctx: click.Context) -> Any:
        try:
            return super().invoke(ctx)
        except TrackerError as e:
            raise click.ClickException(str(e)) from e
        except click.UsageError as e:
            e.exit_code = 1
            raise


@click.group(cls=ExpenseTrackerGroup, invoke_without_command=True)
@click.option(
    "--config-env",
    type=click.Choice(["development", "test", "production"]),
    help="Override environment configuration",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, config_env: str | None, verbose: bool, debug: bool) -> None:
    """
    Expense Tracker - Manage your finances from the command line

    Records expenses in expenses.json and monthly budgets in budgets.json
    in the data directory (default: the current directory).

    \b
    Examples:
      expense-tracker add --description "Lunch" --amount 20 --category "Food"
      expense-tracker list --category "Food"
      expense-tracker summary --month 8
      expense-tracker update --id 1 --description "Business Lunch" --amount 25
      expense-tracker delete --id 2
      expense-tracker budget --month 8 --amount 1000
      expense-tracker export --file "august-expenses.csv"
    """
    # Ensure context object exists
    ctx.ensure_object(dict)

    try:
        if config_env:
            os.environ["EXPENSE_TRACKER_ENV"] = config_env
            config = reload_config()
        else:
            config = get_config()
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    # Configure debug logging if requested
    if debug:
        logging.getLogger().setLevel(logging.DEBUG)
        logging.getLogger("expense_tracker").setLevel(logging.DEBUG)

    # Store global options
    ctx.obj["verbose"] = verbose
    ctx.obj["debug"] = debug
    ctx.obj["config"] = config

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        return

    if verbose:
        click.echo(f"Environment: {config.environment.value}")
        click.echo(f"Data directory: {config.data_dir}")
        click.echo(expense_store(ctx).summary_text())
        click.echo(budget_store(ctx).summary_text())

    if debug:
        click.echo("Debug logging enabled")


@main.command()
def version() -> None:
    """Show version information."""
    from expense_tracker import __author__, __version__

    click.echo(f"Expense Tracker v{__version__}")
    click.echo(f"Author: {__author__}")


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Print configuration as JSON")
@click.pass_context
def config(ctx: click.Context, as_json: bool) -> None:
    """Show current configuration."""
    config_obj = ctx.obj["config"]

    if as_json:
        click.echo(format_json(config_obj.to_dict()))
        return

    click.echo("Current Configuration:")
    click.echo(f"  Environment: {config_obj.environment.value}")
    click.echo(f"  Data Directory: {config_obj.data_dir}")
    click.echo(f"  Expenses File: {config_obj.expenses_path}")
    click.echo(f"  Budgets File: {config_obj.budgets_path}")
    click.echo(f"  Export File: {config_obj.export_path}")
    click.echo(f"  Default Category: {config_obj.default_category}")
    click.echo(f"  Debug Mode: {config_obj.debug}")
    click.echo(f"  Log Level: {config_obj.log_level}")


# Import domain commands
from .budget import budget  # noqa: E402
from .expenses import add, delete, export, list_expenses, summary, update  # noqa: E402

# Register domain commands
main.add_command(add)
main.add_command(update)
main.add_command(delete)
main.add_command(list_expenses)
main.add_command(summary)
main.add_command(budget)
main.add_command(export)


if __name__ == "__main__":
    main()
