#!/usr/bin/env python3
"""
Budget CLI - monthly budget command with a spending check.
"""

from typing import Optional

import click

from ..budgets import BudgetRequest
from .context import budget_service
from .options import COMMAND_SETTINGS, value_option


@click.command(context_settings=COMMAND_SETTINGS)
@value_option("--month", help="Month of the current year (1-12)")
@value_option("--amount", help="Budget amount for the month")
@click.pass_context
def budget(ctx: click.Context, month: Optional[str], amount: Optional[str]) -> None:
    """
    Set the budget for a month of the current year.

    After saving, compares the month's recorded spending against the new
    budget and reports the overage or the amount remaining.

    Example:
      expense-tracker budget --month 8 --amount 1000
    """
    request = BudgetRequest.from_options(month, amount)
    status = budget_service(ctx).set_and_check(request)

    click.echo(f"Budget set for {status.budget.month_name}: {status.budget.amount}")

    if status.over_budget:
        click.echo(f"⚠️  WARNING: You have exceeded your budget by {status.overage}")
    else:
        click.echo(f"💰 Remaining budget: {status.remaining}")
