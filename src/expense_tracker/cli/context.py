#!/usr/bin/env python3
"""
Shared helpers for building services from the click context.
"""

import click

from ..budgets import BudgetService, BudgetStore
from ..core.config import Config, get_config
from ..expenses import ExpenseStore, ExpenseTracker


def get_context_config(ctx: click.Context) -> Config:
    """Get the configuration stored by the main group, or load it."""
    obj = ctx.find_object(dict)
    if obj and "config" in obj:
        return obj["config"]
    return get_config()


def expense_store(ctx: click.Context) -> ExpenseStore:
    return ExpenseStore(get_context_config(ctx).expenses_path)


def budget_store(ctx: click.Context) -> BudgetStore:
    return BudgetStore(get_context_config(ctx).budgets_path)


def expense_tracker(ctx: click.Context) -> ExpenseTracker:
    return ExpenseTracker(expense_store(ctx))


def budget_service(ctx: click.Context) -> BudgetService:
    return BudgetService(budget_store(ctx), expense_store(ctx))
