#!/usr/bin/env python3
"""
Option conventions shared by the expense and budget commands.

Commands read every flag as an optional string: a flag given without a value
reads as absent, and flags a command doesn't know are ignored. Missing or bad
values are reported by the validators rather than by click's parser.
"""

from typing import Any, Callable

import click

# Unknown flags and stray words after the command are ignored
COMMAND_SETTINGS = {"ignore_unknown_options": True, "allow_extra_args": True}


def value_option(*param_decls: str, **attrs: Any) -> Callable:
    """
    Declare a string option whose value may be left off.

    ``add --description Lunch --amount`` passes ``""`` for ``--amount``, which
    the validators treat the same as not giving the flag at all.
    """
    return click.option(*param_decls, is_flag=False, flag_value="", **attrs)
