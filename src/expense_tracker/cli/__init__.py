"""
Command Line Interface Package

The expense-tracker command and its subcommands.

Command Structure:
- expense-tracker: Main entry point with utility commands (version, config)
- expense-tracker add / update / delete: Change expense records
- expense-tracker list / summary: Query expense records
- expense-tracker budget: Set a monthly budget and check spending against it
- expense-tracker export: Write all expenses to CSV

Invoking expense-tracker without a command prints usage and exits 0. Unknown
commands and failed commands exit 1 with a message on stderr.
"""
