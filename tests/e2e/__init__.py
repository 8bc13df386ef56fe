#!/usr/bin/env python3
"""
End-to-end tests for the expense-tracker command.

These tests execute actual CLI commands via subprocess to validate complete
workflows from the user's perspective, each against its own temporary data
directory.
"""
