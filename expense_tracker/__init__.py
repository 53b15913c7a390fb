"""
Expense Tracker - Source Package

A single-user monthly expense tracker: record, list, total and delete
personal expenses, kept in local storage between sessions.

DESIGN PRINCIPLES:
1. The current month is editable and summed; older months are history
2. Nothing is deleted without an explicit yes from the user
3. Every change is written to storage immediately
4. Storage is swappable
"""

__version__ = "1.0.0"
__author__ = "Expense Tracker Team"
