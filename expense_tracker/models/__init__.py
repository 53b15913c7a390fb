"""
Data Models Package

This package contains all Pydantic models used by the expense tracker.
All data flowing through the tracker must conform to these schemas.
"""

from expense_tracker.models.expense import (
    ConfirmationPrompt,
    DeleteRequest,
    DraftField,
    Expense,
    ExpenseDraft,
    LoadResult,
    Notification,
    NotificationSeverity,
    ValidationIssue,
    ValidationResult,
)
from expense_tracker.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)

__all__ = [
    # Expense models
    "ConfirmationPrompt",
    "DeleteRequest",
    "DraftField",
    "Expense",
    "ExpenseDraft",
    "LoadResult",
    "Notification",
    "NotificationSeverity",
    "ValidationIssue",
    "ValidationResult",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
]
