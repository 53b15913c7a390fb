"""
Audit Models for the Expense Tracker

Every significant action in the tracker is described by an AuditEvent
and written to the structured log. This provides:
1. Traceability of every add and delete
2. Debugging information when persisted data cannot be read
3. A record of what the user declined as well as what they confirmed

DESIGN DECISION: Audit events go to the log only. The storage key holds
expenses and nothing else.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class AuditEventType(str, Enum):
    """Types of events we audit."""
    # Store lifecycle
    STORE_LOADED = "store_loaded"
    STORE_LOAD_FAILED = "store_load_failed"
    STORE_RESET = "store_reset"
    STORE_WRITTEN = "store_written"

    # Adding
    EXPENSE_ADDED = "expense_added"
    EXPENSE_REJECTED = "expense_rejected"

    # Deleting
    DELETE_REQUESTED = "delete_requested"
    DELETE_CONFIRMED = "delete_confirmed"
    DELETE_DECLINED = "delete_declined"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class AuditEvent(BaseModel):
    """
    A single audit event.

    Every significant action creates one of these.
    """

    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the event occurred (UTC)"
    )

    event_type: AuditEventType = Field(
        ...,
        description="Type of event"
    )
    severity: AuditSeverity = Field(
        default=AuditSeverity.INFO,
        description="Event severity"
    )

    # The expense this event is about, if any
    expense_id: Optional[int] = None

    description: str = Field(
        ...,
        max_length=500,
        description="Human-readable description of what happened"
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional event-specific data"
    )
    error_message: Optional[str] = None

    is_user_action: bool = Field(
        default=False,
        description="Was this triggered by a user action?"
    )

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "expense_id": self.expense_id,
            "description": self.description,
            "details": self.details,
            "error_message": self.error_message,
            "is_user_action": self.is_user_action,
        }


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.expense_added(expense_id, "Food", 150.0)
        event = AuditEventBuilder.delete_declined(expense_id)
    """

    @staticmethod
    def store_loaded(count: int, key: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.STORE_LOADED,
            description=f"Loaded {count} expense(s) from '{key}'",
            details={"count": count, "key": key},
        )

    @staticmethod
    def store_load_failed(key: str, reason: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.STORE_LOAD_FAILED,
            severity=AuditSeverity.ERROR,
            description=f"Could not read expenses from '{key}'",
            details={"key": key},
            error_message=reason,
        )

    @staticmethod
    def store_reset(key: str, reason: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.STORE_RESET,
            severity=AuditSeverity.WARNING,
            description=f"Discarded unreadable data under '{key}' and started empty",
            details={"key": key},
            error_message=reason,
        )

    @staticmethod
    def store_written(count: int, key: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.STORE_WRITTEN,
            severity=AuditSeverity.DEBUG,
            description=f"Wrote {count} expense(s) to '{key}'",
            details={"count": count, "key": key},
        )

    @staticmethod
    def expense_added(expense_id: int, category: str, amount: float) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.EXPENSE_ADDED,
            expense_id=expense_id,
            description=f"Expense added: {category}",
            details={"category": category, "amount": amount},
            is_user_action=True,
        )

    @staticmethod
    def expense_rejected(issues: list[dict]) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.EXPENSE_REJECTED,
            severity=AuditSeverity.WARNING,
            description=f"Expense rejected with {len(issues)} issue(s)",
            details={"issues": issues},
            is_user_action=True,
        )

    @staticmethod
    def delete_requested(expense_id: int) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.DELETE_REQUESTED,
            expense_id=expense_id,
            description="User asked to delete an expense",
            is_user_action=True,
        )

    @staticmethod
    def delete_confirmed(expense_id: int, removed: bool) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.DELETE_CONFIRMED,
            expense_id=expense_id,
            description="Expense deleted" if removed else "Expense already gone",
            details={"removed": removed},
            is_user_action=True,
        )

    @staticmethod
    def delete_declined(expense_id: int) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.DELETE_DECLINED,
            expense_id=expense_id,
            description="User kept the expense",
            is_user_action=True,
        )

