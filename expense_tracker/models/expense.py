"""
Core Data Models for the Expense Tracker

These models define the schemas for everything the tracker stores or
passes between its parts:
1. Expense records (persisted, immutable once created)
2. The draft being composed in the input form
3. Validation results for a submitted draft
4. Messages exchanged with the user (notifications, confirmation prompts)
5. The outcome of reading the storage key

DESIGN DECISION: Expense.date is kept as the exact ISO-8601 string that was
written at creation time. Re-serializing a loaded store therefore produces
the same JSON that was read.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
)


# =============================================================================
# ENUMS
# =============================================================================

class NotificationSeverity(str, Enum):
    """Severity of a transient user notification."""
    SUCCESS = "success"
    ERROR = "error"


class DraftField(str, Enum):
    """Fields of the input form that can be edited."""
    CATEGORY = "category"
    AMOUNT = "amount"
    DESCRIPTION = "description"


# =============================================================================
# EXPENSE RECORD
# =============================================================================

class Expense(BaseModel):
    """
    A recorded expense.

    CRITICAL: Records are never edited. The only mutations the store allows
    are appending a new record and deleting one by id.
    """
    model_config = ConfigDict(frozen=True)

    id: int = Field(
        ...,
        gt=0,
        description="Creation time in epoch milliseconds, unique within the store"
    )
    category: str = Field(
        ...,
        min_length=1,
        description="Free-text category label"
    )
    amount: float = Field(
        ...,
        allow_inf_nan=False,
        description="Amount spent (non-zero)"
    )
    description: str = Field(
        default="",
        description="Optional note"
    )
    date: str = Field(
        ...,
        description="ISO-8601 creation timestamp"
    )

    @field_validator('amount')
    @classmethod
    def validate_amount(cls, v: float) -> float:
        """Zero amounts are never recorded."""
        if v == 0:
            raise ValueError("Amount must be non-zero")
        return v

    @field_validator('description', mode='before')
    @classmethod
    def default_description(cls, v):
        """Missing or null descriptions are stored as empty text."""
        return "" if v is None else v

    @field_validator('date')
    @classmethod
    def validate_date(cls, v: str) -> str:
        """Reject timestamps that cannot be parsed."""
        try:
            datetime.fromisoformat(v)
        except ValueError:
            raise ValueError(f"Invalid ISO-8601 timestamp: {v!r}")
        return v

    @property
    def timestamp(self) -> datetime:
        """The creation time as a datetime (may be naive)."""
        return datetime.fromisoformat(self.date)


# =============================================================================
# DRAFT (form state)
# =============================================================================

class ExpenseDraft(BaseModel):
    """
    The in-progress expense bound to the input form.

    No validation happens here. Anything the user types is accepted and
    checked only when the draft is submitted.
    """

    category: str = ""
    amount: float = 0.0
    description: str = ""


# =============================================================================
# VALIDATION MODELS
# =============================================================================

class ValidationIssue(BaseModel):
    """A single problem found in a submitted draft."""

    field: str = Field(
        ...,
        description="Field with the issue"
    )
    issue_type: str = Field(
        ...,
        description="Type of issue (e.g., 'missing', 'invalid_value')"
    )
    message: str = Field(
        ...,
        description="Human-readable description of the issue"
    )
    severity: str = Field(
        default="error",
        pattern="^(error|warning)$",
        description="Issue severity"
    )


class ValidationResult(BaseModel):
    """Result of validating a draft at submission time."""

    issues: list[ValidationIssue] = Field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        """Check if there are any error-level issues."""
        return any(issue.severity == "error" for issue in self.issues)

    @property
    def error_count(self) -> int:
        """Count error-level issues."""
        return sum(1 for issue in self.issues if issue.severity == "error")

    @property
    def is_valid(self) -> bool:
        return not self.has_errors


# =============================================================================
# USER INTERACTION MODELS
# =============================================================================

class Notification(BaseModel):
    """
    A transient message shown to the user.

    Fire-and-forget: nothing in the tracker waits for or reads back a
    notification once it has been emitted.
    """

    severity: NotificationSeverity
    title: str
    body: str
    auto_dismiss_seconds: Optional[float] = Field(
        default=None,
        gt=0,
        description="Dismiss automatically after this delay; None means the user closes it"
    )


class ConfirmationPrompt(BaseModel):
    """A yes/no question put to the user before a destructive action."""

    title: str
    body: str
    confirm_label: str = "Yes"
    cancel_label: str = "Cancel"
    destructive: bool = False


class DeleteRequest(BaseModel):
    """
    A deletion waiting for the user's decision.

    Created by ExpenseTracker.request_delete and settled by
    ExpenseTracker.resolve_delete.
    """
    model_config = ConfigDict(frozen=True)

    expense_id: int
    prompt: ConfirmationPrompt


# =============================================================================
# STORAGE RESULT
# =============================================================================

class LoadResult(BaseModel):
    """
    Outcome of reading the expenses key.

    DESIGN DECISION: Bad persisted data is reported, not raised. The caller
    decides whether to start empty or to refuse to start.
    """

    ok: bool
    expenses: list[Expense] = Field(default_factory=list)
    error: Optional[str] = None

    @classmethod
    def success(cls, expenses: list[Expense]) -> "LoadResult":
        return cls(ok=True, expenses=expenses)

    @classmethod
    def failure(cls, error: str) -> "LoadResult":
        return cls(ok=False, error=error)

