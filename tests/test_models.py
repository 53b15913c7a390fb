"""
Tests for the expense tracker models.

Test strategy:
1. Unit tests for individual components (models, validators, formatters)
2. Flow tests for the tracker against in-memory storage
3. No real files outside pytest's tmp_path
"""

import pytest
from datetime import datetime, timezone

from pydantic import ValidationError

from expense_tracker.models.expense import (
    ConfirmationPrompt,
    DeleteRequest,
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


class TestExpenseModel:
    """Tests for the Expense record."""

    def test_expense_creation(self):
        """Test Expense model creation."""
        expense = Expense(
            id=1709632800000,
            category="Food",
            amount=150,
            date="2024-03-05T10:00:00.000Z",
        )
        assert expense.category == "Food"
        assert expense.amount == 150.0
        assert expense.description == ""

    def test_expense_keeps_text_as_typed(self):
        """Test that category and description whitespace is preserved."""
        expense = Expense(
            id=1,
            category="  Food  ",
            amount=1,
            description="  two spaces  ",
            date="2024-03-05T10:00:00Z",
        )
        assert expense.category == "  Food  "
        assert expense.description == "  two spaces  "

    def test_expense_rejects_zero_amount(self):
        """Test that zero amounts are refused."""
        with pytest.raises(ValidationError, match="non-zero"):
            Expense(id=1, category="Food", amount=0, date="2024-03-05T10:00:00Z")

    def test_expense_allows_negative_amount(self):
        """Only truthiness is required, not positivity."""
        expense = Expense(id=1, category="Refund", amount=-20, date="2024-03-05T10:00:00Z")
        assert expense.amount == -20

    def test_expense_rejects_empty_category(self):
        """Test that an empty category is refused."""
        with pytest.raises(ValidationError):
            Expense(id=1, category="", amount=5, date="2024-03-05T10:00:00Z")

    def test_expense_rejects_invalid_date(self):
        """Test that the date must be ISO-8601."""
        with pytest.raises(ValidationError, match="Invalid ISO-8601"):
            Expense(id=1, category="Food", amount=5, date="not a date")

    def test_expense_null_description_becomes_empty(self):
        """Test that a null description is stored as empty text."""
        expense = Expense(id=1, category="Food", amount=5, description=None, date="2024-03-05T10:00:00Z")
        assert expense.description == ""

    def test_expense_is_immutable(self):
        """Test that expenses cannot be edited."""
        expense = Expense(id=1, category="Food", amount=5, date="2024-03-05T10:00:00Z")
        with pytest.raises(ValidationError):
            expense.amount = 10

    def test_expense_timestamp(self):
        """Test the parsed timestamp property."""
        expense = Expense(id=1, category="Food", amount=5, date="2024-03-05T10:00:00.000Z")
        assert expense.timestamp == datetime(2024, 3, 5, 10, 0, tzinfo=timezone.utc)

    def test_expense_date_kept_verbatim(self):
        """The stored string is not normalised."""
        expense = Expense(id=1, category="Food", amount=5, date="2024-03-05T10:00:00.000Z")
        assert expense.model_dump()["date"] == "2024-03-05T10:00:00.000Z"


class TestDraftAndFeedbackModels:
    """Tests for the transient models."""

    def test_draft_defaults(self):
        """Test the empty draft."""
        draft = ExpenseDraft()
        assert draft.category == ""
        assert draft.amount == 0
        assert draft.description == ""

    def test_notification_rejects_non_positive_delay(self):
        """Test that auto-dismiss delays must be positive."""
        with pytest.raises(ValidationError):
            Notification(
                severity=NotificationSeverity.SUCCESS,
                title="Success!",
                body="Done",
                auto_dismiss_seconds=0,
            )

    def test_delete_request_holds_prompt(self):
        """Test DeleteRequest creation."""
        prompt = ConfirmationPrompt(title="Are you sure?", body="Really?", destructive=True)
        request = DeleteRequest(expense_id=42, prompt=prompt)
        assert request.expense_id == 42
        assert request.prompt.destructive is True

    def test_load_result_constructors(self):
        """Test LoadResult success and failure."""
        ok = LoadResult.success([])
        failed = LoadResult.failure("bad json")
        assert ok.ok and ok.error is None
        assert not failed.ok and failed.error == "bad json"
        assert failed.expenses == []


class TestValidationResult:
    """Tests for ValidationResult model."""

    def test_validation_result_has_errors(self):
        """Test has_errors property."""
        result = ValidationResult(issues=[
            ValidationIssue(field="amount", issue_type="missing", message="Amount required"),
        ])
        assert result.has_errors is True
        assert result.error_count == 1
        assert result.is_valid is False

    def test_validation_result_warnings_only(self):
        """Test that warnings don't count as errors."""
        result = ValidationResult(issues=[
            ValidationIssue(
                field="description",
                issue_type="long",
                message="Long description",
                severity="warning",
            ),
        ])
        assert result.has_errors is False
        assert result.is_valid is True


class TestAuditModels:
    """Tests for audit-related models."""

    def test_audit_event_creation(self):
        """Test AuditEvent model creation."""
        event = AuditEvent(
            event_type=AuditEventType.STORE_LOADED,
            description="Loaded",
        )
        assert event.severity == AuditSeverity.INFO
        assert event.timestamp.tzinfo is not None

    def test_audit_event_to_log_dict(self):
        """Test conversion to log dictionary."""
        event = AuditEventBuilder.expense_added(expense_id=7, category="Food", amount=150.0)
        log_dict = event.to_log_dict()
        assert "event_id" in log_dict
        assert log_dict["event_type"] == "expense_added"
        assert log_dict["expense_id"] == 7
        assert log_dict["details"]["amount"] == 150.0
        assert log_dict["is_user_action"] is True

    def test_audit_event_builder_load_failed(self):
        """Test the load-failure event."""
        event = AuditEventBuilder.store_load_failed(key="expenses", reason="bad json")
        assert event.event_type == AuditEventType.STORE_LOAD_FAILED
        assert event.severity == AuditSeverity.ERROR
        assert event.error_message == "bad json"

    def test_audit_event_builder_delete_declined(self):
        """Test the declined-delete event."""
        event = AuditEventBuilder.delete_declined(expense_id=3)
        assert event.event_type == AuditEventType.DELETE_DECLINED
        assert event.expense_id == 3
        assert event.is_user_action is True


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
