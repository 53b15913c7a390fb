"""
Main Orchestrator for the Expense Tracker

This module ties together the store, the draft form, validation, user
feedback and audit logging, and defines the two user flows:
1. Add (draft -> validate -> expense -> store -> notify)
2. Delete (request -> user decides -> remove -> notify)

DESIGN DECISION: Deleting is a two-step protocol. request_delete() builds
the question for the user; resolve_delete() acts on the answer. Nothing is
removed without an explicit yes, and declining changes nothing at all.
delete_expense() runs both steps around an async Confirmer for callers that
can await the user's answer.
"""

from datetime import datetime, timezone, tzinfo
from typing import Callable, Optional, Union

from expense_tracker.audit import AuditLogger
from expense_tracker.config import TrackerSettings, get_settings
from expense_tracker.draft import DraftForm
from expense_tracker.formatting import to_iso_timestamp
from expense_tracker.models.expense import (
    ConfirmationPrompt,
    DeleteRequest,
    DraftField,
    Expense,
    ExpenseDraft,
    Notification,
    NotificationSeverity,
)
from expense_tracker.queries import MonthlyView, build_monthly_view
from expense_tracker.services.feedback import CollectingNotifier, Confirmer, Notifier
from expense_tracker.services.storage import (
    ExpenseRepository,
    JsonFileStorage,
    KeyValueStorageInterface,
    NotFoundError,
)
from expense_tracker.store import ExpenseStore
from expense_tracker.validation import DraftValidator


DELETE_PROMPT = ConfirmationPrompt(
    title="Are you sure?",
    body="You won't be able to revert this!",
    confirm_label="Yes, delete it!",
    cancel_label="Cancel",
    destructive=True,
)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ExpenseTracker:
    """
    Orchestrates adding and deleting expenses.

    Every successful add or delete changes the store exactly once (which
    persists it) and emits exactly one notification.
    """

    def __init__(
        self,
        store: ExpenseStore,
        notifier: Optional[Notifier] = None,
        validator: Optional[DraftValidator] = None,
        audit_logger: Optional[AuditLogger] = None,
        clock: Callable[[], datetime] = utc_now,
        notification_timeout: float = 2.0,
        display_tz: Optional[tzinfo] = None,
    ):
        self._store = store
        self._notifier = notifier or CollectingNotifier()
        self._validator = validator or DraftValidator()
        self._audit_logger = audit_logger or AuditLogger()
        self._clock = clock
        self._notification_timeout = notification_timeout
        self._display_tz = display_tz
        self._form = DraftForm()

    @property
    def store(self) -> ExpenseStore:
        return self._store

    @property
    def notifier(self) -> Notifier:
        return self._notifier

    @property
    def draft(self) -> ExpenseDraft:
        return self._form.draft

    @property
    def expenses(self) -> tuple[Expense, ...]:
        return self._store.expenses

    def update_draft(self, field: Union[DraftField, str], raw_value) -> ExpenseDraft:
        """Set one form field from raw input. See DraftForm.update."""
        return self._form.update(field, raw_value)

    def _notify(
        self,
        severity: NotificationSeverity,
        title: str,
        body: str,
        auto_dismiss: bool,
    ) -> None:
        self._notifier.notify(Notification(
            severity=severity,
            title=title,
            body=body,
            auto_dismiss_seconds=self._notification_timeout if auto_dismiss else None,
        ))

    def _next_id(self, now: datetime) -> int:
        """Epoch milliseconds, bumped past the newest stored id if needed."""
        candidate = int(now.timestamp() * 1000)
        return max(candidate, self._store.last_id + 1)

    # -------------------------------------------------------------------------
    # Add
    # -------------------------------------------------------------------------

    def add_expense(self) -> Optional[Expense]:
        """
        Turn the current draft into a stored expense.

        Returns:
            The new Expense, or None if the draft was rejected. A rejected
            draft leaves the store and the draft untouched.
        """
        draft = self._form.draft
        result = self._validator.validate(draft)

        if not result.is_valid:
            self._audit_logger.log_expense_rejected([
                {"field": i.field, "type": i.issue_type, "message": i.message}
                for i in result.issues
            ])
            self._notify(
                NotificationSeverity.ERROR,
                "Oops!",
                self._validator.summary(result),
                auto_dismiss=False,
            )
            return None

        now = self._clock()
        expense = Expense(
            id=self._next_id(now),
            category=draft.category,
            amount=draft.amount,
            description=draft.description or "",
            date=to_iso_timestamp(now),
        )

        self._store.append(expense)
        self._form.reset()
        self._audit_logger.log_expense_added(expense.id, expense.category, expense.amount)
        self._notify(
            NotificationSeverity.SUCCESS,
            "Success!",
            "Expense added successfully.",
            auto_dismiss=True,
        )
        return expense

    # -------------------------------------------------------------------------
    # Delete
    # -------------------------------------------------------------------------

    def request_delete(self, expense_id: int) -> DeleteRequest:
        """
        Step one: build the confirmation question for a deletion.

        Raises:
            NotFoundError: If no stored expense has this id
        """
        if expense_id not in self._store:
            raise NotFoundError(f"No expense with id {expense_id}")

        self._audit_logger.log_delete_requested(expense_id)
        return DeleteRequest(expense_id=expense_id, prompt=DELETE_PROMPT)

    def resolve_delete(self, request: DeleteRequest, confirmed: bool) -> bool:
        """
        Step two: act on the user's answer.

        Returns:
            True if a record was removed
        """
        if not confirmed:
            self._audit_logger.log_delete_declined(request.expense_id)
            return False

        removed = self._store.remove(request.expense_id)
        self._audit_logger.log_delete_confirmed(request.expense_id, removed)
        self._notify(
            NotificationSeverity.SUCCESS,
            "Deleted!",
            "Your expense has been deleted.",
            auto_dismiss=True,
        )
        return removed

    async def delete_expense(self, expense_id: int, confirmer: Confirmer) -> bool:
        """
        Ask the confirmer, then delete only on a yes.

        Returns:
            True if a record was removed
        """
        request = self.request_delete(expense_id)
        confirmed = await confirmer.confirm(request.prompt)
        return self.resolve_delete(request, confirmed)

    # -------------------------------------------------------------------------
    # Views
    # -------------------------------------------------------------------------

    def view(self, now: Optional[datetime] = None) -> MonthlyView:
        """Current month, history and total, recomputed from the live store."""
        return build_monthly_view(self._store.expenses, now=now, tz=self._display_tz)


def create_app_components(
    settings: Optional[TrackerSettings] = None,
    storage: Optional[KeyValueStorageInterface] = None,
    notifier: Optional[Notifier] = None,
    clock: Callable[[], datetime] = utc_now,
) -> ExpenseTracker:
    """
    Factory function to build a tracker from configuration.

    Args:
        settings: Configuration; defaults to get_settings()
        storage: Backend override; defaults to a JsonFileStorage at
                 settings.storage_path
        notifier: Notification sink; defaults to a CollectingNotifier
        clock: Source of "now" for new expenses

    Raises:
        StorageCorruptedError: If stored data is unreadable under the
            STRICT policy
    """
    settings = settings or get_settings()
    audit_logger = AuditLogger()

    if storage is None:
        storage = JsonFileStorage(settings.storage_path)

    repository = ExpenseRepository(storage, key=settings.storage_key)
    store = ExpenseStore(
        repository,
        policy=settings.corrupt_data_policy,
        audit_logger=audit_logger,
    )

    return ExpenseTracker(
        store=store,
        notifier=notifier,
        audit_logger=audit_logger,
        clock=clock,
        notification_timeout=settings.notification_timeout_seconds,
    )
