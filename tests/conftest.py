"""Shared fixtures for the expense tracker tests."""

from datetime import datetime, timezone

import pytest

from expense_tracker.models.expense import Expense
from expense_tracker.orchestrator import ExpenseTracker
from expense_tracker.services.feedback import CollectingNotifier
from expense_tracker.services.storage import ExpenseRepository, InMemoryStorage
from expense_tracker.store import ExpenseStore


FIXED_NOW = datetime(2024, 3, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def fixed_now() -> datetime:
    """Mid-March 2024, UTC."""
    return FIXED_NOW


@pytest.fixture
def make_expense():
    """Factory for valid expenses with a given id and timestamp."""
    def _make(expense_id: int, date: str, amount: float = 10.0, category: str = "Food") -> Expense:
        return Expense(id=expense_id, category=category, amount=amount, date=date)
    return _make


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def repository(storage) -> ExpenseRepository:
    return ExpenseRepository(storage)


@pytest.fixture
def notifier() -> CollectingNotifier:
    return CollectingNotifier()


@pytest.fixture
def tracker(repository, notifier) -> ExpenseTracker:
    """A tracker whose clock is frozen at FIXED_NOW and which displays UTC."""
    return ExpenseTracker(
        store=ExpenseStore(repository),
        notifier=notifier,
        clock=lambda: FIXED_NOW,
        display_tz=timezone.utc,
    )
