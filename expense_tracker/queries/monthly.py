"""
Monthly Partition and Aggregation

Everything here is a pure function of (expenses, now, tz). Nothing is
cached: the UI calls these on every render, so the split between the
current month and history moves on its own when the month changes.

Pass a fixed `now` and `tz` to get deterministic results in tests.
"""

from datetime import datetime, tzinfo
from typing import Iterable, Optional

from pydantic import BaseModel, ConfigDict

from expense_tracker.formatting import to_local
from expense_tracker.models.expense import Expense


class MonthlyView(BaseModel):
    """The expense list split at the current calendar month."""
    model_config = ConfigDict(frozen=True)

    now: datetime
    current: list[Expense]
    history: list[Expense]
    total: float

    @property
    def is_empty(self) -> bool:
        return not self.current and not self.history


def _resolve_now(now: Optional[datetime], tz: Optional[tzinfo]) -> datetime:
    if now is None:
        now = datetime.now(tz) if tz is not None else datetime.now().astimezone()
    return to_local(now, tz)


def in_month(expense: Expense, now: datetime, tz: Optional[tzinfo] = None) -> bool:
    """True if the expense falls in the same calendar month and year as `now`."""
    moment = to_local(expense.timestamp, tz)
    return moment.year == now.year and moment.month == now.month


def current_month(
    expenses: Iterable[Expense],
    now: Optional[datetime] = None,
    tz: Optional[tzinfo] = None,
) -> list[Expense]:
    """Expenses dated in the month of `now`, in store order."""
    now = _resolve_now(now, tz)
    return [e for e in expenses if in_month(e, now, tz)]


def history_months(
    expenses: Iterable[Expense],
    now: Optional[datetime] = None,
    tz: Optional[tzinfo] = None,
) -> list[Expense]:
    """Every expense not in the month of `now`, in store order."""
    now = _resolve_now(now, tz)
    return [e for e in expenses if not in_month(e, now, tz)]


def month_total(
    expenses: Iterable[Expense],
    now: Optional[datetime] = None,
    tz: Optional[tzinfo] = None,
) -> float:
    """Sum of amounts for the month of `now`; 0 when there are none."""
    return sum((e.amount for e in current_month(expenses, now, tz)), 0.0)


def totals_by_category(
    expenses: Iterable[Expense],
    now: Optional[datetime] = None,
    tz: Optional[tzinfo] = None,
) -> dict[str, float]:
    """Current-month totals per category, largest first."""
    totals: dict[str, float] = {}
    for expense in current_month(expenses, now, tz):
        totals[expense.category] = totals.get(expense.category, 0.0) + expense.amount
    return dict(sorted(totals.items(), key=lambda item: item[1], reverse=True))


def build_monthly_view(
    expenses: Iterable[Expense],
    now: Optional[datetime] = None,
    tz: Optional[tzinfo] = None,
) -> MonthlyView:
    """Compute both partitions and the total in one pass over the store."""
    now = _resolve_now(now, tz)
    current: list[Expense] = []
    history: list[Expense] = []
    for expense in expenses:
        (current if in_month(expense, now, tz) else history).append(expense)

    return MonthlyView(
        now=now,
        current=current,
        history=history,
        total=sum((e.amount for e in current), 0.0),
    )
