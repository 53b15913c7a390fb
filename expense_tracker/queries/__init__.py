"""Monthly query package."""

from expense_tracker.queries.monthly import (
    MonthlyView,
    build_monthly_view,
    current_month,
    history_months,
    in_month,
    month_total,
    totals_by_category,
)

__all__ = [
    "MonthlyView",
    "build_monthly_view",
    "current_month",
    "history_months",
    "in_month",
    "month_total",
    "totals_by_category",
]
