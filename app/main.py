"""
Streamlit Frontend for the Expense Tracker

One page:
1. A three-field form (category, amount, optional description)
2. This month's expenses, each with a delete button, and the month's total
3. Expense history (earlier months, read-only)

The UI holds no state of its own beyond widget values. Every change goes
through the ExpenseTracker, which writes to storage immediately.
Deleting always asks for confirmation first.
"""

import math

import streamlit as st

from expense_tracker.audit import configure_logging
from expense_tracker.config import CorruptDataPolicy, get_settings
from expense_tracker.formatting import format_amount, format_short
from expense_tracker.models.expense import DraftField, Expense, NotificationSeverity
from expense_tracker.orchestrator import ExpenseTracker, create_app_components
from expense_tracker.queries import totals_by_category
from expense_tracker.services.feedback import CollectingNotifier
from expense_tracker.services.storage import NotFoundError, StorageCorruptedError


settings = get_settings()
configure_logging(settings.log_level)

# Page configuration
st.set_page_config(
    page_title=settings.app_title,
    page_icon="💸",
    layout="centered",
)

DRAFT_KEYS = {
    DraftField.CATEGORY: "draft_category",
    DraftField.AMOUNT: "draft_amount",
    DraftField.DESCRIPTION: "draft_description",
}


def get_tracker() -> ExpenseTracker:
    """Get or create this session's tracker."""
    if "tracker" not in st.session_state:
        st.session_state.tracker = create_app_components(
            settings=settings,
            notifier=CollectingNotifier(),
        )
    return st.session_state.tracker


def reset_storage() -> None:
    """Start over with an empty store, discarding unreadable data."""
    st.session_state.tracker = create_app_components(
        settings=settings.model_copy(
            update={"corrupt_data_policy": CorruptDataPolicy.RESET}
        ),
        notifier=CollectingNotifier(),
    )


# =============================================================================
# CALLBACKS (run before the page is drawn)
# =============================================================================

def on_field_change(field: DraftField) -> None:
    get_tracker().update_draft(field, st.session_state[DRAFT_KEYS[field]])


def on_add() -> None:
    tracker = get_tracker()
    # A field edited right before the click may not have fired on_change yet
    for field, key in DRAFT_KEYS.items():
        tracker.update_draft(field, st.session_state.get(key, ""))
    if tracker.add_expense() is not None:
        for field, key in DRAFT_KEYS.items():
            st.session_state[key] = None if field is DraftField.AMOUNT else ""


def on_delete_click(expense_id: int) -> None:
    try:
        st.session_state.pending_delete = get_tracker().request_delete(expense_id)
    except NotFoundError:
        st.session_state.pending_delete = None


def on_delete_answer(confirmed: bool) -> None:
    request = st.session_state.get("pending_delete")
    st.session_state.pending_delete = None
    if request is not None:
        get_tracker().resolve_delete(request, confirmed)


# =============================================================================
# RENDERING
# =============================================================================

def render_notifications(tracker: ExpenseTracker) -> None:
    notifier = tracker.notifier
    if not isinstance(notifier, CollectingNotifier):
        return
    for notification in notifier.drain():
        if notification.severity == NotificationSeverity.SUCCESS:
            duration = "short"
            if notification.auto_dismiss_seconds is not None:
                duration = math.ceil(notification.auto_dismiss_seconds)
            st.toast(
                f"**{notification.title}** {notification.body}",
                icon="✅",
                duration=duration,
            )
        else:
            st.error(f"**{notification.title}** {notification.body}")


def render_form() -> None:
    col1, col2, col3, col4 = st.columns([3, 2, 3, 2])

    with col1:
        st.text_input(
            "Category",
            key=DRAFT_KEYS[DraftField.CATEGORY],
            placeholder="Category",
            label_visibility="collapsed",
            on_change=on_field_change,
            args=(DraftField.CATEGORY,),
        )
    with col2:
        st.number_input(
            "Amount",
            key=DRAFT_KEYS[DraftField.AMOUNT],
            value=None,
            placeholder="Amount",
            label_visibility="collapsed",
            on_change=on_field_change,
            args=(DraftField.AMOUNT,),
        )
    with col3:
        st.text_input(
            "Description (optional)",
            key=DRAFT_KEYS[DraftField.DESCRIPTION],
            placeholder="Description (optional)",
            label_visibility="collapsed",
            on_change=on_field_change,
            args=(DraftField.DESCRIPTION,),
        )
    with col4:
        st.button("➕ Add Expense", type="primary", on_click=on_add, use_container_width=True)


def describe(expense: Expense) -> str:
    text = f"**{expense.category}** - {format_amount(expense.amount, settings.currency_symbol)}"
    if expense.description:
        text += f" ({expense.description})"
    return text


def render_delete_confirmation() -> None:
    request = st.session_state.get("pending_delete")
    if request is None:
        return

    prompt = request.prompt
    st.warning(f"**{prompt.title}** {prompt.body}")
    col1, col2 = st.columns(2)
    with col1:
        st.button(
            prompt.confirm_label,
            type="primary",
            on_click=on_delete_answer,
            args=(True,),
            use_container_width=True,
        )
    with col2:
        st.button(
            prompt.cancel_label,
            on_click=on_delete_answer,
            args=(False,),
            use_container_width=True,
        )


def render_current_month(tracker: ExpenseTracker) -> None:
    view = tracker.view()

    st.subheader("Current Month Expenses")
    render_delete_confirmation()

    with st.container(height=280):
        if not view.current:
            st.caption("No expenses added yet.")
        for expense in view.current:
            col1, col2, col3 = st.columns([6, 2, 1])
            col1.markdown(describe(expense))
            col2.write(format_short(expense.date))
            col3.button(
                "🗑️",
                key=f"delete_{expense.id}",
                help="Delete this expense",
                on_click=on_delete_click,
                args=(expense.id,),
            )

    st.markdown(f"### Total Expense: {format_amount(view.total, settings.currency_symbol)}")

    breakdown = totals_by_category(tracker.expenses, now=view.now)
    if len(breakdown) > 1:
        with st.expander("By category"):
            st.dataframe(
                [
                    {"Category": category, "Total": format_amount(total, settings.currency_symbol)}
                    for category, total in breakdown.items()
                ],
                hide_index=True,
                use_container_width=True,
            )

    st.subheader("Expense History")
    if not view.history:
        st.caption("No previous expenses found.")
    for expense in view.history:
        st.markdown(f"{describe(expense)} - {format_short(expense.date)}")


def main():
    """Main application entry point."""
    st.title(settings.app_title)

    try:
        tracker = get_tracker()
    except StorageCorruptedError as e:
        st.error(f"Your saved expenses could not be read: {e}")
        st.button("Reset storage", type="primary", on_click=reset_storage)
        st.stop()

    render_notifications(tracker)
    render_form()
    st.markdown("---")
    render_current_month(tracker)


if __name__ == "__main__":
    main()
