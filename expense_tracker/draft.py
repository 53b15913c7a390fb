"""
Draft form state.

Holds the expense being typed into the form. Every keystroke goes through
update(); nothing is validated until the draft is submitted.
"""

import math
import re
from typing import Union

from expense_tracker.models.expense import DraftField, ExpenseDraft


# Longest leading decimal number, as a browser's parseFloat reads it
_NUMBER_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_amount(raw: Union[str, float, int, None]) -> float:
    """
    Read an amount the way the form does: leniently.

    Leading whitespace is skipped and the longest numeric prefix is used
    ("12.5kg" -> 12.5). Anything without a numeric prefix, or that is not
    a finite number, becomes 0.
    """
    if raw is None:
        return 0.0
    if isinstance(raw, (int, float)):
        value = float(raw)
        return value if math.isfinite(value) else 0.0

    match = _NUMBER_PREFIX.match(raw.lstrip())
    if not match:
        return 0.0
    value = float(match.group(0))
    return value if math.isfinite(value) else 0.0


class DraftForm:
    """The input form's state: category, amount and description."""

    def __init__(self):
        self._draft = ExpenseDraft()

    @property
    def draft(self) -> ExpenseDraft:
        """A copy of the current draft."""
        return self._draft.model_copy()

    def update(self, field: Union[DraftField, str], raw_value) -> ExpenseDraft:
        """
        Set one field from raw input.

        The amount is parsed with parse_amount; other fields are kept as
        literal text.

        Raises:
            ValueError: If the field is not part of the form
        """
        try:
            field = DraftField(field)
        except ValueError:
            raise ValueError(f"Unknown draft field: {field!r}")

        if field is DraftField.AMOUNT:
            self._draft.amount = parse_amount(raw_value)
        else:
            setattr(self._draft, field.value, "" if raw_value is None else str(raw_value))

        return self.draft

    def reset(self) -> None:
        """Back to an empty category, zero amount and empty description."""
        self._draft = ExpenseDraft()

    def values(self) -> dict:
        return self._draft.model_dump()
