"""Validation package."""

from expense_tracker.validation.validator import (
    REQUIRED_FIELDS_MESSAGE,
    DraftValidator,
)

__all__ = ["REQUIRED_FIELDS_MESSAGE", "DraftValidator"]
