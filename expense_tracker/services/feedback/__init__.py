"""User feedback package."""

from expense_tracker.services.feedback.interface import (
    CollectingNotifier,
    Confirmer,
    Notifier,
    StaticConfirmer,
)

__all__ = [
    "CollectingNotifier",
    "Confirmer",
    "Notifier",
    "StaticConfirmer",
]
