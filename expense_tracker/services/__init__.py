"""Services package."""

from expense_tracker.services.feedback import (
    CollectingNotifier,
    Confirmer,
    Notifier,
    StaticConfirmer,
)
from expense_tracker.services.storage import (
    DEFAULT_KEY,
    ExpenseRepository,
    InMemoryStorage,
    JsonFileStorage,
    KeyValueStorageInterface,
    NotFoundError,
    StorageCorruptedError,
    StorageError,
)

__all__ = [
    # Feedback
    "CollectingNotifier",
    "Confirmer",
    "Notifier",
    "StaticConfirmer",
    # Storage
    "DEFAULT_KEY",
    "ExpenseRepository",
    "InMemoryStorage",
    "JsonFileStorage",
    "KeyValueStorageInterface",
    "NotFoundError",
    "StorageCorruptedError",
    "StorageError",
]
