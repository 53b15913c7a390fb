"""
Storage Services Package

Provides the abstract key-value interface, local implementations and the
repository that keeps the expense list under one key.
"""

from expense_tracker.services.storage.interface import (
    KeyValueStorageInterface,
    NotFoundError,
    StorageCorruptedError,
    StorageError,
)
from expense_tracker.services.storage.local import (
    InMemoryStorage,
    JsonFileStorage,
)
from expense_tracker.services.storage.repository import (
    DEFAULT_KEY,
    ExpenseRepository,
)

__all__ = [
    # Interfaces
    "KeyValueStorageInterface",
    # Exceptions
    "NotFoundError",
    "StorageCorruptedError",
    "StorageError",
    # Implementations
    "InMemoryStorage",
    "JsonFileStorage",
    # Repository
    "DEFAULT_KEY",
    "ExpenseRepository",
]
