"""
Abstract Storage Interface

DESIGN DECISION: We define an abstract key-value interface for persistence.
This allows us to:
1. Keep expenses in a local JSON file for the desktop/browser app
2. Use in-memory storage for testing
3. Swap in another backend later without touching the tracker

The interface is deliberately tiny: string keys, string values, whole-value
reads and writes. Anything structured is serialized by the caller.
"""

from abc import ABC, abstractmethod
from typing import Optional


class KeyValueStorageInterface(ABC):
    """
    Abstract interface for key-value storage.

    Any storage implementation (JSON file, in-memory, remote store)
    must implement these methods.
    """

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """
        Read the value stored under a key.

        Args:
            key: Storage key

        Returns:
            The stored string, or None if the key is absent

        Raises:
            StorageError: If the backend cannot be read
        """
        pass

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """
        Store a value under a key, replacing any previous value.

        Args:
            key: Storage key
            value: String to store

        Raises:
            StorageError: If the write fails
        """
        pass

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """
        Remove a key. Removing an absent key is a no-op.

        Args:
            key: Storage key
        """
        pass

    @abstractmethod
    def clear(self) -> None:
        """
        Remove every key, whatever state the backend is in.

        Raises:
            StorageError: If the backend cannot be written
        """
        pass


class StorageError(Exception):
    """Base exception for storage operations."""
    pass


class StorageCorruptedError(StorageError):
    """Persisted data exists but cannot be read."""
    pass


class NotFoundError(StorageError):
    """Entity not found in storage."""
    pass
