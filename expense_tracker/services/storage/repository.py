"""
Expense Repository

Reads and writes the expense list under a single storage key.

DESIGN DECISION: load() never raises for bad data. Malformed JSON, records
that break the Expense schema and duplicate ids all come back as a failed
LoadResult with a reason, so the caller has to choose between starting
empty and refusing to start.
"""

from typing import Iterable

import structlog
from pydantic import TypeAdapter, ValidationError

from expense_tracker.models.expense import Expense, LoadResult
from expense_tracker.services.storage.interface import (
    KeyValueStorageInterface,
    StorageCorruptedError,
)


DEFAULT_KEY = "expenses"

_EXPENSE_LIST = TypeAdapter(list[Expense])


class ExpenseRepository:
    """
    Persists the whole expense list as one JSON array.

    There are no partial updates: save() always writes every record.
    """

    def __init__(
        self,
        storage: KeyValueStorageInterface,
        key: str = DEFAULT_KEY,
    ):
        self._storage = storage
        self._key = key
        self._logger = structlog.get_logger(__name__)

    @property
    def key(self) -> str:
        return self._key

    @staticmethod
    def serialize(expenses: Iterable[Expense]) -> str:
        """Serialize records to the JSON array stored under the key."""
        return _EXPENSE_LIST.dump_json(list(expenses)).decode("utf-8")

    @staticmethod
    def deserialize(raw: str) -> list[Expense]:
        """
        Parse a stored JSON array.

        Raises:
            ValidationError: If the text is not a valid list of expenses
            ValueError: If two records share an id
        """
        expenses = _EXPENSE_LIST.validate_json(raw)

        seen: set[int] = set()
        for expense in expenses:
            if expense.id in seen:
                raise ValueError(f"Duplicate expense id {expense.id}")
            seen.add(expense.id)

        return expenses

    def load(self) -> LoadResult:
        """
        Read the expense list.

        Returns:
            success([]) if nothing has been stored yet, success(records)
            if the stored value parses, failure(reason) otherwise.
        """
        try:
            raw = self._storage.get_item(self._key)
        except StorageCorruptedError as e:
            return LoadResult.failure(str(e))

        if raw is None:
            return LoadResult.success([])

        try:
            expenses = self.deserialize(raw)
        except ValidationError as e:
            return LoadResult.failure(
                f"Stored expenses under '{self._key}' are malformed: "
                f"{e.error_count()} error(s), first: {e.errors()[0]['msg']}"
            )
        except ValueError as e:
            return LoadResult.failure(
                f"Stored expenses under '{self._key}' are inconsistent: {e}"
            )

        return LoadResult.success(expenses)

    def save(self, expenses: Iterable[Expense]) -> None:
        """
        Write the full list under the key.

        Raises:
            StorageError: If the backend write fails
        """
        self._storage.set_item(self._key, self.serialize(expenses))

    def clear(self) -> None:
        """
        Drop whatever is stored under the key.

        An unreadable backend is wiped entirely, since the key
        cannot be removed on its own.
        """
        try:
            self._storage.remove_item(self._key)
        except StorageCorruptedError:
            self._logger.warning("storage_cleared", key=self._key)
            self._storage.clear()
