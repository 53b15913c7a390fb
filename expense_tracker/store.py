"""
In-memory expense store with write-through persistence.

The store is read from the repository exactly once, when it is created,
and written back in full after every change, including an initial write
straight after loading.
"""

from typing import Iterator, Optional

from expense_tracker.audit import AuditLogger
from expense_tracker.config import CorruptDataPolicy
from expense_tracker.models.expense import Expense
from expense_tracker.services.storage import ExpenseRepository, StorageCorruptedError


class ExpenseStore:
    """
    Ordered expense records, insertion order preserved.

    Append-only apart from deletion by id. Ids are unique.
    """

    def __init__(
        self,
        repository: ExpenseRepository,
        policy: CorruptDataPolicy = CorruptDataPolicy.STRICT,
        audit_logger: Optional[AuditLogger] = None,
    ):
        """
        Load the store.

        Raises:
            StorageCorruptedError: If the stored data is unreadable and
                the policy is STRICT
        """
        self._repository = repository
        self._audit_logger = audit_logger or AuditLogger()

        result = repository.load()
        if result.ok:
            self._expenses: list[Expense] = list(result.expenses)
            self._audit_logger.log_store_loaded(len(self._expenses), repository.key)
        elif policy is CorruptDataPolicy.RESET:
            self._audit_logger.log_store_reset(repository.key, result.error)
            repository.clear()
            self._expenses = []
        else:
            self._audit_logger.log_store_load_failed(repository.key, result.error)
            raise StorageCorruptedError(result.error)

        self._persist()

    def _persist(self) -> None:
        self._repository.save(self._expenses)
        self._audit_logger.log_store_written(len(self._expenses), self._repository.key)

    @property
    def expenses(self) -> tuple[Expense, ...]:
        """Snapshot of the records in insertion order."""
        return tuple(self._expenses)

    def __len__(self) -> int:
        return len(self._expenses)

    def __iter__(self) -> Iterator[Expense]:
        return iter(tuple(self._expenses))

    def __contains__(self, expense_id: object) -> bool:
        return any(e.id == expense_id for e in self._expenses)

    def get(self, expense_id: int) -> Optional[Expense]:
        for expense in self._expenses:
            if expense.id == expense_id:
                return expense
        return None

    @property
    def last_id(self) -> int:
        """Largest id in the store, 0 when empty."""
        return max((e.id for e in self._expenses), default=0)

    def append(self, expense: Expense) -> None:
        """
        Add a record at the end and persist.

        Raises:
            ValueError: If a record with the same id is already stored
        """
        if expense.id in self:
            raise ValueError(f"Expense id {expense.id} already exists")
        self._expenses = [*self._expenses, expense]
        self._persist()

    def remove(self, expense_id: int) -> bool:
        """
        Remove the record with this id and persist.

        Returns:
            True if a record was removed, False if none matched
        """
        remaining = [e for e in self._expenses if e.id != expense_id]
        removed = len(remaining) != len(self._expenses)
        self._expenses = remaining
        self._persist()
        return removed
