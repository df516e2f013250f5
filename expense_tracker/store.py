"""
Expense Store

The in-memory collection of expenses plus the id counter, backed by a
storage implementation that holds the whole ledger.

GUARANTEES:
- Ids are assigned here, start at 1 and are never handed out twice
- Records keep insertion order; delete removes one and closes the gap
- Every successful mutation is followed by a full save
- A failed save rolls the mutation back and the error reaches the caller
"""

from datetime import datetime
from typing import Callable, Optional

from expense_tracker.audit import AuditLogger
from expense_tracker.models.expense import Expense, ExpenseLedger, local_now
from expense_tracker.services.storage import ExpenseStorageInterface, StorageError
from expense_tracker.validation import ExpenseValidator, ValidationError


class ExpenseStore:
    """
    Owns the expenses of one tracker and their persistence.

    Construct it once per process and pass it to whatever needs it.
    Nothing is read from storage until load() is called.
    """

    def __init__(
        self,
        storage: ExpenseStorageInterface,
        validator: Optional[ExpenseValidator] = None,
        audit_logger: Optional[AuditLogger] = None,
        clock: Callable[[], datetime] = local_now,
    ):
        self._storage = storage
        self._validator = validator or ExpenseValidator()
        self._audit_logger = audit_logger
        self._clock = clock

        self._records: list[Expense] = []
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._records)

    @property
    def next_id(self) -> int:
        return self._next_id

    @property
    def storage(self) -> ExpenseStorageInterface:
        return self._storage

    # -------------------------------------------------------------------------
    # Persistence
    # -------------------------------------------------------------------------

    def load(self) -> int:
        """
        Replace in-memory state with the stored ledger.

        A missing backing file yields an empty store. If the stored data
        cannot be read or parsed the store is left empty and the
        StorageError (CorruptDataError for bad content) is re-raised so the
        caller can decide whether to continue.

        Returns:
            Number of expenses loaded
        """
        try:
            ledger = self._storage.load()
        except StorageError as e:
            self._records = []
            self._next_id = 1
            if self._audit_logger:
                self._audit_logger.log_load_failed(self._storage.location, str(e))
            raise

        self._records = list(ledger.expenses)
        self._next_id = ledger.next_id

        if self._audit_logger:
            self._audit_logger.log_store_loaded(
                self._storage.location, len(self._records), self._next_id
            )
        return len(self._records)

    def save(self) -> None:
        """
        Write the full current state to storage.

        Raises:
            StorageError: If the write cannot complete
        """
        self._storage.save(self.to_ledger())

    def to_ledger(self) -> ExpenseLedger:
        return ExpenseLedger(expenses=list(self._records), next_id=self._next_id)

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    def add(
        self,
        description: str,
        amount: float,
        category: Optional[str] = None,
    ) -> Expense:
        """
        Record a new expense and save.

        A blank or missing category becomes the validator's default.

        Raises:
            ValidationError: Empty description or non-positive amount;
                nothing is recorded and the id counter does not move
            StorageError: The save failed; the expense is not kept
        """
        try:
            self._validator.check(description, amount)
        except ValidationError as e:
            if self._audit_logger:
                self._audit_logger.log_validation_failed(e.issues)
            raise

        expense = Expense(
            id=self._next_id,
            description=description,
            amount=float(amount),
            category=self._validator.normalize_category(category),
            date=self._clock(),
        )

        self._records.append(expense)
        self._next_id += 1

        try:
            self.save()
        except StorageError as e:
            self._records.pop()
            self._next_id -= 1
            if self._audit_logger:
                self._audit_logger.log_save_failed("add", str(e))
            raise

        if self._audit_logger:
            self._audit_logger.log_expense_added(expense)
        return expense

    def list_expenses(self) -> list[Expense]:
        """All expenses in insertion order."""
        return list(self._records)

    def delete(self, expense_id: int) -> Optional[Expense]:
        """
        Remove the expense with the given id and save.

        Returns:
            The removed expense, or None if no expense has that id
            (nothing is changed or saved in that case)

        Raises:
            StorageError: The save failed; the expense is put back
        """
        for index, expense in enumerate(self._records):
            if expense.id != expense_id:
                continue

            del self._records[index]
            try:
                self.save()
            except StorageError as e:
                self._records.insert(index, expense)
                if self._audit_logger:
                    self._audit_logger.log_save_failed("delete", str(e))
                raise

            if self._audit_logger:
                self._audit_logger.log_expense_deleted(expense)
            return expense

        if self._audit_logger:
            self._audit_logger.log_expense_not_found(expense_id)
        return None

    def totals_by_category(self) -> dict[str, float]:
        """
        Sum of amounts per category.

        Categories appear in the order they were first used.
        """
        totals: dict[str, float] = {}
        for expense in self._records:
            totals[expense.category] = totals.get(expense.category, 0.0) + expense.amount
        return totals

    def total(self) -> float:
        return sum(expense.amount for expense in self._records)
