"""Shared fixtures for the expense tracker tests."""

from datetime import datetime, timezone

import pytest

from expense_tracker.audit import AuditLogger
from expense_tracker.models.expense import ExpenseLedger
from expense_tracker.services.storage import (
    InMemoryAuditStorage,
    InMemoryExpenseStorage,
    StorageError,
)
from expense_tracker.store import ExpenseStore


FIXED_NOW = datetime(2026, 10, 19, 9, 30, tzinfo=timezone.utc)


class FailingExpenseStorage(InMemoryExpenseStorage):
    """In-memory storage whose saves fail while fail_saves is set."""

    def __init__(self, initial_text=None):
        super().__init__(initial_text)
        self.fail_saves = False

    def save(self, ledger: ExpenseLedger) -> None:
        if self.fail_saves:
            raise StorageError("disk full")
        super().save(ledger)


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW


@pytest.fixture
def memory_storage():
    return InMemoryExpenseStorage()


@pytest.fixture
def failing_storage():
    return FailingExpenseStorage()


@pytest.fixture
def audit_storage():
    return InMemoryAuditStorage()


@pytest.fixture
def store(memory_storage, audit_storage, fixed_clock):
    return ExpenseStore(
        memory_storage,
        audit_logger=AuditLogger(audit_storage),
        clock=fixed_clock,
    )
