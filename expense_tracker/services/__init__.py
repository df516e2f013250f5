"""Services package."""

from expense_tracker.services.storage import (
    AuditStorageInterface,
    CorruptDataError,
    ExpenseStorageInterface,
    InMemoryAuditStorage,
    InMemoryExpenseStorage,
    JsonFileExpenseStorage,
    StorageError,
)

__all__ = [
    "AuditStorageInterface",
    "CorruptDataError",
    "ExpenseStorageInterface",
    "InMemoryAuditStorage",
    "InMemoryExpenseStorage",
    "JsonFileExpenseStorage",
    "StorageError",
]
