"""
Storage Services Package

Provides abstract interfaces and concrete implementations for data storage.
The JSON file backend is the default; in-memory backends serve tests.
"""

from expense_tracker.services.storage.interface import (
    AuditStorageInterface,
    CorruptDataError,
    ExpenseStorageInterface,
    StorageError,
)
from expense_tracker.services.storage.json_file import JsonFileExpenseStorage
from expense_tracker.services.storage.memory import (
    InMemoryAuditStorage,
    InMemoryExpenseStorage,
)

__all__ = [
    # Interfaces
    "AuditStorageInterface",
    "ExpenseStorageInterface",
    # Exceptions
    "CorruptDataError",
    "StorageError",
    # Implementations
    "InMemoryAuditStorage",
    "InMemoryExpenseStorage",
    "JsonFileExpenseStorage",
]
