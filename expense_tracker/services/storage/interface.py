"""
Abstract Storage Interface

DESIGN DECISION: We define an abstract interface for storage operations.
This allows us to:
1. Keep the JSON file as the default backend
2. Use in-memory storage for testing
3. Keep the store's business logic decoupled from the file format

The interface is intentionally tiny. The tracker reads its whole ledger
once at startup and rewrites it whole after every change.
"""

from abc import ABC, abstractmethod

from expense_tracker.models.audit import AuditEvent
from expense_tracker.models.expense import ExpenseLedger


class ExpenseStorageInterface(ABC):
    """
    Abstract interface for ledger storage.

    Any storage implementation must implement these methods.
    """

    @property
    @abstractmethod
    def location(self) -> str:
        """Human-readable description of where the ledger lives."""
        pass

    @abstractmethod
    def load(self) -> ExpenseLedger:
        """
        Read the full ledger.

        Returns:
            The stored ledger, or an empty ledger if nothing was stored yet

        Raises:
            CorruptDataError: If stored data exists but is not a valid ledger
            StorageError: If stored data exists but cannot be read
        """
        pass

    @abstractmethod
    def save(self, ledger: ExpenseLedger) -> None:
        """
        Replace the stored ledger with the given one.

        Args:
            ledger: The complete ledger to persist

        Raises:
            StorageError: If the write cannot complete
        """
        pass


class AuditStorageInterface(ABC):
    """
    Abstract interface for audit log storage.

    Audit logs are append-only - we never delete or modify them.
    """

    @abstractmethod
    def append_event(self, event: AuditEvent) -> bool:
        """
        Append an audit event to the log.

        Returns:
            True if logged successfully
        """
        pass

    @abstractmethod
    def get_recent_events(self, limit: int = 100) -> list[AuditEvent]:
        """
        Get the most recent audit events.

        Returns:
            List of recent events (newest first)
        """
        pass


class StorageError(Exception):
    """Base exception for storage operations."""
    pass


class CorruptDataError(StorageError):
    """Stored data exists but could not be parsed into a ledger."""
    pass
