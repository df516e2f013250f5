"""
In-Memory Storage Implementations

Used by tests and by callers that want a throwaway tracker.
The expense storage keeps the serialized JSON text, not the ledger object,
so every load goes through the same parsing as the file backend.
"""

from typing import Optional

from pydantic import ValidationError as SchemaValidationError

from expense_tracker.models.audit import AuditEvent
from expense_tracker.models.expense import ExpenseLedger
from expense_tracker.services.storage.interface import (
    AuditStorageInterface,
    CorruptDataError,
    ExpenseStorageInterface,
)


class InMemoryExpenseStorage(ExpenseStorageInterface):
    """Keeps the ledger as a JSON string in memory."""

    def __init__(self, initial_text: Optional[str] = None):
        self._text = initial_text
        self.save_count = 0

    @property
    def location(self) -> str:
        return "memory"

    @property
    def text(self) -> Optional[str]:
        return self._text

    def load(self) -> ExpenseLedger:
        if self._text is None:
            return ExpenseLedger()
        try:
            return ExpenseLedger.model_validate_json(self._text)
        except SchemaValidationError as e:
            raise CorruptDataError(f"Stored ledger is not valid: {e}") from e

    def save(self, ledger: ExpenseLedger) -> None:
        self._text = ledger.model_dump_json(indent=2)
        self.save_count += 1


class InMemoryAuditStorage(AuditStorageInterface):
    """Append-only list of audit events."""

    def __init__(self):
        self._events: list[AuditEvent] = []

    @property
    def events(self) -> list[AuditEvent]:
        """All events in the order they were appended."""
        return list(self._events)

    def append_event(self, event: AuditEvent) -> bool:
        self._events.append(event)
        return True

    def get_recent_events(self, limit: int = 100) -> list[AuditEvent]:
        return list(reversed(self._events))[:limit]
