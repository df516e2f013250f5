"""
Audit Logger

DESIGN DECISION: Every change to the store is logged.
This provides:
1. Traceability of adds and deletes
2. A visible record of load and save failures
3. Debugging capability

The audit logger:
- Gracefully handles failures (doesn't crash the app if logging fails)
- Logs locally through structlog and optionally appends to audit storage
"""

from typing import Optional

from expense_tracker.logging_setup import get_logger
from expense_tracker.models.audit import AuditEvent, AuditEventBuilder
from expense_tracker.models.expense import Expense, ValidationIssue
from expense_tracker.services.storage.interface import AuditStorageInterface


class AuditLogger:
    """
    Central audit logging service.

    Logs events both to:
    1. Structured local log (for debugging)
    2. Audit storage, when one is configured
    """

    def __init__(
        self,
        storage: Optional[AuditStorageInterface] = None,
    ):
        """
        Initialize audit logger.

        Args:
            storage: Storage backend for persistence.
                    If None, only logs locally.
        """
        self._storage = storage
        self._logger = get_logger("expense_tracker.audit")

    def log(self, event: AuditEvent) -> bool:
        """
        Log an audit event.

        Always logs locally. Persists to storage if available.

        Returns True if storage write succeeded (or no storage configured).
        """
        log_dict = event.to_log_dict()

        if event.severity.value == "error":
            self._logger.error("audit_event", **log_dict)
        elif event.severity.value == "warning":
            self._logger.warning("audit_event", **log_dict)
        elif event.severity.value == "debug":
            self._logger.debug("audit_event", **log_dict)
        else:
            self._logger.info("audit_event", **log_dict)

        if self._storage:
            try:
                return self._storage.append_event(event)
            except Exception as e:
                # Log failure but don't raise
                self._logger.error(
                    "audit_storage_failed",
                    error=str(e),
                    event_id=str(event.event_id),
                )
                return False

        return True

    def log_store_loaded(self, source: str, expense_count: int, next_id: int) -> None:
        self.log(AuditEventBuilder.store_loaded(source, expense_count, next_id))

    def log_load_failed(self, source: str, error_message: str) -> None:
        self.log(AuditEventBuilder.load_failed(source, error_message))

    def log_save_failed(self, operation: str, error_message: str) -> None:
        self.log(AuditEventBuilder.save_failed(operation, error_message))

    def log_expense_added(self, expense: Expense) -> None:
        self.log(AuditEventBuilder.expense_added(expense))

    def log_expense_deleted(self, expense: Expense) -> None:
        self.log(AuditEventBuilder.expense_deleted(expense))

    def log_expense_not_found(self, expense_id: int) -> None:
        self.log(AuditEventBuilder.expense_not_found(expense_id))

    def log_validation_failed(self, issues: list[ValidationIssue]) -> None:
        """Log rejected inputs."""
        self.log(AuditEventBuilder.validation_failed(
            [{"field": i.field, "type": i.issue_type, "message": i.message} for i in issues]
        ))
