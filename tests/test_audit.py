"""Tests for the audit logger."""

import io
import json
import logging

import pytest

from expense_tracker.audit import AuditLogger
from expense_tracker.logging_setup import configure_logging
from expense_tracker.models.audit import AuditEventBuilder, AuditEventType
from expense_tracker.models.expense import ValidationIssue
from expense_tracker.services.storage import AuditStorageInterface, InMemoryAuditStorage


class BrokenAuditStorage(AuditStorageInterface):
    """Audit storage that always fails."""

    def append_event(self, event):
        raise RuntimeError("audit sink unavailable")

    def get_recent_events(self, limit=100):
        return []


class TestAuditLogger:
    """Tests for AuditLogger."""

    def test_log_without_storage(self):
        """Test local-only logging."""
        assert AuditLogger().log(AuditEventBuilder.expense_not_found(1)) is True

    def test_log_appends_to_storage(self):
        """Test that events reach audit storage."""
        storage = InMemoryAuditStorage()
        logger = AuditLogger(storage)

        logger.log_save_failed("delete", "disk full")
        logger.log_expense_not_found(4)

        recent = storage.get_recent_events()
        assert [e.event_type for e in recent] == [
            AuditEventType.EXPENSE_NOT_FOUND,
            AuditEventType.SAVE_FAILED,
        ]

    def test_storage_failure_is_not_raised(self):
        """Test that a broken audit sink never breaks the caller."""
        logger = AuditLogger(BrokenAuditStorage())
        assert logger.log(AuditEventBuilder.expense_not_found(1)) is False

    def test_log_validation_failed(self):
        """Test that validation issues are recorded as plain dicts."""
        storage = InMemoryAuditStorage()
        AuditLogger(storage).log_validation_failed([
            ValidationIssue(field="amount", issue_type="not_positive", message="bad"),
        ])

        event = storage.events[0]
        assert event.event_type == AuditEventType.VALIDATION_FAILED
        assert event.details["issues"] == [
            {"field": "amount", "type": "not_positive", "message": "bad"},
        ]

    def test_recent_events_limit(self):
        """Test newest-first ordering and limit."""
        storage = InMemoryAuditStorage()
        logger = AuditLogger(storage)
        for expense_id in range(1, 6):
            logger.log_expense_not_found(expense_id)

        assert [e.expense_id for e in storage.get_recent_events(limit=2)] == [5, 4]

    def test_configure_logging_emits_json(self):
        """Test that audit events come out as JSON lines."""
        stream = io.StringIO()
        handler = configure_logging("INFO", stream)
        try:
            AuditLogger().log_expense_not_found(3)
        finally:
            package_logger = logging.getLogger("expense_tracker")
            package_logger.removeHandler(handler)
            package_logger.setLevel(logging.NOTSET)

        record = json.loads(stream.getvalue().splitlines()[-1])
        assert record["event"] == "audit_event"
        assert record["level"] == "warning"
        assert record["event_type"] == "expense_not_found"
        assert record["expense_id"] == 3


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
