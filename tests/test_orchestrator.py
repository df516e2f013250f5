"""Tests for the command flow and the component factory."""

import json

import pytest

from expense_tracker.config import TrackerSettings
from expense_tracker.models.audit import AuditEventType
from expense_tracker.orchestrator import ExpenseCommandFlow, create_app_components
from expense_tracker.reports import NO_EXPENSES_MESSAGE
from expense_tracker.services.storage import CorruptDataError, InMemoryAuditStorage
from expense_tracker.store import ExpenseStore
from expense_tracker.validation import (
    DESCRIPTION_EMPTY_MESSAGE,
    INVALID_AMOUNT_MESSAGE,
    INVALID_ID_MESSAGE,
)


@pytest.fixture
def flow(store):
    return ExpenseCommandFlow(store)


class TestAddCommand:
    """Tests for ExpenseCommandFlow.add."""

    def test_add(self, flow):
        """Test a successful add."""
        result = flow.add("Coffee", "4.50", "Food")
        assert result.success is True
        assert "Added expense: $4.50 for Coffee" in result.message
        assert result.expense.id == 1

    def test_add_blank_category(self, flow):
        """Test the default category."""
        result = flow.add("Coffee", "4.50", "")
        assert result.expense.category == "Other"

    def test_add_empty_description(self, flow, store):
        """Test that the description is checked first."""
        result = flow.add("  ", "not a number")
        assert result.success is False
        assert result.message == DESCRIPTION_EMPTY_MESSAGE
        assert len(store) == 0

    @pytest.mark.parametrize("amount_text", ["", "abc", "0", "-3"])
    def test_add_bad_amount(self, flow, store, amount_text):
        """Test amount rejection."""
        result = flow.add("Coffee", amount_text)
        assert result.success is False
        assert result.message == INVALID_AMOUNT_MESSAGE
        assert store.next_id == 1

    def test_add_save_failure(self, failing_storage, fixed_clock):
        """Test that save failures become a message, not a crash."""
        failing_storage.fail_saves = True
        flow = ExpenseCommandFlow(ExpenseStore(failing_storage, clock=fixed_clock))

        result = flow.add("Coffee", "4.50")

        assert result.success is False
        assert "disk full" in result.message
        assert len(flow.store) == 0


class TestOtherCommands:
    """Tests for list, delete and category commands."""

    def test_list_and_category_on_empty_store(self, flow):
        """Test that both views print only the notice."""
        assert flow.list_expenses().message == NO_EXPENSES_MESSAGE
        assert flow.view_by_category().message == NO_EXPENSES_MESSAGE

    def test_list(self, flow):
        """Test the listing after two adds."""
        flow.add("Coffee", "4.50", "Food")
        flow.add("Bus", "2.00", "Transport")

        lines = flow.list_expenses().message.splitlines()

        assert lines[3].startswith("1  |")
        assert lines[4].startswith("2  |")
        assert lines[-1].endswith("Total: $6.50")

    def test_view_by_category(self, flow):
        """Test category totals."""
        flow.add("Coffee", "4.50", "Food")
        flow.add("Bus", "2.00", "Transport")
        flow.add("Bagel", "3.25", "Food")

        lines = flow.view_by_category().message.splitlines()

        assert lines[1:] == ["Food           : $7.75", "Transport      : $2.00"]

    def test_delete(self, flow):
        """Test deleting by typed id."""
        flow.add("Coffee", "4.50", "Food")
        flow.add("Bus", "2.00", "Transport")

        result = flow.delete("1")

        assert result.success is True
        assert result.message == "Deleted expense: Coffee"
        assert [e.id for e in flow.store.list_expenses()] == [2]
        assert flow.add("Lunch", "9").expense.id == 3

    def test_delete_unknown_id(self, flow):
        """Test the not-found message."""
        flow.add("Coffee", "4.50")
        result = flow.delete("7")
        assert result.success is False
        assert result.message == "Expense with ID 7 not found"

    def test_delete_bad_id(self, flow):
        """Test a non-numeric id."""
        flow.add("Coffee", "4.50")
        result = flow.delete("seven")
        assert result.message == INVALID_ID_MESSAGE
        assert len(flow.store) == 1

    def test_delete_on_empty_store(self, flow):
        """Test that nothing is asked of an empty store."""
        result = flow.delete("1")
        assert result.success is False
        assert result.message == NO_EXPENSES_MESSAGE


class TestCreateAppComponents:
    """Tests for the component factory."""

    def test_fresh_start(self, tmp_path):
        """Test startup without a data file."""
        settings = TrackerSettings(data_file=tmp_path / "expenses.json")
        store, flow, load_error = create_app_components(settings)

        assert load_error is None
        assert len(store) == 0
        assert flow.add("Coffee", "4.50", "Food").success is True
        assert (tmp_path / "expenses.json").exists()

    def test_restart_keeps_data(self, tmp_path):
        """Test that a second process sees the first one's expenses."""
        settings = TrackerSettings(data_file=tmp_path / "expenses.json", fsync_on_save=False)
        _, flow, _ = create_app_components(settings)
        flow.add("Coffee", "4.50", "Food")
        flow.add("Bus", "2.00", "Transport")
        flow.delete("1")

        store, _, load_error = create_app_components(settings)

        assert load_error is None
        assert [e.description for e in store.list_expenses()] == ["Bus"]
        assert store.next_id == 3

    def test_corrupt_file_is_reported(self, tmp_path):
        """Test that a corrupt file is handed back instead of swallowed."""
        path = tmp_path / "expenses.json"
        path.write_text("{ this is not json", encoding="utf-8")
        audit_storage = InMemoryAuditStorage()

        store, _, load_error = create_app_components(
            TrackerSettings(data_file=path),
            audit_storage=audit_storage,
        )

        assert isinstance(load_error, CorruptDataError)
        assert len(store) == 0
        assert audit_storage.events[0].event_type == AuditEventType.LOAD_FAILED

    def test_settings_flow_into_components(self, tmp_path):
        """Test default category and currency settings."""
        settings = TrackerSettings(
            data_file=tmp_path / "expenses.json",
            default_category="Misc",
            currency_symbol="€",
        )
        _, flow, _ = create_app_components(settings)

        result = flow.add("Coffee", "4.50")

        assert result.expense.category == "Misc"
        assert "€4.50" in result.message
        data = json.loads((tmp_path / "expenses.json").read_text(encoding="utf-8"))
        assert data["expenses"][0]["category"] == "Misc"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
