"""
Main Orchestrator for Expense Tracker

This module ties the components together and defines the command flow a
text front end calls: raw input goes in, a message to show comes out.

DESIGN DECISION: The flow owns the user-facing error taxonomy.
- Bad input (empty description, bad amount, bad id) → message, nothing changes
- Unknown id on delete → message, nothing changes
- Save failure → message, the store has already rolled back
No error ends the process; only the front end decides when to exit.
"""

from typing import Optional

from pydantic import BaseModel

from expense_tracker.audit import AuditLogger
from expense_tracker.config import TrackerSettings, get_settings
from expense_tracker.logging_setup import get_logger
from expense_tracker.models.expense import Expense
from expense_tracker.reports import (
    NO_EXPENSES_MESSAGE,
    ReportFormatter,
    build_category_summary,
    build_listing,
)
from expense_tracker.services.storage import (
    AuditStorageInterface,
    JsonFileExpenseStorage,
    StorageError,
)
from expense_tracker.store import ExpenseStore
from expense_tracker.validation import (
    DESCRIPTION_EMPTY_MESSAGE,
    ExpenseValidator,
    ValidationError,
    parse_amount,
    parse_expense_id,
)


logger = get_logger(__name__)


class CommandResult(BaseModel):
    """Outcome of one command, ready to show to the user."""

    success: bool
    message: str
    expense: Optional[Expense] = None


class ExpenseCommandFlow:
    """
    Translates raw text inputs into store operations.

    Flow for every command:
    1. Parse and check the text
    2. Call exactly one store operation
    3. Render the outcome as a message
    """

    def __init__(
        self,
        store: ExpenseStore,
        formatter: Optional[ReportFormatter] = None,
    ):
        self._store = store
        self._formatter = formatter or ReportFormatter()

    @property
    def store(self) -> ExpenseStore:
        return self._store

    def add(
        self,
        description: str,
        amount_text: str,
        category: str = "",
    ) -> CommandResult:
        """Add an expense from typed description, amount and category."""
        if not description.strip():
            return CommandResult(success=False, message=DESCRIPTION_EMPTY_MESSAGE)

        try:
            amount = parse_amount(amount_text)
            expense = self._store.add(description.strip(), amount, category)
        except ValidationError as e:
            return CommandResult(success=False, message=e.issues[0].message)
        except StorageError as e:
            logger.error("add_not_saved", error=str(e))
            return CommandResult(
                success=False,
                message=f"Could not save the expense: {e}",
            )

        return CommandResult(
            success=True,
            message=self._formatter.format_added(expense),
            expense=expense,
        )

    def list_expenses(self) -> CommandResult:
        """Render the expense table."""
        listing = build_listing(self._store.list_expenses())
        return CommandResult(
            success=True,
            message=self._formatter.render_listing(listing),
        )

    def delete(self, id_text: str) -> CommandResult:
        """Delete the expense whose id was typed."""
        if len(self._store) == 0:
            return CommandResult(success=False, message=NO_EXPENSES_MESSAGE)

        try:
            expense_id = parse_expense_id(id_text)
        except ValidationError as e:
            return CommandResult(success=False, message=e.issues[0].message)

        try:
            expense = self._store.delete(expense_id)
        except StorageError as e:
            logger.error("delete_not_saved", expense_id=expense_id, error=str(e))
            return CommandResult(
                success=False,
                message=f"Could not save after deleting: {e}",
            )

        if expense is None:
            return CommandResult(
                success=False,
                message=self._formatter.format_not_found(expense_id),
            )

        return CommandResult(
            success=True,
            message=self._formatter.format_deleted(expense),
            expense=expense,
        )

    def view_by_category(self) -> CommandResult:
        """Render per-category totals."""
        summary = build_category_summary(self._store.totals_by_category())
        return CommandResult(
            success=True,
            message=self._formatter.render_category_summary(summary),
        )


def create_app_components(
    settings: Optional[TrackerSettings] = None,
    audit_storage: Optional[AuditStorageInterface] = None,
) -> tuple[ExpenseStore, ExpenseCommandFlow, Optional[StorageError]]:
    """
    Factory function to create all application components.

    The store is loaded before it is returned. If loading fails the store
    starts empty and the error is handed back instead of raised, so the
    front end can warn that saving will replace the unreadable file.

    Returns:
        (store, command_flow, load_error)
    """
    settings = settings or get_settings()

    storage = JsonFileExpenseStorage(
        settings.data_file,
        fsync=settings.fsync_on_save,
    )
    store = ExpenseStore(
        storage,
        validator=ExpenseValidator(settings.default_category),
        audit_logger=AuditLogger(audit_storage),
    )
    formatter = ReportFormatter(
        currency_symbol=settings.currency_symbol,
        description_width=settings.description_width,
    )

    load_error = None
    try:
        store.load()
    except StorageError as e:
        logger.warning(
            "starting_with_empty_store",
            path=str(settings.data_file),
            error=str(e),
        )
        load_error = e

    return store, ExpenseCommandFlow(store, formatter), load_error
