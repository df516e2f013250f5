"""Validation package."""

from expense_tracker.validation.validator import (
    DESCRIPTION_EMPTY_MESSAGE,
    INVALID_AMOUNT_MESSAGE,
    INVALID_ID_MESSAGE,
    ExpenseValidator,
    ValidationError,
    parse_amount,
    parse_expense_id,
)

__all__ = [
    "DESCRIPTION_EMPTY_MESSAGE",
    "INVALID_AMOUNT_MESSAGE",
    "INVALID_ID_MESSAGE",
    "ExpenseValidator",
    "ValidationError",
    "parse_amount",
    "parse_expense_id",
]
