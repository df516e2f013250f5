"""
Expense Input Validation

DESIGN DECISION: The store validates its own inputs.
Callers may pre-check text, but the store never trusts them to: an empty
description or a non-positive amount is rejected inside Add, so the record
invariants hold whoever the caller is.

Two kinds of checks live here:
- Text parsing (amount and id typed by a user)
- Field rules for a new expense (description, amount, category)

IMPORTANT: Validation NEVER silently fixes issues, with one documented
exception: a blank category becomes the default category.
"""

import math
from typing import Any, Optional

from expense_tracker.models.expense import (
    DEFAULT_CATEGORY,
    ValidationIssue,
    ValidationResult,
)


DESCRIPTION_EMPTY_MESSAGE = "Description cannot be empty"
INVALID_AMOUNT_MESSAGE = "Please enter a valid amount"
INVALID_ID_MESSAGE = "Please enter a valid ID"


class ValidationError(Exception):
    """Inputs for a new expense were rejected."""

    def __init__(self, issues: list[ValidationIssue]):
        self.issues = issues
        super().__init__("; ".join(issue.message for issue in issues))


class ExpenseValidator:
    """
    Validates the fields of a new expense.
    """

    def __init__(self, default_category: str = DEFAULT_CATEGORY):
        self._default_category = default_category

    @property
    def default_category(self) -> str:
        return self._default_category

    def validate(self, description: Any, amount: Any) -> ValidationResult:
        """
        Check description and amount.

        Returns:
            ValidationResult listing every issue found (description first)
        """
        issues = []

        if not isinstance(description, str) or not description.strip():
            issues.append(ValidationIssue(
                field="description",
                issue_type="missing",
                message=DESCRIPTION_EMPTY_MESSAGE,
            ))

        # bool is an int subclass, but True is not an amount
        if isinstance(amount, bool) or not isinstance(amount, (int, float)):
            issues.append(ValidationIssue(
                field="amount",
                issue_type="not_a_number",
                message=INVALID_AMOUNT_MESSAGE,
            ))
        elif not math.isfinite(amount) or amount <= 0:
            issues.append(ValidationIssue(
                field="amount",
                issue_type="not_positive",
                message=INVALID_AMOUNT_MESSAGE,
            ))

        return ValidationResult(issues=issues)

    def check(self, description: Any, amount: Any) -> None:
        """Raise ValidationError if the inputs are not acceptable."""
        result = self.validate(description, amount)
        if not result.is_valid:
            raise ValidationError(result.issues)

    def normalize_category(self, category: Optional[str]) -> str:
        """Blank or missing categories fall back to the default."""
        if category is None or not category.strip():
            return self._default_category
        return category.strip()


def parse_amount(text: str) -> float:
    """
    Parse a typed amount such as "4.50".

    Raises:
        ValidationError: If the text is not a finite positive number
    """
    try:
        amount = float(text.strip())
    except (AttributeError, ValueError):
        amount = None

    if amount is None or not math.isfinite(amount) or amount <= 0:
        raise ValidationError([ValidationIssue(
            field="amount",
            issue_type="not_a_number" if amount is None else "not_positive",
            message=INVALID_AMOUNT_MESSAGE,
        )])
    return amount


def parse_expense_id(text: str) -> int:
    """
    Parse a typed expense id.

    Any integer is accepted; whether it exists is the store's business.
    """
    try:
        return int(text.strip())
    except (AttributeError, ValueError):
        raise ValidationError([ValidationIssue(
            field="id",
            issue_type="not_a_number",
            message=INVALID_ID_MESSAGE,
        )])
