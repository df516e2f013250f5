"""
Core Data Models for Expense Tracker

These models define the schemas for the records the tracker keeps and the
document it writes to disk. They are designed to:
1. Enforce the record invariants at construction time
2. Give clear validation error messages
3. Serialize to and from the JSON backing file

DESIGN DECISION: Records are frozen. An expense never changes after it is
created; the only mutations the tracker knows are append and delete.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)


DEFAULT_CATEGORY = "Other"


def local_now() -> datetime:
    """Current moment as a timezone-aware local timestamp."""
    return datetime.now().astimezone()


# =============================================================================
# RECORD
# =============================================================================

class Expense(BaseModel):
    """
    A single expense entry.

    The id is always assigned by the store, never by the caller.
    Capitalized key spellings are accepted on input so files written by
    the earlier tool still load.
    """
    model_config = ConfigDict(str_strip_whitespace=True, frozen=True)

    id: int = Field(
        ...,
        ge=1,
        validation_alias=AliasChoices("id", "ID"),
        description="Store-assigned identifier"
    )
    description: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("description", "Description"),
        description="What the money was spent on"
    )
    amount: float = Field(
        ...,
        gt=0,
        allow_inf_nan=False,
        validation_alias=AliasChoices("amount", "Amount"),
        description="Amount spent"
    )
    category: str = Field(
        default=DEFAULT_CATEGORY,
        min_length=1,
        validation_alias=AliasChoices("category", "Category"),
        description="Free-form category label"
    )
    date: datetime = Field(
        default_factory=local_now,
        validation_alias=AliasChoices("date", "Date"),
        description="When the expense was recorded"
    )


# =============================================================================
# PERSISTED DOCUMENT
# =============================================================================

class ExpenseLedger(BaseModel):
    """
    The document stored in the backing file.

    A well-formed ledger fully determines the store's records and id counter.
    """

    expenses: list[Expense] = Field(
        default_factory=list,
        validation_alias=AliasChoices("expenses", "Expenses"),
        description="All expenses in insertion order"
    )
    next_id: int = Field(
        default=1,
        ge=1,
        validation_alias=AliasChoices("next_id", "NextID"),
        description="Id the next added expense will receive"
    )

    @field_validator('expenses', mode='before')
    @classmethod
    def null_means_empty(cls, v: Any) -> Any:
        """The earlier tool wrote null for an empty list."""
        return [] if v is None else v

    @model_validator(mode='after')
    def validate_ids(self) -> 'ExpenseLedger':
        """Ids must be unique and the counter must stay ahead of them."""
        ids = [expense.id for expense in self.expenses]
        if len(ids) != len(set(ids)):
            raise ValueError("Ledger contains duplicate expense ids")

        # A hand-edited counter must never lead to id reuse
        if ids and self.next_id <= max(ids):
            self.next_id = max(ids) + 1

        return self


# =============================================================================
# VALIDATION MODELS
# =============================================================================

class ValidationIssue(BaseModel):
    """A single validation issue found."""

    field: str = Field(
        ...,
        description="Field with the issue"
    )
    issue_type: str = Field(
        ...,
        description="Type of issue (e.g., 'missing', 'not_a_number', 'not_positive')"
    )
    message: str = Field(
        ...,
        description="Human-readable description of the issue"
    )


class ValidationResult(BaseModel):
    """Result of validating the inputs of a new expense."""

    issues: list[ValidationIssue] = Field(
        default_factory=list,
        description="All validation issues found"
    )

    @property
    def is_valid(self) -> bool:
        return not self.issues

    def first_message(self) -> Optional[str]:
        """Message of the first issue, in field order."""
        return self.issues[0].message if self.issues else None
