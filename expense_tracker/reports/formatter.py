"""
Expense Reports

Builds the two views of the store (the expense table and the
per-category totals) and renders them, plus the short confirmation
messages, as plain text.

DESIGN DECISION: Building and rendering are separate.
The builders return models carrying the numbers; the formatter only
turns them into text. Tests can check totals without parsing output.
"""

from typing import Iterable, Mapping

from pydantic import BaseModel, Field

from expense_tracker.models.expense import Expense


NO_EXPENSES_MESSAGE = "No expenses recorded yet."
ELLIPSIS = "..."


# =============================================================================
# REPORT MODELS
# =============================================================================

class ExpenseListing(BaseModel):
    """Every expense in insertion order plus their total."""

    rows: list[Expense] = Field(default_factory=list)
    total: float = Field(default=0.0, ge=0)

    @property
    def is_empty(self) -> bool:
        return not self.rows


class CategorySummary(BaseModel):
    """Per-category totals in order of first appearance."""

    totals: dict[str, float] = Field(default_factory=dict)
    grand_total: float = Field(default=0.0, ge=0)

    @property
    def is_empty(self) -> bool:
        return not self.totals


def build_listing(expenses: Iterable[Expense]) -> ExpenseListing:
    rows = list(expenses)
    total = 0.0
    for expense in rows:
        total += expense.amount
    return ExpenseListing(rows=rows, total=total)


def build_category_summary(totals: Mapping[str, float]) -> CategorySummary:
    return CategorySummary(totals=dict(totals), grand_total=sum(totals.values()))


# =============================================================================
# TEXT HELPERS
# =============================================================================

def truncate(text: str, width: int = 24) -> str:
    """
    Cut text down to width characters.

    Longer text keeps its first width - 3 characters and ends in "...",
    so the result is never wider than width.
    """
    if len(text) <= width:
        return text
    return text[:width - len(ELLIPSIS)] + ELLIPSIS


def format_amount(amount: float, currency_symbol: str = "$") -> str:
    return f"{currency_symbol}{amount:.2f}"


# =============================================================================
# FORMATTER
# =============================================================================

class ReportFormatter:
    """
    Renders reports and confirmations as text.

    Table layout:
        ID | Date       | Category    | Description              | Amount
        ---|------------|-------------|--------------------------|--------
        1  | 2026-10-19 | Food        | Coffee                   | $4.50
    """

    ID_WIDTH = 2
    DATE_WIDTH = 10
    CATEGORY_WIDTH = 11
    SUMMARY_CATEGORY_WIDTH = 15

    def __init__(self, currency_symbol: str = "$", description_width: int = 24):
        self._currency = currency_symbol
        self._description_width = description_width

    def amount(self, value: float) -> str:
        return format_amount(value, self._currency)

    def render_listing(self, listing: ExpenseListing) -> str:
        """The expense table followed by the total line."""
        if listing.is_empty:
            return NO_EXPENSES_MESSAGE

        width = self._description_width
        lines = [
            "📊 Your Expenses:",
            (
                f"{'ID':<{self.ID_WIDTH}} | {'Date':<{self.DATE_WIDTH}} | "
                f"{'Category':<{self.CATEGORY_WIDTH}} | {'Description':<{width}} | Amount"
            ),
            "|".join([
                "-" * (self.ID_WIDTH + 1),
                "-" * (self.DATE_WIDTH + 2),
                "-" * (self.CATEGORY_WIDTH + 2),
                "-" * (width + 2),
                "-" * 8,
            ]),
        ]

        for expense in listing.rows:
            lines.append(
                f"{expense.id:<{self.ID_WIDTH}} | "
                f"{expense.date.strftime('%Y-%m-%d'):<{self.DATE_WIDTH}} | "
                f"{expense.category:<{self.CATEGORY_WIDTH}} | "
                f"{truncate(expense.description, width):<{width}} | "
                f"{self.amount(expense.amount)}"
            )

        lines.append("")
        lines.append(f"💰 Total: {self.amount(listing.total)}")
        return "\n".join(lines)

    def render_category_summary(self, summary: CategorySummary) -> str:
        """One line per category with its total."""
        if summary.is_empty:
            return NO_EXPENSES_MESSAGE

        lines = ["📂 Expenses by Category:"]
        for category, total in summary.totals.items():
            lines.append(
                f"{category:<{self.SUMMARY_CATEGORY_WIDTH}}: {self.amount(total)}"
            )
        return "\n".join(lines)

    def format_added(self, expense: Expense) -> str:
        return f"✅ Added expense: {self.amount(expense.amount)} for {expense.description}"

    def format_deleted(self, expense: Expense) -> str:
        return f"Deleted expense: {expense.description}"

    def format_not_found(self, expense_id: int) -> str:
        return f"Expense with ID {expense_id} not found"
