"""Reports package."""

from expense_tracker.reports.formatter import (
    NO_EXPENSES_MESSAGE,
    CategorySummary,
    ExpenseListing,
    ReportFormatter,
    build_category_summary,
    build_listing,
    format_amount,
    truncate,
)

__all__ = [
    "NO_EXPENSES_MESSAGE",
    "CategorySummary",
    "ExpenseListing",
    "ReportFormatter",
    "build_category_summary",
    "build_listing",
    "format_amount",
    "truncate",
]
