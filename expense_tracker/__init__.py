"""
Expense Tracker - Source Package

A small personal expense tracker that keeps dated transactions in a local
JSON file and reports them as a table or as per-category totals.

DESIGN PRINCIPLES:
1. The store owns ids, validation and persistence
2. Fail visibly: save and load errors reach the caller
3. Every write replaces the backing file atomically
4. Every state change is audited
"""

__version__ = "1.0.0"
__author__ = "Expense Tracker Team"
