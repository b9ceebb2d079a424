"""
Expense Ledger - Source Package

A personal income and expense ledger: record entries, keep running totals,
persist across sessions and export history as JSON or CSV.

DESIGN PRINCIPLES:
1. One owner for the entry list (LedgerStore)
2. Reject bad input loudly, never half-apply a change
3. Every mutation is flushed to storage in full
4. Storage layer is swappable
"""

__version__ = "1.0.0"
__author__ = "Expense Ledger Team"
