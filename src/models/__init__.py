"""
Data Models Package

This package contains all Pydantic models used by the expense ledger.
All data flowing through the system must conform to these schemas.
"""

from src.models.entry import (
    Entry,
    EntryDraft,
    EntryKind,
    ExportFormat,
    LedgerTotals,
    ValidationIssue,
    ValidationResult,
    amount_to_number,
    format_amount,
)

__all__ = [
    "Entry",
    "EntryDraft",
    "EntryKind",
    "ExportFormat",
    "LedgerTotals",
    "ValidationIssue",
    "ValidationResult",
    "amount_to_number",
    "format_amount",
]
