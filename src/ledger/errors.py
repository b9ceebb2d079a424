"""Ledger-level exceptions."""

from typing import Optional

from src.models.entry import ValidationIssue


INVALID_ENTRY_MESSAGE = "invalid description or non-positive amount"


class LedgerError(Exception):
    """Base exception for ledger operations."""
    pass


class EntryValidationError(LedgerError):
    """
    Add-input was rejected.

    The ledger is unchanged. ``issues`` lists every field that failed.
    """

    def __init__(
        self,
        message: str = INVALID_ENTRY_MESSAGE,
        issues: Optional[list[ValidationIssue]] = None,
    ):
        super().__init__(message)
        self.issues = list(issues or [])
