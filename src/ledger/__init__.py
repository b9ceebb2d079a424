"""Ledger package: the entry list, its persistence and its exports."""

from src.ledger.errors import EntryValidationError, LedgerError
from src.ledger.export import CSV_HEADER, entries_to_csv, entries_to_json
from src.ledger.ids import EntryIdGenerator
from src.ledger.store import LedgerStore, create_ledger_store

__all__ = [
    "CSV_HEADER",
    "EntryIdGenerator",
    "EntryValidationError",
    "LedgerError",
    "LedgerStore",
    "create_ledger_store",
    "entries_to_csv",
    "entries_to_json",
]
