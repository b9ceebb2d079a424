"""
Ledger Store

The one component that owns the ledger. It holds the ordered entry list,
validates and records new entries, removes entries, derives totals and
exports history.

DESIGN DECISION: The store enforces two boundaries:
- Every mutation is followed by a full flush to storage
- No mutation is ever partially visible (a new list is built, then swapped in)

The store never renders anything. A presentation layer calls into it and
re-reads ``entries`` and ``totals()`` after each call.
"""

from decimal import Decimal
from pathlib import Path
from typing import Any, Optional, Union

from src.config import Settings, get_settings
from src.ledger.errors import EntryValidationError
from src.ledger.export import entries_to_csv, entries_to_json, write_export_file
from src.ledger.ids import EntryIdGenerator
from src.ledger.serialization import decode_entries, encode_entries
from src.logs import get_logger
from src.models.entry import Entry, EntryKind, ExportFormat, LedgerTotals
from src.services.storage import (
    JsonFileKeyValueStore,
    KeyValueStore,
    PersistenceWriteError,
    StorageError,
)
from src.validation import EntryValidator


logger = get_logger(__name__)


class LedgerStore:
    """
    Owns the ordered list of entries and mirrors it to a key-value store.

    Usage:
        store = LedgerStore(storage)
        store.load()
        store.add("Salary", "1000", "income")
        store.totals().balance
    """

    def __init__(
        self,
        storage: KeyValueStore,
        settings: Optional[Settings] = None,
        validator: Optional[EntryValidator] = None,
        id_generator: Optional[EntryIdGenerator] = None,
    ):
        settings = settings or get_settings()
        self._storage = storage
        self._ledger_settings = settings.ledger
        self._export_settings = settings.export
        self._validator = validator or EntryValidator()
        self._ids = id_generator or EntryIdGenerator()
        self._entries: list[Entry] = []

    @property
    def storage_key(self) -> str:
        return self._ledger_settings.storage_key

    @property
    def entries(self) -> tuple[Entry, ...]:
        """Snapshot of the entries in insertion order."""
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    # -------------------------------------------------------------------------
    # Persistence
    # -------------------------------------------------------------------------

    def load(self) -> None:
        """
        Replace the in-memory ledger with what storage holds.

        Absent, empty or malformed data yields an empty ledger. Nothing is
        raised to the caller.
        """
        try:
            raw = self._storage.get(self.storage_key)
            entries = decode_entries(raw) if raw and raw.strip() else []
        except StorageError as e:
            logger.warning(
                "ledger_load_fallback",
                key=self.storage_key,
                reason=str(e),
            )
            entries = []

        for entry in entries:
            self._ids.observe(entry.id)
        self._entries = entries

        logger.info("ledger_loaded", key=self.storage_key, count=len(entries))

    def _persist(self) -> None:
        """Flush the full entry list to storage."""
        payload = encode_entries(self._entries)
        try:
            self._storage.set(self.storage_key, payload)
        except PersistenceWriteError as e:
            logger.error("ledger_persist_failed", key=self.storage_key, error=str(e))
            raise
        except Exception as e:
            logger.error("ledger_persist_failed", key=self.storage_key, error=str(e))
            raise PersistenceWriteError(f"Failed to persist ledger: {e}") from e

        logger.debug("ledger_persisted", key=self.storage_key, count=len(self._entries))

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def add(
        self,
        description: Any,
        amount: Any,
        kind: Union[EntryKind, str],
    ) -> Entry:
        """
        Record a new entry at the end of the ledger.

        Args:
            description: Non-empty after trimming
            amount: Positive finite number, or a string that parses to one
            kind: "income" or "expense"

        Returns:
            The recorded entry

        Raises:
            EntryValidationError: If any input is invalid (ledger unchanged)
            PersistenceWriteError: If the flush to storage failed
        """
        result = self._validator.validate(description, amount, kind)
        if not result.is_valid:
            logger.warning(
                "entry_rejected",
                issues=[issue.model_dump() for issue in result.issues],
            )
            raise EntryValidationError(issues=result.issues)

        entry = Entry.from_draft(self._ids.next_id(), result.draft)
        self._entries = self._entries + [entry]

        logger.info("entry_added", entry_id=entry.id, kind=entry.kind.value)
        self._persist()
        return entry

    def delete(self, entry_id: int) -> None:
        """
        Remove the entry with this id, if there is one.

        Storage is flushed either way.
        """
        remaining = [entry for entry in self._entries if entry.id != entry_id]
        removed = len(remaining) != len(self._entries)
        self._entries = remaining

        logger.info("entry_deleted", entry_id=entry_id, removed=removed)
        self._persist()

    # -------------------------------------------------------------------------
    # Derived state
    # -------------------------------------------------------------------------

    def totals(self) -> LedgerTotals:
        """Income, expense and balance over the whole ledger."""
        income_total = sum(
            (entry.amount for entry in self._entries if entry.is_income),
            Decimal(0),
        )
        expense_total = sum(
            (entry.amount for entry in self._entries if not entry.is_income),
            Decimal(0),
        )
        return LedgerTotals(
            income_total=income_total,
            expense_total=expense_total,
            balance=income_total - expense_total,
        )

    # -------------------------------------------------------------------------
    # Export
    # -------------------------------------------------------------------------

    def export_json(self) -> str:
        return entries_to_json(self._entries, indent=self._ledger_settings.json_indent)

    def export_csv(self) -> Optional[str]:
        """CSV history, or None when the ledger is empty."""
        return entries_to_csv(self._entries)

    def export_to_file(
        self,
        fmt: Union[ExportFormat, str],
        directory: Optional[Union[str, Path]] = None,
    ) -> Optional[Path]:
        """
        Write an export into a directory.

        Returns:
            Path of the written file, or None if there was nothing to write
            (CSV export of an empty ledger)
        """
        fmt = ExportFormat(fmt)
        target_dir = Path(directory) if directory is not None else self._export_settings.directory

        if fmt == ExportFormat.JSON:
            content = self.export_json()
            filename = self._export_settings.json_filename
        else:
            content = self.export_csv()
            filename = self._export_settings.csv_filename

        if content is None:
            logger.info("ledger_export_skipped", format=fmt.value, reason="empty")
            return None

        path = write_export_file(content, target_dir / filename)
        logger.info("ledger_exported", format=fmt.value, path=str(path))
        return path


def create_ledger_store(
    storage: Optional[KeyValueStore] = None,
    settings: Optional[Settings] = None,
) -> LedgerStore:
    """
    Factory function to build a loaded ledger store.

    When no storage is given, a JSON file store is created at the
    configured path.
    """
    settings = settings or get_settings()
    if storage is None:
        storage = JsonFileKeyValueStore(settings.storage.path)

    store = LedgerStore(storage, settings=settings)
    store.load()
    return store
