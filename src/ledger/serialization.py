"""
Ledger Serialization

One JSON shape is used both for the persisted slot and for the JSON
export: an array of ``{id, description, amount, kind}`` objects in
insertion order. Persistence writes it compactly; the export indents it.

Decoding checks shape only. Records are adopted as stored, with no input
rules re-applied, and fractional amounts are read straight into Decimal
so no precision is lost on the way in.
"""

import json
from decimal import Decimal
from typing import Any, Iterable, Optional

from pydantic import TypeAdapter, ValidationError

from src.models.entry import Entry, amount_to_number
from src.services.storage import PersistenceLoadError


_ENTRY_LIST = TypeAdapter(list[Entry])


def entry_to_record(entry: Entry) -> dict[str, Any]:
    """Convert an entry to a plain JSON-ready dict."""
    return {
        "id": entry.id,
        "description": entry.description,
        "amount": amount_to_number(entry.amount),
        "kind": entry.kind.value,
    }


def encode_entries(entries: Iterable[Entry], indent: Optional[int] = None) -> str:
    """
    Serialize entries to JSON text.

    Args:
        entries: Entries in the order they should appear
        indent: None for compact output, otherwise spaces per level
    """
    records = [entry_to_record(entry) for entry in entries]
    if indent is None:
        return json.dumps(records, ensure_ascii=False, separators=(",", ":"))
    return json.dumps(records, ensure_ascii=False, indent=indent)


def decode_entries(raw: str) -> list[Entry]:
    """
    Parse JSON text into entries.

    Raises:
        PersistenceLoadError: If the text is not an array of entry-shaped records
    """
    try:
        data = json.loads(raw, parse_float=Decimal)
    except json.JSONDecodeError as e:
        raise PersistenceLoadError(f"Stored ledger is not valid JSON: {e}") from e

    try:
        return _ENTRY_LIST.validate_python(data)
    except ValidationError as e:
        raise PersistenceLoadError(
            f"Stored ledger is not a list of entries ({e.error_count()} errors)"
        ) from e
