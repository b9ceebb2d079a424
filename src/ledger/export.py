"""
History Export

JSON and CSV renderings of the ledger, plus writing them to disk.

The CSV format is deliberately minimal: no quoting and no escaping.
A description containing a comma or a newline yields a malformed row.
"""

from pathlib import Path
from typing import Iterable, Optional, Sequence

from src.ledger.serialization import encode_entries
from src.models.entry import Entry, format_amount


CSV_HEADER = "Description,Amount,Type"


def entries_to_json(entries: Iterable[Entry], indent: int = 2) -> str:
    """Pretty-printed JSON array; ``[]`` for no entries."""
    return encode_entries(entries, indent=indent)


def entries_to_csv(entries: Sequence[Entry]) -> Optional[str]:
    """
    CSV text with a header line, or None when there is nothing to export.

    Every line, the last included, ends with a newline.
    """
    if not entries:
        return None

    lines = [CSV_HEADER]
    for entry in entries:
        lines.append(
            f"{entry.description},{format_amount(entry.amount)},{entry.kind.value}"
        )
    return "\n".join(lines) + "\n"


def write_export_file(content: str, path: Path) -> Path:
    """Write export text to a file, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    # newline="" keeps "\n" line endings on every platform
    with open(path, "w", encoding="utf-8", newline="") as fh:
        fh.write(content)
    return path
