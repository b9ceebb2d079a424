"""
JSON File Storage Implementation

DESIGN DECISION: A single JSON file is used as the default backend because:
1. It behaves like a browser's localStorage (named string slots)
2. No database setup required
3. Users can open and back up the file directly

TRADEOFFS:
- Every write rewrites the whole file (fine for a personal ledger)
- No locking between processes (the ledger is single-user, single-process)

The file holds one JSON object mapping slot names to strings. Writes go to
a temporary file in the same directory which then replaces the original,
so a crash mid-write never leaves a truncated file behind.
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Optional, Union

from src.logs import get_logger
from src.services.storage.interface import (
    KeyValueStore,
    PersistenceWriteError,
    StorageError,
)


logger = get_logger(__name__)


class JsonFileKeyValueStore(KeyValueStore):
    """
    File-backed implementation of key-value storage.

    A missing file reads as an empty store; it is created on first write.
    """

    def __init__(self, path: Union[str, Path]):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _read_all(self) -> dict[str, str]:
        """Load every slot from disk."""
        try:
            raw = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except OSError as e:
            raise StorageError(f"Failed to read storage file {self._path}: {e}")

        if not raw.strip():
            return {}

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise StorageError(f"Storage file {self._path} is not valid JSON: {e}")

        if not isinstance(data, dict):
            raise StorageError(f"Storage file {self._path} does not hold a JSON object")

        # Non-string slots were not written by us; ignore them
        return {k: v for k, v in data.items() if isinstance(v, str)}

    def get(self, key: str) -> Optional[str]:
        """Read one slot."""
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        """Replace one slot, keeping all others."""
        try:
            data = self._read_all()
        except StorageError as e:
            # Other slots in an unreadable file are lost; say so before writing
            logger.warning(
                "storage_file_unreadable_overwritten",
                path=str(self._path),
                key=key,
                reason=str(e),
            )
            data = {}
        data[key] = value

        directory = self._path.parent
        tmp_name = None
        try:
            directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=directory,
                prefix=f".{self._path.name}.",
                suffix=".tmp",
            )
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(data, fh, ensure_ascii=False)
            os.replace(tmp_name, self._path)
            tmp_name = None
        except OSError as e:
            raise PersistenceWriteError(f"Failed to write storage file {self._path}: {e}")
        finally:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
