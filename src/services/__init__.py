"""Services package."""

from src.services.storage import (
    InMemoryKeyValueStore,
    JsonFileKeyValueStore,
    KeyValueStore,
    PersistenceLoadError,
    PersistenceWriteError,
    StorageError,
)

__all__ = [
    # Storage services
    "InMemoryKeyValueStore",
    "JsonFileKeyValueStore",
    "KeyValueStore",
    "PersistenceLoadError",
    "PersistenceWriteError",
    "StorageError",
]
