"""
Storage Services Package

Provides the abstract key-value interface and concrete implementations.
The JSON file backend is the default, but any KeyValueStore can be used.
"""

from src.services.storage.interface import (
    KeyValueStore,
    PersistenceLoadError,
    PersistenceWriteError,
    StorageError,
)
from src.services.storage.json_file import JsonFileKeyValueStore
from src.services.storage.memory import InMemoryKeyValueStore

__all__ = [
    # Interface
    "KeyValueStore",
    # Exceptions
    "PersistenceLoadError",
    "PersistenceWriteError",
    "StorageError",
    # Implementations
    "InMemoryKeyValueStore",
    "JsonFileKeyValueStore",
]
