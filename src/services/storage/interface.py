"""
Abstract Key-Value Storage Interface

DESIGN DECISION: The ledger only ever needs an opaque string slot addressed
by name. We define that contract here so that:
1. A browser-style localStorage file can back the ledger in normal use
2. In-memory storage can back it in tests
3. Any other backend can be swapped in without touching the ledger

The interface is intentionally tiny: get and set, nothing else.
"""

from abc import ABC, abstractmethod
from typing import Optional


class KeyValueStore(ABC):
    """
    Abstract interface for string key-value storage.

    Implementations are synchronous and treated as always available.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """
        Read the value stored under a key.

        Args:
            key: Slot name

        Returns:
            The stored string, or None if nothing is stored

        Raises:
            StorageError: If the backend cannot be read
        """
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """
        Replace the value stored under a key.

        Args:
            key: Slot name
            value: String to store

        Raises:
            PersistenceWriteError: If the value could not be written
        """
        pass


class StorageError(Exception):
    """Base exception for storage operations."""
    pass


class PersistenceLoadError(StorageError):
    """Stored data exists but could not be decoded."""
    pass


class PersistenceWriteError(StorageError):
    """Data could not be written to storage."""
    pass
