"""
Abstract Storage Interface

DESIGN DECISION: The application stores exactly one opaque JSON document
under one fixed key. The interface is therefore a plain async key-value
store. This allows us to:
1. Keep state in a local file for the dashboard
2. Use in-memory storage for testing
3. Swap the backend later without touching business logic

Implementations RAISE on failure. Whether a failure is ignored, logged or
shown is decided by the caller (see fintrack.orchestrator).
"""

from abc import ABC, abstractmethod
from typing import Optional


class KeyValueStoreInterface(ABC):
    """
    Abstract interface for key-value storage.

    Values are strings; the store never inspects them.
    """

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """
        Read the value stored under a key.

        Args:
            key: The storage key

        Returns:
            The stored string, or None if nothing is stored under the key

        Raises:
            StoreUnavailableError: If the backend cannot be read
            CorruptStateError: If the stored bytes are not text
        """
        pass

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        """
        Store a value under a key, replacing any previous value.

        Args:
            key: The storage key
            value: The string to store

        Raises:
            StoreUnavailableError: If the backend cannot be written
        """
        pass

    @abstractmethod
    async def delete(self, key: str) -> bool:
        """
        Remove a key.

        Returns:
            True if something was removed
        """
        pass


class StorageError(Exception):
    """Base exception for storage operations."""
    pass


class StoreUnavailableError(StorageError):
    """The storage backend could not be read or written."""
    pass


class CorruptStateError(StorageError):
    """The stored value is not a valid FinTrack document."""
    pass
