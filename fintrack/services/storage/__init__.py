"""
Storage Services Package

Provides the abstract key-value interface, a local file implementation,
an in-memory implementation for tests, and the root document repository.
"""

from fintrack.services.storage.interface import (
    CorruptStateError,
    KeyValueStoreInterface,
    StorageError,
    StoreUnavailableError,
)
from fintrack.services.storage.local_file import LocalFileStore
from fintrack.services.storage.memory import InMemoryStore
from fintrack.services.storage.state_store import StateRepository

__all__ = [
    # Interfaces
    "KeyValueStoreInterface",
    # Exceptions
    "CorruptStateError",
    "StorageError",
    "StoreUnavailableError",
    # Implementations
    "InMemoryStore",
    "LocalFileStore",
    "StateRepository",
]
