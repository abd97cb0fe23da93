"""Services package."""

from fintrack.services.storage import (
    CorruptStateError,
    InMemoryStore,
    KeyValueStoreInterface,
    LocalFileStore,
    StateRepository,
    StorageError,
    StoreUnavailableError,
)

__all__ = [
    "CorruptStateError",
    "InMemoryStore",
    "KeyValueStoreInterface",
    "LocalFileStore",
    "StateRepository",
    "StorageError",
    "StoreUnavailableError",
]
