"""In-memory key-value store, for tests and throwaway sessions."""

from typing import Optional

from fintrack.services.storage.interface import (
    KeyValueStoreInterface,
    StoreUnavailableError,
)


class InMemoryStore(KeyValueStoreInterface):
    """
    Dict-backed store.

    ``fail_reads`` / ``fail_writes`` make the store raise
    StoreUnavailableError, to exercise the callers' failure handling.
    """

    def __init__(
        self,
        initial: Optional[dict[str, str]] = None,
        fail_reads: bool = False,
        fail_writes: bool = False,
    ):
        self._data: dict[str, str] = dict(initial or {})
        self.fail_reads = fail_reads
        self.fail_writes = fail_writes
        self.write_count = 0

    async def get(self, key: str) -> Optional[str]:
        if self.fail_reads:
            raise StoreUnavailableError(f"Failed to read {key}: store offline")
        return self._data.get(key)

    async def set(self, key: str, value: str) -> None:
        if self.fail_writes:
            raise StoreUnavailableError(f"Failed to write {key}: store offline")
        self._data[key] = value
        self.write_count += 1

    async def delete(self, key: str) -> bool:
        return self._data.pop(key, None) is not None
