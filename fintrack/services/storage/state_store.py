"""
Root Document Repository

Serializes the FinanceState snapshot to and from the key-value store.

The schema version lives in the key name only (``fintrack_v2``); there is
no migration logic. A document that no longer parses is reported as
CorruptStateError and left untouched in the store.
"""

from typing import Optional

import structlog
from pydantic import ValidationError

from fintrack.config import get_settings
from fintrack.models.finance import FinanceState
from fintrack.services.storage.interface import (
    CorruptStateError,
    KeyValueStoreInterface,
)


class StateRepository:
    """Loads and saves the root document under one fixed key."""

    def __init__(
        self,
        store: KeyValueStoreInterface,
        state_key: Optional[str] = None,
    ):
        self._store = store
        self._key = state_key or get_settings().storage.state_key
        self._logger = structlog.get_logger(__name__)

    @property
    def key(self) -> str:
        return self._key

    async def load(self) -> Optional[FinanceState]:
        """
        Load the stored document.

        Returns:
            The stored state, or None if nothing has been saved yet

        Raises:
            StoreUnavailableError: If the store cannot be read
            CorruptStateError: If the stored value is not a valid document
        """
        raw = await self._store.get(self._key)
        if raw is None:
            return None
        try:
            return FinanceState.model_validate_json(raw)
        except ValidationError as e:
            raise CorruptStateError(
                f"Stored document under {self._key} is invalid: {e.error_count()} error(s)"
            ) from e

    async def save(self, state: FinanceState) -> None:
        """
        Replace the stored document.

        Raises:
            StoreUnavailableError: If the store cannot be written
        """
        await self._store.set(self._key, state.to_json())
        self._logger.debug(
            "state_saved",
            key=self._key,
            accounts=len(state.accounts),
            transactions=len(state.transactions),
        )

    async def clear(self) -> bool:
        return await self._store.delete(self._key)
