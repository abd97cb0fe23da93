"""
Main Orchestrator for FinTrack

Ties the pure layers (models, commands, queries) to the key-value store.

DESIGN DECISION: The controller enforces the boundaries:
- It is the only owner of the current snapshot
- Every change goes through a pure command and is then saved whole
- Storage failures are logged and never reach the UI

The in-memory snapshot is authoritative. If a save fails the user keeps
working on it; the next successful save writes everything.
"""

from typing import Any, Callable, Optional

import structlog

from fintrack.config import Settings, get_settings
from fintrack.logs import configure_logging, get_logger
from fintrack.models.finance import FinanceState, Mode
from fintrack.models.reports import DashboardSummary, TransactionFilter
from fintrack.models.seed import default_state
from fintrack.queries import dashboard_summary
from fintrack.services.storage import (
    KeyValueStoreInterface,
    LocalFileStore,
    StateRepository,
    StorageError,
)


Command = Callable[..., FinanceState]


class FinanceController:
    """
    Owns the current FinanceState and persists it after every change.

    Flow:
    1. start()  - load the stored document, or seed on first run / failure
    2. apply()  - run a command, swap in the new snapshot, save it
    3. reset()  - replace everything with the seed and save
    """

    def __init__(
        self,
        repository: StateRepository,
        backup_filename: str = "fintrack-backup.json",
        logger: Optional[structlog.stdlib.BoundLogger] = None,
    ):
        self._repository = repository
        self._backup_filename = backup_filename
        self._logger = logger or get_logger(__name__)
        self._state = default_state()
        self._started = False

    @property
    def state(self) -> FinanceState:
        return self._state

    @property
    def started(self) -> bool:
        return self._started

    @property
    def backup_filename(self) -> str:
        return self._backup_filename

    async def start(self) -> FinanceState:
        """
        Load the stored document.

        Missing, unreadable and corrupt documents all fall back to the
        seed; the difference only shows in the logs.
        """
        try:
            stored = await self._repository.load()
        except StorageError as e:
            self._logger.warning(
                "state_load_failed",
                key=self._repository.key,
                error_type=type(e).__name__,
                error=str(e),
            )
            stored = None
            source = "seed_after_error"
        else:
            source = "store" if stored is not None else "seed"

        self._state = stored if stored is not None else default_state()
        self._started = True
        self._logger.info(
            "state_loaded",
            source=source,
            accounts=len(self._state.accounts),
            transactions=len(self._state.transactions),
        )
        return self._state

    async def _persist(self) -> bool:
        try:
            await self._repository.save(self._state)
            return True
        except StorageError as e:
            self._logger.error(
                "state_save_failed",
                key=self._repository.key,
                error_type=type(e).__name__,
                error=str(e),
            )
            return False

    async def apply(self, command: Command, *args: Any, **kwargs: Any) -> FinanceState:
        """
        Run ``command(state, *args, **kwargs)`` and save the result.

        A command that returns the same snapshot (unknown id, ignored
        amount) does not trigger a save.
        """
        new_state = command(self._state, *args, **kwargs)
        name = getattr(command, "__name__", repr(command))
        if new_state is self._state:
            self._logger.debug("command_noop", command=name)
            return self._state

        self._state = new_state
        saved = await self._persist()
        self._logger.info("command_applied", command=name, saved=saved)
        return self._state

    async def reset(self) -> FinanceState:
        """Replace the whole document with the seed."""
        self._state = default_state()
        saved = await self._persist()
        self._logger.info("state_reset", saved=saved)
        return self._state

    def export_json(self) -> str:
        """The whole document, pretty-printed, with its stored field names."""
        return self._state.to_json(indent=2)

    def summary(
        self,
        mode: Mode,
        criteria: Optional[TransactionFilter] = None,
    ) -> DashboardSummary:
        return dashboard_summary(self._state, mode, criteria)


def create_app_components(
    settings: Optional[Settings] = None,
    store: Optional[KeyValueStoreInterface] = None,
) -> FinanceController:
    """
    Factory function to create the application controller.

    Args:
        settings: Settings to build from. Defaults to get_settings().
        store: Key-value store to use. Defaults to a LocalFileStore in
               the configured data directory.

    Returns:
        An unstarted FinanceController; call ``await controller.start()``.
    """
    settings = settings or get_settings()
    app_settings = settings.app
    configure_logging(level=app_settings.effective_log_level, json_output=app_settings.log_json)
    logger = get_logger(__name__).bind(environment=app_settings.app_environment)

    storage_settings = settings.storage
    store = store or LocalFileStore(storage_settings.data_dir)
    repository = StateRepository(store, state_key=storage_settings.state_key)

    return FinanceController(
        repository,
        backup_filename=storage_settings.backup_filename,
        logger=logger,
    )
