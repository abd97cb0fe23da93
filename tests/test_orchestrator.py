"""Integration tests for the controller."""

import json

import pytest
from structlog.testing import capture_logs

from fintrack.config import get_settings
from fintrack.models import Mode, default_state
from fintrack.orchestrator import FinanceController, create_app_components
from fintrack.services.storage import InMemoryStore, LocalFileStore, StateRepository
from fintrack.state import commands


def make_controller(store):
    return FinanceController(StateRepository(store))


class TestStart:
    """Tests for loading at startup."""

    @pytest.mark.asyncio
    async def test_empty_store_seeds(self):
        controller = make_controller(InMemoryStore())
        state = await controller.start()
        assert state == default_state()
        assert controller.started

    @pytest.mark.asyncio
    async def test_loads_stored_document(self):
        stored = commands.rename_current_user(default_state(), "Jo")
        controller = make_controller(InMemoryStore({"fintrack_v2": stored.to_json()}))
        await controller.start()
        assert controller.state.user_by_id("u1").name == "Jo"

    @pytest.mark.asyncio
    async def test_unreadable_store_seeds(self):
        controller = make_controller(InMemoryStore(fail_reads=True))
        assert await controller.start() == default_state()

    @pytest.mark.asyncio
    async def test_corrupt_document_seeds_and_logs(self):
        controller = make_controller(InMemoryStore({"fintrack_v2": "{"}))
        with capture_logs() as logs:
            await controller.start()
        assert controller.state == default_state()
        events = [e["event"] for e in logs]
        assert "state_load_failed" in events
        loaded = next(e for e in logs if e["event"] == "state_loaded")
        assert loaded["source"] == "seed_after_error"

    @pytest.mark.asyncio
    async def test_undecodable_file_seeds(self, tmp_path):
        (tmp_path / "fintrack_v2.json").write_bytes(b"\xff\xfe{not utf8")
        controller = FinanceController(StateRepository(LocalFileStore(tmp_path)))
        with capture_logs() as logs:
            state = await controller.start()
        assert state == default_state()
        assert any(e["event"] == "state_load_failed" for e in logs)

    @pytest.mark.asyncio
    async def test_amount_too_large_for_cents_seeds(self):
        doc = default_state().to_document()
        doc["accounts"][0]["balance"] = 1e30
        controller = make_controller(InMemoryStore({"fintrack_v2": json.dumps(doc)}))
        assert await controller.start() == default_state()


class TestApply:
    """Tests for running commands."""

    @pytest.mark.asyncio
    async def test_apply_saves_new_snapshot(self):
        store = InMemoryStore()
        controller = make_controller(store)
        await controller.start()
        await controller.apply(commands.add_to_pot, "p2", 100)
        saved = json.loads(await store.get("fintrack_v2"))
        assert saved["pots"][1]["current"] == 900.0
        assert store.write_count == 1

    @pytest.mark.asyncio
    async def test_noop_command_does_not_save(self):
        store = InMemoryStore()
        controller = make_controller(store)
        await controller.start()
        await controller.apply(commands.delete_user, "u1")
        assert store.write_count == 0

    @pytest.mark.asyncio
    async def test_save_failure_keeps_memory_state(self):
        store = InMemoryStore(fail_writes=True)
        controller = make_controller(store)
        with capture_logs() as logs:
            await controller.start()
            state = await controller.apply(commands.delete_transaction, "t1")
        assert len(state.transactions) == 4
        assert controller.state is state
        assert any(e["event"] == "state_save_failed" for e in logs)

    @pytest.mark.asyncio
    async def test_next_save_writes_everything(self):
        store = InMemoryStore(fail_writes=True)
        controller = make_controller(store)
        await controller.start()
        await controller.apply(commands.delete_transaction, "t1")
        store.fail_writes = False
        await controller.apply(commands.delete_transaction, "t2")
        saved = json.loads(await store.get("fintrack_v2"))
        assert [t["id"] for t in saved["transactions"]] == ["t3", "t4", "t5"]

    @pytest.mark.asyncio
    async def test_summary_follows_state(self):
        controller = make_controller(InMemoryStore())
        await controller.start()
        await controller.apply(commands.delete_account, "a5")
        assert controller.summary(Mode.BUSINESS).account_count == 0


class TestResetAndExport:
    """Tests for reset and JSON export."""

    @pytest.mark.asyncio
    async def test_reset_restores_seed(self):
        store = InMemoryStore()
        controller = make_controller(store)
        await controller.start()
        await controller.apply(commands.delete_pot, "p1")
        await controller.reset()
        assert controller.state == default_state()
        assert json.loads(await store.get("fintrack_v2"))["pots"][0]["id"] == "p1"

    @pytest.mark.asyncio
    async def test_export_is_pretty_camel_case(self):
        controller = make_controller(InMemoryStore())
        await controller.start()
        exported = controller.export_json()
        assert exported.startswith("{\n  ")
        assert json.loads(exported)["currentUser"] == "u1"

    def test_backup_filename(self):
        assert make_controller(InMemoryStore()).backup_filename == "fintrack-backup.json"


class TestFactory:
    """Tests for create_app_components."""

    @pytest.mark.asyncio
    async def test_uses_configured_directory(self, tmp_path):
        controller = create_app_components()
        await controller.start()
        await controller.apply(commands.rename_current_user, "Jo")
        assert (tmp_path / "data" / "fintrack_v2.json").exists()

    @pytest.mark.asyncio
    async def test_custom_key_and_store(self, monkeypatch):
        monkeypatch.setenv("FINTRACK_STORAGE_STATE_KEY", "other")
        get_settings.cache_clear()
        store = InMemoryStore()
        controller = create_app_components(store=store)
        await controller.start()
        await controller.reset()
        assert await store.get("other") is not None

    @pytest.mark.asyncio
    async def test_logs_carry_environment(self, monkeypatch):
        monkeypatch.setenv("APP_ENVIRONMENT", "staging")
        get_settings.cache_clear()
        controller = create_app_components(store=InMemoryStore())
        with capture_logs() as logs:
            await controller.start()
        loaded = next(e for e in logs if e["event"] == "state_loaded")
        assert loaded["environment"] == "staging"

    @pytest.mark.asyncio
    async def test_survives_restart(self, tmp_path):
        first = FinanceController(StateRepository(LocalFileStore(tmp_path)))
        await first.start()
        await first.apply(commands.update_preferences, currency="€")

        second = FinanceController(StateRepository(LocalFileStore(tmp_path)))
        await second.start()
        assert second.state.settings.currency == "€"
