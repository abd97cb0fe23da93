"""Tests for settings and logging setup."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from fintrack.config import AppSettings, StorageSettings, get_settings, validate_all_settings
from fintrack.logs import configure_logging, get_logger


class TestSettings:
    """Tests for pydantic-settings configuration."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("FINTRACK_STORAGE_DATA_DIR")
        storage = StorageSettings(_env_file=None)
        assert storage.data_dir == Path(".fintrack")
        assert storage.state_key == "fintrack_v2"
        assert storage.backup_filename == "fintrack-backup.json"

        app = AppSettings(_env_file=None)
        assert app.csv_preview_rows == 10
        assert app.default_projection_months == 36
        assert app.default_mode == "personal"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("FINTRACK_STORAGE_STATE_KEY", "fintrack_test")
        assert StorageSettings(_env_file=None).state_key == "fintrack_test"

    def test_state_key_cannot_be_a_path(self):
        with pytest.raises(ValidationError):
            StorageSettings(_env_file=None, state_key="../escape")

    def test_log_level_normalized(self):
        assert AppSettings(_env_file=None, log_level="debug").log_level == "DEBUG"

    def test_debug_mode_forces_debug_level(self, monkeypatch):
        monkeypatch.setenv("DEBUG_MODE", "true")
        app = AppSettings(_env_file=None, log_level="WARNING")
        assert app.debug_mode is True
        assert app.effective_log_level == "DEBUG"
        assert AppSettings(_env_file=None, log_level="WARNING", debug_mode=False).effective_log_level == "WARNING"

    def test_log_level_rejected(self):
        with pytest.raises(ValidationError):
            AppSettings(_env_file=None, log_level="LOUD")

    def test_mode_pattern(self):
        with pytest.raises(ValidationError):
            AppSettings(_env_file=None, default_mode="family")

    def test_preview_rows_bounds(self):
        with pytest.raises(ValidationError):
            AppSettings(_env_file=None, csv_preview_rows=0)

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    def test_validate_all_settings(self):
        assert validate_all_settings() == {"storage": True, "app": True}

    def test_validate_all_settings_reports_errors(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "LOUD")
        results = validate_all_settings()
        assert results["app"] is False
        assert "app_error" in results


class TestLogging:
    """Tests for structlog setup."""

    def test_configure_and_log(self, capsys):
        configure_logging(level="INFO", json_output=True, force=True)
        get_logger("fintrack.test").info("hello", answer=42)
        err = capsys.readouterr().err
        assert '"event": "hello"' in err
        assert '"answer": 42' in err

    def test_repeat_configure_is_noop(self):
        configure_logging(level="INFO", json_output=True, force=True)
        configure_logging(level="DEBUG", json_output=False)
        assert get_logger("x") is not None
