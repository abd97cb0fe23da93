"""
Configuration Management for FinTrack

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here.
The storage location, logging output and the starting values of the
dashboard controls are all read from the environment (or a .env file)
and validated at startup.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageSettings(BaseSettings):
    """Local key-value store configuration."""

    model_config = SettingsConfigDict(
        env_prefix="FINTRACK_STORAGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    data_dir: Path = Field(
        default=Path(".fintrack"),
        description="Directory holding one JSON file per stored key"
    )
    state_key: str = Field(
        default="fintrack_v2",
        min_length=1,
        description="Key the root document is stored under"
    )
    backup_filename: str = Field(
        default="fintrack-backup.json",
        description="File name offered for the JSON export"
    )

    @field_validator('state_key')
    @classmethod
    def validate_state_key(cls, v: str) -> str:
        """Keys become file names, so path separators are not allowed."""
        if "/" in v or "\\" in v or v in {".", ".."}:
            raise ValueError(f"Invalid state key: {v!r}")
        return v


class AppSettings(BaseSettings):
    """
    Main application settings.

    Loads configuration from environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Environment
    app_environment: str = Field(
        default="development",
        description="Application environment"
    )
    debug_mode: bool = Field(
        default=False,
        description="Enable debug mode (forces DEBUG logging)"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Minimum log level"
    )
    log_json: bool = Field(
        default=True,
        description="Render logs as JSON lines (console rendering otherwise)"
    )

    # Dashboard defaults
    default_mode: str = Field(
        default="personal",
        pattern="^(personal|business)$",
        description="Mode selected when the dashboard opens"
    )
    csv_preview_rows: int = Field(
        default=10,
        ge=1,
        le=100,
        description="Data rows shown in the CSV import preview"
    )
    default_projection_months: int = Field(
        default=36,
        ge=6,
        le=360,
        description="Initial horizon of the projections view"
    )
    default_monthly_contribution: float = Field(
        default=500.0,
        ge=0.0,
        description="Initial monthly contribution of the projections view"
    )
    default_growth_rate: float = Field(
        default=5.0,
        ge=0.0,
        le=20.0,
        description="Initial annual growth rate of the projections view"
    )
    default_pension_horizon: int = Field(
        default=20,
        ge=5,
        le=40,
        description="Initial horizon (years) of the pension view"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def effective_log_level(self) -> str:
        """Debug mode forces DEBUG whatever ``log_level`` says."""
        return "DEBUG" if self.debug_mode else self.log_level


class Settings(BaseSettings):
    """
    Root settings container.

    Aggregates all sub-settings for easy access.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @property
    def storage(self) -> StorageSettings:
        return StorageSettings()

    @property
    def app(self) -> AppSettings:
        return AppSettings()


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()


def validate_all_settings() -> dict[str, bool]:
    """
    Validate all settings are properly configured.

    Returns a dict of {setting_name: is_valid}, plus
    {setting_name}_error entries for the groups that failed.
    """
    results = {}

    settings = get_settings()

    try:
        _ = settings.storage
        results["storage"] = True
    except Exception as e:
        results["storage"] = False
        results["storage_error"] = str(e)

    try:
        _ = settings.app
        results["app"] = True
    except Exception as e:
        results["app"] = False
        results["app_error"] = str(e)

    return results
