"""
Configuration Management for the Expense Ledger

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here, and every field has a
default. The ledger runs with no environment at all; LEDGER_* variables or a
.env file only override the defaults.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LedgerSettings(BaseSettings):
    """Core ledger behaviour."""

    model_config = SettingsConfigDict(
        env_prefix="LEDGER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    storage_key: str = Field(
        default="transactions",
        min_length=1,
        description="Key the ledger is stored under in the key-value store"
    )
    json_indent: int = Field(
        default=2,
        ge=0,
        le=8,
        description="Indentation used by the JSON export"
    )


class StorageSettings(BaseSettings):
    """File-backed key-value store configuration."""

    model_config = SettingsConfigDict(
        env_prefix="LEDGER_STORAGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    path: Path = Field(
        default=Path("ledger_storage.json"),
        description="JSON file holding the key-value pairs"
    )


class ExportSettings(BaseSettings):
    """Where and under which names exports are written."""

    model_config = SettingsConfigDict(
        env_prefix="LEDGER_EXPORT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    directory: Path = Field(
        default=Path("."),
        description="Directory export files are written to"
    )
    json_filename: str = Field(
        default="transactions.json",
        description="File name for the JSON export"
    )
    csv_filename: str = Field(
        default="transactions.csv",
        description="File name for the CSV export"
    )

    @field_validator("json_filename", "csv_filename")
    @classmethod
    def validate_plain_filename(cls, v: str) -> str:
        """Export names must be bare file names, not paths."""
        if not v or Path(v).name != v:
            raise ValueError(f"Export file name must not contain a directory: {v!r}")
        return v


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
    def ledger(self) -> LedgerSettings:
        return LedgerSettings()

    @property
    def storage(self) -> StorageSettings:
        return StorageSettings()

    @property
    def export(self) -> ExportSettings:
        return ExportSettings()


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

    Returns a dict of {setting_name: is_valid}, plus a
    ``<setting_name>_error`` entry for each failure.
    """
    results = {}

    settings = get_settings()

    for name in ("ledger", "storage", "export"):
        try:
            getattr(settings, name)
            results[name] = True
        except Exception as e:
            results[name] = False
            results[f"{name}_error"] = str(e)

    return results
