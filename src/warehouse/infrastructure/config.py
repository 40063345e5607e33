"""Runtime settings, read from ``WAREHOUSE_*`` environment variables or ``.env``."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

DEFAULT_DATABASE_URL = f"sqlite:///{_DATA_DIR / 'warehouse.db'}"


class Settings(BaseSettings):
    database_url: str = Field(default=DEFAULT_DATABASE_URL)
    pairing_workers: int = Field(default=4, ge=1)
    pairing_max_attempts: int = Field(default=5, ge=1)
    log_level: str = Field(default="WARNING")

    model_config = SettingsConfigDict(
        env_prefix="WAREHOUSE_", env_file=".env", extra="ignore", frozen=True
    )

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()
