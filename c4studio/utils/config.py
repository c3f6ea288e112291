"""Application configuration."""
from __future__ import annotations

from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings loaded from .env and environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    autosave_dir: str = "autosave"
    autosave_key: str = "architecture-model"
    storage_backend: Literal["file", "sql"] = "file"
    database_url: str = Field(
        default="sqlite:///c4studio.db",
        validation_alias=AliasChoices("DATABASE_URL", "C4STUDIO_DATABASE_URL"),
    )
    layout_algorithm: str = "deterministic-v1"
    layout_spacing: float = 150
    layout_padding: float = 50
    log_level: str = "INFO"


settings = Settings()
