# File: backend/app/core/config.py
# Version: v0.4.0
"""
Centralized application settings using Pydantic Settings.

Controls:
- App metadata and API prefix
- CORS origins
- Database URL (SQLAlchemy) and dev-only SQLite schema auto-heal
- Logging level
- Name of the request header that identifies the record owner
"""
from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # --- App ---
    API_PREFIX: str = "/api"
    APP_NAME: str = "BioTool"
    APP_VERSION: str = "0.4.0"

    # --- CORS ---
    CORS_ORIGINS: str = "*"  # comma-separated or '*' for all

    # --- DB ---
    DB_URL: str = "sqlite:///backend/app/data/biotool.db"
    SCHEMA_AUTOHEAL: bool = True  # only honoured for SQLite

    # --- Logging ---
    LOG_LEVEL: str = "info"

    # --- Owner identification ---
    USER_HEADER: str = "X-User"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @property
    def cors_origins_list(self) -> list[str]:
        raw = self.CORS_ORIGINS.strip()
        if raw == "*":
            return ["*"]
        return [o.strip() for o in raw.split(",") if o.strip()]

settings = Settings()
