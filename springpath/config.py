"""Process configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    springpath_env: str = "development"
    springpath_log_level: str = "info"

    # Thread pool size for the per-row fan-out; 1 keeps it sequential
    springpath_max_workers: int = 1

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
