"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    flagbuilder_env: str = "development"
    flagbuilder_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:5173"]

    # Geometry requests
    default_scale: float = 100.0
    max_scale: float = 10000.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
