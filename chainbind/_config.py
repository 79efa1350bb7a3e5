"""Runtime settings, read from CHAINBIND_* environment variables or `.env`."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CHAINBIND_",
        env_file=".env",
        extra="ignore",
    )

    # Logging
    log_level: str = "WARNING"
    log_json: bool = False  # True for JSON lines, False for colored console

    # Emit a debug event per bind step and on short-circuit
    trace: bool = False


@lru_cache
def get_settings() -> Settings:
    return Settings()


__all__ = ("Settings", "get_settings")
