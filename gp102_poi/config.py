"""Application configuration"""
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings from environment variables (GP102_POI_*) or .env"""

    # Logging
    log_level: str = "WARNING"
    log_file: Optional[str] = None
    log_max_bytes: int = 10 * 1024 * 1024
    log_backup_count: int = 5
    log_json_format: bool = False
    console_format: str = "%(message)s"

    model_config = SettingsConfigDict(
        env_prefix="GP102_POI_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
