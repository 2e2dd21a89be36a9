"""Application settings using pydantic-settings."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class Settings(BaseSettings):
    """Settings loaded from MODCORE_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="MODCORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Directory holding one config database per registered mod
    config_dir: Path = Path("config")

    # Logging
    log_level: LogLevel = "INFO"
    debug: bool = False  # Echo SQL issued by the config backend

    def config_path(self, mod_id: str) -> Path:
        """Get the config file path for a mod."""
        return self.config_dir / f"{mod_id}.cfg.db"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
