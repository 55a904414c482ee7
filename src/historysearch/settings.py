"""Application settings using pydantic-settings."""

import logging
import os
import sys
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_SETTINGS_LOGGER = logging.getLogger("historysearch.settings")


class Settings(BaseSettings):
    """Application settings."""

    # History source
    history_path: Path | None = None
    profile: str = "Default"
    snapshot_dir: Path | None = None

    # Query
    default_limit: int = Field(default=100, ge=1)

    # Application
    app_name: str = "chrome-history-search"
    debug: bool = False
    log_level: str = "WARNING"

    model_config = SettingsConfigDict(
        env_prefix="CHROME_HISTORY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> str:
        """Upper-case the level and reject names logging does not know."""
        level = str(v).strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level: {v}")
        return level

    @field_validator("history_path", "snapshot_dir", mode="before")
    @classmethod
    def expand_user(cls, v: Any) -> Any:
        """Expand ~ in configured paths; treat empty strings as unset."""
        if v is None or v == "":
            return None
        return Path(v).expanduser()

    def default_history_path(self) -> Path:
        """Return the platform's default History location for the profile."""
        home = Path.home()
        if sys.platform == "darwin":
            base = home / "Library" / "Application Support" / "Google" / "Chrome"
        elif sys.platform == "win32":
            local_app_data = os.environ.get("LOCALAPPDATA")
            root = Path(local_app_data) if local_app_data else home / "AppData" / "Local"
            base = root / "Google" / "Chrome" / "User Data"
        else:
            base = home / ".config" / "google-chrome"
        return base / self.profile / "History"

    def resolve_history_path(self) -> Path:
        """Return the configured History path, falling back to the default."""
        if self.history_path is not None:
            return self.history_path
        path = self.default_history_path()
        _SETTINGS_LOGGER.debug("No history_path configured, using %s", path)
        return path


@lru_cache()
def get_settings() -> Settings:
    """Get settings instance (cached)."""
    return Settings()
