"""Settings Manager - Handles endpoint, logging, and storage configuration."""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from pocket_translator.services.translation import DEFAULT_API_URL

DEFAULT_LOG_LEVEL = "INFO"


class SettingsManager:
    """
    Manages application configuration.

    Reads values from a .env file in the project root and the process
    environment. Environment variables already set take precedence until
    reload_env() is called.
    """

    def __init__(self, project_root: Optional[Path] = None):
        """
        Initialize settings manager.

        Args:
            project_root: Path to project root where .env is located.
                         If None, searches upward from current file.
        """
        if project_root is None:
            current = Path(__file__).resolve()
            project_root = current.parent.parent.parent.parent

        env_path = project_root / ".env"
        load_dotenv(dotenv_path=env_path)

        self._project_root = project_root

    def get_api_url(self) -> str:
        """Translation endpoint, overridable through TRANSLATOR_API_URL."""
        url = os.getenv("TRANSLATOR_API_URL")
        return url.strip() if url and url.strip() else DEFAULT_API_URL

    def get_log_level(self) -> int:
        """Logging level from TRANSLATOR_LOG_LEVEL, INFO when unset or unknown."""
        name = (os.getenv("TRANSLATOR_LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper()
        level = logging.getLevelName(name)
        return level if isinstance(level, int) else logging.INFO

    def get_settings_file(self) -> Optional[Path]:
        """Optional INI file for persisted settings (TRANSLATOR_SETTINGS_FILE)."""
        path = os.getenv("TRANSLATOR_SETTINGS_FILE")
        return Path(path.strip()).expanduser() if path and path.strip() else None

    def reload_env(self) -> None:
        """Reload environment variables from .env file."""
        env_path = self._project_root / ".env"
        load_dotenv(dotenv_path=env_path, override=True)
