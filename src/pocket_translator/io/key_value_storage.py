"""Key-value storage abstraction - plugin interface for local settings."""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from PySide6.QtCore import QSettings

logger = logging.getLogger(__name__)


class KeyValueStorage(ABC):
    """
    Abstract interface for string-valued local settings.

    Implementations (QSettingsStorage, InMemoryKeyValueStorage) handle storage details.
    This lets the history store depend on an abstraction, not on Qt.
    """

    @abstractmethod
    def get_string(self, key: str, default: str = "") -> str:
        """
        Read a string value.

        Args:
            key: Setting name.
            default: Value returned when the key was never written.

        Returns:
            The stored string, or `default`.
        """
        pass

    @abstractmethod
    def set_string(self, key: str, value: str) -> None:
        """Write a string value, replacing any previous one."""
        pass

    @abstractmethod
    def sync(self) -> None:
        """Flush pending writes to the backing store."""
        pass


class InMemoryKeyValueStorage(KeyValueStorage):
    """
    Simple dict-backed storage.

    Used for testing. No persistence.
    """

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._store: dict[str, str] = dict(initial or {})

    def get_string(self, key: str, default: str = "") -> str:
        return self._store.get(key, default)

    def set_string(self, key: str, value: str) -> None:
        self._store[key] = value

    def sync(self) -> None:
        pass


class QSettingsStorage(KeyValueStorage):
    """
    Storage backed by QSettings.

    With no file path the platform's native per-user store is used, scoped to
    the given organization and application. With a file path an INI file is
    used instead, which keeps tests and portable installs self-contained.
    Every write is synced immediately.
    """

    def __init__(
        self,
        organization: str = "PocketTranslator",
        application: str = "Pocket Translator",
        file_path: Optional[Path] = None,
    ):
        if file_path is not None:
            self._settings = QSettings(str(file_path), QSettings.Format.IniFormat)
        else:
            self._settings = QSettings(organization, application)
        logger.debug("Settings stored at %s", self._settings.fileName())

    def get_string(self, key: str, default: str = "") -> str:
        value = self._settings.value(key, default)
        if value is None:
            return default
        # INI backends may hand back non-str values for odd content
        return value if isinstance(value, str) else str(value)

    def set_string(self, key: str, value: str) -> None:
        self._settings.setValue(key, value)
        self.sync()

    def sync(self) -> None:
        self._settings.sync()
        if self._settings.status() != QSettings.Status.NoError:
            logger.warning("Failed to sync settings to %s", self._settings.fileName())

    @property
    def file_name(self) -> str:
        """Location of the backing store, for diagnostics."""
        return self._settings.fileName()
