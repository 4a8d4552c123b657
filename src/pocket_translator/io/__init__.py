"""I/O layer - Local persistence for settings and translation history."""

from .history_store import HISTORY_KEY, HistoryStore
from .key_value_storage import InMemoryKeyValueStorage, KeyValueStorage, QSettingsStorage

__all__ = [
    "KeyValueStorage",
    "InMemoryKeyValueStorage",
    "QSettingsStorage",
    "HistoryStore",
    "HISTORY_KEY",
]
