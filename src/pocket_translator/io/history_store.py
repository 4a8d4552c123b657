"""History Store - Append-only log of past translations in settings storage."""

import logging

from pocket_translator.core import TranslationResult
from pocket_translator.io.key_value_storage import KeyValueStorage

logger = logging.getLogger(__name__)

HISTORY_KEY = "translationHistory"


class HistoryStore:
    """
    Persists translation history as one newline-joined string.

    Each line is a `original -> translated` record, in insertion order.
    Duplicates are kept. Every change is written through to storage at once.

    Only the UI thread touches the store, so no locking is done.
    """

    def __init__(self, storage: KeyValueStorage, key: str = HISTORY_KEY):
        """
        Initialize the history store.

        Args:
            storage: Key-value storage holding the serialized history.
            key: Settings key the history blob lives under.
        """
        if storage is None:
            raise ValueError("KeyValueStorage must not be None")
        self._storage = storage
        self._key = key

    def append(self, result: TranslationResult) -> None:
        """Append one record to the end of the history."""
        record = result.as_history_record()
        blob = self.raw()
        blob = f"{blob}\n{record}" if blob else record
        self._storage.set_string(self._key, blob)
        logger.debug("Appended history record (%d chars)", len(record))

    def list(self) -> list[str]:
        """Return history lines, oldest first. Empty history gives an empty list."""
        blob = self.raw()
        if not blob:
            return []
        return blob.split("\n")

    def clear(self) -> None:
        """Wipe the whole history."""
        self._storage.set_string(self._key, "")
        logger.info("Translation history cleared")

    def raw(self) -> str:
        """The serialized history blob as persisted."""
        return self._storage.get_string(self._key, "")

