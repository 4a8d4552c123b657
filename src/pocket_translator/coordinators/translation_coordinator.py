"""Translation Coordinator - Manages the translate workflow and primary screen state."""

import logging
from typing import Optional

from PySide6.QtCore import QObject, QThreadPool, Signal, Slot

from pocket_translator.core import (
    DEFAULT_SOURCE_LANGUAGE,
    DEFAULT_TARGET_LANGUAGE,
    Language,
    TranslationRequest,
    TranslationResult,
)
from pocket_translator.io import HistoryStore
from pocket_translator.services import TranslationError, TranslationService, TranslationWorker

logger = logging.getLogger(__name__)


class _TranslationRequest(QObject):
    """Receives worker signals on the UI thread and forwards them to the coordinator."""

    def __init__(self, request: TranslationRequest, parent: "TranslationCoordinator"):
        super().__init__()
        self.request = request
        self.parent_ref = parent

    @Slot(object)
    def on_translation_result(self, result):
        coordinator = self.parent_ref
        if coordinator:
            coordinator._handle_translation_result(result)

    @Slot(object)
    def on_translation_error(self, error):
        coordinator = self.parent_ref
        if coordinator:
            coordinator._handle_translation_error(error, self.request)


class TranslationCoordinator(QObject):
    """
    Orchestrates the translation workflow.

    Responsibilities:
    - Hold the primary screen state (input text, language pair, busy flag, result).
    - Gate the translate action: never with empty text, never two at once.
    - Dispatch the API call to the thread pool.
    - On completion (back on the UI thread) show the result and record it in history.

    Failures are logged only; the translated text is left as it was.
    """

    loading_changed = Signal(bool)
    can_translate_changed = Signal(bool)
    translation_completed = Signal(str)
    languages_changed = Signal(str, str)

    def __init__(
        self,
        translation_service: TranslationService,
        history_store: HistoryStore,
        thread_pool: Optional[QThreadPool] = None,
    ):
        super().__init__()

        if translation_service is None:
            raise ValueError("TranslationService must not be None")
        if history_store is None:
            raise ValueError("HistoryStore must not be None")

        self.translation_service = translation_service
        self.history_store = history_store
        self.thread_pool = thread_pool or QThreadPool.globalInstance()

        self.source_text = ""
        self.source_language = DEFAULT_SOURCE_LANGUAGE.code
        self.target_language = DEFAULT_TARGET_LANGUAGE.code
        self.translated_text: Optional[str] = None
        self.is_loading = False

        # Keep a reference so the helper is not garbage collected while the worker runs
        self._translation_request_helper: Optional[_TranslationRequest] = None

    def set_source_text(self, text: str) -> None:
        """Called whenever the input text changes."""
        before = self.can_translate()
        self.source_text = text
        self._emit_can_translate_if_changed(before)

    def set_source_language(self, code: str) -> None:
        self._require_supported(code)
        self.source_language = code
        self.languages_changed.emit(self.source_language, self.target_language)

    def set_target_language(self, code: str) -> None:
        self._require_supported(code)
        self.target_language = code
        self.languages_changed.emit(self.source_language, self.target_language)

    def swap_languages(self) -> None:
        """Exchange source and target languages."""
        self.source_language, self.target_language = self.target_language, self.source_language
        self.languages_changed.emit(self.source_language, self.target_language)

    def can_translate(self) -> bool:
        """True if the translate action should be enabled."""
        return bool(self.source_text) and not self.is_loading

    def request_translation(self) -> None:
        """Translate the current input with the current language pair."""
        if not self.can_translate():
            logger.debug(
                "Translate ignored (empty=%s, loading=%s)",
                not self.source_text,
                self.is_loading,
            )
            return

        request = TranslationRequest(
            source_text=self.source_text,
            source_language=self.source_language,
            target_language=self.target_language,
        )

        self._set_loading(True)

        worker = TranslationWorker(
            translation_service=self.translation_service,
            request=request,
        )

        request_helper = _TranslationRequest(request, self)
        self._translation_request_helper = request_helper

        worker.signals.translation_result.connect(request_helper.on_translation_result)
        worker.signals.error.connect(request_helper.on_translation_error)
        worker.signals.finished.connect(self._on_worker_finished)

        logger.debug("Dispatching translation %s", request.langpair)
        self.thread_pool.start(worker)

    @Slot()
    def _on_worker_finished(self) -> None:
        # Delivered after the result/error slot, so the helper is no longer in use
        self._translation_request_helper = None

    def _handle_translation_result(self, result: TranslationResult) -> None:
        """Handle translation result from worker thread (runs in main thread)."""
        self.translated_text = result.translated_text
        try:
            self.history_store.append(result)
        finally:
            self._set_loading(False)
        self.translation_completed.emit(result.translated_text)

    def _handle_translation_error(self, error: TranslationError, request: TranslationRequest) -> None:
        """Handle translation error from worker thread (runs in main thread)."""
        logger.warning(
            "Translation %s failed with %s: %s",
            request.langpair,
            type(error).__name__,
            error,
        )
        self._set_loading(False)

    def _set_loading(self, loading: bool) -> None:
        before = self.can_translate()
        self.is_loading = loading
        self.loading_changed.emit(loading)
        self._emit_can_translate_if_changed(before)

    def _emit_can_translate_if_changed(self, before: bool) -> None:
        after = self.can_translate()
        if after != before:
            self.can_translate_changed.emit(after)

    @staticmethod
    def _require_supported(code: str) -> None:
        if not Language.is_supported(code):
            raise ValueError(f"Unsupported language code: {code!r}")
