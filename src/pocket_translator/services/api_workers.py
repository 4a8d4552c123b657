"""Async workers for non-blocking API calls using Qt threading."""

import logging

from PySide6.QtCore import QObject, QRunnable, Signal, Slot

from pocket_translator.core import TranslationRequest
from pocket_translator.services.translation import (
    RequestFailedError,
    TranslationError,
    TranslationService,
)

logger = logging.getLogger(__name__)


class WorkerSignals(QObject):
    """
    Signals for communicating results from worker threads.

    QRunnable doesn't inherit from QObject, so we need a separate
    QObject to hold the signals.
    """
    finished = Signal()
    error = Signal(object)  # TranslationError
    translation_result = Signal(object)  # TranslationResult


class TranslationWorker(QRunnable):
    """
    Worker that runs the translation API call in a background thread.

    Uses Qt's thread pool for thread management. Results and errors are
    only emitted as signals; the worker never touches UI state or history.
    """

    def __init__(self, translation_service: TranslationService, request: TranslationRequest):
        super().__init__()
        self.translation_service = translation_service
        self.request = request
        self.signals = WorkerSignals()
        self.setAutoDelete(True)

    @Slot()
    def run(self):
        """Execute the translation API call in background thread."""
        try:
            result = self.translation_service.translate(self.request)
            self.signals.translation_result.emit(result)
        except TranslationError as e:
            self.signals.error.emit(e)
        except Exception as e:
            # Anything the service did not classify is treated as a delivery failure
            logger.exception("Unexpected error in translation worker")
            self.signals.error.emit(RequestFailedError(f"Unexpected translation error: {e}"))
        finally:
            self.signals.finished.emit()
