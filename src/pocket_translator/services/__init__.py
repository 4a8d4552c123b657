"""Services layer - business logic and external integrations."""

from pocket_translator.services.settings_manager import SettingsManager

# Translation services
from pocket_translator.services.translation import (
    DEFAULT_API_URL,
    InvalidInputError,
    InvalidResponseError,
    InvalidURLError,
    MyMemoryTranslationService,
    RequestFailedError,
    TranslationError,
    TranslationService,
    encode_query_text,
)

# Background workers
from pocket_translator.services.api_workers import TranslationWorker, WorkerSignals

__all__ = [
	"SettingsManager",
	"TranslationService",
	"TranslationError",
	"InvalidInputError",
	"InvalidURLError",
	"RequestFailedError",
	"InvalidResponseError",
	"MyMemoryTranslationService",
	"DEFAULT_API_URL",
	"encode_query_text",
	"TranslationWorker",
	"WorkerSignals",
]
