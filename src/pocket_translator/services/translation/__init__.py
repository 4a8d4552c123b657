"""Translation services - abstract interface and MyMemory implementation."""

from pocket_translator.services.translation.translation_service import (
    InvalidInputError,
    InvalidResponseError,
    InvalidURLError,
    RequestFailedError,
    TranslationError,
    TranslationService,
)
from pocket_translator.services.translation.mymemory_translation_service import (
    DEFAULT_API_URL,
    MyMemoryTranslationService,
    encode_query_text,
)

__all__ = [
    "TranslationService",
    "TranslationError",
    "InvalidInputError",
    "InvalidURLError",
    "RequestFailedError",
    "InvalidResponseError",
    "MyMemoryTranslationService",
    "DEFAULT_API_URL",
    "encode_query_text",
]
