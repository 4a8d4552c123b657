"""Domain layer - Pure entities representing translations and languages."""

from .language import DEFAULT_SOURCE_LANGUAGE, DEFAULT_TARGET_LANGUAGE, Language
from .translation_entities import TranslationRequest, TranslationResult

__all__ = [
    "Language",
    "DEFAULT_SOURCE_LANGUAGE",
    "DEFAULT_TARGET_LANGUAGE",
    "TranslationRequest",
    "TranslationResult",
]
