"""
Pocket Translator - A small desktop companion for quick text translation.

This package provides a desktop application with:
- Text translation through the public MyMemory API
- A fixed set of source/target languages
- A persistent, clearable history of past translations
"""

__version__ = "0.1.0"

# Make key components available at package level
from pocket_translator.core import Language, TranslationRequest, TranslationResult
from pocket_translator.io import HistoryStore

__all__ = [
    "Language",
    "TranslationRequest",
    "TranslationResult",
    "HistoryStore",
]
