"""Domain entities for a single translation round trip."""

from dataclasses import dataclass

HISTORY_SEPARATOR = " -> "


@dataclass(frozen=True)
class TranslationRequest:
    """What the user asked to translate.

    Attributes:
        source_text: Text typed by the user.
        source_language: Two-letter code of the source language.
        target_language: Two-letter code of the target language.
    """

    source_text: str
    source_language: str
    target_language: str

    @property
    def langpair(self) -> str:
        """Language pair in the `<from>|<to>` form the API expects."""
        return f"{self.source_language}|{self.target_language}"


@dataclass(frozen=True)
class TranslationResult:
    """A successful translation, ready to be shown and recorded."""

    original_text: str
    translated_text: str

    def as_history_record(self) -> str:
        """Format as one `original -> translated` history line."""
        return f"{self.original_text}{HISTORY_SEPARATOR}{self.translated_text}"
