"""Supported languages for translation."""

from enum import Enum


class Language(Enum):
    """A language the translator can read from or write to.

    The value is the two-letter code sent to the translation API.
    """

    ENGLISH = "en"
    FRENCH = "fr"
    SPANISH = "es"
    GERMAN = "de"
    ITALIAN = "it"

    @property
    def code(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        return self.name.capitalize()

    @classmethod
    def is_supported(cls, code: str) -> bool:
        """True if `code` is one of the supported two-letter codes."""
        return code in {language.value for language in cls}

    @classmethod
    def codes(cls) -> list[str]:
        return [language.value for language in cls]


DEFAULT_SOURCE_LANGUAGE = Language.ENGLISH
DEFAULT_TARGET_LANGUAGE = Language.FRENCH
