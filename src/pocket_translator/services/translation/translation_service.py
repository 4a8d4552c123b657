"""Translation Service - Abstract interface and error types for text translation."""

from abc import ABC, abstractmethod

from pocket_translator.core import TranslationRequest, TranslationResult


class TranslationError(Exception):
    """Base class for every failure of a translation request."""


class InvalidInputError(TranslationError):
    """Source text is empty, cannot be encoded, or uses an unsupported language."""


class InvalidURLError(TranslationError):
    """The constructed request URL is malformed."""


class RequestFailedError(TranslationError):
    """The request could not be delivered or the server refused it."""


class InvalidResponseError(TranslationError):
    """The response body is not JSON or lacks `responseData.translatedText`."""


class TranslationService(ABC):
    """
    Abstract service for translating text between two languages.

    Implementations (e.g., MyMemoryTranslationService) handle API calls.
    Calls are blocking and meant to run on a worker thread.
    """

    @abstractmethod
    def translate(self, request: TranslationRequest) -> TranslationResult:
        """
        Translate the request's text.

        Args:
            request: Text and language pair to translate.

        Returns:
            TranslationResult pairing the original with the translated text.

        Raises:
            TranslationError: One of its subclasses, describing the failure.
        """
        pass
