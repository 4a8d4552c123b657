"""MyMemory Translation Service - Implements translation via the public MyMemory API."""

import logging
from urllib.parse import quote, urlsplit

import requests

from pocket_translator.core import Language, TranslationRequest, TranslationResult
from pocket_translator.services.translation.translation_service import (
    InvalidInputError,
    InvalidResponseError,
    InvalidURLError,
    RequestFailedError,
    TranslationService,
)

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.mymemory.translated.net/get"


def encode_query_text(text: str) -> str:
    """
    Percent-encode text for use as a URL query value.

    Returns an empty string when the text cannot be encoded (e.g. lone
    surrogates that have no UTF-8 form).
    """
    try:
        return quote(text, safe="")
    except UnicodeEncodeError:
        return ""


class MyMemoryTranslationService(TranslationService):
    """
    Translation service using the MyMemory REST API.

    One unauthenticated GET per call, no retries. Only
    `responseData.translatedText` is read from the response.
    """

    def __init__(self, api_url: str = DEFAULT_API_URL):
        self.api_url = api_url

    def build_request_url(self, request: TranslationRequest) -> str:
        """
        Build the full GET URL for a request.

        Raises:
            InvalidInputError: Empty or unencodable text, or unsupported language.
            InvalidURLError: The resulting URL has no http(s) scheme or host.
        """
        if not request.source_text:
            raise InvalidInputError("Source text is empty")

        for code in (request.source_language, request.target_language):
            if not Language.is_supported(code):
                raise InvalidInputError(f"Unsupported language code: {code!r}")

        encoded = encode_query_text(request.source_text)
        if not encoded:
            raise InvalidInputError("Source text could not be percent-encoded")

        url = f"{self.api_url}?q={encoded}&langpair={request.langpair}"

        parts = urlsplit(url)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise InvalidURLError(f"Malformed request URL: {url}")
        return url

    def translate(self, request: TranslationRequest) -> TranslationResult:
        """
        Translate text using the MyMemory API.

        Args:
            request: Text and language pair to translate.

        Returns:
            TranslationResult with the original and translated text.
        """
        url = self.build_request_url(request)
        logger.debug("Requesting translation %s (%d chars)", request.langpair, len(request.source_text))

        try:
            response = requests.get(url)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise RequestFailedError(f"Translation request failed: {exc}") from exc

        translated = self._extract_translated_text(response)
        logger.info("Translation %s succeeded", request.langpair)
        return TranslationResult(
            original_text=request.source_text,
            translated_text=translated,
        )

    @staticmethod
    def _extract_translated_text(response: requests.Response) -> str:
        """Pull `responseData.translatedText` out of the JSON body."""
        try:
            payload = response.json()
        except ValueError as exc:
            raise InvalidResponseError("Response body is not valid JSON") from exc

        if not isinstance(payload, dict):
            raise InvalidResponseError("Response body is not a JSON object")

        response_data = payload.get("responseData")
        if not isinstance(response_data, dict):
            raise InvalidResponseError("Response is missing 'responseData'")

        translated = response_data.get("translatedText")
        if not isinstance(translated, str):
            raise InvalidResponseError("Response is missing 'responseData.translatedText'")
        return translated
