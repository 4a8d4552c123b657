"""Unit tests for MyMemoryTranslationService."""

from unittest.mock import MagicMock, patch
from urllib.parse import parse_qs, urlsplit

import pytest
import requests

from pocket_translator.core import TranslationRequest
from pocket_translator.services import (
    DEFAULT_API_URL,
    InvalidInputError,
    InvalidResponseError,
    InvalidURLError,
    MyMemoryTranslationService,
    RequestFailedError,
    encode_query_text,
)

REQUESTS_GET = "pocket_translator.services.translation.mymemory_translation_service.requests.get"


def _response(payload=None, json_error=None, http_error=None):
    response = MagicMock()
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    if http_error is not None:
        response.raise_for_status.side_effect = http_error
    return response


@pytest.fixture
def service():
    return MyMemoryTranslationService()


@pytest.fixture
def hello_request():
    return TranslationRequest(source_text="Hello", source_language="en", target_language="fr")


class TestEncodeQueryText:
    """Tests for percent-encoding of the query text."""

    def test_encodes_spaces_and_reserved_characters(self):
        assert encode_query_text("a b&c=d/e?") == "a%20b%26c%3Dd%2Fe%3F"

    def test_encodes_non_ascii_as_utf8(self):
        assert encode_query_text("café") == "caf%C3%A9"

    def test_returns_empty_string_for_unencodable_text(self):
        """Lone surrogates have no UTF-8 form."""
        assert encode_query_text("bad \ud800 text") == ""


class TestBuildRequestUrl:
    """Tests for request URL construction."""

    def test_url_contains_encoded_text_and_langpair(self, service):
        request = TranslationRequest(source_text="How are you?", source_language="en", target_language="de")

        url = service.build_request_url(request)

        assert url.startswith(DEFAULT_API_URL + "?")
        assert "q=How%20are%20you%3F" in url
        assert "langpair=en|de" in url

    def test_query_round_trips_to_original_text(self, service):
        request = TranslationRequest(source_text="Ça va & toi?", source_language="fr", target_language="it")

        query = parse_qs(urlsplit(service.build_request_url(request)).query)

        assert query["q"] == ["Ça va & toi?"]
        assert query["langpair"] == ["fr|it"]

    def test_empty_text_is_invalid_input(self, service):
        with pytest.raises(InvalidInputError):
            service.build_request_url(TranslationRequest("", "en", "fr"))

    def test_whitespace_text_is_encoded_not_rejected(self, service):
        assert "q=%20&" in service.build_request_url(TranslationRequest(" ", "en", "fr"))
        assert "q=%0A&" in service.build_request_url(TranslationRequest("\n", "en", "fr"))

    def test_unencodable_text_is_invalid_input(self, service):
        with pytest.raises(InvalidInputError):
            service.build_request_url(TranslationRequest("\udfff", "en", "fr"))

    def test_unsupported_language_is_invalid_input(self, service):
        with pytest.raises(InvalidInputError):
            service.build_request_url(TranslationRequest("Hello", "en", "ja"))

    def test_malformed_endpoint_is_invalid_url(self):
        service = MyMemoryTranslationService(api_url="not a url")
        with pytest.raises(InvalidURLError):
            service.build_request_url(TranslationRequest("Hello", "en", "fr"))

    def test_non_http_scheme_is_invalid_url(self):
        service = MyMemoryTranslationService(api_url="ftp://example.com/get")
        with pytest.raises(InvalidURLError):
            service.build_request_url(TranslationRequest("Hello", "en", "fr"))


class TestTranslate:
    """Tests for the full request/response cycle with HTTP stubbed."""

    def test_successful_translation(self, service, hello_request):
        with patch(REQUESTS_GET, return_value=_response({"responseData": {"translatedText": "Bonjour"}})) as get:
            result = service.translate(hello_request)

        assert result.original_text == "Hello"
        assert result.translated_text == "Bonjour"
        get.assert_called_once_with(f"{DEFAULT_API_URL}?q=Hello&langpair=en|fr")

    def test_extra_fields_are_ignored(self, service, hello_request):
        payload = {
            "responseData": {"translatedText": "Bonjour", "match": 1},
            "responseStatus": 200,
            "matches": [],
        }
        with patch(REQUESTS_GET, return_value=_response(payload)):
            assert service.translate(hello_request).translated_text == "Bonjour"

    def test_whitespace_text_is_sent(self, service):
        with patch(REQUESTS_GET, return_value=_response({"responseData": {"translatedText": " "}})) as get:
            result = service.translate(TranslationRequest(" ", "en", "fr"))

        assert result.original_text == " "
        get.assert_called_once_with(f"{DEFAULT_API_URL}?q=%20&langpair=en|fr")

    def test_empty_text_issues_no_request(self, service):
        with patch(REQUESTS_GET) as get:
            with pytest.raises(InvalidInputError):
                service.translate(TranslationRequest("", "en", "fr"))
        get.assert_not_called()

    def test_transport_error_is_request_failed(self, service, hello_request):
        with patch(REQUESTS_GET, side_effect=requests.ConnectionError("no route")) as get:
            with pytest.raises(RequestFailedError) as exc_info:
                service.translate(hello_request)

        assert isinstance(exc_info.value.__cause__, requests.ConnectionError)
        get.assert_called_once()

    def test_http_error_status_is_request_failed(self, service, hello_request):
        response = _response(http_error=requests.HTTPError("503 Server Error"))
        with patch(REQUESTS_GET, return_value=response):
            with pytest.raises(RequestFailedError):
                service.translate(hello_request)

    def test_non_json_body_is_invalid_response(self, service, hello_request):
        with patch(REQUESTS_GET, return_value=_response(json_error=ValueError("Expecting value"))):
            with pytest.raises(InvalidResponseError):
                service.translate(hello_request)

    def test_missing_translated_text_is_invalid_response(self, service, hello_request):
        with patch(REQUESTS_GET, return_value=_response({"responseData": {}})):
            with pytest.raises(InvalidResponseError):
                service.translate(hello_request)

    def test_missing_response_data_is_invalid_response(self, service, hello_request):
        with patch(REQUESTS_GET, return_value=_response({"responseStatus": 403})):
            with pytest.raises(InvalidResponseError):
                service.translate(hello_request)

    def test_non_string_translated_text_is_invalid_response(self, service, hello_request):
        with patch(REQUESTS_GET, return_value=_response({"responseData": {"translatedText": 42}})):
            with pytest.raises(InvalidResponseError):
                service.translate(hello_request)

    def test_non_object_body_is_invalid_response(self, service, hello_request):
        with patch(REQUESTS_GET, return_value=_response(["Bonjour"])):
            with pytest.raises(InvalidResponseError):
                service.translate(hello_request)
