"""
Response decoders, one per BuiltWith response format.

A decoder is picked once when the client is built and then asked to decode
every response together with the endpoint's category.
"""

import json
import logging
from typing import Any

import httpx

from builtwith_api.core.exceptions import ParseError
from builtwith_api.models.endpoint import EndpointCategory, ResponseFormat

FALLBACK_WARNING = "BuiltWith sent an invalid JSON payload. Falling back to text parsing."


class ResponseDecoder:
    """Base decoder: returns the raw body for every endpoint."""

    def __init__(self, logger: logging.Logger):
        self._logger = logger

    def decode(self, response: httpx.Response, category: EndpointCategory) -> Any:
        if category is EndpointCategory.REPORT:
            return self.decode_report(response)
        return self.decode_lookup(response)

    def decode_lookup(self, response: httpx.Response) -> Any:
        return response.text

    def decode_report(self, response: httpx.Response) -> Any:
        return response.text

    def _parse_json_strict(self, response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            body = response.text
            self._logger.error("BuiltWith returned invalid JSON: %s", e)
            raise ParseError(f"BuiltWith returned invalid JSON: {e}", body=body) from e


class XmlDecoder(ResponseDecoder):
    """XML bodies are handed back untouched."""


class JsonDecoder(ResponseDecoder):
    """JSON bodies are parsed; report endpoints fall back to text."""

    def decode_lookup(self, response: httpx.Response) -> Any:
        return self._parse_json_strict(response)

    def decode_report(self, response: httpx.Response) -> Any:
        # Report endpoints send plain-text errors where JSON is expected
        text = response.text
        try:
            return json.loads(text)
        except ValueError:
            self._logger.warning(FALLBACK_WARNING)
            return text


class TextDecoder(ResponseDecoder):
    """
    TXT is only meaningful for report endpoints.

    Lookup endpoints still answer in JSON, so they are parsed strictly.
    """

    def decode_lookup(self, response: httpx.Response) -> Any:
        return self._parse_json_strict(response)


_DECODERS: dict[ResponseFormat, type[ResponseDecoder]] = {
    ResponseFormat.XML: XmlDecoder,
    ResponseFormat.JSON: JsonDecoder,
    ResponseFormat.TXT: TextDecoder,
}


def get_decoder(response_format: ResponseFormat, logger: logging.Logger) -> ResponseDecoder:
    """Return the decoder for a response format."""
    return _DECODERS[response_format](logger)
