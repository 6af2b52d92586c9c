"""
Data models for client configuration and endpoint requests.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from builtwith_api.core.exceptions import ConfigurationError

ParamValue = Union[str, bool, int, float, list, tuple, None]
RequestParams = dict[str, ParamValue]


class ResponseFormat(str, Enum):
    """Encoding requested from BuiltWith via the URL extension."""

    XML = "xml"
    JSON = "json"
    TXT = "txt"

    @classmethod
    def parse(cls, value: "ResponseFormat | str | None") -> "ResponseFormat":
        """
        Resolve a format from an enum member or its string value.

        Raises:
            ConfigurationError: If value is not one of xml, json or txt
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                pass
        raise ConfigurationError(
            "Invalid 'responseFormat'. Valid formats are 'xml', 'txt', and 'json'. "
            f"You input {value!r}"
        )


class EndpointCategory(Enum):
    """How an endpoint's body is interpreted."""

    # Single-object lookups; bad JSON is an error
    LOOKUP = "lookup"
    # Bulk/report data; BuiltWith may answer with plain-text errors
    REPORT = "report"


@dataclass(frozen=True)
class ClientConfig:
    """Immutable settings held by a client for its whole lifetime."""

    api_key: str
    response_format: ResponseFormat
    timeout: float | None = None

    @classmethod
    def create(
        cls,
        api_key: str,
        response_format: "ResponseFormat | str | None",
        timeout: float | None = None,
    ) -> "ClientConfig":
        """Validate raw values and build a config."""
        if not isinstance(api_key, str) or not api_key.strip():
            raise ConfigurationError("A non-empty BuiltWith API key is required")
        if api_key != api_key.strip():
            raise ConfigurationError("BuiltWith API key must not have surrounding whitespace")
        return cls(
            api_key=api_key,
            response_format=ResponseFormat.parse(response_format),
            timeout=timeout,
        )


@dataclass(frozen=True)
class EndpointSpec:
    """A single sub-API request, built per call."""

    path: str
    category: EndpointCategory
    params: RequestParams = field(default_factory=dict)
    subdomain: str = "api"
