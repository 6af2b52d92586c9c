"""
Async client for the BuiltWith web technology lookup API.
"""

from builtwith_api.core.exceptions import (
    APIError,
    BuiltWithError,
    ConfigurationError,
    ParseError,
    TransportError,
)
from builtwith_api.core.logging import install_null_handler
from builtwith_api.models.endpoint import ResponseFormat
from builtwith_api.services.client import BuiltWithClient, client_from_settings, create_client

install_null_handler()

__all__ = [
    "APIError",
    "BuiltWithClient",
    "BuiltWithError",
    "ConfigurationError",
    "ParseError",
    "ResponseFormat",
    "TransportError",
    "client_from_settings",
    "create_client",
]
