# Services - BuiltWith API integration
from .client import BuiltWithClient, client_from_settings, create_client
from .decoders import get_decoder
from .urls import build_url, params_to_query_string

__all__ = [
    "BuiltWithClient",
    "build_url",
    "client_from_settings",
    "create_client",
    "get_decoder",
    "params_to_query_string",
]
