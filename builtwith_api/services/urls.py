"""
BuiltWith request URL construction.
"""

from urllib.parse import quote

from builtwith_api.models.endpoint import ClientConfig, ParamValue, RequestParams

BASE_HOST = "builtwith.com"

# Characters BuiltWith accepts unescaped in lookups, tech lists and dates
_SAFE_CHARS = ",/:"


def serialize_value(value: ParamValue) -> str:
    """Render a parameter value the way the BuiltWith API expects it."""
    if isinstance(value, bool):
        text = "true" if value else "false"
    elif isinstance(value, (list, tuple)):
        text = ",".join(str(item) for item in value)
    else:
        text = str(value)
    return quote(text, safe=_SAFE_CHARS)


def params_to_query_string(params: RequestParams) -> str:
    """
    Convert a parameters mapping into a query string joined by ``&``.

    ``None`` values are dropped; falsy values such as ``False``, ``0`` and
    ``""`` are kept. Pairs keep the mapping's insertion order.

    Example:
        {"LOOKUP": "a.com", "OFFSET": None, "META": False} -> "LOOKUP=a.com&META=false"
    """
    return "&".join(
        f"{key}={serialize_value(value)}"
        for key, value in params.items()
        if value is not None
    )


def build_url(
    config: ClientConfig,
    path: str,
    params: RequestParams | None = None,
    subdomain: str = "api",
) -> str:
    """
    Build a fully-qualified BuiltWith API URL.

    Args:
        config: Client config providing the key and response format
        path: Endpoint path, e.g. ``v14`` or ``trends/v6``
        params: Endpoint-specific query parameters
        subdomain: Host prefix, ``api`` for most endpoints

    Returns:
        URL string
    """
    url = (
        f"https://{subdomain}.{BASE_HOST}/{path}/"
        f"api.{config.response_format.value}?KEY={config.api_key}"
    )

    query = params_to_query_string(params or {})
    if query:
        url += f"&{query}"

    return url


def redact_key(url: str, api_key: str) -> str:
    """Hide the API key in a URL before it is logged."""
    return url.replace(f"KEY={api_key}", "KEY=***", 1)
