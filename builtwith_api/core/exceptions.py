"""
Custom client exceptions.
"""


class BuiltWithError(Exception):
    """Base exception for BuiltWith client errors."""
    pass


class ConfigurationError(BuiltWithError):
    """Client was configured with a missing or invalid value."""
    pass


class APIError(BuiltWithError):
    """Call to the BuiltWith API failed."""
    pass


class TransportError(APIError):
    """Request never produced a response (DNS, connection, timeout)."""

    def __init__(self, message: str, url: str | None = None):
        super().__init__(message)
        self.url = url


class ParseError(APIError):
    """Response body is not valid in the requested format."""

    def __init__(self, message: str, body: str = ""):
        super().__init__(message)
        self.body = body
