"""
Pytest configuration and shared fixtures.
"""

import os
import sys
import pytest
import httpx
from unittest.mock import AsyncMock, patch

# Add repository root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


# ============================================================================
# Environment Fixtures
# ============================================================================

@pytest.fixture(autouse=True)
def mock_env(monkeypatch):
    """Set up test environment variables."""
    monkeypatch.setenv("BUILTWITH_API_KEY", "env_key_123")
    monkeypatch.setenv("BUILTWITH_RESPONSE_FORMAT", "json")
    monkeypatch.delenv("BUILTWITH_TIMEOUT", raising=False)


# ============================================================================
# Mock Fixtures
# ============================================================================

@pytest.fixture
def make_response():
    """Factory for httpx responses carrying a raw body."""
    def _make(text: str, status_code: int = 200) -> httpx.Response:
        return httpx.Response(status_code, text=text)
    return _make


@pytest.fixture
def mock_httpx_client(make_response):
    """Patch httpx.AsyncClient and expose the instance used inside ``async with``."""
    with patch("httpx.AsyncClient") as mock:
        client_instance = mock.return_value.__aenter__.return_value
        client_instance.get = AsyncMock(return_value=make_response("{}"))
        yield client_instance


# ============================================================================
# Client Fixtures
# ============================================================================

@pytest.fixture
def json_client():
    """Create a client requesting JSON."""
    from builtwith_api.services.client import BuiltWithClient
    return BuiltWithClient("K", "json")


@pytest.fixture
def xml_client():
    """Create a client requesting XML."""
    from builtwith_api.services.client import BuiltWithClient
    return BuiltWithClient("K", "xml")


@pytest.fixture
def txt_client():
    """Create a client requesting TXT."""
    from builtwith_api.services.client import BuiltWithClient
    return BuiltWithClient("K", "txt")
