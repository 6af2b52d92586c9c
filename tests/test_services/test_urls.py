"""
Tests for URL construction.
"""

import pytest


@pytest.fixture
def config():
    from builtwith_api.models.endpoint import ClientConfig
    return ClientConfig.create("K", "json")


class TestParamsToQueryString:
    """Tests for params_to_query_string."""

    def test_none_values_dropped(self):
        """Test that absent values are omitted."""
        from builtwith_api.services.urls import params_to_query_string

        result = params_to_query_string({"LOOKUP": "a.com", "OFFSET": None, "SINCE": None})

        assert result == "LOOKUP=a.com"

    def test_falsy_values_kept(self):
        """Test that False, 0 and empty string are serialized."""
        from builtwith_api.services.urls import params_to_query_string

        result = params_to_query_string({"META": False, "AMOUNT": 0, "TLD": ""})

        assert result == "META=false&AMOUNT=0&TLD="

    def test_insertion_order_kept(self):
        """Test pairs follow the mapping's order."""
        from builtwith_api.services.urls import params_to_query_string

        result = params_to_query_string({"B": 1, "A": 2, "C": True})

        assert result == "B=1&A=2&C=true"

    def test_empty_mapping(self):
        """Test that an empty mapping gives an empty string."""
        from builtwith_api.services.urls import params_to_query_string

        assert params_to_query_string({}) == ""


class TestSerializeValue:
    """Tests for serialize_value."""

    def test_list_joined_with_commas(self):
        """Test technology lists are comma separated."""
        from builtwith_api.services.urls import serialize_value

        assert serialize_value(["php", "jquery"]) == "php,jquery"

    def test_safe_values_verbatim(self):
        """Test domains, URLs and dates pass through unchanged."""
        from builtwith_api.services.urls import serialize_value

        assert serialize_value("https://a.com/path") == "https://a.com/path"
        assert serialize_value("2024-01-31") == "2024-01-31"

    def test_unsafe_values_escaped(self):
        """Test spaces and ampersands are percent-encoded."""
        from builtwith_api.services.urls import serialize_value

        assert serialize_value("Smith & Sons") == "Smith%20%26%20Sons"


class TestBuildUrl:
    """Tests for build_url."""

    def test_without_params(self, config):
        """Test URL with key only."""
        from builtwith_api.services.urls import build_url

        assert build_url(config, "free1") == "https://api.builtwith.com/free1/api.json?KEY=K"

    def test_all_params_absent_has_no_trailing_separator(self, config):
        """Test that a mapping of only None values adds nothing."""
        from builtwith_api.services.urls import build_url

        url = build_url(config, "trends/v6", {"DATE": None})

        assert url == "https://api.builtwith.com/trends/v6/api.json?KEY=K"

    def test_with_params_and_subdomain(self, config):
        """Test subdomain and parameters are applied."""
        from builtwith_api.services.urls import build_url

        url = build_url(config, "ctu1", {"COMPANY": "Acme", "TLD": "com"}, subdomain="ctu")

        assert url == "https://ctu.builtwith.com/ctu1/api.json?KEY=K&COMPANY=Acme&TLD=com"

    def test_format_extension(self):
        """Test response format selects the extension."""
        from builtwith_api.models.endpoint import ClientConfig
        from builtwith_api.services.urls import build_url

        config = ClientConfig.create("K", "xml")

        assert build_url(config, "kw2").endswith("/kw2/api.xml?KEY=K")


def test_redact_key():
    """Test the key is hidden in logged URLs."""
    from builtwith_api.services.urls import redact_key

    url = "https://api.builtwith.com/free1/api.json?KEY=secret&LOOKUP=a.com"

    assert redact_key(url, "secret") == "https://api.builtwith.com/free1/api.json?KEY=***&LOOKUP=a.com"
