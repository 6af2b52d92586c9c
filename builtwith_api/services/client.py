"""
BuiltWith API client.
"""

import logging
from collections.abc import Sequence
from typing import Any

import httpx

from builtwith_api.core.config import Settings, get_settings
from builtwith_api.core.exceptions import TransportError
from builtwith_api.core.logging import get_logger
from builtwith_api.models.endpoint import (
    ClientConfig,
    EndpointCategory,
    EndpointSpec,
    ResponseFormat,
)
from .decoders import get_decoder
from .urls import build_url, redact_key

TXT_FORMAT_WARNING = (
    "TXT response format is only supported for the BuiltWith Lists API. "
    "See: https://api.builtwith.com/lists-api"
)


class BuiltWithClient:
    """Async client for the BuiltWith sub-APIs."""

    def __init__(
        self,
        api_key: str,
        response_format: ResponseFormat | str,
        *,
        timeout: float | None = None,
        logger: logging.Logger | None = None,
    ):
        self._config = ClientConfig.create(api_key, response_format, timeout)
        self._logger = logger or get_logger(__name__)
        self._decoder = get_decoder(self._config.response_format, self._logger)

        if self._config.response_format is ResponseFormat.TXT:
            self._logger.warning(TXT_FORMAT_WARNING)

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def response_format(self) -> ResponseFormat:
        return self._config.response_format

    def url_for(self, endpoint: EndpointSpec) -> str:
        """Build the request URL for an endpoint."""
        return build_url(self._config, endpoint.path, endpoint.params, endpoint.subdomain)

    async def _request(self, endpoint: EndpointSpec) -> Any:
        """
        Perform a GET for the endpoint and decode the body.

        Raises:
            TransportError: If the request could not be sent or got no response
            ParseError: If a lookup endpoint returned malformed JSON
        """
        url = self.url_for(endpoint)
        safe_url = redact_key(url, self._config.api_key)
        self._logger.debug("GET %s", safe_url)

        try:
            async with httpx.AsyncClient(timeout=self._config.timeout) as client:
                response = await client.get(url)
        except (httpx.RequestError, httpx.InvalidURL) as e:
            # InvalidURL: over-long URL or control characters in key/params
            self._logger.error("BuiltWith request to %s failed: %s", safe_url, e)
            raise TransportError(f"BuiltWith request failed: {e}", url=safe_url) from e

        self._logger.debug("BuiltWith responded %s for %s", response.status_code, endpoint.path)
        return self._decoder.decode(response, endpoint.category)

    async def free(self, url: str) -> Any:
        """
        Make a request to the BuiltWith Free API.

        See https://api.builtwith.com/free-api
        """
        return await self._request(
            EndpointSpec("free1", EndpointCategory.LOOKUP, {"LOOKUP": url})
        )

    async def domain(
        self,
        url: str,
        *,
        hide_all: bool | None = None,
        hide_description_and_links: bool | None = None,
        only_live_technologies: bool | None = None,
        no_meta_data: bool | None = None,
        no_attribute_data: bool | None = None,
    ) -> Any:
        """
        Make a request to the BuiltWith Domain API.

        Unset flags are left out of the request; BuiltWith treats them as false.

        Args:
            url: Domain to look up
            hide_all: Hide technology descriptions, links and tags (HIDETEXT)
            hide_description_and_links: Hide descriptions and links (HIDEDL)
            only_live_technologies: Only return live technologies (LIVEONLY)
            no_meta_data: Drop meta data such as names and addresses (NOMETA)
            no_attribute_data: Drop attribute data (NOATTR)

        See https://api.builtwith.com/domain-api
        """
        params = {
            "LOOKUP": url,
            "HIDETEXT": hide_all,
            "HIDEDL": hide_description_and_links,
            "LIVEONLY": only_live_technologies,
            "NOMETA": no_meta_data,
            "NOATTR": no_attribute_data,
        }
        return await self._request(EndpointSpec("v14", EndpointCategory.LOOKUP, params))

    async def lists(
        self,
        technologies: str | Sequence[str],
        *,
        include_meta_data: bool | None = None,
        offset: str | None = None,
        since: str | None = None,
    ) -> Any:
        """
        Make a request to the BuiltWith Lists API.

        Args:
            technologies: Technology name, or several joined with commas
            include_meta_data: Include meta data for each site (META)
            offset: Value of NextOffset from a previous page (OFFSET)
            since: Only sites seen since this date or phrase (SINCE)

        Returns:
            Parsed JSON, or the raw body when BuiltWith answers with text

        See https://api.builtwith.com/lists-api
        """
        if not isinstance(technologies, str):
            technologies = list(technologies)
        params = {
            "TECH": technologies,
            "META": include_meta_data,
            "OFFSET": offset,
            "SINCE": since,
        }
        return await self._request(EndpointSpec("lists5", EndpointCategory.REPORT, params))

    async def relationships(self, url: str) -> Any:
        """
        Make a request to the BuiltWith Relationships API.

        BuiltWith itself may fail with a maxJSONLength error for some domains;
        that arrives as a malformed body and surfaces as ParseError.

        See https://api.builtwith.com/relationships-api
        """
        return await self._request(
            EndpointSpec("rv1", EndpointCategory.LOOKUP, {"LOOKUP": url})
        )

    async def keywords(self, url: str) -> Any:
        """
        Make a request to the BuiltWith Keywords API.

        See https://api.builtwith.com/keywords-api
        """
        return await self._request(
            EndpointSpec("kw2", EndpointCategory.LOOKUP, {"LOOKUP": url})
        )

    async def trends(self, technology: str, *, date: str | None = None) -> Any:
        """
        Make a request to the BuiltWith Trends API.

        Args:
            technology: Technology name
            date: Totals as of this date, YYYY-MM-DD (DATE)

        See https://api.builtwith.com/trends-api
        """
        params = {"TECH": technology, "DATE": date}
        return await self._request(EndpointSpec("trends/v6", EndpointCategory.REPORT, params))

    async def company_to_url(
        self,
        company_name: str,
        *,
        tld: str | None = None,
        amount: int | None = None,
    ) -> Any:
        """
        Make a request to the BuiltWith Company to URL API.

        Args:
            company_name: Company name to resolve
            tld: Prefer domains with this top-level domain (TLD)
            amount: Maximum number of domains to return (AMOUNT)

        See https://api.builtwith.com/company-to-url
        """
        params = {"COMPANY": company_name, "TLD": tld, "AMOUNT": amount}
        return await self._request(
            EndpointSpec("ctu1", EndpointCategory.LOOKUP, params, subdomain="ctu")
        )


def create_client(
    api_key: str,
    response_format: ResponseFormat | str,
    **kwargs,
) -> BuiltWithClient:
    """Authenticate and get a client."""
    return BuiltWithClient(api_key, response_format, **kwargs)


def client_from_settings(settings: Settings | None = None, **kwargs) -> BuiltWithClient:
    """
    Build a client from BUILTWITH_* environment settings.

    Args:
        settings: Preloaded settings; read from the environment when omitted
        **kwargs: Extra client options, e.g. ``logger``

    Raises:
        ConfigurationError: If settings are missing or invalid
    """
    settings = settings or get_settings()
    kwargs.setdefault("timeout", settings.timeout)
    return BuiltWithClient(settings.api_key, settings.response_format, **kwargs)
