"""
HTTP Transport

This module owns the single HTTP handle a MediaWiki client talks through.

Design Goals
------------
- One POST per call, form-encoded body, fixed User-Agent
- Raw response text on HTTP 200, typed errors otherwise
- Scoped resource: acquired on construction, released exactly once
- Injectable `httpx.BaseTransport` for testing
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional

import httpx

from ..config import ClientConfiguration
from ..core.errors import MediaWikiHTTPError, MediaWikiRequestError
from .utils import check_params, close_quietly

logger = logging.getLogger("mwapi.transport")

HEADER_USER_AGENT = "User-Agent"


class HttpTransport:
    """
    Blocking HTTP transport bound to one API URI.
    """

    def __init__(
        self,
        api_uri: str,
        configuration: ClientConfiguration,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        """
        Parameters
        ----------
        api_uri : str
            Absolute URI of the wiki's api.php endpoint.

        configuration : ClientConfiguration
            Supplies the User-Agent header and timeout.

        transport : Optional[httpx.BaseTransport]
            Low-level transport override, e.g. `httpx.MockTransport`.
        """
        self.api_uri = api_uri
        self.user_agent = configuration.user_agent
        self._client: Optional[httpx.Client] = httpx.Client(
            headers={HEADER_USER_AGENT: configuration.user_agent},
            timeout=configuration.timeout,
            transport=transport,
        )

    @property
    def closed(self) -> bool:
        return self._client is None

    def post(self, params: Mapping[str, str]) -> str:
        """
        POST `params` as an x-www-form-urlencoded body.

        Returns
        -------
        str
            The response body.

        Raises
        ------
        ValueError
            If a parameter name or value is None.

        MediaWikiRequestError
            If the transport is closed or the exchange fails.

        MediaWikiHTTPError
            If the status code is not 200.
        """
        data = check_params(params)

        if self._client is None:
            raise MediaWikiRequestError("Transport is closed.")

        logger.debug("POST %s params=%s", self.api_uri, sorted(data))

        try:
            resp = self._client.post(self.api_uri, data=data)
        except httpx.HTTPError as exc:
            logger.error(
                "MediaWiki request failed: %s (%s)",
                self.api_uri,
                type(exc).__name__,
            )
            raise MediaWikiRequestError(
                f"An error occurred during the API request: {type(exc).__name__}"
            ) from exc

        if resp.status_code != httpx.codes.OK:
            logger.warning(
                "MediaWiki returned HTTP %s %s for %s",
                resp.status_code,
                resp.reason_phrase,
                self.api_uri,
            )
            raise MediaWikiHTTPError(resp.status_code, resp.reason_phrase)

        return resp.text

    def close(self) -> None:
        """Release the HTTP handle. Safe to call more than once."""
        client, self._client = self._client, None
        close_quietly(client)
