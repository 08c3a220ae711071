"""
Client Factory

Constructors for `MediaWikiClient` instances bound to the process-wide
default configuration.

The default starts out from `settings` (environment / `.env`) and can be
replaced at any time with `set_configuration()`. Clients keep the
configuration they were built with, so replacing it never affects them.
"""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from .config import ClientConfiguration, settings
from .data.models import WikiData
from .wiki.api_client import MediaWikiClient
from .wiki.utils import build_uri

logger = logging.getLogger("mwapi.factory")

HTTPS_SCHEME = "https"
HTTPS_PORT = 443
WIKIMEDIA_API_PATH = "/w/api.php"
WIKIPEDIA_HOST = "%s.wikipedia.org"


# ---------------------------------------------------------------------
# Default Configuration
# ---------------------------------------------------------------------

_configuration: ClientConfiguration = settings.to_configuration()


def get_configuration() -> ClientConfiguration:
    return _configuration


def set_configuration(configuration: ClientConfiguration) -> None:
    """Replace the default configuration used for new clients."""
    global _configuration
    if not isinstance(configuration, ClientConfiguration):
        raise TypeError(
            f"Expected ClientConfiguration; got {type(configuration).__name__}"
        )
    _configuration = configuration


# ---------------------------------------------------------------------
# Constructors
# ---------------------------------------------------------------------

def new_instance(
    scheme: str,
    host: str,
    port: int,
    api_path: str,
    transport: Optional[httpx.BaseTransport] = None,
) -> MediaWikiClient:
    """
    Create a client for the API at `<scheme>://<host>:<port><api_path>`.

    Parameters
    ----------
    transport : Optional[httpx.BaseTransport]
        Low-level transport override, mainly for tests.
    """
    uri = build_uri(scheme, host, port, api_path)
    logger.debug("Creating MediaWiki client for %s", uri)
    return MediaWikiClient(WikiData(api_uri=uri), _configuration, transport)


def new_wikimedia_instance(
    host: str,
    transport: Optional[httpx.BaseTransport] = None,
) -> MediaWikiClient:
    """Create a client for a Wikimedia-hosted wiki, e.g. `commons.wikimedia.org`."""
    return new_instance(HTTPS_SCHEME, host, HTTPS_PORT, WIKIMEDIA_API_PATH, transport)


def new_wikipedia_instance(
    language: str,
    transport: Optional[httpx.BaseTransport] = None,
) -> MediaWikiClient:
    """Create a client for the Wikipedia in `language`, e.g. `"de"`."""
    if not language:
        raise ValueError("Language code must be non-empty.")
    return new_wikimedia_instance(WIKIPEDIA_HOST % language, transport)
