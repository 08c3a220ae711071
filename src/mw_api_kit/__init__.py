"""
mw_api_kit

Synchronous client for the MediaWiki web API: login, user lookup,
contribution counts, first edits, page lookup, action tokens and generic
request passthrough.
"""

from .config import ClientConfiguration, Settings, settings
from .core.errors import (
    ErrorKind,
    MediaWikiAPIError,
    MediaWikiError,
    MediaWikiHTTPError,
    MediaWikiRequestError,
    MediaWikiResponseError,
    NoSuchPageError,
    NoSuchUserError,
    WrongPasswordError,
)
from .data.models import Namespace, PageData, TokenType, UserData, WikiData
from .factory import (
    get_configuration,
    new_instance,
    new_wikimedia_instance,
    new_wikipedia_instance,
    set_configuration,
)
from .wiki.api_client import MediaWikiClient

__all__ = [
    "ClientConfiguration",
    "Settings",
    "settings",
    "ErrorKind",
    "MediaWikiAPIError",
    "MediaWikiError",
    "MediaWikiHTTPError",
    "MediaWikiRequestError",
    "MediaWikiResponseError",
    "NoSuchPageError",
    "NoSuchUserError",
    "WrongPasswordError",
    "Namespace",
    "PageData",
    "TokenType",
    "UserData",
    "WikiData",
    "get_configuration",
    "new_instance",
    "new_wikimedia_instance",
    "new_wikipedia_instance",
    "set_configuration",
    "MediaWikiClient",
]
