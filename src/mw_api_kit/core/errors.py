"""
Error Taxonomy

This module defines every exception raised by the MediaWiki client.

Design Goals
------------
- One hierarchy rooted at `MediaWikiError`
- Each exception carries an `ErrorKind` tag plus the payload for that kind
- Transport failures, HTTP failures, malformed responses and API-level
  errors are distinguishable by class and by tag
- Argument precondition violations are plain `ValueError`s and never
  appear in this hierarchy
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


MINIMUM_STATUS_CODE = 100
MAXIMUM_STATUS_CODE = 999


class ErrorKind(str, Enum):
    """Tag identifying which failure category an exception belongs to."""

    GENERIC = "generic"
    REQUEST = "request"
    HTTP = "http"
    RESPONSE = "response"
    API = "api"
    NO_SUCH_USER = "no_such_user"
    NO_SUCH_PAGE = "no_such_page"
    WRONG_PASSWORD = "wrong_password"


# ---------------------------------------------------------------------
# Base
# ---------------------------------------------------------------------

class MediaWikiError(RuntimeError):
    """Base exception for all MediaWiki client failures."""

    kind: ErrorKind = ErrorKind.GENERIC


# ---------------------------------------------------------------------
# Transport & Response Errors
# ---------------------------------------------------------------------

class MediaWikiRequestError(MediaWikiError):
    """
    Raised when the HTTP exchange itself fails (connection refused, DNS
    failure, timeout, ...). The underlying `httpx` error is chained as
    `__cause__`.
    """

    kind = ErrorKind.REQUEST


class MediaWikiHTTPError(MediaWikiError):
    """
    Raised when the API answers with a status other than 200.

    Parameters
    ----------
    status_code : int
        HTTP status code, must lie in [100, 999].

    reason : str
        Reason phrase sent by the server.

    Raises
    ------
    ValueError
        If the status code is out of range.
    """

    kind = ErrorKind.HTTP

    def __init__(self, status_code: int, reason: str) -> None:
        if not MINIMUM_STATUS_CODE <= status_code <= MAXIMUM_STATUS_CODE:
            raise ValueError(
                f"HTTP status code must lie in [{MINIMUM_STATUS_CODE}, "
                f"{MAXIMUM_STATUS_CODE}]; got {status_code}"
            )
        super().__init__(reason or f"HTTP {status_code}")
        self.status_code = status_code
        self.reason = reason


class MediaWikiResponseError(MediaWikiError):
    """
    Raised when a response lacks an expected field or array entry, or is
    not a JSON object at all. Usually means the library and the wiki speak
    different API versions; callers cannot recover from it.
    """

    kind = ErrorKind.RESPONSE


# ---------------------------------------------------------------------
# API-Level Errors
# ---------------------------------------------------------------------

class MediaWikiAPIError(MediaWikiError):
    """
    Raised when the wiki reports a structured error (`error.code`) or an
    unexpected login result. `code` is carried verbatim.
    """

    kind = ErrorKind.API

    def __init__(self, code: str, info: Optional[str] = None) -> None:
        super().__init__(f"{code}: {info}" if info else code)
        self.code = code
        self.info = info


class NoSuchUserError(MediaWikiError):
    """Raised when the queried user does not exist."""

    kind = ErrorKind.NO_SUCH_USER

    def __init__(self, user_name: str) -> None:
        super().__init__(f"No such user: {user_name}")
        self.user_name = user_name


class NoSuchPageError(MediaWikiError):
    """Raised when the queried page does not exist."""

    kind = ErrorKind.NO_SUCH_PAGE

    def __init__(self, title: str) -> None:
        super().__init__(f"No such page: {title}")
        self.title = title


class WrongPasswordError(MediaWikiError):
    """Raised when the wiki rejects the password during login."""

    kind = ErrorKind.WRONG_PASSWORD

    def __init__(self) -> None:
        super().__init__("Wrong password")
