"""
MediaWiki Client Helpers

URI construction, API timestamp handling, multi-value parameter joining and
response shape checks shared by the transport and the API client.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, Mapping, Optional, Sequence

import httpx
from dateutil import parser as dparser

from ..core.errors import MediaWikiError, MediaWikiResponseError
from . import constants

logger = logging.getLogger("mwapi.utils")

API_TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


# ---------------------------------------------------------------------
# URIs & Parameters
# ---------------------------------------------------------------------

def build_uri(scheme: str, host: str, port: int, path: str) -> str:
    """
    Assemble `<scheme>://<host>:<port><path>`.

    Raises
    ------
    ValueError
        If scheme or host is empty or the port is negative.

    MediaWikiError
        If the assembled URI is not a valid URL.
    """
    if not scheme:
        raise ValueError("Scheme must be non-empty.")
    if not host:
        raise ValueError("Host must be non-empty.")
    if port < 0:
        raise ValueError(f"Port must be non-negative; got {port}")

    if not path.startswith("/"):
        path = "/" + path

    uri = f"{scheme}://{host}:{port}{path}"
    try:
        httpx.URL(uri)
    except httpx.InvalidURL as exc:
        raise MediaWikiError(f"Invalid API URI: {uri}") from exc
    return uri


def check_params(params: Mapping[str, str]) -> Dict[str, str]:
    """
    Return a plain copy of `params`, refusing `None` keys and values.
    """
    checked: Dict[str, str] = {}
    for key, value in params.items():
        if key is None:
            raise ValueError("Request parameter names may not be None.")
        if value is None:
            raise ValueError(f"Request parameter '{key}' may not be None.")
        checked[key] = value
    return checked


def join_values(values: Iterable[Any]) -> str:
    """Join multi-value parameter values with the API separator."""
    return constants.SEPARATOR.join(str(v) for v in values)


# ---------------------------------------------------------------------
# Timestamps
# ---------------------------------------------------------------------

def _utc(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def format_api_date(dt: datetime) -> str:
    """Format `dt` as an API timestamp, e.g. `2006-01-01T00:00:00Z`."""
    return _utc(dt).strftime(API_TIMESTAMP_FORMAT)


def parse_api_timestamp(ts: str) -> datetime:
    """
    Parse an API timestamp into an aware UTC datetime.

    Raises
    ------
    MediaWikiResponseError
        If `ts` is not an ISO 8601 timestamp.
    """
    try:
        parsed = dparser.isoparse(ts)
    except (TypeError, ValueError) as exc:
        raise MediaWikiResponseError(f"Invalid timestamp: {ts!r}") from exc
    return _utc(parsed)


# ---------------------------------------------------------------------
# Response Shape Checks
# ---------------------------------------------------------------------

def require_json_fields(obj: Mapping[str, Any], *fields: str) -> None:
    for field in fields:
        if field not in obj:
            raise MediaWikiResponseError(f"Field missing: {field}")


def require_json_length(array: Sequence[Any], required_length: int) -> None:
    if len(array) < required_length:
        raise MediaWikiResponseError(
            f"Expected at least {required_length} entries; got {len(array)}"
        )


def require_type(value: Any, expected: type, field: str) -> Any:
    """Return `value` if it is an instance of `expected`, else fail."""
    if not isinstance(value, expected):
        raise MediaWikiResponseError(
            f"Field {field} has unexpected type {type(value).__name__}"
        )
    return value


# ---------------------------------------------------------------------
# Resources
# ---------------------------------------------------------------------

def close_quietly(resource: Optional[Any]) -> None:
    """
    Close `resource`, ignoring any exception raised while closing.
    """
    if resource is None:
        return
    try:
        resource.close()
    except Exception as exc:
        logger.debug("Ignoring error while closing %r: %s", resource, exc)
