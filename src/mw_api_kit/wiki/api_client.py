import json
import logging
from datetime import datetime, timedelta
from typing import Any, Dict, Iterable, Mapping, Optional, Union

import httpx
from dateutil.relativedelta import relativedelta
from pydantic import ValidationError

from ..config import ClientConfiguration
from ..core.errors import (
    MediaWikiAPIError,
    MediaWikiResponseError,
    NoSuchPageError,
    NoSuchUserError,
    WrongPasswordError,
)
from ..data.models import Namespace, PageData, TokenType, UserData, WikiData
from . import constants
from .transport import HttpTransport
from .utils import (
    format_api_date,
    join_values,
    parse_api_timestamp,
    require_json_fields,
    require_json_length,
    require_type,
)

logger = logging.getLogger("mwapi.client")

Period = Union[timedelta, relativedelta]


class MediaWikiClient:
    """
    Client for one MediaWiki installation.

    Prefer the constructors in `mw_api_kit.factory` over building this
    class directly. Close the client (or use it as a context manager) to
    release the HTTP handle.
    """

    def __init__(
        self,
        wiki_data: WikiData,
        configuration: ClientConfiguration,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self._wiki_data = wiki_data
        self._configuration = configuration
        self._http = HttpTransport(wiki_data.api_uri, configuration, transport)

    @property
    def wiki_data(self) -> WikiData:
        return self._wiki_data

    @property
    def configuration(self) -> ClientConfiguration:
        return self._configuration

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "MediaWikiClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Generic requests
    # ------------------------------------------------------------------

    def perform_request(self, params: Mapping[str, str]) -> str:
        """Send `params` unchanged and return the raw response body."""
        return self._http.post(params)

    def perform_json_request(self, action: str, params: Mapping[str, str]) -> Dict[str, Any]:
        """
        Run `action` with `params` and return the payload under the action key.

        `format` and `action` are always overridden. A top-level `error`
        object in the response becomes a `MediaWikiAPIError`; a missing
        payload yields an empty dict.
        """
        if not action:
            raise ValueError("Action may not be empty.")

        action = action.lower()
        request_params = dict(params)
        request_params[constants.FORMAT] = constants.FORMAT_JSON
        request_params[constants.ACTION] = action

        body = self._http.post(request_params)
        try:
            root = json.loads(body)
        except ValueError as exc:
            raise MediaWikiResponseError(f"Response for action '{action}' is not JSON.") from exc
        require_type(root, dict, "<root>")

        if constants.RESULT_ERROR in root:
            error = require_type(root[constants.RESULT_ERROR], dict, constants.RESULT_ERROR)
            require_json_fields(error, constants.RESULT_ERROR_CODE)
            code = str(error[constants.RESULT_ERROR_CODE])
            info = error.get(constants.RESULT_ERROR_INFO)
            logger.warning("MediaWiki API error for action '%s': %s", action, code)
            raise MediaWikiAPIError(code, info)

        payload = root.get(action, {})
        return require_type(payload, dict, action)

    # ------------------------------------------------------------------
    # Users & contributions
    # ------------------------------------------------------------------

    def get_user_data(self, user: str) -> UserData:
        if not user:
            raise ValueError("User name may not be empty.")

        params = {
            constants.LIST: constants.LIST_USERS,
            constants.US_PROP: constants.US_PROP_REGISTRATION,
            constants.US_USERS: user,
        }
        result = self.perform_json_request(constants.ACTION_QUERY, params)
        require_json_fields(result, constants.RESULT_USERS)
        users = require_type(result[constants.RESULT_USERS], list, constants.RESULT_USERS)
        require_json_length(users, 1)

        entry = require_type(users[0], dict, constants.RESULT_USERS)
        if constants.RESULT_US_MISSING in entry:
            raise NoSuchUserError(user)

        require_json_fields(
            entry,
            constants.RESULT_US_NAME,
            constants.RESULT_US_ID,
            constants.RESULT_US_REGISTRATION,
        )
        registration = parse_api_timestamp(entry[constants.RESULT_US_REGISTRATION])
        try:
            return UserData(
                name=entry[constants.RESULT_US_NAME],
                user_id=entry[constants.RESULT_US_ID],
                registration=registration,
            )
        except ValidationError as exc:
            raise MediaWikiResponseError(f"Invalid user entry for '{user}'") from exc

    def get_contrib_count(
        self,
        user: str,
        limit: int,
        namespaces: Optional[Iterable[Namespace]] = None,
        end_date: Optional[datetime] = None,
        period: Optional[Period] = None,
    ) -> int:
        """
        Count the contributions of `user`, at most `limit`.

        With `end_date` only contributions up to that instant count; with
        `period` as well, only those in `[end_date - period, end_date]`.
        """
        if not user:
            raise ValueError("User name may not be empty.")
        if limit <= 0:
            raise ValueError(f"Limit must be positive; got {limit}")
        if period is not None and end_date is None:
            raise ValueError("A period requires an end date.")

        params = self._contrib_count_params(user, limit, namespaces, end_date, period)
        result = self.perform_json_request(constants.ACTION_QUERY, params)
        require_json_fields(result, constants.RESULT_USERCONTRIBS)
        contributions = require_type(
            result[constants.RESULT_USERCONTRIBS], list, constants.RESULT_USERCONTRIBS
        )
        return len(contributions)

    @staticmethod
    def _contrib_count_params(
        user: str,
        limit: int,
        namespaces: Optional[Iterable[Namespace]],
        end_date: Optional[datetime],
        period: Optional[Period],
    ) -> Dict[str, str]:
        params = {
            constants.LIST: constants.LIST_USERCONTRIBS,
            constants.UC_LIMIT: str(limit),
            constants.UC_USER: user,
            constants.UC_PROP: "",
            constants.UC_DIR: constants.UC_DIR_NEWER,
        }

        namespace_ids = sorted({int(ns) for ns in namespaces or ()})
        if namespace_ids:
            params[constants.UC_NAMESPACE] = join_values(namespace_ids)

        if end_date is not None:
            params[constants.UC_END] = format_api_date(end_date)
            if period is not None:
                params[constants.UC_START] = format_api_date(end_date - period)

        return params

    def get_first_edit(self, user: str) -> Optional[datetime]:
        """Timestamp of the earliest contribution of `user`, or None."""
        if not user:
            raise ValueError("User name may not be empty.")

        params = {
            constants.LIST: constants.LIST_USERCONTRIBS,
            constants.UC_DIR: constants.UC_DIR_NEWER,
            constants.UC_LIMIT: "1",
            constants.UC_USER: user,
        }
        result = self.perform_json_request(constants.ACTION_QUERY, params)
        require_json_fields(result, constants.RESULT_USERCONTRIBS)
        contributions = require_type(
            result[constants.RESULT_USERCONTRIBS], list, constants.RESULT_USERCONTRIBS
        )
        if not contributions:
            return None

        first = require_type(contributions[0], dict, constants.RESULT_USERCONTRIBS)
        require_json_fields(first, constants.RESULT_UC_TIMESTAMP)
        return parse_api_timestamp(first[constants.RESULT_UC_TIMESTAMP])

    # ------------------------------------------------------------------
    # Pages
    # ------------------------------------------------------------------

    def get_page_data(self, title: str) -> PageData:
        if not title:
            raise ValueError("Page title may not be empty.")

        params = {
            constants.PROP: constants.PROP_INFO,
            constants.TITLES: title,
        }
        result = self.perform_json_request(constants.ACTION_QUERY, params)
        require_json_fields(result, constants.RESULT_PAGES)
        pages = result[constants.RESULT_PAGES]
        # formatversion=1 keys pages by id, formatversion=2 returns a list
        if isinstance(pages, dict):
            pages = list(pages.values())
        pages = require_type(pages, list, constants.RESULT_PAGES)
        require_json_length(pages, 1)

        page = require_type(pages[0], dict, constants.RESULT_PAGES)
        if constants.RESULT_PAGE_MISSING in page:
            raise NoSuchPageError(title)

        require_json_fields(
            page,
            constants.RESULT_PAGE_NS,
            constants.RESULT_PAGE_ID,
            constants.RESULT_PAGE_TITLE,
        )
        try:
            return PageData(
                namespace=page[constants.RESULT_PAGE_NS],
                page_id=page[constants.RESULT_PAGE_ID],
                title=page[constants.RESULT_PAGE_TITLE],
            )
        except ValidationError as exc:
            raise MediaWikiResponseError(f"Invalid page entry for '{title}'") from exc

    # ------------------------------------------------------------------
    # Tokens & sessions
    # ------------------------------------------------------------------

    def get_token(self, token_type: TokenType) -> str:
        token_type = TokenType(token_type)
        params = {constants.TOKENS_TYPE: token_type.value}
        result = self.perform_json_request(constants.ACTION_TOKENS, params)
        key = constants.RESULT_TOKENS % token_type.value
        require_json_fields(result, key)
        return result[key]

    def login(self, user: str, password: str, token: Optional[str] = None) -> None:
        """
        Log in as `user`.

        Without `token`, a `NeedToken` answer triggers exactly one
        follow-up request carrying the token the wiki handed out.

        Raises
        ------
        NoSuchUserError
            If the wiki reports `NotExists`.

        WrongPasswordError
            If the wiki reports `WrongPass`.

        MediaWikiAPIError
            For any other non-`Success` result.
        """
        if not user:
            raise ValueError("User name may not be empty.")
        if not password:
            raise ValueError("Password may not be empty.")
        if token is not None and not token:
            raise ValueError("Login token may not be empty.")

        params = {
            constants.LG_NAME: user,
            constants.LG_PASSWORD: password,
        }
        if token is not None:
            params[constants.LG_TOKEN] = token

        result = self.perform_json_request(constants.ACTION_LOGIN, params)
        require_json_fields(result, constants.RESULT_LG_RESULT)
        login_result = result[constants.RESULT_LG_RESULT]

        if token is None and login_result == constants.RESULT_LG_NEED_TOKEN:
            require_json_fields(result, constants.RESULT_LG_TOKEN)
            logger.debug("Login for '%s' needs a token; retrying with it", user)
            self.login(user, password, result[constants.RESULT_LG_TOKEN])
            return

        self._handle_login_result(login_result, user)
        logger.info("Logged in to %s as '%s'", self._wiki_data.api_uri, user)

    @staticmethod
    def _handle_login_result(login_result: str, user: str) -> None:
        if login_result == constants.RESULT_LG_NOT_EXISTS:
            raise NoSuchUserError(user)
        if login_result == constants.RESULT_LG_WRONG_PASS:
            raise WrongPasswordError()
        if login_result != constants.RESULT_LG_SUCCESS:
            raise MediaWikiAPIError(str(login_result))

    def logout(self) -> None:
        self.perform_json_request(constants.ACTION_LOGOUT, {})
