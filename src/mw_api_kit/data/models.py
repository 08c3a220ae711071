"""
Data Models

This module defines the immutable value types returned by the MediaWiki
client and the closed vocabularies it accepts as arguments.

- `WikiData`  : identity of a MediaWiki installation (its API URI)
- `UserData`  : a registered user as reported by `list=users`
- `PageData`  : a page as reported by `prop=info`
- `Namespace` : standard content namespaces
- `TokenType` : action token types understood by `action=tokens`
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum, IntEnum
from functools import total_ordering

from pydantic import BaseModel, ConfigDict, Field

from ..wiki import constants


# ---------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------

class Namespace(IntEnum):
    """
    Standard MediaWiki content namespaces.

    `str()` yields the numeric id so members can be joined directly into
    multi-value API parameters.
    """

    ARTICLE = 0
    ARTICLE_TALK = 1
    USER = 2
    USER_TALK = 3
    PROJECT = 4
    PROJECT_TALK = 5
    FILE = 6
    FILE_TALK = 7
    MEDIAWIKI = 8
    MEDIAWIKI_TALK = 9
    TEMPLATE = 10
    TEMPLATE_TALK = 11
    HELP = 12
    HELP_TALK = 13
    CATEGORY = 14
    CATEGORY_TALK = 15

    def __str__(self) -> str:
        return str(self.value)


class TokenType(str, Enum):
    """Token types accepted by `action=tokens`."""

    BLOCK = constants.TOKEN_BLOCK
    CENTRAL_AUTH = constants.TOKEN_CENTRAL_AUTH
    DELETE = constants.TOKEN_DELETE
    DELETE_GLOBAL_ACCOUNT = constants.TOKEN_DELETE_GLOBAL_ACCOUNT
    EDIT = constants.TOKEN_EDIT
    EMAIL = constants.TOKEN_EMAIL
    IMPORT = constants.TOKEN_IMPORT
    MOVE = constants.TOKEN_MOVE
    OPTIONS = constants.TOKEN_OPTIONS
    PATROL = constants.TOKEN_PATROL
    PROTECT = constants.TOKEN_PROTECT
    SET_GLOBAL_ACCOUNT_STATUS = constants.TOKEN_SET_GLOBAL_ACCOUNT_STATUS
    UNBLOCK = constants.TOKEN_UNBLOCK
    WATCH = constants.TOKEN_WATCH

    def __str__(self) -> str:
        return self.value


# ---------------------------------------------------------------------
# Value Types
# ---------------------------------------------------------------------

@total_ordering
class WikiData(BaseModel):
    """
    Identity of a MediaWiki installation.
    """

    api_uri: str = Field(
        ...,
        min_length=1,
        description="Absolute URI of the installation's api.php endpoint.",
    )

    model_config = ConfigDict(frozen=True, extra="forbid")

    def __lt__(self, other: WikiData) -> bool:
        return self.api_uri < other.api_uri

    def __str__(self) -> str:
        return self.api_uri


@total_ordering
class UserData(BaseModel):
    """
    A registered MediaWiki user.

    Instances are built from a parsed `list=users` entry and never mutated.
    Ordering follows the numeric user id.
    """

    name: str = Field(
        ...,
        min_length=1,
        description="Canonical user name.",
    )

    user_id: int = Field(
        ...,
        ge=0,
        description="Numeric user id.",
    )

    registration: datetime = Field(
        ...,
        description="Registration timestamp (UTC).",
    )

    model_config = ConfigDict(frozen=True, extra="forbid")

    def __lt__(self, other: UserData) -> bool:
        return self.user_id < other.user_id

    def __str__(self) -> str:
        return (
            f"User[name='{self.name}',id={self.user_id},"
            f"registration={self.registration.isoformat()}]"
        )


@total_ordering
class PageData(BaseModel):
    """
    A MediaWiki page. Ordering follows the page id.
    """

    namespace: int = Field(..., ge=0)
    page_id: int = Field(..., ge=0)
    title: str = Field(..., min_length=1)

    model_config = ConfigDict(frozen=True, extra="forbid")

    def __lt__(self, other: PageData) -> bool:
        return self.page_id < other.page_id

    def __str__(self) -> str:
        return f"Page[title='{self.title}',id={self.page_id},namespace={self.namespace}]"
