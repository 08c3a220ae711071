import json
from typing import Any, Dict, List, Union
from urllib.parse import parse_qsl

import httpx
import pytest

from mw_api_kit.config import ClientConfiguration
from mw_api_kit.data.models import WikiData
from mw_api_kit.wiki.api_client import MediaWikiClient

API_URI = "https://test.wikipedia.org:443/w/api.php"
TEST_USER_AGENT = "mw_api_kit.test"


class FakeWiki:
    """
    Scripted stand-in for api.php.

    Each queued reply is either a dict (sent as JSON with status 200), an
    `httpx.Response`, or an exception instance to raise. Every request is
    recorded so tests can inspect the form body and headers.
    """

    def __init__(self) -> None:
        self.replies: List[Union[Dict[str, Any], httpx.Response, Exception]] = []
        self.requests: List[httpx.Request] = []

    def reply(self, *replies) -> "FakeWiki":
        self.replies.extend(replies)
        return self

    def params(self, index: int = -1) -> Dict[str, str]:
        body = self.requests[index].content.decode()
        return dict(parse_qsl(body, keep_blank_values=True))

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self.replies:
            raise AssertionError("Unexpected request: no reply queued")
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        if isinstance(reply, httpx.Response):
            return reply
        return httpx.Response(200, text=json.dumps(reply))


@pytest.fixture
def fake_wiki():
    return FakeWiki()


@pytest.fixture
def configuration():
    return ClientConfiguration(user_agent=TEST_USER_AGENT)


@pytest.fixture
def client(fake_wiki, configuration):
    mw = MediaWikiClient(
        WikiData(api_uri=API_URI),
        configuration,
        transport=httpx.MockTransport(fake_wiki),
    )
    yield mw
    mw.close()
