import httpx
import pytest

from mw_api_kit.core.errors import (
    MediaWikiAPIError,
    MediaWikiResponseError,
    NoSuchUserError,
    WrongPasswordError,
)


def test_login_success_single_request(client, fake_wiki):
    fake_wiki.reply({"login": {"result": "Success", "lgusername": "Bot"}})

    client.login("Bot", "secret")

    assert len(fake_wiki.requests) == 1
    assert fake_wiki.params() == {
        "action": "login",
        "format": "json",
        "lgname": "Bot",
        "lgpassword": "secret",
    }


def test_login_need_token_triggers_one_follow_up(client, fake_wiki):
    fake_wiki.reply(
        {"login": {"result": "NeedToken", "token": "b5780b6e2f27e20b450921d9461010b4"}},
        {"login": {"result": "Success"}},
    )

    client.login("Bot", "secret")

    assert len(fake_wiki.requests) == 2
    assert "lgtoken" not in fake_wiki.params(0)
    assert fake_wiki.params(1)["lgtoken"] == "b5780b6e2f27e20b450921d9461010b4"


def test_login_need_token_twice_is_an_error(client, fake_wiki):
    fake_wiki.reply(
        {"login": {"result": "NeedToken", "token": "t1"}},
        {"login": {"result": "NeedToken", "token": "t2"}},
    )

    with pytest.raises(MediaWikiAPIError) as excinfo:
        client.login("Bot", "secret")

    assert excinfo.value.code == "NeedToken"
    assert len(fake_wiki.requests) == 2


def test_login_with_explicit_token(client, fake_wiki):
    fake_wiki.reply({"login": {"result": "Success"}})

    client.login("Bot", "secret", "tok")

    assert fake_wiki.params()["lgtoken"] == "tok"


def test_login_not_exists(client, fake_wiki):
    fake_wiki.reply({"login": {"result": "NotExists"}})

    with pytest.raises(NoSuchUserError) as excinfo:
        client.login("Ghost", "secret")
    assert excinfo.value.user_name == "Ghost"


def test_login_wrong_pass_after_token(client, fake_wiki):
    fake_wiki.reply(
        {"login": {"result": "NeedToken", "token": "t"}},
        {"login": {"result": "WrongPass"}},
    )

    with pytest.raises(WrongPasswordError):
        client.login("Bot", "wrong")


def test_login_other_result(client, fake_wiki):
    fake_wiki.reply({"login": {"result": "Throttled"}})

    with pytest.raises(MediaWikiAPIError) as excinfo:
        client.login("Bot", "secret")
    assert excinfo.value.code == "Throttled"


def test_login_need_token_without_token_field(client, fake_wiki):
    fake_wiki.reply({"login": {"result": "NeedToken"}})

    with pytest.raises(MediaWikiResponseError):
        client.login("Bot", "secret")
    assert len(fake_wiki.requests) == 1


@pytest.mark.parametrize(
    "user, password, token",
    [("", "secret", None), ("Bot", "", None), ("Bot", "secret", "")],
)
def test_login_rejects_empty_arguments(client, fake_wiki, user, password, token):
    with pytest.raises(ValueError):
        client.login(user, password, token)
    assert fake_wiki.requests == []


def test_login_keeps_session_cookies(client, fake_wiki):
    fake_wiki.reply(
        httpx.Response(
            200,
            json={"login": {"result": "NeedToken", "token": "t"}},
            headers={"Set-Cookie": "testwiki_session=abc; path=/"},
        ),
        {"login": {"result": "Success"}},
    )

    client.login("Bot", "secret")

    assert "testwiki_session=abc" in fake_wiki.requests[1].headers.get("Cookie", "")


def test_logout(client, fake_wiki):
    fake_wiki.reply({})

    client.logout()

    assert fake_wiki.params() == {"action": "logout", "format": "json"}
