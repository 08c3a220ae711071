from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from mw_api_kit.data.models import Namespace, PageData, TokenType, UserData, WikiData

REGISTRATION = datetime(2007, 1, 15, 15, 7, 16, tzinfo=timezone.utc)


def test_user_data_fields():
    user = UserData(name="Ireas", user_id=336793, registration=REGISTRATION)
    assert user.name == "Ireas"
    assert user.user_id == 336793
    assert user.registration == REGISTRATION
    assert str(user).startswith("User[name='Ireas',id=336793,")


def test_user_data_rejects_negative_id():
    with pytest.raises(ValidationError):
        UserData(name="Ireas", user_id=-1, registration=REGISTRATION)


def test_user_data_is_immutable():
    user = UserData(name="Ireas", user_id=1, registration=REGISTRATION)
    with pytest.raises(ValidationError):
        user.user_id = 2


def test_user_data_ordering_by_id():
    a = UserData(name="B", user_id=1, registration=REGISTRATION)
    b = UserData(name="A", user_id=2, registration=REGISTRATION)
    assert sorted([b, a]) == [a, b]


def test_page_data():
    page = PageData(namespace=0, page_id=42, title="Main Page")
    assert str(page) == "Page[title='Main Page',id=42,namespace=0]"
    with pytest.raises(ValidationError):
        PageData(namespace=-2, page_id=42, title="Main Page")


def test_wiki_data_ordering_and_str():
    de = WikiData(api_uri="https://de.wikipedia.org:443/w/api.php")
    en = WikiData(api_uri="https://en.wikipedia.org:443/w/api.php")
    assert de < en
    assert str(de) == de.api_uri
    assert de == WikiData(api_uri=de.api_uri)


def test_namespace_ids_non_negative():
    assert all(ns.value >= 0 for ns in Namespace)
    assert str(Namespace.HELP_TALK) == "13"


def test_token_type_values():
    assert all(t.value for t in TokenType)
    assert TokenType("edit") is TokenType.EDIT
    assert TokenType.SET_GLOBAL_ACCOUNT_STATUS.value == "setglobalaccountstatus"
